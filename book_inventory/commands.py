import re
from enum import Enum
from typing import Optional

from .errors import InputParseError

U32_MAX = 2**32 - 1
I32_MIN = -(2**31)
I32_MAX = 2**31 - 1

_UNSIGNED_RE = re.compile(r"\+?[0-9]+")
_SIGNED_RE = re.compile(r"[+-]?[0-9]+")


class Command(Enum):
    """A menu selection."""

    ADD_BOOK = 1
    SHOW_INVENTORY = 2
    EDIT_BOOK = 3
    REMOVE_BOOK = 4
    EXIT = 5
    INVALID = 0


def _parse_unsigned(raw: str) -> Optional[int]:
    text = raw.strip()
    if not _UNSIGNED_RE.fullmatch(text):
        return None
    value = int(text)
    if value > U32_MAX:
        return None
    return value


def parse_command(raw: str) -> Command:
    """Map a raw menu line to a Command. Never raises; bad input is INVALID."""
    value = _parse_unsigned(raw)
    if value is None or value == Command.INVALID.value:
        return Command.INVALID
    try:
        return Command(value)
    except ValueError:
        return Command.INVALID


def parse_year(raw: str) -> int:
    """Parse a publication year as an unsigned 32-bit integer."""
    value = _parse_unsigned(raw)
    if value is None:
        raise InputParseError(f"Please enter a valid number for the year (got {raw.strip()!r})")
    return value


def parse_id(raw: str) -> int:
    """Parse a book id as a signed 32-bit integer."""
    text = raw.strip()
    if not _SIGNED_RE.fullmatch(text) or not I32_MIN <= int(text) <= I32_MAX:
        raise InputParseError(f"Please enter a valid number for ID (got {text!r})")
    return int(text)
