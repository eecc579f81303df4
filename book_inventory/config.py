import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()

DEFAULT_DATABASE_FILE = "books_inventory.db"
OUTPUT_MODES = ("plain", "json", "rich")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class Settings:
    # Database
    database_file: str = DEFAULT_DATABASE_FILE

    # Output: plain | json | rich
    output_mode: str = "plain"

    # Logging
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from the environment (and a local .env) at call time."""
        output_mode = os.getenv("BOOK_INVENTORY_OUTPUT", "plain").lower().strip()
        if output_mode not in OUTPUT_MODES:
            output_mode = "plain"
        log_level = os.getenv("BOOK_INVENTORY_LOG_LEVEL", "WARNING").upper().strip()
        if log_level not in LOG_LEVELS:
            log_level = "WARNING"
        return cls(
            database_file=os.getenv("BOOK_INVENTORY_DB", DEFAULT_DATABASE_FILE),
            output_mode=output_mode,
            log_level=log_level,
        )
