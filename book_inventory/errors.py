class InventoryError(Exception):
    """Base class for book inventory errors."""


class StorageError(InventoryError):
    """Raised when the storage engine fails (open, constraint, query)."""


class InputParseError(InventoryError):
    """Raised when an id or year typed by the user cannot be parsed."""
