import pytest

from book_inventory.database import InventoryDatabase


@pytest.fixture
def inventory(tmp_path, request):
    # Unique database file per test
    db_file = str(tmp_path / f"test_{request.node.name}.db")
    db = InventoryDatabase.initialize(db_file)
    yield db
    db.close()


@pytest.fixture
def db_env(tmp_path, monkeypatch):
    """Point the CLI at a per-test database file and return its path."""
    db_file = str(tmp_path / "books_inventory.db")
    monkeypatch.setenv("BOOK_INVENTORY_DB", db_file)
    monkeypatch.delenv("BOOK_INVENTORY_OUTPUT", raising=False)
    monkeypatch.delenv("BOOK_INVENTORY_LOG_LEVEL", raising=False)
    return db_file
