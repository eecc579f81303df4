import sqlite3

import pytest

from book_inventory.database import InventoryDatabase
from book_inventory.errors import StorageError


def test_list_empty(inventory):
    assert inventory.list() == []


def test_add_and_list(inventory):
    book_id = inventory.add("Dune", "Frank Herbert", 1965, "SciFi")

    books = inventory.list()
    assert len(books) == 1
    assert books[0].to_dict() == {
        "id": book_id,
        "title": "Dune",
        "author": "Frank Herbert",
        "year": 1965,
        "genre": "SciFi",
    }


def test_first_id_is_one(inventory):
    assert inventory.add("Dune", "Frank Herbert", 1965, "SciFi") == 1


def test_add_two_books(inventory):
    inventory.add("Rust in Action", "Tim McNamara", 2020, "Technical")
    inventory.add("Programming Rust", "Jim Blandy and Jason Orendorff", 2017, "Technical")

    titles = [book.title for book in inventory.list()]
    assert len(titles) == 2
    assert set(titles) == {"Rust in Action", "Programming Rust"}


def test_ids_are_unique(inventory):
    first = inventory.add("Same Title", "Same Author", 2000, "Drama")
    second = inventory.add("Same Title", "Same Author", 2000, "Drama")
    assert first != second
    assert len(inventory.list()) == 2


def test_update_book(inventory):
    book_id = inventory.add("The Rust Book", "Unknown", 2021, "Education")

    inventory.update(book_id, "The Rust Programming Language", "Steve Klabnik and Carol Nichols", 2018, "Programming")

    book = inventory.find(book_id)
    assert book.title == "The Rust Programming Language"
    assert book.author == "Steve Klabnik and Carol Nichols"
    assert book.year == 2018
    assert book.genre == "Programming"


def test_remove_book(inventory):
    book_id = inventory.add("Rust for Beginners", "Anonymous", 2020, "Learning")

    inventory.remove(book_id)

    assert inventory.find(book_id) is None
    assert inventory.list() == []


def test_update_missing_id_is_silent(inventory):
    book_id = inventory.add("Dune", "Frank Herbert", 1965, "SciFi")

    inventory.update(book_id + 100, "Other", "Someone", 1999, "Drama")

    assert [b.to_dict() for b in inventory.list()] == [
        {"id": book_id, "title": "Dune", "author": "Frank Herbert", "year": 1965, "genre": "SciFi"}
    ]


def test_remove_missing_id_is_silent(inventory):
    inventory.add("Dune", "Frank Herbert", 1965, "SciFi")

    inventory.remove(999)

    assert len(inventory.list()) == 1


def test_find_missing_returns_none(inventory):
    assert inventory.find(42) is None


def test_example_walkthrough(inventory):
    assert inventory.add("Dune", "Frank Herbert", 1965, "SciFi") == 1
    assert [b.to_dict() for b in inventory.list()] == [
        {"id": 1, "title": "Dune", "author": "Frank Herbert", "year": 1965, "genre": "SciFi"}
    ]
    inventory.remove(1)
    assert inventory.list() == []


def test_persistence(tmp_path):
    db_file = str(tmp_path / "books.db")
    with InventoryDatabase.initialize(db_file) as db:
        db.add("Sapiens", "Yuval Noah Harari", 2011, "History")

    # A new connection should read the persisted data
    with InventoryDatabase.initialize(db_file) as db:
        books = db.list()
    assert len(books) == 1
    assert books[0].title == "Sapiens"


def test_initialize_creates_schema(tmp_path):
    db_file = tmp_path / "new.db"
    assert not db_file.exists()

    InventoryDatabase.initialize(str(db_file)).close()

    assert db_file.exists()
    conn = sqlite3.connect(str(db_file))
    try:
        columns = [row[1] for row in conn.execute("PRAGMA table_info(inventory)")]
    finally:
        conn.close()
    assert columns == ["id", "title", "author", "year", "genre"]


def test_initialize_inaccessible_path(tmp_path):
    with pytest.raises(StorageError):
        InventoryDatabase.initialize(str(tmp_path / "missing-dir" / "books.db"))


def test_engine_errors_become_storage_errors(inventory):
    inventory.conn.execute("DROP TABLE inventory")

    with pytest.raises(StorageError) as excinfo:
        inventory.add("Dune", "Frank Herbert", 1965, "SciFi")
    assert isinstance(excinfo.value.__cause__, sqlite3.Error)

    with pytest.raises(StorageError):
        inventory.list()


def test_not_null_violation(inventory):
    with pytest.raises(StorageError):
        inventory.add(None, "Frank Herbert", 1965, "SciFi")
