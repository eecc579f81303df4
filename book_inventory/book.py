from __future__ import annotations

from typing import Any, Mapping


class Book:
    """Represents a single book record in the inventory."""

    def __init__(self, id: int | None, title: str, author: str, year: int, genre: str) -> None:
        self.id = id
        self.title = title.strip()
        self.author = author.strip()
        self.year = int(year)
        self.genre = genre.strip()

    def __str__(self) -> str:
        return (
            f"ID: {self.id}, Title: {self.title}, Author: {self.author}, "
            f"Year: {self.year}, Genre: {self.genre}"
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "author": self.author,
            "year": self.year,
            "genre": self.genre,
        }

    @staticmethod
    def from_dict(data: Mapping[str, Any]) -> "Book":
        # sqlite3.Row supports key access but not .get()
        return Book(
            id=data["id"],
            title=data["title"],
            author=data["author"],
            year=data["year"],
            genre=data["genre"],
        )
