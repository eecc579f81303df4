import json
from typing import List

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .book import Book

MENU_ITEMS = [
    ("1", "Add a new book"),
    ("2", "Show book inventory"),
    ("3", "Edit book information"),
    ("4", "Remove a book from inventory"),
    ("5", "Exit the program"),
]


def print_plain(console: Console, text: str) -> None:
    """Print text verbatim: no markup, no highlighting, no wrapping."""
    console.print(text, markup=False, highlight=False, soft_wrap=True)


def render_menu(console: Console) -> None:
    console.print("[bold cyan]Book Inventory CLI:[/]")
    for key, label in MENU_ITEMS:
        print_plain(console, f"{key}. {label}")


def print_list_result(console: Console, books: List[Book], mode: str = "plain") -> None:
    """Print the inventory according to the output mode.
    - plain: one 'ID: .., Title: .., Author: .., Year: .., Genre: ..' line per book, nothing when empty
    - json: JSON array of book objects
    - rich: Rich table
    """
    if mode == "json":
        payload = [book.to_dict() for book in books]
        print_plain(console, json.dumps(payload, ensure_ascii=False))
    elif mode == "rich":
        if not books:
            console.print("[dim]No books in inventory.[/]")
            return
        table = Table(title="📚 Inventory", show_lines=True, header_style="bold cyan")
        table.add_column("ID", style="magenta", no_wrap=True)
        table.add_column("Title", style="white")
        table.add_column("Author", style="white")
        table.add_column("Year", justify="right")
        table.add_column("Genre", style="white")
        for book in books:
            table.add_row(
                str(book.id), escape(book.title), escape(book.author), str(book.year), escape(book.genre)
            )
        console.print(table)
    else:
        for book in books:
            print_plain(console, str(book))
