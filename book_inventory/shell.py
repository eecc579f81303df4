import logging
from typing import Callable, Dict, Tuple

from rich.console import Console

from .commands import Command, parse_command, parse_id, parse_year
from .database import InventoryDatabase
from .errors import InputParseError
from .ui_helpers import print_list_result, render_menu

logger = logging.getLogger(__name__)


class InteractiveShell:
    """Menu loop over an InventoryDatabase.

    The database handle is owned by the caller; the shell never opens or
    closes it. Malformed ids and years raise InputParseError out of ``run``.
    """

    def __init__(self, inventory: InventoryDatabase, console: Console, output_mode: str = "plain") -> None:
        self.inventory = inventory
        self.console = console
        self.output_mode = output_mode
        self._handlers: Dict[Command, Callable[[], None]] = {
            Command.ADD_BOOK: self.add_book,
            Command.SHOW_INVENTORY: self.show_inventory,
            Command.EDIT_BOOK: self.edit_book,
            Command.REMOVE_BOOK: self.remove_book,
        }

    def run(self) -> None:
        while True:
            render_menu(self.console)
            try:
                line = self.console.input("Select an option: ")
            except EOFError:
                logger.debug("Input closed at the menu prompt")
                line = str(Command.EXIT.value)

            cmd = parse_command(line)
            if cmd is Command.EXIT:
                self.console.print("Exiting the program.")
                break
            if cmd is Command.INVALID:
                self.console.print("[yellow]Invalid command, please try again.[/]")
                continue

            self._handlers[cmd]()

    # ------------------------- Handlers ------------------------- #
    def add_book(self) -> None:
        title, author, year, genre = self._read_book_fields(
            "Enter book title: ",
            "Enter author's name: ",
            "Enter year of publication: ",
            "Enter genre of the book: ",
        )
        book_id = self.inventory.add(title, author, year, genre)
        self.console.print(f"[green]Book added to inventory![/] (ID: {book_id})")

    def show_inventory(self) -> None:
        books = self.inventory.list()
        print_list_result(self.console, books, self.output_mode)

    def edit_book(self) -> None:
        book_id = parse_id(self._read_line("Enter the ID of the book to edit: "))
        title, author, year, genre = self._read_book_fields(
            "Enter new title: ",
            "Enter new author's name: ",
            "Enter new year of publication: ",
            "Enter new genre: ",
        )
        self.inventory.update(book_id, title, author, year, genre)
        self.console.print("[green]Book information updated![/]")

    def remove_book(self) -> None:
        book_id = parse_id(self._read_line("Enter the ID of the book to remove: "))
        self.inventory.remove(book_id)
        self.console.print("[green]Book removed from inventory![/]")

    # ------------------------- Input ------------------------- #
    def _read_line(self, prompt: str) -> str:
        try:
            return self.console.input(prompt).strip()
        except EOFError as e:
            raise InputParseError("Input ended before all fields were entered") from e

    def _read_book_fields(self, *prompts: str) -> Tuple[str, str, int, str]:
        title_prompt, author_prompt, year_prompt, genre_prompt = prompts
        title = self._read_line(title_prompt)
        author = self._read_line(author_prompt)
        year = parse_year(self._read_line(year_prompt))
        genre = self._read_line(genre_prompt)
        return title, author, year, genre
