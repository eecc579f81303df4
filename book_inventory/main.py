import logging

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from .config import Settings
from .database import InventoryDatabase
from .errors import InputParseError, StorageError
from .shell import InteractiveShell

APP_NAME = "Book Inventory CLI"

app = typer.Typer(help=APP_NAME, add_completion=False)


def configure_logging(level: str, console: Console) -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


@app.command()
def run() -> None:
    """Start the interactive book inventory menu."""
    settings = Settings.from_env()
    console = Console()
    err_console = Console(stderr=True)
    configure_logging(settings.log_level, err_console)

    try:
        inventory = InventoryDatabase.initialize(settings.database_file)
    except StorageError as e:
        err_console.print(f"[bold red]Storage error:[/] {escape(str(e))}")
        raise typer.Exit(code=1)

    with inventory:
        shell = InteractiveShell(inventory, console, output_mode=settings.output_mode)
        try:
            shell.run()
        except InputParseError as e:
            err_console.print(f"[bold red]Error:[/] {escape(str(e))}")
            raise typer.Exit(code=1)
        except StorageError as e:
            err_console.print(f"[bold red]Storage error:[/] {escape(str(e))}")
            raise typer.Exit(code=1)


def main() -> None:
    app(prog_name="book-inventory")


if __name__ == "__main__":
    main()
