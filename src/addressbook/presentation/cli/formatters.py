"""Rich formatting utilities for the CLI.

Keeps all Rich rendering (tables, panels) out of the command module; knows
nothing about storage.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

if TYPE_CHECKING:
    from addressbook.domain.models.person import Person

console = Console()


# ---------------------------------------------------------------------------
# Success / error panels
# ---------------------------------------------------------------------------


def success_panel(message: str, title: str = "Address Book") -> None:
    """Print a green success panel."""
    console.print(Panel(escape(message), title=title, border_style="green"))


def error_message(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]❌ {escape(message)}[/]")


# ---------------------------------------------------------------------------
# Persons table
# ---------------------------------------------------------------------------


def persons_table(persons: list[Person], title: str = "📇 Contacts", show_private: bool = False) -> None:
    """Print *persons* as an indexed table; private details are masked."""
    if not persons:
        console.print("[dim]No persons to show.[/]")
        return

    table = Table(title=title, show_lines=False)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Name", style="bold cyan")
    table.add_column("Phone")
    table.add_column("Email")
    table.add_column("Address")
    table.add_column("Tags", style="magenta")

    for index, person in enumerate(persons, start=1):
        cells = []
        for detail in (person.phone, person.email, person.address):
            if detail.is_private and not show_private:
                cells.append("[dim]<private>[/]")
            else:
                cells.append(escape(detail.value))
        table.add_row(
            str(index),
            escape(person.name.full_name),
            *cells,
            ", ".join(tag.name for tag in person.tags),
        )

    console.print(table)
