"""Thin CLI wrapper — Typer commands that delegate to the contacts use case.

All storage access goes through the Container (bootstrap.py).
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated, NoReturn, Optional

import typer

from addressbook.application.error_messages import storage_error_message
from addressbook.application.use_cases.manage_contacts import ManageContactsUseCase
from addressbook.bootstrap import Container
from addressbook.domain.errors import (
    ConfigurationError,
    IllegalValueError,
    PersonNotFoundError,
    StorageOperationError,
)
from addressbook.domain.models.person import Person
from addressbook.presentation.cli.formatters import (
    console,
    error_message,
    persons_table,
    success_panel,
)

app = typer.Typer(
    name="addressbook",
    help="📇 Address book — contacts stored in a local text file",
    rich_markup_mode="rich",
    no_args_is_help=True,
)


def _use_case(ctx: typer.Context) -> ManageContactsUseCase:
    container: Container = ctx.obj
    return container.manage_contacts()


def _fail(message: str) -> NoReturn:
    error_message(message)
    raise typer.Exit(code=1)


# ---------------------------------------------------------------------------
# Global options
# ---------------------------------------------------------------------------


@app.callback()
def main(
    ctx: typer.Context,
    file: Annotated[
        Optional[str],
        typer.Option("--file", "-f", help="Storage file (must end with .txt)"),
    ] = None,
    config: Annotated[
        Optional[Path],
        typer.Option("--config", "-c", help="Path to a JSON config file"),
    ] = None,
) -> None:
    """Manage the contacts of an address book."""
    try:
        container = Container(config_path=config, storage_path=file)
    except StorageOperationError as exc:
        _fail(storage_error_message(exc))
    except (ConfigurationError, FileNotFoundError) as exc:
        _fail(str(exc))

    logging.basicConfig(level=container.config.log_level)
    ctx.obj = container


# ---------------------------------------------------------------------------
# addressbook list
# ---------------------------------------------------------------------------


@app.command("list")
def list_persons(
    ctx: typer.Context,
    show_private: Annotated[
        bool, typer.Option("--show-private", help="Show private details")
    ] = False,
) -> None:
    """List every person in the address book."""
    uc = _use_case(ctx)
    try:
        persons = uc.list_all()
    except StorageOperationError as exc:
        _fail(storage_error_message(exc))
    persons_table(persons, show_private=show_private)


# ---------------------------------------------------------------------------
# addressbook add
# ---------------------------------------------------------------------------


@app.command()
def add(
    ctx: typer.Context,
    name: Annotated[str, typer.Argument(help="Full name")],
    phone: Annotated[str, typer.Option("--phone", "-p", help="Phone number")],
    email: Annotated[str, typer.Option("--email", "-e", help="Email address")],
    address: Annotated[str, typer.Option("--address", "-a", help="Postal address")],
    tag: Annotated[
        Optional[list[str]], typer.Option("--tag", "-t", help="Tag (repeatable)")
    ] = None,
    private_phone: Annotated[bool, typer.Option("--private-phone")] = False,
    private_email: Annotated[bool, typer.Option("--private-email")] = False,
    private_address: Annotated[bool, typer.Option("--private-address")] = False,
) -> None:
    """Add a person to the address book."""
    uc = _use_case(ctx)
    try:
        person = Person.create(
            name,
            phone,
            email,
            address,
            tags=tag,
            private_phone=private_phone,
            private_email=private_email,
            private_address=private_address,
        )
        uc.add(person)
    except StorageOperationError as exc:
        _fail(storage_error_message(exc))
    except IllegalValueError as exc:
        _fail(f"{exc.field}: {exc}" if exc.field else str(exc))

    success_panel(f"✅ New person added: {person.as_text()}")


# ---------------------------------------------------------------------------
# addressbook delete
# ---------------------------------------------------------------------------


@app.command()
def delete(
    ctx: typer.Context,
    index: Annotated[int, typer.Argument(help="Index shown by 'list' (1-based)")],
) -> None:
    """Delete the person at INDEX."""
    uc = _use_case(ctx)
    try:
        removed = uc.delete(index)
    except StorageOperationError as exc:
        _fail(storage_error_message(exc))
    except PersonNotFoundError as exc:
        _fail(str(exc))

    success_panel(f"🗑️  Deleted person: {removed.as_text()}")


# ---------------------------------------------------------------------------
# addressbook find
# ---------------------------------------------------------------------------


@app.command()
def find(
    ctx: typer.Context,
    keywords: Annotated[list[str], typer.Argument(help="Name keywords (case-sensitive)")],
) -> None:
    """Find persons whose name contains any of KEYWORDS."""
    uc = _use_case(ctx)
    try:
        matches = uc.find(keywords)
    except StorageOperationError as exc:
        _fail(storage_error_message(exc))

    persons_table(matches, title="🔎 Matches")
    console.print(f"{len(matches)} person(s) listed!")


# ---------------------------------------------------------------------------
# addressbook clear
# ---------------------------------------------------------------------------


@app.command()
def clear(
    ctx: typer.Context,
    yes: Annotated[bool, typer.Option("--yes", "-y", help="Skip confirmation")] = False,
) -> None:
    """Remove every person from the address book."""
    if not yes:
        typer.confirm("Clear the whole address book?", abort=True)
    uc = _use_case(ctx)
    try:
        uc.clear()
    except StorageOperationError as exc:
        _fail(storage_error_message(exc))

    success_panel("Address book has been cleared!")


# ---------------------------------------------------------------------------
# addressbook path
# ---------------------------------------------------------------------------


@app.command()
def path(ctx: typer.Context) -> None:
    """Show the storage file location."""
    console.print(_use_case(ctx).storage_path)


if __name__ == "__main__":
    app()
