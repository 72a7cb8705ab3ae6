# SPDX-License-Identifier: MIT

from typing import Annotated

import typer

from mobius.repository.note import NOTE_STORE
from mobius.terminal.completion import complete_folder
from mobius.terminal.custom_typer import AliasedTyperGroup
from mobius.view.note import folders_report

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("list, ls")
def list_folders() -> None:
    folders_report(NOTE_STORE.folders, NOTE_STORE.notes)


@app.command("add, a", no_args_is_help=True)
def add(name: str) -> None:
    name = name.strip()
    if not name:
        raise typer.BadParameter("folder name cannot be empty")
    if name in NOTE_STORE.folders:
        typer.echo(f"Folder '{name}' already exists")
        return

    NOTE_STORE.add_folder(name)
    folders_report(NOTE_STORE.folders, NOTE_STORE.notes)


@app.command("rename, mv", no_args_is_help=True)
def rename(
    old_name: Annotated[str, typer.Argument(autocompletion=complete_folder)],
    new_name: str,
) -> None:
    new_name = new_name.strip()
    if not new_name:
        raise typer.BadParameter("folder name cannot be empty")
    if old_name not in NOTE_STORE.folders:
        raise typer.BadParameter(f"unknown folder '{old_name}'")

    NOTE_STORE.rename_folder(old_name, new_name)
    folders_report(NOTE_STORE.folders, NOTE_STORE.notes)


@app.command("delete, rm", no_args_is_help=True)
def delete(
    name: Annotated[str, typer.Argument(autocompletion=complete_folder)],
    yes: Annotated[
        bool, typer.Option("--yes", "-y", help="skip the confirmation prompt")
    ] = False,
) -> None:
    """Delete a folder together with every note in it."""
    if name not in NOTE_STORE.folders:
        raise typer.BadParameter(f"unknown folder '{name}'")

    note_count = len(NOTE_STORE.notes_in_folder(name))
    if not yes:
        typer.confirm(
            f"Delete folder '{name}' and its {note_count} note(s)?", abort=True
        )

    NOTE_STORE.delete_folder_with_contents(name)
    typer.echo(f"Deleted folder '{name}' and {note_count} note(s)")
