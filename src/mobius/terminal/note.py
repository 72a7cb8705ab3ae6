# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer

from mobius.model.note import Note
from mobius.repository.note import NOTE_STORE
from mobius.terminal.completion import complete_folder
from mobius.terminal.custom_typer import AliasedTyperGroup
from mobius.terminal.parse import open_editor_for_text
from mobius.view.note import notes_report, single_note_report

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


def _require_note(id: str) -> Note:
    note = NOTE_STORE.get_note(id)
    if note is None:
        typer.echo(f"Error: no note with id {id}", err=True)
        raise typer.Exit(1)
    return note


def _require_folder(folder: str) -> None:
    if folder not in NOTE_STORE.folders:
        raise typer.BadParameter(
            f"unknown folder '{folder}', create it with: mobius folder add {folder}"
        )


@app.command("add, a")
def add(
    folder: Annotated[
        Optional[str],
        typer.Option("--folder", "-f", autocompletion=complete_folder),
    ] = None,
    text: Annotated[
        Optional[str],
        typer.Option("--text", "-t", help="note content; omit to start empty"),
    ] = None,
    edit: Annotated[
        bool, typer.Option("--edit", "-e", help="open $EDITOR for the content")
    ] = False,
) -> None:
    if folder is not None:
        _require_folder(folder)

    if edit and text is None:
        text = open_editor_for_text()

    id = NOTE_STORE.add_to_folder(folder)
    if text is not None:
        NOTE_STORE.update_content(id, text)

    single_note_report(_require_note(id))


@app.command("list, ls")
def list_notes(
    folder: Annotated[
        Optional[str],
        typer.Option("--folder", "-f", autocompletion=complete_folder),
    ] = None,
    no_wrap: Annotated[bool, typer.Option("--no-wrap", "-nw")] = False,
) -> None:
    if folder is None:
        notes_report("all notes", NOTE_STORE.notes, no_wrap=no_wrap)
    else:
        notes_report(
            f"notes in {folder}", NOTE_STORE.notes_in_folder(folder), no_wrap=no_wrap
        )


@app.command("show, s", no_args_is_help=True)
def show(id: str) -> None:
    single_note_report(_require_note(id))


@app.command("edit, e", no_args_is_help=True)
def edit(
    id: str,
    text: Annotated[
        Optional[str],
        typer.Option("--text", "-t", help="new content; omit to open $EDITOR"),
    ] = None,
) -> None:
    note = _require_note(id)

    if text is None:
        text = open_editor_for_text(note["content"])
        if text is None:
            typer.echo("Edit cancelled (no text provided)")
            return

    NOTE_STORE.update_content(id, text)
    single_note_report(_require_note(id))


@app.command("move, mv", no_args_is_help=True)
def move(
    id: str,
    folder: Annotated[
        Optional[str], typer.Argument(autocompletion=complete_folder)
    ] = None,
    none: Annotated[
        bool, typer.Option("--none", help="take the note out of its folder")
    ] = False,
) -> None:
    _require_note(id)

    if none and folder is not None:
        raise typer.BadParameter("give either a folder or --none, not both")
    if not none and folder is None:
        raise typer.BadParameter("give a folder or --none")
    if folder is not None:
        _require_folder(folder)

    NOTE_STORE.move_to_folder(id, folder)
    single_note_report(_require_note(id))


@app.command("remove, rm", no_args_is_help=True)
def remove(id: str) -> None:
    _require_note(id)
    NOTE_STORE.remove(id)
    typer.echo(f"Removed note {id}")
