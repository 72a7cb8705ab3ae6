# SPDX-License-Identifier: MIT

from typing import Annotated

import typer

from mobius.repository.glossary import GLOSSARY_STORE
from mobius.service.glossary import find_entry
from mobius.terminal.completion import complete_glossary_term
from mobius.terminal.custom_typer import AliasedTyperGroup
from mobius.terminal.parse import open_editor_for_text
from mobius.view.glossary import glossary_report, single_entry_report

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("show, s")
def show() -> None:
    glossary_report(GLOSSARY_STORE.entries.get())


@app.command("edit, e")
def edit() -> None:
    """Edit the raw glossary document in $EDITOR."""
    text = open_editor_for_text(GLOSSARY_STORE.content, suffix=".md")
    if text is None:
        typer.echo("Edit cancelled (no text provided)")
        return

    GLOSSARY_STORE.update(text + "\n")
    glossary_report(GLOSSARY_STORE.entries.get())


@app.command("lookup, l", no_args_is_help=True)
def lookup(
    name: Annotated[str, typer.Argument(autocompletion=complete_glossary_term)],
) -> None:
    entry = find_entry(GLOSSARY_STORE.entries.get(), name)
    if entry is None:
        typer.echo(f"No glossary entry for '{name}'", err=True)
        raise typer.Exit(1)

    single_entry_report(entry)
