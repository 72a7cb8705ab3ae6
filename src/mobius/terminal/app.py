# SPDX-License-Identifier: MIT

from typing import Annotated

import typer

from mobius.terminal import configuration, folder, glossary, note
from mobius.terminal.custom_typer import OrderedAliasedTyperGroup
from mobius.view import state as view_state

app = typer.Typer(
    cls=OrderedAliasedTyperGroup,
    help="mobius - notes, folders and a glossary in the terminal",
    no_args_is_help=True,
)
app.add_typer(note.app, name="note, n")
app.add_typer(folder.app, name="folder, f")
app.add_typer(glossary.app, name="glossary, g")
app.add_typer(configuration.app, name="config, c")


@app.callback()
def main_callback(
    no_header: Annotated[
        bool,
        typer.Option(
            "--no-header",
            "-nh",
            help="Suppress header output in reports",
        ),
    ] = False,
) -> None:
    """
    mobius - notes, folders and a glossary in the terminal

    Global options that apply to all commands.
    """
    if no_header:
        view_state.set_show_header(False)


def run() -> None:
    app()
