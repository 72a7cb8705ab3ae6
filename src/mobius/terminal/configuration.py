# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from mobius import configuration
from mobius.repository.configuration import CONFIGURATION_REPO, LOG_LEVELS
from mobius.terminal.custom_typer import AliasedTyperGroup

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("view, v")
def view() -> None:
    """Display current configuration settings."""
    config = CONFIGURATION_REPO.get_config()

    console = Console()
    table = Table()
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row("config_file", str(configuration.APP_CONFIG_PATH))
    table.add_row("data_path", str(configuration.DATA_PATH))
    table.add_row("save_debounce_ms", str(config["save_debounce_ms"]))
    table.add_row("log_level", config["log_level"])
    table.add_row(
        "show_header",
        "✓ Enabled" if config.get("show_header", True) else "✗ Disabled",
    )

    console.print(table)


@app.command("set")
def set_config(
    data_path: Annotated[
        Optional[str],
        typer.Option("--data-path", help="directory holding notes.json and glossary.md"),
    ] = None,
    remove_data_path: Annotated[
        bool, typer.Option("--remove-data-path", help="go back to the default directory")
    ] = False,
    save_debounce_ms: Annotated[
        Optional[int],
        typer.Option("--save-debounce-ms", min=0, help="quiet period before saving"),
    ] = None,
    log_level: Annotated[
        Optional[str],
        typer.Option("--log-level", help=f"one of {', '.join(LOG_LEVELS)}"),
    ] = None,
    show_header: Annotated[
        Optional[bool], typer.Option("--show-header/--no-show-header")
    ] = None,
) -> None:
    if data_path is not None and remove_data_path:
        raise typer.BadParameter("give either --data-path or --remove-data-path")

    try:
        CONFIGURATION_REPO.update_config(
            data_path=data_path,
            remove_data_path=remove_data_path,
            save_debounce_ms=save_debounce_ms,
            log_level=log_level,
            show_header=show_header,
        )
    except ValueError as e:
        raise typer.BadParameter(str(e))

    CONFIGURATION_REPO.flush()
    view()
