# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from mobius.model.glossary import GlossaryEntry
from mobius.view.header import header


def glossary_report(entries: list[GlossaryEntry]) -> None:
    header("glossary")

    glossary_table = Table(box=box.SIMPLE)
    glossary_table.add_column("term")
    glossary_table.add_column("aliases")
    glossary_table.add_column("definition", overflow="ellipsis")

    for entry in entries:
        definition_first_line = entry["definition"].split("\n")[0]
        glossary_table.add_row(
            Text(entry["term"]),
            Text(", ".join(entry["aliases"])),
            Text(definition_first_line),
        )

    console = Console()
    console.print(glossary_table)


def single_entry_report(entry: GlossaryEntry) -> None:
    header("glossary")

    subtitle = None
    if len(entry["aliases"]) > 0:
        subtitle = Text("also: " + ", ".join(entry["aliases"]))

    console = Console()
    console.print(
        Panel(
            Text(entry["definition"] or "(no definition)"),
            title=Text(entry["term"]),
            subtitle=subtitle,
            border_style="blue",
        )
    )
