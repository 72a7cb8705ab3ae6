# SPDX-License-Identifier: MIT

from typing import Optional

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from mobius.model.note import FolderName, Note
from mobius.time import datetime_to_display_local_datetime_str
from mobius.view.header import header


def first_line(note: Note) -> str:
    if note["content"] == "":
        return ""
    return note["content"].split("\n")[0].strip()


def notes_report(
    report_name: str,
    notes: list[Note],
    columns: list[str] = ["id", "folder", "first_line", "updated_at"],
    no_wrap: bool = False,
) -> None:
    header(report_name)

    notes_table = Table(box=box.SIMPLE)
    for column in columns:
        if no_wrap and column != "id":
            notes_table.add_column(column, no_wrap=True, overflow="ellipsis")
        else:
            notes_table.add_column(column)

    for note in notes:
        row = []
        for column in columns:
            column_value = ""
            if column == "first_line":
                column_value = first_line(note)
            elif column in ("created_at", "updated_at"):
                column_value = datetime_to_display_local_datetime_str(
                    note[column]  # type: ignore[literal-required]
                )
            elif note[column] is not None:  # type: ignore[literal-required]
                column_value = str(note[column])  # type: ignore[literal-required]

            row.append(Text(column_value))
        notes_table.add_row(*row)

    console = Console()
    console.print(notes_table)


def single_note_report(note: Note) -> None:
    header("note")

    note_table = Table(box=box.SIMPLE)
    note_table.add_column("property")
    note_table.add_column("value")

    note_table.add_row("id", note["id"])
    note_table.add_row("folder", Text(note["folder"] or ""))
    note_table.add_row(
        "created", datetime_to_display_local_datetime_str(note["created_at"])
    )
    note_table.add_row(
        "updated", datetime_to_display_local_datetime_str(note["updated_at"])
    )

    console = Console()
    console.print(note_table)

    if note["content"] != "":
        console.print(
            Panel(Text(note["content"]), title="Content", border_style="blue")
        )


def folders_report(folders: list[FolderName], notes: list[Note]) -> None:
    header("folders")

    folders_table = Table(box=box.SIMPLE)
    folders_table.add_column("folder")
    folders_table.add_column("notes")

    counts: dict[Optional[FolderName], int] = {}
    for note in notes:
        counts[note["folder"]] = counts.get(note["folder"], 0) + 1

    for folder in folders:
        folders_table.add_row(Text(folder), str(counts.get(folder, 0)))

    console = Console()
    console.print(folders_table)
