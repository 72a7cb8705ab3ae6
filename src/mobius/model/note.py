# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

import pendulum

type NoteId = str
type FolderName = str


class Note(TypedDict):
    id: NoteId
    content: str
    folder: Optional[FolderName]
    created_at: pendulum.DateTime
    updated_at: pendulum.DateTime


class NotesData(TypedDict):
    """
    The unit persisted to notes.json.

    `notes` is ordered newest first. `folders` is stored as a list but
    treated as a set for membership; a note may reference a folder that
    is missing from it, which consumers read as "no folder".
    """

    notes: list[Note]
    folders: list[FolderName]
