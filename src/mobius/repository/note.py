# SPDX-License-Identifier: MIT

import json
import logging
import threading
from pathlib import Path
from typing import Any, Callable, Optional

from mobius import configuration
from mobius.model.note import FolderName, Note, NoteId, NotesData
from mobius.model.note_id import NoteIdGenerator
from mobius.observable import Subscriber, Unsubscriber, Writable
from mobius.repository.debounce import Debouncer
from mobius.repository.gateway import (
    WriteResult,
    backup_corrupt,
    ensure_and_write,
    read_if_exists,
)
from mobius.time import datetime_from_str, datetime_to_iso_str, now_utc

logger = logging.getLogger(__name__)

_PERSIST_KEY = "notes"


def get_empty_notes_data() -> NotesData:
    return {"notes": [], "folders": []}


class NoteStore:
    """
    Canonical in-memory notes and folders, mirrored to notes.json.

    Every mutation replaces the state with a new value, notifies
    subscribers right away and schedules a debounced write. The write
    serializes whatever the state is when the timer fires.
    """

    def __init__(
        self,
        path: Optional[Path] = None,
        debounce_ms: int = configuration.DEFAULT_SAVE_DEBOUNCE_MS,
        writer: Callable[[Path, str], WriteResult] = ensure_and_write,
        reader: Callable[[Path], Optional[str]] = read_if_exists,
    ) -> None:
        self._path = path
        self._writer = writer
        self._reader = reader
        self._lock = threading.RLock()
        # held from serialization until the writer returns
        self._write_lock = threading.Lock()
        self._debouncer = Debouncer(debounce_ms)
        self._ids = NoteIdGenerator()
        self._state: NotesData = get_empty_notes_data()
        self._feed: Writable[NotesData] = Writable(self._state)
        self.last_write: Writable[Optional[WriteResult]] = Writable(None)
        self.is_initialized = False

    @property
    def path(self) -> Path:
        if self._path is not None:
            return self._path
        return configuration.DATA_NOTES_PATH

    @property
    def debounce_ms(self) -> int:
        return self._debouncer.delay_ms

    @debounce_ms.setter
    def debounce_ms(self, value: int) -> None:
        if value < 0:
            raise ValueError(f"debounce delay must be >= 0, got {value}")
        self._debouncer.delay_ms = value

    # ------------------------------------------------------------------
    # Loading and saving
    # ------------------------------------------------------------------
    def init(self) -> None:
        """
        Load notes.json into memory.

        A missing, unreadable or unparsable file leaves the store empty and
        writes an empty document straight away. An unparsable file is
        copied aside first.
        """
        raw = self._reader(self.path)
        loaded: Optional[NotesData] = None

        if raw is not None:
            try:
                loaded = self.__load_data(raw)
            except (ValueError, TypeError, KeyError) as e:
                logger.warning("Could not parse %s, starting empty: %s", self.path, e)
                backup_corrupt(self.path)

        with self._write_lock, self._lock:
            if loaded is None:
                self._state = get_empty_notes_data()
                self.last_write.set(
                    self._writer(self.path, self.__dump_data(self._state))
                )
            else:
                self._state = loaded
                self._ids.reseed(note["id"] for note in loaded["notes"])
                logger.debug(
                    "Loaded %d notes and %d folders from %s",
                    len(loaded["notes"]),
                    len(loaded["folders"]),
                    self.path,
                )
            self.is_initialized = True
            self._feed.set(self._state)

    def flush(self) -> None:
        """Write any pending change now."""
        self._debouncer.flush(_PERSIST_KEY)

    def has_pending_write(self) -> bool:
        return self._debouncer.is_pending(_PERSIST_KEY)

    def __persist(self) -> None:
        with self._write_lock:
            with self._lock:
                content = self.__dump_data(self._state)
            self.last_write.set(self._writer(self.path, content))

    def __commit(self, notes: list[Note], folders: list[FolderName]) -> None:
        self._state = {"notes": notes, "folders": folders}
        self._feed.set(self._state)
        self._debouncer.schedule(_PERSIST_KEY, self.__persist)

    def __load_data(self, raw: str) -> NotesData:
        notes_data = json.loads(raw)

        # Legacy format: a bare list of notes with no folder index
        if isinstance(notes_data, list):
            notes = [self.__convert_note_for_deserialization(n) for n in notes_data]
            folders: list[FolderName] = []
            for note in notes:
                folder = note["folder"]
                if folder and folder not in folders:
                    folders.append(folder)
            return {"notes": notes, "folders": folders}

        if not isinstance(notes_data, dict):
            raise ValueError(f"unexpected notes document of type {type(notes_data).__name__}")

        raw_notes = notes_data.get("notes") or []
        raw_folders = notes_data.get("folders") or []
        if not isinstance(raw_notes, list) or not isinstance(raw_folders, list):
            raise ValueError("notes and folders must be lists")

        return {
            "notes": [self.__convert_note_for_deserialization(n) for n in raw_notes],
            "folders": [str(folder) for folder in raw_folders],
        }

    def __dump_data(self, notes_data: NotesData) -> str:
        serializable: dict[str, Any] = {
            "notes": [
                self.__convert_note_for_serialization(note)
                for note in notes_data["notes"]
            ],
            "folders": list(notes_data["folders"]),
        }
        return json.dumps(serializable, indent=2, ensure_ascii=False)

    def __convert_note_for_serialization(self, note: Note) -> dict[str, Any]:
        serializable_note: dict[str, Any] = {
            "id": note["id"],
            "content": note["content"],
        }
        if note["folder"] is not None:
            serializable_note["folder"] = note["folder"]
        serializable_note["createdAt"] = datetime_to_iso_str(note["created_at"])
        serializable_note["updatedAt"] = datetime_to_iso_str(note["updated_at"])
        return serializable_note

    def __convert_note_for_deserialization(self, note: dict[str, Any]) -> Note:
        if not isinstance(note, dict):
            raise ValueError(f"unexpected note of type {type(note).__name__}")
        if "id" not in note:
            raise KeyError("note without id")

        created_at = (
            datetime_from_str(str(note["createdAt"]))
            if note.get("createdAt")
            else now_utc()
        )
        updated_at = (
            datetime_from_str(str(note["updatedAt"]))
            if note.get("updatedAt")
            else created_at
        )
        if updated_at < created_at:
            updated_at = created_at

        folder = note.get("folder")
        return {
            "id": str(note["id"]),
            "content": str(note.get("content") or ""),
            "folder": str(folder) if folder else None,
            "created_at": created_at,
            "updated_at": updated_at,
        }

    # ------------------------------------------------------------------
    # Reading
    # ------------------------------------------------------------------
    def subscribe(self, subscriber: Subscriber[NotesData]) -> Unsubscriber:
        return self._feed.subscribe(subscriber)

    def snapshot(self) -> NotesData:
        return self._feed.get()

    @property
    def notes(self) -> list[Note]:
        return self.snapshot()["notes"]

    @property
    def folders(self) -> list[FolderName]:
        return self.snapshot()["folders"]

    def get_note(self, id: NoteId) -> Optional[Note]:
        return next((note for note in self.notes if note["id"] == id), None)

    def notes_in_folder(self, folder: Optional[FolderName]) -> list[Note]:
        return [note for note in self.notes if note["folder"] == folder]

    # ------------------------------------------------------------------
    # Notes
    # ------------------------------------------------------------------
    def add(self) -> NoteId:
        return self.add_to_folder(None)

    def add_to_folder(self, folder: Optional[FolderName]) -> NoteId:
        with self._lock:
            now = now_utc()
            note: Note = {
                "id": self._ids.generate(),
                "content": "",
                "folder": folder or None,
                "created_at": now,
                "updated_at": now,
            }
            self.__commit([note, *self._state["notes"]], self._state["folders"])
            return note["id"]

    def update_content(self, id: NoteId, content: str) -> None:
        with self._lock:
            if not self.__contains(id):
                return
            now = now_utc()
            notes: list[Note] = [
                {**note, "content": content, "updated_at": now}
                if note["id"] == id
                else note
                for note in self._state["notes"]
            ]
            self.__commit(notes, self._state["folders"])

    def move_to_folder(self, id: NoteId, folder: Optional[FolderName]) -> None:
        with self._lock:
            if not self.__contains(id):
                return
            notes: list[Note] = [
                {**note, "folder": folder or None} if note["id"] == id else note
                for note in self._state["notes"]
            ]
            self.__commit(notes, self._state["folders"])

    def remove(self, id: NoteId) -> None:
        with self._lock:
            if not self.__contains(id):
                return
            notes = [note for note in self._state["notes"] if note["id"] != id]
            self.__commit(notes, self._state["folders"])

    def __contains(self, id: NoteId) -> bool:
        return any(note["id"] == id for note in self._state["notes"])

    # ------------------------------------------------------------------
    # Folders
    # ------------------------------------------------------------------
    def add_folder(self, name: FolderName) -> None:
        with self._lock:
            if not name or name in self._state["folders"]:
                return
            self.__commit(self._state["notes"], [*self._state["folders"], name])

    def rename_folder(self, old_name: FolderName, new_name: FolderName) -> None:
        """
        Rename a folder and retag every note that was in it.

        Renaming onto an existing folder merges the two.
        """
        with self._lock:
            if not new_name or old_name == new_name:
                return
            in_index = old_name in self._state["folders"]
            tagged = any(note["folder"] == old_name for note in self._state["notes"])
            if not in_index and not tagged:
                return

            folders: list[FolderName] = []
            for folder in self._state["folders"]:
                renamed = new_name if folder == old_name else folder
                if renamed not in folders:
                    folders.append(renamed)
            if new_name not in folders:
                folders.append(new_name)

            notes: list[Note] = [
                {**note, "folder": new_name} if note["folder"] == old_name else note
                for note in self._state["notes"]
            ]
            self.__commit(notes, folders)

    def delete_folder_with_contents(self, name: FolderName) -> None:
        """Remove the folder and discard every note tagged with it."""
        with self._lock:
            in_index = name in self._state["folders"]
            tagged = any(note["folder"] == name for note in self._state["notes"])
            if not in_index and not tagged:
                return

            notes = [note for note in self._state["notes"] if note["folder"] != name]
            folders = [folder for folder in self._state["folders"] if folder != name]
            self.__commit(notes, folders)


NOTE_STORE = NoteStore()
