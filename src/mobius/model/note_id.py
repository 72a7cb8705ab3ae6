# SPDX-License-Identifier: MIT

from typing import Iterable, Optional

from mobius.model.note import NoteId

INITIAL_NOTE_ID_SEED = 1


class NoteIdGenerator:
    """
    Hands out numeric string ids that only ever increase.

    Each store owns its own generator so that separate store instances
    never share a counter.
    """

    def __init__(self, seed: int = INITIAL_NOTE_ID_SEED) -> None:
        self._next = seed

    @property
    def next_value(self) -> int:
        return self._next

    def generate(self) -> NoteId:
        note_id = str(self._next)
        self._next += 1
        return note_id

    def reseed(self, existing_ids: Iterable[str]) -> None:
        """
        Move the counter past every numeric id in existing_ids.

        Non-numeric ids are ignored. The counter is never moved backwards.
        """
        numeric_ids = [
            number
            for number in (_as_number(note_id) for note_id in existing_ids)
            if number is not None
        ]
        if len(numeric_ids) == 0:
            return
        self._next = max(self._next, max(numeric_ids) + 1)


def _as_number(note_id: str) -> Optional[int]:
    try:
        return int(note_id)
    except ValueError:
        return None
