# SPDX-License-Identifier: MIT

import logging
import threading
from pathlib import Path
from typing import Callable, Optional

from mobius import configuration
from mobius.model.glossary import GlossaryEntry
from mobius.observable import Derived, Subscriber, Unsubscriber, Writable
from mobius.repository.debounce import Debouncer
from mobius.repository.gateway import WriteResult, ensure_and_write, read_if_exists
from mobius.service.glossary import parse_glossary

logger = logging.getLogger(__name__)

_PERSIST_KEY = "glossary"


class GlossaryStore:
    """
    The raw glossary document, mirrored to glossary.md.

    The text is stored as-is; `entries` re-parses it whenever it changes.
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
        self._content: Writable[str] = Writable("")
        self.entries: Derived[str, list[GlossaryEntry]] = Derived(
            self._content, parse_glossary
        )
        self.last_write: Writable[Optional[WriteResult]] = Writable(None)
        self.is_initialized = False

    @property
    def path(self) -> Path:
        if self._path is not None:
            return self._path
        return configuration.DATA_GLOSSARY_PATH

    @property
    def debounce_ms(self) -> int:
        return self._debouncer.delay_ms

    @debounce_ms.setter
    def debounce_ms(self, value: int) -> None:
        if value < 0:
            raise ValueError(f"debounce delay must be >= 0, got {value}")
        self._debouncer.delay_ms = value

    @property
    def content(self) -> str:
        return self._content.get()

    def init(self) -> None:
        raw = self._reader(self.path)
        with self._lock:
            self._content.set(raw if raw is not None else "")
            self.is_initialized = True
        logger.debug("Loaded glossary from %s (present=%s)", self.path, raw is not None)

    def update(self, content: str) -> None:
        """Replace the whole document and schedule a save."""
        with self._lock:
            self._content.set(content)
            self._debouncer.schedule(_PERSIST_KEY, self.__persist)

    def subscribe(self, subscriber: Subscriber[str]) -> Unsubscriber:
        return self._content.subscribe(subscriber)

    def flush(self) -> None:
        self._debouncer.flush(_PERSIST_KEY)

    def has_pending_write(self) -> bool:
        return self._debouncer.is_pending(_PERSIST_KEY)

    def __persist(self) -> None:
        with self._write_lock:
            with self._lock:
                content = self._content.get()
            self.last_write.set(self._writer(self.path, content))


GLOSSARY_STORE = GlossaryStore()
