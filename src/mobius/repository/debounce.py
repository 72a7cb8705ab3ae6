# SPDX-License-Identifier: MIT

import logging
import threading
from typing import Any, Callable, Hashable, Optional

from mobius.configuration import DEFAULT_SAVE_DEBOUNCE_MS

logger = logging.getLogger(__name__)


class Debouncer:
    """
    Coalesces repeated actions per key into one call after a quiet period.

    Scheduling an action for a key cancels whatever was pending for that
    key. The action itself reads the state it needs when it runs, so only
    the latest state is ever written.
    """

    def __init__(self, delay_ms: int = DEFAULT_SAVE_DEBOUNCE_MS) -> None:
        if delay_ms < 0:
            raise ValueError(f"debounce delay must be >= 0, got {delay_ms}")
        self.delay_ms = delay_ms
        self._lock = threading.Lock()
        self._timers: dict[Hashable, threading.Timer] = {}
        self._actions: dict[Hashable, Callable[[], Any]] = {}

    def schedule(self, key: Hashable, action: Callable[[], Any]) -> None:
        with self._lock:
            pending = self._timers.pop(key, None)
            if pending is not None:
                pending.cancel()

            timer = threading.Timer(self.delay_ms / 1000, self.__fire, args=(key,))
            timer.daemon = True
            self._timers[key] = timer
            self._actions[key] = action
            timer.start()

    def is_pending(self, key: Hashable) -> bool:
        with self._lock:
            return key in self._actions

    def flush(self, key: Optional[Hashable] = None) -> None:
        """Run pending actions now instead of waiting for their timers."""
        for pending_key, action in self.__take(key):
            self.__run(pending_key, action)

    def cancel(self, key: Optional[Hashable] = None) -> None:
        self.__take(key)

    def __take(
        self, key: Optional[Hashable]
    ) -> list[tuple[Hashable, Callable[[], Any]]]:
        with self._lock:
            keys = list(self._actions.keys()) if key is None else [key]
            actions = []
            for k in keys:
                timer = self._timers.pop(k, None)
                if timer is not None:
                    timer.cancel()
                action = self._actions.pop(k, None)
                if action is not None:
                    actions.append((k, action))
            return actions

    def __fire(self, key: Hashable) -> None:
        with self._lock:
            # A newer schedule() or a flush() may have replaced this timer
            if self._timers.get(key) is not threading.current_thread():
                return
            del self._timers[key]
            action = self._actions.pop(key)

        self.__run(key, action)

    def __run(self, key: Hashable, action: Callable[[], Any]) -> None:
        try:
            action()
        except Exception:
            logger.exception("Debounced action for %s failed", key)
