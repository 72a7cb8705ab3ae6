# SPDX-License-Identifier: MIT

import atexit

from mobius.repository.configuration import CONFIGURATION_REPO
from mobius.repository.glossary import GLOSSARY_STORE
from mobius.repository.note import NOTE_STORE


def flush_and_sync() -> None:
    CONFIGURATION_REPO.flush()

    # Pending debounced writes would be lost with their daemon timers
    NOTE_STORE.flush()
    GLOSSARY_STORE.flush()


def register_cleanup() -> None:
    atexit.register(flush_and_sync)
