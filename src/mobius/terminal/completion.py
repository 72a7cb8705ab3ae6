# SPDX-License-Identifier: MIT

from mobius.repository.glossary import GLOSSARY_STORE
from mobius.repository.note import NOTE_STORE


def complete_folder(incomplete: str) -> list[str]:
    """Return list of folder names for shell completion."""
    return [folder for folder in NOTE_STORE.folders if folder.startswith(incomplete)]


def complete_glossary_term(incomplete: str) -> list[str]:
    """Return list of glossary terms and aliases for shell completion."""
    names: list[str] = []
    for entry in GLOSSARY_STORE.entries.get():
        names.append(entry["term"])
        names.extend(entry["aliases"])
    return [name for name in names if name.startswith(incomplete)]
