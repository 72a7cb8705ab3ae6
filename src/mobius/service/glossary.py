# SPDX-License-Identifier: MIT

import re
from typing import Optional

from mobius.model.glossary import GlossaryEntry

_DEF_RE = re.compile(r"^#\s+def:\s*(.+)", re.IGNORECASE)
_ALT_RE = re.compile(r"^#\s+alt\s*=\s*\[([^\]]*)\]", re.IGNORECASE)


def parse_glossary(raw: str) -> list[GlossaryEntry]:
    """
    Extract glossary entries from the raw glossary document.

    Format:
        # def: <term>
        <definition lines...>
        # alt=[<alias>, <alias>]

    A `# def:` line starts a new entry. A `# alt=[...]` line sets the
    aliases of the entry being read and is ignored when no entry is open.
    Every other line belongs to the open entry's definition; lines before
    the first header are dropped. Entries come back in document order and
    repeated terms are not merged.
    """
    entries: list[GlossaryEntry] = []
    current: Optional[GlossaryEntry] = None
    definition_lines: list[str] = []

    def flush() -> None:
        nonlocal current, definition_lines
        if current is not None:
            current["definition"] = "\n".join(definition_lines).strip()
            entries.append(current)
        current = None
        definition_lines = []

    for line in raw.split("\n"):
        def_match = _DEF_RE.match(line)
        if def_match:
            flush()
            current = {
                "term": def_match.group(1).strip(),
                "definition": "",
                "aliases": [],
            }
            continue

        alt_match = _ALT_RE.match(line)
        if alt_match:
            if current is not None:
                current["aliases"] = [
                    alias.strip()
                    for alias in alt_match.group(1).split(",")
                    if alias.strip()
                ]
            continue

        if current is not None:
            definition_lines.append(line)

    flush()

    return entries


def find_entry(entries: list[GlossaryEntry], name: str) -> Optional[GlossaryEntry]:
    """First entry whose term or one of its aliases matches name, ignoring case."""
    wanted = name.strip().casefold()
    if not wanted:
        return None
    for entry in entries:
        if entry["term"].casefold() == wanted:
            return entry
        if any(alias.casefold() == wanted for alias in entry["aliases"]):
            return entry
    return None
