# SPDX-License-Identifier: MIT

from typing import TypedDict


class GlossaryEntry(TypedDict):
    term: str
    definition: str
    aliases: list[str]
