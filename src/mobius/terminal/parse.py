# SPDX-License-Identifier: MIT

import os
import subprocess
import tempfile
from typing import Optional


def open_editor_for_text(
    initial_text: Optional[str] = None, suffix: str = ".txt"
) -> Optional[str]:
    """
    Open the user's preferred editor to edit text.
    Returns the edited text with trailing newlines removed, or None if empty.
    """
    editor = os.environ.get("EDITOR", "nano")

    with tempfile.NamedTemporaryFile(mode="w+", suffix=suffix, encoding="utf-8") as tf:
        if initial_text is not None:
            tf.write(initial_text)
            tf.flush()

        subprocess.run([editor, tf.name], check=True)
        # Editors usually replace the file, so read it again by name
        with open(tf.name, encoding="utf-8") as edited:
            text = edited.read()
        if not text.strip():
            return None
        # Remove trailing newlines but preserve internal empty lines
        return text.rstrip("\n")
