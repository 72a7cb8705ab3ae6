# SPDX-License-Identifier: MIT

import logging
import os
import shutil
import uuid
from enum import Enum
from pathlib import Path
from typing import Optional, TypedDict

import pendulum

from mobius.time import datetime_to_file_suffix_str, now_utc

logger = logging.getLogger(__name__)


class WriteStatus(str, Enum):
    WRITTEN = "written"
    FAILED = "failed"


class WriteResult(TypedDict):
    status: WriteStatus
    path: Path
    timestamp: pendulum.DateTime
    error: Optional[str]


def ensure_and_write(path: Path, content: str) -> WriteResult:
    """
    Replace the file at path with content, creating parent directories.

    The text is written to a temporary file in the same directory, synced
    and moved over the target so a crash never leaves a partial file.
    I/O errors are logged and reported through the returned status; they
    are never raised.
    """
    path = Path(path)
    tmp_path = path.parent / f".{path.name}.tmp-{uuid.uuid4().hex}"

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(tmp_path, "w", encoding="utf-8", newline="") as f:
            f.write(content)
            f.flush()
            os.fsync(f.fileno())
        tmp_path.replace(path)
    except OSError as e:
        logger.error("Failed to save %s: %s", path, e)
        _remove_quietly(tmp_path)
        return {
            "status": WriteStatus.FAILED,
            "path": path,
            "timestamp": now_utc(),
            "error": str(e),
        }

    logger.debug("Saved %s (%d chars)", path, len(content))
    return {
        "status": WriteStatus.WRITTEN,
        "path": path,
        "timestamp": now_utc(),
        "error": None,
    }


def read_if_exists(path: Path) -> Optional[str]:
    """
    Return the full text of path, or None when it is absent or unreadable.
    """
    path = Path(path)
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return None
    except (OSError, UnicodeDecodeError) as e:
        logger.error("Failed to load %s: %s", path, e)
        return None


def backup_corrupt(path: Path) -> Optional[Path]:
    """
    Copy an unparsable data file aside before it gets reset.
    """
    path = Path(path)
    backup_path = path.with_name(
        f"{path.name}.corrupt-{datetime_to_file_suffix_str(now_utc())}"
    )
    try:
        shutil.copy2(path, backup_path)
    except OSError as e:
        logger.error("Failed to back up corrupt file %s: %s", path, e)
        return None

    logger.warning("Backed up corrupt file %s to %s", path, backup_path)
    return backup_path


def _remove_quietly(path: Path) -> None:
    try:
        path.unlink(missing_ok=True)
    except OSError as e:
        logger.debug("Could not remove temporary file %s: %s", path, e)
