import logging
import threading
from pathlib import Path

import pytest

from mobius import configuration
from mobius.repository.gateway import WriteResult, WriteStatus, ensure_and_write
from mobius.time import now_utc


class RecordingWriter:
    """Stands in for the gateway writer and remembers every call."""

    def __init__(self) -> None:
        self.writes: list[tuple[Path, str]] = []
        self.written = threading.Event()

    def __call__(self, path: Path, content: str) -> WriteResult:
        self.writes.append((path, content))
        self.written.set()
        return {
            "status": WriteStatus.WRITTEN,
            "path": path,
            "timestamp": now_utc(),
            "error": None,
        }

    def reset(self) -> None:
        self.writes.clear()
        self.written.clear()


class StallingWriter:
    """Writes to disk for real, but can hold the next write until released."""

    def __init__(self) -> None:
        self.stall_next = False
        self.stalled = threading.Event()
        self.release = threading.Event()
        self.finished = threading.Semaphore(0)

    def __call__(self, path: Path, content: str) -> WriteResult:
        if self.stall_next:
            self.stall_next = False
            self.stalled.set()
            self.release.wait(5)
        try:
            return ensure_and_write(path, content)
        finally:
            self.finished.release()


@pytest.fixture
def writer() -> RecordingWriter:
    return RecordingWriter()


@pytest.fixture
def stalling_writer() -> StallingWriter:
    return StallingWriter()


@pytest.fixture
def app_dirs(tmp_path, monkeypatch):
    """Point every configured path into a temporary directory."""
    config_dir = tmp_path / "config"
    data_dir = tmp_path / "data"
    monkeypatch.setattr(configuration, "CONFIG_PATH", config_dir)
    monkeypatch.setattr(configuration, "APP_CONFIG_PATH", config_dir / "config.yaml")
    monkeypatch.setattr(configuration, "LOG_PATH", tmp_path / "logs")
    monkeypatch.setattr(configuration, "DATA_PATH", data_dir)
    monkeypatch.setattr(configuration, "DATA_NOTES_PATH", data_dir / "notes.json")
    monkeypatch.setattr(configuration, "DATA_GLOSSARY_PATH", data_dir / "glossary.md")
    return tmp_path


@pytest.fixture
def clean_logger():
    logger = logging.getLogger(configuration.APP_NAME)
    saved = list(logger.handlers)
    saved_level = logger.level
    saved_propagate = logger.propagate
    for handler in saved:
        logger.removeHandler(handler)
    yield logger
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
    for handler in saved:
        logger.addHandler(handler)
    logger.setLevel(saved_level)
    logger.propagate = saved_propagate
