import json
import sys

import pytest

from mobius import cleanup, configuration
from mobius.initialize import initialize
from mobius.repository.configuration import CONFIGURATION_REPO
from mobius.repository.glossary import GLOSSARY_STORE
from mobius.repository.note import NOTE_STORE


@pytest.fixture
def fresh_app(app_dirs, clean_logger, monkeypatch):
    monkeypatch.setattr(sys, "excepthook", sys.excepthook)
    CONFIGURATION_REPO.reset()
    yield app_dirs
    NOTE_STORE.flush()
    GLOSSARY_STORE.flush()
    CONFIGURATION_REPO.reset()


def test_initialize_creates_config_and_empty_notes(fresh_app):
    initialize()

    assert configuration.APP_CONFIG_PATH.is_file()
    notes_path = configuration.DATA_NOTES_PATH
    assert json.loads(notes_path.read_text()) == {"notes": [], "folders": []}
    assert NOTE_STORE.is_initialized
    assert GLOSSARY_STORE.is_initialized
    assert GLOSSARY_STORE.content == ""
    assert (fresh_app / "logs" / "mobius.log").is_file()


def test_initialize_applies_debounce_setting(fresh_app):
    configuration.CONFIG_PATH.mkdir(parents=True)
    configuration.APP_CONFIG_PATH.write_text("save_debounce_ms: 1234\n")

    initialize()

    assert NOTE_STORE.debounce_ms == 1234
    assert GLOSSARY_STORE.debounce_ms == 1234


def test_initialize_honours_data_path(fresh_app):
    custom = fresh_app / "custom-data"
    configuration.CONFIG_PATH.mkdir(parents=True)
    configuration.APP_CONFIG_PATH.write_text(f"data_path: {custom}\n")

    initialize()

    assert (custom / "notes.json").is_file()


def test_cleanup_flushes_pending_writes(fresh_app):
    initialize()
    NOTE_STORE.debounce_ms = 60_000
    GLOSSARY_STORE.debounce_ms = 60_000
    NOTE_STORE.add_folder("flushed")
    GLOSSARY_STORE.update("# def: Flushed\n")

    cleanup.flush_and_sync()

    notes = json.loads(configuration.DATA_NOTES_PATH.read_text())
    assert notes["folders"] == ["flushed"]
    assert configuration.DATA_GLOSSARY_PATH.read_text() == "# def: Flushed\n"
