import pytest
from yaml import safe_load

from mobius import configuration
from mobius.repository.configuration import ConfigurationRepository


def test_missing_settings_are_filled_with_defaults(app_dirs):
    configuration.CONFIG_PATH.mkdir(parents=True)
    configuration.APP_CONFIG_PATH.write_text("log_level: DEBUG\n")

    config = ConfigurationRepository().get_config()

    assert config["log_level"] == "DEBUG"
    assert config["save_debounce_ms"] == configuration.DEFAULT_SAVE_DEBOUNCE_MS
    assert config["data_path"] is None
    assert config["show_header"] is True


def test_update_and_flush_writes_file(app_dirs):
    configuration.CONFIG_PATH.mkdir(parents=True)
    configuration.APP_CONFIG_PATH.write_text("{}\n")
    repository = ConfigurationRepository()

    repository.update_config(save_debounce_ms=500, log_level="warning")

    assert repository.flush() is True
    assert repository.flush() is False
    written = safe_load(configuration.APP_CONFIG_PATH.read_text())
    assert written["save_debounce_ms"] == 500
    assert written["log_level"] == "WARNING"


def test_invalid_values_are_rejected(app_dirs):
    configuration.CONFIG_PATH.mkdir(parents=True)
    configuration.APP_CONFIG_PATH.write_text("{}\n")
    repository = ConfigurationRepository()

    with pytest.raises(ValueError):
        repository.update_config(save_debounce_ms=-5)
    with pytest.raises(ValueError):
        repository.update_config(log_level="LOUD")
    assert repository.is_dirty is False


def test_get_config_returns_a_copy(app_dirs):
    configuration.CONFIG_PATH.mkdir(parents=True)
    configuration.APP_CONFIG_PATH.write_text("{}\n")
    repository = ConfigurationRepository()

    repository.get_config()["log_level"] = "CRITICAL"

    assert repository.get_config()["log_level"] == configuration.DEFAULT_LOG_LEVEL


def test_data_path_setting_moves_data_files(app_dirs):
    custom = app_dirs / "elsewhere"
    configuration.CONFIG_PATH.mkdir(parents=True)
    configuration.APP_CONFIG_PATH.write_text(f"data_path: {custom}\n")

    configuration.load_data_path_configuration()

    assert configuration.DATA_PATH == custom
    assert configuration.DATA_NOTES_PATH == custom / "notes.json"
    assert configuration.DATA_GLOSSARY_PATH == custom / "glossary.md"


def test_no_config_file_keeps_default_paths(app_dirs):
    before = configuration.DATA_NOTES_PATH

    configuration.load_data_path_configuration()

    assert configuration.DATA_NOTES_PATH == before
