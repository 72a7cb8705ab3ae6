# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import NotRequired, Optional, TypedDict

from yaml import load

try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader  # type: ignore[assignment]
import platformdirs

APP_NAME = "mobius"

CONFIG_PATH = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH = CONFIG_PATH / "config.yaml"

LOG_PATH: Path = platformdirs.user_log_path(APP_NAME)

# These will be set dynamically by load_data_path_configuration()
DATA_PATH: Path = platformdirs.user_data_path(APP_NAME)
DATA_NOTES_PATH: Path = DATA_PATH / "notes.json"
DATA_GLOSSARY_PATH: Path = DATA_PATH / "glossary.md"

DEFAULT_SAVE_DEBOUNCE_MS = 300
DEFAULT_LOG_LEVEL = "INFO"


class Configuration(TypedDict):
    data_path: Optional[str]
    save_debounce_ms: int
    log_level: str
    show_header: NotRequired[bool]


def get_default_configuration() -> Configuration:
    return {
        "data_path": None,
        "save_debounce_ms": DEFAULT_SAVE_DEBOUNCE_MS,
        "log_level": DEFAULT_LOG_LEVEL,
        "show_header": True,
    }


def set_data_path(data_path: Path) -> None:
    global DATA_PATH, DATA_NOTES_PATH, DATA_GLOSSARY_PATH

    DATA_PATH = data_path
    DATA_NOTES_PATH = DATA_PATH / "notes.json"
    DATA_GLOSSARY_PATH = DATA_PATH / "glossary.md"


def load_data_path_configuration() -> None:
    """
    Load the configuration and set the DATA_PATH variables dynamically.

    This must be called after the config file exists and before any
    store is initialized.
    """
    if not APP_CONFIG_PATH.is_file():
        # Config doesn't exist yet, use defaults
        return

    config: Optional[Configuration] = load(APP_CONFIG_PATH.read_text(), Loader=Loader)
    if config is None:
        return

    data_path_setting = config.get("data_path")
    if data_path_setting is not None:
        set_data_path(Path(data_path_setting).expanduser())
