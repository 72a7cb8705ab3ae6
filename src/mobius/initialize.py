# SPDX-License-Identifier: MIT

from yaml import dump

try:
    from yaml import CDumper as Dumper
except ImportError:
    from yaml import Dumper  # type: ignore[assignment]

from mobius import configuration
from mobius.logging_setup import install_global_exception_hook, setup_logging
from mobius.repository.configuration import CONFIGURATION_REPO
from mobius.repository.glossary import GLOSSARY_STORE
from mobius.repository.note import NOTE_STORE
from mobius.view import state as view_state


def initialize() -> None:
    configuration.CONFIG_PATH.mkdir(parents=True, exist_ok=True)
    __ensure_config_files()
    configuration.load_data_path_configuration()
    configuration.DATA_PATH.mkdir(parents=True, exist_ok=True)

    config = CONFIGURATION_REPO.get_config()

    logger = setup_logging(config["log_level"])
    install_global_exception_hook(logger)

    view_state.set_show_header(config.get("show_header", True))

    NOTE_STORE.debounce_ms = config["save_debounce_ms"]
    GLOSSARY_STORE.debounce_ms = config["save_debounce_ms"]
    NOTE_STORE.init()
    GLOSSARY_STORE.init()


def __ensure_config_files() -> None:
    if not configuration.APP_CONFIG_PATH.is_file():
        config = configuration.get_default_configuration()
        configuration.APP_CONFIG_PATH.write_text(dump(dict(config), Dumper=Dumper))
