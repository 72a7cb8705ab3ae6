# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Optional

from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader  # noqa: F401
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from mobius import configuration

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigurationRepository:
    def __init__(self) -> None:
        self._config: Optional[configuration.Configuration] = None
        self.is_dirty = False

    @property
    def config(self) -> configuration.Configuration:
        if self._config is None:
            self.__load_data()
        if self._config is None:
            raise ValueError()
        return self._config

    def __load_data(self) -> None:
        self._config = load(configuration.APP_CONFIG_PATH.read_text(), Loader=Loader)

        if self._config is None:
            raise ValueError()

        # Fill in settings added after the config file was created
        defaults = configuration.get_default_configuration()
        if "data_path" not in self._config:
            self._config["data_path"] = defaults["data_path"]
        if "save_debounce_ms" not in self._config:
            self._config["save_debounce_ms"] = defaults["save_debounce_ms"]
        if "log_level" not in self._config:
            self._config["log_level"] = defaults["log_level"]
        if "show_header" not in self._config:
            self._config["show_header"] = True

    def __save_data(self, config: configuration.Configuration) -> None:
        configuration.APP_CONFIG_PATH.write_text(dump(dict(config), Dumper=Dumper))

    def flush(self) -> bool:
        if self._config is not None and self.is_dirty:
            self.__save_data(self._config)
            self.is_dirty = False
            return True
        return False

    def reset(self) -> None:
        """Drop the cached config so the next access re-reads the file."""
        self._config = None
        self.is_dirty = False

    def get_config(self) -> configuration.Configuration:
        return deepcopy(self.config)

    def update_config(
        self,
        data_path: Optional[str] = None,
        remove_data_path: bool = False,
        save_debounce_ms: Optional[int] = None,
        log_level: Optional[str] = None,
        show_header: Optional[bool] = None,
    ) -> None:
        if save_debounce_ms is not None and save_debounce_ms < 0:
            raise ValueError(
                f"{ConfigurationRepository.update_config.__name__}: save_debounce_ms must be >= 0, got {save_debounce_ms}"
            )
        if log_level is not None and log_level.upper() not in LOG_LEVELS:
            raise ValueError(
                f"{ConfigurationRepository.update_config.__name__}: log_level must be one of {', '.join(LOG_LEVELS)}, got {log_level}"
            )

        self.is_dirty = True

        if data_path is not None:
            self.config["data_path"] = data_path
        if remove_data_path:
            self.config["data_path"] = None
        if save_debounce_ms is not None:
            self.config["save_debounce_ms"] = save_debounce_ms
        if log_level is not None:
            self.config["log_level"] = log_level.upper()
        if show_header is not None:
            self.config["show_header"] = show_header


CONFIGURATION_REPO = ConfigurationRepository()
