# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Optional

from yaml import load

try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader  # type: ignore[assignment]

from termtrack import configuration


class ConfigurationRepository:
    def __init__(self) -> None:
        self._config: Optional[configuration.Configuration] = None

    @property
    def config(self) -> configuration.Configuration:
        if self._config is None:
            self.__load_data()
        if self._config is None:
            raise ValueError()
        return self._config

    def __load_data(self) -> None:
        defaults = configuration.get_default_configuration()
        if not configuration.APP_CONFIG_PATH.is_file():
            self._config = defaults
            return

        loaded = load(configuration.APP_CONFIG_PATH.read_text(), Loader=Loader)
        if loaded is None:
            loaded = {}
        if not isinstance(loaded, dict):
            raise ValueError(
                f"{configuration.APP_CONFIG_PATH} must contain a mapping of settings"
            )

        # Fill in settings added after the config file was written
        for key, value in defaults.items():
            if key not in loaded:
                loaded[key] = value

        if loaded["storage"] not in configuration.STORAGE_BACKENDS:
            raise ValueError(
                f"Unknown storage backend '{loaded['storage']}', "
                f"expected one of: {', '.join(configuration.STORAGE_BACKENDS)}"
            )

        if str(loaded["log_level"]).upper() not in configuration.LOG_LEVELS:
            raise ValueError(
                f"Unknown log level '{loaded['log_level']}', "
                f"expected one of: {', '.join(configuration.LOG_LEVELS)}"
            )

        self._config = loaded  # type: ignore[assignment]

    def get_config(self) -> configuration.Configuration:
        return deepcopy(self.config)

    def reset(self) -> None:
        self._config = None


CONFIGURATION_REPO = ConfigurationRepository()
