# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Optional

from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from justdoit import configuration


class ConfigurationRepository:
    def __init__(self) -> None:
        self._config: Optional[configuration.Configuration] = None
        self.is_dirty = False

    @property
    def config(self) -> configuration.Configuration:
        if self._config is None:
            self.__load_data()
        return self._config  # type: ignore[return-value]

    def __load_data(self) -> None:
        loaded = load(configuration.APP_CONFIG_PATH.read_text(), Loader=Loader)

        if not isinstance(loaded, dict):
            raise ValueError(
                f"Configuration file {configuration.APP_CONFIG_PATH} is empty or malformed"
            )

        # Migration: add any settings introduced after the file was written
        defaults = configuration.get_default_configuration()
        for key, value in defaults.items():
            if key not in loaded:
                loaded[key] = value

        self._config = loaded  # type: ignore[assignment]

    def __save_data(self, config: configuration.Configuration) -> None:
        configuration.APP_CONFIG_PATH.write_text(dump(dict(config), Dumper=Dumper))

    def flush(self) -> None:
        if self._config is not None and self.is_dirty:
            self.__save_data(self._config)
            self.is_dirty = False

    def get_config(self) -> configuration.Configuration:
        return deepcopy(self.config)

    def update_config(
        self,
        default_theme: Optional[str] = None,
        interval: Optional[int] = None,
        show_quit_hint: Optional[bool] = None,
        log_level: Optional[str] = None,
    ) -> None:
        self.is_dirty = True

        if default_theme is not None:
            self.config["default_theme"] = default_theme
        if interval is not None:
            self.config["interval"] = interval
        if show_quit_hint is not None:
            self.config["show_quit_hint"] = show_quit_hint
        if log_level is not None:
            self.config["log_level"] = log_level


CONFIGURATION_REPO = ConfigurationRepository()
