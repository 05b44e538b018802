# SPDX-License-Identifier: MIT

from typing import TypedDict

import platformdirs

APP_NAME = "justdoit"

CONFIG_PATH = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH = CONFIG_PATH / "config.yaml"

LOG_PATH = platformdirs.user_log_path(APP_NAME)
APP_LOG_PATH = LOG_PATH / "justdoit.log"

MIN_INTERVAL = 1
MAX_INTERVAL = 60

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Configuration(TypedDict):
    default_theme: str
    interval: int
    show_quit_hint: bool
    log_level: str


def get_default_configuration() -> Configuration:
    return {
        "default_theme": "default",
        "interval": 5,
        "show_quit_hint": True,
        "log_level": "WARNING",
    }
