# SPDX-License-Identifier: MIT

import logging

from yaml import dump

try:
    from yaml import CDumper as Dumper
except ImportError:
    from yaml import Dumper  # type: ignore[assignment]

from justdoit import configuration
from justdoit.repository.configuration import CONFIGURATION_REPO

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def initialize() -> None:
    configuration.CONFIG_PATH.mkdir(parents=True, exist_ok=True)
    configuration.LOG_PATH.mkdir(parents=True, exist_ok=True)

    __ensure_config_files()

    config = CONFIGURATION_REPO.get_config()
    __configure_logging(config["log_level"])


def __ensure_config_files() -> None:
    if not configuration.APP_CONFIG_PATH.is_file():
        configuration.APP_CONFIG_PATH.touch()
        config = configuration.get_default_configuration()
        configuration.APP_CONFIG_PATH.write_text(dump(dict(config), Dumper=Dumper))


def __configure_logging(log_level: object) -> None:
    # The live display owns the terminal, so log records only go to a file
    level = getattr(logging, str(log_level).upper(), None)
    if not isinstance(level, int):
        level = logging.WARNING

    logger = logging.getLogger(configuration.APP_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    handler = logging.FileHandler(configuration.APP_LOG_PATH, encoding="utf-8")
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
