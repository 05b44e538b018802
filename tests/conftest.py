"""Pytest configuration and shared fixtures."""

import logging

import pytest

from justdoit import configuration
from justdoit.initialize import initialize
from justdoit.model.timespan import Timespan
from justdoit.repository.configuration import CONFIGURATION_REPO
from justdoit.time import naive_datetime


@pytest.fixture(autouse=True)
def app_dirs(tmp_path, monkeypatch):
    """Point the config and log files at a temporary directory."""
    config_path = tmp_path / "config"
    log_path = tmp_path / "log"
    monkeypatch.setattr(configuration, "CONFIG_PATH", config_path)
    monkeypatch.setattr(configuration, "APP_CONFIG_PATH", config_path / "config.yaml")
    monkeypatch.setattr(configuration, "LOG_PATH", log_path)
    monkeypatch.setattr(configuration, "APP_LOG_PATH", log_path / "justdoit.log")

    CONFIGURATION_REPO._config = None
    CONFIGURATION_REPO.is_dirty = False
    initialize()

    yield tmp_path

    CONFIGURATION_REPO._config = None
    CONFIGURATION_REPO.is_dirty = False
    logger = logging.getLogger(configuration.APP_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


@pytest.fixture
def hour_window():
    """09:00 to 10:00 on a fixed day."""
    return Timespan(naive_datetime(2024, 1, 1, 9, 0), naive_datetime(2024, 1, 1, 10, 0))


@pytest.fixture
def ten_day_window():
    return Timespan(
        naive_datetime(2025, 1, 1, 0, 0, 0), naive_datetime(2025, 1, 10, 23, 59, 59)
    )
