# SPDX-License-Identifier: MIT

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as package_version

from rich.console import Console

from justdoit.configuration import APP_NAME


def get_version() -> str:
    try:
        return package_version(APP_NAME)
    except PackageNotFoundError:
        return "unknown"


def version() -> None:
    """Print the installed version."""
    Console().print(f"{APP_NAME} {get_version()}")
