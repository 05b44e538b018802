# SPDX-License-Identifier: MIT

from justdoit.cleanup import register_cleanup
from justdoit.initialize import initialize
from justdoit.terminal.app import run


def main() -> None:
    initialize()
    register_cleanup()
    run()


if __name__ == "__main__":
    main()
