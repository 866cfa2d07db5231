# SPDX-License-Identifier: MIT

from taskcal.cleanup import register_cleanup
from taskcal.initialize import initialize
from taskcal.terminal.app import run


def main() -> None:
    initialize()
    register_cleanup()
    run()


if __name__ == "__main__":
    main()
