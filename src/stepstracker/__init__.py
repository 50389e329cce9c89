# SPDX-License-Identifier: MIT

from stepstracker.cleanup import register_cleanup
from stepstracker.initialize import initialize
from stepstracker.terminal.app import run


def main() -> None:
    initialize()
    register_cleanup()
    run()


if __name__ == "__main__":
    main()
