# SPDX-License-Identifier: MIT

from zenote.initialize import initialize
from zenote.terminal.app import run


def main() -> None:
    initialize()
    run()


if __name__ == "__main__":
    main()
