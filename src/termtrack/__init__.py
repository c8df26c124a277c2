# SPDX-License-Identifier: MIT

from termtrack.initialize import initialize
from termtrack.terminal.app import run


def main() -> None:
    initialize()
    run()


if __name__ == "__main__":
    main()
