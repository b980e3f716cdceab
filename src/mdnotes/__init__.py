# SPDX-License-Identifier: MIT

from mdnotes.cleanup import register_cleanup
from mdnotes.initialize import initialize
from mdnotes.terminal.app import run


def main() -> None:
    initialize()
    register_cleanup()
    run()


if __name__ == "__main__":
    main()
