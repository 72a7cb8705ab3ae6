# SPDX-License-Identifier: MIT

from mobius.cleanup import register_cleanup
from mobius.initialize import initialize
from mobius.terminal.app import run


def main() -> None:
    initialize()
    register_cleanup()
    run()


if __name__ == "__main__":
    main()
