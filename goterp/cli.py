"""Command entry point: greets the user and starts the loop."""

from __future__ import annotations

import getpass
import sys

from goterp import repl


def main(argv: list[str] | None = None) -> int:
    """Greet the current user and run the loop on standard input and output."""
    username = getpass.getuser()
    print(f"Hello {username}. This is a toy interpreter. Good luck!")
    repl.start(sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())