"""Command-line option handling for the minimake front end."""

from __future__ import annotations

import sys
from collections.abc import Sequence

_HELP_LINES = (
    "Usage:",
    "Options:",
    "--help    Display help message",
)


def help_text() -> str:
    """Return the help message, one option per line."""
    return "".join(f"{line}\n" for line in _HELP_LINES)


def main(argv: Sequence[str] | None = None) -> int:
    """Process options; return 0 on success, 1 on a missing or unknown option."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print("Missing parameters")
        return 1
    for arg in args:
        if arg != "--help":
            print(f"Error: Unknown option '{arg}'")
            return 1
        sys.stdout.write(help_text())
    return 0


if __name__ == "__main__":
    sys.exit(main())