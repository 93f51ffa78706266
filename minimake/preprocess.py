"""Strip blank lines, trailing whitespace and comments from a Makefile."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator, Sequence
from os import PathLike
from pathlib import Path

from .textutils import is_blank_line, remove_comment, strip_trailing

DEFAULT_MAKEFILE = "./Makefile"
DEFAULT_OUTPUT = "Minimake_cleared.mk"


def clean_lines(lines: Iterable[str]) -> Iterator[str]:
    """Yield each non-blank line with trailing whitespace and comments removed."""
    for line in lines:
        if is_blank_line(line):
            continue
        yield remove_comment(strip_trailing(line))


def process_makefile(
    verbose: bool = False,
    makefile: str | PathLike[str] = DEFAULT_MAKEFILE,
    output: str | PathLike[str] = DEFAULT_OUTPUT,
) -> list[str]:
    """Clean the makefile; write to ``output`` when verbose, else to stdout.

    Returns the cleaned lines. Raises OSError if a file cannot be opened.
    """
    with open(makefile, encoding="utf-8") as source:
        cleaned = list(clean_lines(source))
    text = "".join(f"{line}\n" for line in cleaned)
    if verbose:
        Path(output).write_text(text, encoding="utf-8")
    else:
        sys.stdout.write(text)
    return cleaned


def main(argv: Sequence[str] | None = None) -> int:
    """Run the preprocessor; pass --verbose to write the cleaned file."""
    args = list(sys.argv[1:] if argv is None else argv)
    verbose = bool(args) and args[0] == "--verbose"
    try:
        process_makefile(verbose)
    except FileNotFoundError as exc:
        print(f"Makefile not found: {exc}", file=sys.stderr)
        return 1
    except OSError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())