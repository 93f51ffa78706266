"""Basic grammar checks for Makefile rules and commands."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence

from .textutils import is_blank_line

MISSING_COLON = "Missing colon in target definition"
COMMAND_BEFORE_RULE = "Command found before rule"
COMMAND_NEEDS_TAB = "Command must start with a tab"


def check_grammar(lines: Iterable[str]) -> list[str]:
    """Return one message per grammar problem, prefixed with its line number.

    A line starting with a non-whitespace character is a rule and must
    contain ':'. Any other non-blank line is a command: it must follow a
    rule and start with a tab.
    """
    problems: list[str] = []
    in_target = False
    for number, raw in enumerate(lines, start=1):
        line, _, _ = raw.partition("\n")
        if is_blank_line(line):
            continue
        if not line[0].isspace():
            in_target = True
            if ":" not in line:
                problems.append(f"Line {number}: {MISSING_COLON}")
        elif not in_target:
            problems.append(f"Line {number}: {COMMAND_BEFORE_RULE}")
        elif not line.startswith("\t"):
            problems.append(f"Line {number}: {COMMAND_NEEDS_TAB}")
    return problems


def main(argv: Sequence[str] | None = None) -> int:
    """Check the makefile named by the first argument and print problems."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print("Usage: minimake-grammar <makefile>", file=sys.stderr)
        return 1
    try:
        with open(args[0], encoding="utf-8") as source:
            problems = check_grammar(source)
    except OSError as exc:
        print(f"Error opening file: {exc}", file=sys.stderr)
        return 1
    for problem in problems:
        print(problem)
    return 0


if __name__ == "__main__":
    sys.exit(main())