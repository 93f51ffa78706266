"""Small string helpers shared by the Makefile tools."""

from __future__ import annotations

# The characters C's isspace() treats as whitespace in the "C" locale.
WHITESPACE = " \t\n\v\f\r"


def is_blank_line(line: str) -> bool:
    """Return True when the line holds nothing but whitespace."""
    return not line.strip(WHITESPACE)


def remove_comment(line: str) -> str:
    """Drop everything from the first '#' onwards."""
    head, _, _ = line.partition("#")
    return head


def strip_trailing(line: str) -> str:
    """Cut the line at its first newline and drop trailing whitespace."""
    head, _, _ = line.partition("\n")
    return head.rstrip(WHITESPACE)


def trim(text: str) -> str:
    """Cut the text at its first newline and drop whitespace at both ends."""
    head, _, _ = text.partition("\n")
    return head.strip(WHITESPACE)


def is_target_line(line: str) -> bool:
    """Return True when the line declares a target, i.e. contains ':'."""
    return ":" in line