"""Run the command of a Makefile rule once its dependencies are present."""

from __future__ import annotations

import os
import subprocess
import sys
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass, field, replace
from os import PathLike

from .textutils import is_blank_line, is_target_line, remove_comment, trim

DEFAULT_MAKEFILE = "./Makefile"


class MakefileError(Exception):
    """Raised when a rule cannot be found, parsed or run."""


@dataclass(frozen=True)
class TargetBlock:
    """A rule together with the command that builds it."""

    target: str
    dependencies: tuple[str, ...] = field(default_factory=tuple)
    command: str = ""


def parse_dependencies(text: str) -> tuple[str, ...]:
    """Split a space-separated dependency list."""
    return tuple(dep for dep in (trim(token) for token in text.split(" ")) if dep)


def parse_command(line: str) -> str:
    """Return the command on a recipe line, which must start with a tab."""
    if not line.startswith("\t"):
        raise MakefileError(f"Error: Command:{trim(line)} without Tab!")
    return trim(line[1:])


def find_target_block(lines: Iterable[str]) -> TargetBlock:
    """Return the last rule in the lines, with the command on the line after it."""
    source = iter(lines)
    block: TargetBlock | None = None
    for raw in source:
        if is_blank_line(raw):
            continue
        line = trim(remove_comment(raw))
        if not is_target_line(line):
            continue
        head, _, tail = line.partition(":")
        target = trim(head)
        dependencies = parse_dependencies(trim(tail))
        command_line = next(source, None)
        if command_line is None:
            raise MakefileError(f"Missing command for target '{target}'")
        block = TargetBlock(target, dependencies, parse_command(command_line))
    if block is None:
        raise MakefileError("Target in Makefile not found")
    return block


def missing_dependencies(
    block: TargetBlock,
    exists: Callable[[str], bool] = os.path.exists,
) -> list[str]:
    """Return the dependencies of the block that do not exist."""
    return [dep for dep in block.dependencies if not exists(dep)]


def _shell(command: str) -> int:
    return subprocess.run(command, shell=True, check=False).returncode


def run_target(
    target: str,
    makefile: str | PathLike[str] = DEFAULT_MAKEFILE,
    run: Callable[[str], int] = _shell,
) -> TargetBlock:
    """Run the rule's command after checking its dependencies exist.

    Returns the block that was run. Raises MakefileError when the rule is
    missing or malformed, a dependency is absent or the command fails, and
    OSError when the makefile cannot be read.
    """
    with open(makefile, encoding="utf-8") as source:
        block = replace(find_target_block(source), target=target)
    missing = missing_dependencies(block)
    if missing:
        raise MakefileError(f"Invalid dependency '{missing[0]}'")
    print(f"Executing: {block.command}")
    code = run(block.command)
    if code != 0:
        raise MakefileError(f"Command failed with code {code}")
    return block


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command for the target named by the first argument."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print("Usage: minimake-run target", file=sys.stderr)
        return 1
    try:
        run_target(args[0])
    except MakefileError as exc:
        print(exc, file=sys.stderr)
        return 1
    except OSError as exc:
        print(f"Error opening Makefile: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())