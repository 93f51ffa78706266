"""Collect Makefile rules and report duplicate targets and invalid dependencies."""

from __future__ import annotations

import os
import sys
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass, field
from enum import Enum

from .textutils import is_blank_line, is_target_line, remove_comment, strip_trailing

MAX_FILE_NAME_LEN = 32
DEFAULT_MAKEFILE = "./Makefile"


def _clip(name: str) -> str:
    return name[:MAX_FILE_NAME_LEN]


@dataclass(frozen=True)
class Rule:
    """A target, the names it depends on and the line that declared it."""

    target: str
    dependencies: tuple[str, ...] = field(default_factory=tuple)
    line_number: int = 0


class ErrorType(Enum):
    """Kinds of problems found in a Makefile."""

    DUPLICATE_TARGET = "duplicate_target"
    INVALID_DEPENDENCY = "invalid_dependency"


@dataclass(frozen=True)
class RuleError:
    """One problem found in a Makefile."""

    type: ErrorType
    line_number: int
    target: str = ""
    name: str = ""

    def message(self) -> str:
        """Return the human-readable description of the problem."""
        if self.type is ErrorType.DUPLICATE_TARGET:
            return f"Duplicate target definition '{self.target}'"
        return f"Invalid dependency '{self.name}'"


def _error(kind: ErrorType, line_number: int, target: str, name: str) -> RuleError:
    return RuleError(kind, line_number, _clip(target), _clip(name))


def parse_target_line(line: str, line_number: int) -> Rule:
    """Parse ``target: dep dep ...`` into a Rule.

    Trailing whitespace is dropped from the target, which is cut to
    ``MAX_FILE_NAME_LEN`` characters. Dependencies are separated by spaces.
    Raises ValueError if the line has no ':'.
    """
    if not is_target_line(line):
        raise ValueError(f"not a target line: {line!r}")
    head, _, tail = line.partition(":")
    target = _clip(strip_trailing(head))
    dependencies = tuple(
        dep for dep in (strip_trailing(token) for token in tail.split(" ")) if dep
    )
    return Rule(target, dependencies, line_number)


def collect_rules(lines: Iterable[str]) -> tuple[list[Rule], list[RuleError]]:
    """Parse every rule; a repeated target is reported instead of stored."""
    rules: list[Rule] = []
    errors: list[RuleError] = []
    seen: set[str] = set()
    for number, line in enumerate(lines, start=1):
        if is_blank_line(line):
            continue
        line = remove_comment(line)
        if not is_target_line(line):
            continue
        rule = parse_target_line(line, number)
        if rule.target in seen:
            errors.append(
                _error(ErrorType.DUPLICATE_TARGET, number, rule.target, rule.target)
            )
        else:
            seen.add(rule.target)
            rules.append(rule)
    return rules, errors


def check_dependencies(
    rules: Sequence[Rule],
    exists: Callable[[str], bool] = os.path.exists,
) -> list[RuleError]:
    """Report every dependency that is neither an existing file nor a target."""
    targets = {rule.target for rule in rules}
    return [
        _error(ErrorType.INVALID_DEPENDENCY, rule.line_number, rule.target, dep)
        for rule in rules
        for dep in rule.dependencies
        if not exists(dep) and dep not in targets
    ]


def main(argv: Sequence[str] | None = None) -> int:
    """Check the Makefile (default ./Makefile) and print each problem found."""
    args = list(sys.argv[1:] if argv is None else argv)
    path = args[0] if args else DEFAULT_MAKEFILE
    try:
        with open(path, encoding="utf-8") as source:
            rules, errors = collect_rules(source)
    except OSError as exc:
        print(f"Error opening file: {exc}", file=sys.stderr)
        return 1
    errors.extend(check_dependencies(rules))
    for error in errors:
        print(error.message())
    return 0


if __name__ == "__main__":
    sys.exit(main())