"""Build and print the dependency graph described by a Makefile."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field

from .textutils import remove_comment

MAX_TARGETS = 100
MAX_DEPS = 20
MAX_NAME_LEN = 49


class GraphLimitError(Exception):
    """Raised when a Makefile exceeds the graph's size limits."""


@dataclass(frozen=True)
class Target:
    """A rule's target name and the names it depends on."""

    name: str
    deps: tuple[str, ...] = field(default_factory=tuple)


class VertexMap:
    """Assigns consecutive ids to vertex names in order of first appearance."""

    def __init__(self, limit: int = MAX_TARGETS) -> None:
        self.limit = limit
        self.names: list[str] = []
        self._ids: dict[str, int] = {}

    def vertex_id(self, name: str) -> int:
        """Return the id of ``name``, adding it as a new vertex if needed."""
        try:
            return self._ids[name]
        except KeyError:
            pass
        if len(self.names) >= self.limit:
            raise GraphLimitError("Max vertices reached")
        vid = len(self.names)
        self.names.append(name)
        self._ids[name] = vid
        return vid

    def __len__(self) -> int:
        return len(self.names)

    def __iter__(self) -> Iterator[str]:
        return iter(self.names)

    def __contains__(self, name: object) -> bool:
        return name in self._ids


class DependencyGraph:
    """Targets parsed from Makefile rules and the edges between them.

    Each dependency yields an edge from the dependency to its target.
    """

    def __init__(self, max_targets: int = MAX_TARGETS, max_deps: int = MAX_DEPS) -> None:
        self.max_targets = max_targets
        self.max_deps = max_deps
        self.targets: list[Target] = []
        self.vertices = VertexMap(max_targets)

    def parse_line(self, line: str) -> Target | None:
        """Parse one line; return the rule it declares, or None if it is not a rule."""
        text = remove_comment(line.partition("\n")[0])
        if ":" not in text:
            return None
        head, _, tail = text.partition(":")
        words = head.split()
        if not words:
            return None
        if len(self.targets) >= self.max_targets:
            raise GraphLimitError("Too many targets")
        name = words[0][:MAX_NAME_LEN]
        deps = tuple(tail.split())
        if len(deps) > self.max_deps:
            raise GraphLimitError(f"Too many dependencies for {name}")
        for dep in deps:
            self.vertices.vertex_id(dep)
        self.vertices.vertex_id(name)
        target = Target(name, deps)
        self.targets.append(target)
        return target

    def parse_lines(self, lines: Iterable[str]) -> None:
        """Parse every line in turn."""
        for line in lines:
            self.parse_line(line)

    def edges(self) -> list[tuple[int, int]]:
        """Return (dependency id, target id) pairs in rule order."""
        result: list[tuple[int, int]] = []
        for target in self.targets:
            target_id = self.vertices.vertex_id(target.name)
            result.extend(
                (self.vertices.vertex_id(dep), target_id) for dep in target.deps
            )
        return result

    def in_degrees(self) -> list[int]:
        """Return the number of incoming edges of every vertex, by id."""
        counts = [0] * len(self.vertices)
        for _, to in self.edges():
            counts[to] += 1
        return counts

    def format(self) -> str:
        """Return the printed report of vertices, in-degrees and edges."""
        names = self.vertices.names
        lines = ["Dependency Graph:", f"Total Vertices: {len(names)}"]
        lines.extend(
            f"[{vid}] {name} (in-degree: {degree})"
            for vid, (name, degree) in enumerate(zip(names, self.in_degrees()))
        )
        lines.append("")
        lines.append("Edges:")
        lines.extend(f"{names[src]} -> {names[dst]}" for src, dst in self.edges())
        return "".join(f"{line}\n" for line in lines)


def main(argv: Sequence[str] | None = None) -> int:
    """Print the dependency graph of the makefile named by the only argument."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        print("Usage: minimake-graph <makefile>", file=sys.stderr)
        return 1
    graph = DependencyGraph()
    try:
        with open(args[0], encoding="utf-8") as source:
            graph.parse_lines(source)
    except OSError as exc:
        print(f"Error opening file: {exc}", file=sys.stderr)
        return 1
    except GraphLimitError as exc:
        print(exc, file=sys.stderr)
        return 1
    sys.stdout.write(graph.format())
    return 0


if __name__ == "__main__":
    sys.exit(main())