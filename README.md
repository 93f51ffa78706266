# minimake

A handful of small command-line tools for working with simple Makefiles:
cleaning them up, checking their grammar and dependencies, running a rule's
command, and printing the dependency graph between targets.

## Installation

```
pip install .
```

For running the test suite:

```
pip install ".[test]"
pytest
```

## Commands

Every command exits with status 0 on success and 1 on an error.

### `minimake-options`

Recognises the `--help` option and prints a short usage message. Any other
option is reported as `Error: Unknown option '<option>'`; running it with no
options at all prints `Missing parameters`.

```
minimake-options --help
```

### `minimake-preprocess`

Reads `./Makefile`, drops blank lines, strips trailing whitespace and
comments (everything from the first `#`) and prints what is left. With
`--verbose` as the first argument the cleaned lines are written to
`Minimake_cleared.mk` instead of standard output.

```
minimake-preprocess
minimake-preprocess --verbose
```

### `minimake-grammar`

Checks the Makefile named on the command line and prints one message per
problem, skipping blank lines:

- `Line N: Missing colon in target definition` for a line that starts with a
  non-whitespace character but has no `:`;
- `Line N: Command found before rule` for an indented line before any rule;
- `Line N: Command must start with a tab` for an indented line that starts
  with something other than a tab.

```
minimake-grammar path/to/Makefile
```

### `minimake-check`

Reads the Makefile given as argument (`./Makefile` when none is given),
collects every rule (`target: dependencies`) and prints:

- `Duplicate target definition '<target>'` when a target is defined again;
- `Invalid dependency '<name>'` when a dependency is neither an existing
  file nor a target defined in the Makefile.

Target and dependency names in these messages are cut to 32 characters.

```
minimake-check
minimake-check path/to/Makefile
```

### `minimake-run`

Reads `./Makefile` and takes the last rule in it together with the line
that follows it, which must start with a tab and holds the command. The
target name given on the command line is recorded as the rule's name; it
does not select which rule runs. Every dependency must exist as a file;
otherwise `Invalid dependency '<name>'` is reported. The command is then
printed as `Executing: <command>` and run through the shell. A non-zero
exit status is reported as `Command failed with code <code>`.

```
minimake-run all
```

### `minimake-graph`

Parses the Makefile named on the command line into a dependency graph and
prints every vertex with its index and in-degree, followed by one edge from
each dependency to its target. Vertices are numbered in order of first
appearance; on each rule line the dependencies are numbered before the
target. At most 100 vertices or targets and 20 dependencies per target are
accepted; beyond that the command reports the limit and fails.

```
minimake-graph path/to/Makefile
```

For a Makefile holding

```
app: main.o util.o
main.o: main.c
```

the output is

```
Dependency Graph:
Total Vertices: 4
[0] main.o (in-degree: 1)
[1] util.o (in-degree: 0)
[2] app (in-degree: 2)
[3] main.c (in-degree: 0)

Edges:
main.o -> app
util.o -> app
main.c -> main.o
```

## Library use

The same functionality is available from Python:

```python
from minimake.graph import DependencyGraph

graph = DependencyGraph()
graph.parse_lines(["app: main.o util.o\n", "main.o: main.c\n"])
print(graph.edges())       # [(0, 2), (1, 2), (3, 0)]
print(graph.in_degrees())  # [1, 0, 2, 0]
print(graph.format())
```

Modules:

- `minimake.textutils`: `is_blank_line`, `remove_comment`,
  `strip_trailing`, `trim`, `is_target_line`.
- `minimake.options`: `help_text`.
- `minimake.preprocess`: `clean_lines`, `process_makefile`.
- `minimake.grammar`: `check_grammar`, returning the problem messages.
- `minimake.rules`: `Rule`, `ErrorType`, `RuleError` (with `message()`),
  `parse_target_line`, `collect_rules`, `check_dependencies`. The
  existence check can be replaced through the `exists` argument.
- `minimake.runner`: `TargetBlock`, `MakefileError`, `parse_dependencies`,
  `parse_command`, `find_target_block`, `missing_dependencies`,
  `run_target` (the command runner can be replaced through `run`).
- `minimake.graph`: `Target`, `VertexMap`, `DependencyGraph`,
  `GraphLimitError`.

## What it does not do

minimake is not a replacement for `make`. It does not build targets in
dependency order, compare file timestamps, expand variables, apply pattern
rules or run more than one command line per rule. `minimake-run` runs a
single command from the last rule of the Makefile, and `minimake-graph`
only prints the graph; nothing is built from it.