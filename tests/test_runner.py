import pytest

from minimake.runner import (
    MakefileError,
    TargetBlock,
    find_target_block,
    main,
    missing_dependencies,
    parse_command,
    parse_dependencies,
    run_target,
)


def test_parse_dependencies_ignores_extra_spaces():
    assert parse_dependencies("a.c  b.c ") == ("a.c", "b.c")
    assert parse_dependencies("") == ()


def test_parse_command_requires_tab():
    assert parse_command("\tgcc -o app main.c\n") == "gcc -o app main.c"
    with pytest.raises(MakefileError, match="without Tab"):
        parse_command("gcc main.c\n")


def test_find_target_block_reads_rule_and_command():
    lines = ["# build\n", "\n", "app: main.c util.c # deps\n", "\tgcc main.c util.c\n"]
    block = find_target_block(lines)
    assert block == TargetBlock("app", ("main.c", "util.c"), "gcc main.c util.c")


def test_find_target_block_keeps_last_rule():
    lines = ["one: a\n", "\techo one\n", "two: b\n", "\techo two\n"]
    block = find_target_block(lines)
    assert block.target == "two"
    assert block.command == "echo two"


def test_find_target_block_errors():
    with pytest.raises(MakefileError, match="Missing command for target 'app'"):
        find_target_block(["app: main.c\n"])
    with pytest.raises(MakefileError, match="Target in Makefile not found"):
        find_target_block(["\n", "# nothing\n"])


def test_missing_dependencies():
    block = TargetBlock("app", ("here.c", "gone.c"))
    assert missing_dependencies(block, exists=lambda path: path == "here.c") == ["gone.c"]


def test_run_target_runs_command(tmp_path, monkeypatch, capsys):
    (tmp_path / "main.c").write_text("", encoding="utf-8")
    (tmp_path / "Makefile").write_text("app: main.c\n\tcc main.c\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    commands = []

    def fake_run(command):
        commands.append(command)
        return 0

    block = run_target("app", run=fake_run)
    assert commands == ["cc main.c"]
    assert block.target == "app"
    assert capsys.readouterr().out == "Executing: cc main.c\n"


def test_run_target_reports_missing_dependency(tmp_path, monkeypatch):
    (tmp_path / "Makefile").write_text("app: gone.c\n\tcc gone.c\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    with pytest.raises(MakefileError, match="Invalid dependency 'gone.c'"):
        run_target("app", run=lambda command: 0)


def test_run_target_reports_failed_command(tmp_path, monkeypatch):
    (tmp_path / "Makefile").write_text("app:\n\tfalse\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    with pytest.raises(MakefileError, match="Command failed with code 2"):
        run_target("app", run=lambda command: 2)


def test_main_without_arguments_fails():
    assert main([]) == 1


def test_main_without_makefile_fails(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert main(["app"]) == 1