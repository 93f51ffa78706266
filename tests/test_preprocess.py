import pytest

from minimake.preprocess import DEFAULT_OUTPUT, clean_lines, main, process_makefile

SAMPLE = "\n# header comment\napp: main.o   # link\n\n\tcc -o app main.o  \n   \n"


def test_clean_lines_skips_blank_lines():
    result = list(clean_lines(SAMPLE.splitlines(keepends=True)))
    assert len(result) == 3
    assert all("#" not in line and "\n" not in line for line in result)


def test_clean_lines_keeps_command_tab():
    result = list(clean_lines(["\tcc -o app main.o  \n"]))
    assert result == ["\tcc -o app main.o"]


def test_clean_lines_comment_only_line_becomes_empty():
    assert list(clean_lines(["# nothing here\n"])) == [""]


def test_process_makefile_prints_to_stdout(tmp_path, capsys):
    makefile = tmp_path / "Makefile"
    makefile.write_text(SAMPLE)
    cleaned = process_makefile(False, makefile, tmp_path / "out.mk")
    out = capsys.readouterr().out
    assert out.splitlines() == cleaned
    assert not (tmp_path / "out.mk").exists()


def test_process_makefile_verbose_writes_file(tmp_path, capsys):
    makefile = tmp_path / "Makefile"
    makefile.write_text(SAMPLE)
    output = tmp_path / "out.mk"
    cleaned = process_makefile(True, makefile, output)
    assert output.read_text().splitlines() == cleaned
    assert capsys.readouterr().out == ""


def test_process_makefile_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        process_makefile(False, tmp_path / "absent")


def test_main_verbose_in_working_directory(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "Makefile").write_text(SAMPLE)
    assert main(["--verbose"]) == 0
    written = (tmp_path / DEFAULT_OUTPUT).read_text().splitlines()
    assert written == list(clean_lines(SAMPLE.splitlines(keepends=True)))


def test_main_without_makefile_fails(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert main([]) == 1
    assert "Makefile not found" in capsys.readouterr().err