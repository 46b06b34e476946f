import os

import pytest

from pipex.pipeline import main, parse_command, run_two


@pytest.fixture
def env():
    return {"PATH": os.environ.get("PATH", "/usr/bin:/bin")}


@pytest.fixture
def infile(tmp_path):
    source = tmp_path / "in.txt"
    source.write_text("hello\nworld\n")
    return source


def test_parse_command_splits_on_spaces():
    assert parse_command("grep  -v foo ") == ["grep", "-v", "foo"]


def test_parse_command_empty():
    assert parse_command("") == []


def test_run_two_pipes_commands(tmp_path, infile, env):
    outfile = tmp_path / "out.txt"
    statuses = run_two(str(infile), "cat", "tr a-z A-Z", str(outfile), env)
    assert statuses == (0, 0)
    assert outfile.read_text() == "HELLO\nWORLD\n"


def test_run_two_filters(tmp_path, infile, env):
    outfile = tmp_path / "out.txt"
    run_two(str(infile), "grep world", "cat", str(outfile), env)
    assert outfile.read_text() == "world\n"


def test_run_two_truncates_output(tmp_path, infile, env):
    outfile = tmp_path / "out.txt"
    outfile.write_text("old content that is long\n")
    run_two(str(infile), "cat", "cat", str(outfile), env)
    assert outfile.read_text() == infile.read_text()


def test_run_two_missing_infile(tmp_path, env, capsys):
    outfile = tmp_path / "out.txt"
    statuses = run_two(str(tmp_path / "absent"), "cat", "cat", str(outfile), env)
    assert statuses == (0, 0)
    assert outfile.exists()
    assert outfile.read_text() == ""
    assert "Can't open files" in capsys.readouterr().err


def test_run_two_unknown_first_command(tmp_path, infile, env, capsys):
    outfile = tmp_path / "out.txt"
    statuses = run_two(str(infile), "no-such-command-xyz", "cat", str(outfile), env)
    assert statuses == (1, 0)
    assert outfile.read_text() == ""
    assert "no-such-command-xyz" in capsys.readouterr().err


def test_run_two_unknown_second_command(tmp_path, infile, env):
    outfile = tmp_path / "out.txt"
    statuses = run_two(str(infile), "cat", "no-such-command-xyz", str(outfile), env)
    assert statuses[1] == 1
    assert outfile.read_text() == ""


def test_run_two_empty_command(tmp_path, infile, env):
    outfile = tmp_path / "out.txt"
    statuses = run_two(str(infile), "", "cat", str(outfile), env)
    assert statuses == (1, 0)


def test_main_runs_pipeline(tmp_path, infile):
    outfile = tmp_path / "out.txt"
    assert main([str(infile), "cat", "cat", str(outfile)]) == 0
    assert outfile.read_text() == infile.read_text()


def test_main_wrong_argument_count_does_nothing(tmp_path, infile):
    outfile = tmp_path / "out.txt"
    assert main([str(infile), "cat", str(outfile)]) == 0
    assert not outfile.exists()