import pytest

from meshforge.cli import Application, main
from meshforge.commands import Command, CommandError
from meshforge.stl import read_stl


class Recorder(Command):
    name = "echo"

    def __init__(self, reply="done", error=None):
        self.received = None
        self.reply = reply
        self.error = error

    def execute(self, args):
        self.received = dict(args)
        if self.error is not None:
            raise self.error
        return self.reply


def test_arguments_are_paired_and_prefix_stripped(capsys):
    recorder = Recorder()
    app = Application()
    app.register(recorder)
    code = app.execute(["echo", "--a", "1", "b", "2", "--dangling"])
    assert code == 0
    assert recorder.received == {"a": "1", "b": "2"}
    assert capsys.readouterr().out == "done\n"


def test_no_command_is_an_error(capsys):
    assert Application().execute([]) == 1
    assert "No command specified." in capsys.readouterr().err


def test_unknown_command_is_an_error(capsys):
    assert Application().execute(["nope"]) == 1
    assert "Unknown command 'nope'" in capsys.readouterr().err


def test_command_error_code_is_returned(capsys):
    app = Application()
    app.register(Recorder(error=CommandError("boom", 4)))
    assert app.execute(["echo"]) == 4
    assert capsys.readouterr().err == "Error: boom\n"


def test_first_registration_wins(capsys):
    app = Application()
    app.register(Recorder(reply="first"))
    app.register(Recorder(reply="second"))
    app.execute(["echo"])
    assert capsys.readouterr().out == "first\n"


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    (tmp_path / "Assets").mkdir()
    monkeypatch.chdir(tmp_path)
    return tmp_path


def test_main_cube_then_split(workdir, capsys):
    code = main(["cube", "--L", "2", "--origin", "(0,0,0)", "--filepath", "c.stl"])
    assert code == 0
    assert "Cube successfully saved to c.stl" in capsys.readouterr().out
    code = main([
        "Split",
        "--input", str(workdir / "Assets" / "c.stl"),
        "--origin", "(0,0,0)",
        "--direction", "(1,0,0)",
        "--output1", "a.stl",
        "--output2", "b.stl",
    ])
    assert code == 0
    assert read_stl(workdir / "Assets" / "a.stl")
    assert read_stl(workdir / "Assets" / "b.stl")


def test_main_sphere_reports_missing_arguments(workdir, capsys):
    assert main(["sphere", "--R", "1"]) == 3
    assert "Missing one or more arguments." in capsys.readouterr().err