"""Tests for the CLI entry point and error boundary (cli/app.py).

The launcher is always built from recording fakes: ``main`` receives it
directly, ``cli`` gets it through a patched ``build_launcher``.
"""

from __future__ import annotations

import sys
from pathlib import Path
from unittest.mock import patch

import pytest
from conftest import FakeFileSystem, RecordingReplacer, RecordingShell, write_pyproject

from rpy.cli import exit_codes
from rpy.cli.app import cli, main
from rpy.core.launcher import Launcher
from rpy.infra.toml_loader import TomlConfigLoader
from rpy.version import __version__


@pytest.fixture
def configured(project: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """A project with a bare ``python3`` interpreter, used as the cwd."""
    write_pyproject(project, '[tool.rpy]\ninterpreter = "python3"\nsource_root = "src"\n')
    monkeypatch.chdir(project)
    for key in ("RPY_VERBOSE", "RPY_INTERPRETER"):
        monkeypatch.delenv(key, raising=False)
    return project


def _run_cli(
    monkeypatch: pytest.MonkeyPatch,
    args: list[str],
    launcher: Launcher,
) -> int:
    monkeypatch.setattr(sys, "argv", ["rpy", *args])
    with patch("rpy.cli.app.build_launcher", return_value=launcher):
        with pytest.raises(SystemExit) as exc_info:
            cli()
    code = exc_info.value.code
    assert isinstance(code, int)
    return code


# ---------------------------------------------------------------------------
# main
# ---------------------------------------------------------------------------

class TestMain:
    def test_hands_over_to_interpreter(
        self,
        configured: Path,
        launcher: Launcher,
        replacer: RecordingReplacer,
    ) -> None:
        code = main(["-c", "print(1)", "x"], {"PATH": "/usr/bin"}, launcher)

        assert code == exit_codes.SUCCESS
        program, argv, env = replacer.calls[0]
        assert program == "python3"
        assert argv == ("python3", "-c", "print(1)", "x")
        assert env["PYTHONPATH"] == str(configured / "src")

    def test_interpreter_override_from_environment(
        self,
        configured: Path,
        launcher: Launcher,
        replacer: RecordingReplacer,
    ) -> None:
        main([], {"RPY_INTERPRETER": "pypy3"}, launcher)
        program, _, env = replacer.calls[0]
        assert program == "pypy3"
        assert "RPY_INTERPRETER" not in env

    def test_banner_for_version(
        self,
        configured: Path,
        launcher: Launcher,
        replacer: RecordingReplacer,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        main(["--version"], {}, launcher)
        captured = capsys.readouterr()
        assert f"rpy {__version__}" in captured.err
        assert captured.out == ""
        assert replacer.calls[0][1] == ("python3", "--version")

    def test_no_banner_for_script_help(
        self,
        configured: Path,
        launcher: Launcher,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        (configured / "s.py").write_text("", encoding="utf-8")
        main(["s.py", "--help"], {}, launcher)
        assert "rpy " not in capsys.readouterr().err

    def test_verbose_report(
        self,
        configured: Path,
        launcher: Launcher,
        capsys: pytest.CaptureFixture[str],
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.setitem(sys.modules, "rich", None)
        monkeypatch.setitem(sys.modules, "rich.console", None)
        monkeypatch.setitem(sys.modules, "rich.table", None)

        main(["-m", "pkg"], {"RPY_VERBOSE": "1"}, launcher)

        err = capsys.readouterr().err
        assert "python" in err
        assert "python3" in err
        assert ["src_root", str(configured / "src")] in [line.split() for line in err.splitlines()]
        assert "python3 -m pkg" in err

    def test_verbose_report_with_rich(
        self,
        configured: Path,
        launcher: Launcher,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        main(["-m", "pkg"], {"RPY_VERBOSE": "yes"}, launcher)
        err = capsys.readouterr().err
        assert "launch plan" in err
        assert "src_root" in err

    def test_verbose_zero_is_quiet(
        self,
        configured: Path,
        launcher: Launcher,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        main(["-m", "pkg"], {"RPY_VERBOSE": "0"}, launcher)
        assert capsys.readouterr().err == ""


# ---------------------------------------------------------------------------
# Error boundary
# ---------------------------------------------------------------------------

class TestErrorBoundary:
    def test_config_not_found(
        self,
        monkeypatch: pytest.MonkeyPatch,
        replacer: RecordingReplacer,
        shell: RecordingShell,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        monkeypatch.delenv("RPY_VERBOSE", raising=False)
        launcher = Launcher(FakeFileSystem(cwd="/nowhere"), TomlConfigLoader(), shell, replacer)

        code = _run_cli(monkeypatch, [], launcher)

        captured = capsys.readouterr()
        assert code == exit_codes.GENERAL_ERROR
        assert captured.out == ""
        assert captured.err == "[rpy] Error: Unable to find pyproject.toml from /nowhere\n"
        assert replacer.calls == []

    def test_empty_pyproject(
        self,
        project: Path,
        monkeypatch: pytest.MonkeyPatch,
        launcher: Launcher,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        write_pyproject(project, "")
        monkeypatch.chdir(project)
        monkeypatch.delenv("RPY_VERBOSE", raising=False)

        code = _run_cli(monkeypatch, [], launcher)

        assert code == exit_codes.GENERAL_ERROR
        assert capsys.readouterr().err == (
            "[rpy] Error: Unable to read toml document or find the "
            "tool.rpy configuration in it\n"
        )

    def test_hint_shown_only_when_verbose(
        self,
        project: Path,
        monkeypatch: pytest.MonkeyPatch,
        launcher: Launcher,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        write_pyproject(project, "")
        monkeypatch.chdir(project)
        monkeypatch.setenv("RPY_VERBOSE", "1")

        _run_cli(monkeypatch, [], launcher)

        lines = capsys.readouterr().err.splitlines()
        assert lines[0].startswith("[rpy] Error: ")
        assert "Missing [tool.rpy] table." in lines[1:]

    def test_missing_script(
        self,
        configured: Path,
        monkeypatch: pytest.MonkeyPatch,
        launcher: Launcher,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        code = _run_cli(monkeypatch, ["nope.py", "arg"], launcher)
        assert code == exit_codes.GENERAL_ERROR
        assert capsys.readouterr().err == "[rpy] Error: Unable to open input file: nope.py\n"

    def test_unexpected_exception(
        self,
        configured: Path,
        monkeypatch: pytest.MonkeyPatch,
        launcher: Launcher,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        with patch("rpy.cli.app.classify", side_effect=RuntimeError("boom")):
            code = _run_cli(monkeypatch, [], launcher)
        assert code == exit_codes.GENERAL_ERROR
        assert capsys.readouterr().err == "[rpy] Error: Unexpected error: RuntimeError: boom\n"

    def test_interrupt_during_pre_run(
        self,
        configured: Path,
        monkeypatch: pytest.MonkeyPatch,
        launcher: Launcher,
        shell: RecordingShell,
        replacer: RecordingReplacer,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        write_pyproject(configured, '[tool.rpy]\ninterpreter = "python3"\npre_run = "sleep 60"\n')

        with patch.object(shell, "run", side_effect=KeyboardInterrupt):
            code = _run_cli(monkeypatch, [], launcher)

        assert code == exit_codes.GENERAL_ERROR
        assert capsys.readouterr().err == "[rpy] Error: Aborted by user.\n"
        assert replacer.calls == []

    def test_error_line_without_rich(
        self,
        monkeypatch: pytest.MonkeyPatch,
        replacer: RecordingReplacer,
        shell: RecordingShell,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        monkeypatch.setitem(sys.modules, "rich", None)
        monkeypatch.setitem(sys.modules, "rich.console", None)
        monkeypatch.delenv("RPY_VERBOSE", raising=False)
        launcher = Launcher(FakeFileSystem(cwd="/x"), TomlConfigLoader(), shell, replacer)

        _run_cli(monkeypatch, [], launcher)

        assert capsys.readouterr().err == "[rpy] Error: Unable to find pyproject.toml from /x\n"
