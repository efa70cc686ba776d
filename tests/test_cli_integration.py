"""End-to-end CLI integration tests.

Invokes courseindex as a subprocess to verify real command execution.
"""

import subprocess
import sys
from pathlib import Path

from courseindex.cli import create_parser, main


def _run_courseindex(*args: str, cwd: str | Path | None = None) -> subprocess.CompletedProcess:
    """Run courseindex as a subprocess."""
    return subprocess.run(
        [sys.executable, "-m", "courseindex", *args],
        capture_output=True,
        text=True,
        cwd=cwd,
        timeout=120,
    )


class TestCLIHelp:
    """Test --help works for main and subcommands."""

    def test_main_help(self):
        result = _run_courseindex("--help")
        assert result.returncode == 0
        assert "courseindex" in result.stdout

    def test_check_help(self):
        result = _run_courseindex("check", "--help")
        assert result.returncode == 0

    def test_version(self):
        result = _run_courseindex("--version")
        assert result.returncode == 0
        assert result.stdout.startswith("courseindex ")


class TestEndToEnd:
    def test_list_subprocess(self, advising_catalog, tmp_path):
        result = _run_courseindex("list", str(advising_catalog), cwd=tmp_path)

        assert result.returncode == 0
        assert "CSCI100, Introduction to Computer Science" in result.stdout

    def test_verbose_logging_to_stderr(self, mixed_catalog, tmp_path):
        result = _run_courseindex("-v", "check", str(mixed_catalog), cwd=tmp_path)

        assert result.returncode == 0
        assert "DEBUG courseindex.core.records" in result.stderr
        assert "2 courses loaded, 4 records skipped" in result.stderr


class TestMain:
    def test_no_command_prints_help(self, capsys):
        assert main([]) == 0
        assert "usage: courseindex" in capsys.readouterr().out

    def test_parser_knows_all_commands(self):
        parser = create_parser()
        for command in ["check", "list", "menu", "init"]:
            assert parser.parse_args([command]).command == command
        assert parser.parse_args(["show", "CS101"]).courses == ["CS101"]
