"""Tests for the command line interface."""

import json

import pytest
import sys
from pathlib import Path

from click.testing import CliRunner

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from config import ENV_ENCODING, ENV_FORMAT, ENV_K
from main import format_result, main


@pytest.fixture
def runner(monkeypatch):
    for name in (ENV_K, ENV_ENCODING, ENV_FORMAT):
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    return CliRunner()


@pytest.fixture
def log_file(tmp_path):
    path = tmp_path / "app.log"
    path.write_text("Error: Disk full\nerror: network down\nERROR: disk error\n", encoding="utf-8")
    return path


class TestRun:
    """Test successful runs."""

    def test_file_and_k(self, runner, log_file):
        result = runner.invoke(main, [str(log_file), "2"])
        assert result.exit_code == 0
        assert result.output.strip() == "[('error', 4), ('disk', 2)]"

    def test_k_zero(self, runner, log_file):
        result = runner.invoke(main, [str(log_file), "0"])
        assert result.exit_code == 0
        assert result.output.strip() == "[]"

    def test_default_k(self, runner, log_file):
        result = runner.invoke(main, [str(log_file)])
        assert result.exit_code == 0
        assert result.output.strip() == "[('error', 4), ('disk', 2)]"

    def test_k_from_env(self, runner, log_file, monkeypatch):
        monkeypatch.setenv(ENV_K, "1")
        result = runner.invoke(main, [str(log_file)])
        assert result.exit_code == 0
        assert result.output.strip() == "[('error', 4)]"

    def test_demo(self, runner):
        result = runner.invoke(main, ["--demo"])
        assert result.exit_code == 0
        assert result.output.strip() == "[('error', 3), ('disk', 2)]"

    def test_demo_with_k(self, runner):
        result = runner.invoke(main, ["--demo", "1"])
        assert result.exit_code == 0
        assert result.output.strip() == "[('error', 3)]"

    def test_table_format(self, runner, log_file):
        result = runner.invoke(main, [str(log_file), "3", "--format", "table"])
        assert result.exit_code == 0
        assert result.output.splitlines() == ["error\t4", "disk\t2", "down\t1"]

    def test_json_format(self, runner, log_file):
        result = runner.invoke(main, [str(log_file), "2", "--format", "json"])
        assert result.exit_code == 0
        assert json.loads(result.output) == [["error", 4], ["disk", 2]]


class TestErrors:
    """Test failures exit non-zero with a message."""

    def test_missing_file(self, runner, tmp_path):
        result = runner.invoke(main, [str(tmp_path / "nope.log"), "2"])
        assert result.exit_code == 1
        assert "Error: Unable to read log file" in result.output
        assert "file not found" in result.output

    def test_non_numeric_k(self, runner, log_file):
        result = runner.invoke(main, [str(log_file), "five"])
        assert result.exit_code == 2
        assert "k must be a non-negative integer" in result.output

    def test_negative_k(self, runner, log_file):
        result = runner.invoke(main, [str(log_file), "-1"])
        assert result.exit_code == 2
        assert "k must be a non-negative integer" in result.output

    def test_negative_k_demo(self, runner):
        result = runner.invoke(main, ["--demo", "-1"])
        assert result.exit_code == 2
        assert "k must be a non-negative integer" in result.output

    def test_no_arguments(self, runner):
        result = runner.invoke(main, [])
        assert result.exit_code == 2
        assert "Missing argument" in result.output

    def test_demo_with_file(self, runner, log_file):
        result = runner.invoke(main, ["--demo", str(log_file), "2"])
        assert result.exit_code == 2
        assert "cannot be combined with --demo" in result.output

    def test_undecodable_file(self, runner, tmp_path):
        bad = tmp_path / "bad.log"
        bad.write_bytes(b"error \xff disk\n")
        result = runner.invoke(main, [str(bad), "2"])
        assert result.exit_code == 1
        assert "not valid utf-8" in result.output

    def test_bad_env_k(self, runner, log_file, monkeypatch):
        monkeypatch.setenv(ENV_K, "lots")
        result = runner.invoke(main, [str(log_file), "2"])
        assert result.exit_code == 1
        assert ENV_K in result.output


class TestFormatResult:
    """Test output rendering."""

    def test_list(self):
        assert format_result([("a", 2)], "list") == "[('a', 2)]"

    def test_table_empty(self):
        assert format_result([], "table") == ""

    def test_json(self):
        assert format_result([("a", 2), ("b", 1)], "json") == '[["a", 2], ["b", 1]]'


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
