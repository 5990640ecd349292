"""Tests for the slyce command line."""

import json
import logging

import pytest
from click.testing import CliRunner
from slyce.__main__ import main


@pytest.fixture
def runner():
    return CliRunner()


class TestCli:
    def test_slices_stdin(self, runner):
        result = runner.invoke(main, ["[1:-1]"], input="[1, 2, 3, 4]")
        assert result.exit_code == 0
        assert result.output == "[2, 3]\n"

    def test_reverse(self, runner):
        result = runner.invoke(main, ["[::-2]"], input="[1, 2, 3, 4, 5]")
        assert result.exit_code == 0
        assert json.loads(result.output) == [5, 3, 1]

    def test_mixed_json_values(self, runner):
        result = runner.invoke(main, ["[-2:]"], input='["a", {"b": 1}, null]')
        assert result.exit_code == 0
        assert json.loads(result.output) == [{"b": 1}, None]

    def test_input_file(self, runner, tmp_path):
        path = tmp_path / "data.json"
        path.write_text("[10, 20, 30, 40, 50]")
        result = runner.invoke(main, ["[-3::-1]", "--input", str(path)])
        assert result.exit_code == 0
        assert json.loads(result.output) == [30, 20, 10]

    def test_zero_step(self, runner):
        result = runner.invoke(main, ["[::0]"], input="[1, 2]")
        assert result.exit_code != 0
        assert "slice step cannot be zero" in result.output

    def test_malformed_expression(self, runner):
        result = runner.invoke(main, ["[1]"], input="[1, 2]")
        assert result.exit_code != 0
        assert "expected [start:end:step]" in result.output

    def test_invalid_json(self, runner):
        result = runner.invoke(main, ["[:]"], input="[1, 2")
        assert result.exit_code != 0
        assert "invalid JSON input" in result.output

    def test_not_an_array(self, runner):
        result = runner.invoke(main, ["[:]"], input='{"a": 1}')
        assert result.exit_code != 0
        assert "expected a JSON array" in result.output

    def test_verbose_logs_slice_and_length(self, runner, caplog):
        caplog.set_level(logging.DEBUG, logger="slyce.__main__")
        result = runner.invoke(main, ["[:]", "--verbose"], input="[1]")
        assert result.exit_code == 0
        assert json.loads(result.output.splitlines()[-1]) == [1]
        assert "parsed [:]" in caplog.text
        assert "slicing 1 elements" in caplog.text
