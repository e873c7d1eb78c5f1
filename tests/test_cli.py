"""Tests for the command-line interface."""

import json

import pytest
from click.testing import CliRunner

from sqlrecognizer.cli import cli


class TestCLI:
    """Test cases for the sql-recognizer command."""

    @pytest.fixture
    def runner(self):
        """Create a click test runner."""
        return CliRunner()

    def test_recognize_json(self, runner):
        """Test JSON output for a multi-row INSERT."""
        sql = "INSERT INTO t1 (name1, name2) VALUES ('a', ?), ('b', null)"
        result = runner.invoke(cli, ["recognize", "--sql", sql, "-o", "json", "-k", "0"])

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["table_name"] == "t1"
        assert data["insert_columns"] == ["name1", "name2"]
        assert data["primary_key_positions"] == [0]
        assert data["insert_rows"] == [
            [{"kind": "LITERAL", "value": "a"}, {"kind": "PLACEHOLDER", "index": 0}],
            [{"kind": "LITERAL", "value": "b"}, {"kind": "NULL"}]
        ]

    def test_recognize_from_file(self, runner, tmp_path):
        """Test reading the statement from a file."""
        sql_file = tmp_path / "insert.sql"
        sql_file.write_text("insert into t values (1)")

        result = runner.invoke(cli, ["recognize", "--file", str(sql_file), "-o", "json"])

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["insert_columns"] is None
        assert data["insert_rows"] == [[{"kind": "LITERAL", "value": 1}]]

    def test_recognize_json_to_file(self, runner, tmp_path):
        """Test writing JSON output to a file."""
        output_file = tmp_path / "out.json"
        result = runner.invoke(cli, [
            "recognize", "--sql", "insert into t(a) values (1)", "-o", "json", "-F", str(output_file)
        ])

        assert result.exit_code == 0
        assert json.loads(output_file.read_text())["table_name"] == "t"

    def test_recognize_console(self, runner):
        """Test the rich console output."""
        result = runner.invoke(cli, ["recognize", "--sql", "insert into t(a) values (1)"])

        assert result.exit_code == 0
        assert "SQL Recognition Results" in result.output

    def test_recognize_compact(self, runner):
        """Test the compact output."""
        result = runner.invoke(cli, ["recognize", "--sql", "insert into t(a) values (1)", "-o", "compact"])

        assert result.exit_code == 0
        assert "INSERT" in result.output

    def test_recognition_failure_exits_with_error(self, runner):
        """Test that an unsupported INSERT shape reports an error."""
        result = runner.invoke(cli, ["recognize", "--sql", "insert into t(a) select a from s", "-o", "json"])

        assert result.exit_code == 1
        assert json.loads(result.output)["errors"]

    def test_missing_input(self, runner):
        """Test that a statement is required."""
        result = runner.invoke(cli, ["recognize"])
        assert result.exit_code == 1

    def test_both_inputs(self, runner, tmp_path):
        """Test that --sql and --file are exclusive."""
        sql_file = tmp_path / "insert.sql"
        sql_file.write_text("insert into t values (1)")

        result = runner.invoke(cli, ["recognize", "--sql", "insert into t values (1)", "--file", str(sql_file)])
        assert result.exit_code == 1

    def test_unsupported_dialect(self, runner):
        """Test that only dialects with a recognizer are accepted."""
        result = runner.invoke(cli, ["recognize", "--sql", "insert into t values (1)", "--dialect", "oracle"])

        assert result.exit_code == 1
        assert "Unsupported dialect" in result.output

    def test_dialects(self, runner):
        """Test listing dialects."""
        result = runner.invoke(cli, ["dialects"])

        assert result.exit_code == 0
        assert result.output.split() == ["mariadb", "mysql", "postgresql"]

    def test_multiple_statements_rejected(self, runner):
        """Test that only one statement is recognized per call."""
        result = runner.invoke(cli, [
            "recognize", "--sql", "insert into t values (1); insert into t values (2)", "-o", "json"
        ])

        assert result.exit_code == 1
        assert "exactly one statement" in result.output

    def test_non_insert_rejected(self, runner):
        """Test that statements other than INSERT are refused before recognition."""
        result = runner.invoke(cli, ["recognize", "--sql", "select a from t", "-o", "json"])

        assert result.exit_code == 1
        assert "Only INSERT statements" in result.output
