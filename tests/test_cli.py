"""
Tests for pl0parse - PL/0 Recognizer CLI
========================================

These tests drive the click command through CliRunner with source
files written to a temporary directory.
"""

from click.testing import CliRunner

import pytest

from pl0.cli.pl0parse import main
from pl0.cli.errors import ExitCode


@pytest.fixture
def runner():
    return CliRunner()


def write(tmp_path, name: str, text: str):
    path = tmp_path / name
    path.write_text(text)
    return path


class TestPl0ParseCLI:
    """Tests for the pl0parse CLI tool."""

    def test_cli_help(self, runner):
        result = runner.invoke(main, ["--help"])
        assert result.exit_code == 0
        assert "Check the syntax of a PL/0 program" in result.output

    def test_cli_version(self, runner):
        result = runner.invoke(main, ["--version"])
        assert result.exit_code == 0
        assert "1.0.0" in result.output

    def test_accepted_program(self, runner, tmp_path):
        source = write(tmp_path, "ok.pl0", "const a = 5; var x; begin x := a + 1 end.")
        result = runner.invoke(main, [str(source)])

        assert result.exit_code == ExitCode.SUCCESS
        assert result.output.startswith("Parsing History\n")
        assert "Symbol Table" in result.output
        assert result.output.rstrip().endswith("PARSING WAS SUCCESSFUL.")

    def test_rejected_program(self, runner, tmp_path):
        source = write(tmp_path, "bad.pl0", "if x then x := 1.")
        result = runner.invoke(main, [str(source)])

        assert result.exit_code == ExitCode.SYNTAX_ERROR
        assert "PARSING ERROR[12]: Relational operator expected." in result.output
        assert "Symbol Table" not in result.output

    def test_output_file(self, runner, tmp_path):
        source = write(tmp_path, "ok.pl0", "var x; read x.")
        trace = tmp_path / "ok.trace"
        result = runner.invoke(main, [str(source), "-o", str(trace)])

        assert result.exit_code == 0
        assert "Wrote trace to" in result.output
        assert trace.read_text().endswith("PARSING WAS SUCCESSFUL.\n")

    def test_no_symbols(self, runner, tmp_path):
        source = write(tmp_path, "ok.pl0", "var x; .")
        result = runner.invoke(main, [str(source), "--no-symbols"])
        assert result.exit_code == 0
        assert "Symbol Table" not in result.output

    def test_lexeme_list_input(self, runner, tmp_path):
        lexemes = write(tmp_path, "lex.txt", "29 2 x 18 2 x 20 3 1 19\n")
        result = runner.invoke(main, ["--lexeme-list", str(lexemes)])
        assert result.exit_code == 0
        assert "TOKEN  : <becomessym, ':='>" in result.output

    def test_tokens_only(self, runner, tmp_path):
        source = write(tmp_path, "ok.pl0", "var x;")
        result = runner.invoke(main, ["--tokens", str(source)])

        assert result.exit_code == 0
        assert "29 2 x 18" in result.output
        assert "Parsing History" not in result.output

    def test_lexer_error(self, runner, tmp_path):
        source = write(tmp_path, "bad.pl0", "x := 1 # 2.")
        result = runner.invoke(main, [str(source)])
        assert result.exit_code == ExitCode.SYNTAX_ERROR
        assert "invalid character '#'" in result.output

    def test_bad_lexeme_list(self, runner, tmp_path):
        lexemes = write(tmp_path, "lex.txt", "29 2")
        result = runner.invoke(main, ["-l", str(lexemes)])
        assert result.exit_code == ExitCode.SYNTAX_ERROR

    def test_missing_file(self, runner, tmp_path):
        result = runner.invoke(main, [str(tmp_path / "nope.pl0")])
        assert result.exit_code == 2

    def test_non_digit_number_in_lexeme_list(self, runner, tmp_path):
        lexemes = write(tmp_path, "lex.txt", "28 2 a 9 3 abc 18 19")
        result = runner.invoke(main, ["-l", str(lexemes)])

        assert result.exit_code == ExitCode.SYNTAX_ERROR
        assert "not a valid number lexeme" in result.output
        assert "Internal error" not in result.output
