# =============================================================================
# test_cli.py - Command-Line Interface Tests
# =============================================================================
# Tests for the `monkey` command group (lex and repl).
# =============================================================================

import json

from click.testing import CliRunner

from monkey import __version__
from monkey.cli.monkey import ExitCode, main


class TestMonkeyCLI:
    """Tests for the top-level command group."""

    def test_cli_help(self):
        """Test CLI help output."""
        runner = CliRunner()
        result = runner.invoke(main, ["--help"])

        assert result.exit_code == 0
        assert "Tokenize Monkey source code" in result.output

    def test_cli_version(self):
        """Test CLI version output."""
        runner = CliRunner()
        result = runner.invoke(main, ["--version"])

        assert result.exit_code == 0
        assert __version__ in result.output

    def test_invalid_configuration(self, monkeypatch):
        """A bad environment value is reported as a setup error."""
        monkeypatch.setenv("MONKEY_OUTPUT_FORMAT", "xml")
        runner = CliRunner()
        result = runner.invoke(main, ["lex"], input="x")

        assert result.exit_code == ExitCode.BAD_SETUP
        assert "MONKEY_OUTPUT_FORMAT" in result.output


class TestLexCommand:
    """Tests for `monkey lex`."""

    def test_lex_file(self, tmp_path):
        """Tokens of a file are listed one per line."""
        source = tmp_path / "prog.monkey"
        source.write_text("let five = 5;")

        runner = CliRunner()
        result = runner.invoke(main, ["lex", str(source)])

        assert result.exit_code == 0
        assert result.output.splitlines() == [
            "LET let",
            "IDENT five",
            "ASSIGN =",
            "INT 5",
            "SEMICOLON ;",
            "EOF",
        ]

    def test_lex_stdin(self):
        """Source is read from stdin when no file is given."""
        runner = CliRunner()
        result = runner.invoke(main, ["lex"], input="fn(x)")

        assert result.exit_code == 0
        assert result.output.splitlines()[0] == "FUNCTION fn"

    def test_lex_json(self):
        """JSON output lists type/literal objects."""
        runner = CliRunner()
        result = runner.invoke(main, ["lex", "--format", "json"], input="5 @ 3")

        assert result.exit_code == 0
        assert json.loads(result.output) == [
            {"type": "INT", "literal": "5"},
            {"type": "ILLEGAL", "literal": "@"},
            {"type": "INT", "literal": "3"},
            {"type": "EOF", "literal": ""},
        ]

    def test_lex_format_from_env(self, monkeypatch):
        """MONKEY_OUTPUT_FORMAT selects the default format."""
        monkeypatch.setenv("MONKEY_OUTPUT_FORMAT", "json")
        runner = CliRunner()
        result = runner.invoke(main, ["lex"], input="x")

        assert result.exit_code == 0
        assert json.loads(result.output)[0] == {"type": "IDENT", "literal": "x"}

    def test_lex_output_file(self, tmp_path):
        """Output can be written to a file."""
        output = tmp_path / "tokens.txt"
        runner = CliRunner()
        result = runner.invoke(main, ["lex", "-o", str(output)], input="x;")

        assert result.exit_code == 0
        assert output.read_text() == "IDENT x\nSEMICOLON ;\nEOF\n"

    def test_lex_illegal_lenient(self):
        """Illegal characters are listed by default."""
        runner = CliRunner()
        result = runner.invoke(main, ["lex"], input="@")

        assert result.exit_code == 0
        assert "ILLEGAL @" in result.output

    def test_lex_strict(self):
        """--strict fails on the first illegal character."""
        runner = CliRunner()
        result = runner.invoke(main, ["lex", "--strict"], input="let x = 5 @ 3;")

        assert result.exit_code == ExitCode.REJECTED_INPUT
        assert "illegal character '@'" in result.output

    def test_lex_strict_from_env(self, monkeypatch):
        """MONKEY_STRICT enables strict mode; --no-strict overrides it."""
        monkeypatch.setenv("MONKEY_STRICT", "1")
        runner = CliRunner()

        result = runner.invoke(main, ["lex"], input="@")
        assert result.exit_code == ExitCode.REJECTED_INPUT

        result = runner.invoke(main, ["lex", "--no-strict"], input="@")
        assert result.exit_code == 0

    def test_lex_missing_file(self, tmp_path):
        """A missing input file is an argument error."""
        runner = CliRunner()
        result = runner.invoke(main, ["lex", str(tmp_path / "nope.monkey")])

        assert result.exit_code == ExitCode.BAD_SETUP

    def test_lex_high_bit_bytes(self, tmp_path):
        """Bytes that are not valid UTF-8 become ILLEGAL tokens."""
        source = tmp_path / "binary.monkey"
        source.write_bytes(b"5 \xff 3")

        runner = CliRunner()
        result = runner.invoke(main, ["lex", "--format", "json", str(source)])

        assert result.exit_code == 0
        assert json.loads(result.output) == [
            {"type": "INT", "literal": "5"},
            {"type": "ILLEGAL", "literal": "\xff"},
            {"type": "INT", "literal": "3"},
            {"type": "EOF", "literal": ""},
        ]

    def test_lex_multibyte_character(self, tmp_path):
        """Each byte of a multi-byte character is its own ILLEGAL token."""
        source = tmp_path / "utf8.monkey"
        source.write_bytes("let x = 5 é 3;".encode("utf-8"))

        runner = CliRunner()
        result = runner.invoke(main, ["lex", "--format", "json", str(source)])

        assert result.exit_code == 0
        illegal = [t["literal"] for t in json.loads(result.output) if t["type"] == "ILLEGAL"]
        assert illegal == ["\xc3", "\xa9"]

    def test_lex_high_bit_bytes_strict(self, tmp_path):
        """Under --strict a high-bit byte is rejected like any illegal character."""
        source = tmp_path / "binary.monkey"
        source.write_bytes(b"let x = 5 \xff 3;")

        runner = CliRunner()
        result = runner.invoke(main, ["lex", "--strict", str(source)])

        assert result.exit_code == ExitCode.REJECTED_INPUT
        assert "offset 10: error: illegal character" in result.output

    def test_lex_verbose(self):
        """Verbose mode reports the token count."""
        runner = CliRunner()
        result = runner.invoke(main, ["-v", "lex"], input="let x = 1;")

        assert result.exit_code == 0
        assert "Tokens: 6" in result.output


class TestReplCommand:
    """Tests for `monkey repl`."""

    def test_repl_session(self):
        """Lines typed at the prompt are tokenized."""
        runner = CliRunner()
        result = runner.invoke(main, ["repl", "--prompt", "> "], input="let x\n")

        assert result.exit_code == 0
        assert "> Token(LET, 'let')" in result.output
        assert "Token(IDENT, 'x')" in result.output

    def test_repl_prompt_from_env(self, monkeypatch):
        """MONKEY_PROMPT sets the default prompt."""
        monkeypatch.setenv("MONKEY_PROMPT", "monkey> ")
        runner = CliRunner()
        result = runner.invoke(main, ["repl"], input="")

        assert result.exit_code == 0
        assert "monkey> " in result.output
