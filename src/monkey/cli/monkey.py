"""
monkey - Monkey Lexer Command-Line Interface
============================================

This module implements the command-line interface for the Monkey lexer.

Usage Examples
--------------
List the tokens of a file:
    $ monkey lex program.monkey

Read from standard input:
    $ echo 'let x = 5;' | monkey lex

JSON output to a file:
    $ monkey lex program.monkey --format json -o tokens.json

Fail on the first illegal character:
    $ monkey lex program.monkey --strict

Interactive session:
    $ monkey repl

Environment
-----------
MONKEY_PROMPT, MONKEY_OUTPUT_FORMAT, MONKEY_STRICT and MONKEY_LOG_LEVEL
provide defaults; command-line options take precedence.

Exit Codes
----------
0 - Success
1 - Illegal character (with --strict)
2 - Invalid arguments, unreadable files or invalid MONKEY_* settings
3 - Internal error
"""

import json
import logging
import sys
import traceback
from enum import IntEnum
from pathlib import Path
from typing import NoReturn, Optional, TextIO

import click

from monkey import __version__
from monkey.config import OUTPUT_FORMATS, MonkeyConfig, get_default_config
from monkey.errors import ConfigError, LexerError
from monkey.lexer import Lexer
from monkey.repl import start
from monkey.token import Token

logger = logging.getLogger(__name__)

# Source files are read one character per byte. ASCII text is unchanged
# and every high-bit byte reaches the lexer as its own ILLEGAL character.
SOURCE_ENCODING = "latin-1"


class ExitCode(IntEnum):
    """Exit codes of the monkey tool."""
    SUCCESS = 0
    REJECTED_INPUT = 1   # Illegal character under --strict
    BAD_SETUP = 2        # Bad arguments, unreadable files, bad MONKEY_* values
    INTERNAL_ERROR = 3   # Bug in the tool itself


def exit_with_error(error: Exception, verbose: bool = False) -> NoReturn:
    """
    Report an error raised by a command and exit with its ExitCode.

    Lexer errors print their own formatted message (offset, source line,
    caret and hint). Anything unexpected is an internal error and gets a
    traceback in verbose mode.
    """
    if isinstance(error, LexerError):
        click.echo(str(error), err=True)
        sys.exit(ExitCode.REJECTED_INPUT)

    if isinstance(error, ConfigError):
        click.echo(f"Configuration error: {error}", err=True)
        sys.exit(ExitCode.BAD_SETUP)

    if isinstance(error, (click.BadParameter, OSError)):
        click.echo(f"Error: {error}", err=True)
        sys.exit(ExitCode.BAD_SETUP)

    click.echo(f"Internal error: {error}", err=True)
    if verbose:
        traceback.print_exc()
    sys.exit(ExitCode.INTERNAL_ERROR)


# =============================================================================
# CLI Context and Utilities
# =============================================================================

class Context:
    """
    Shared context for CLI commands.

    Stores the verbosity flag and the configuration loaded from the
    environment.
    """

    def __init__(self) -> None:
        self.verbose: bool = False
        self.config: MonkeyConfig = MonkeyConfig()

    def setup_logging(self) -> None:
        """Configure logging based on verbosity and configured level."""
        level = logging.DEBUG if self.verbose else self.config.log_level_number
        logging.basicConfig(
            level=level,
            format="%(levelname)s: %(message)s" if self.verbose else "%(message)s",
        )


pass_context = click.make_pass_decorator(Context, ensure=True)


def format_tokens(tokens: list[Token], output_format: str) -> str:
    """
    Render a token list for output.

    Args:
        tokens: Tokens to render, EOF included
        output_format: "text" (one "TYPE literal" per line) or "json"
    """
    if output_format == "json":
        return json.dumps([token.to_dict() for token in tokens], indent=2) + "\n"

    lines = [f"{token.type.name} {token.literal}".rstrip() for token in tokens]
    return "\n".join(lines) + "\n"


# =============================================================================
# Main CLI Group
# =============================================================================

@click.group()
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Enable verbose output",
)
@click.version_option(version=__version__, prog_name="monkey")
@pass_context
def main(ctx: Context, verbose: bool) -> None:
    """
    Tokenize Monkey source code.

    Use 'monkey lex' to list the tokens of a file and 'monkey repl' to
    try the lexer interactively.
    """
    ctx.verbose = verbose
    try:
        ctx.config = get_default_config()
    except Exception as e:
        exit_with_error(e, verbose=verbose)
    ctx.setup_logging()


# =============================================================================
# Lex Command
# =============================================================================

@main.command()
@click.argument(
    "input_file",
    type=click.File("r", encoding=SOURCE_ENCODING),
    default="-",
)
@click.option(
    "-o", "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Output file (default: stdout)",
)
@click.option(
    "-f", "--format",
    "output_format",
    type=click.Choice(OUTPUT_FORMATS),
    default=None,
    help="Output format (default: text, or MONKEY_OUTPUT_FORMAT)",
)
@click.option(
    "--strict/--no-strict",
    default=None,
    help="Exit with an error on the first illegal character",
)
@pass_context
def lex(
    ctx: Context,
    input_file: TextIO,
    output: Optional[Path],
    output_format: Optional[str],
    strict: Optional[bool],
) -> None:
    """
    List the tokens of a Monkey source file.

    INPUT_FILE is the source to tokenize; omit it or pass '-' to read
    standard input.

    Examples:

        monkey lex program.monkey

        monkey lex program.monkey --format json -o tokens.json
    """
    if output_format is None:
        output_format = ctx.config.output_format
    if strict is None:
        strict = ctx.config.strict

    try:
        source = input_file.read()
        if ctx.verbose:
            click.echo(f"Input: {input_file.name} ({len(source)} characters)", err=True)

        tokens = list(Lexer(source).tokenize(strict=strict))
        result = format_tokens(tokens, output_format)

        if output:
            output.write_text(result, encoding="utf-8")
            if ctx.verbose:
                click.echo(f"Output written to: {output}", err=True)
        else:
            click.echo(result, nl=False)

        if ctx.verbose:
            click.echo(f"Tokens: {len(tokens)}", err=True)

    except Exception as e:
        exit_with_error(e, verbose=ctx.verbose)


# =============================================================================
# REPL Command
# =============================================================================

@main.command()
@click.option(
    "--prompt",
    type=str,
    default=None,
    help="Prompt text (default: '>> ', or MONKEY_PROMPT)",
)
@pass_context
def repl(ctx: Context, prompt: Optional[str]) -> None:
    """
    Start an interactive read-lex-print loop.

    Each line entered is tokenized and its tokens are printed. End the
    session with Ctrl-D (Ctrl-Z on Windows).
    """
    if prompt is None:
        prompt = ctx.config.prompt

    click.echo(f"Monkey lexer {__version__}. Type some source; Ctrl-D to exit.")
    try:
        lines = start(sys.stdin, sys.stdout, prompt=prompt)
    except Exception as e:
        exit_with_error(e, verbose=ctx.verbose)

    click.echo()
    logger.info(f"Processed {lines} lines")


if __name__ == "__main__":
    main()
