"""
Monkey REPL
===========

A read-lex-print loop: each line typed at the prompt is run through the
lexer and its tokens are printed one per line. Useful for checking how a
snippet of Monkey source is split up.

Example session:
    >> let add = fn(x, y) { x + y };
    Token(LET, 'let')
    Token(IDENT, 'add')
    Token(ASSIGN, '=')
    ...
"""

import logging
from typing import Optional, TextIO

from monkey.config import get_default_config
from monkey.lexer import Lexer
from monkey.token import TokenType

logger = logging.getLogger(__name__)


def start(input_stream: TextIO, output_stream: TextIO, prompt: Optional[str] = None) -> int:
    """
    Run the REPL until the input stream is exhausted.

    Args:
        input_stream: Where lines are read from
        output_stream: Where the prompt and tokens are written
        prompt: Prompt text (default: from configuration)

    Returns:
        Number of lines processed
    """
    if prompt is None:
        prompt = get_default_config().prompt

    lines = 0
    while True:
        output_stream.write(prompt)
        output_stream.flush()

        line = input_stream.readline()
        if not line:
            break

        lines += 1
        for token in Lexer(line):
            if token.type is TokenType.EOF:
                break
            output_stream.write(f"{token!r}\n")

    logger.debug(f"REPL finished after {lines} lines")
    return lines
