"""
Monkey Lexer (Tokenizer)
========================

This module implements the lexer for the Monkey language. It converts
source text into a stream of tokens for the parser.

The lexer keeps a single forward-only cursor over the source: ``position``
points at the character under examination (``ch``) and ``read_position``
at the next one to read. Each call to ``next_token`` skips whitespace,
classifies ``ch`` and returns exactly one token.

Token Rules
-----------
- Whitespace (space, tab, newline, carriage return) separates tokens
- Symbols ``= + , ; ( ) { }`` are single-character tokens
- Identifiers are runs of ASCII letters and underscores; digits end them
- Integers are runs of ASCII digits; no sign, decimal point or prefix
- Reserved words (``fn``, ``let``) are identifiers found in the keyword table
- Any other character becomes an ILLEGAL token and scanning continues

Example Usage
-------------
>>> from monkey.lexer import Lexer
>>> lexer = Lexer("let five = 5;")
>>> for token in lexer.tokenize():
...     print(token)
Token(LET, 'let')
Token(IDENT, 'five')
Token(ASSIGN, '=')
Token(INT, '5')
Token(SEMICOLON, ';')
Token(EOF, '')
"""

import logging
import string
from typing import Iterator, Mapping

from monkey.errors import IllegalCharacterError
from monkey.token import (
    KEYWORDS,
    SINGLE_CHAR_TOKENS,
    Token,
    TokenType,
    lookup_ident,
)

logger = logging.getLogger(__name__)


# Value of ``ch`` once the cursor has run past the end of the source.
# No character of a str can be empty, so it never collides with input.
EOF_CHAR = ""

WHITESPACE = frozenset(" \t\n\r")
LETTERS = frozenset(string.ascii_letters + "_")
DIGITS = frozenset(string.digits)


def is_letter(ch: str) -> bool:
    """Return True if ch can appear in an identifier (a-z, A-Z, _)."""
    return ch in LETTERS


def is_digit(ch: str) -> bool:
    """Return True if ch is an ASCII decimal digit."""
    return ch in DIGITS


# =============================================================================
# Lexer Implementation
# =============================================================================

class Lexer:
    """
    Tokenizes Monkey source code.

    The lexer never raises while scanning: characters it does not
    recognise come back as ILLEGAL tokens and the consumer decides
    whether they are fatal. Once the input is exhausted every further
    call to ``next_token`` returns EOF.

    Usage:
        lexer = Lexer(source_text)
        tokens = list(lexer.tokenize())

    Attributes:
        source: The source code being tokenized
        position: Index of the character under examination
        read_position: Index of the next character to read
        ch: Character at ``position``, or EOF_CHAR past the end
    """

    def __init__(self, source: str, keywords: Mapping[str, TokenType] = KEYWORDS):
        """
        Initialize the lexer and load the first character.

        Args:
            source: The Monkey source code to tokenize
            keywords: Read-only reserved-word table
        """
        if not isinstance(source, str):
            raise TypeError(f"source must be str, not {type(source).__name__}")

        self.source = source
        self._keywords = keywords

        self.position = 0
        self.read_position = 0
        self.ch = EOF_CHAR

        self._read_char()
        logger.debug(f"Lexer created for {len(source)} characters of input")

    # =========================================================================
    # Public Interface
    # =========================================================================

    @property
    def at_end(self) -> bool:
        """True once the cursor has moved past the last character."""
        return self.position >= len(self.source)

    def next_token(self) -> Token:
        """
        Scan and return the next token.

        Identifiers and integers are read by a loop that leaves the cursor
        just past the run, so they return early. Every other branch
        consumes exactly one character before returning, except EOF which
        consumes nothing.
        """
        self._skip_whitespace()

        ch = self.ch

        if ch in SINGLE_CHAR_TOKENS:
            token = Token(SINGLE_CHAR_TOKENS[ch], ch)
        elif ch == EOF_CHAR:
            return Token(TokenType.EOF, "")
        elif is_letter(ch):
            literal = self._read_identifier()
            return Token(lookup_ident(literal, self._keywords), literal)
        elif is_digit(ch):
            return Token(TokenType.INT, self._read_number())
        else:
            token = Token(TokenType.ILLEGAL, ch)

        self._read_char()
        return token

    def tokenize(self, strict: bool = False) -> Iterator[Token]:
        """
        Generate tokens up to and including EOF.

        Args:
            strict: Raise on the first illegal character instead of
                yielding an ILLEGAL token

        Yields:
            Token objects in source order, ending with EOF

        Raises:
            IllegalCharacterError: In strict mode, on an unrecognised character
        """
        count = 0
        while True:
            token = self.next_token()

            if strict and token.type is TokenType.ILLEGAL:
                raise self._illegal_character(token.literal, self.position - 1)

            yield token
            count += 1

            if token.type is TokenType.EOF:
                logger.debug(f"Tokenized input into {count} tokens")
                return

    def __iter__(self) -> Iterator[Token]:
        return self.tokenize()

    # =========================================================================
    # Cursor Movement
    # =========================================================================

    def _read_char(self) -> None:
        """Move the cursor forward one character."""
        if self.read_position >= len(self.source):
            self.ch = EOF_CHAR
            # Pin the cursor so repeated EOF reads do not drift
            self.position = len(self.source)
            self.read_position = self.position + 1
            return

        self.ch = self.source[self.read_position]
        self.position = self.read_position
        self.read_position += 1

    def _skip_whitespace(self) -> None:
        while self.ch in WHITESPACE:
            self._read_char()

    # =========================================================================
    # Run Scanning
    # =========================================================================

    def _read_identifier(self) -> str:
        """Read a maximal run of letters starting at the cursor."""
        start = self.position
        while is_letter(self.ch):
            self._read_char()
        return self.source[start:self.position]

    def _read_number(self) -> str:
        """Read a maximal run of digits starting at the cursor."""
        start = self.position
        while is_digit(self.ch):
            self._read_char()
        return self.source[start:self.position]

    # =========================================================================
    # Utility Methods
    # =========================================================================

    def _illegal_character(self, char: str, offset: int) -> IllegalCharacterError:
        """Build an IllegalCharacterError with the offending source line."""
        line_start = self.source.rfind("\n", 0, offset) + 1
        line_end = self.source.find("\n", offset)
        if line_end == -1:
            line_end = len(self.source)

        return IllegalCharacterError(
            char,
            offset,
            source_line=self.source[line_start:line_end],
            column=offset - line_start,
        )


def tokenize(source: str, strict: bool = False) -> list[Token]:
    """
    Tokenize a complete source string.

    Args:
        source: Monkey source code
        strict: Raise IllegalCharacterError on unrecognised characters

    Returns:
        All tokens in order, ending with EOF
    """
    return list(Lexer(source).tokenize(strict=strict))
