"""
Monkey Error Hierarchy
======================

This module defines the exception hierarchy for the Monkey lexer package.
All exceptions inherit from MonkeyError, allowing callers to catch every
package-related error with a single except clause.

Exception Hierarchy
-------------------
MonkeyError (base)
├── LexerError - problem found while tokenizing
│   └── IllegalCharacterError - unrecognised character (strict mode only)
└── ConfigError - invalid configuration value

Note that the lexer itself never raises: an unrecognised character becomes
an ILLEGAL token. IllegalCharacterError exists for consumers that ask for
strict tokenization and want the first illegal character to be fatal.

Error messages follow this format:
    offset N: error: description
        source_line_text
        ^ (pointer to error offset)
    hint: suggestion for fixing (when available)
"""

from typing import Optional


# =============================================================================
# Base Exception Class
# =============================================================================

class MonkeyError(Exception):
    """
    Base exception for all Monkey package errors.

        try:
            tokens = tokenize(source, strict=True)
        except MonkeyError as e:
            print(f"Error: {e}")
    """
    pass


# =============================================================================
# Lexer Exceptions
# =============================================================================

class LexerError(MonkeyError):
    """
    Base exception for lexer-related errors.

    Attributes:
        message: The error description
        offset: Character offset into the source (optional)
        hint: A suggestion for fixing the error (optional)
        source_line: The line of source containing the offset (optional)
        column: Zero-based position of the offset within source_line
    """

    def __init__(
        self,
        message: str,
        offset: Optional[int] = None,
        hint: Optional[str] = None,
        source_line: Optional[str] = None,
        column: int = 0,
    ):
        self.message = message
        self.offset = offset
        self.hint = hint
        self.source_line = source_line
        self.column = column
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """
        Format the error message with offset, source context, and hint.

        Example output:
            offset 2: error: illegal character '@'
                5 @ 3
                  ^
            hint: remove the character or replace it with a valid symbol
        """
        parts = []

        if self.offset is not None:
            parts.append(f"offset {self.offset}: error: {self.message}")
        else:
            parts.append(f"error: {self.message}")

        if self.source_line is not None:
            parts.append(f"    {self.source_line}")
            parts.append(" " * (4 + self.column) + "^")

        if self.hint:
            parts.append(f"hint: {self.hint}")

        return "\n".join(parts)


class IllegalCharacterError(LexerError):
    """
    Unrecognised character found during strict tokenization.

    Attributes:
        char: The offending character
    """

    def __init__(
        self,
        char: str,
        offset: Optional[int] = None,
        source_line: Optional[str] = None,
        column: int = 0,
    ):
        self.char = char
        super().__init__(
            f"illegal character {char!r}",
            offset,
            hint="remove the character or replace it with a valid symbol",
            source_line=source_line,
            column=column,
        )


# =============================================================================
# Configuration Exceptions
# =============================================================================

class ConfigError(MonkeyError):
    """
    Invalid configuration value.

    Attributes:
        name: The setting (usually an environment variable) at fault
        value: The rejected value
    """

    def __init__(self, name: str, value: str, expected: str):
        self.name = name
        self.value = value
        super().__init__(f"invalid value {value!r} for {name}: expected {expected}")
