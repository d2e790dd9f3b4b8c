"""
Monkey Token Definitions
========================

This module defines the vocabulary shared by the lexer and any parser
built on top of it: the closed set of token types, the immutable token
value, and the reserved-word table used to tell keywords apart from
ordinary identifiers.

Token Categories
----------------
- Special: ILLEGAL (unrecognised character), EOF (end of input)
- Identifiers and literals: IDENT, INT
- Operators: = +
- Delimiters: , ; ( ) { }
- Keywords: fn, let

Example Usage
-------------
>>> from monkey.token import Token, TokenType, lookup_ident
>>> lookup_ident("let")
<TokenType.LET: 'LET'>
>>> lookup_ident("five")
<TokenType.IDENT: 'IDENT'>
>>> Token(TokenType.ASSIGN, "=")
Token(ASSIGN, '=')
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping


# =============================================================================
# Token Type Enumeration
# =============================================================================

class TokenType(Enum):
    """
    Token types for the Monkey language.

    The value of each member is its canonical spelling: the symbol itself
    for operators and delimiters, the upper-case name otherwise.
    """

    # === Special ===
    ILLEGAL = "ILLEGAL"     # Character the lexer does not recognise
    EOF = "EOF"             # End of input

    # === Identifiers and Literals ===
    IDENT = "IDENT"         # add, foobar, x, y, ...
    INT = "INT"             # 1343456

    # === Operators ===
    ASSIGN = "="
    PLUS = "+"

    # === Delimiters ===
    COMMA = ","
    SEMICOLON = ";"
    LPAREN = "("
    RPAREN = ")"
    LBRACE = "{"
    RBRACE = "}"

    # === Keywords ===
    FUNCTION = "FUNCTION"   # fn
    LET = "LET"             # let


# =============================================================================
# Lookup Tables
# =============================================================================

# Reserved words. Wrapped in a read-only proxy so the table can be shared
# by every lexer without any of them being able to alter it.
KEYWORDS: Mapping[str, TokenType] = MappingProxyType({
    "fn": TokenType.FUNCTION,
    "let": TokenType.LET,
})

# Characters that form a complete token on their own
SINGLE_CHAR_TOKENS: Mapping[str, TokenType] = MappingProxyType({
    "=": TokenType.ASSIGN,
    ";": TokenType.SEMICOLON,
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    ",": TokenType.COMMA,
    "+": TokenType.PLUS,
    "{": TokenType.LBRACE,
    "}": TokenType.RBRACE,
})


def lookup_ident(ident: str, keywords: Mapping[str, TokenType] = KEYWORDS) -> TokenType:
    """
    Resolve an identifier-shaped word to its token type.

    Args:
        ident: A run of letters read by the lexer
        keywords: Reserved-word table to consult

    Returns:
        The keyword's type on an exact (case-sensitive) match, IDENT otherwise
    """
    return keywords.get(ident, TokenType.IDENT)


# =============================================================================
# Token Data Class
# =============================================================================

@dataclass(frozen=True)
class Token:
    """
    A single lexical unit.

    Attributes:
        type: The TokenType classification
        literal: The exact source text that produced the token
            (empty for EOF)
    """
    type: TokenType
    literal: str

    def __repr__(self) -> str:
        """Format token for debugging output."""
        return f"Token({self.type.name}, {self.literal!r})"

    def to_dict(self) -> dict[str, str]:
        """Return a JSON-friendly representation."""
        return {"type": self.type.name, "literal": self.literal}
