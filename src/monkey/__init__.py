"""
Monkey - Lexer for the Monkey Programming Language
==================================================

This package turns Monkey source text into the flat token sequence a
parser consumes. It contains no parser or evaluator of its own.

Main Components
---------------
- **token**: token types, the Token value and the reserved-word table
- **lexer**: the Lexer, a single forward-only cursor over the source
- **repl**: read-lex-print loop for trying the lexer interactively
- **cli**: the ``monkey`` command-line tool (``monkey lex``, ``monkey repl``)

Quick Start
-----------
Tokenize a string:
    >>> from monkey import Lexer, TokenType
    >>> lexer = Lexer("let x = 5;")
    >>> lexer.next_token()
    Token(LET, 'let')

Collect every token at once:
    >>> from monkey import tokenize
    >>> [t.type.name for t in tokenize("5 @ 3")]
    ['INT', 'ILLEGAL', 'INT', 'EOF']

Or use the command-line tool:
    $ monkey lex program.monkey
    $ monkey repl
"""

__version__ = "1.0.0"

# =============================================================================
# Public API Exports
# =============================================================================

from monkey.errors import (
    MonkeyError,
    LexerError,
    IllegalCharacterError,
    ConfigError,
)
from monkey.token import (
    KEYWORDS,
    Token,
    TokenType,
    lookup_ident,
)
from monkey.lexer import Lexer, tokenize
from monkey.config import MonkeyConfig, get_default_config, set_default_config

__all__ = [
    "__version__",
    # Errors
    "MonkeyError",
    "LexerError",
    "IllegalCharacterError",
    "ConfigError",
    # Tokens
    "KEYWORDS",
    "Token",
    "TokenType",
    "lookup_ident",
    # Lexer
    "Lexer",
    "tokenize",
    # Configuration
    "MonkeyConfig",
    "get_default_config",
    "set_default_config",
]
