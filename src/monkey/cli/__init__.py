"""
Monkey Command-Line Interface
=============================

This package provides the ``monkey`` command-line tool:

- **monkey lex**: tokenize a source file and list its tokens
- **monkey repl**: interactive read-lex-print loop

The tool is a Click-based command group with shared options for
verbosity and version reporting.
"""

__all__ = ["monkey"]
