"""
Decaf Scanner Package

Lexical analysis for Decaf, a small C-like teaching language.

Architecture:
    decaf/
    ├── lexer/           # Tokenization and lexical analysis
    └── cli.py           # Command line driver (file or interactive stdin)

Author: xwest
License: MIT
"""

__version__ = "0.1.0"
__author__ = "xwest"
__license__ = "MIT"

from .lexer import Lexer, scan

__all__ = [
    # Core API
    "Lexer",
    "scan",

    # Version info
    "__version__",
    "__author__",
    "__license__",
]
