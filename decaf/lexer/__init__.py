"""
Decaf Lexer Package

Implements the lexical analyzer (scanner) for the Decaf teaching language.

Key Features:
- Priority-ordered lexical rules with keyword lookahead guards
- Decimal, hexadecimal, boolean, character and string literals
- Escape sequence decoding for character and string literals
- Whitespace, line comment and block comment skipping
- Caret diagnostics anchored at the failing source position

Author: xwest
"""

from .tokens import Token, TokenType, SourceLocation
from .lexer import Lexer, ScanResult, scan, scan_file, tokenize_string, tokenize_file
from .errors import Diagnostic, LexerError, ERROR_CODES
from .source import SourceText
from .emitter import format_token, format_tokens, format_error, format_result

__all__ = [
    "Lexer",
    "Token",
    "TokenType",
    "SourceLocation",
    "SourceText",
    "ScanResult",
    "Diagnostic",
    "LexerError",
    "ERROR_CODES",
    "scan",
    "scan_file",
    "tokenize_string",
    "tokenize_file",
    "format_token",
    "format_tokens",
    "format_error",
    "format_result",
]
