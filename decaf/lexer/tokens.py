"""
Token definitions for the Decaf scanner.

This module defines every token type the scanner can produce:
- Literals (decimal, hexadecimal, boolean, character, string)
- Identifiers and reserved keywords
- Operators (arithmetic, relational, equality, conditional, assignment)
- Punctuation and delimiters

Author: xwest
"""

from enum import Enum
from dataclasses import dataclass


class TokenType(Enum):
    """
    Enumeration of all token types in Decaf.

    Member values are the labels written by the token emitter.
    """

    # ========================================================================
    # Identifiers and Keywords
    # ========================================================================
    IDENTIFIER = "IDENTIFIER"       # x, _tmp, intake
    RESERVED = "RESERVED"           # int, callout, return, ...

    # ========================================================================
    # Literals
    # ========================================================================
    INT_LITERAL = "INTLITERAL"      # 42
    HEX_LITERAL = "HEXLITERAL"      # 0x2A
    BOOL_LITERAL = "BOOLLITERAL"    # true, false
    CHAR_LITERAL = "CHARLITERAL"    # 'a', '\n'
    STRING_LITERAL = "STRINGLITERAL"  # "hello\n"

    # ========================================================================
    # Operators
    # ========================================================================
    ARITH_OP = "ARITHOP"            # + - * / %
    REL_OP = "RELOP"                # < > <= >=
    EQ_OP = "EQOP"                  # == !=
    COND_OP = "CONDOP"              # && ||
    ASSIGN_OP = "ASSIGNOP"          # =

    # ========================================================================
    # Punctuation
    # ========================================================================
    OPEN_CURLY = "OPENCURLY"        # {
    CLOSE_CURLY = "CLOSECURLY"      # }
    COMMA = "COMMA"                 # ,
    SEMICOLON = "SEMICOLON"         # ;
    OPEN_SQUARE = "OPENSQUARE"      # [
    CLOSE_SQUARE = "CLOSESQUARE"    # ]
    OPEN_PAREN = "OPENPAREN"        # (
    CLOSE_PAREN = "CLOSEPAREN"      # )

    @property
    def label(self) -> str:
        return self.value


@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in the source code.

    Used for token positions and error reporting. The filename is empty
    when the source came from standard input.
    """
    filename: str
    line: int
    column: int
    offset: int  # Character offset from start of the unit

    def __str__(self) -> str:
        return f"{self.filename or '<stdin>'}:{self.line}:{self.column}"

    def __repr__(self) -> str:
        return f"SourceLocation({self.filename!r}, {self.line}, {self.column}, {self.offset})"


@dataclass(frozen=True)
class Token:
    """
    Represents a lexical token in the Decaf language.

    ``text`` is the canonical text: the source substring for most tokens,
    "0"/"1" for booleans, and the decoded value for character and string
    literals. ``lexeme`` always holds the raw source substring.
    """
    type: TokenType
    text: str
    lexeme: str
    location: SourceLocation

    @property
    def line(self) -> int:
        return self.location.line

    def __str__(self) -> str:
        if self.text != self.lexeme:
            return f"{self.type.name}({self.lexeme!r} -> {self.text!r})"
        return f"{self.type.name}({self.lexeme!r})"

    def __repr__(self) -> str:
        return (f"Token({self.type.name}, {self.text!r}, "
                f"{self.lexeme!r}, {self.location!r})")

    @property
    def is_literal(self) -> bool:
        """Check if this token is a literal value."""
        return self.type in LITERAL_TYPES

    @property
    def is_operator(self) -> bool:
        """Check if this token is an operator."""
        return self.type in OPERATOR_TYPES

    @property
    def is_keyword(self) -> bool:
        return self.type == TokenType.RESERVED


# Lookup tables used by the lexer

RESERVED_WORDS = (
    "boolean", "break", "callout", "class", "continue", "else",
    "for", "if", "int", "return", "void",
)

BOOLEAN_VALUES = {
    "true": "1",
    "false": "0",
}

# Two-character operators must be tried before their one-character prefixes
TWO_CHAR_OPERATORS = {
    "<=": TokenType.REL_OP,
    ">=": TokenType.REL_OP,
    "==": TokenType.EQ_OP,
    "!=": TokenType.EQ_OP,
    "&&": TokenType.COND_OP,
    "||": TokenType.COND_OP,
}

SINGLE_CHAR_OPERATORS = {
    # Arithmetic
    "+": TokenType.ARITH_OP,
    "-": TokenType.ARITH_OP,
    "*": TokenType.ARITH_OP,
    "/": TokenType.ARITH_OP,
    "%": TokenType.ARITH_OP,

    # Relational
    "<": TokenType.REL_OP,
    ">": TokenType.REL_OP,

    # Assignment
    "=": TokenType.ASSIGN_OP,

    # Punctuation
    "{": TokenType.OPEN_CURLY,
    "}": TokenType.CLOSE_CURLY,
    ",": TokenType.COMMA,
    ";": TokenType.SEMICOLON,
    "[": TokenType.OPEN_SQUARE,
    "]": TokenType.CLOSE_SQUARE,
    "(": TokenType.OPEN_PAREN,
    ")": TokenType.CLOSE_PAREN,
}

ESCAPE_SEQUENCES = {
    'n': '\n',
    '\\': '\\',
    't': '\t',
    "'": "'",
    '"': '"',
}

# Filler accepted between tokens (ASCII whitespace)
WHITESPACE = frozenset(" \t\n\r\v\f")

LITERAL_TYPES = frozenset({
    TokenType.INT_LITERAL, TokenType.HEX_LITERAL, TokenType.BOOL_LITERAL,
    TokenType.CHAR_LITERAL, TokenType.STRING_LITERAL,
})

OPERATOR_TYPES = frozenset({
    TokenType.ARITH_OP, TokenType.REL_OP, TokenType.EQ_OP,
    TokenType.COND_OP, TokenType.ASSIGN_OP,
})
