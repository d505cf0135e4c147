"""
Decaf Lexer - turns source text into tokens

Rules are tried in a fixed priority order and the first one that matches
wins. Longest-match behaviour comes from the order itself: two-character
operators sit before their one-character prefixes, hex before decimal, and
keywords carry a lookahead guard so `intake` stays one identifier.

A rule either returns a token, returns None without consuming anything, or
raises LexerError once it has committed (opening quote, backslash, `/*`).

xwest
"""

import logging
import re
from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple

from .tokens import (
    Token, TokenType, SourceLocation, RESERVED_WORDS, BOOLEAN_VALUES,
    TWO_CHAR_OPERATORS, SINGLE_CHAR_OPERATORS, ESCAPE_SEQUENCES, WHITESPACE
)
from .errors import (
    Diagnostic, LexerError, create_invalid_character_error,
    create_unterminated_string_error, create_unterminated_char_error,
    create_empty_char_error, create_invalid_literal_char_error,
    create_invalid_escape_error, create_unterminated_comment_error,
    create_invalid_hex_error
)
from .source import SourceText

logger = logging.getLogger(__name__)

# (pos, line, column)
Mark = Tuple[int, int, int]


class Lexer:
    """
    Decaf lexical analyzer.

    Scans one source unit (a whole file or a single interactive line) and
    produces its tokens, stopping at the first hard failure.
    """

    def __init__(self, source: str, filename: str = ""):
        """
        Initialize the lexer with source code.

        Args:
            source: Source code of one unit
            filename: Name of source file for error reporting, empty for stdin
        """
        self.source = source
        self.filename = filename
        self.text = SourceText(source, filename)
        self.pos = 0
        self.line = 1
        self.column = 1

        self._compile_patterns()

        # Priority order matters, see module docstring
        self._rules: List[Callable[[], Optional[Token]]] = [
            self._match_operator,
            self._match_hex_literal,
            self._match_bool_literal,
            self._match_reserved,
            self._match_identifier,
            self._match_string_literal,
            self._match_char_literal,
            self._match_int_literal,
        ]

    def _compile_patterns(self):
        """Compile regex patterns used by the lexer."""

        # Integer patterns
        self.decimal_pattern = re.compile(r'[0-9]+')
        self.hex_pattern = re.compile(r'0[xX][0-9a-fA-F]+')
        self.hex_prefix_pattern = re.compile(r'0[xX]')

        # Words; the lookahead keeps `truex` and `intake` whole
        self.bool_pattern = re.compile(r'(?:true|false)(?![A-Za-z0-9_])')
        self.reserved_pattern = re.compile(
            r'(?:' + '|'.join(RESERVED_WORDS) + r')(?![A-Za-z0-9_])'
        )
        self.identifier_pattern = re.compile(r'[A-Za-z_][A-Za-z0-9_]*')

    def tokenize(self) -> List[Token]:
        """
        Tokenize the whole unit.

        Returns:
            List of tokens in source order

        Raises:
            LexerError: On the first hard failure; no tokens are returned
        """
        self.pos = 0
        self.line = 1
        self.column = 1
        tokens: List[Token] = []

        try:
            self._skip_whitespace_and_comments()
            while self.pos < len(self.source):
                tokens.append(self._next_token())
                self._skip_whitespace_and_comments()
        except LexerError as e:
            e.diagnostic.source_line = self.text.line_text(e.location.line)
            logger.debug("Scan of %s failed: %s", self.filename or "<stdin>", e.diagnostic.message)
            raise

        logger.debug("Scanned %d tokens from %s (%d chars)",
                     len(tokens), self.filename or "<stdin>", len(self.source))
        return tokens

    def _next_token(self) -> Token:
        """Try each rule in order, backtracking after a soft failure."""
        for rule in self._rules:
            mark = self._mark()
            token = rule()
            if token is not None:
                return token
            self._reset(mark)

        # Nothing matched and nothing committed
        raise create_invalid_character_error(self.source[self.pos], self._location())

    # ------------------------------------------------------------------
    # Rules
    # ------------------------------------------------------------------

    def _match_operator(self) -> Optional[Token]:
        """Operators and punctuation, two-character forms first."""
        pair = self.source[self.pos:self.pos + 2]
        if pair in TWO_CHAR_OPERATORS:
            return self._emit(TWO_CHAR_OPERATORS[pair], pair)

        char = self._current()
        if char in SINGLE_CHAR_OPERATORS:
            return self._emit(SINGLE_CHAR_OPERATORS[char], char)
        return None

    def _match_hex_literal(self) -> Optional[Token]:
        match = self.hex_pattern.match(self.source, self.pos)
        if match:
            return self._emit(TokenType.HEX_LITERAL, match.group(0))

        # `0x` commits to a hex literal
        prefix = self.hex_prefix_pattern.match(self.source, self.pos)
        if prefix:
            raise create_invalid_hex_error(prefix.group(0), self._location())
        return None

    def _match_bool_literal(self) -> Optional[Token]:
        match = self.bool_pattern.match(self.source, self.pos)
        if not match:
            return None
        lexeme = match.group(0)
        return self._emit(TokenType.BOOL_LITERAL, lexeme, BOOLEAN_VALUES[lexeme])

    def _match_reserved(self) -> Optional[Token]:
        match = self.reserved_pattern.match(self.source, self.pos)
        if not match:
            return None
        return self._emit(TokenType.RESERVED, match.group(0))

    def _match_identifier(self) -> Optional[Token]:
        match = self.identifier_pattern.match(self.source, self.pos)
        if not match:
            return None
        return self._emit(TokenType.IDENTIFIER, match.group(0))

    def _match_string_literal(self) -> Optional[Token]:
        """Tokenize a string literal, decoding its escape sequences."""
        if self._current() != '"':
            return None

        location = self._location()
        self._advance()  # Skip opening quote

        value_parts = []
        while True:
            char = self._current()
            if char == '"':
                break
            if char == '\\':
                value_parts.append(self._read_escape_sequence())
            elif char in ('', '\n'):
                raise create_unterminated_string_error(char, location)
            elif char == '\t':
                raise create_invalid_literal_char_error(char, location)
            else:
                value_parts.append(char)
                self._advance()

        self._advance()  # Skip closing quote

        lexeme = self.source[location.offset:self.pos]
        return Token(TokenType.STRING_LITERAL, ''.join(value_parts), lexeme, location)

    def _match_char_literal(self) -> Optional[Token]:
        """Tokenize a character literal holding exactly one character."""
        if self._current() != "'":
            return None

        location = self._location()
        self._advance()  # Skip opening quote

        char = self._current()
        if char == '\\':
            value = self._read_escape_sequence()
        elif char == "'":
            raise create_empty_char_error(location)
        elif char in ('', '\n'):
            raise create_unterminated_char_error(char, location)
        elif char in ('"', '\t'):
            raise create_invalid_literal_char_error(char, location)
        else:
            value = char
            self._advance()

        if self._current() != "'":
            raise create_unterminated_char_error(self._current(), location)
        self._advance()  # Skip closing quote

        lexeme = self.source[location.offset:self.pos]
        return Token(TokenType.CHAR_LITERAL, value, lexeme, location)

    def _match_int_literal(self) -> Optional[Token]:
        match = self.decimal_pattern.match(self.source, self.pos)
        if not match:
            return None
        return self._emit(TokenType.INT_LITERAL, match.group(0))

    def _read_escape_sequence(self) -> str:
        """Decode the escape sequence at the cursor, which sits on the backslash."""
        location = self._location()
        self._advance()  # Skip backslash

        escape_char = self._current()
        if escape_char not in ESCAPE_SEQUENCES:
            raise create_invalid_escape_error(escape_char, location)
        self._advance()
        return ESCAPE_SEQUENCES[escape_char]

    # ------------------------------------------------------------------
    # Skip rule
    # ------------------------------------------------------------------

    def _skip_whitespace_and_comments(self):
        """Skip whitespace, block comments and line comments."""
        while self.pos < len(self.source):
            if self.source[self.pos] in WHITESPACE:
                self._advance()
                continue

            # Line comments stop before the newline
            if self.source.startswith('//', self.pos):
                while self.pos < len(self.source) and self.source[self.pos] != '\n':
                    self._advance()
                continue

            # Block comments end at the first */, no nesting
            if self.source.startswith('/*', self.pos):
                location = self._location()
                end = self.source.find('*/', self.pos + 2)
                if end == -1:
                    raise create_unterminated_comment_error(location)
                self._advance_by(end + 2 - self.pos)
                continue

            break

    # ------------------------------------------------------------------
    # Position tracking
    # ------------------------------------------------------------------

    def _emit(self, token_type: TokenType, lexeme: str, text: Optional[str] = None) -> Token:
        """Consume `lexeme` and build its token."""
        location = self._location()
        self._advance_by(len(lexeme))
        return Token(token_type, lexeme if text is None else text, lexeme, location)

    def _location(self) -> SourceLocation:
        return SourceLocation(self.filename, self.line, self.column, self.pos)

    def _mark(self) -> Mark:
        return (self.pos, self.line, self.column)

    def _reset(self, mark: Mark):
        self.pos, self.line, self.column = mark

    def _advance(self):
        """Advance position by one character, updating line/column."""
        if self.pos < len(self.source):
            if self.source[self.pos] == '\n':
                self.line += 1
                self.column = 1
            else:
                self.column += 1
            self.pos += 1

    def _advance_by(self, count: int):
        """Advance position by multiple characters."""
        for _ in range(count):
            self._advance()

    def _current(self) -> str:
        return self._peek(0)

    def _peek(self, offset: int = 1) -> str:
        """Peek at a character without advancing; empty string past the end."""
        peek_pos = self.pos + offset
        if peek_pos < len(self.source):
            return self.source[peek_pos]
        return ''


@dataclass(frozen=True)
class ScanResult:
    """
    Outcome of scanning one source unit.

    Holds either the complete token sequence or the diagnostic of the hard
    failure that stopped the scan, never both.
    """
    tokens: Tuple[Token, ...] = ()
    error: Optional[Diagnostic] = None
    filename: str = ""

    @property
    def ok(self) -> bool:
        return self.error is None


def scan(source: str, filename: str = "") -> ScanResult:
    """
    Scan one source unit without raising on lexical errors.

    Args:
        source: Source code string
        filename: Filename for error reporting, empty for stdin

    Returns:
        ScanResult with tokens on success or the diagnostic on failure
    """
    lexer = Lexer(source, filename)
    try:
        tokens = lexer.tokenize()
    except LexerError as e:
        return ScanResult(error=e.diagnostic, filename=filename)
    return ScanResult(tokens=tuple(tokens), filename=filename)


def scan_file(filepath: str, encoding: str = 'utf-8') -> ScanResult:
    """
    Scan a whole file as a single unit.

    Raises:
        OSError: If the file cannot be read
    """
    with open(filepath, 'r', encoding=encoding) as f:
        source = f.read()

    return scan(source, filepath)


def tokenize_string(source: str, filename: str = "") -> List[Token]:
    """
    Convenience function to tokenize a source string.

    Raises:
        LexerError: If lexing fails
    """
    return Lexer(source, filename).tokenize()


def tokenize_file(filepath: str, encoding: str = 'utf-8') -> List[Token]:
    """
    Convenience function to tokenize a source file.

    Raises:
        LexerError: If lexing fails
        OSError: If file cannot be read
    """
    with open(filepath, 'r', encoding=encoding) as f:
        source = f.read()

    return tokenize_string(source, filepath)
