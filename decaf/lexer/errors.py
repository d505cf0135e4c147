"""
Error handling for the Decaf scanner.

Provides error reporting with source location information, the raw text of
the offending line, and operator suggestions for stray characters.

Author: xwest
"""

from typing import Optional, List
from dataclasses import dataclass
from .tokens import SourceLocation, TWO_CHAR_OPERATORS


@dataclass
class Diagnostic:
    """A scanner diagnostic with everything needed to render a caret report."""
    message: str
    location: SourceLocation
    severity: str  # "error", "warning"
    code: Optional[str] = None
    help_text: Optional[str] = None
    suggestions: Optional[List[str]] = None
    source_line: str = ""

    @property
    def kind(self) -> str:
        """Human-readable error category for the diagnostic code."""
        return ERROR_CODES.get(self.code, self.message)

    def __str__(self) -> str:
        severity_prefix = self.severity.upper()
        code = f"[{self.code}]" if self.code else ""
        result = f"{severity_prefix}{code}: {self.message}\n"
        result += f"  --> {self.location}\n"

        if self.help_text:
            result += f"  help: {self.help_text}\n"

        if self.suggestions:
            result += "  suggestions:\n"
            for suggestion in self.suggestions:
                result += f"    - {suggestion}\n"

        return result


class LexerError(Exception):
    """
    Exception raised when the lexer hits a hard failure.

    Rules raise it once they have committed past an unambiguous prefix;
    it aborts the whole source unit.
    """

    def __init__(
        self,
        message: str,
        location: SourceLocation,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        super().__init__(message)
        self.diagnostic = Diagnostic(
            message=message,
            location=location,
            severity="error",
            code=code,
            help_text=help_text,
            suggestions=suggestions
        )

    @property
    def location(self) -> SourceLocation:
        return self.diagnostic.location

    @property
    def code(self) -> Optional[str]:
        return self.diagnostic.code

    def __str__(self) -> str:
        return str(self.diagnostic)


class ErrorRecovery:
    """Suggestion helpers used when building diagnostics."""

    @staticmethod
    def suggest_operator_corrections(invalid_op: str) -> List[str]:
        """Suggest two-character operators that start with a stray character."""
        return [operator for operator in TWO_CHAR_OPERATORS if operator.startswith(invalid_op)]


# Error codes for categorization
ERROR_CODES = {
    "L001": "Unrecognized character",
    "L002": "Unterminated string literal",
    "L003": "Unterminated character literal",
    "L004": "Empty character literal",
    "L005": "Invalid character in literal",
    "L006": "Invalid escape sequence",
    "L007": "Unterminated block comment",
    "L008": "Malformed hexadecimal literal",
}


def _describe(char: str) -> str:
    if char == "":
        return "end of input"
    if char.isprintable():
        return f"'{char}'"
    return f"U+{ord(char):04X}"


# Helper functions for creating common errors
def create_invalid_character_error(char: str, location: SourceLocation) -> LexerError:
    """Create an error for a character no rule accepts."""
    suggestions = ErrorRecovery.suggest_operator_corrections(char)
    help_text = None

    if suggestions:
        help_text = f"'{char}' is only valid as part of: {', '.join(suggestions)}"
    elif char.isprintable():
        help_text = f"The character '{char}' is not valid in Decaf source code."
    else:
        help_text = f"Non-printable character (Unicode: U+{ord(char):04X}) is not allowed."

    return LexerError(
        message=f"Unrecognized character: {_describe(char)}",
        location=location,
        code="L001",
        help_text=help_text,
        suggestions=suggestions
    )


def create_unterminated_string_error(found: str, location: SourceLocation) -> LexerError:
    """Create an error for a string literal with no closing quote."""
    return LexerError(
        message="Unterminated string literal",
        location=location,
        code="L002",
        help_text=f"Expected a closing '\"' but found {_describe(found)}; "
                  "string literals cannot span lines.",
    )


def create_unterminated_char_error(found: str, location: SourceLocation) -> LexerError:
    """Create an error for a character literal with no closing quote."""
    return LexerError(
        message="Unterminated character literal",
        location=location,
        code="L003",
        help_text=f"Expected a closing \"'\" but found {_describe(found)}; "
                  "character literals hold exactly one character.",
    )


def create_empty_char_error(location: SourceLocation) -> LexerError:
    return LexerError(
        message="Empty character literal",
        location=location,
        code="L004",
        help_text="Character literals must contain exactly one character.",
    )


def create_invalid_literal_char_error(char: str, location: SourceLocation) -> LexerError:
    """Create an error for a character that must be escaped inside a literal."""
    escaped = {'\t': "\\t", '"': '\\"', "'": "\\'"}.get(char)
    suggestions = [f"Write it as {escaped}"] if escaped else None
    return LexerError(
        message=f"Invalid character in literal: {_describe(char)}",
        location=location,
        code="L005",
        help_text="This character has to be written as an escape sequence.",
        suggestions=suggestions
    )


def create_invalid_escape_error(char: str, location: SourceLocation) -> LexerError:
    """Create an error for an unknown escape sequence."""
    return LexerError(
        message=f"Invalid escape sequence: \\{char}" if char else "Incomplete escape sequence",
        location=location,
        code="L006",
        help_text="Recognized escapes are \\n, \\t, \\\\, \\' and \\\".",
    )


def create_unterminated_comment_error(location: SourceLocation) -> LexerError:
    return LexerError(
        message="Unterminated block comment",
        location=location,
        code="L007",
        help_text="Block comments must be closed with '*/' and do not nest.",
    )


def create_invalid_hex_error(lexeme: str, location: SourceLocation) -> LexerError:
    """Create an error for a hex prefix with no digits after it."""
    return LexerError(
        message=f"Malformed hexadecimal literal: '{lexeme}'",
        location=location,
        code="L008",
        help_text="A hexadecimal literal needs at least one digit after the '0x' prefix.",
    )
