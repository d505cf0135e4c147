"""
Output formatting for scanned units.

Each token prints as `<line> <KIND> "<text>"`; a unit's token lines are
followed by one blank line. A failed unit prints the caret report instead.
"""

from typing import Any, Dict, Iterable

from .errors import Diagnostic
from .lexer import ScanResult
from .tokens import Token

CARET_MARKER = "^- here"


def format_token(token: Token) -> str:
    return f'{token.line} {token.type.label} "{token.text}"'


def format_tokens(tokens: Iterable[Token]) -> str:
    """Format a unit's tokens, one per line, with a trailing blank line."""
    lines = [format_token(token) for token in tokens]
    return "\n".join(lines + [""]) + "\n"


def format_error(diagnostic: Diagnostic) -> str:
    """
    Render a hard failure as a caret report.

    The source line is indented by one space, so `column` spaces put the
    caret under the failing character.
    """
    location = diagnostic.location
    return (
        f"Parse Error at file {location.filename} line: {location.line} column: {location.column}\n"
        f" {diagnostic.source_line}\n"
        f"{' ' * location.column}{CARET_MARKER}\n"
    )


def format_result(result: ScanResult) -> str:
    if result.ok:
        return format_tokens(result.tokens)
    return format_error(result.error)


def result_to_dict(result: ScanResult) -> Dict[str, Any]:
    """Plain-data form of a scan result for JSON output."""
    if not result.ok:
        error = result.error
        return {
            "file": result.filename,
            "ok": False,
            "error": {
                "code": error.code,
                "kind": error.kind,
                "message": error.message,
                "line": error.location.line,
                "column": error.location.column,
                "source_line": error.source_line,
                "help": error.help_text,
                "suggestions": error.suggestions or [],
            },
        }

    return {
        "file": result.filename,
        "ok": True,
        "tokens": [
            {
                "line": token.line,
                "column": token.location.column,
                "kind": token.type.label,
                "text": token.text,
                "lexeme": token.lexeme,
            }
            for token in result.tokens
        ],
    }
