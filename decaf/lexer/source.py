"""
Source text bookkeeping for diagnostics.

The lexer only tracks line and column counts while it scans; rendering a
diagnostic needs the raw text of the offending line, which SourceText
recovers from a table of line start offsets.
"""

from bisect import bisect_right
from typing import List


class SourceText:
    """A fully buffered source unit with a line index."""

    def __init__(self, text: str, filename: str = ""):
        self.text = text
        self.filename = filename
        self._line_starts: List[int] = [0]
        for index, char in enumerate(text):
            if char == '\n':
                self._line_starts.append(index + 1)

    def __len__(self) -> int:
        return len(self.text)

    @property
    def line_count(self) -> int:
        return len(self._line_starts)

    def line_text(self, line: int) -> str:
        """
        Return the raw text of a 1-based line, without its line terminator.

        Lines past the end of the unit come back empty.
        """
        if line < 1 or line > len(self._line_starts):
            return ""
        start = self._line_starts[line - 1]
        end = self.text.find('\n', start)
        if end == -1:
            end = len(self.text)
        return self.text[start:end].rstrip('\r')

    def line_of(self, offset: int) -> int:
        """Map a character offset to its 1-based line number."""
        return bisect_right(self._line_starts, offset)

    def column_of(self, offset: int) -> int:
        line = self.line_of(offset)
        return offset - self._line_starts[line - 1] + 1
