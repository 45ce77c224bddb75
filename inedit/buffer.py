"""Line-addressable text storage.

The buffer keeps the document as a list of lines without their line
terminators. Character offsets count every line break as one character,
so offset arithmetic behaves like a flat string joined with newlines.
Line start offsets are cached as a prefix-sum table and rebuilt lazily
after a mutation; offset to line lookups bisect that table.
"""

from bisect import bisect_right
from typing import Optional


def normalize_newlines(text: str) -> str:
    """Convert CRLF and lone CR terminators to LF."""
    return text.replace("\r\n", "\n").replace("\r", "\n")


class TextBuffer:
    """A mutable sequence of lines with character-offset addressing."""

    def __init__(self, text: str = ""):
        self._lines: list[str] = normalize_newlines(text).split("\n")
        self._starts: Optional[list[int]] = None

    @classmethod
    def from_lines(cls, lines: list[str]) -> "TextBuffer":
        return cls("\n".join(lines))

    # --- Introspection ---

    def len_lines(self) -> int:
        return len(self._lines)

    def len_chars(self) -> int:
        starts = self._line_starts()
        return starts[-1] + len(self._lines[-1])

    def line(self, index: int) -> str:
        """Return line `index` without its trailing line terminator."""
        return self._lines[index]

    def line_len(self, index: int) -> int:
        return len(self._lines[index])

    def lines(self) -> list[str]:
        return list(self._lines)

    def line_to_char(self, index: int) -> int:
        """Offset of the first character of line `index`.

        `index == len_lines()` is accepted and returns `len_chars()`.
        """
        if index >= len(self._lines):
            return self.len_chars()
        return self._line_starts()[index]

    def char_to_line(self, offset: int) -> int:
        """Index of the line containing character `offset`."""
        starts = self._line_starts()
        return max(0, bisect_right(starts, offset) - 1)

    def slice(self, start: int, end: int) -> str:
        """Return the text between two character offsets."""
        if start >= end:
            return ""
        first = self.char_to_line(start)
        last = self.char_to_line(end)
        starts = self._line_starts()
        if first == last:
            base = starts[first]
            return self._lines[first][start - base:end - base]
        parts = [self._lines[first][start - starts[first]:]]
        parts.extend(self._lines[first + 1:last])
        parts.append(self._lines[last][:end - starts[last]])
        return "\n".join(parts)

    def __str__(self) -> str:
        return "\n".join(self._lines)

    # --- Mutation ---

    def insert(self, offset: int, text: str) -> None:
        """Insert `text` before character `offset`."""
        if not text:
            return
        index = self.char_to_line(offset)
        column = offset - self._line_starts()[index]
        current = self._lines[index]
        pieces = normalize_newlines(text).split("\n")
        pieces[0] = current[:column] + pieces[0]
        pieces[-1] = pieces[-1] + current[column:]
        self._lines[index:index + 1] = pieces
        self._starts = None

    def remove(self, start: int, end: int) -> None:
        """Remove the characters in `[start, end)`, joining lines as needed."""
        start = max(0, start)
        end = min(end, self.len_chars())
        if start >= end:
            return
        first = self.char_to_line(start)
        last = self.char_to_line(end)
        starts = self._line_starts()
        head = self._lines[first][:start - starts[first]]
        tail = self._lines[last][end - starts[last]:]
        self._lines[first:last + 1] = [head + tail]
        self._starts = None

    def remove_line(self, index: int) -> str:
        """Remove line `index` entirely and return its text.

        The buffer always keeps at least one (possibly empty) line.
        """
        text = self._lines[index]
        if len(self._lines) == 1:
            self._lines[0] = ""
        else:
            del self._lines[index]
        self._starts = None
        return text

    # --- Internals ---

    def _line_starts(self) -> list[int]:
        if self._starts is None:
            starts = []
            total = 0
            for line in self._lines:
                starts.append(total)
                total += len(line) + 1
            self._starts = starts
        return self._starts
