"""Shared fixtures: a terminal spy that records calls and keeps a screen."""

import pytest

from inedit.terminal import TerminalOutput


class SpyTerminal(TerminalOutput):
    """In-memory terminal.

    Records every call in `ops` and applies it to a character grid so
    tests can check both what was emitted and what ends up on screen.
    A newline moves down one row (scrolling at the bottom) and keeps the
    column, like a terminal in raw mode.
    """

    def __init__(self, rows=24, columns=80, report_size=True):
        self.rows = rows
        self.columns = columns
        self.report_size = report_size
        self.screen = [[] for _ in range(rows)]
        self.row = 0
        self.col = 0
        self.ops = []
        self.flushes = 0
        self.cursor_visible = True

    # --- Recording helpers ---

    def reset_ops(self):
        self.ops = []

    def op_names(self):
        return [op[0] for op in self.ops]

    def written(self):
        return "".join(op[1] for op in self.ops if op[0] == "write")

    def display(self):
        """Screen rows as strings, with trailing blank rows dropped."""
        lines = ["".join(cells).rstrip() for cells in self.screen]
        while lines and not lines[-1]:
            lines.pop()
        return lines

    # --- TerminalOutput ---

    def write(self, text):
        self.ops.append(("write", text))
        for char in text:
            if char == "\n":
                self._newline()
                continue
            cells = self.screen[self.row]
            while len(cells) <= self.col:
                cells.append(" ")
            cells[self.col] = char
            self.col += 1

    def _newline(self):
        if self.row + 1 == self.rows:
            self.screen.pop(0)
            self.screen.append([])
        else:
            self.row += 1

    def move_up(self, n):
        self.ops.append(("move_up", n))
        self.row = max(self.row - n, 0)

    def move_down(self, n):
        self.ops.append(("move_down", n))
        self.row = min(self.row + n, self.rows - 1)

    def move_left(self, n):
        self.ops.append(("move_left", n))
        self.col = max(self.col - n, 0)

    def move_right(self, n):
        self.ops.append(("move_right", n))
        self.col += n

    def move_to_column(self, column):
        self.ops.append(("move_to_column", column))
        self.col = column

    def clear_line(self):
        self.ops.append(("clear_line",))
        self.screen[self.row] = []

    def clear_to_end_of_screen(self):
        self.ops.append(("clear_to_end_of_screen",))
        del self.screen[self.row][self.col:]
        for row in range(self.row + 1, self.rows):
            self.screen[row] = []

    def hide_cursor(self):
        self.ops.append(("hide_cursor",))
        self.cursor_visible = False

    def show_cursor(self):
        self.ops.append(("show_cursor",))
        self.cursor_visible = True

    def size(self):
        if not self.report_size:
            return None
        return (self.rows, self.columns)

    def text_width(self, text):
        return len(text)

    def flush(self):
        self.ops.append(("flush",))
        self.flushes += 1


@pytest.fixture
def spy():
    return SpyTerminal()


@pytest.fixture
def make_spy():
    return SpyTerminal
