"""The editable document: a text buffer plus a cursor/selection."""

from typing import Optional

from .buffer import TextBuffer, normalize_newlines
from .selection import Position, Selection


class TextModel:
    """Editing operations that keep the buffer and the cursor consistent.

    Positions are never taken as raw offsets from the caller; every buffer
    index is derived from the focus or anchor after clamping, so no
    operation here can fail on an out-of-range position.
    """

    def __init__(self, text: str = "", cursor: Optional[Position] = None):
        self.buffer = TextBuffer(text)
        self.selection = Selection()
        if cursor is not None:
            line = min(max(cursor.line, 0), self.line_count() - 1)
            self.selection.focus = Position(line, max(cursor.column, 0))
            self.clamp()

    # --- Introspection ---

    @property
    def position(self) -> Position:
        """The focus (editing cursor)."""
        return self.selection.focus

    def line_count(self) -> int:
        return self.buffer.len_lines()

    def char_count(self) -> int:
        return self.buffer.len_chars()

    def line(self, index: int) -> str:
        return self.buffer.line(index)

    def current_line(self) -> str:
        return self.buffer.line(self.position.line)

    def current_line_len(self) -> int:
        return self.buffer.line_len(self.position.line)

    def contents(self) -> str:
        """The whole document, minus a single trailing line terminator."""
        text = str(self.buffer)
        if text.endswith("\n"):
            text = text[:-1]
        return text

    def char_index(self, position: Position) -> int:
        """Buffer offset of `position`, with its column clamped to the line."""
        column = min(position.column, self.buffer.line_len(position.line))
        return self.buffer.line_to_char(position.line) + column

    def leading_whitespace(self, line: Optional[int] = None) -> int:
        text = self.buffer.line(self.position.line if line is None else line)
        return len(text) - len(text.lstrip())

    def current_selection_text(self) -> Optional[str]:
        bounds = self.selection.range()
        if bounds is None:
            return None
        start, end = bounds
        return self.buffer.slice(self.char_index(start), self.char_index(end))

    # --- Cursor helpers ---

    def clamp(self) -> None:
        """Pull the focus column back inside the current line."""
        focus = self.position
        length = self.buffer.line_len(focus.line)
        if focus.column > length:
            self._set_focus(focus.line, length)

    def _set_focus(self, line: int, column: int) -> None:
        self.selection.focus = Position(line, column)

    def _begin_move(self, extend_selection: bool) -> None:
        if extend_selection and self.selection.anchor is None:
            self.clamp()
        self.selection.set_anchor(extend_selection)

    def _end_move(self) -> None:
        self.selection.fix_anchor()

    # --- Editing ---

    def insert_char(self, char: str) -> None:
        self.insert_str(char)

    def insert_str(self, text: str) -> None:
        """Insert at the focus, replacing the selection if there is one."""
        if not text:
            return
        self.delete_selection()
        self.clamp()
        text = normalize_newlines(text)
        focus = self.position
        self.buffer.insert(self.char_index(focus), text)
        segments = text.split("\n")
        if len(segments) == 1:
            self._set_focus(focus.line, focus.column + len(text))
        else:
            self._set_focus(focus.line + len(segments) - 1, len(segments[-1]))

    def delete_selection(self) -> bool:
        """Remove the selected text. Returns False when nothing is selected."""
        bounds = self.selection.range()
        if bounds is None:
            return False
        start, end = bounds
        start_index = self.char_index(start)
        self.buffer.remove(start_index, self.char_index(end))
        self.selection.anchor = None
        self._set_focus(start.line, start_index - self.buffer.line_to_char(start.line))
        return True

    def delete_backward(self) -> None:
        if self.delete_selection():
            return
        self.clamp()
        focus = self.position
        offset = self.char_index(focus)
        if focus.column > 0:
            self.buffer.remove(offset - 1, offset)
            self._set_focus(focus.line, focus.column - 1)
        elif focus.line > 0:
            previous_len = self.buffer.line_len(focus.line - 1)
            self.buffer.remove(offset - 1, offset)
            self._set_focus(focus.line - 1, previous_len)

    def delete_forward(self) -> None:
        if self.delete_selection():
            return
        self.clamp()
        focus = self.position
        if focus.column < self.current_line_len() or focus.line + 1 < self.line_count():
            offset = self.char_index(focus)
            self.buffer.remove(offset, offset + 1)

    def delete_line_range(self, start: int, end: int) -> None:
        """Remove columns [start, end) of the current line.

        Focus and anchor keep pointing at the same characters; a selection
        left empty by the removal is dropped.
        """
        self.clamp()
        focus = self.position
        length = self.current_line_len()
        start, end = max(0, start), min(end, length)
        if start >= end:
            return
        base = self.buffer.line_to_char(focus.line)
        self.buffer.remove(base + start, base + end)
        self.selection.focus = self._shift_after_removal(focus, start, end)
        anchor = self.selection.anchor
        if anchor is not None and anchor.line == focus.line:
            self.selection.anchor = self._shift_after_removal(anchor, start, end)
        self.selection.fix_anchor()

    @staticmethod
    def _shift_after_removal(position: Position, start: int, end: int) -> Position:
        if position.column >= end:
            return Position(position.line, position.column - (end - start))
        if position.column > start:
            return Position(position.line, start)
        return position

    def remove_line(self, index: int) -> str:
        """Remove a whole line, returning its text."""
        self.selection.anchor = None
        text = self.buffer.remove_line(index)
        line = min(self.position.line, self.line_count() - 1)
        self._set_focus(line, self.position.column)
        self.clamp()
        return text

    # --- Movement ---

    def move_left(self, extend_selection: bool = False) -> None:
        self._begin_move(extend_selection)
        self.clamp()
        focus = self.position
        if focus.column > 0:
            self._set_focus(focus.line, focus.column - 1)
        elif focus.line > 0:
            self._set_focus(focus.line - 1, self.buffer.line_len(focus.line - 1))
        self._end_move()

    def move_right(self, extend_selection: bool = False) -> None:
        self._begin_move(extend_selection)
        self.clamp()
        focus = self.position
        if focus.column < self.current_line_len():
            self._set_focus(focus.line, focus.column + 1)
        elif focus.line + 1 < self.line_count():
            self._set_focus(focus.line + 1, 0)
        self._end_move()

    def move_up(self, extend_selection: bool = False) -> None:
        self._begin_move(extend_selection)
        focus = self.position
        if focus.line == 0:
            self._set_focus(0, 0)
        else:
            self._set_focus(focus.line - 1, focus.column)
        self._end_move()

    def move_down(self, extend_selection: bool = False) -> None:
        self._begin_move(extend_selection)
        focus = self.position
        if focus.line + 1 == self.line_count():
            self._set_focus(focus.line, self.current_line_len())
        else:
            self._set_focus(focus.line + 1, focus.column)
        self._end_move()

    def move_to_column(self, column: int, extend_selection: bool = False) -> None:
        self._begin_move(extend_selection)
        self._set_focus(self.position.line, max(column, 0))
        self._end_move()

    def move_to_line_start(self, extend_selection: bool = False) -> None:
        self.move_to_column(0, extend_selection)

    def move_to_line_end(self, extend_selection: bool = False) -> None:
        self.move_to_column(self.current_line_len(), extend_selection)

    def move_to_top(self, extend_selection: bool = False) -> None:
        self._begin_move(extend_selection)
        self._set_focus(0, 0)
        self._end_move()

    def move_to_bottom(self, extend_selection: bool = False) -> None:
        self._begin_move(extend_selection)
        last = self.line_count() - 1
        self._set_focus(last, self.buffer.line_len(last))
        self._end_move()
