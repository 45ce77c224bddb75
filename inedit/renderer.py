"""Incremental drawing of the editor frame.

A frame is laid out top to bottom as the header rows, one row per
visible buffer line (margin followed by the line text), then the footer
rows. The renderer remembers what it last wrote (`DrawState`) and where
the terminal's cursor was left, measured from the top-left corner of
the frame. Only relative moves are issued, plus absolute moves to
column 0, so the frame may sit anywhere on screen and may have been
scrolled by the terminal since it was first drawn.
"""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional
import logging

from .constants import EditorConstants
from .selection import Position
from .styles import Footer, Header, Margin, NoFooter, NoHeader, NoMargin
from .terminal import TerminalOutput
from .viewport import plan_viewport

if TYPE_CHECKING:
    from .model import TextModel

logger = logging.getLogger(__name__)


@dataclass
class DrawState:
    """Everything written by the last frame.

    `cursor` is the terminal cursor relative to the frame: `line` is the
    frame row, `column` the printed cell. Every frame ends with the
    cursor parked on the document focus, so it also records where the
    focus was drawn.
    """
    visible_range: tuple[int, int] = (0, 0)
    height: int = 0
    cursor: Position = Position()
    margin_width: int = 0
    header: list[str] = field(default_factory=list)
    margins: list[str] = field(default_factory=list)
    lines: list[str] = field(default_factory=list)
    footer: list[str] = field(default_factory=list)


@dataclass
class Frame:
    """The rows one frame would draw."""
    low: int
    high: int
    margin_width: int
    header: list[str]
    margins: list[str]
    lines: list[str]
    footer: list[str]

    def line_row(self, index: int) -> int:
        """Frame row of visible line `index` (0 = first visible line)."""
        return len(self.header) + index

    def footer_row(self, index: int) -> int:
        return len(self.header) + len(self.lines) + index

    def rows(self) -> list[str]:
        body = [margin + text for margin, text in zip(self.margins, self.lines)]
        return self.header + body + self.footer


class Renderer:
    """Draws a TextModel and keeps later frames minimal.

    With `lazy=True` each redraw compares the new frame against the last
    one and writes only what changed; with `lazy=False` every redraw is a
    full repaint.
    """

    def __init__(
        self,
        terminal: TerminalOutput,
        header: Optional[Header] = None,
        margin: Optional[Margin] = None,
        footer: Optional[Footer] = None,
        lazy: bool = True,
    ):
        self.terminal = terminal
        self.header = header or NoHeader()
        self.margin = margin or NoMargin()
        self.footer = footer or NoFooter()
        self.lazy = lazy
        self.state = DrawState()

    # --- Public operations ---

    def draw(self, model: 'TextModel') -> None:
        """Repaint the whole frame over the previous one."""
        self._paint(self._compose(model), model)
        self.terminal.flush()

    def redraw(self, model: 'TextModel') -> None:
        """Bring the screen up to date after an edit or cursor move."""
        if not self.lazy or self.state.height == 0:
            self.draw(model)
            return

        frame = self._compose(model)
        state = self.state
        if (
            (frame.low, frame.high) != state.visible_range
            or frame.margin_width != state.margin_width
            or len(frame.header) != len(state.header)
            or len(frame.footer) != len(state.footer)
        ):
            logger.debug("frame geometry changed, full redraw")
            self.draw(model)
            return

        changed = [i for i, (old, new) in enumerate(zip(state.lines, frame.lines)) if old != new]
        if len(changed) > 1:
            logger.debug("%d lines changed, full redraw", len(changed))
            self.draw(model)
            return

        patches = self._decoration_patches(frame, changed)
        target = self._cursor_target(model, frame)
        if not changed and not patches and target == state.cursor:
            return

        if changed:
            logger.debug("redrawing line %d", frame.low + changed[0])
            patches.append((frame.line_row(changed[0]), "line", changed[0]))
        for row, kind, index in sorted(patches):
            if kind == "line":
                self._redraw_line(frame, index)
            elif kind == "margin":
                self._redraw_margin(frame, index)
            else:
                self._redraw_decoration(row, frame, kind, index)
        self._place_cursor(target)
        self.terminal.flush()

    def clear_draw(self) -> None:
        """Erase the previous frame and forget it."""
        if self.state.height == 0:
            return
        term = self.terminal
        self._move_to_row(self.state.height - 1)
        term.move_to_column(0)
        term.clear_line()
        self._set_cursor(self.state.cursor.line, 0)
        self._move_to_row(0)
        term.clear_to_end_of_screen()
        self.state = DrawState()

    def finish(self) -> None:
        """Remove the editor from the screen at the end of a session."""
        self.clear_draw()
        self.terminal.flush()

    # --- Frame construction ---

    def _row_budget(self) -> Optional[int]:
        size = self.terminal.size()
        if size is None:
            return None
        rows = size[0] - self.header.rows() - self.footer.rows()
        return max(rows, EditorConstants.MIN_ROW_BUDGET)

    def _compose(self, model: 'TextModel') -> Frame:
        low, high = plan_viewport(
            model.line_count(),
            model.position.line,
            self._row_budget(),
            self.state.visible_range,
        )
        return Frame(
            low=low,
            high=high,
            margin_width=self.margin.width(),
            header=list(self.header.render(model)),
            margins=[self.margin.render(i, model) for i in range(low, high)],
            lines=[model.line(i) for i in range(low, high)],
            footer=list(self.footer.render(model)),
        )

    def _cursor_target(self, model: 'TextModel', frame: Frame) -> Position:
        focus = model.position
        text = model.line(focus.line)
        column = min(focus.column, len(text))
        return Position(
            frame.line_row(focus.line - frame.low),
            frame.margin_width + self.terminal.text_width(text[:column]),
        )

    # --- Painting ---

    def _paint(self, frame: Frame, model: 'TextModel') -> None:
        term = self.terminal
        term.hide_cursor()
        self._move_to_row(0)
        term.move_to_column(0)

        rows = frame.rows()
        for i, text in enumerate(rows):
            if i:
                term.write("\n")
                term.move_to_column(0)
            term.clear_line()
            term.write(text)
        term.clear_to_end_of_screen()

        self.state = DrawState(
            visible_range=(frame.low, frame.high),
            height=len(rows),
            cursor=Position(len(rows) - 1, term.text_width(rows[-1]) if rows else 0),
            margin_width=frame.margin_width,
            header=frame.header,
            margins=frame.margins,
            lines=frame.lines,
            footer=frame.footer,
        )
        self._place_cursor(self._cursor_target(model, frame))
        term.show_cursor()

    def _decoration_patches(self, frame: Frame, changed: list[int]) -> list[tuple[int, str, int]]:
        """Rows whose header, margin or footer text differs from last frame."""
        state = self.state
        patches = []
        for i, (old, new) in enumerate(zip(state.header, frame.header)):
            if old != new:
                patches.append((i, "header", i))
        for i, (old, new) in enumerate(zip(state.margins, frame.margins)):
            if old != new and i not in changed:
                patches.append((frame.line_row(i), "margin", i))
        for i, (old, new) in enumerate(zip(state.footer, frame.footer)):
            if old != new:
                patches.append((frame.footer_row(i), "footer", i))
        return patches

    def _rewrite_row(self, row: int, text: str) -> None:
        term = self.terminal
        self._move_to_row(row)
        term.move_to_column(0)
        term.clear_line()
        term.write(text)
        self._set_cursor(row, term.text_width(text))

    def _redraw_line(self, frame: Frame, index: int) -> None:
        self._rewrite_row(frame.line_row(index), frame.margins[index] + frame.lines[index])
        self.state.lines[index] = frame.lines[index]
        self.state.margins[index] = frame.margins[index]

    def _redraw_margin(self, frame: Frame, index: int) -> None:
        term = self.terminal
        old, new = self.state.margins[index], frame.margins[index]
        if term.text_width(old) != term.text_width(new):
            # A shorter margin would leave stale cells behind
            self._redraw_line(frame, index)
            return
        row = frame.line_row(index)
        self._move_to_row(row)
        term.move_to_column(0)
        term.write(new)
        self._set_cursor(row, term.text_width(new))
        self.state.margins[index] = new

    def _redraw_decoration(self, row: int, frame: Frame, kind: str, index: int) -> None:
        rows = frame.header if kind == "header" else frame.footer
        self._rewrite_row(row, rows[index])
        snapshot = self.state.header if kind == "header" else self.state.footer
        snapshot[index] = rows[index]

    # --- Cursor bookkeeping ---

    def _set_cursor(self, row: int, column: int) -> None:
        self.state.cursor = Position(row, column)

    def _place_cursor(self, target: Position) -> None:
        self._move_to_row(target.line)
        self._move_to_column(target.column)

    def _move_to_row(self, row: int) -> None:
        current = self.state.cursor
        if row < current.line:
            self.terminal.move_up(current.line - row)
        elif row > current.line:
            self.terminal.move_down(row - current.line)
        self._set_cursor(row, current.column)

    def _move_to_column(self, column: int) -> None:
        current = self.state.cursor.column
        if column == current:
            return
        if column == 0:
            self.terminal.move_to_column(0)
        elif column < current:
            self.terminal.move_left(current - column)
        else:
            self.terminal.move_right(column - current)
        self._set_cursor(self.state.cursor.line, column)
