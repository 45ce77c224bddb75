"""Terminal interface using Blessed for display and Curtsies for input."""

from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import Iterator, Optional
import logging
import sys
import termios

import blessed

from .errors import TerminalIOError

logger = logging.getLogger(__name__)


class TerminalOutput(ABC):
    """The primitive operations the renderer draws with.

    Every move is relative except `move_to_column`. Implementations may
    buffer output; nothing is guaranteed to reach the device before
    `flush()`.
    """

    @abstractmethod
    def write(self, text: str) -> None:
        """Write raw text at the cursor."""

    @abstractmethod
    def move_up(self, n: int) -> None: ...

    @abstractmethod
    def move_down(self, n: int) -> None: ...

    @abstractmethod
    def move_left(self, n: int) -> None: ...

    @abstractmethod
    def move_right(self, n: int) -> None: ...

    @abstractmethod
    def move_to_column(self, column: int) -> None:
        """Move to an absolute column on the current row."""

    @abstractmethod
    def clear_line(self) -> None:
        """Erase the whole current row without moving the cursor."""

    @abstractmethod
    def clear_to_end_of_screen(self) -> None:
        """Erase from the cursor to the end of the screen."""

    @abstractmethod
    def hide_cursor(self) -> None: ...

    @abstractmethod
    def show_cursor(self) -> None: ...

    @abstractmethod
    def size(self) -> Optional[tuple[int, int]]:
        """Return (rows, columns), or None when the size is unavailable."""

    @abstractmethod
    def text_width(self, text: str) -> int:
        """Number of cells `text` occupies once printed."""

    @abstractmethod
    def flush(self) -> None:
        """Send everything buffered so far to the device."""


class TerminalInterface(TerminalOutput):
    """Handles terminal I/O using Blessed, with Curtsies for key input."""

    def __init__(self, terminal: Optional[blessed.Terminal] = None, stream=None):
        """Initialize with a terminal instance (or create one)."""
        self.stream = stream or sys.stdout
        self.term = terminal or blessed.Terminal(stream=self.stream)
        self._pending: list[str] = []
        self._input = None

    # --- Output ---

    def write(self, text: str) -> None:
        if text:
            self._pending.append(text)

    def move_up(self, n: int) -> None:
        if n > 0:
            self._pending.append(self.term.move_up(n))

    def move_down(self, n: int) -> None:
        if n > 0:
            self._pending.append(self.term.move_down(n))

    def move_left(self, n: int) -> None:
        if n > 0:
            self._pending.append(self.term.move_left(n))

    def move_right(self, n: int) -> None:
        if n > 0:
            self._pending.append(self.term.move_right(n))

    def move_to_column(self, column: int) -> None:
        self._pending.append(self.term.move_x(column))

    def clear_line(self) -> None:
        # EL 2: erase the entire line, cursor stays put
        self._pending.append(self.term.clear_bol + self.term.clear_eol)

    def clear_to_end_of_screen(self) -> None:
        self._pending.append(self.term.clear_eos)

    def hide_cursor(self) -> None:
        self._pending.append(self.term.hide_cursor)

    def show_cursor(self) -> None:
        self._pending.append(self.term.normal_cursor)

    def size(self) -> Optional[tuple[int, int]]:
        if not self.term.is_a_tty:
            return None
        return (self.term.height, self.term.width)

    def text_width(self, text: str) -> int:
        return self.term.length(text)

    def flush(self) -> None:
        data = "".join(self._pending)
        self._pending.clear()
        try:
            if data:
                self.stream.write(data)
            self.stream.flush()
        except OSError as exc:
            raise TerminalIOError(f"could not write to terminal: {exc}") from exc

    # --- Input ---

    @contextmanager
    def raw_input(self) -> Iterator["TerminalInterface"]:
        """Hold the terminal in raw mode for the duration of the block.

        The previous terminal mode is restored on every exit path,
        including exceptions raised inside the block.
        """
        from curtsies import Input

        try:
            self._input = Input(keynames='curtsies')
            self._input.__enter__()
        except (OSError, termios.error) as exc:
            self._input = None
            raise TerminalIOError(f"could not enter raw mode: {exc}") from exc
        logger.debug("raw mode on")
        try:
            yield self
        finally:
            raw, self._input = self._input, None
            raw.__exit__(None, None, None)
            logger.debug("raw mode off")

    def events(self) -> Iterator[object]:
        """Yield curtsies events until the input stream ends.

        Only valid inside `raw_input()`.
        """
        if self._input is None:
            raise RuntimeError("events() used outside raw_input()")
        while True:
            try:
                event = next(self._input)
            except StopIteration:
                return
            except OSError as exc:
                raise TerminalIOError(f"could not read from terminal: {exc}") from exc
            if event is not None:
                yield event
