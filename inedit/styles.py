"""Header, margin (gutter) and footer decorations drawn around the text.

A header and footer each declare a fixed number of rows and return that
many strings per frame. A margin declares a fixed width and returns the
string drawn to the left of one buffer line. Strings may contain colour
sequences; the renderer measures what is actually printed.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional

import blessed

from .constants import EditorConstants
from .errors import ConfigError

if TYPE_CHECKING:
    from .model import TextModel


class Header(ABC):
    @abstractmethod
    def rows(self) -> int:
        """Rows drawn above the text area."""

    @abstractmethod
    def render(self, model: 'TextModel') -> list[str]:
        """Return exactly `rows()` strings."""


class Margin(ABC):
    @abstractmethod
    def width(self) -> int:
        """Columns reserved to the left of every line."""

    @abstractmethod
    def render(self, line_index: int, model: 'TextModel') -> str:
        """Return the decoration for buffer line `line_index`."""


class Footer(ABC):
    @abstractmethod
    def rows(self) -> int:
        """Rows drawn below the text area."""

    @abstractmethod
    def render(self, model: 'TextModel') -> list[str]:
        """Return exactly `rows()` strings."""


class NoHeader(Header):
    def rows(self) -> int:
        return 0

    def render(self, model):
        return []


class NoMargin(Margin):
    def width(self) -> int:
        return 0

    def render(self, line_index, model):
        return ""


class NoFooter(Footer):
    def rows(self) -> int:
        return 0

    def render(self, model):
        return []


# --- Classic: box drawing, no colour ---

class ClassicHeader(Header):
    def __init__(self, message: str = EditorConstants.DEFAULT_HEADER_MESSAGE):
        self.message = message

    def rows(self) -> int:
        return 1

    def render(self, model):
        return [f"      ╭─── {self.message} ─────────"]


class ClassicGutter(Margin):
    """Right-aligned line numbers with a heavy bar on the cursor line."""

    def width(self) -> int:
        return EditorConstants.CLASSIC_GUTTER_DIGITS + EditorConstants.CLASSIC_GUTTER_PAD

    def render(self, line_index, model):
        if line_index == model.position.line:
            delim = EditorConstants.CLASSIC_DELIM_BOLD
        else:
            delim = EditorConstants.CLASSIC_DELIM
        return f"{line_index + 1:>{EditorConstants.CLASSIC_GUTTER_DIGITS}}{delim}"


class ClassicFooter(Footer):
    def rows(self) -> int:
        return 1

    def render(self, model):
        focus = model.position
        column = min(focus.column, model.current_line_len())
        return [
            f"      ╰──┤ Lines: {model.line_count()} ├─┤ Chars: {model.char_count()} "
            f"├─┤ Ln: {focus.line}, Col: {column}"
        ]


# --- Fancy: coloured blocks via blessed ---

class FancyHeader(Header):
    def __init__(self, term: blessed.Terminal, message: Optional[str] = None):
        self.term = term
        self.message = message

    def rows(self) -> int:
        return 1 if self.message is not None else 0

    def render(self, model):
        if self.message is None:
            return []
        return [f"{self.term.black_on_bright_black('       ')} {self.message}"]


class FancyGutter(Margin):
    """Line numbers on a grey block; an empty last line gets a green marker.

    The marker line is followed by `message` as a dimmed hint telling the
    user that Enter submits.
    """

    def __init__(self, term: blessed.Terminal, message: str = ""):
        self.term = term
        self.message = message

    def width(self) -> int:
        return EditorConstants.FANCY_GUTTER_WIDTH

    def render(self, line_index, model):
        term = self.term
        on_cursor = line_index == model.position.line
        marker = EditorConstants.FANCY_MARKER
        if line_index + 1 == model.line_count() and not model.line(line_index):
            hint = term.bright_black(self.message) if self.message else ""
            if on_cursor:
                return f"{term.black_on_green(f'      {marker} ')} {hint}"
            return f"{term.black_on_green(f'     {marker} ')}  {hint}"
        if on_cursor:
            return f"{term.black_on_bright_black(f'  {line_index + 1:>5} ')} "
        return f"{term.black_on_bright_black(f' {line_index + 1:>5} ')}  "


class FancyFooter(Footer):
    def __init__(self, term: blessed.Terminal):
        self.term = term

    def rows(self) -> int:
        return 1

    def render(self, model):
        focus = model.position
        column = min(focus.column, model.current_line_len())
        return [
            f"{self.term.black_on_bright_black('  info ')}"
            f" Lines: {model.line_count():>3} "
            f" Chars: {model.char_count():>3} "
            f" Ln {focus.line}, Col {column} "
        ]


@dataclass
class Style:
    """A header, margin and footer used together."""
    header: Header = field(default_factory=NoHeader)
    margin: Margin = field(default_factory=NoMargin)
    footer: Footer = field(default_factory=NoFooter)

    @classmethod
    def plain(cls) -> "Style":
        return cls()

    @classmethod
    def classic(cls, header_message: str = EditorConstants.DEFAULT_HEADER_MESSAGE) -> "Style":
        return cls(ClassicHeader(header_message), ClassicGutter(), ClassicFooter())

    @classmethod
    def fancy(
        cls,
        term: Optional[blessed.Terminal] = None,
        header_message: Optional[str] = None,
        gutter_message: str = "",
    ) -> "Style":
        term = term or blessed.Terminal()
        return cls(
            FancyHeader(term, header_message),
            FancyGutter(term, gutter_message),
            FancyFooter(term),
        )

    @classmethod
    def from_name(
        cls,
        name: str,
        term: Optional[blessed.Terminal] = None,
        header_message: str = EditorConstants.DEFAULT_HEADER_MESSAGE,
        gutter_message: str = "",
    ) -> "Style":
        """Build one of the named styles ("plain", "classic", "fancy")."""
        if name == "plain":
            return cls.plain()
        if name == "classic":
            return cls.classic(header_message)
        if name == "fancy":
            return cls.fancy(term, header_message or None, gutter_message)
        raise ConfigError(f"unknown style {name!r}; expected one of {EditorConstants.STYLE_NAMES}")
