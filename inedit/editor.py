"""Interactive session: read keys, edit the model, redraw, repeat."""

from dataclasses import dataclass, field
from typing import Optional
import logging

from .commands import CommandRegistry, Keybinding
from .constants import EditorConstants
from .errors import ConfigError
from .keyboard import KeyboardHandler
from .model import TextModel
from .renderer import Renderer
from .selection import Position
from .styles import Footer, Header, Margin, NoFooter, NoHeader, NoMargin, Style
from .terminal import TerminalInterface, TerminalOutput

logger = logging.getLogger(__name__)


@dataclass
class EditorConfig:
    """Everything needed to run one editing session.

    `terminal` must also provide `raw_input()` and `events()` (as
    TerminalInterface does) when the session reads from a real keyboard.
    """
    initial_text: str = ""
    cursor: Position = Position()
    lazy: bool = True
    header: Header = field(default_factory=NoHeader)
    margin: Margin = field(default_factory=NoMargin)
    footer: Footer = field(default_factory=NoFooter)
    terminal: Optional[TerminalOutput] = None
    keybinding: Optional[Keybinding] = None
    tab_width: int = EditorConstants.TAB_WIDTH

    def __post_init__(self):
        if self.cursor.line < 0 or self.cursor.column < 0:
            raise ConfigError(f"cursor must not be negative: {self.cursor}")
        if self.tab_width < 1:
            raise ConfigError(f"tab_width must be positive, got {self.tab_width}")
        if not isinstance(self.initial_text, str):
            raise ConfigError("initial_text must be a string")

    def with_style(self, style: Style) -> "EditorConfig":
        self.header = style.header
        self.margin = style.margin
        self.footer = style.footer
        return self


class Editor:
    """A multi-line prompt that returns the text once the user is done."""

    def __init__(self, config: Optional[EditorConfig] = None):
        self.config = config or EditorConfig()
        self.terminal = self.config.terminal or TerminalInterface()
        self.keyboard = KeyboardHandler(self.terminal)
        self.keybinding = self.config.keybinding or CommandRegistry(self.config.tab_width)
        self.model = TextModel(self.config.initial_text, self.config.cursor)
        self.renderer = Renderer(
            self.terminal,
            header=self.config.header,
            margin=self.config.margin,
            footer=self.config.footer,
            lazy=self.config.lazy,
        )

    def run_events(self, events) -> str:
        """Draw, then apply key events until the keybinding says stop.

        Terminal failures propagate unchanged; the frame is only cleared
        when the session ends normally.
        """
        self.renderer.draw(self.model)
        for event in events:
            if not self.keybinding(event, self.model):
                break
            self.renderer.redraw(self.model)
        self.renderer.finish()
        return self.model.contents()

    def read(self) -> str:
        """Run the session on the real keyboard and return the text."""
        logger.debug("session start: %d lines", self.model.line_count())
        with self.terminal.raw_input():
            result = self.run_events(self.keyboard.events())
        logger.debug("session end: %d chars", len(result))
        return result

    read_multiline = read


def read(style: Optional[Style] = None, **options) -> str:
    """Build an Editor from keyword options and run it.

    Example:
        text = read(initial_text="hello", style=Style.classic())
    """
    config = EditorConfig(**options)
    if style is not None:
        config.with_style(style)
    return Editor(config).read()
