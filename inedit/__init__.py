"""inedit - an interactive multi-line text prompt for the terminal."""

from .buffer import TextBuffer
from .commands import CommandRegistry, DebugKeybinding
from .editor import Editor, EditorConfig, read
from .errors import ConfigError, InEditError, TerminalIOError
from .keyboard import KeyEvent, KeyType
from .model import TextModel
from .renderer import DrawState, Renderer
from .selection import Position, Selection
from .styles import Footer, Header, Margin, Style
from .terminal import TerminalInterface, TerminalOutput
from .viewport import plan_viewport

__all__ = [
    'TextBuffer',
    'CommandRegistry',
    'DebugKeybinding',
    'Editor',
    'EditorConfig',
    'read',
    'ConfigError',
    'InEditError',
    'TerminalIOError',
    'KeyEvent',
    'KeyType',
    'TextModel',
    'DrawState',
    'Renderer',
    'Position',
    'Selection',
    'Footer',
    'Header',
    'Margin',
    'Style',
    'TerminalInterface',
    'TerminalOutput',
    'plan_viewport',
]
