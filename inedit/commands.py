"""Command pattern implementation for editor key bindings.

A dispatcher is any callable `(event, model) -> bool` that applies one
key event to the TextModel and returns False to end the session.
`CommandRegistry.dispatch` is the default one.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Callable, Dict, Optional, Tuple

from .clipboard import Clipboard
from .constants import EditorConstants
from .keyboard import KeyEvent, KeyType

if TYPE_CHECKING:
    from .model import TextModel

Keybinding = Callable[[KeyEvent, 'TextModel'], bool]


class EditorCommand(ABC):
    """Base class for editor commands."""

    @abstractmethod
    def execute(self, registry: 'CommandRegistry', model: 'TextModel', key_event: KeyEvent) -> bool:
        """Execute the command.

        Returns:
            False to end the editing session, True to keep going
        """


class MovementCommand(EditorCommand):
    """Cursor movement; Shift extends the selection."""

    def __init__(self, extend: Optional[bool] = None):
        # None: extend when the event carries Shift
        self.extend = extend

    def execute(self, registry, model, key_event):
        extend = key_event.is_shift if self.extend is None else self.extend
        self._move(model, extend)
        return True

    @abstractmethod
    def _move(self, model: 'TextModel', extend: bool):
        """Perform the movement."""


class LeftCharCommand(MovementCommand):
    def _move(self, model, extend):
        model.move_left(extend)


class RightCharCommand(MovementCommand):
    def _move(self, model, extend):
        model.move_right(extend)


class UpLineCommand(MovementCommand):
    def _move(self, model, extend):
        model.move_up(extend)


class DownLineCommand(MovementCommand):
    def _move(self, model, extend):
        model.move_down(extend)


class TopCommand(MovementCommand):
    def _move(self, model, extend):
        model.move_to_top(extend)


class BottomCommand(MovementCommand):
    def _move(self, model, extend):
        model.move_to_bottom(extend)


class HomeCommand(MovementCommand):
    """Toggle between the first non-blank column and column 0."""

    def _move(self, model, extend):
        indent = model.leading_whitespace()
        if model.position.column == indent:
            model.move_to_column(0, extend)
        else:
            model.move_to_column(indent, extend)


class EndOfLineCommand(MovementCommand):
    def _move(self, model, extend):
        model.move_to_line_end(extend)


class EditCommand(EditorCommand):
    """Base class for editing commands; editing never ends the session."""

    def execute(self, registry, model, key_event):
        self._edit(registry, model, key_event)
        return True

    @abstractmethod
    def _edit(self, registry: 'CommandRegistry', model: 'TextModel', key_event: KeyEvent):
        """Perform the edit."""


class BackspaceCommand(EditCommand):
    def _edit(self, registry, model, key_event):
        model.delete_backward()


class DeleteCharCommand(EditCommand):
    def _edit(self, registry, model, key_event):
        model.delete_forward()


class TabCommand(EditCommand):
    """Insert spaces up to the next tab stop, counted from column 0."""

    def _edit(self, registry, model, key_event):
        model.delete_selection()
        model.clamp()
        width = registry.tab_width
        model.insert_str(" " * (width - model.position.column % width))


class BackTabCommand(EditCommand):
    """Remove up to one tab width of leading spaces."""

    def _edit(self, registry, model, key_event):
        line = model.current_line()[:registry.tab_width]
        model.delete_line_range(0, len(line) - len(line.lstrip(" ")))


class InsertTextCommand(EditCommand):
    def _edit(self, registry, model, key_event):
        model.insert_str(key_event.value)


class CopyCommand(EditCommand):
    """Copy the selection, or the current line when nothing is selected."""

    def _edit(self, registry, model, key_event):
        text = model.current_selection_text()
        registry.clipboard.copy(model.current_line() if text is None else text)


class CutCommand(EditCommand):
    """Cut the selection, or remove the current line when nothing is selected."""

    def _edit(self, registry, model, key_event):
        text = model.current_selection_text()
        if text is None:
            registry.clipboard.copy(model.remove_line(model.position.line))
        else:
            registry.clipboard.copy(text)
            model.delete_selection()


class PasteCommand(EditCommand):
    def _edit(self, registry, model, key_event):
        model.insert_str(registry.clipboard.paste())


class EnterCommand(EditorCommand):
    """Newline, or submit when pressed on an empty last line.

    Alt+Enter always inserts a newline.
    """

    def execute(self, registry, model, key_event):
        on_last_line = model.position.line + 1 == model.line_count()
        if not key_event.is_alt and on_last_line and model.current_line_len() == 0:
            return False
        model.insert_char("\n")
        return True


class QuitCommand(EditorCommand):
    def execute(self, registry, model, key_event):
        return False


class CommandRegistry:
    """Registry for mapping key combinations to commands."""

    def __init__(self, tab_width: int = EditorConstants.TAB_WIDTH, clipboard: Optional[Clipboard] = None):
        self._commands: Dict[Tuple[KeyType, str], EditorCommand] = {}
        self.tab_width = tab_width
        self.clipboard = clipboard or Clipboard()
        self._setup_default_commands()

    def _setup_default_commands(self):
        """Set up the default command mappings."""
        # Movement, plain and Shift (selection)
        for key_type in (KeyType.SPECIAL, KeyType.SHIFT_SPECIAL):
            self.register((key_type, 'left'), LeftCharCommand())
            self.register((key_type, 'right'), RightCharCommand())
            self.register((key_type, 'up'), UpLineCommand())
            self.register((key_type, 'down'), DownLineCommand())
            self.register((key_type, 'home'), HomeCommand())
            self.register((key_type, 'end'), EndOfLineCommand())
            self.register((key_type, 'page_up'), TopCommand())
            self.register((key_type, 'page_down'), BottomCommand())

        # Buffer top/bottom
        self.register((KeyType.CTRL, 'up'), TopCommand())
        self.register((KeyType.CTRL, 'down'), BottomCommand())

        # Editing commands
        self.register((KeyType.SPECIAL, 'backspace'), BackspaceCommand())
        self.register((KeyType.CTRL, 'h'), BackspaceCommand())
        self.register((KeyType.SPECIAL, 'delete'), DeleteCharCommand())
        self.register((KeyType.CTRL, 'd'), DeleteCharCommand())
        self.register((KeyType.SPECIAL, 'tab'), TabCommand())
        self.register((KeyType.SHIFT_SPECIAL, 'tab'), BackTabCommand())
        self.register((KeyType.SPECIAL, 'enter'), EnterCommand())
        self.register((KeyType.ALT, 'enter'), EnterCommand())

        # Clipboard
        self.register((KeyType.CTRL, 'c'), CopyCommand())
        self.register((KeyType.CTRL, 'x'), CutCommand())
        self.register((KeyType.CTRL, 'v'), PasteCommand())

        # Session
        self.register((KeyType.SPECIAL, 'escape'), QuitCommand())

    def register(self, key: Tuple[KeyType, str], command: EditorCommand):
        """Register a command for a key combination."""
        self._commands[key] = command

    def get_command(self, key_type: KeyType, value: str) -> Optional[EditorCommand]:
        """Get the command for a key combination."""
        return self._commands.get((key_type, value))

    def dispatch(self, key_event: KeyEvent, model: 'TextModel') -> bool:
        """Apply one key event to the model.

        Returns:
            False when the session should end
        """
        command = self.get_command(key_event.key_type, key_event.value)
        if command:
            return command.execute(self, model, key_event)

        # Handle regular text input
        if key_event.key_type == KeyType.PASTE or (
            key_event.key_type == KeyType.REGULAR and key_event.value.isprintable()
        ):
            return InsertTextCommand().execute(self, model, key_event)

        return True

    __call__ = dispatch


class DebugKeybinding:
    """Inserts a description of every key event; Escape ends the session."""

    def __call__(self, key_event: KeyEvent, model: 'TextModel') -> bool:
        if key_event.key_type == KeyType.SPECIAL and key_event.value == 'escape':
            return False
        model.insert_str(key_event.describe() + "\n")
        return True

    dispatch = __call__
