"""Keyboard input handling using curtsies-style tokens."""

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional


class KeyType(Enum):
    """Types of key events."""
    REGULAR = "regular"
    ALT = "alt"
    CTRL = "ctrl"
    SPECIAL = "special"
    SHIFT_SPECIAL = "shift_special"  # Shift + arrow keys, etc.
    PASTE = "paste"  # Bracketed paste; value holds the pasted text


@dataclass
class KeyEvent:
    """Represents a parsed keyboard event."""
    key_type: KeyType
    value: str  # The base key (e.g., 'a', 'left', 'backspace')
    raw: str  # The raw token from curtsies
    is_alt: bool = False
    is_ctrl: bool = False
    is_shift: bool = False
    is_sequence: bool = False

    def describe(self) -> str:
        flags = [name for name, on in (
            ("alt", self.is_alt), ("ctrl", self.is_ctrl),
            ("shift", self.is_shift), ("seq", self.is_sequence),
        ) if on]
        raw = self.raw.encode('unicode_escape').decode('ascii')
        text = f"type={self.key_type.value} value={self.value!r} raw='{raw}'"
        if flags:
            text += f" flags={'+'.join(flags)}"
        return text


SPECIAL_KEYS = {
    'left', 'right', 'up', 'down', 'home', 'end', 'enter', 'backspace',
    'delete', 'page_up', 'page_down', 'insert', 'tab',
}


def parse_key(key) -> KeyEvent:
    """Parse a curtsies event (key name string or paste event) into a KeyEvent."""
    paste = getattr(key, 'events', None)
    if paste is not None and not isinstance(key, str):
        text = ''.join(_paste_char(str(e)) for e in paste)
        return KeyEvent(key_type=KeyType.PASTE, value=text, raw=text)

    key_str = str(key)

    # Curtsies-style names like '<LEFT>', '<Ctrl-x>', '<Esc+Ctrl-J>', '<Shift-TAB>'
    if len(key_str) > 2 and key_str.startswith('<') and key_str.endswith('>'):
        return _parse_named(key_str)

    # Single-byte ASCII control chars (Ctrl-<letter>)
    if len(key_str) == 1:
        o = ord(key_str)
        if o in (8, 127):
            return KeyEvent(key_type=KeyType.SPECIAL, value='backspace', raw=key_str)
        if o == 9:
            return KeyEvent(key_type=KeyType.SPECIAL, value='tab', raw=key_str)
        if o in (10, 13):
            return KeyEvent(key_type=KeyType.SPECIAL, value='enter', raw=key_str)
        if 1 <= o <= 26:
            ch = chr(ord('a') + o - 1)
            return KeyEvent(key_type=KeyType.CTRL, value=ch, raw=key_str, is_ctrl=True)
        if o == 27:
            return KeyEvent(key_type=KeyType.SPECIAL, value='escape', raw=key_str)

    return KeyEvent(key_type=KeyType.REGULAR, value=key_str, raw=key_str)


def _parse_named(key_str: str) -> KeyEvent:
    name = key_str[1:-1].lower().replace('+', '-')
    parts = name.split('-')
    base = parts[-1]
    mods = set(parts[:-1])
    # Esc as a prefix is how terminals send Alt
    if 'meta' in mods or 'esc' in mods:
        mods.add('alt')
    is_alt = 'alt' in mods
    is_shift = 'shift' in mods

    if base in ('pageup', 'page_up'):
        base = 'page_up'
    elif base in ('pagedown', 'page_down'):
        base = 'page_down'
    elif base in ('esc', 'escape'):
        base = 'escape'
    elif base in ('space', 'spacebar', 'spc'):
        base = ' '

    # Ctrl-J / Ctrl-M are what the terminal sends for Enter, Ctrl-I for Tab,
    # Ctrl-H for Backspace on many terminals
    if 'ctrl' in mods and base in ('j', 'm'):
        return KeyEvent(key_type=KeyType.SPECIAL, value='enter', raw=key_str,
                        is_alt=is_alt, is_sequence=True)
    if 'ctrl' in mods and base == 'i':
        return KeyEvent(key_type=KeyType.SPECIAL, value='tab', raw=key_str, is_sequence=True)

    if base == ' ' and not mods:
        return KeyEvent(key_type=KeyType.REGULAR, value=' ', raw=' ')
    if base == 'escape' and not mods - {'alt', 'esc'}:
        return KeyEvent(key_type=KeyType.SPECIAL, value='escape', raw='\x1b')

    if 'ctrl' in mods:
        return KeyEvent(key_type=KeyType.CTRL, value=base, raw=key_str, is_ctrl=True,
                        is_alt=is_alt, is_shift=is_shift, is_sequence=True)
    if is_alt and (base in SPECIAL_KEYS or len(base) == 1):
        return KeyEvent(key_type=KeyType.ALT, value=base, raw=key_str, is_alt=True,
                        is_shift=is_shift, is_sequence=True)
    if is_shift and base in SPECIAL_KEYS:
        return KeyEvent(key_type=KeyType.SHIFT_SPECIAL, value=base, raw=key_str,
                        is_shift=True, is_sequence=True)
    if base in SPECIAL_KEYS:
        return KeyEvent(key_type=KeyType.SPECIAL, value=base, raw=key_str, is_sequence=True)
    # Unknown token (function keys etc.)
    return KeyEvent(key_type=KeyType.SPECIAL, value=base, raw=key_str, is_sequence=True)


def _paste_char(token: str) -> str:
    """Turn one key name from a paste event back into the text it stands for."""
    event = parse_key(token)
    if event.key_type == KeyType.REGULAR:
        return event.value
    if event.key_type == KeyType.SPECIAL:
        if event.value == 'enter':
            return '\n'
        if event.value == 'tab':
            return '\t'
    return ''


class KeyboardHandler:
    """Turns the terminal's raw curtsies events into KeyEvents."""

    def __init__(self, terminal_interface):
        """Initialize with a terminal interface."""
        self.terminal = terminal_interface

    def events(self) -> Iterator[KeyEvent]:
        for key in self.terminal.events():
            yield parse_key(key)

    def get_key_event(self) -> Optional[KeyEvent]:
        """Block for the next key event; None if input has ended."""
        return next(self.events(), None)
