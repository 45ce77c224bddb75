"""Clipboard used by the copy, cut and paste bindings."""

import logging

import pyperclip

logger = logging.getLogger(__name__)


class Clipboard:
    """Plain-text clipboard backed by the system clipboard via pyperclip.

    The last copied text is also kept in memory. When no system
    clipboard mechanism is available (e.g. a headless Linux session),
    the clipboard switches to the in-memory copy for the rest of the
    session.
    """

    def __init__(self, use_system: bool = True):
        self.use_system = use_system
        self.text = ""

    def copy(self, text: str) -> None:
        self.text = text
        if not self.use_system:
            return
        try:
            pyperclip.copy(text)
        except pyperclip.PyperclipException as e:
            logger.debug(f"System clipboard unavailable, keeping text in memory: {e}")
            self.use_system = False

    def paste(self) -> str:
        if not self.use_system:
            return self.text
        try:
            return pyperclip.paste()
        except pyperclip.PyperclipException as e:
            logger.debug(f"System clipboard unavailable, using memory: {e}")
            self.use_system = False
            return self.text
