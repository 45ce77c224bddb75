"""Cursor positions and the focus/anchor selection model."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True, order=True)
class Position:
    """A (line, column) location in the buffer.

    Ordering is lexicographic by line, then column. The column may exceed
    the line's length until the owner clamps it.
    """
    line: int = 0
    column: int = 0


@dataclass
class Selection:
    """The editing cursor (focus) plus an optional fixed anchor."""
    focus: Position = Position()
    anchor: Optional[Position] = None

    def fix_anchor(self) -> None:
        """Remove the anchor if it sits on the focus."""
        if self.anchor == self.focus:
            self.anchor = None

    def set_anchor(self, anchored: bool) -> None:
        """Anchor at the focus if not already anchored, or unanchor."""
        if anchored:
            if self.anchor is None:
                self.anchor = self.focus
        else:
            self.anchor = None

    @property
    def is_active(self) -> bool:
        return self.anchor is not None

    def range(self) -> Optional[tuple[Position, Position]]:
        """Return (start, end) in document order, or None without an anchor."""
        if self.anchor is None:
            return None
        return (min(self.focus, self.anchor), max(self.focus, self.anchor))
