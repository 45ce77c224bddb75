"""Choosing which buffer lines fit on screen."""

from typing import Optional


def plan_viewport(
    line_count: int,
    cursor_line: int,
    rows: Optional[int],
    previous: tuple[int, int] = (0, 0),
) -> tuple[int, int]:
    """Return the half-open line range `(low, high)` to draw this frame.

    Args:
        line_count: Number of lines in the buffer.
        cursor_line: Line holding the focus.
        rows: Text rows available, or None when the terminal size is
            unknown (everything is drawn and nothing scrolls).
        previous: The range drawn last frame, `(0, 0)` before the first.

    The window only moves when the cursor would leave it: moving below
    makes the cursor the last visible line, moving above makes it the
    first. While the cursor stays inside the previous window the range is
    returned unchanged.
    """
    if rows is None or line_count <= rows:
        return (0, line_count)

    low, high = previous
    if cursor_line >= high:
        low = cursor_line - rows + 1
    elif cursor_line < low:
        low = cursor_line

    low = min(max(low, 0), line_count - rows)
    # A window of a different size (terminal resized, lines deleted) may
    # no longer contain the cursor once re-fitted.
    if not low <= cursor_line < low + rows:
        low = min(max(cursor_line - rows + 1, 0), line_count - rows)
    return (low, low + rows)
