"""Constants and configuration for the inedit prompt."""


class EditorConstants:
    """Central configuration constants for the editor."""

    # Editing
    TAB_WIDTH = 4  # Tab inserts spaces up to the next multiple of this

    # Classic style
    CLASSIC_GUTTER_DIGITS = 5  # Right-aligned line number width
    CLASSIC_GUTTER_PAD = 3  # Width of the " │ " delimiter
    CLASSIC_DELIM = " │ "
    CLASSIC_DELIM_BOLD = " ┃ "
    DEFAULT_HEADER_MESSAGE = "Input Prompt"

    # Fancy style
    FANCY_GUTTER_WIDTH = 9
    FANCY_MARKER = "▶"

    # Viewport
    MIN_ROW_BUDGET = 1  # Never plan fewer text rows than this

    # Settings
    SETTINGS_APP_NAME = "inedit"
    SETTINGS_FILENAME = "settings.json"
    STYLE_NAMES = ("plain", "classic", "fancy")
