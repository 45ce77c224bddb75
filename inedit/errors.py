"""Exceptions raised by inedit."""


class InEditError(Exception):
    """Base class for every error raised by the package."""


class TerminalIOError(InEditError):
    """A read from or write to the terminal failed.

    Always raised from the underlying OSError. Never retried.
    """


class ConfigError(InEditError, ValueError):
    """An editor configuration value is invalid."""
