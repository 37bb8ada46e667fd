"""
Exceptions raised by the font analysis and repair tools.

File-system failures use the builtin FileNotFoundError / OSError so callers
can handle them the usual way.
"""


class ArgumentError(ValueError):
    """An argument is empty, malformed, or not validated by a prior analysis."""


class InvalidSessionStateError(RuntimeError):
    """An operation was requested before the session reached the needed state."""


class PresentationLoadError(ValueError):
    """The file exists but could not be parsed as a PowerPoint deck."""


class OperationCancelledError(RuntimeError):
    """A traversal was stopped because its caller was cancelled."""


class SessionNotFoundError(LookupError):
    """No open session is registered under the given id."""
