"""Error taxonomy for Autograph.

I/O failures during discovery and writing are not wrapped: they surface as the
``OSError`` raised by the filesystem call.  The classes below cover the
remaining failure kinds.
"""

from __future__ import annotations


class AutographError(Exception):
    """Base class for errors raised by Autograph components."""


class ParameterError(AutographError):
    """Raised when a named command-line flag is missing its required value."""

    def __init__(self, flag: str, message: str | None = None) -> None:
        self.flag = flag
        super().__init__(message or f"{flag} parameter found, but its value is absent")


class CompileError(AutographError):
    """Raised by a model compiler when sources cannot be turned into a model."""


class ComposeError(AutographError):
    """Raised by a composer when artifacts cannot be produced from the model."""
