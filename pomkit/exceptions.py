from __future__ import annotations


class PomkitError(RuntimeError):
    """Base class for all pomkit-specific errors."""


class IllegalStateError(PomkitError):
    """Raised when a net violates a structural invariant of the current step."""


class NotAPartialOrderError(IllegalStateError):
    """Raised when a place has more than one ingoing or outgoing arc where a
    sequence or partial order is required."""


class UnreachableError(PomkitError):
    """Raised when a callback fires on a path the calling convention rules out."""
