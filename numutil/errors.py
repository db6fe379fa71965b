"""Error types shared by the numutil modules."""

from __future__ import annotations


class UndefinedResultError(ZeroDivisionError):
    """Raised when an operation would divide by zero and has no defined value."""
