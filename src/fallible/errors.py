"""Exception hierarchy for fallible."""

from __future__ import annotations


class FallibleError(Exception):
    """Base exception for all fallible errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint


class InvalidUnwrap(FallibleError):
    """An extraction was attempted on the wrong Result variant.

    This is a programming error, not a recoverable condition: callers are
    expected to check ``is_ok()`` / ``is_error()`` before unwrapping. It is
    deliberately distinct from the caller-supplied error held by an ``Err``
    so the two can be told apart with ``except``.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(
            message,
            hint=hint or "Check is_ok() or is_error() before unwrapping.",
        )
