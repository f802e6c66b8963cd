"""Result type for explicit success/failure values.

A ``Result`` is either ``Ok`` (holding a value) or ``Err`` (holding an
exception). Variants are frozen at construction, so a Result can be passed
around and read from any thread without copying.

Example:
    def parse_port(raw: str) -> Result[int, ValueError]:
        try:
            return Result.ok(int(raw))
        except ValueError as exc:
            return Result.err(exc)

    match parse_port("8080"):
        case Ok(port):
            ...
        case Err(error):
            ...
"""

from __future__ import annotations

import abc
import dataclasses
from typing import TYPE_CHECKING, Any, TypeGuard

from fallible.errors import InvalidUnwrap

if TYPE_CHECKING:
    from collections.abc import Callable

__all__ = ["Err", "Ok", "Result", "is_err", "is_ok"]


class Result[T, E: Exception](abc.ABC):
    """Common base of ``Ok`` and ``Err``.

    Never instantiated directly; use ``Result.ok`` / ``Result.err`` or the
    variant classes.
    """

    __slots__ = ()

    @staticmethod
    def ok[V](value: V) -> Ok[V, Any]:
        """Wrap ``value`` as a success."""
        return Ok(value)

    @staticmethod
    def err[X: Exception](error: X) -> Err[Any, X]:
        """Wrap ``error`` as a failure."""
        return Err(error)

    @abc.abstractmethod
    def is_ok(self) -> bool:
        """Return True for the success variant."""

    def is_error(self) -> bool:
        """Return True for the failure variant."""
        return not self.is_ok()

    @abc.abstractmethod
    def unwrap(self) -> T:
        """Return the success value, or raise ``InvalidUnwrap`` on ``Err``."""

    @abc.abstractmethod
    def unwrap_error(self) -> E:
        """Return the held error, or raise ``InvalidUnwrap`` on ``Ok``."""

    @abc.abstractmethod
    def raise_error(self) -> None:
        """Raise the held error on ``Err``; no-op on ``Ok``."""

    @abc.abstractmethod
    def map[U](self, fn: Callable[[T], U]) -> Result[U, E]:
        """Apply ``fn`` to the success value; pass failures through untouched."""


@dataclasses.dataclass(frozen=True, slots=True)
class Ok[T, E: Exception](Result[T, E]):
    """A successful result."""

    value: T

    def is_ok(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value

    def unwrap_error(self) -> E:
        raise InvalidUnwrap("Called unwrapError on an Ok value")

    def raise_error(self) -> None:
        return None

    def map[U](self, fn: Callable[[T], U]) -> Ok[U, E]:
        return Ok(fn(self.value))


@dataclasses.dataclass(frozen=True, slots=True)
class Err[T, E: Exception](Result[T, E]):
    """A failed result, containing the error."""

    error: E

    def is_ok(self) -> bool:
        return False

    def unwrap(self) -> T:
        # Payloads are not validated, so only chain real exceptions.
        cause = self.error if isinstance(self.error, BaseException) else None
        raise InvalidUnwrap(f"Called unwrap on an Err value: {self.error}") from cause

    def unwrap_error(self) -> E:
        return self.error

    def raise_error(self) -> None:
        raise self.error

    def map[U](self, fn: Callable[[T], U]) -> Err[U, E]:
        return Err(self.error)


def is_ok[T, E: Exception](result: Result[T, E]) -> TypeGuard[Ok[T, E]]:
    """Return True if ``result`` is an ``Ok``, narrowing its type."""
    return isinstance(result, Ok)


def is_err[T, E: Exception](result: Result[T, E]) -> TypeGuard[Err[T, E]]:
    """Return True if ``result`` is an ``Err``, narrowing its type."""
    return isinstance(result, Err)
