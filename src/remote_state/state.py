"""The three-way lifecycle of an asynchronous value.

A ``ResultState`` is exactly one of:

- ``Loading``: a fetch is in flight; ``value`` carries the last known
  successful payload, or ``None`` when there is none yet.
- ``Success``: the fetch completed; ``value`` is always present.
- ``Failure``: the fetch raised; ``error`` is the exception it raised.

States are frozen and compared by value. Code that consumes them should
dispatch on the variant class (``match`` or ``combinators.fold``), never on
which fields happen to be ``None``.
"""

from __future__ import annotations

import dataclasses

from remote_state._validation import _require


@dataclasses.dataclass(frozen=True, slots=True)
class Loading[T]:
    """A fetch in flight, optionally carrying the previous successful value."""

    value: T | None = None


@dataclasses.dataclass(frozen=True, slots=True)
class Success[T]:
    """A completed fetch."""

    value: T

    def __post_init__(self) -> None:
        """Reject an absent payload."""
        _require(
            condition=self.value is not None,
            message="must not be None",
            field_name="Success.value",
        )


@dataclasses.dataclass(frozen=True, slots=True)
class Failure[T]:
    """A failed fetch, containing the raised error."""

    error: Exception

    def __post_init__(self) -> None:
        """Reject anything that is not an exception instance."""
        _require(
            condition=isinstance(self.error, Exception),
            message=f"must be an Exception instance, got {type(self.error).__name__}",
            field_name="Failure.error",
            exc=TypeError,
        )


type ResultState[T] = Loading[T] | Success[T] | Failure[T]


def loading[T](value: T | None = None) -> ResultState[T]:
    """Build a ``Loading`` state seeded with *value* (default: no value)."""
    return Loading(value)


def success[T](value: T) -> ResultState[T]:
    """Build a ``Success`` state; *value* must not be ``None``."""
    return Success(value)


def failure[T](error: Exception) -> ResultState[T]:
    """Build a ``Failure`` state around *error*."""
    return Failure(error)


def is_loading(state: ResultState[object]) -> bool:
    return isinstance(state, Loading)


def is_success(state: ResultState[object]) -> bool:
    return isinstance(state, Success)


def is_failure(state: ResultState[object]) -> bool:
    return isinstance(state, Failure)


__all__ = [
    "Failure",
    "Loading",
    "ResultState",
    "Success",
    "failure",
    "is_failure",
    "is_loading",
    "is_success",
    "loading",
    "success",
]
