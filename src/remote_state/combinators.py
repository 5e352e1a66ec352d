"""Pure accessors and combinators over ``ResultState``.

Every function here dispatches on the variant with ``match`` and ends in
``assert_never``, so adding a variant to ``ResultState`` makes each of them a
type-checking error until it is handled.

Callbacks are trusted: an exception raised by a callback propagates to the
caller unchanged.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, assert_never

from remote_state.state import Failure, Loading, Success

if TYPE_CHECKING:
    from collections.abc import Callable

    from remote_state.state import ResultState


# --- Extraction ---


def get_or_null[T](state: ResultState[T]) -> T | None:
    """Return the best value available so far.

    ``Success`` yields its value, ``Loading`` its previous value (possibly
    ``None``), ``Failure`` always ``None``.
    """
    match state:
        case Loading(value=value) | Success(value=value):
            return value
        case Failure():
            return None
        case _:
            assert_never(state)


def error_or_null(state: ResultState[object]) -> Exception | None:
    """Return the stored error for ``Failure``, ``None`` for other variants."""
    match state:
        case Failure(error=error):
            return error
        case Loading() | Success():
            return None
        case _:
            assert_never(state)


def get_or_else[T, R](
    state: ResultState[T],
    on_loading: Callable[[T | None], R],
    on_failure: Callable[[Exception], R],
) -> T | R:
    """Return the success value, or compute a fallback for the other variants.

    Exactly one of: the value is returned directly, ``on_loading(value)`` is
    called, or ``on_failure(error)`` is called.
    """
    match state:
        case Success(value=value):
            return value
        case Loading(value=value):
            return on_loading(value)
        case Failure(error=error):
            return on_failure(error)
        case _:
            assert_never(state)


def get_or_default[T, R](state: ResultState[T], default: R) -> T | R:
    """Return ``get_or_null(state)``, or *default* when that is ``None``."""
    value = get_or_null(state)
    return default if value is None else value


# --- Folding and mapping ---


def fold[T, R](
    state: ResultState[T],
    on_loading: Callable[[T | None], R],
    on_success: Callable[[T], R],
    on_failure: Callable[[Exception], R],
) -> R:
    """Reduce *state* to ``R`` by calling exactly one of the three callbacks.

    This is the canonical way to render a state without matching on it
    directly.

    Example:
        label = fold(
            state,
            on_loading=lambda _: "loading...",
            on_success=lambda user: user.name,
            on_failure=lambda err: f"error: {err}",
        )
    """
    match state:
        case Loading(value=value):
            return on_loading(value)
        case Success(value=value):
            return on_success(value)
        case Failure(error=error):
            return on_failure(error)
        case _:
            assert_never(state)


def map_state[T, R](
    state: ResultState[T], transform: Callable[[T], R]
) -> ResultState[R]:
    """Transform the payload of *state*, keeping its variant.

    ``Loading`` transforms its previous value only when there is one,
    ``Success`` transforms and re-wraps, ``Failure`` is rebuilt around the
    same error object and *transform* is not called.
    """
    match state:
        case Loading(value=None):
            return Loading(None)
        case Loading(value=value):
            return Loading(transform(value))
        case Success(value=value):
            return Success(transform(value))
        case Failure(error=error):
            return Failure(error)
        case _:
            assert_never(state)


# --- Tap hooks ---


def on_loading[T](
    state: ResultState[T], action: Callable[[T | None], object]
) -> ResultState[T]:
    """Call ``action(value)`` if *state* is ``Loading``; return *state*."""
    if isinstance(state, Loading):
        action(state.value)
    return state


def on_success[T](
    state: ResultState[T], action: Callable[[T], object]
) -> ResultState[T]:
    """Call ``action(value)`` if *state* is ``Success``; return *state*."""
    if isinstance(state, Success):
        action(state.value)
    return state


def on_failure[T](
    state: ResultState[T], action: Callable[[Exception], object]
) -> ResultState[T]:
    """Call ``action(error)`` if *state* is ``Failure``; return *state*."""
    if isinstance(state, Failure):
        action(state.error)
    return state


__all__ = [
    "error_or_null",
    "fold",
    "get_or_default",
    "get_or_else",
    "get_or_null",
    "map_state",
    "on_failure",
    "on_loading",
    "on_success",
]
