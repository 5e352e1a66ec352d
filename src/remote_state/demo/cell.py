"""A single-slot, observable holder for the current state."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import AsyncIterator, Callable

log = logging.getLogger(__name__)


class StateCell[T]:
    """Holds one current value and notifies observers when it changes.

    Writes that compare equal to the current value are dropped. Async
    observers are conflated: a slow reader of ``updates()`` skips straight to
    the latest value rather than seeing every intermediate one.

    The cell is meant to have a single writer (its owner); readers only
    observe.
    """

    def __init__(self, initial: T) -> None:
        self._value = initial
        self._version = 0
        self._listeners: list[Callable[[T], object]] = []
        self._changed = asyncio.Event()

    @property
    def value(self) -> T:
        return self._value

    @property
    def version(self) -> int:
        """Number of accepted writes so far."""
        return self._version

    def set(self, value: T) -> bool:
        """Store *value*; return False when it equals the current value."""
        if value == self._value:
            return False
        self._value = value
        self._version += 1
        for listener in list(self._listeners):
            listener(value)
        changed, self._changed = self._changed, asyncio.Event()
        changed.set()
        return True

    def subscribe(
        self, listener: Callable[[T], object], *, replay: bool = True
    ) -> Callable[[], None]:
        """Call *listener* on every accepted write.

        Args:
            listener: Called synchronously with each new value.
            replay: Also call it immediately with the current value.

        Returns:
            A function that removes the listener; calling it twice is harmless.
        """
        self._listeners.append(listener)
        if replay:
            listener(self._value)

        def unsubscribe() -> None:
            try:
                self._listeners.remove(listener)
            except ValueError:
                log.debug("StateCell listener already removed: %r", listener)

        return unsubscribe

    async def updates(self) -> AsyncIterator[T]:
        """Yield the current value, then each later value, forever.

        Stop by breaking out of the loop or cancelling the reading task.
        """
        seen = self._version
        yield self._value
        while True:
            if self._version == seen:
                await self._changed.wait()
                continue
            seen = self._version
            yield self._value

    def __repr__(self) -> str:
        return f"StateCell({self._value!r})"
