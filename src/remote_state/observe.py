"""Drive an async producer through the ``ResultState`` lifecycle.

``run_observed`` turns one async call into a cold, two-step sequence::

    async for state in run_observed(lambda: api.get_user("101")):
        cell.set(state)  # Loading(None), then Success(user) or Failure(err)

Nothing runs until the sequence is iterated, and every iteration is a fresh
run that calls the producer again. Producer exceptions are delivered as
``Failure`` data and the sequence still finishes normally. Cancellation is
not an outcome: ``asyncio.CancelledError`` propagates to the consumer and no
further state is emitted.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from remote_state._validation import _require_zero_arg_callable
from remote_state.state import Failure, Loading, Success
from remote_state.telemetry import TelemetryContext

if TYPE_CHECKING:
    from collections.abc import AsyncIterator, Awaitable, Callable

    from remote_state.state import ResultState
    from remote_state.telemetry import TelemetryContextProtocol

log = logging.getLogger(__name__)

type Producer[T] = Callable[[], Awaitable[T]]


class ObservedRun[T]:
    """A cold async iterable of ``ResultState`` values for one producer.

    Each ``async for`` (or ``collect``/``terminal`` call) performs an
    independent run and yields exactly two states: ``Loading(seed)`` and
    then one terminal ``Success`` or ``Failure``. A single iterator obtained
    via ``aiter()`` is exhausted after its run and does not restart.
    """

    __slots__ = ("_producer", "_seed", "_telemetry")

    def __init__(
        self,
        producer: Producer[T],
        *,
        seed: T | None = None,
        telemetry: TelemetryContextProtocol | None = None,
    ) -> None:
        self._producer = producer
        self._seed = seed
        self._telemetry = telemetry if telemetry is not None else TelemetryContext()

    @property
    def seed(self) -> T | None:
        return self._seed

    def __aiter__(self) -> AsyncIterator[ResultState[T]]:
        return self._drive()

    def __repr__(self) -> str:
        return f"ObservedRun(producer={self._producer!r}, seed={self._seed!r})"

    async def _drive(self) -> AsyncIterator[ResultState[T]]:
        first: ResultState[T] = Loading(self._seed)
        log.debug("run_observed: emitting %s", first)
        yield first

        terminal = await self._settle()
        log.debug("run_observed: emitting %s", terminal)
        yield terminal

    async def _settle(self) -> ResultState[T]:
        tele = self._telemetry
        state: ResultState[T]
        with tele("run_observed.producer"):
            try:
                # Building Success inside the try turns a None result into
                # a Failure instead of an exception escaping the sequence.
                state = Success(await self._producer())
            except Exception as exc:
                log.debug(
                    "run_observed: producer failed with %s: %s",
                    type(exc).__name__,
                    exc,
                )
                state = Failure(exc)

        if isinstance(state, Failure):
            tele.count("run_observed.failure", error_type=type(state.error).__name__)
        else:
            tele.count("run_observed.success")
        return state

    async def collect(
        self, sink: Callable[[ResultState[T]], object]
    ) -> ResultState[T]:
        """Run once, passing every state to *sink* in order.

        Returns:
            The terminal state (``Success`` or ``Failure``).
        """
        last: ResultState[T] = Loading(self._seed)
        async for state in self:
            sink(state)
            last = state
        return last

    async def terminal(self) -> ResultState[T]:
        """Run once and return only the terminal state."""
        last: ResultState[T] = Loading(self._seed)
        async for state in self:
            last = state
        return last


def run_observed[T](
    producer: Producer[T],
    *,
    seed: T | None = None,
    telemetry: TelemetryContextProtocol | None = None,
) -> ObservedRun[T]:
    """Wrap *producer* in a lazily started, observable lifecycle.

    Args:
        producer: Zero-argument callable returning an awaitable of ``T``.
            It is not called here; it is called once per iteration.
        seed: Value for the initial ``Loading`` state, typically the last
            successful result. The caller decides whether to carry it over.
        telemetry: Optional telemetry context; defaults to the
            environment-controlled ``TelemetryContext()``.

    Returns:
        An ``ObservedRun`` yielding ``Loading(seed)`` then ``Success``/``Failure``.

    Raises:
        TypeError: If *producer* is not a zero-argument callable.
    """
    _require_zero_arg_callable(producer, "producer")
    return ObservedRun(producer, seed=seed, telemetry=telemetry)


__all__ = ["ObservedRun", "Producer", "run_observed"]
