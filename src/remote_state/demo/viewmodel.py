"""View model wiring the user API into an observable current state."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Self

from remote_state.combinators import get_or_null
from remote_state.demo.cell import StateCell
from remote_state.observe import run_observed
from remote_state.state import loading

if TYPE_CHECKING:
    from types import TracebackType

    from remote_state.demo.api import UserApi
    from remote_state.demo.models import User
    from remote_state.state import ResultState
    from remote_state.telemetry import TelemetryContextProtocol

log = logging.getLogger(__name__)


class UserViewModel:
    """Owns the current user state and the tasks that update it.

    ``user`` starts as an empty ``Loading`` state. Each ``login`` call runs
    the API call through ``run_observed`` on its own task and writes every
    emitted state into ``user``. Closing the view model cancels whatever is
    still in flight, and nothing is written after that.

    Args:
        api: The injected user API.
        keep_stale: When True, a new load is seeded with the last known user
            so the UI can keep showing it while reloading.
        telemetry: Optional telemetry context forwarded to ``run_observed``.
    """

    def __init__(
        self,
        api: UserApi,
        *,
        keep_stale: bool = False,
        telemetry: TelemetryContextProtocol | None = None,
    ) -> None:
        self._api = api
        self.keep_stale = keep_stale
        self._telemetry = telemetry
        self.user: StateCell[ResultState[User]] = StateCell(loading())
        self._tasks: set[asyncio.Task[ResultState[User]]] = set()
        self._closed = False

    @property
    def pending(self) -> int:
        """Number of loads still in flight."""
        return len(self._tasks)

    def login(self, user_id: str) -> asyncio.Task[ResultState[User]]:
        """Start loading *user_id*; the returned task resolves to the terminal state.

        Raises:
            RuntimeError: If the view model has been closed.
        """
        if self._closed:
            raise RuntimeError("UserViewModel is closed")

        seed = get_or_null(self.user.value) if self.keep_stale else None
        run = run_observed(
            lambda: self._api.get_user(user_id),
            seed=seed,
            telemetry=self._telemetry,
        )
        log.info("Loading user %s", user_id)
        task = asyncio.create_task(run.collect(self.user.set), name=f"login:{user_id}")
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    async def aclose(self) -> None:
        """Cancel in-flight loads and wait for them to unwind."""
        self._closed = True
        tasks = list(self._tasks)
        for task in tasks:
            task.cancel()
        results = await asyncio.gather(*tasks, return_exceptions=True)
        for result in results:
            if isinstance(result, Exception):
                log.warning("Load ended with an error during close: %s", result)

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()
