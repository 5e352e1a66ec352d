"""User API protocol and an in-memory fake."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from remote_state.demo.models import User
from remote_state.errors import NotFoundError

if TYPE_CHECKING:
    from collections.abc import Mapping

log = logging.getLogger(__name__)

DEFAULT_USERS: tuple[User, ...] = (
    User(id="101", name="张三", age=23),
    User(id="102", name="李四", age=24),
    User(id="103", name="王五", age=25),
)


@runtime_checkable
class UserApi(Protocol):
    """Minimal user API: fetch one user by id."""

    async def get_user(self, user_id: str) -> User:
        """Return the user, or raise ``RemoteError`` on failure."""
        ...


class FakeUserApi:
    """In-memory ``UserApi`` with simulated latency.

    Unknown ids raise ``NotFoundError`` (code 404) after the same delay a
    successful lookup takes.
    """

    def __init__(
        self,
        users: Mapping[str, User] | None = None,
        *,
        latency_s: float = 1.0,
    ) -> None:
        if latency_s < 0:
            raise ValueError("latency_s must be >= 0")
        self._users: dict[str, User] = (
            dict(users) if users is not None else {u.id: u for u in DEFAULT_USERS}
        )
        self.latency_s = latency_s
        self.calls: list[str] = []

    async def get_user(self, user_id: str) -> User:
        self.calls.append(user_id)
        log.debug("FakeUserApi.get_user(%r)", user_id)
        await asyncio.sleep(self.latency_s)
        try:
            return self._users[user_id]
        except KeyError:
            raise NotFoundError(f"user {user_id} not found") from None
