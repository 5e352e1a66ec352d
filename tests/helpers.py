"""Test helpers (small, reusable doubles).

Keep this file tiny and purpose-built: producers here stand in for remote
calls so driver tests do not grow one-off coroutines.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from typing import Any


@dataclass
class ScriptedProducer:
    """Async producer that returns (or raises) a scripted sequence of items.

    Each call pops the next item; exceptions are raised, anything else is
    returned. An empty script returns ``default``.
    """

    script: list[Any] = field(default_factory=list)
    default: Any = "ok"
    calls: int = 0

    async def __call__(self) -> Any:
        self.calls += 1
        await asyncio.sleep(0)
        if not self.script:
            return self.default
        item = self.script.pop(0)
        if isinstance(item, BaseException):
            raise item
        return item


@dataclass
class GateProducer:
    """Async producer that blocks until ``release`` is set.

    ``started`` is set once the producer is running, so a test can act while
    the driver is suspended between the two emissions.
    """

    value: Any = "released"
    started: asyncio.Event = field(default_factory=asyncio.Event)
    release: asyncio.Event = field(default_factory=asyncio.Event)
    calls: int = 0
    cancelled: bool = False

    async def __call__(self) -> Any:
        self.calls += 1
        self.started.set()
        try:
            await self.release.wait()
        except asyncio.CancelledError:
            self.cancelled = True
            raise
        return self.value


async def drain(run: Any) -> list[Any]:
    """Collect every state of one run into a list."""
    return [state async for state in run]
