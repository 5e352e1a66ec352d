"""UserViewModel tests: cell updates, stale-data policy, teardown."""

from __future__ import annotations

import asyncio
from typing import Any

import pytest

from remote_state.demo.api import FakeUserApi
from remote_state.demo.models import User
from remote_state.demo.viewmodel import UserViewModel
from remote_state.state import Failure, Loading, Success
from remote_state.telemetry import SimpleReporter, TelemetryContext

pytestmark = pytest.mark.unit

ZHANG = User(id="101", name="张三", age=23)
LI = User(id="102", name="李四", age=24)


@pytest.mark.asyncio
async def test_initial_state_is_empty_loading(fast_api: FakeUserApi) -> None:
    async with UserViewModel(fast_api) as vm:
        assert vm.user.value == Loading(None)


@pytest.mark.asyncio
async def test_login_writes_terminal_state_into_cell(fast_api: FakeUserApi) -> None:
    async with UserViewModel(fast_api) as vm:
        terminal = await vm.login("101")

        assert terminal == Success(ZHANG)
        assert vm.user.value == Success(ZHANG)
        assert vm.pending == 0


@pytest.mark.asyncio
async def test_cell_observes_loading_before_terminal(fast_api: FakeUserApi) -> None:
    async with UserViewModel(fast_api) as vm:
        await vm.login("101")
        seen: list[Any] = []
        vm.user.subscribe(seen.append, replay=False)

        await vm.login("102")

        assert seen == [Loading(None), Success(LI)]


@pytest.mark.asyncio
async def test_keep_stale_seeds_loading_with_last_user(fast_api: FakeUserApi) -> None:
    async with UserViewModel(fast_api, keep_stale=True) as vm:
        await vm.login("101")
        seen: list[Any] = []
        vm.user.subscribe(seen.append, replay=False)

        await vm.login("999")

        assert seen[0] == Loading(ZHANG)
        assert isinstance(seen[1], Failure)
        assert seen[1].error.code == 404


@pytest.mark.asyncio
async def test_close_cancels_in_flight_loads() -> None:
    api = FakeUserApi(latency_s=10)
    vm = UserViewModel(api)
    task = vm.login("101")
    await asyncio.sleep(0)

    await vm.aclose()

    assert task.cancelled()
    assert vm.user.value == Loading(None)
    assert vm.pending == 0
    with pytest.raises(RuntimeError, match="closed"):
        vm.login("102")


@pytest.mark.asyncio
async def test_every_login_calls_the_api_again(fast_api: FakeUserApi) -> None:
    async with UserViewModel(fast_api) as vm:
        await vm.login("101")
        await vm.login("101")

    assert fast_api.calls == ["101", "101"]


@pytest.mark.asyncio
async def test_telemetry_is_forwarded(fast_api: FakeUserApi) -> None:
    reporter = SimpleReporter()
    tele = TelemetryContext(reporter, enabled=True)

    async with UserViewModel(fast_api, telemetry=tele) as vm:
        await vm.login("101")

    assert "run_observed.producer" in reporter.timings
