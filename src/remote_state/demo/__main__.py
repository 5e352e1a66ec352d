"""Command-line demo: load users and print every state the UI would render.

Examples:
- python -m remote_state.demo 101 999
- python -m remote_state.demo 101 102 --keep-stale --latency 0.2
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from typing import TYPE_CHECKING

from remote_state.config import Config
from remote_state.demo.api import FakeUserApi
from remote_state.demo.render import render_user
from remote_state.demo.viewmodel import UserViewModel
from remote_state.errors import ConfigurationError
from remote_state.telemetry import SimpleReporter, TelemetryContext

if TYPE_CHECKING:
    from collections.abc import Sequence

    from remote_state.demo.models import User
    from remote_state.state import ResultState


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="python -m remote_state.demo",
        description="Load users through the fake API and print each rendered state.",
    )
    parser.add_argument(
        "ids",
        nargs="*",
        default=["101"],
        help="User ids to load in order (default: 101).",
    )
    parser.add_argument(
        "--latency",
        type=float,
        default=None,
        help="Fake API latency in seconds (overrides REMOTE_STATE_FAKE_LATENCY_S).",
    )
    parser.add_argument(
        "--keep-stale",
        action="store_true",
        default=None,
        help="Seed each load with the last loaded user.",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable DEBUG logging."
    )
    return parser


def _print_state(state: ResultState[User]) -> None:
    name, age = render_user(state)
    print(f"  {type(state).__name__:<8} {name}  {age}")  # noqa: T201


async def run_demo(ids: Sequence[str], config: Config) -> list[ResultState[User]]:
    """Load each id in turn; return the terminal states."""
    reporter = SimpleReporter()
    telemetry = TelemetryContext(reporter, enabled=config.telemetry_enabled)
    api = FakeUserApi(latency_s=config.fake_latency_s)

    terminals: list[ResultState[User]] = []
    async with UserViewModel(
        api, keep_stale=config.keep_stale, telemetry=telemetry
    ) as vm:
        print("initial")  # noqa: T201
        # Equal consecutive states are dropped by the cell, so a Loading that
        # matches the current one is not printed again.
        unsubscribe = vm.user.subscribe(_print_state)
        try:
            for user_id in ids:
                print(f"login({user_id!r})")  # noqa: T201
                terminals.append(await vm.login(user_id))
        finally:
            unsubscribe()

    if telemetry.is_enabled:
        print(reporter.get_report())  # noqa: T201
    return terminals


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    overrides: dict[str, object] = {}
    if args.latency is not None:
        overrides["fake_latency_s"] = args.latency
    if args.keep_stale is not None:
        overrides["keep_stale"] = args.keep_stale
    if args.verbose:
        overrides["log_level"] = "DEBUG"

    try:
        config = Config.from_env(**overrides)
    except ConfigurationError as e:
        print(f"error: {e}", file=sys.stderr)  # noqa: T201
        if e.hint:
            print(f"hint: {e.hint}", file=sys.stderr)  # noqa: T201
        return 2

    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    asyncio.run(run_demo(args.ids, config))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
