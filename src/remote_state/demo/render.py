"""Text rendering of the user state, one line per field."""

from __future__ import annotations

from typing import TYPE_CHECKING

from remote_state.combinators import fold

if TYPE_CHECKING:
    from remote_state.demo.models import User
    from remote_state.state import ResultState

NAME_PREFIX = "姓名："
AGE_PREFIX = "年龄："
LOADING_TEXT = "加载中..."
ERROR_TEXT = "出错了!!!"


def name_label(state: ResultState[User]) -> str:
    return fold(
        state,
        on_loading=lambda _: f"{NAME_PREFIX}{LOADING_TEXT}",
        on_success=lambda user: f"{NAME_PREFIX}{user.name}",
        on_failure=lambda _: f"{NAME_PREFIX}{ERROR_TEXT}",
    )


def age_label(state: ResultState[User]) -> str:
    return fold(
        state,
        on_loading=lambda _: f"{AGE_PREFIX}{LOADING_TEXT}",
        on_success=lambda user: f"{AGE_PREFIX}{user.age}",
        on_failure=lambda _: f"{AGE_PREFIX}{ERROR_TEXT}",
    )


def render_user(state: ResultState[User]) -> tuple[str, str]:
    """Return the (name, age) lines shown for *state*."""
    return name_label(state), age_label(state)
