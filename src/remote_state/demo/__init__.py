"""Demo collaborator: a fake user API, a view model and text rendering.

This is the consumer of the core: it feeds ``run_observed`` an injected API
call and keeps the latest state in a ``StateCell`` for rendering.
"""

from __future__ import annotations

from remote_state.demo.api import FakeUserApi, UserApi
from remote_state.demo.cell import StateCell
from remote_state.demo.models import User
from remote_state.demo.render import age_label, name_label, render_user
from remote_state.demo.viewmodel import UserViewModel

__all__ = [
    "FakeUserApi",
    "StateCell",
    "User",
    "UserApi",
    "UserViewModel",
    "age_label",
    "name_label",
    "render_user",
]
