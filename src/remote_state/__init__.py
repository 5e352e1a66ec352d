"""remote-state: observable lifecycle states for asynchronous remote calls.

Public API:
    - ResultState: Loading | Success | Failure
    - loading() / success() / failure(): constructors
    - fold(), map_state(), get_or_null(), ...: pure combinators
    - run_observed(): drive an async producer as Loading -> Success/Failure
"""

from __future__ import annotations

import logging

from remote_state.combinators import (
    error_or_null,
    fold,
    get_or_default,
    get_or_else,
    get_or_null,
    map_state,
    on_failure,
    on_loading,
    on_success,
)
from remote_state.config import Config
from remote_state.errors import (
    ConfigurationError,
    NotFoundError,
    RemoteError,
    RemoteStateError,
)
from remote_state.observe import ObservedRun, run_observed
from remote_state.state import (
    Failure,
    Loading,
    ResultState,
    Success,
    failure,
    is_failure,
    is_loading,
    is_success,
    loading,
    success,
)

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("remote-state")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger("remote_state").addHandler(logging.NullHandler())

__all__ = [
    "Config",
    "ConfigurationError",
    "Failure",
    "Loading",
    "NotFoundError",
    "ObservedRun",
    "RemoteError",
    "RemoteStateError",
    "ResultState",
    "Success",
    "error_or_null",
    "failure",
    "fold",
    "get_or_default",
    "get_or_else",
    "get_or_null",
    "is_failure",
    "is_loading",
    "is_success",
    "loading",
    "map_state",
    "on_failure",
    "on_loading",
    "on_success",
    "run_observed",
    "success",
]
