"""Configuration: frozen Config resolved from the environment.

The core (states, combinators, ``run_observed``) takes no configuration; this
covers the demo collaborator and the ambient logging/telemetry switches.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
import logging
import os
from typing import Any

from dotenv import load_dotenv

from remote_state.errors import ConfigurationError

load_dotenv()

_ENV_VARS: dict[str, str] = {
    "fake_latency_s": "REMOTE_STATE_FAKE_LATENCY_S",
    "keep_stale": "REMOTE_STATE_KEEP_STALE",
    "telemetry_enabled": "REMOTE_STATE_TELEMETRY",
    "log_level": "REMOTE_STATE_LOG_LEVEL",
}

_TRUTHY = frozenset({"1", "true", "yes", "on"})
_FALSY = frozenset({"0", "false", "no", "off", ""})


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUTHY:
        return True
    if value in _FALSY:
        return False
    raise ConfigurationError(
        f"{name} must be a boolean, got {raw!r}",
        hint="Use one of: 1/0, true/false, yes/no, on/off.",
    )


def _parse_float(name: str, raw: str) -> float:
    try:
        return float(raw)
    except ValueError:
        raise ConfigurationError(
            f"{name} must be a number, got {raw!r}",
            hint="Latency is given in seconds, e.g. 0.5.",
        ) from None


@dataclass(frozen=True)
class Config:
    """Immutable runtime configuration.

    Example:
        config = Config.from_env(fake_latency_s=0.0)
        api = FakeUserApi(latency_s=config.fake_latency_s)
    """

    #: Simulated round-trip of the fake user API, in seconds.
    fake_latency_s: float = 1.0
    #: Whether a new load starts from the last successful value.
    keep_stale: bool = False
    telemetry_enabled: bool = False
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        """Validate and normalize fields."""
        if self.fake_latency_s < 0:
            raise ConfigurationError(
                f"fake_latency_s must be ≥ 0, got {self.fake_latency_s}",
                hint="Set REMOTE_STATE_FAKE_LATENCY_S to a non-negative number.",
            )

        level = str(self.log_level).strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ConfigurationError(
                f"Unknown log level: {self.log_level!r}",
                hint="Use DEBUG, INFO, WARNING, ERROR or CRITICAL.",
            )
        object.__setattr__(self, "log_level", level)

    @classmethod
    def from_env(cls, **overrides: Any) -> Config:
        """Resolve fields from ``REMOTE_STATE_*`` variables, then *overrides*.

        Raises:
            ConfigurationError: On unknown override names or unparsable values.
        """
        known = {f.name for f in fields(cls)}
        unknown = set(overrides) - known
        if unknown:
            raise ConfigurationError(
                f"Unknown config field(s): {', '.join(sorted(unknown))}",
                hint=f"Valid fields: {', '.join(sorted(known))}",
            )

        values: dict[str, Any] = {}
        for name, env_var in _ENV_VARS.items():
            raw = os.environ.get(env_var)
            if raw is None:
                continue
            if name == "fake_latency_s":
                values[name] = _parse_float(env_var, raw)
            elif name in ("keep_stale", "telemetry_enabled"):
                values[name] = _parse_bool(env_var, raw)
            else:
                values[name] = raw
        values.update(overrides)
        return cls(**values)

    def __str__(self) -> str:
        return (
            f"Config(fake_latency_s={self.fake_latency_s!r}, "
            f"keep_stale={self.keep_stale!r}, "
            f"telemetry_enabled={self.telemetry_enabled!r}, "
            f"log_level={self.log_level!r})"
        )
