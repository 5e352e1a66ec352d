"""Example payload carried by the demo's states."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class User(BaseModel):
    """A user record as returned by the user API."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(min_length=1)
    name: str
    age: int = Field(ge=0)
