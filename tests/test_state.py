"""ResultState boundary tests: construction, invariants and predicates."""

from __future__ import annotations

import dataclasses

import pytest

from remote_state.errors import NotFoundError
from remote_state.state import (
    Failure,
    Loading,
    Success,
    failure,
    is_failure,
    is_loading,
    is_success,
    loading,
    success,
)

pytestmark = pytest.mark.unit


def test_loading_defaults_to_no_value() -> None:
    assert loading() == Loading(None)
    assert loading().value is None
    assert loading(5) == Loading(5)


def test_constructors_build_matching_variants() -> None:
    err = NotFoundError()

    assert isinstance(loading(), Loading)
    assert isinstance(success(1), Success)
    assert isinstance(failure(err), Failure)
    assert failure(err).error is err


def test_success_rejects_none() -> None:
    with pytest.raises(ValueError, match="Success.value"):
        success(None)


def test_success_accepts_falsy_values() -> None:
    """Only None counts as absent; 0, "" and [] are real payloads."""
    for value in (0, "", [], False):
        assert success(value).value == value


@pytest.mark.parametrize("bad", [None, "boom", 404, ValueError])
def test_failure_rejects_non_exception_payloads(bad: object) -> None:
    with pytest.raises(TypeError, match="Failure.error"):
        failure(bad)  # type: ignore[arg-type]


def test_states_are_frozen() -> None:
    state = success(1)
    with pytest.raises(dataclasses.FrozenInstanceError):
        state.value = 2  # type: ignore[misc]


def test_states_compare_by_value_and_tag() -> None:
    err = RuntimeError("x")

    assert success(1) == Success(1)
    assert loading(1) != success(1)
    assert failure(err) == Failure(err)
    assert failure(err) != failure(RuntimeError("x"))
    assert hash(success("a")) == hash(Success("a"))


@pytest.mark.parametrize(
    ("state", "expected"),
    [
        (loading(), (True, False, False)),
        (loading("prev"), (True, False, False)),
        (success("v"), (False, True, False)),
        (failure(RuntimeError()), (False, False, True)),
    ],
)
def test_predicates_match_exactly_one_variant(state, expected) -> None:
    assert (is_loading(state), is_success(state), is_failure(state)) == expected


def test_variants_support_structural_matching() -> None:
    match success(3):
        case Success(value=v):
            matched = v
        case _:
            matched = None
    assert matched == 3
