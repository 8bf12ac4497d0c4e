from __future__ import annotations

import pytest

from field_composer import Field
from field_composer.application.conditions import is_valid
from field_composer.application.gates import not_when, not_when_any, when, when_all, when_any, when_none

SUBJECT = Field("Haze", name="title")


@pytest.mark.parametrize(
    ("condition", "expected"),
    [
        (True, True),
        (1, True),
        (0, True),
        ("0", True),
        ("x", True),
        (["a"], True),
        (Field("a"), True),
        (False, False),
        (None, False),
        ("", False),
        ([], False),
        (set(), False),
        (frozenset(), False),
        ({"a"}, True),
        ({}, False),
        (Field(""), False),
    ],
)
def test_is_valid(condition, expected) -> None:
    assert is_valid(condition) is expected


def test_when() -> None:
    assert when(SUBJECT, True) == SUBJECT
    assert when(SUBJECT, False).value == ""
    assert when(SUBJECT, True, Field("")).value == ""
    assert when(SUBJECT, False).name == "title"


def test_when_any() -> None:
    assert when_any(SUBJECT, False, "yes") == SUBJECT
    assert when_any(SUBJECT, False, None).value == ""


def test_not_when() -> None:
    assert not_when(SUBJECT, True, "yes").value == ""
    assert not_when(SUBJECT, True, False) == SUBJECT


def test_not_when_any() -> None:
    assert not_when_any(SUBJECT, False, "yes").value == ""
    assert not_when_any(SUBJECT, False, None) == SUBJECT


def test_aliases() -> None:
    assert when_all(SUBJECT, True, False) == when(SUBJECT, True, False)
    assert when_none(SUBJECT, False) == not_when_any(SUBJECT, False)
    assert when_none(SUBJECT, "x").value == ""


def test_double_negation_over_false_condition_is_identity() -> None:
    assert not_when_any(not_when_any(SUBJECT, False), False) == SUBJECT


def test_gates_without_conditions() -> None:
    assert when(SUBJECT) == SUBJECT
    assert when_any(SUBJECT).value == ""
    assert not_when(SUBJECT).value == ""
    assert not_when_any(SUBJECT) == SUBJECT
