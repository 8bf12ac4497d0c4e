"""Condition evaluation shared by gates, affixes, lists and ``switch``."""

from __future__ import annotations

from collections.abc import Collection
from typing import Any

from ..domain.field import Field
from .ports import ValueBox


def is_field(candidate: Any) -> bool:
    """Return ``True`` for :class:`Field` instances and host value boxes."""

    return isinstance(candidate, (Field, ValueBox))


def is_valid(condition: Any) -> bool:
    """Collapse an arbitrary *condition* into a strict boolean.

    Only empty fields, ``False``, ``None``, ``""`` and empty collections are
    invalid. Every other value, ``0`` included, passes.

    Examples
    --------
    >>> is_valid(Field("x")), is_valid(Field("")), is_valid(0), is_valid([])
    (True, False, True, False)
    """

    if is_field(condition):
        return condition.is_not_empty()
    if condition is None or condition is False:
        return False
    if isinstance(condition, str):
        return condition != ""
    if isinstance(condition, Collection):
        return len(condition) > 0
    return True
