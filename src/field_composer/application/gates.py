"""Conditional gates that pass a field through or blank it.

Every gate evaluates its conditions with
:func:`field_composer.application.conditions.is_valid`; a blanked field keeps
its name and carries an empty value.
"""

from __future__ import annotations

from typing import Any, TypeVar

from .conditions import is_valid

F = TypeVar("F")


def when(field: F, *conditions: Any) -> F:
    """Keep *field* only if every condition is valid.

    Examples
    --------
    >>> from field_composer.domain.field import Field
    >>> when(Field("Haze"), True, "yes").value
    'Haze'
    >>> when(Field("Haze"), True, None).value
    ''
    """

    if all(is_valid(condition) for condition in conditions):
        return field
    return field.with_value("")


def when_any(field: F, *conditions: Any) -> F:
    """Keep *field* only if at least one condition is valid."""

    if any(is_valid(condition) for condition in conditions):
        return field
    return field.with_value("")


def not_when(field: F, *conditions: Any) -> F:
    """Blank *field* if every condition is valid."""

    if all(is_valid(condition) for condition in conditions):
        return field.with_value("")
    return field


def not_when_any(field: F, *conditions: Any) -> F:
    """Blank *field* if any condition is valid."""

    if any(is_valid(condition) for condition in conditions):
        return field.with_value("")
    return field


def when_all(field: F, *conditions: Any) -> F:
    """Alias of :func:`when`."""

    return when(field, *conditions)


def when_none(field: F, *conditions: Any) -> F:
    """Alias of :func:`not_when_any`: keep *field* only if no condition is valid."""

    return not_when_any(field, *conditions)
