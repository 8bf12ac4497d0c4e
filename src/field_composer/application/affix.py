"""Prefix, suffix and wrap combinators.

An affix is only attached to a non-empty subject, only when the ``when``
condition passes, and only when the affix itself resolves to a non-empty
value. Otherwise the subject is returned unchanged and no separator is added.
"""

from __future__ import annotations

from typing import Any, TypeVar

from ..domain.settings import DEFAULT_SETTINGS, Settings
from .conditions import is_field, is_valid

F = TypeVar("F")


def prefix(
    field: F,
    affix: Any = "",
    separator: str | None = None,
    when: Any = True,
    *,
    settings: Settings = DEFAULT_SETTINGS,
) -> F:
    """Prepend *affix* to the value of *field*.

    Examples
    --------
    >>> from field_composer.domain.field import Field
    >>> prefix(Field("Tate"), "Museum:", " ").value
    'Museum: Tate'
    >>> prefix(Field(""), "Museum:", " ").value
    ''
    """

    return _add_affix(field, affix, separator, when, settings, before=True)


def suffix(
    field: F,
    affix: Any = "",
    separator: str | None = None,
    when: Any = True,
    *,
    settings: Settings = DEFAULT_SETTINGS,
) -> F:
    """Append *affix* to the value of *field*."""

    return _add_affix(field, affix, separator, when, settings, before=False)


def wrap(
    field: F,
    before: Any,
    after: Any = None,
    separator: str | None = None,
    when: Any = True,
    *,
    settings: Settings = DEFAULT_SETTINGS,
) -> F:
    """Surround the value of *field* with *before* and *after*.

    *after* defaults to *before*.

    Examples
    --------
    >>> from field_composer.domain.field import Field
    >>> wrap(Field("Haze"), "'").value
    "'Haze'"
    >>> wrap(Field("1998"), "(", ")").value
    '(1998)'
    """

    if after is None:
        after = before
    wrapped = _add_affix(field, before, separator, when, settings, before=True)
    return _add_affix(wrapped, after, separator, when, settings, before=False)


def _add_affix(field: F, affix: Any, separator: str | None, when: Any, settings: Settings, *, before: bool) -> F:
    if field.is_empty() or not is_valid(when):
        return field
    value = _affix_value(affix)
    if value == "":
        return field
    if separator is None:
        separator = settings.affix_separator
    current = str(field.value)
    merged = f"{value}{separator}{current}" if before else f"{current}{separator}{value}"
    return field.with_value(merged)


def _affix_value(affix: Any) -> str:
    if is_field(affix):
        affix = affix.value
    if affix is None or affix is False:
        return ""
    return str(affix)
