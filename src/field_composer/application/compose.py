"""Merge and compose policy.

Purpose
-------
Turn a heterogeneous argument list into one joined value while suppressing
empty inputs, so no stray separator ever appears around a missing value.

Contents
    - ``compose``: join data arguments into a fresh field.
    - ``merge``: like ``compose`` but re-inserts the subject at a position.
    - ``_collect`` / ``_to_text`` / ``_insertion_index``: small helpers that
      narrate flattening, scalar conversion and clamping.

System Role
-----------
Pure functions free of I/O. :class:`field_composer.core.FieldComposer`
delegates to them with its configured :class:`Settings`.
"""

from __future__ import annotations

from typing import Any, Sequence, TypeVar

from ..domain.field import Field
from ..domain.settings import DEFAULT_SETTINGS, Settings
from .arguments import classify_arguments
from .conditions import is_field

F = TypeVar("F")


def compose(*args: Any, separator: str | None = None, settings: Settings = DEFAULT_SETTINGS) -> Field:
    """Join *args* into a new field, skipping empty values.

    Lists and tuples are groups: each is composed on its own (with its own
    trailing separator, or the default one) and contributes a single value.
    A group names a separator only when at least two values remain besides
    it, so ``["Jil Nash", "2014"]`` is two values. A trailing string among
    several arguments is the separator. Integers are always data here.

    Examples
    --------
    >>> compose(["Jil Nash", "2014"], ["Oil on canvas", "Tate", "|"], "; ").value
    'Jil Nash, 2014; Oil on canvas|Tate'
    >>> compose("a", Field(""), "", "b", " / ").value
    'a / b'
    """

    classified = classify_arguments(args, trailer=False, separator=separator is None)
    resolved = separator if separator is not None else classified.separator
    if resolved is None:
        resolved = settings.merge_separator
    values = _collect(classified.data, settings)
    return Field(resolved.join(values))


def merge(
    field: F,
    *args: Any,
    separator: str | None = None,
    position: int | None = None,
    include: bool | None = None,
    settings: Settings = DEFAULT_SETTINGS,
) -> F:
    """Merge *field* with further values.

    Trailing positional arguments may carry a separator and then a position or
    inclusion flag, e.g. ``merge(f, a, b, ", ", -1)``. The keyword options do
    the same explicitly and disable the positional inference they replace.

    The subject is inserted at ``position`` (negative values count from the
    end, ``-1`` meaning last); positions outside the list clamp. An empty
    subject or ``include=False`` leaves it out.

    Examples
    --------
    >>> merge(Field("Haze"), "Jil Nash", "2014", ", ").value
    'Haze, Jil Nash, 2014'
    >>> merge(Field("X"), "A", "B", "-", -1).value
    'A-B-X'
    >>> merge(Field("X"), "A", "B", "-", False).value
    'A-B'
    """

    explicit_trailer = position is not None or include is not None
    classified = classify_arguments(args, trailer=not explicit_trailer, separator=separator is None)

    resolved = separator if separator is not None else classified.separator
    if resolved is None:
        resolved = settings.merge_separator
    if position is None:
        position = classified.position if classified.position is not None else 0
    if include is None:
        include = classified.include

    values = _collect(classified.data, settings)
    if include and field.is_not_empty():
        values.insert(_insertion_index(position, len(values)), _to_text(field.value))
    return field.with_value(resolved.join(values))


def _collect(data: Sequence[Any], settings: Settings) -> list[str]:
    """Convert data arguments to text and drop the empty ones."""

    values: list[str] = []
    for item in data:
        if isinstance(item, (list, tuple)):
            text = _compose_group(item, settings)
        elif is_field(item):
            text = _to_text(item.value)
        else:
            text = _to_text(item)
        if text != "":
            values.append(text)
    return values


def _compose_group(group: Sequence[Any], settings: Settings) -> str:
    """Compose a nested group; two-element groups never name a separator.

    Examples
    --------
    >>> _compose_group(["Jil Nash", "2014"], DEFAULT_SETTINGS)
    'Jil Nash, 2014'
    >>> _compose_group(["Oil on canvas", "Tate", "|"], DEFAULT_SETTINGS)
    'Oil on canvas|Tate'
    """

    if len(group) > 2:
        return compose(*group, settings=settings).value
    return compose(*group, separator=settings.merge_separator, settings=settings).value


def _to_text(value: Any) -> str:
    """Return the scalar text form of *value*; ``None`` and ``False`` are empty."""

    if value is None or value is False:
        return ""
    if value is True:
        return "true"
    if isinstance(value, str):
        return value
    if isinstance(value, (list, tuple)):
        return ", ".join(text for text in map(_to_text, value) if text)
    return str(value)


def _insertion_index(position: int, length: int) -> int:
    """Resolve a signed *position* into a clamped list index.

    Examples
    --------
    >>> _insertion_index(5, 2), _insertion_index(-1, 2), _insertion_index(-9, 2)
    (2, 2, 0)
    """

    if position >= 0:
        return min(position, length)
    return max(0, length + position + 1)
