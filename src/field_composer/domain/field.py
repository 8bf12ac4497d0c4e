"""Domain-level field value box.

Purpose
-------
Anchor the immutable :class:`Field` value object every combinator consumes and
returns. The module belongs to the domain layer and contains no I/O.

Contents
--------
* :class:`Field` – frozen wrapper around a stored value with an emptiness test.
* :func:`is_empty_value` – the single definition of "empty" shared by fields,
  conditions, and list filtering.
* :data:`EMPTY_FIELD` – canonical empty instance.

System Role
-----------
Host applications create fields from stored content; combinators only read
``value`` and return derived copies through :meth:`Field.with_value`.
"""

from __future__ import annotations

from collections.abc import Collection
from dataclasses import dataclass, replace
from typing import Any


def is_empty_value(value: Any) -> bool:
    """Return ``True`` for ``None``, ``""`` and empty collections (sequences, mappings, sets).

    Examples
    --------
    >>> is_empty_value(""), is_empty_value(set()), is_empty_value("0"), is_empty_value(0)
    (True, True, False, False)
    """

    if value is None:
        return True
    if isinstance(value, str):
        return value == ""
    if isinstance(value, Collection):
        return len(value) == 0
    return False


@dataclass(frozen=True, slots=True)
class Field:
    """Immutable named value handed to every combinator.

    Why
    ----
    Combinators must be chainable without side effects, so each one returns a
    fresh copy rather than mutating its subject.

    What
    ----
    Stores the raw ``value`` (normally text; collection-shaped content may be
    a sequence or mapping) and an optional ``name`` identifying the source
    field. Equality is value equality.

    Examples
    --------
    >>> title = Field("Haze", name="title")
    >>> title.is_not_empty()
    True
    >>> title.with_value("")
    Field(value='', name='title')
    >>> str(Field(None))
    ''
    """

    value: Any = ""
    name: str | None = None

    def is_empty(self) -> bool:
        """Return ``True`` when the stored value counts as empty."""

        return is_empty_value(self.value)

    def is_not_empty(self) -> bool:
        return not self.is_empty()

    def with_value(self, value: Any) -> Field:
        """Return a copy carrying *value* while keeping the field name."""

        return replace(self, value=value)

    def __str__(self) -> str:
        if self.value is None:
            return ""
        return self.value if isinstance(self.value, str) else str(self.value)


EMPTY_FIELD = Field("")
"""Shared empty field returned when a composition produces nothing."""
