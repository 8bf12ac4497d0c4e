"""Variadic argument classification for ``merge`` and ``compose``.

Purpose
-------
Split a trailing argument list into data, separator, position, and inclusion
flag using the fixed precedence rules callers rely on:

1. a trailing ``int``/``bool`` (only when more than one argument remains) is
   the *trailer*: an integer is the insertion position, ``False`` excludes the
   subject, ``True`` is consumed without effect;
2. afterwards a trailing ``str`` (only when more than one argument remains) is
   the separator;
3. everything else is data, in original order.

A lone string is always data so a single payload never disappears into a
separator with nothing to join.

System Role
-----------
Used by :mod:`field_composer.application.compose`. Keyword options on the
public API switch the matching inference step off.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence


@dataclass(frozen=True, slots=True)
class Arguments:
    """Outcome of :func:`classify_arguments`.

    ``separator`` and ``position`` are ``None`` when the call did not supply
    them, leaving the fallback to the caller.
    """

    data: tuple[Any, ...]
    separator: str | None = None
    position: int | None = None
    include: bool = True


def classify_arguments(
    args: Sequence[Any],
    *,
    trailer: bool = True,
    separator: bool = True,
) -> Arguments:
    """Classify *args* according to the module-level precedence rules.

    Parameters
    ----------
    args:
        Trailing arguments, excluding the subject field.
    trailer:
        Whether a trailing position/inclusion flag may be inferred.
    separator:
        Whether a trailing separator may be inferred.

    Examples
    --------
    >>> classify_arguments(["a", "b", ", ", -1])
    Arguments(data=('a', 'b'), separator=', ', position=-1, include=True)
    >>> classify_arguments(["a", "b", ", ", False])
    Arguments(data=('a', 'b'), separator=', ', position=None, include=False)
    >>> classify_arguments(["only"])
    Arguments(data=('only',), separator=None, position=None, include=True)
    >>> classify_arguments(["Jil Nash", 2014], trailer=False)
    Arguments(data=('Jil Nash', 2014), separator=None, position=None, include=True)
    """

    remaining = list(args)
    position: int | None = None
    include = True
    found_separator: str | None = None

    if trailer and len(remaining) > 1 and isinstance(remaining[-1], (int, bool)):
        last = remaining.pop()
        if last is False:
            include = False
        elif last is not True:
            position = last

    if separator and len(remaining) > 1 and isinstance(remaining[-1], str):
        found_separator = remaining.pop()

    return Arguments(tuple(remaining), found_separator, position, include)
