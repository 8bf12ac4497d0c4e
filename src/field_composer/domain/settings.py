"""Domain-level composition settings.

Purpose
-------
Hold the default separators and conjunction used when a combinator call does
not specify its own. Settings are passed explicitly to the composition engine
instead of being looked up from ambient global state.

Contents
--------
* :class:`Settings` – frozen value object with documented defaults.
* :data:`DEFAULT_SETTINGS` – canonical instance used when callers pass nothing.

System Role
-----------
:func:`field_composer.core.read_settings` builds instances from files and the
environment; :class:`field_composer.core.FieldComposer` carries one and hands
it to the application functions.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, fields, replace
from typing import Any, Callable, Union

from .errors import ValidationError

Conjunction = Union[str, Callable[[], str], None]


@dataclass(frozen=True, slots=True)
class Settings:
    """Defaults applied by the combinators.

    Attributes
    ----------
    merge_separator:
        Joins values in ``merge`` and ``compose`` (default ``", "``).
    affix_separator:
        Placed between affix and value in ``prefix``/``suffix``/``wrap``
        (default ``""``).
    list_join_separator:
        Joins list items in ``to_list`` (default ``", "``).
    list_conjunction:
        Word placed before the last list item, or a zero-argument callable
        returning it (default ``None``).

    Examples
    --------
    >>> Settings().merge_separator
    ', '
    >>> Settings.from_mapping({"list_conjunction": "and"}).list_conjunction
    'and'
    """

    merge_separator: str = ", "
    affix_separator: str = ""
    list_join_separator: str = ", "
    list_conjunction: Conjunction = None

    @classmethod
    def from_mapping(cls, payload: Mapping[str, Any]) -> Settings:
        """Build settings from *payload*, rejecting unknown keys."""

        return DEFAULT_SETTINGS.with_overrides(payload)

    def with_overrides(self, overrides: Mapping[str, Any]) -> Settings:
        """Return a copy with *overrides* applied.

        Raises
        ------
        ValidationError
            When a key is unknown or a separator is not a string.
        """

        known = {item.name for item in fields(self)}
        unknown = sorted(set(overrides) - known)
        if unknown:
            raise ValidationError(f"Unknown setting(s): {', '.join(unknown)}")
        for key, value in overrides.items():
            _validate(key, value)
        return replace(self, **dict(overrides))


def _validate(key: str, value: Any) -> None:
    if key == "list_conjunction":
        if value is None or isinstance(value, str) or callable(value):
            return
        raise ValidationError("list_conjunction must be a string, a callable or None")
    if not isinstance(value, str):
        raise ValidationError(f"{key} must be a string, got {type(value).__name__}")


DEFAULT_SETTINGS = Settings()
