"""Value transforms that delegate to injected collaborators.

Contents
    - ``string``: dispatch a named string utility (``str`` combinator).
    - ``tag``: wrap a non-empty value in markup.
    - ``transform``: apply a caller-supplied callback (``format`` combinator).
    - ``switch``: pick a value from the first valid case.
    - ``empty``: blank a field.
    - ``dump``: send the rendered value to a sink and pass the field through.
    - ``fill_template``: ``{{val}}`` placeholder substitution via Jinja2.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Callable, Iterable, TypeVar

from jinja2 import Environment

from ..domain.errors import InvalidMethod
from .conditions import is_valid
from .ports import DumpSink, StringUtilities, TagRenderer

F = TypeVar("F")

_TEMPLATES = Environment(keep_trailing_newline=True)


def string(field: F, strings: StringUtilities, method: str, *args: Any) -> F:
    """Apply the string utility *method* to the value of *field*.

    Raises
    ------
    InvalidMethod
        When *strings* has no utility called *method*.
    """

    if not strings.has(method):
        raise InvalidMethod(method)
    return field.with_value(strings.apply(method, field.value, *args))


def tag(
    field: F,
    renderer: TagRenderer,
    name: str,
    attrs: Mapping[str, Any] | None = None,
    indent: str | None = None,
    level: int = 0,
    encode: bool = True,
) -> F:
    """Wrap the value of *field* in a ``name`` element; empty fields pass through."""

    if field.is_empty():
        return field
    return field.with_value(renderer.render(name, str(field.value), attrs, indent, level, encode))


def transform(field: F, callback: Callable[[Any, F], Any]) -> F:
    """Replace the value with ``callback(value, field)``."""

    return field.with_value(callback(field.value, field))


def switch(field: F, cases: Mapping[Any, Any] | Iterable[tuple[Any, Any]], fallback: Any = None) -> F:
    """Return the action of the first case whose condition is valid.

    Callable actions receive the field. Without a match the *fallback* value is
    used, or the field is returned unchanged when no fallback is given.

    Examples
    --------
    >>> from field_composer.domain.field import Field
    >>> switch(Field("x"), [(False, "no"), ("yes", "picked")]).value
    'picked'
    >>> switch(Field("x"), [(None, "no")]).value
    'x'
    """

    pairs = cases.items() if isinstance(cases, Mapping) else cases
    for condition, action in pairs:
        if is_valid(condition):
            if callable(action):
                return field.with_value(action(field))
            return field.with_value(action)
    return field.with_value(fallback) if fallback is not None else field


def empty(field: F) -> F:
    return field.with_value("")


def dump(field: F, sink: DumpSink, template: str | None = None) -> F:
    """Write the field value (optionally through *template*) to *sink*."""

    text = "" if field.value is None else str(field.value)
    sink.write(fill_template(template, text) if template is not None else text)
    return field


def fill_template(template: str, value: Any) -> str:
    """Substitute ``{{val}}`` (or ``{{value}}``) placeholders in *template*.

    Examples
    --------
    >>> fill_template("Title: {{ val }}", "Haze")
    'Title: Haze'
    """

    return _TEMPLATES.from_string(template).render(val=value, value=value)
