"""List normalisation and rendering.

Purpose
-------
Turn a field value into an ordered list of scalar items and render it as
human-readable text ("red, blue, and green") or count it.

Contents
    - ``get_items``: normalise a value via explicit split, an injected source
      classifier, a single-item fallback, or comma splitting.
    - ``render_items``: join items with separator, conjunction, serial comma.
    - ``to_list`` / ``count``: the combinators built on the two above.

System Role
-----------
The source classifier is a collaborator supplied by
:class:`field_composer.core.FieldComposer`; without one every value is treated
as text.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any, Callable, Iterable, Sequence, TypeVar

from ..domain.settings import DEFAULT_SETTINGS, Conjunction, Settings
from .conditions import is_field, is_valid
from .ports import SourceClassifier

F = TypeVar("F")

EachFn = Callable[[Any], Any]
AllFn = Callable[[list[Any]], Iterable[Any]]

_SKIP = object()


def get_items(
    value: Any,
    split: str | bool | None = None,
    each: EachFn | None = None,
    classifier: SourceClassifier | None = None,
) -> list[Any]:
    """Normalise *value* into a filtered list of scalar items.

    Parameters
    ----------
    value:
        Raw field value.
    split:
        A separator string splits text on it; ``False`` keeps an unclassified
        value as a single item; ``None`` falls back to comma splitting.
    each:
        Per-item callback. Returning ``True`` keeps the original item,
        ``False`` drops it, anything else replaces it.
    classifier:
        Selects a collection source for list-shaped values.

    Examples
    --------
    >>> get_items("red, blue,, green")
    ['red', 'blue', 'green']
    >>> get_items("a;b", split=";", each=str.upper)
    ['A', 'B']
    >>> get_items("one, two", split=False)
    ['one, two']
    """

    if isinstance(split, str):
        raw = _split(value, split)
        keyed = None
    else:
        source = classifier.classify(value) if classifier is not None else None
        if source is not None:
            raw = list(source.entries(value))
            keyed = source.key
        elif split is False:
            raw = [value]
            keyed = None
        else:
            raw = _split(value, ",")
            keyed = None

    items: list[Any] = []
    for entry in raw:
        item = _apply_each(entry, each, keyed)
        if item is _SKIP:
            continue
        item = _flatten(item)
        if _keep(item):
            items.append(item)
    return items


def render_items(
    items: Sequence[Any],
    join: str = ", ",
    conjunction: Conjunction = None,
    serial: bool = False,
) -> str:
    """Render *items* as text.

    Examples
    --------
    >>> colours = ["red", "blue", "green"]
    >>> render_items(colours, ", ", "and", serial=True)
    'red, blue, and green'
    >>> render_items(colours, ", ", "and")
    'red, blue and green'
    >>> render_items(["red"], ", ", "and", serial=True)
    'red'
    """

    texts = [str(item) for item in items]
    if not texts:
        return ""
    if len(texts) == 1:
        return texts[0]
    if callable(conjunction):
        conjunction = conjunction()
    if not conjunction or not conjunction.strip():
        return join.join(texts)

    padded = f" {conjunction.strip()} "
    if len(texts) == 2:
        return f"{texts[0]}{padded}{texts[1]}"
    head = join.join(texts[:-1])
    if serial:
        head += join.rstrip()
    return f"{head}{padded}{texts[-1]}"


def to_list(
    field: F,
    split: str | bool | None = None,
    join: str | None = None,
    conjunction: Conjunction = None,
    serial: bool = False,
    each: EachFn | None = None,
    all: AllFn | None = None,  # noqa: A002 - mirrors the combinator option name
    when: Any = True,
    *,
    settings: Settings = DEFAULT_SETTINGS,
    classifier: SourceClassifier | None = None,
) -> F:
    """Render the items of *field* as a list sentence.

    ``join`` and ``conjunction`` fall back to the settings. A failing ``when``
    condition or an empty subject yields an empty field.
    """

    if field.is_empty() or not is_valid(when):
        return field.with_value("")
    items = _items(field, split, each, all, classifier)
    if join is None:
        join = settings.list_join_separator
    if conjunction is None:
        conjunction = settings.list_conjunction
    return field.with_value(render_items(items, join, conjunction, serial))


def count(
    field: F,
    split: str | bool | None = None,
    each: EachFn | None = None,
    all: AllFn | None = None,  # noqa: A002 - mirrors the combinator option name
    when: Any = True,
    *,
    classifier: SourceClassifier | None = None,
) -> F:
    """Replace the value of *field* with the number of its items, as text."""

    if field.is_empty() or not is_valid(when):
        return field.with_value("0")
    items = _items(field, split, each, all, classifier)
    return field.with_value(str(len(items)))


def _items(
    field: Any,
    split: str | bool | None,
    each: EachFn | None,
    all_fn: AllFn | None,
    classifier: SourceClassifier | None,
) -> list[Any]:
    items = get_items(field.value, split, each, classifier)
    if all_fn is not None:
        items = [item for item in all_fn(items) if _keep(item)]
    return items


def _split(value: Any, separator: str) -> list[Any]:
    if isinstance(value, (list, tuple)):
        return list(value)
    if value is None:
        return []
    return [part.strip() for part in str(value).split(separator)]


def _apply_each(entry: Any, each: EachFn | None, keyed: Callable[[Any], Any] | None) -> Any:
    if each is None:
        return keyed(entry) if keyed is not None else entry
    result = each(entry)
    if result is True:
        return keyed(entry) if keyed is not None else entry
    if result is False:
        return _SKIP
    return result


def _flatten(item: Any) -> Any:
    """Serialise nested collections to flat text; unwrap fields."""

    if is_field(item):
        return item.value if item.is_not_empty() else ""
    if isinstance(item, Mapping):
        return json.dumps(dict(item), separators=(",", ":"), ensure_ascii=False, default=str)
    if isinstance(item, (list, tuple, set)):
        return ", ".join(str(part) for part in map(_flatten, item) if _keep(part))
    return item


def _keep(item: Any) -> bool:
    if is_field(item):
        return item.is_not_empty()
    return item is not None and item is not False and item != ""
