"""Collection source adapters for the list formatter.

Purpose
-------
Classify a raw field value as one of the list-shaped source kinds and expose
its entries plus a key extraction function. Each kind is its own strategy so
hosts can inject additional ones (pages, files, users ...) without the list
formatter inspecting their types.

Contents
--------
* :class:`RecordSequenceSource` – sequences of mappings or objects; the key is
  read from a configurable attribute or computed by a callable.
* :class:`ScalarSequenceSource` – sequences of plain values.
* :class:`StructureSource` – text that sniffs like a serialised YAML list or
  JSON array, parsed with :mod:`yaml` / :mod:`json`.
* :class:`DefaultSourceClassifier` – tries the strategies in order.

The structure sniff only looks at the first characters: text that does not start like a
YAML sequence (``- ``) or a JSON array (``[``) is never parsed, and text that
fails to parse is treated as a plain scalar.
"""

from __future__ import annotations

import copy
import json
from collections.abc import Mapping, Sequence
from functools import lru_cache
from typing import Any, Callable, Iterable, Union

import yaml

from ...application.ports import CollectionSource
from ...observability import log_debug

KeyFn = Union[str, Callable[[Any], Any]]


def _is_sequence(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))


def _extract(entry: Any, key: KeyFn) -> Any:
    if callable(key):
        return key(entry)
    if isinstance(entry, Mapping):
        return entry.get(key, "")
    return getattr(entry, key, "")


class RecordSequenceSource:
    """Sequence whose entries are records (mappings or attribute objects).

    Examples
    --------
    >>> source = RecordSequenceSource("name")
    >>> artists = [{"name": "Jil Nash"}, {"name": "Tove Jansson"}]
    >>> source.matches(artists)
    True
    >>> [source.key(entry) for entry in source.entries(artists)]
    ['Jil Nash', 'Tove Jansson']
    """

    def __init__(self, key: KeyFn = "title") -> None:
        self._key = key

    def matches(self, value: Any) -> bool:
        if not _is_sequence(value) or not value:
            return False
        return all(isinstance(entry, Mapping) or _has_key(entry, self._key) for entry in value)

    def entries(self, value: Any) -> Iterable[Any]:
        return list(value)

    def key(self, entry: Any) -> Any:
        return _extract(entry, self._key)


def _has_key(entry: Any, key: KeyFn) -> bool:
    if callable(key):
        return not _is_scalar(entry)
    return not _is_scalar(entry) and hasattr(entry, key)


def _is_scalar(entry: Any) -> bool:
    return entry is None or isinstance(entry, (str, bytes, int, float, bool))


class ScalarSequenceSource:
    """Sequence of plain values rendered as they are."""

    def matches(self, value: Any) -> bool:
        return _is_sequence(value)

    def entries(self, value: Any) -> Iterable[Any]:
        return list(value)

    def key(self, entry: Any) -> Any:
        return entry


class StructureSource:
    """Serialised list stored as text (YAML sequence or JSON array).

    Examples
    --------
    >>> source = StructureSource("title")
    >>> stored = "- title: Haze\\n- title: Dusk\\n"
    >>> source.matches(stored), source.matches("Haze, Dusk")
    (True, False)
    >>> [source.key(entry) for entry in source.entries(stored)]
    ['Haze', 'Dusk']
    """

    def __init__(self, key: KeyFn = "title") -> None:
        self._key = key

    def matches(self, value: Any) -> bool:
        return isinstance(value, str) and _parse_structure(value) is not None

    def entries(self, value: Any) -> Iterable[Any]:
        """Return fresh copies so callbacks may mutate entries freely."""

        parsed = _parse_structure(value) if isinstance(value, str) else None
        return copy.deepcopy(list(parsed or ()))

    def key(self, entry: Any) -> Any:
        if isinstance(entry, Mapping):
            return _extract(entry, self._key)
        return entry


@lru_cache(maxsize=128)
def _parse_structure(text: str) -> tuple[Any, ...] | None:
    """Return the parsed entries of *text* or ``None`` when it is not a list."""

    stripped = text.lstrip()
    try:
        if stripped.startswith("["):
            data = json.loads(stripped)
        elif stripped.startswith("- ") or stripped.startswith("-\n"):
            data = yaml.safe_load(stripped)
        else:
            return None
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        log_debug("structure_sniff_failed", operation="to_list", field=None, error=str(exc))
        return None
    if not isinstance(data, list):
        return None
    return tuple(data)


class DefaultSourceClassifier:
    """Try each collection source in order and return the first match.

    Examples
    --------
    >>> classifier = DefaultSourceClassifier()
    >>> type(classifier.classify(["a", "b"])).__name__
    'ScalarSequenceSource'
    >>> classifier.classify("a, b") is None
    True
    """

    def __init__(self, sources: Sequence[CollectionSource] | None = None, *, key: KeyFn = "title") -> None:
        if sources is None:
            sources = (RecordSequenceSource(key), ScalarSequenceSource(), StructureSource(key))
        self._sources = tuple(sources)

    def classify(self, value: Any) -> CollectionSource | None:
        for source in self._sources:
            if source.matches(value):
                return source
        return None
