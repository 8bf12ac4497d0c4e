"""String utility registry adapter.

Purpose
-------
Back the ``str`` combinator with an explicit name → function registry instead
of reflective method lookup. Each utility receives the field value first and
any extra arguments after it.

Key behaviours
--------------
* Case conversion (``upper``, ``lower``, ``ucfirst``, ``camel``, ``kebab`` ...).
* Trimming, replacing and slicing (``trim``, ``replace``, ``before``,
  ``after``, ``excerpt``, ``short``).
* Token splitting (``split``) and ``{{val}}`` templating (``template``).
* Predicates (``contains``, ``starts_with``, ``ends_with``, ``length``).
* :meth:`DefaultStringUtilities.register` lets hosts add their own utilities.
"""

from __future__ import annotations

import re
import unicodedata
from typing import Any, Callable, Iterable, Mapping

from ...application.transforms import fill_template

StringFn = Callable[..., Any]

_TOKENS = re.compile(r"[^\W_]+")
_HUMPS = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")
_TAGS = re.compile(r"<[^>]*>")
_SPACES = re.compile(r"\s+")
_NON_SLUG = re.compile(r"[^a-z0-9]+")


def _text(value: Any) -> str:
    return "" if value is None else str(value)


def _words(value: Any) -> list[str]:
    """Split *value* into words on non-word characters and camel humps."""

    words: list[str] = []
    for token in _TOKENS.findall(unicodedata.normalize("NFKC", _text(value))):
        words.extend(_HUMPS.sub(" ", token).split())
    return words


def upper(value: Any) -> str:
    return _text(value).upper()


def lower(value: Any) -> str:
    return _text(value).lower()


def ucfirst(value: Any) -> str:
    text = _text(value)
    return text[:1].upper() + text[1:]


def lcfirst(value: Any) -> str:
    text = _text(value)
    return text[:1].lower() + text[1:]


def ucwords(value: Any) -> str:
    """Uppercase the first letter of every space-separated word."""

    return " ".join(ucfirst(word) for word in _text(value).split(" "))


def camel(value: Any) -> str:
    """Return ``camelCase``.

    Examples
    --------
    >>> camel("oil on canvas")
    'oilOnCanvas'
    """

    return lcfirst(studly(value))


def studly(value: Any) -> str:
    return "".join(word[:1].upper() + word[1:].lower() for word in _words(value))


def kebab(value: Any) -> str:
    """Return ``kebab-case``.

    Examples
    --------
    >>> kebab("oilOnCanvas")
    'oil-on-canvas'
    """

    return "-".join(word.lower() for word in _words(value))


def snake(value: Any) -> str:
    return "_".join(word.lower() for word in _words(value))


def slug(value: Any, separator: str = "-") -> str:
    """Return an ASCII slug.

    Examples
    --------
    >>> slug("Öl auf Leinwand!")
    'ol-auf-leinwand'
    """

    ascii_text = unicodedata.normalize("NFKD", _text(value)).encode("ascii", "ignore").decode("ascii")
    return _NON_SLUG.sub(separator, ascii_text.lower()).strip(separator)


def trim(value: Any, chars: str | None = None) -> str:
    return _text(value).strip(chars)


def ltrim(value: Any, chars: str | None = None) -> str:
    return _text(value).lstrip(chars)


def rtrim(value: Any, chars: str | None = None) -> str:
    return _text(value).rstrip(chars)


def replace(value: Any, search: str, replacement: str = "") -> str:
    return _text(value).replace(search, replacement)


def before(value: Any, needle: str) -> str:
    """Return the text before the first *needle*, or ``""`` when absent."""

    text = _text(value)
    index = text.find(needle)
    return text[:index] if index >= 0 else ""


def after(value: Any, needle: str) -> str:
    """Return the text after the first *needle*, or ``""`` when absent."""

    text = _text(value)
    index = text.find(needle)
    return text[index + len(needle) :] if index >= 0 else ""


def excerpt(value: Any, chars: int = 140, rep: str = " …") -> str:
    """Strip tags, collapse whitespace and cut at a word boundary.

    Examples
    --------
    >>> excerpt("<p>Oil on   canvas, signed</p>", 12)
    'Oil on …'
    """

    text = _SPACES.sub(" ", _TAGS.sub(" ", _text(value))).strip()
    if chars <= 0 or len(text) <= chars:
        return text
    cut = text[:chars]
    if " " in cut:
        cut = cut.rsplit(" ", 1)[0]
    return cut.rstrip(" ,;.") + rep


def short(value: Any, length: int, appendix: str = "…") -> str:
    """Cut the text to *length* characters and append *appendix* when cut."""

    text = _text(value)
    if length <= 0 or len(text) <= length:
        return text
    return text[:length].rstrip() + appendix


def split(value: Any, separator: str = ",", length: int = 1) -> list[str]:
    """Split, trim, and drop parts shorter than *length*."""

    parts = (part.strip() for part in _text(value).split(separator))
    return [part for part in parts if len(part) >= length]


def template(value: Any, text: str) -> str:
    return fill_template(text, value)


def length(value: Any) -> int:
    return len(_text(value))


def contains(value: Any, needle: str, case_sensitive: bool = True) -> bool:
    text = _text(value)
    if case_sensitive:
        return needle in text
    return needle.lower() in text.lower()


def starts_with(value: Any, needle: str) -> bool:
    return _text(value).startswith(needle)


def ends_with(value: Any, needle: str) -> bool:
    return _text(value).endswith(needle)


_DEFAULT_UTILITIES: dict[str, StringFn] = {
    "upper": upper,
    "lower": lower,
    "ucfirst": ucfirst,
    "lcfirst": lcfirst,
    "ucwords": ucwords,
    "camel": camel,
    "studly": studly,
    "kebab": kebab,
    "snake": snake,
    "slug": slug,
    "trim": trim,
    "ltrim": ltrim,
    "rtrim": rtrim,
    "replace": replace,
    "before": before,
    "after": after,
    "excerpt": excerpt,
    "short": short,
    "split": split,
    "template": template,
    "length": length,
    "contains": contains,
    "starts_with": starts_with,
    "ends_with": ends_with,
}


class DefaultStringUtilities:
    """Registry of named string utilities.

    Examples
    --------
    >>> utilities = DefaultStringUtilities()
    >>> utilities.apply("upper", "haze")
    'HAZE'
    >>> utilities.has("shout")
    False
    >>> utilities.register("shout", lambda value: f"{value}!")
    >>> utilities.apply("shout", "haze")
    'haze!'
    """

    def __init__(self, extra: Mapping[str, StringFn] | None = None) -> None:
        self._registry: dict[str, StringFn] = dict(_DEFAULT_UTILITIES)
        if extra:
            self._registry.update(extra)

    def has(self, name: str) -> bool:
        return name in self._registry

    def names(self) -> Iterable[str]:
        return sorted(self._registry)

    def register(self, name: str, function: StringFn) -> None:
        """Add or replace the utility called *name*."""

        self._registry[name] = function

    def apply(self, name: str, value: Any, *args: Any) -> Any:
        """Invoke *name*; a missing name raises :class:`KeyError`."""

        return self._registry[name](value, *args)
