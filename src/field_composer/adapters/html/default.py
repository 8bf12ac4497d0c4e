"""HTML tag rendering adapter.

Purpose
-------
Back the ``tag`` combinator. Escaping is delegated to :mod:`markupsafe`; the
adapter only decides how attributes, void elements and indentation are laid
out.

Attribute rules
---------------
* ``True`` renders the bare attribute name (``<input disabled>``).
* ``False`` and ``None`` omit the attribute.
* Lists and tuples are joined with spaces (``class=["a", "b"]``).
* Everything else is converted to text and escaped.
"""

from __future__ import annotations

from typing import Any, Final, Mapping

from markupsafe import escape

VOID_ELEMENTS: Final[frozenset[str]] = frozenset(
    {
        "area",
        "base",
        "br",
        "col",
        "embed",
        "hr",
        "img",
        "input",
        "link",
        "meta",
        "source",
        "track",
        "wbr",
    }
)


class HtmlTagRenderer:
    """Render ``<name attrs>content</name>`` strings.

    Examples
    --------
    >>> renderer = HtmlTagRenderer()
    >>> renderer.render("p", "Haze", {"class": ["title", "large"]})
    '<p class="title large">Haze</p>'
    >>> renderer.render("em", "Fish & Chips")
    '<em>Fish &amp; Chips</em>'
    >>> renderer.render("li", "Tate", indent="  ", level=2)
    '    <li>Tate</li>'
    """

    def render(
        self,
        name: str,
        content: str,
        attrs: Mapping[str, Any] | None = None,
        indent: str | None = None,
        level: int = 0,
        encode: bool = True,
    ) -> str:
        body = str(escape(content)) if encode else content
        opening = f"<{name}{render_attributes(attrs)}>"
        prefix = indent * level if indent is not None else ""
        if name.lower() in VOID_ELEMENTS:
            return f"{prefix}{opening}"
        return f"{prefix}{opening}{body}</{name}>"


def render_attributes(attrs: Mapping[str, Any] | None) -> str:
    """Render *attrs* with a leading space, or ``""`` when nothing remains.

    Examples
    --------
    >>> render_attributes({"href": "/a?b=1&c=2", "hidden": True, "title": None})
    ' href="/a?b=1&amp;c=2" hidden'
    """

    if not attrs:
        return ""
    parts: list[str] = []
    for key, value in attrs.items():
        if value is None or value is False:
            continue
        if value is True:
            parts.append(str(escape(key)))
            continue
        if isinstance(value, (list, tuple)):
            value = " ".join(str(item) for item in value if item not in (None, ""))
        parts.append(f'{escape(key)}="{escape(value)}"')
    return "".join(f" {part}" for part in parts)
