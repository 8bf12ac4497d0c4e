"""Application-layer ports describing collaborator responsibilities.

Purpose
-------
Define the structural contracts the combinators consume so the composition
root can inject concrete adapters without the application layer depending on
them.

Contents
--------
* :class:`ValueBox` – the field contract every combinator reads.
* :class:`StringUtilities` – named string transforms used by ``str``.
* :class:`TagRenderer` – markup builder used by ``tag``.
* :class:`CollectionSource` – one strategy per list-shaped source kind.
* :class:`SourceClassifier` – picks the strategy matching a raw value.
* :class:`DumpSink` – destination for ``dump``/``log`` output.

System Role
-----------
These protocols enforce Dependency Inversion (DIP). Each default adapter under
``field_composer.adapters`` implements one of them and is verified by the
contract tests.
"""

from __future__ import annotations

from typing import Any, Iterable, Mapping, Protocol, runtime_checkable


@runtime_checkable
class ValueBox(Protocol):
    """Minimal field abstraction.

    Why
    ----
    Hosts may bring their own field type; the combinators only need a value,
    an emptiness test, and a way to derive a copy.
    """

    @property
    def value(self) -> Any:
        """Return the raw stored value."""

    def is_empty(self) -> bool:
        """Return ``True`` when the value counts as empty."""

    def is_not_empty(self) -> bool:
        """Inverse of :meth:`is_empty`."""

    def with_value(self, value: Any) -> "ValueBox":
        """Return a copy carrying *value*."""


@runtime_checkable
class StringUtilities(Protocol):
    """Registry of named string transforms.

    Why
    ----
    Replace reflective method lookup with an explicit name → function mapping
    that can be inspected and extended.
    """

    def has(self, name: str) -> bool:
        """Return ``True`` when *name* is registered."""

    def apply(self, name: str, value: Any, *args: Any) -> Any:
        """Invoke the utility *name* on *value* with extra *args*."""


@runtime_checkable
class TagRenderer(Protocol):
    """Wrap content in a markup tag."""

    def render(
        self,
        name: str,
        content: str,
        attrs: Mapping[str, Any] | None = None,
        indent: str | None = None,
        level: int = 0,
        encode: bool = True,
    ) -> str:
        """Return *content* wrapped in a ``name`` element."""


@runtime_checkable
class CollectionSource(Protocol):
    """Strategy for one list-shaped source kind.

    Why
    ----
    The list formatter must treat scalar sequences, record sequences, and
    serialised structures uniformly without inspecting framework types.
    """

    def matches(self, value: Any) -> bool:
        """Return ``True`` when *value* belongs to this source kind."""

    def entries(self, value: Any) -> Iterable[Any]:
        """Yield the raw entries stored in *value*, in order."""

    def key(self, entry: Any) -> Any:
        """Extract the scalar rendered for *entry*."""


@runtime_checkable
class SourceClassifier(Protocol):
    """Select the :class:`CollectionSource` responsible for a raw value."""

    def classify(self, value: Any) -> CollectionSource | None:
        """Return the matching source or ``None`` for plain scalars."""


@runtime_checkable
class DumpSink(Protocol):
    """Destination for diagnostic output produced by ``dump`` and ``log``."""

    def write(self, text: str) -> None:
        """Deliver *text*; return values carry no meaning."""
