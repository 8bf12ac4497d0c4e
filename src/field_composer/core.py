"""Composition root for ``field_composer``.

Purpose
-------
Wire the pure combinators to their collaborators (settings, string utilities,
tag renderer, collection sources, dump sinks) and expose them as one object.
Also provides the settings loader that layers a settings file and environment
overrides over the documented defaults.

Contents
--------
* :class:`SettingsLoadError` – error raised when a settings file cannot be used.
* :class:`FieldComposer` – combinator façade bound to settings and adapters.
* :func:`read_settings` – build :class:`Settings` from a file and ``os.environ``.
* :data:`FIELD_METHODS` – names of the combinators a host may register.

System Role
-----------
Hosts construct one :class:`FieldComposer` (or use the module-level
:data:`composer`) and chain its methods: ``c.prefix(c.merge(f, a, b), "By ")``.
Each call emits a structured debug event.
"""

from __future__ import annotations

from dataclasses import fields as dataclass_fields
from pathlib import Path
from typing import Any, Callable, Final, Iterable, Mapping, TypeVar

from .adapters.env.default import DefaultEnvLoader, default_env_prefix
from .adapters.file_loaders.structured import loader_for
from .adapters.html.default import HtmlTagRenderer
from .adapters.sinks.default import EchoSink, FileSink
from .adapters.sources.default import DefaultSourceClassifier
from .adapters.strings.default import DefaultStringUtilities
from .application import affix, compose as compositor, gates, lists, transforms
from .application.ports import DumpSink, SourceClassifier, StringUtilities, TagRenderer
from .domain.errors import ComposerError, InvalidFormat, InvalidMethod, NotFound, ValidationError
from .domain.field import Field
from .domain.settings import DEFAULT_SETTINGS, Conjunction, Settings
from .observability import log_debug, log_error, log_info, make_event

F = TypeVar("F")

ENV_PREFIX: Final[str] = default_env_prefix("field-composer")

FIELD_METHODS: Final[tuple[str, ...]] = (
    "merge",
    "prefix",
    "suffix",
    "wrap",
    "when",
    "when_any",
    "not_when",
    "not_when_any",
    "when_all",
    "when_none",
    "to_list",
    "count",
    "tag",
    "str",
    "format",
    "switch",
    "empty",
    "dump",
    "log",
)
"""Combinators that take the subject field first, in registration order."""


class SettingsLoadError(ComposerError):
    """Raised when a settings file cannot be materialised.

    Wraps :class:`InvalidFormat` and :class:`ValidationError` with the file
    path so callers can catch a single exception family.
    """


class FieldComposer:
    """Combinators bound to one set of settings and collaborators.

    Why
    ----
    Separators, conjunctions and adapters are explicit constructor inputs
    instead of ambient global lookups, so two composers with different
    defaults can coexist.

    Parameters
    ----------
    settings:
        Defaults for separators and the list conjunction.
    strings / renderer / classifier / sink:
        Collaborators for ``str``, ``tag``, list source dispatch and ``dump``.

    Examples
    --------
    >>> c = FieldComposer()
    >>> title, artist, year = Field("Haze"), Field("Jil Nash"), Field(2014)
    >>> c.merge(title, artist, year, ", ").value
    'Haze, Jil Nash, 2014'
    >>> c.to_list(Field("red, blue, green"), conjunction="and", serial=True).value
    'red, blue, and green'
    >>> c.prefix(c.when(Field("Tate"), artist), "Collection: ").value
    'Collection: Tate'
    """

    def __init__(
        self,
        settings: Settings | None = None,
        *,
        strings: StringUtilities | None = None,
        renderer: TagRenderer | None = None,
        classifier: SourceClassifier | None = None,
        sink: DumpSink | None = None,
    ) -> None:
        self.settings = settings if settings is not None else DEFAULT_SETTINGS
        self.strings = strings if strings is not None else DefaultStringUtilities()
        self.renderer = renderer if renderer is not None else HtmlTagRenderer()
        self.classifier = classifier if classifier is not None else DefaultSourceClassifier()
        self.sink = sink if sink is not None else EchoSink()

    def with_settings(self, **overrides: Any) -> FieldComposer:
        """Return a composer sharing the collaborators with *overrides* applied."""

        return FieldComposer(
            self.settings.with_overrides(overrides),
            strings=self.strings,
            renderer=self.renderer,
            classifier=self.classifier,
            sink=self.sink,
        )

    def methods(self) -> dict[str, Callable[..., Any]]:
        """Return ``{name: bound method}`` for every combinator in :data:`FIELD_METHODS`."""

        return {name: getattr(self, name) for name in FIELD_METHODS}

    # merge / compose

    def compose(self, *args: Any, separator: str | None = None) -> Field:
        result = compositor.compose(*args, separator=separator, settings=self.settings)
        _trace("compose", None, arguments=len(args))
        return result

    def merge(
        self,
        field: F,
        *args: Any,
        separator: str | None = None,
        position: int | None = None,
        include: bool | None = None,
    ) -> F:
        result = compositor.merge(
            field,
            *args,
            separator=separator,
            position=position,
            include=include,
            settings=self.settings,
        )
        _trace("merge", field, arguments=len(args))
        return result

    # affixes

    def prefix(self, field: F, prefix: Any = "", separator: str | None = None, when: Any = True) -> F:
        _trace("prefix", field)
        return affix.prefix(field, prefix, separator, when, settings=self.settings)

    def suffix(self, field: F, suffix: Any = "", separator: str | None = None, when: Any = True) -> F:
        _trace("suffix", field)
        return affix.suffix(field, suffix, separator, when, settings=self.settings)

    def wrap(self, field: F, before: Any, after: Any = None, separator: str | None = None, when: Any = True) -> F:
        _trace("wrap", field)
        return affix.wrap(field, before, after, separator, when, settings=self.settings)

    # gates

    def when(self, field: F, *conditions: Any) -> F:
        _trace("when", field, conditions=len(conditions))
        return gates.when(field, *conditions)

    def when_any(self, field: F, *conditions: Any) -> F:
        _trace("when_any", field, conditions=len(conditions))
        return gates.when_any(field, *conditions)

    def not_when(self, field: F, *conditions: Any) -> F:
        _trace("not_when", field, conditions=len(conditions))
        return gates.not_when(field, *conditions)

    def not_when_any(self, field: F, *conditions: Any) -> F:
        _trace("not_when_any", field, conditions=len(conditions))
        return gates.not_when_any(field, *conditions)

    def when_all(self, field: F, *conditions: Any) -> F:
        return self.when(field, *conditions)

    def when_none(self, field: F, *conditions: Any) -> F:
        return self.not_when_any(field, *conditions)

    # lists

    def to_list(
        self,
        field: F,
        split: str | bool | None = None,
        join: str | None = None,
        conjunction: Conjunction = None,
        serial: bool = False,
        each: Callable[[Any], Any] | None = None,
        all: Callable[[list[Any]], Iterable[Any]] | None = None,  # noqa: A002
        when: Any = True,
    ) -> F:
        _trace("to_list", field)
        return lists.to_list(
            field,
            split,
            join,
            conjunction,
            serial,
            each,
            all,
            when,
            settings=self.settings,
            classifier=self.classifier,
        )

    def count(
        self,
        field: F,
        split: str | bool | None = None,
        each: Callable[[Any], Any] | None = None,
        all: Callable[[list[Any]], Iterable[Any]] | None = None,  # noqa: A002
        when: Any = True,
    ) -> F:
        _trace("count", field)
        return lists.count(field, split, each, all, when, classifier=self.classifier)

    # transforms

    def str(self, field: F, method: str, *args: Any) -> F:
        """Apply the registered string utility *method*; unknown names raise."""

        try:
            result = transforms.string(field, self.strings, method, *args)
        except InvalidMethod as exc:
            log_error("invalid_method", **make_event("str", _name(field), {"method": exc.method}))
            raise
        _trace("str", field, method=method)
        return result

    def tag(
        self,
        field: F,
        name: str,
        attrs: Mapping[str, Any] | None = None,
        indent: str | None = None,
        level: int = 0,
        encode: bool = True,
    ) -> F:
        _trace("tag", field, tag=name)
        return transforms.tag(field, self.renderer, name, attrs, indent, level, encode)

    def format(self, field: F, callback: Callable[[Any, F], Any]) -> F:
        _trace("format", field)
        return transforms.transform(field, callback)

    def switch(self, field: F, cases: Any, fallback: Any = None) -> F:
        _trace("switch", field)
        return transforms.switch(field, cases, fallback)

    def empty(self, field: F) -> F:
        return transforms.empty(field)

    def dump(self, field: F, template: str | None = None, sink: DumpSink | None = None) -> F:
        """Send the value to *sink* (default: the composer's sink) and return *field*."""

        return transforms.dump(field, sink if sink is not None else self.sink, template)

    def log(self, field: F, path: str | Path, template: str | None = None) -> F:
        """Append the value with a timestamp to the file at *path* and return *field*."""

        return transforms.dump(field, FileSink(path), template)


def read_settings(
    path: str | Path | None = None,
    *,
    environ: Mapping[str, str] | None = None,
    prefix: str = ENV_PREFIX,
    base: Settings | None = None,
) -> Settings:
    """Return settings layered as defaults → settings file → environment.

    Parameters
    ----------
    path:
        Optional ``.toml``/``.json``/``.yaml``/``.yml`` settings file.
    environ:
        Mapping to read overrides from; defaults to :data:`os.environ`.
    prefix:
        Environment prefix (``FIELD_COMPOSER`` by default).
    base:
        Settings the layers are applied to; defaults to the documented defaults.

    Raises
    ------
    NotFound
        When *path* is given but does not exist.
    SettingsLoadError
        When the file is malformed, has an unsupported suffix, or carries
        unknown keys.

    Examples
    --------
    >>> read_settings(environ={"FIELD_COMPOSER_LIST_CONJUNCTION": "and"}).list_conjunction
    'and'
    """

    settings = base if base is not None else DEFAULT_SETTINGS
    if path is not None:
        settings = _apply_file(settings, str(path))

    known = {item.name for item in dataclass_fields(Settings)}
    env_data = DefaultEnvLoader(environ=environ).load(prefix)
    overrides = {key: value for key, value in env_data.items() if key in known}
    ignored = sorted(set(env_data) - known)
    if ignored:
        log_debug("env_variables_ignored", operation="settings", field=None, keys=ignored)
    if overrides:
        settings = settings.with_overrides(overrides)
        log_debug("settings_env_applied", operation="settings", field=None, keys=sorted(overrides))

    log_info("settings_resolved", operation="settings", field=None, path=str(path) if path is not None else None)
    return settings


def _apply_file(settings: Settings, path: str) -> Settings:
    loader = loader_for(path)
    if loader is None:
        raise SettingsLoadError(f"Unsupported settings file type: {path}")
    try:
        data = loader.load(path)
        return settings.with_overrides(data)
    except NotFound:
        raise
    except (InvalidFormat, ValidationError) as exc:
        log_debug("settings_error", operation="settings", field=None, path=path, error=str(exc))
        raise SettingsLoadError(f"Failed to load settings file {path}: {exc}") from exc


def _name(field: Any) -> str | None:
    return getattr(field, "name", None)


def _trace(operation: str, field: Any, **payload: Any) -> None:
    log_debug("field_composed", **make_event(operation, _name(field), payload))


composer = FieldComposer()
"""Module-level composer using the default settings and adapters."""


__all__ = [
    "FIELD_METHODS",
    "Field",
    "FieldComposer",
    "Settings",
    "SettingsLoadError",
    "composer",
    "read_settings",
]
