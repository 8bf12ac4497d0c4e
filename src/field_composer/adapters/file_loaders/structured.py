"""Settings file loaders keyed by file suffix.

Purpose
-------
Turn a ``.toml``, ``.json``, ``.yaml`` or ``.yml`` settings file into a plain
mapping for :func:`field_composer.core.read_settings`. Parsing is delegated to
``tomllib``, :mod:`json` and ``yaml.safe_load``; this module only decides how
missing files, parse failures and non-mapping documents are reported.

Contents
--------
* :class:`BaseFileLoader` – reads the file and runs one parser hook.
* :class:`TOMLFileLoader`, :class:`JSONFileLoader`, :class:`YAMLFileLoader`.
* :data:`FILE_LOADERS` / :func:`loader_for` – suffix lookup.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, ClassVar, Mapping

try:  # Python >= 3.11
    import tomllib
except ModuleNotFoundError:  # pragma: no cover - fallback for <3.11
    import tomli as tomllib  # type: ignore[no-redef]

import yaml

from ...domain.errors import InvalidFormat, NotFound
from ...observability import log_debug, log_error


class BaseFileLoader:
    """Read a settings file and hand its bytes to :meth:`_parse`.

    Subclasses name their ``format`` and the exceptions their parser raises;
    those exceptions become :class:`InvalidFormat`.
    """

    format: ClassVar[str] = "text"
    parse_errors: ClassVar[tuple[type[Exception], ...]] = ()

    def load(self, path: str) -> Mapping[str, Any]:
        file_path = Path(path)
        if not file_path.is_file():
            raise NotFound(f"Settings file not found: {path}")
        raw = file_path.read_bytes()
        try:
            data = self._parse(raw)
        except (UnicodeDecodeError, *self.parse_errors) as exc:
            log_error("settings_file_invalid", operation="settings", field=None, path=path, format=self.format, error=str(exc))
            raise InvalidFormat(f"Invalid {self.format.upper()} in {path}: {exc}") from exc
        mapping = self._ensure_mapping(data, path=path)
        log_debug("settings_file_loaded", operation="settings", field=None, path=path, format=self.format, keys=sorted(mapping))
        return mapping

    def _parse(self, raw: bytes) -> Any:
        raise NotImplementedError

    @staticmethod
    def _ensure_mapping(data: object, *, path: str) -> Mapping[str, Any]:
        """Reject documents whose top level is not a mapping.

        Examples
        --------
        >>> BaseFileLoader._ensure_mapping({"merge_separator": " "}, path="demo")
        {'merge_separator': ' '}
        >>> BaseFileLoader._ensure_mapping(42, path="demo")
        Traceback (most recent call last):
        ...
        field_composer.domain.errors.InvalidFormat: File demo did not produce a mapping
        """

        if not isinstance(data, Mapping):
            raise InvalidFormat(f"File {path} did not produce a mapping")
        return data


class TOMLFileLoader(BaseFileLoader):
    format = "toml"
    parse_errors = (tomllib.TOMLDecodeError,)

    def _parse(self, raw: bytes) -> Any:
        return tomllib.loads(raw.decode("utf-8"))


class JSONFileLoader(BaseFileLoader):
    format = "json"
    parse_errors = (json.JSONDecodeError,)

    def _parse(self, raw: bytes) -> Any:
        return json.loads(raw.decode("utf-8"))


class YAMLFileLoader(BaseFileLoader):
    """An empty YAML document means "no overrides"."""

    format = "yaml"
    parse_errors = (yaml.YAMLError,)

    def _parse(self, raw: bytes) -> Any:
        data = yaml.safe_load(raw.decode("utf-8"))
        return {} if data is None else data


FILE_LOADERS: dict[str, BaseFileLoader] = {
    ".toml": TOMLFileLoader(),
    ".json": JSONFileLoader(),
    ".yaml": YAMLFileLoader(),
    ".yml": YAMLFileLoader(),
}


def loader_for(path: str | Path) -> BaseFileLoader | None:
    """Return the loader for *path*'s suffix, or ``None`` if unsupported.

    Examples
    --------
    >>> type(loader_for("settings.YML")).__name__
    'YAMLFileLoader'
    >>> loader_for("settings.ini") is None
    True
    """

    return FILE_LOADERS.get(Path(path).suffix.lower())
