"""Environment variable adapter for settings overrides.

Purpose
-------
Translate process environment variables into settings overrides. Variables
named ``<PREFIX>_<SETTING>`` (for example ``FIELD_COMPOSER_MERGE_SEPARATOR``)
override the matching :class:`~field_composer.domain.settings.Settings` field.

Key behaviours
--------------
* Enforces a prefix (``default_env_prefix``) so only relevant keys are
  captured.
* Keys are lowercased; values stay raw strings so separators such as ``"0"``
  or ``" "`` survive unchanged.
* An empty ``LIST_CONJUNCTION`` clears the conjunction.
"""

from __future__ import annotations

import os
from typing import Mapping

from ...observability import log_debug


def default_env_prefix(slug: str) -> str:
    """Return the canonical environment prefix for *slug*.

    Examples
    --------
    >>> default_env_prefix('field-composer')
    'FIELD_COMPOSER'
    """

    return slug.replace("-", "_").upper()


class DefaultEnvLoader:
    """Load environment variables that belong to the settings namespace."""

    def __init__(self, *, environ: Mapping[str, str] | None = None) -> None:
        """Initialise the loader with a specific ``environ`` mapping for testability."""

        self._environ = environ if environ is not None else os.environ

    def load(self, prefix: str) -> dict[str, object]:
        """Return overrides for variables carrying *prefix*.

        Examples
        --------
        >>> loader = DefaultEnvLoader(environ={'DEMO_MERGE_SEPARATOR': ' / ', 'OTHER': 'x'})
        >>> loader.load('DEMO')
        {'merge_separator': ' / '}
        """

        prefix = f"{prefix}_" if prefix and not prefix.endswith("_") else prefix
        collected: dict[str, object] = {}
        for key, value in self._environ.items():
            if prefix and not key.startswith(prefix):
                continue
            stripped = key[len(prefix) :] if prefix else key
            if not stripped:
                continue
            name = stripped.lower()
            collected[name] = _coerce(name, value)
        log_debug("env_variables_loaded", operation="settings", field=None, keys=sorted(collected))
        return collected


def _coerce(name: str, value: str) -> object:
    """Map an empty conjunction to ``None``; every other value stays text."""

    if name == "list_conjunction" and value.strip() == "":
        return None
    return value
