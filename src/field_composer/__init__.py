"""Public package surface for the field composition combinators.

``from field_composer import composer, Field`` gives a ready-to-use composer
bound to the default settings; build a :class:`FieldComposer` with explicit
:class:`Settings` for other defaults.
"""

from __future__ import annotations

from .application.compose import compose, merge
from .core import FIELD_METHODS, FieldComposer, SettingsLoadError, composer, read_settings
from .domain.errors import ComposerError, InvalidFormat, InvalidMethod, NotFound, ValidationError
from .domain.field import EMPTY_FIELD, Field
from .domain.settings import DEFAULT_SETTINGS, Settings
from .observability import bind_trace_id, get_logger

__all__ = [
    "ComposerError",
    "DEFAULT_SETTINGS",
    "EMPTY_FIELD",
    "FIELD_METHODS",
    "Field",
    "FieldComposer",
    "InvalidFormat",
    "InvalidMethod",
    "NotFound",
    "Settings",
    "SettingsLoadError",
    "ValidationError",
    "bind_trace_id",
    "compose",
    "composer",
    "get_logger",
    "merge",
    "read_settings",
]
