"""Domain-level exception hierarchy.

Purpose
-------
Expose the stable error taxonomy shared by the combinators, the settings
adapters, and consuming applications. The hierarchy lives in the domain layer
so outer layers may depend on it without creating import cycles.

Contents
--------
* :class:`ComposerError` – umbrella base class for all library failures.
* :class:`InvalidMethod` – unknown string utility requested via ``str``.
* :class:`InvalidFormat` – settings file that cannot be parsed.
* :class:`ValidationError` – settings payload with unknown keys or bad types.
* :class:`NotFound` – settings file that does not exist.

System Role
-----------
Combinators are total functions; :class:`InvalidMethod` is the only error they
raise and it propagates to the caller unchanged. The remaining classes belong
to settings loading. Callers catch :class:`ComposerError` to handle all library
failures uniformly.
"""

from __future__ import annotations


class ComposerError(Exception):
    """Base type for all exceptions emitted by ``field_composer``.

    Why
    ----
    Provide a single catch-all type for consumers that do not need fine-grained
    handling.
    """


class InvalidMethod(ComposerError, ValueError):
    """Raised when the string dispatcher is asked for an unregistered utility.

    Why
    ----
    A typo in a method name must abort the composition chain instead of
    silently returning the unmodified value.

    Attributes
    ----------
    method:
        The name that could not be resolved.
    """

    def __init__(self, method: str) -> None:
        super().__init__(f"Method '{method}' does not exist in the string utilities.")
        self.method = method


class InvalidFormat(ComposerError):
    """Raised when a settings file cannot be parsed into structured data.

    Typical Sources
    ---------------
    Structured file loaders (:mod:`tomllib`, :mod:`json`, :mod:`yaml`).
    """


class ValidationError(ComposerError):
    """Signifies that a parsed settings payload failed semantic checks."""


class NotFound(ComposerError):
    """Represents a settings file that does not exist."""
