from __future__ import annotations

from field_composer import SettingsLoadError
from field_composer.domain.errors import ComposerError, InvalidFormat, InvalidMethod, NotFound, ValidationError


def test_error_hierarchy() -> None:
    assert issubclass(InvalidFormat, ComposerError)
    assert issubclass(ValidationError, ComposerError)
    assert issubclass(NotFound, ComposerError)
    assert issubclass(InvalidMethod, ComposerError)
    assert issubclass(SettingsLoadError, ComposerError)
    for exception in (InvalidFormat(""), ValidationError(""), NotFound(""), InvalidMethod("x")):
        assert isinstance(exception, ComposerError)


def test_invalid_method_carries_name() -> None:
    error = InvalidMethod("shout")
    assert error.method == "shout"
    assert "shout" in str(error)
    assert isinstance(error, ValueError)
