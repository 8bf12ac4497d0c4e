"""End-to-end scenarios chaining combinators through :class:`FieldComposer`."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from field_composer import FIELD_METHODS, Field, FieldComposer, InvalidMethod, Settings, ValidationError, composer


class RecordingSink:
    def __init__(self) -> None:
        self.lines: list[str] = []

    def write(self, text: str) -> None:
        self.lines.append(text)


def test_merge_scenario() -> None:
    result = composer.merge(Field("Haze"), "Jil Nash", "2014", ", ")
    assert result.value == "Haze, Jil Nash, 2014"


def test_nested_compose_scenario() -> None:
    result = composer.compose(["Jil Nash", "2014"], ["Oil on canvas", "Tate", "|"], "; ")
    assert result.value == "Jil Nash, 2014; Oil on canvas|Tate"


def test_artwork_caption_chain() -> None:
    c = FieldComposer()
    title, artist, year, location = Field("Haze"), Field("Jil Nash"), Field(2014), Field("")
    caption = c.merge(c.tag(title, "em"), c.merge(artist, year, " "), c.prefix(location, "at "), ", ")
    assert caption.value == "<em>Haze</em>, Jil Nash 2014"


def test_gates_and_affixes_chain() -> None:
    c = FieldComposer(Settings(affix_separator=" "))
    shown = c.prefix(c.when(Field("Tate"), Field("on loan")), "Lender:")
    hidden = c.prefix(c.when(Field("Tate"), Field("")), "Lender:")
    assert shown.value == "Lender: Tate"
    assert hidden.value == ""


def test_list_uses_configured_conjunction() -> None:
    c = FieldComposer(Settings(list_conjunction=lambda: "and"))
    assert c.to_list(Field("red, blue, green")).value == "red, blue and green"
    assert c.to_list(Field("red, blue, green"), serial=True).value == "red, blue, and green"
    assert c.to_list(Field("red")).value == "red"


def test_count_with_each() -> None:
    result = composer.count(Field("a, b, c"), each=lambda item: item != "b")
    assert result.value == "2"


def test_str_and_format() -> None:
    c = FieldComposer()
    assert c.str(Field("oil on canvas"), "ucwords").value == "Oil On Canvas"
    assert c.format(Field("haze"), lambda value, field: value.upper()).value == "HAZE"


def test_str_unknown_method_logs_and_raises(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.ERROR, logger="field_composer"):
        with pytest.raises(InvalidMethod):
            composer.str(Field("Haze", name="title"), "doesNotExist")
    assert any(record.getMessage() == "invalid_method" for record in caplog.records)


def test_switch_and_empty() -> None:
    c = FieldComposer()
    assert c.switch(Field("x"), [(Field(""), "a"), (True, "b")]).value == "b"
    assert c.empty(Field("x")).is_empty()


def test_dump_uses_injected_sink() -> None:
    sink = RecordingSink()
    c = FieldComposer(sink=sink)
    field = Field("Haze")
    assert c.dump(field, "[{{ val }}]") is field
    assert sink.lines == ["[Haze]"]


def test_log_appends_to_file(tmp_path: Path) -> None:
    target = tmp_path / "fields.log"
    field = Field("Haze")
    assert composer.log(field, target) is field
    assert composer.log(field, target, "again {{val}}") is field
    lines = target.read_text(encoding="utf-8").splitlines()
    assert lines[0].endswith("] Haze")
    assert lines[1].endswith("] again Haze")


def test_with_settings_returns_new_composer() -> None:
    c = FieldComposer()
    piped = c.with_settings(merge_separator=" | ")
    assert piped.merge(Field("a"), "b").value == "a | b"
    assert c.merge(Field("a"), "b").value == "a, b"
    assert piped.strings is c.strings


def test_with_settings_rejects_unknown_key() -> None:
    with pytest.raises(ValidationError):
        FieldComposer().with_settings(separator=" ")


def test_methods_registry_matches_names() -> None:
    methods = composer.methods()
    assert tuple(methods) == FIELD_METHODS
    assert methods["when_none"](Field("x"), False).value == "x"
    assert methods["suffix"](Field("x"), "!").value == "x!"
