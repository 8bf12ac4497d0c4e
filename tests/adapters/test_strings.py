from __future__ import annotations

import pytest

from field_composer.adapters.strings.default import DefaultStringUtilities

UTILITIES = DefaultStringUtilities()


@pytest.mark.parametrize(
    ("method", "value", "args", "expected"),
    [
        ("upper", "haze", (), "HAZE"),
        ("lower", "HAZE", (), "haze"),
        ("ucfirst", "haze", (), "Haze"),
        ("lcfirst", "Haze", (), "haze"),
        ("ucwords", "oil on canvas", (), "Oil On Canvas"),
        ("camel", "Oil on canvas", (), "oilOnCanvas"),
        ("studly", "oil-on canvas", (), "OilOnCanvas"),
        ("kebab", "OilOnCanvas", (), "oil-on-canvas"),
        ("snake", "Oil on Canvas", (), "oil_on_canvas"),
        ("slug", "Über Haze 2014!", (), "uber-haze-2014"),
        ("trim", "  haze ", (), "haze"),
        ("ltrim", "--haze--", ("-",), "haze--"),
        ("rtrim", "--haze--", ("-",), "--haze"),
        ("replace", "Haze", ("H", "M"), "Maze"),
        ("before", "Haze, 2014", (",",), "Haze"),
        ("after", "Haze, 2014", (", ",), "2014"),
        ("short", "Oil on canvas", (7,), "Oil on…"),
        ("split", "a, b,, c", (), ["a", "b", "c"]),
        ("template", "Haze", ("<b>{{ val }}</b>",), "<b>Haze</b>"),
        ("length", "Haze", (), 4),
        ("contains", "Haze", ("az",), True),
        ("contains", "Haze", ("HA", False), True),
        ("starts_with", "Haze", ("Ha",), True),
        ("ends_with", "Haze", ("x",), False),
    ],
)
def test_utilities(method, value, args, expected) -> None:
    assert UTILITIES.has(method)
    assert UTILITIES.apply(method, value, *args) == expected


def test_before_and_after_missing_needle() -> None:
    assert UTILITIES.apply("before", "Haze", "|") == ""
    assert UTILITIES.apply("after", "Haze", "|") == ""


def test_excerpt_strips_markup() -> None:
    assert UTILITIES.apply("excerpt", "<p>Haze</p>") == "Haze"


def test_none_is_treated_as_empty_text() -> None:
    assert UTILITIES.apply("upper", None) == ""


def test_register_extends_registry_per_instance() -> None:
    utilities = DefaultStringUtilities({"shout": lambda value: f"{value}!"})
    assert utilities.apply("shout", "haze") == "haze!"
    assert not DefaultStringUtilities().has("shout")


def test_names_are_sorted() -> None:
    names = list(UTILITIES.names())
    assert names == sorted(names)
    assert "kebab" in names


def test_unknown_name_raises_key_error() -> None:
    with pytest.raises(KeyError):
        UTILITIES.apply("nope", "x")
