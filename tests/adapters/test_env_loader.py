"""Environment loader adapter tests clarifying prefix handling.

The scenarios cover prefix naming, raw string values, and randomised inputs to
prove separators survive the environment unchanged.
"""

from __future__ import annotations

from hypothesis import given
from hypothesis import strategies as st

from field_composer.adapters.env.default import DefaultEnvLoader, default_env_prefix


def test_default_env_prefix() -> None:
    """Slug values should become upper snake-case prefixes."""

    assert default_env_prefix("field-composer") == "FIELD_COMPOSER"


def test_env_loader_filters_by_prefix() -> None:
    environ = {
        "FIELD_COMPOSER_MERGE_SEPARATOR": " | ",
        "FIELD_COMPOSER_AFFIX_SEPARATOR": " ",
        "OTHER": "ignored",
    }
    data = DefaultEnvLoader(environ=environ).load("FIELD_COMPOSER")
    assert data == {"merge_separator": " | ", "affix_separator": " "}


def test_env_loader_accepts_trailing_underscore_prefix() -> None:
    data = DefaultEnvLoader(environ={"DEMO_MERGE_SEPARATOR": "-"}).load("DEMO_")
    assert data == {"merge_separator": "-"}


def test_empty_conjunction_clears_it() -> None:
    data = DefaultEnvLoader(environ={"DEMO_LIST_CONJUNCTION": "  "}).load("DEMO")
    assert data == {"list_conjunction": None}


def test_bare_prefix_key_is_skipped() -> None:
    assert DefaultEnvLoader(environ={"DEMO_": "x"}).load("DEMO") == {}


SEPARATORS = st.sampled_from(["0", " ", ", ", "true", " / ", "none"])
SETTING_KEYS = st.sampled_from(["MERGE_SEPARATOR", "AFFIX_SEPARATOR", "LIST_JOIN_SEPARATOR"])


@given(st.dictionaries(SETTING_KEYS, SEPARATORS, max_size=3))
def test_env_values_stay_raw_text(entries) -> None:
    """Values that look like numbers or booleans must not be coerced."""

    environ = {f"DEMO_{key}": value for key, value in entries.items()}
    environ["IGNORED"] = "1"
    payload = DefaultEnvLoader(environ=environ).load("DEMO")
    assert payload == {key.lower(): value for key, value in entries.items()}
