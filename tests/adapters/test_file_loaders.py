from __future__ import annotations

import json
from pathlib import Path

import pytest

from field_composer.adapters.file_loaders.structured import (
    FILE_LOADERS,
    JSONFileLoader,
    TOMLFileLoader,
    YAMLFileLoader,
    loader_for,
)
from field_composer.domain.errors import InvalidFormat, NotFound


def test_toml_loader(tmp_path: Path) -> None:
    path = tmp_path / "settings.toml"
    path.write_text('merge_separator = " / "\nlist_conjunction = "and"\n', encoding="utf-8")
    data = TOMLFileLoader().load(str(path))
    assert data == {"merge_separator": " / ", "list_conjunction": "and"}


def test_toml_loader_missing_file(tmp_path: Path) -> None:
    with pytest.raises(NotFound):
        TOMLFileLoader().load(str(tmp_path / "missing.toml"))


def test_toml_loader_invalid(tmp_path: Path) -> None:
    path = tmp_path / "settings.toml"
    path.write_text("merge_separator = \n", encoding="utf-8")
    with pytest.raises(InvalidFormat):
        TOMLFileLoader().load(str(path))


def test_json_loader_invalid(tmp_path: Path) -> None:
    path = tmp_path / "settings.json"
    path.write_text("{invalid}", encoding="utf-8")
    with pytest.raises(InvalidFormat):
        JSONFileLoader().load(str(path))


def test_json_loader_valid(tmp_path: Path) -> None:
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"affix_separator": " "}), encoding="utf-8")
    assert JSONFileLoader().load(str(path))["affix_separator"] == " "


def test_json_loader_rejects_non_mapping(tmp_path: Path) -> None:
    path = tmp_path / "settings.json"
    path.write_text("[1, 2]", encoding="utf-8")
    with pytest.raises(InvalidFormat):
        JSONFileLoader().load(str(path))


def test_yaml_loader_handles_empty_file(tmp_path: Path) -> None:
    path = tmp_path / "settings.yaml"
    path.write_text("# empty file\n", encoding="utf-8")
    assert YAMLFileLoader().load(str(path)) == {}


def test_yaml_loader_invalid(tmp_path: Path) -> None:
    path = tmp_path / "settings.yaml"
    path.write_text("merge_separator: [unclosed\n", encoding="utf-8")
    with pytest.raises(InvalidFormat):
        YAMLFileLoader().load(str(path))


def test_loader_registry_covers_suffixes() -> None:
    assert set(FILE_LOADERS) == {".toml", ".json", ".yaml", ".yml"}
    assert isinstance(FILE_LOADERS[".yml"], YAMLFileLoader)


def test_undecodable_bytes_are_invalid(tmp_path: Path) -> None:
    path = tmp_path / "settings.toml"
    path.write_bytes(b"merge_separator = \"\xff\"\n")
    with pytest.raises(InvalidFormat):
        TOMLFileLoader().load(str(path))


def test_loader_for_is_case_insensitive() -> None:
    assert isinstance(loader_for("settings.TOML"), TOMLFileLoader)
    assert loader_for("settings.cfg") is None
