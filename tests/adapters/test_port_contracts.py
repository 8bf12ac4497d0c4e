"""Adapter contract tests for the default ports implementation.

Purpose
-------
Verify the default adapters continue to satisfy the application-layer ports
defined in ``field_composer.application.ports`` so dependency inversion stays
enforceable through automated tests.
"""

from __future__ import annotations

from pathlib import Path

from field_composer import Field
from field_composer.adapters.html.default import HtmlTagRenderer
from field_composer.adapters.sinks.default import EchoSink, FileSink
from field_composer.adapters.sources.default import (
    DefaultSourceClassifier,
    RecordSequenceSource,
    ScalarSequenceSource,
    StructureSource,
)
from field_composer.adapters.strings.default import DefaultStringUtilities
from field_composer.application import ports


def test_field_is_a_value_box() -> None:
    field = Field("Haze")
    assert isinstance(field, ports.ValueBox)
    assert isinstance(field.with_value(""), ports.ValueBox)


def test_string_utilities_contract() -> None:
    utilities = DefaultStringUtilities()
    assert isinstance(utilities, ports.StringUtilities)
    assert utilities.apply("upper", "haze") == "HAZE"


def test_tag_renderer_contract() -> None:
    renderer = HtmlTagRenderer()
    assert isinstance(renderer, ports.TagRenderer)
    assert renderer.render("b", "x") == "<b>x</b>"


def test_collection_sources_contract() -> None:
    for source in (RecordSequenceSource(), ScalarSequenceSource(), StructureSource()):
        assert isinstance(source, ports.CollectionSource)
    classifier = DefaultSourceClassifier()
    assert isinstance(classifier, ports.SourceClassifier)
    assert isinstance(classifier.classify(["a"]), ports.CollectionSource)


def test_sinks_contract(tmp_path: Path) -> None:
    assert isinstance(EchoSink(), ports.DumpSink)
    assert isinstance(FileSink(tmp_path / "fields.log"), ports.DumpSink)
