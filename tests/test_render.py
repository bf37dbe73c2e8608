"""Tests for :mod:`stringscope.render`."""

import json

import pytest

from stringscope.analyzer import AnalysisResult, analyze
from stringscope.render import (
    STATUS_TOOLTIP,
    detail_items,
    detail_placeholder,
    detail_title,
    render_listing,
    status_text,
    to_dict,
)


def test_status_and_title() -> None:
    result = analyze("abc")
    assert status_text(result) == "StringScope: 3"
    assert status_text(result, icon="$(symbol-string)") == "$(symbol-string) StringScope: 3"
    assert detail_title(result) == "StringScope - Character Details (Length: 3)"
    assert "index, ASCII, Unicode" in STATUS_TOOLTIP


def test_placeholder_uses_json_quoting() -> None:
    assert detail_placeholder('a"b\n') == 'Text: "a\\"b\\n"'
    assert detail_placeholder("é") == 'Text: "é"'


def test_detail_items() -> None:
    items = detail_items(analyze("A \x07"))
    assert [item.label for item in items] == ["0: A", "1: ␣", "2: [7]"]
    assert items[0].description == "ASCII: 65 | U+0041"
    assert items[0].detail == "Printable ASCII | Decimal: 65 | Hex: 0x41"
    assert items[1].detail == "Space | Decimal: 32 | Hex: 0x20"
    assert items[2].detail == "Non-printable | Decimal: 7 | Hex: 0x7"


def test_non_ascii_item() -> None:
    (item,) = detail_items(analyze("é"))
    assert item.description == "Non-ASCII | U+00E9"
    assert item.detail.endswith("Hex: 0xE9")


def test_render_listing() -> None:
    rendered = render_listing(analyze("hi\n"), "hi\n")
    lines = rendered.splitlines()
    assert lines[0] == "StringScope - Character Details (Length: 3)"
    assert lines[1] == 'Text: "hi\\n"'
    assert lines[2].strip().startswith("0: h")
    assert "Line Feed (LF)" in lines[4]
    assert len(lines) == 5


def test_to_dict_is_json_serialisable() -> None:
    payload = to_dict(analyze("a\t"))
    assert payload["length"] == 2
    assert payload["categories"] == {"PRINTABLE_ASCII": 1, "TAB": 1}
    tab = payload["descriptors"][1]
    assert tab["category"] == "TAB"
    assert tab["name"] == "Horizontal Tab"
    assert tab["glyph"] == "⇥"
    assert tab["unicode"] == "U+0009"
    assert tab["surrogate"] is False
    json.dumps(payload)


def test_inconsistent_result_is_rejected() -> None:
    good = analyze("ab")
    shuffled = AnalysisResult(source_length=2, descriptors=tuple(reversed(good.descriptors)))
    with pytest.raises(ValueError):
        detail_items(shuffled)
    truncated = AnalysisResult(source_length=3, descriptors=good.descriptors)
    with pytest.raises(ValueError):
        to_dict(truncated)
