"""Tests for :mod:`stringscope.session`."""

from stringscope.session import SHOW_DETAILS_COMMAND, SelectionInspector, StatusUpdate


def test_no_selection_hides_status() -> None:
    inspector = SelectionInspector()
    assert not inspector.on_selection_changed(None).visible
    assert not inspector.on_selection_changed("").visible
    assert inspector.show_details(StatusUpdate.hidden()) is None


def test_plain_selection() -> None:
    inspector = SelectionInspector()
    update = inspector.on_selection_changed("hello")
    assert update.visible
    assert update.text == "$(symbol-string) StringScope: 5"
    assert update.command == SHOW_DETAILS_COMMAND
    assert update.selection is not None
    assert not update.selection.is_literal
    assert update.selection.analysed_text == "hello"


def test_literal_selection_analyses_content() -> None:
    inspector = SelectionInspector(icon=None)
    update = inspector.on_selection_changed('"ab"')
    assert update.text == "StringScope: 2"
    assert update.selection is not None
    assert update.selection.is_literal
    assert update.selection.raw_text == '"ab"'
    view = inspector.show_details(update)
    assert view is not None
    assert view.title == "StringScope - Character Details (Length: 2)"
    assert view.placeholder == 'Text: "ab"'
    assert [item.label for item in view.items] == ["0: a", "1: b"]
    assert not view.can_select_many


def test_empty_literal_produces_empty_view() -> None:
    inspector = SelectionInspector(icon=None)
    update = inspector.on_selection_changed("''")
    assert update.visible
    assert update.text == "StringScope: 0"
    view = inspector.show_details(update)
    assert view is not None
    assert view.items == ()


def test_literal_detection_can_be_disabled() -> None:
    inspector = SelectionInspector(detect_literals=False, icon=None)
    update = inspector.on_selection_changed("'x'")
    assert update.text == "StringScope: 3"
    assert update.selection is not None
    assert not update.selection.is_literal


def test_details_use_captured_update() -> None:
    inspector = SelectionInspector(icon=None)
    first = inspector.on_selection_changed("one")
    inspector.on_selection_changed("a much longer selection")
    view = inspector.show_details(first)
    assert view is not None
    assert len(view.items) == 3
