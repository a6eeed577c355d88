"""Tests for drawing the text area, status bar and message bar."""

from unittest.mock import patch

from hecto.constants import EditorConstants
from hecto.document import Document
from hecto.editor import Editor, StatusMessage
from hecto.geometry import Position


def _render(editor):
    editor.refresh_screen()
    terminal = editor.terminal
    return terminal.text_lines(terminal.frames[-1])


def test_rows_are_drawn_then_markers(make_editor):
    editor = make_editor(["first", "second"], width=20, height=5)
    lines = _render(editor)
    assert lines[:5] == ["first", "second", "~", "~", "~"]


def test_rows_are_clipped_to_viewport(make_editor):
    editor = make_editor(["0123456789abcdef"], width=10, height=3)
    editor.offset = Position(4, 0)
    lines = _render(editor)
    assert lines[0] == "456789abcd"


def test_rows_start_at_vertical_offset(make_editor):
    editor = make_editor([f"Line {i}" for i in range(20)], height=3)
    editor.offset = Position(0, 18)
    lines = _render(editor)
    assert lines[:3] == ["Line 18", "Line 19", "~"]


def test_tabs_render_as_spaces(make_editor):
    editor = make_editor(["a\tb"], height=2)
    assert _render(editor)[0] == "a b"


def test_welcome_banner_on_empty_document(make_editor):
    editor = make_editor([], width=40, height=9)
    with patch('hecto.editor.get_version', return_value="1.2.3"):
        lines = _render(editor)
    banner = "Hecto editor -- version 1.2.3"
    assert lines[3].startswith("~")
    assert lines[3].strip("~ ") == banner
    padding = (40 - len(banner)) // 2
    assert lines[3] == "~" + " " * (padding - 1) + banner
    assert all(line == "~" for i, line in enumerate(lines[:9]) if i != 3)


def test_welcome_banner_truncated_to_width(make_editor):
    editor = make_editor([], width=10, height=3)
    assert len(editor.welcome_message()) == 10


def test_no_welcome_banner_when_document_has_rows(make_editor):
    editor = make_editor(["only line"], width=40, height=9)
    lines = _render(editor)
    assert "Hecto editor" not in "".join(lines)


def test_status_line_without_file_name(make_editor):
    editor = make_editor(["a", "b", "c"], width=30)
    editor.cursor_position = Position(0, 1)
    status = editor.status_line()
    assert status.startswith("[No Name] - 3 lines")
    assert status.endswith("2/3")
    assert len(status) == 30


def test_status_line_truncates_file_name(fake_terminal):
    doc = Document.from_lines(["x"], file_name="a_really_long_file_name_indeed.txt")
    editor = Editor(document=doc, terminal=fake_terminal(width=50))
    status = editor.status_line()
    assert status.startswith("a_really_long_file_n - 1 lines")


def test_status_line_truncated_to_narrow_terminal(make_editor):
    editor = make_editor(["a"], width=8)
    assert editor.status_line() == "[No Name"


def test_status_bar_is_coloured(make_editor):
    editor = make_editor(["a"], height=2)
    editor.refresh_screen()
    frame = editor.terminal.frames[-1]
    assert "<colors>" + editor.status_line() + "<reset>" in frame


def test_message_bar_shows_recent_message(make_editor):
    editor = make_editor(["a"], width=40, height=2)
    lines = _render(editor)
    assert lines[-1] == EditorConstants.HELP_MESSAGE


def test_message_bar_hides_expired_message(make_editor):
    editor = make_editor(["a"], width=40, height=2)
    editor.status_message = StatusMessage("old news", time=100.0)
    with patch('hecto.editor.time.monotonic', return_value=100.0 + EditorConstants.MESSAGE_TIMEOUT):
        lines = _render(editor)
    assert lines[-1] == ""


def test_status_message_visibility_window():
    message = StatusMessage("hi", time=10.0)
    assert message.is_visible(now=10.0)
    assert message.is_visible(now=14.9)
    assert not message.is_visible(now=15.0)


def test_message_truncated_to_width(make_editor):
    editor = make_editor(["a"], width=5, height=2)
    editor.status_message = StatusMessage("a long message")
    assert _render(editor)[-1] == "a lon"


def test_frame_layout(make_editor):
    """Text rows, status bar, then message bar without a trailing newline."""
    editor = make_editor(["a"], width=20, height=4)
    lines = _render(editor)
    assert len(lines) == 4 + 2
    assert lines[4] == editor.status_line()


def test_cursor_hidden_while_drawing(make_editor):
    editor = make_editor(["a"], height=2)
    editor.refresh_screen()
    frame = editor.terminal.frames[-1]
    assert frame.startswith("<hide>")
    assert frame.endswith("<show>")
