"""
Tests for row styling.
"""

import io

import pytest

from hexframe.render import render_bottom, render_empty, render_row, render_top
from hexframe.syntax import highlight_row, make_console


def styled(text, style):
    return [text.plain[span.start:span.end] for span in text.spans if span.style == style]


@pytest.mark.parametrize("row", [
    render_top(16),
    render_bottom(16),
    render_top(3),
    render_empty(0x40, 16),
    render_row(b"Hello", 5, 0, 16),
    render_row(bytes(range(256))[-24:], 24, 0x123456789, 24),
    render_row(b"\x00 ~\x7f", 4, 7, 9),
])
def test_highlight_keeps_characters(row):
    """Test styling never changes the text of a row."""
    assert highlight_row(row).plain == row


def test_border_is_one_span():
    """Test a border row is styled as a whole."""
    text = highlight_row(render_top(16))
    assert styled(text, "hexframe.border") == [render_top(16)]


def test_data_row_styles():
    """Test offset, hex cells and characters get their own styles."""
    text = highlight_row(render_row(b"Hello", 5, 0, 16))
    assert styled(text, "hexframe.offset") == ["0"]
    assert styled(text, "hexframe.offset_pad") == ["       "]
    assert styled(text, "hexframe.byte_printable") == ["48", "65", "6C", "6C", "6F"]
    assert styled(text, "hexframe.char") == ["Hello"]


def test_byte_classes():
    """Test zero, printable and other bytes are told apart."""
    text = highlight_row(render_row(b"\x00A\xff", 3, 0, 4))
    assert styled(text, "hexframe.byte_zero") == ["00"]
    assert styled(text, "hexframe.byte_printable") == ["41"]
    assert styled(text, "hexframe.byte_other") == ["FF"]
    assert styled(text, "hexframe.dot") == ["·", "·"]


def test_group_separators_use_border_style():
    """Test the group separators are styled like the frame."""
    text = highlight_row(render_row(b"a" * 16, 16, 0, 16))
    assert styled(text, "hexframe.border").count("┆") == 2
    assert styled(text, "hexframe.border").count("│") == 4


def test_unrecognised_line_passes_through():
    """Test text that is not a table row is left unstyled."""
    text = highlight_row("not a row")
    assert text.plain == "not a row"
    assert text.spans == []


def test_console_plain_output():
    """Test a console without colour prints the row unchanged."""
    out = io.StringIO()
    console = make_console(no_color=True, file=out)
    row = render_row(b"Hello", 5, 0, 16)
    console.print(highlight_row(row))
    assert out.getvalue() == row + "\n"


if __name__ == '__main__':
    pytest.main([__file__])
