import re

from rich.console import Console
from rich.text import Text

from .globals import HEXFRAME_THEME
from .render import FRAME_V, GROUP_SEP, NON_PRINTABLE
from .utils import OFFSET_PAD, PRINTABLE_MAX, PRINTABLE_MIN

BORDER_CORNERS = ("┌", "└")
HEX_CELL = re.compile(r'[0-9A-F]{2}|' + GROUP_SEP)


def make_console(no_color=False, file=None, stderr=False) -> Console:
    return Console(
        file=file,
        stderr=stderr,
        theme=HEXFRAME_THEME,
        no_color=no_color,
        color_system=None if no_color else "auto",
        highlight=False,
        markup=False,
        emoji=False,
        soft_wrap=True,
    )


def highlight_row(row: str) -> Text:
    """
    Style one rendered row without changing any of its characters.

    ``highlight_row(row).plain == row`` holds for every row the renderer
    produces, so styling can be dropped at any point without affecting
    the layout.
    """
    rich_text = Text()

    if row.startswith(BORDER_CORNERS):
        rich_text.append(row, style="hexframe.border")
        return rich_text

    parts = row.split(FRAME_V)
    if len(parts) != 5:
        rich_text.append(row)
        return rich_text

    _, offset_part, hex_part, char_part, tail = parts

    rich_text.append(FRAME_V, style="hexframe.border")
    highlight_offset(rich_text, offset_part)
    rich_text.append(FRAME_V, style="hexframe.border")
    highlight_hex(rich_text, hex_part)
    rich_text.append(FRAME_V, style="hexframe.border")
    highlight_chars(rich_text, char_part)
    rich_text.append(FRAME_V, style="hexframe.border")
    rich_text.append(tail)

    return rich_text


def highlight_offset(rich_text: Text, offset_part: str) -> None:
    inner = offset_part[1:-1]
    digits = inner.lstrip(OFFSET_PAD)
    rich_text.append(offset_part[:1])
    rich_text.append(inner[:len(inner) - len(digits)], style="hexframe.offset_pad")
    rich_text.append(digits, style="hexframe.offset")
    rich_text.append(offset_part[-1:])


def highlight_hex(rich_text: Text, hex_part: str) -> None:
    last_end = 0
    for match in HEX_CELL.finditer(hex_part):
        if match.start() > last_end:
            rich_text.append(hex_part[last_end:match.start()])

        cell = match.group()
        if cell == GROUP_SEP:
            style = "hexframe.border"
        else:
            value = int(cell, 16)
            if value == 0:
                style = "hexframe.byte_zero"
            elif PRINTABLE_MIN <= value <= PRINTABLE_MAX:
                style = "hexframe.byte_printable"
            else:
                style = "hexframe.byte_other"
        rich_text.append(cell, style=style)
        last_end = match.end()

    if last_end < len(hex_part):
        rich_text.append(hex_part[last_end:])


def _char_style(char):
    if char == NON_PRINTABLE:
        return "hexframe.dot"
    if char == GROUP_SEP:
        return "hexframe.border"
    if char == " ":
        return None
    return "hexframe.char"


def highlight_chars(rich_text: Text, char_part: str) -> None:
    current_group = ""
    current_style = None

    for char in char_part:
        style = _char_style(char)
        if style != current_style and current_group:
            rich_text.append(current_group, style=current_style)
            current_group = ""
        current_group += char
        current_style = style

    if current_group:
        rich_text.append(current_group, style=current_style)
