"""
Table Renderer

Pure formatting of the hex dump table. Every function returns one finished
row as a string, without a trailing newline, and never touches any I/O.

Row layout for a width of 16:

    ┌──────────┬───────────────────────────────────────────────────┬───────────────────┐
    │        0 │ 48 65 6C 6C 6F          ┆                         │ Hello   ┆         │
    └──────────┴───────────────────────────────────────────────────┴───────────────────┘

Main features:
- Offset column of 8 uppercase hex digits, padded with OFFSET_PAD
- Hex region of 3-character cells with a 2-character group gap every 8 cells
- Character region of 1-character cells with a 1-character group gap
- Blank cells for the unused tail of a short final row
- Borders sized to match the data rows exactly for any row width
"""

from .utils import GROUP_SIZE, OFFSET_PAD, OFFSET_WIDTH, PRINTABLE_MAX, PRINTABLE_MIN

FRAME_H = "─"
FRAME_V = "│"
GROUP_SEP = "┆"
NON_PRINTABLE = "·"


def _group_start(i):
    return i > 0 and i % GROUP_SIZE == 0


def _border(row_width, left, middle, right):
    parts = [left, FRAME_H * (OFFSET_WIDTH + 2), middle]

    for i in range(row_width):
        if _group_start(i):
            parts.append(FRAME_H * 2)
        parts.append(FRAME_H * 3)

    parts.append(FRAME_H + middle + FRAME_H)

    for i in range(row_width):
        if _group_start(i):
            parts.append(FRAME_H)
        parts.append(FRAME_H)

    parts.append(FRAME_H + right)
    return "".join(parts)


def render_top(row_width: int) -> str:
    return _border(row_width, "┌", "┬", "┐")


def render_bottom(row_width: int) -> str:
    return _border(row_width, "└", "┴", "┘")


def format_offset(offset: int) -> str:
    # offsets past 0xFFFFFFFF widen the column rather than being truncated
    return ("%X" % offset).rjust(OFFSET_WIDTH, OFFSET_PAD)


def format_char(byte: int) -> str:
    if PRINTABLE_MIN <= byte <= PRINTABLE_MAX:
        return chr(byte)
    return NON_PRINTABLE


def render_row(data, length: int, offset: int, row_width: int) -> str:
    """
    Render one data row.

    Args:
        data: Bytes-like object holding at least ``length`` bytes
        length (int): Number of valid bytes, 0 to row_width
        offset (int): Offset label for this row
        row_width (int): Number of cells in each region, must be positive

    Returns:
        str: The formatted row
    """
    parts = [FRAME_V, " ", format_offset(offset), " ", FRAME_V]

    for i in range(row_width):
        if _group_start(i):
            parts.append(" " + GROUP_SEP)
        if i < length:
            parts.append(" %02X" % data[i])
        else:
            parts.append("   ")

    parts.append(" " + FRAME_V + " ")

    for i in range(row_width):
        if _group_start(i):
            parts.append(GROUP_SEP)
        if i < length:
            parts.append(format_char(data[i]))
        else:
            parts.append(" ")

    parts.append(" " + FRAME_V)
    return "".join(parts)


def render_empty(offset: int, row_width: int) -> str:
    """Row shown in place of data rows when the source held no bytes at all."""
    return render_row(b"", 0, offset, row_width)
