"""
Hex Dump Pipeline

This module ties the offset resolver, the chunk reader and the table renderer
together into a complete dump of one byte source. The sequence is always the
same: resolve the starting offset, emit the top border, emit one row per chunk
read from the source, and finish with the bottom border. A source that yields
no bytes at all gets a single empty row so the table is never hollow.

Rows are handed over one at a time as soon as they are built, so partial
output stays visible when a later read fails.

Main features:
- Positive and negative start offsets on seekable sources
- Bounded reads of an exact byte count, or reading until the source is exhausted
- Configurable bytes per row
- Tagged success/error outcome instead of exiting the process
"""

from dataclasses import dataclass
from typing import Callable, Iterator, Optional

from .offset import resolve_offset
from .reader import read_chunks
from .render import render_bottom, render_empty, render_row, render_top
from .utils import DEFAULT_ROW_WIDTH, ConfigError, HexframeError, OpenError, no_trace


@dataclass(frozen=True)
class ReadRequest:
    row_width: int = DEFAULT_ROW_WIDTH
    byte_limit: Optional[int] = None
    raw_offset: int = 0

    def __post_init__(self):
        if self.row_width <= 0:
            raise ConfigError("row width must be at least 1, got %d." % self.row_width)
        if self.byte_limit is not None and self.byte_limit < 0:
            raise ConfigError("byte limit cannot be negative, got %d." % self.byte_limit)


@dataclass
class DumpResult:
    rows: int = 0
    bytes_read: int = 0
    display_offset: int = 0
    error: Optional[HexframeError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def dump_rows(source, request: ReadRequest, trace_function=no_trace,
              result: Optional[DumpResult] = None) -> Iterator[str]:
    """
    Generate every row of the dump table for ``source`` in output order.

    The offset is resolved before the first row is produced, so a seek
    failure yields nothing. Errors are raised, not returned.

    Args:
        source: Binary file object. It must support seek() when
            ``request.raw_offset`` is nonzero.
        request (ReadRequest): Row width, byte limit and start offset
        trace_function: Optional trace callback
        result (DumpResult, optional): Updated in place with row and byte
            counts as the dump progresses

    Yields:
        str: Rendered rows, without line terminators

    Raises:
        ConfigError: A nonzero offset was requested on a non-seekable source
        SeekError: The start offset could not be reached
        ReadError: Reading from the source failed
    """
    if result is None:
        result = DumpResult()

    seekable = getattr(source, 'seekable', None)
    if request.raw_offset != 0 and seekable is not None and not seekable():
        raise ConfigError("the source does not support seeking to an offset.")

    position = resolve_offset(source, request.raw_offset, trace_function)
    result.display_offset = position.display_offset

    yield render_top(request.row_width)

    chunks = read_chunks(
        source,
        request.row_width,
        request.byte_limit,
        position.display_offset,
        trace_function,
    )
    for chunk in chunks:
        row = render_row(chunk.data, chunk.length, chunk.offset, request.row_width)
        result.rows += 1
        result.bytes_read += chunk.length
        yield row

    if result.rows == 0:
        yield render_empty(position.display_offset, request.row_width)

    yield render_bottom(request.row_width)


def hex_dump(source, request: ReadRequest, emit: Callable[[str], None],
             trace_function=no_trace) -> DumpResult:
    """
    Dump ``source`` row by row into ``emit``.

    Returns:
        DumpResult: Counts for the rows that were emitted. On failure
        ``error`` holds the exception and the rows already emitted stand.
    """
    result = DumpResult()
    try:
        for row in dump_rows(source, request, trace_function, result):
            emit(row)
    except HexframeError as e:
        trace_function("Dump aborted: %s", e)
        result.error = e
    return result


def dump_path(path, request: ReadRequest, emit: Callable[[str], None],
              trace_function=no_trace) -> DumpResult:
    try:
        f = open(path, 'rb')
    except OSError as e:
        trace_function("Cannot open %s: %s", path, e)
        error = OpenError(path)
        error.__cause__ = e
        return DumpResult(error=error)

    with f:
        return hex_dump(f, request, emit, trace_function)
