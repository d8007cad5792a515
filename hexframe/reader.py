"""
Chunked reading of a byte source, one table row's worth at a time.
"""

from dataclasses import dataclass
from typing import Iterator, Optional

from .utils import ReadError, no_trace


@dataclass(frozen=True)
class Chunk:
    offset: int
    length: int
    # view into the reader's buffer, overwritten by the next read
    data: memoryview


def _fill(source, view):
    # readinto1 returns whatever one raw read produced, so pipes show rows promptly
    readinto = getattr(source, 'readinto1', None) or getattr(source, 'readinto', None)
    if readinto is not None:
        # a source that reports more than the buffer holds is clipped to it
        return min(readinto(view) or 0, len(view))

    data = source.read(len(view))
    if not data:
        return 0
    # a source that returns more than asked for is clipped to the buffer
    n = min(len(data), len(view))
    view[:n] = data[:n]
    return n


def read_chunks(source, row_width: int, byte_limit: Optional[int] = None,
                start_offset: int = 0, trace_function=no_trace) -> Iterator[Chunk]:
    """
    Yield successive chunks of at most ``row_width`` bytes from ``source``.

    A single buffer is allocated up front and reused for every read, so each
    chunk's ``data`` is only valid until the generator is advanced again.
    Copy it with ``bytes(chunk.data)`` to keep it.

    With ``byte_limit`` set the total length of all chunks never exceeds it.
    Without it the source is read until a read returns no data.

    Raises:
        ReadError: The source failed mid-stream. Nothing is retried.
    """
    buffer = bytearray(row_width)
    view = memoryview(buffer)
    remaining = byte_limit
    offset = start_offset

    while remaining is None or remaining > 0:
        want = row_width if remaining is None else min(row_width, remaining)
        trace_function("Read request for %d bytes at offset 0x%X", want, offset)
        try:
            num_bytes = _fill(source, view[:want])
        except OSError as e:
            raise ReadError(offset, e) from e

        if num_bytes == 0:
            trace_function("End of data at offset 0x%X", offset)
            return

        yield Chunk(offset=offset, length=num_bytes, data=view[:num_bytes])

        offset += num_bytes
        if remaining is not None:
            remaining = max(0, remaining - num_bytes)

    trace_function("Byte limit of %d reached at offset 0x%X", byte_limit, offset)
