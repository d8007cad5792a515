"""
Offset Resolution

Turns a signed offset request into a seek on the byte source and the offset
label printed on the first row of the dump. A positive offset counts forward
from the start of the source, a negative offset counts backwards from the end.

Only call this on sources that support random access. A nonzero offset on a
live stream such as stdin has to be rejected before getting here.
"""

import io
from dataclasses import dataclass
from typing import Optional

from .utils import OffsetOutOfRangeError, SeekError, no_trace


@dataclass(frozen=True)
class ResolvedPosition:
    seek_to: Optional[int]
    display_offset: int


def source_length(source, trace_function=no_trace) -> int:
    """
    Return the total length of a seekable source in bytes.

    The source is left positioned at its end; callers seek again afterwards.
    """
    try:
        length = source.seek(0, io.SEEK_END)
    except OSError as e:
        raise SeekError("cannot determine the length of the source: %s" % e) from e
    trace_function("Source length is %d bytes", length)
    return length


def resolve_offset(source, raw_offset: int, trace_function=no_trace) -> ResolvedPosition:
    """
    Seek ``source`` to the position requested by ``raw_offset``.

    Args:
        source: A binary file object supporting seek()
        raw_offset (int): Zero for no seek, positive to skip bytes from the
            start, negative to read only the final bytes
        trace_function: Optional trace callback

    Returns:
        ResolvedPosition: Where the source was moved to and the offset label
        for the first row. ``seek_to`` is None when no seek was performed.

    Raises:
        OffsetOutOfRangeError: A positive offset lies past the end of the source
        SeekError: Any other seek or length query failure
    """
    if raw_offset == 0:
        return ResolvedPosition(seek_to=None, display_offset=0)

    length = source_length(source, trace_function)

    if raw_offset > 0:
        if raw_offset > length:
            raise OffsetOutOfRangeError(raw_offset, length)
        target = raw_offset
    else:
        # seeking before the start saturates to the start
        target = max(0, length + raw_offset)

    try:
        source.seek(target, io.SEEK_SET)
    except OSError as e:
        raise SeekError("cannot seek to the specified offset: %s" % e) from e
    trace_function("Seeked to offset %d (requested %d)", target, raw_offset)

    return ResolvedPosition(seek_to=target, display_offset=target)
