__version__ = "0.1.0"

from .utils import (
    DEFAULT_ROW_WIDTH,
    HexframeError,
    ConfigError,
    OpenError,
    SeekError,
    OffsetOutOfRangeError,
    ReadError,
)
from .offset import ResolvedPosition, resolve_offset, source_length
from .reader import Chunk, read_chunks
from .render import render_top, render_bottom, render_row, render_empty, format_offset
from .dumper import ReadRequest, DumpResult, dump_rows, hex_dump, dump_path

__all__ = [
    '__version__',
    'DEFAULT_ROW_WIDTH',
    'HexframeError',
    'ConfigError',
    'OpenError',
    'SeekError',
    'OffsetOutOfRangeError',
    'ReadError',
    'ResolvedPosition',
    'resolve_offset',
    'source_length',
    'Chunk',
    'read_chunks',
    'render_top',
    'render_bottom',
    'render_row',
    'render_empty',
    'format_offset',
    'ReadRequest',
    'DumpResult',
    'dump_rows',
    'hex_dump',
    'dump_path',
]
