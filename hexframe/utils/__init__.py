DEFAULT_ROW_WIDTH = 16
GROUP_SIZE = 8

OFFSET_WIDTH = 8
OFFSET_PAD = " "

PRINTABLE_MIN = 0x20
PRINTABLE_MAX = 0x7e


class HexframeError(RuntimeError):
    def __init__(self, message):
        RuntimeError.__init__(self, message)


class ConfigError(HexframeError):
    pass


class OpenError(HexframeError):
    def __init__(self, path):
        HexframeError.__init__(self, "cannot open the specified file.")
        self.path = path


class SeekError(HexframeError):
    pass


class OffsetOutOfRangeError(SeekError):
    def __init__(self, offset, length):
        SeekError.__init__(self, "cannot seek to offset %d, source is only %d bytes long." % (offset, length))
        self.offset = offset
        self.length = length


class ReadError(HexframeError):
    def __init__(self, offset, cause):
        HexframeError.__init__(self, "read failed at offset 0x%X: %s" % (offset, cause))
        self.offset = offset


from .helpers import (
    arg_auto_int,
    arg_positive_int,
    arg_unsigned_int,
    arg_signed_int,
    make_tracer,
    no_trace,
)

__all__ = [
    'DEFAULT_ROW_WIDTH',
    'GROUP_SIZE',
    'OFFSET_WIDTH',
    'OFFSET_PAD',
    'PRINTABLE_MIN',
    'PRINTABLE_MAX',
    'HexframeError',
    'ConfigError',
    'OpenError',
    'SeekError',
    'OffsetOutOfRangeError',
    'ReadError',
    'arg_auto_int',
    'arg_positive_int',
    'arg_unsigned_int',
    'arg_signed_int',
    'make_tracer',
    'no_trace',
]
