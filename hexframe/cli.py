import argparse
import sys

from . import __version__
from .dumper import ReadRequest, dump_path, hex_dump
from .syntax import highlight_row, make_console
from .utils import (
    DEFAULT_ROW_WIDTH,
    ConfigError,
    arg_positive_int,
    arg_signed_int,
    arg_unsigned_int,
    make_tracer,
)

DESCRIPTION = "A hex dump utility that draws its output as a framed table."

EPILOG = """\
The --offset option sets the byte offset at which reading starts. A positive
value skips that many bytes from the beginning of the file, a negative value
starts that many bytes before the end of the file.

Skip the first 128 bytes of a file:

  $ hexframe <filename> --offset 128

Show only the final 128 bytes of a file:

  $ hexframe <filename> --offset -128

Integer values may use a 0x, 0o or 0b prefix. Write negative prefixed values
as --offset=-0x80.

--offset cannot be used when reading from stdin.
"""


def build_parser():
    parser = argparse.ArgumentParser(
        prog='hexframe',
        description=DESCRIPTION,
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument('file', nargs='?', default=None,
                        help='File to read. Defaults to reading from stdin.')
    parser.add_argument('-l', '--line', type=arg_positive_int, default=DEFAULT_ROW_WIDTH, metavar='INT',
                        help='Bytes per line in output (default: %d).' % DEFAULT_ROW_WIDTH)
    parser.add_argument('-n', '--number', type=arg_unsigned_int, default=None, metavar='INT',
                        help='Number of bytes to read (default: all).')
    parser.add_argument('-o', '--offset', type=arg_signed_int, default=0, metavar='INT',
                        help='Byte offset at which to begin reading.')
    parser.add_argument('-t', '--trace', action='store_true',
                        help='Trace seeks and reads to stderr.')
    parser.add_argument('--no-color', action='store_true',
                        help='Disable colored output.')
    parser.add_argument('-v', '--version', action='version', version='%(prog)s ' + __version__)
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    console = make_console(no_color=args.no_color)
    err_console = make_console(no_color=args.no_color, stderr=True)
    trace = make_tracer(args.trace)

    def report(message):
        err_console.print('[!] Error: %s' % message, style="hexframe.error")

    def emit(row):
        console.print(highlight_row(row))

    try:
        request = ReadRequest(row_width=args.line, byte_limit=args.number, raw_offset=args.offset)
    except ConfigError as e:
        report(e)
        return 1

    if args.file is None:
        if request.raw_offset != 0:
            report(ConfigError("STDIN does not support seeking to an offset."))
            return 1
        result = hex_dump(sys.stdin.buffer, request, emit, trace)
    else:
        result = dump_path(args.file, request, emit, trace)

    if not result.ok:
        report(result.error)
        return 1

    trace("Dumped %d bytes in %d rows", result.bytes_read, result.rows)
    return 0
