import argparse
import sys
import time


def arg_auto_int(x):
    try:
        return int(x, 0)
    except ValueError:
        # int(x, 0) rejects leading zeros such as "010"
        return int(x, 10)


def arg_signed_int(x):
    try:
        return arg_auto_int(x)
    except ValueError:
        raise argparse.ArgumentTypeError("cannot parse '%s' as an integer." % x)


def arg_unsigned_int(x):
    try:
        value = arg_auto_int(x)
    except ValueError:
        value = -1
    if value < 0:
        raise argparse.ArgumentTypeError("cannot parse '%s' as a positive integer." % x)
    return value


def arg_positive_int(x):
    value = arg_unsigned_int(x)
    if value == 0:
        raise argparse.ArgumentTypeError("'%s' is not a valid row width, it must be at least 1." % x)
    return value


def no_trace(message, *format_args):
    pass


def make_tracer(enabled, stream=None):
    """
    Build a trace function with the ``trace(message, *format_args)`` signature.

    Each line is prefixed with the seconds elapsed since the previous trace
    line. When ``enabled`` is false the returned function does nothing.
    """
    if not enabled:
        return no_trace

    last_trace = []

    def trace(message, *format_args):
        now = time.time()
        delta = now - last_trace[0] if last_trace else 0.0
        last_trace[:] = [now]
        prefix = "TRACE +%.3f " % delta
        print(prefix + (message % format_args), file=stream or sys.stderr)

    return trace
