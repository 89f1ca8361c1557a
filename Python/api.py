from combinators import map, filter, fold, foldl, take, drop, takewhile, dropwhile, split_at, collect, length
from generators import range, replicate, unfoldr, iterate, from_iterable, STOP
from stream import (Stream, empty, is_stream, is_empty, new, cons, head, tail, uncons, access,
                    PreconditionViolation, InvalidArgument, IndexOutOfRange)
from thunk import delay, force


def stream(*values):
    """stream(1, 2, 3) is the finite stream of its arguments"""
    s = empty
    for v in reversed(values):
        s = cons(v, s)
    return s


def pp(s, file=None):
    """Print the values of a stream or sequence as [v1, v2, ]

    A stream is collected first, so bound infinite streams with take.
    """
    if is_stream(s):
        s = collect(s)
    print('[' + ''.join('{}, '.format(v) for v in s) + ']', file=file)
