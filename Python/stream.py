"""
A stream is either the empty stream or a cell holding a value and a thunk.
Forcing the thunk produces the rest of the stream.

The above definition is an implementation of the classic lazy list:
> A stream is the empty list or a pair whose cdr is a promise of a stream.

Cells are immutable. The head is stored when the cell is built, the tail is
computed the first time somebody asks for it and remembered from then on.
Streams may be infinite; anything that walks a whole stream does not return
when handed an infinite one.

Since closures look up enclosing names when they run, a stream may refer to
itself from inside its own tail:

    fib = cons(0, new(1, lambda: map(add, fib, tail(fib))))
"""

import numbers

from thunk import delay


class PreconditionViolation(TypeError):
    """A stream operation was applied to something it is not defined for"""


class InvalidArgument(ValueError):
    """An argument has the wrong type or lies outside its domain"""


class IndexOutOfRange(IndexError):
    """The stream ended before the requested position"""


class Singleton:
    """Class with a single instance"""

    def __new__(cls):
        obj = object.__new__(cls)
        cls.__new__ = lambda _: obj
        return obj


class Stream:
    """Common base of the empty stream and stream cells"""

    __slots__ = ()

    def __iter__(self):
        s = self
        while s is not empty:
            yield s._value
            s = s._rest.force()

    def __setattr__(self, *args, **kwargs):
        raise TypeError("'{}' objects are read-only, build a new stream instead".format(type(self).__name__))


class EmptyStream(Stream, Singleton):
    """The empty stream"""

    __slots__ = ()

    @staticmethod
    def __bool__():
        return False

    @staticmethod
    def __repr__():
        return 'empty'

    def __reduce__(self):
        return EmptyStream, ()


class Cons(Stream):
    """A value followed by a lazily computed stream"""

    __slots__ = ('_value', '_rest')

    def __init__(self, value, rest):
        object.__setattr__(self, '_value', value)
        object.__setattr__(self, '_rest', rest)

    @staticmethod
    def __bool__():
        return True

    def __repr__(self):
        # only the head; printing must never force the tail
        return 'stream({!r}, ...)'.format(self._value)


empty = EmptyStream()


def const(x):
    return lambda: x


def is_stream(x):
    return isinstance(x, Stream)


def is_empty(s):
    return s is empty


def new(value, producer=None):
    """Create a stream from a head value and a procedure that builds the rest"""
    if producer is None:
        producer = const(empty)
    elif not callable(producer):
        raise PreconditionViolation("Function needed to build stream, got {!r}".format(producer))
    return Cons(value, delay(producer))


def cons(value, stream):
    """Put value in front of an existing stream"""
    if not is_stream(stream):
        raise PreconditionViolation("Can only cons onto a stream, got {!r}".format(stream))
    return new(value, const(stream))


def _check_cons(s, operation):
    if not isinstance(s, Cons):
        if s is empty:
            raise PreconditionViolation("Cannot take {} of the empty stream".format(operation))
        raise PreconditionViolation("Cannot take {} of {!r}: not a stream".format(operation, s))


def head(s):
    _check_cons(s, 'head')
    return s._value


def tail(s):
    """forces the rest of the stream"""
    _check_cons(s, 'tail')
    return s._rest.force()


def uncons(s):
    return head(s), tail(s)


def access(s, idx):
    """Return the value at position idx. Positions start from 1.

    Any whole number works as idx, 2.0 included. Streams have no s[idx]
    subscript: access is the only positional lookup.
    """
    if not isinstance(idx, numbers.Real) or isinstance(idx, bool) or not float(idx).is_integer() or idx < 1:
        raise InvalidArgument("Stream indices start from 1, got {!r}".format(idx))
    idx = int(idx)
    if not is_stream(s):
        raise PreconditionViolation("Cannot index {!r}: not a stream".format(s))
    for _ in range(idx - 1):
        if s is empty:
            break
        s = tail(s)
    if s is empty:
        raise IndexOutOfRange("Tried to access index {} of a stream that is too short".format(idx))
    return head(s)


# len() and the method form (s.map(f), s.take(n), ...) live with the combinators
import combinators  # noqa: E402,F401
