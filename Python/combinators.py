"""
Higher order functions and slicing over streams.

Every combinator returns at most one new cell per call; the tail of that cell
calls the same combinator again once it is forced. The exceptions are the
operations that need to look at the whole stream (fold, foldl, collect, len)
or that skip elements (filter, dropwhile, drop). These walk the input eagerly
and do not return on an infinite stream that never gives them what they need.
"""

from stream import Stream, empty, is_empty, new, head, tail, uncons


def map(f, *streams):
    """Apply f position by position. Stops with the shortest input stream.

    Only the heads are read to build a cell; the input tails are forced when
    the tail of the result is.
    """
    if not streams or any(is_empty(s) for s in streams):
        return empty
    return new(f(*[head(s) for s in streams]),
               lambda: map(f, *[tail(s) for s in streams]))


def filter(p, s):
    """Keep the values for which p holds.

    Values that fail p are skipped right away, so filtering an infinite stream
    where nothing further satisfies p does not return.
    """
    while not is_empty(s):
        h = head(s)
        if p(h):
            return new(h, lambda: filter(p, tail(s)))
        s = tail(s)
    return empty


def fold(op, base, s):
    """Right fold: op(x1, op(x2, ... op(xn, base)))

    Recurses once per cell, so a long stream raises RecursionError and an
    infinite one never returns. Use foldl for long finite streams.
    """
    if is_empty(s):
        return base
    return op(head(s), fold(op, base, tail(s)))


def foldl(op, base, s):
    """Left fold: op(... op(op(base, x1), x2) ..., xn), in constant stack"""
    acc = base
    while not is_empty(s):
        x, s = uncons(s)
        acc = op(acc, x)
    return acc


def take(n, s):
    """Truncate to the first n elements. n=None keeps the whole stream."""
    if is_empty(s):
        return empty
    if n is None:
        return s
    if n <= 0:
        return empty
    if n == 1:
        # last cell, leave the rest of s unforced
        return new(head(s))
    return new(head(s), lambda: take(n - 1, tail(s)))


def drop(n, s):
    """Drop the first n elements. n=None drops nothing."""
    if n is None:
        return s
    while n > 0 and not is_empty(s):
        s = tail(s)
        n -= 1
    return s


def takewhile(p, s):
    """Longest prefix whose values all satisfy p"""
    if is_empty(s) or not p(head(s)):
        return empty
    return new(head(s), lambda: takewhile(p, tail(s)))


def dropwhile(p, s):
    while not is_empty(s) and p(head(s)):
        s = tail(s)
    return s


def split_at(n, s):
    return take(n, s), drop(n, s)


def collect(s, n=None):
    """Collect a stream into a list, or only its first n values if n is given.

    Without n this walks the whole stream: bound infinite streams with take.
    """
    if n is not None:
        return collect(take(n, s))
    return [x for x in s]


def length(s):
    """Number of cells, used for len(s). Does not return on an infinite stream.

    list(s) and tuple(s) ask len() for a size hint before iterating, so they
    walk a finite stream twice and hang on an infinite one before yielding
    anything. Use collect, which never calls len().
    """
    return foldl(lambda n, _: n + 1, 0, s)


# method form: s.map(f), s.take(3), ...

Stream.head = head
Stream.tail = tail
Stream.uncons = uncons
Stream.map = lambda self, f: map(f, self)
Stream.filter = lambda self, p: filter(p, self)
Stream.fold = lambda self, op, base: fold(op, base, self)
Stream.foldl = lambda self, op, base: foldl(op, base, self)
Stream.take = lambda self, n: take(n, self)
Stream.drop = lambda self, n: drop(n, self)
Stream.takewhile = lambda self, p: takewhile(p, self)
Stream.dropwhile = lambda self, p: dropwhile(p, self)
Stream.split_at = lambda self, n: split_at(n, self)
Stream.collect = collect
Stream.__len__ = length
