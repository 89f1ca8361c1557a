"""Functions that build streams from a rule instead of from other streams"""

from stream import empty, new

STOP = (None, None)


def range(i, j=None, step=1):
    """i, i + step, i + 2 * step, ... while not past j.

    Without j the stream is infinite.
    """
    if j is not None and i > j:
        return empty
    return new(i, lambda: range(i + step, j, step))


def replicate(x):
    """x, x, x, ... forever"""
    return new(x, lambda: replicate(x))


def unfoldr(f, seed):
    """Build a stream from a seed.

    f(seed) returns a pair (value, next_seed) to emit value and carry on from
    next_seed, or (None, None) to end the stream. Returning a bare None ends it
    as well.
    """
    step = f(seed)
    if step is None:
        return empty
    value, seed = step
    if value is None and seed is None:
        return empty
    return new(value, lambda: unfoldr(f, seed))


def iterate(f, x):
    """x, f(x), f(f(x)), ..."""
    return unfoldr(lambda seed: (seed, f(seed)), x)


def from_iterable(iterable):
    """Lazy stream over the values of any iterable.

    The underlying iterator is advanced only when a tail is forced, once per
    element.
    """
    return _from_iterator(iter(iterable))


def _from_iterator(iterator):
    for x in iterator:
        return new(x, lambda: _from_iterator(iterator))
    return empty
