from combinators import collect, take
from generators import range, replicate, unfoldr, iterate, from_iterable, STOP
from stream import empty, head, tail


def test_range_is_infinite_without_end():
    s = range(1)
    assert head(s) == 1
    assert collect(s, 5) == [1, 2, 3, 4, 5]


def test_range_includes_end():
    assert collect(range(1, 5)) == [1, 2, 3, 4, 5]


def test_range_with_step():
    assert collect(range(0, 10, 3)) == [0, 3, 6, 9]
    assert collect(range(0, 9, 3)) == [0, 3, 6, 9]


def test_range_starting_past_end_is_empty():
    assert range(5, 1) is empty


def test_range_with_negative_step_and_no_end():
    assert collect(range(0, None, -2), 3) == [0, -2, -4]


def test_range_of_floats():
    assert collect(range(0.5, 2)) == [0.5, 1.5]


def test_replicate_repeats_same_object():
    x = object()
    s = replicate(x)
    assert collect(s, 3) == [x, x, x]
    assert head(tail(tail(s))) is x


def test_unfoldr_stops_on_none_pair():
    s = unfoldr(lambda seed: STOP if seed > 3 else (seed, seed + 1), 1)
    assert collect(s) == [1, 2, 3]


def test_unfoldr_stops_on_none():
    s = unfoldr(lambda seed: None if seed > 2 else (seed, seed + 1), 1)
    assert collect(s) == [1, 2]


def test_unfoldr_immediate_stop():
    assert unfoldr(lambda seed: (None, None), 0) is empty


def test_unfoldr_allows_none_values():
    s = unfoldr(lambda seed: (None, seed + 1), 0)
    assert collect(s, 3) == [None, None, None]


def test_unfoldr_is_lazy():
    seeds = []

    def step(seed):
        seeds.append(seed)
        return seed * 2, seed + 1

    s = unfoldr(step, 1)
    assert seeds == [1]
    assert collect(s, 3) == [2, 4, 6]
    assert seeds == [1, 2, 3]


def test_iterate():
    assert collect(iterate(lambda x: x * 2, 1), 5) == [1, 2, 4, 8, 16]


def test_from_iterable_reads_each_element_once():
    reads = []

    def numbers():
        for i in [1, 2, 3]:
            reads.append(i)
            yield i

    s = from_iterable(numbers())
    assert reads == [1]
    assert collect(s) == [1, 2, 3]
    assert collect(s) == [1, 2, 3]
    assert reads == [1, 2, 3]


def test_from_iterable_of_nothing_is_empty():
    assert from_iterable([]) is empty


def test_from_iterable_of_infinite_iterator():
    def naturals():
        n = 0
        while True:
            yield n
            n += 1

    assert collect(take(3, from_iterable(naturals()))) == [0, 1, 2]
