import sys

from api import new, head, tail, filter, range, collect, is_empty, empty


def sieve(s):
    """sieve of Eratosthenes: every stream head removes its multiples from the rest"""
    if is_empty(s):
        return empty
    p = head(s)
    return new(p, lambda: sieve(filter(lambda x: x % p != 0, tail(s))))


def primes():
    return sieve(range(2))


if __name__ == "__main__":
    n = int(sys.argv[1]) if len(sys.argv) > 1 else 20
    for p in collect(primes(), n):
        print(p)
