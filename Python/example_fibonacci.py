from operator import add

from api import cons, new, map, tail, take, pp


def fibonacci():
    fib = cons(0, new(1, lambda: map(add, fib, tail(fib))))
    return fib


fib = cons(0, new(1, lambda: map(add, fib, tail(fib))))


if __name__ == "__main__":
    pp(take(20, fib))
