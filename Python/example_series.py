"""
Power series as streams of coefficients: the stream a0, a1, a2, ...
stands for a0 + a1 x + a2 x**2 + ...

Coefficients are exact sympy numbers.
"""
from operator import neg

import sympy as sy

from api import new, map, range, collect, pp


def integrate_series(s):
    """coefficients of the integral of s, without the constant term"""
    return map(lambda c, k: sy.Rational(1, k) * c, s, range(1))


def scale_series(s, factor):
    return map(lambda c: c * factor, s)


def add_series(s1, s2):
    return map(lambda a, b: a + b, s1, s2)


def series_to_expr(s, x, n):
    """the polynomial made of the first n terms of s"""
    return sy.Add(*[c * x ** k for k, c in enumerate(collect(s, n))])


exp_series = new(sy.Integer(1), lambda: integrate_series(exp_series))

cosine_series = new(sy.Integer(1), lambda: map(neg, integrate_series(sine_series)))
sine_series = new(sy.Integer(0), lambda: integrate_series(cosine_series))


if __name__ == "__main__":
    x = sy.symbols('x')
    pp(collect(exp_series, 8))
    print(series_to_expr(exp_series, x, 8))
    print(series_to_expr(sine_series, x, 8))
    print(series_to_expr(cosine_series, x, 8))
