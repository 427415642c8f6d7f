"""Floating-point math with IEEE results in place of Python exceptions."""

from __future__ import annotations

import math

NaN = math.nan
Pi = math.pi
E = math.e


def _div(a: float, b: float) -> float:
    """IEEE division: dividing by zero gives an infinity or NaN."""
    if b == 0:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


def _product_of_every_other(n: int) -> int:
    return math.prod(range(n, 0, -2))


def fmod(x: float, y: float) -> float:
    """Remainder of x / y with the quotient truncated toward zero."""
    if math.isnan(x) or math.isnan(y) or math.isinf(x) or y == 0:
        return math.nan
    return math.fmod(x, y)


def remainder(x: float, y: float) -> float:
    """IEEE remainder of x / y with the quotient rounded to nearest."""
    if math.isnan(x) or math.isnan(y) or math.isinf(x) or y == 0:
        return math.nan
    return math.remainder(x, y)


def sqrt(x: float) -> float:
    """Square root; negative input gives NaN."""
    if math.isnan(x):
        return x
    if x < 0:
        return math.nan
    return math.sqrt(x)


def rsqrt(x: float) -> float:
    """Reciprocal square root."""
    return _div(1.0, sqrt(x))


def cbrt(x: float) -> float:
    """Cube root by a polynomial estimate refined with Newton steps."""
    if math.isinf(x) or x == 0:
        return x
    if x < 0:
        return -cbrt(-x)

    r = x
    ex = 0
    while r < 0.125:
        r *= 8
        ex -= 1
    while r > 1.0:
        r *= 0.125
        ex += 1

    r = (-0.46946116 * r + 1.072302) * r + 0.3812513

    while ex < 0:
        r *= 0.5
        ex += 1
    while ex > 0:
        r *= 2.0
        ex -= 1

    for _ in range(4):
        r = (2.0 / 3.0) * r + (1.0 / 3.0) * x / (r * r)
    return r


def fabs(x: float) -> float:
    return math.fabs(x)


def hypot(x: float, y: float) -> float:
    """Length of the vector (x, y), computed as sqrt(x*x + y*y)."""
    return sqrt(x * x + y * y)


def sin(angle: float) -> float:
    if math.isinf(angle):
        return math.nan
    return math.sin(angle)


def cos(angle: float) -> float:
    if math.isinf(angle):
        return math.nan
    return math.cos(angle)


def sincos(angle: float) -> tuple[float, float]:
    """Sine and cosine of ``angle`` as a pair."""
    return sin(angle), cos(angle)


def tan(angle: float) -> float:
    if math.isinf(angle):
        return math.nan
    return math.tan(angle)


def atan(value: float) -> float:
    return math.atan(value)


def asin(x: float) -> float:
    """Arc sine; outside [-1, 1] gives NaN."""
    if math.isnan(x):
        return x
    if x > 1 or x < -1:
        return math.nan
    if x > 0.5 or x < -0.5:
        return 2 * atan(x / (1 + sqrt(1 - x * x)))
    squared = x * x
    value = x
    term = x * squared
    for n in range(1, 16, 2):
        value += term * _product_of_every_other(n) / _product_of_every_other(n + 1) / (n + 2)
        term *= squared
    return value


def acos(value: float) -> float:
    """Arc cosine, as pi/2 minus the arc sine."""
    return 0.5 * Pi - asin(value)


def atan2(y: float, x: float) -> float:
    return math.atan2(y, x)


def _logarithm(function, x: float) -> float:
    if math.isnan(x):
        return x
    if x < 0:
        return math.nan
    if x == 0:
        return -math.inf
    return function(x)


def log(x: float) -> float:
    return _logarithm(math.log, x)


def log2(x: float) -> float:
    return _logarithm(math.log2, x)


def log10(x: float) -> float:
    return _logarithm(math.log10, x)


def exp(exponent: float) -> float:
    try:
        return math.exp(exponent)
    except OverflowError:
        return math.inf


def exp2(exponent: float) -> float:
    try:
        return 2.0**exponent
    except OverflowError:
        return math.inf


def sinh(x: float) -> float:
    exponentiated = exp(x)
    if x > 0:
        return _div(exponentiated * exponentiated - 1, exponentiated) / 2
    return (exponentiated - _div(1.0, exponentiated)) / 2


def cosh(x: float) -> float:
    exponentiated = exp(-x)
    if x < 0:
        return _div(1 + exponentiated * exponentiated, 2 * exponentiated)
    return (_div(1.0, exponentiated) + exponentiated) / 2


def tanh(x: float) -> float:
    if x > 0:
        exponentiated = exp(2 * x)
        return _div(exponentiated - 1, exponentiated + 1)
    plus_x = exp(x)
    minus_x = _div(1.0, plus_x)
    return _div(plus_x - minus_x, plus_x + minus_x)


def asinh(x: float) -> float:
    return log(x + sqrt(x * x + 1))


def acosh(x: float) -> float:
    return log(x + sqrt(x * x - 1))


def atanh(x: float) -> float:
    return log(_div(1 + x, 1 - x)) / 2.0


def pow(x: float, y: float) -> float:  # noqa: A001
    """x raised to y; integral exponents use repeated multiplication."""
    if math.isnan(y):
        return y
    if y == 0:
        return 1.0
    if x == 0:
        return 0.0
    if y == 1:
        return x
    if math.isfinite(y) and abs(y) < 2**31 and y == int(y):
        count = int(abs(y)) - 1
        result = float(x)
        for done in range(count):
            result *= x
            if result == 0:
                break
            if math.isinf(result):
                remaining = count - done - 1
                if x < 0 and remaining % 2:
                    result = -result
                break
        if y < 0:
            result = _div(1.0, result)
        return result
    return exp2(y * log2(x))