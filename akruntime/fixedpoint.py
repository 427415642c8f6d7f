"""Binary fixed-point numbers on a signed fixed-width integer."""

from __future__ import annotations

from .bits import log2 as _int_log2

_WIDTHS = (8, 16, 32, 64)


def _validate(precision: int, bits: int) -> None:
    if bits not in _WIDTHS:
        raise ValueError(f"unsupported integer width: {bits}")
    if not 1 <= precision < bits:
        raise ValueError(f"precision must be between 1 and {bits - 1}, got {precision}")


def _wrap(value: int, bits: int) -> int:
    value &= (1 << bits) - 1
    if value >= 1 << (bits - 1):
        value -= 1 << bits
    return value


def _truncating_div(a: int, b: int) -> int:
    if b == 0:
        raise ZeroDivisionError("fixed-point division by zero")
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


class FixedPoint:
    """A fixed-point number with ``precision`` fraction bits in a ``bits``-wide integer.

    Arithmetic wraps like the underlying integer. Conversions to integers
    round to nearest with ties to even.
    """

    __slots__ = ("_raw", "_precision", "_bits")

    def __init__(self, value=0, precision: int = 16, bits: int = 32):
        _validate(precision, bits)
        self._precision = precision
        self._bits = bits
        if isinstance(value, FixedPoint):
            self._raw = value.cast_to(precision, bits).raw
        elif isinstance(value, int):
            self._raw = _wrap(value << precision, bits)
        elif isinstance(value, float):
            self._raw = _wrap(int(value * (1 << precision)), bits)
        else:
            raise TypeError(f"cannot make a fixed-point number from {type(value).__name__}")

    @classmethod
    def from_raw(cls, raw: int, precision: int = 16, bits: int = 32) -> "FixedPoint":
        result = cls(0, precision, bits)
        result._raw = _wrap(raw, bits)
        return result

    @property
    def raw(self) -> int:
        return self._raw

    @property
    def precision(self) -> int:
        return self._precision

    @property
    def bits(self) -> int:
        return self._bits

    @property
    def _mask(self) -> int:
        return (1 << self._precision) - 1

    def _make(self, raw: int) -> "FixedPoint":
        return FixedPoint.from_raw(raw, self._precision, self._bits)

    def _coerce(self, other):
        if isinstance(other, FixedPoint):
            if other._precision == self._precision and other._bits == self._bits:
                return other
            return other.cast_to(self._precision, self._bits)
        if isinstance(other, float):
            return FixedPoint(other, self._precision, self._bits)
        return None

    def __repr__(self) -> str:
        return f"FixedPoint({float(self)!r}, precision={self._precision}, bits={self._bits})"

    def __float__(self) -> float:
        return self._raw * 0.5**self._precision

    def _round_raw(self, raw: int, tie_base: int | None = None) -> int:
        p = self._precision
        value = raw >> p
        if raw & (1 << (p - 1)):
            if raw & (self._mask >> 2):
                value += 1 if raw > 0 else -1
            else:
                base = value if tie_base is None else tie_base
                value += base & 1
        return value

    def __int__(self) -> int:
        return self._round_raw(self._raw)

    def fract(self) -> "FixedPoint":
        return self._make(self._raw & self._mask)

    def round(self) -> "FixedPoint":
        return FixedPoint(int(self), self._precision, self._bits)

    def floor(self) -> "FixedPoint":
        return self._make(self._raw & ~self._mask)

    def ceil(self) -> "FixedPoint":
        bump = (1 << self._precision) if self._raw & self._mask else 0
        return self._make((self._raw & ~self._mask) + bump)

    def trunk(self) -> "FixedPoint":
        bump = 0
        if self._raw & self._mask and self._raw <= 0:
            bump = 1 << self._precision
        return self._make((self._raw & ~self._mask) + bump)

    def lround(self) -> int:
        return int(self)

    def lfloor(self) -> int:
        return self._raw >> self._precision

    def lceil(self) -> int:
        return (self._raw >> self._precision) + (1 if self._raw & self._mask else 0)

    def ltrunk(self) -> int:
        bump = 1 if self._raw & self._mask and self._raw <= 0 else 0
        return (self._raw >> self._precision) + bump

    def _square_accumulate(self) -> "FixedPoint":
        value = _wrap(self._raw * self._raw, self._bits)
        result = self._round_raw(value)
        # Ties round on the freshly shifted value here, unlike the binary product.
        return self._make(result)

    def log2(self) -> "FixedPoint":
        """Binary logarithm; non-positive values give the most negative number."""
        p = self._precision
        if self._raw <= 0:
            return self._make(-(1 << (self._bits - 1)))
        b = self._make(1 << (p - 1))
        y = self._make(0)
        x = self
        if x != 1:
            shift = _int_log2(x.raw, self._bits) - p
            x = x >> shift if shift > 0 else x << -shift
            y = y + shift
        for _ in range(p):
            x = x._square_accumulate()
            if x >= 2:
                x = x >> 1
                y = y + b
            b = b >> 1
        return y

    def signbit(self) -> bool:
        return self._raw < 0

    def cast_to(self, precision: int, bits: int | None = None) -> "FixedPoint":
        """The same value in another precision and width, truncating extra fraction bits."""
        bits = self._bits if bits is None else bits
        _validate(precision, bits)
        p = self._precision
        fraction = self._raw & self._mask
        raw_value = _wrap(_wrap(self._raw >> p, bits) << precision, bits)
        if p > precision:
            raw_value |= fraction >> (p - precision)
        elif p < precision:
            raw_value |= _wrap(fraction, bits) << (precision - p)
        else:
            raw_value |= fraction
        return FixedPoint.from_raw(raw_value, precision, bits)

    def __neg__(self) -> "FixedPoint":
        return self._make(-self._raw)

    def __add__(self, other):
        if isinstance(other, int):
            return self._make(self._raw + (other << self._precision))
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return self._make(self._raw + operand._raw)

    def __sub__(self, other):
        if isinstance(other, int):
            return self._make(self._raw - (other << self._precision))
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return self._make(self._raw - operand._raw)

    def __mul__(self, other):
        if isinstance(other, int):
            return self._make(self._raw * other)
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        value = _wrap(self._raw * operand._raw, self._bits)
        return self._make(self._round_raw(value, tie_base=self._raw))

    def __truediv__(self, other):
        if isinstance(other, int):
            return self._make(_truncating_div(self._raw, other))
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return self._make(_truncating_div(self._raw, operand._raw) << self._precision)

    def __rshift__(self, other):
        if not isinstance(other, int):
            return NotImplemented
        return self._make(self._raw >> other)

    def __lshift__(self, other):
        if not isinstance(other, int):
            return NotImplemented
        return self._make(self._raw << other)

    def _eq_int(self, other: int) -> bool:
        return (self._raw >> self._precision) == other and not self._raw & self._mask

    def _lt_int(self, other: int) -> bool:
        return (self._raw >> self._precision) < other or self._raw < (other << self._precision)

    def __eq__(self, other):
        if isinstance(other, int):
            return self._eq_int(other)
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return self._raw == operand._raw

    def __lt__(self, other):
        if isinstance(other, int):
            return self._lt_int(other)
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return self._raw < operand._raw

    def __le__(self, other):
        if isinstance(other, int):
            return self._lt_int(other) or self._eq_int(other)
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return self._raw <= operand._raw

    def __gt__(self, other):
        if isinstance(other, int):
            return not (self._lt_int(other) or self._eq_int(other))
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return self._raw > operand._raw

    def __ge__(self, other):
        if isinstance(other, int):
            return not self._lt_int(other)
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return self._raw >= operand._raw

    __hash__ = None