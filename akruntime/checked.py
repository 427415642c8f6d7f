"""Fixed-width integers that remember whether an operation overflowed."""

from __future__ import annotations

_WIDTHS = (8, 16, 32, 64)


def _limits(bits: int, signed: bool) -> tuple[int, int]:
    if bits not in _WIDTHS:
        raise ValueError(f"unsupported integer width: {bits}")
    if signed:
        return -(1 << (bits - 1)), (1 << (bits - 1)) - 1
    return 0, (1 << bits) - 1


def _wrap(value: int, bits: int, signed: bool) -> int:
    value &= (1 << bits) - 1
    if signed and value >= 1 << (bits - 1):
        value -= 1 << bits
    return value


def _truncating_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def is_within_range(value: int, bits: int = 32, signed: bool = True) -> bool:
    """Whether ``value`` is representable in the given integer type."""
    low, high = _limits(bits, signed)
    return low <= value <= high


def addition_would_overflow(u: int, v: int, bits: int = 32, signed: bool = True) -> bool:
    """Whether ``u + v`` falls outside the given integer type."""
    return not is_within_range(u + v, bits, signed)


def multiplication_would_overflow(bits: int, signed: bool, *args: int) -> bool:
    """Whether multiplying ``args`` together overflows the given integer type.

    With two factors the exact product is checked; with more, the factors
    are multiplied one by one and any intermediate overflow counts.
    """
    if len(args) < 2:
        raise TypeError("multiplication_would_overflow needs at least two factors")
    if len(args) == 2:
        u, v = args
        return not is_within_range(u * v, bits, signed)
    checked = Checked(args[0], bits, signed)
    for factor in args[1:]:
        checked.mul(factor)
    return checked.has_overflow()


def make_checked(value: int, bits: int = 32, signed: bool = True) -> "Checked":
    return Checked(value, bits, signed)


class Checked:
    """An integer of fixed width whose overflow is sticky.

    Arithmetic wraps like the underlying machine type, but once any
    operation overflows, reading the value raises ``OverflowError``.
    """

    __slots__ = ("_value", "_overflow", "bits", "signed")

    def __init__(self, value: int = 0, bits: int = 32, signed: bool = True):
        _limits(bits, signed)
        self.bits = bits
        self.signed = signed
        if isinstance(value, Checked):
            overflow = value._overflow
            value = value._value
        elif isinstance(value, int):
            overflow = False
        else:
            raise TypeError(f"expected an integer, got {type(value).__name__}")
        self._overflow = overflow or not is_within_range(value, bits, signed)
        self._value = _wrap(value, bits, signed)

    def __repr__(self) -> str:
        kind = "i" if self.signed else "u"
        state = "overflow" if self._overflow else str(self._value)
        return f"Checked<{kind}{self.bits}>({state})"

    def _copy(self) -> "Checked":
        return Checked(self, self.bits, self.signed)

    def _apply(self, result: int) -> None:
        if not is_within_range(result, self.bits, self.signed):
            self._overflow = True
        self._value = _wrap(result, self.bits, self.signed)

    @staticmethod
    def _plain(other) -> int:
        if isinstance(other, Checked):
            return other.value()
        if isinstance(other, int):
            return other
        raise TypeError(f"expected an integer, got {type(other).__name__}")

    def has_overflow(self) -> bool:
        return self._overflow

    def value(self) -> int:
        if self._overflow:
            raise OverflowError("checked integer has overflowed")
        return self._value

    def __int__(self) -> int:
        return self.value()

    def add(self, other: int) -> None:
        self._apply(self._value + other)

    def sub(self, other: int) -> None:
        self._apply(self._value - other)

    def mul(self, other: int) -> None:
        self._apply(self._value * other)

    def div(self, other: int) -> None:
        low, _ = _limits(self.bits, self.signed)
        if self.signed and other == -1 and self._value == low:
            self._overflow = True
            return
        if other == 0:
            self._overflow = True
            return
        self._value = _truncating_div(self._value, other)

    def _in_place(self, other, operation) -> "Checked":
        if isinstance(other, Checked):
            self._overflow |= other._overflow
        operation(self._plain(other))
        return self

    def __iadd__(self, other) -> "Checked":
        return self._in_place(other, self.add)

    def __isub__(self, other) -> "Checked":
        return self._in_place(other, self.sub)

    def __imul__(self, other) -> "Checked":
        return self._in_place(other, self.mul)

    def __itruediv__(self, other) -> "Checked":
        return self._in_place(other, self.div)

    def _binary(self, other, method_name: str):
        if not isinstance(other, (Checked, int)):
            return NotImplemented
        result = self._copy()
        getattr(result, method_name)(self._plain(other))
        return result

    def __add__(self, other):
        return self._binary(other, "add")

    def __sub__(self, other):
        return self._binary(other, "sub")

    def __mul__(self, other):
        return self._binary(other, "mul")

    def __truediv__(self, other):
        return self._binary(other, "div")

    def _compare_operand(self, other):
        if isinstance(other, (Checked, int)):
            return self._plain(other)
        return None

    def __eq__(self, other):
        operand = self._compare_operand(other)
        if operand is None:
            return NotImplemented
        return self.value() == operand

    def __lt__(self, other):
        operand = self._compare_operand(other)
        if operand is None:
            return NotImplemented
        return self.value() < operand

    def __le__(self, other):
        operand = self._compare_operand(other)
        if operand is None:
            return NotImplemented
        return self.value() <= operand

    def __gt__(self, other):
        operand = self._compare_operand(other)
        if operand is None:
            return NotImplemented
        return self.value() > operand

    def __ge__(self, other):
        operand = self._compare_operand(other)
        if operand is None:
            return NotImplemented
        return self.value() >= operand

    __hash__ = None

    def __bool__(self) -> bool:
        return self.value() != 0