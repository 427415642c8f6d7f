import math

import pytest

from akruntime.fixedpoint import FixedPoint


def test_int_construction_raw():
    assert FixedPoint(3).raw == 3 << 16
    assert FixedPoint(3, 8, 32).raw == 3 << 8


def test_from_raw_equals_constructed():
    assert FixedPoint.from_raw(5 << 16) == FixedPoint(5)


def test_float_round_trip():
    for value in (1.5, -2.25, 0.125, 100.75):
        assert float(FixedPoint(value)) == value


def test_invalid_format_rejected():
    with pytest.raises(ValueError):
        FixedPoint(1, 16, 24)
    with pytest.raises(ValueError):
        FixedPoint(1, 32, 32)
    with pytest.raises(TypeError):
        FixedPoint("1")


def test_int_construction_wraps():
    value = FixedPoint(2**15)
    assert float(value) == -(2**15)
    assert value.signbit()


@pytest.mark.parametrize("value", [0.5, 1.5, 2.5, 3.25, 3.5, 2.625, 5.875, 1.0])
def test_int_conversion_rounds_half_to_even(value):
    fixed = FixedPoint(value)
    assert int(fixed) == round(value)
    assert fixed.lround() == round(value)
    assert fixed.round() == round(value)


@pytest.mark.parametrize("value", [2.25, -2.25, 3.0, -3.0, 0.75, -0.75])
def test_floor_ceil_trunc(value):
    fixed = FixedPoint(value)
    assert fixed.floor() == math.floor(value)
    assert fixed.ceil() == math.ceil(value)
    assert fixed.trunk() == math.trunc(value)
    assert fixed.lfloor() == math.floor(value)
    assert fixed.lceil() == math.ceil(value)
    assert fixed.ltrunk() == math.trunc(value)


@pytest.mark.parametrize("value", [2.25, -2.25, 7.5])
def test_fract_is_distance_from_floor(value):
    assert float(FixedPoint(value).fract()) == value - math.floor(value)


def test_add_and_sub():
    a = FixedPoint(1.5)
    b = FixedPoint(2.25)
    assert float(a + b) == 1.5 + 2.25
    assert float(b - a) == 2.25 - 1.5
    assert float(a + 2) == 1.5 + 2
    assert float(a - 1) == 1.5 - 1


def test_mixed_precision_add():
    result = FixedPoint(1.5, 8) + FixedPoint(0.25, 16)
    assert result.precision == 8
    assert float(result) == 1.5 + 0.25


def test_float_operand_add():
    assert float(FixedPoint(1.5) + 0.5) == 1.5 + 0.5


def test_mul():
    a = FixedPoint(1.5, 8, 32)
    b = FixedPoint(2.5, 8, 32)
    assert float(a * b) == 1.5 * 2.5
    assert float(a * 4) == 1.5 * 4


def test_div_by_fixed_drops_fraction():
    result = FixedPoint(7) / FixedPoint(2)
    assert result == 7 // 2


def test_div_by_int():
    assert float(FixedPoint(3) / 2) == 3 / 2


def test_div_by_zero():
    with pytest.raises(ZeroDivisionError):
        FixedPoint(3) / 0
    with pytest.raises(ZeroDivisionError):
        FixedPoint(3) / FixedPoint(0)


def test_shifts():
    assert float(FixedPoint(3) >> 1) == 3 / 2
    assert FixedPoint(3) << 2 == 3 * 4


def test_negation_and_signbit():
    value = FixedPoint(1.5)
    assert float(-value) == -1.5
    assert (-value).signbit()
    assert not value.signbit()


def test_int_comparisons():
    assert FixedPoint(2) == 2
    assert not FixedPoint(2.5) == 2
    assert FixedPoint(2.5) != 2
    assert FixedPoint(2.5) > 2
    assert FixedPoint(2.5) < 3
    assert FixedPoint(2.5) <= 3
    assert FixedPoint(2) <= 2
    assert FixedPoint(2) >= 2
    assert not FixedPoint(2.5) >= 3


def test_fixed_and_float_comparisons():
    assert FixedPoint(2.5) == 2.5
    assert FixedPoint(2.5) < FixedPoint(3.5)
    assert FixedPoint(2.5) >= 2.5
    assert FixedPoint(-1.0) < 0.5


def test_cast_to_wider_and_narrower():
    value = FixedPoint(2.75)
    narrow = value.cast_to(8, 32)
    wide = value.cast_to(20, 64)
    assert narrow.precision == 8
    assert wide.bits == 64
    assert float(narrow) == 2.75
    assert float(wide) == 2.75
    assert FixedPoint(narrow, 16, 32) == value


def test_cast_to_drops_low_fraction_bits():
    value = FixedPoint(1 + 2**-10)
    assert float(value.cast_to(8)) == 1.0


def test_log2_of_powers_of_two():
    for value in (1, 2, 8, 64):
        assert float(FixedPoint(value, 16, 64).log2()) == math.log2(value)


def test_log2_approximates():
    for value in (3.0, 10.0, 0.75):
        result = float(FixedPoint(value, 16, 64).log2())
        assert result == pytest.approx(math.log2(value), abs=1e-3)


def test_log2_of_non_positive():
    assert FixedPoint(0, 16, 64).log2().raw == -(2**63)
    assert FixedPoint(-1).log2().raw == -(2**31)