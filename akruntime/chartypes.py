"""ASCII and Unicode code point classification and conversion."""

from __future__ import annotations

_BASE36_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"


def _cp(code_point) -> int:
    if isinstance(code_point, str):
        if len(code_point) != 1:
            raise ValueError("expected a single character")
        return ord(code_point)
    return code_point


def is_ascii(code_point) -> bool:
    return _cp(code_point) < 0x80


def is_ascii_digit(code_point) -> bool:
    return ord("0") <= _cp(code_point) <= ord("9")


def is_ascii_upper_alpha(code_point) -> bool:
    return ord("A") <= _cp(code_point) <= ord("Z")


def is_ascii_lower_alpha(code_point) -> bool:
    return ord("a") <= _cp(code_point) <= ord("z")


def is_ascii_alpha(code_point) -> bool:
    return is_ascii_lower_alpha(code_point) or is_ascii_upper_alpha(code_point)


def is_ascii_alphanumeric(code_point) -> bool:
    return is_ascii_alpha(code_point) or is_ascii_digit(code_point)


def is_ascii_binary_digit(code_point) -> bool:
    return _cp(code_point) in (ord("0"), ord("1"))


def is_ascii_octal_digit(code_point) -> bool:
    return ord("0") <= _cp(code_point) <= ord("7")


def is_ascii_hex_digit(code_point) -> bool:
    cp = _cp(code_point)
    return is_ascii_digit(cp) or ord("A") <= cp <= ord("F") or ord("a") <= cp <= ord("f")


def is_ascii_blank(code_point) -> bool:
    return _cp(code_point) in (ord("\t"), ord(" "))


def is_ascii_space(code_point) -> bool:
    return _cp(code_point) in (0x20, 0x09, 0x0A, 0x0B, 0x0C, 0x0D)


def is_ascii_punctuation(code_point) -> bool:
    cp = _cp(code_point)
    return (
        0x21 <= cp <= 0x2F
        or 0x3A <= cp <= 0x40
        or 0x5B <= cp <= 0x60
        or 0x7B <= cp <= 0x7E
    )


def is_ascii_graphical(code_point) -> bool:
    return 0x21 <= _cp(code_point) <= 0x7E


def is_ascii_printable(code_point) -> bool:
    return 0x20 <= _cp(code_point) <= 0x7E


def is_ascii_c0_control(code_point) -> bool:
    return _cp(code_point) < 0x20


def is_ascii_control(code_point) -> bool:
    cp = _cp(code_point)
    return is_ascii_c0_control(cp) or cp == 0x7F


def is_unicode(code_point) -> bool:
    return _cp(code_point) <= 0x10FFFF


def is_unicode_control(code_point) -> bool:
    cp = _cp(code_point)
    return is_ascii_c0_control(cp) or 0x7E <= cp <= 0x9F


def is_unicode_surrogate(code_point) -> bool:
    return 0xD800 <= _cp(code_point) <= 0xDFFF


def is_unicode_scalar_value(code_point) -> bool:
    cp = _cp(code_point)
    return is_unicode(cp) and not is_unicode_surrogate(cp)


def is_unicode_noncharacter(code_point) -> bool:
    cp = _cp(code_point)
    return is_unicode(cp) and (
        0xFDD0 <= cp <= 0xFDEF
        or (cp & 0xFFFE) == 0xFFFE
        or (cp & 0xFFFF) == 0xFFFF
    )


def to_ascii_lowercase(code_point) -> int:
    cp = _cp(code_point)
    return cp + 0x20 if is_ascii_upper_alpha(cp) else cp


def to_ascii_uppercase(code_point) -> int:
    cp = _cp(code_point)
    return cp - 0x20 if is_ascii_lower_alpha(cp) else cp


def parse_ascii_digit(code_point) -> int:
    """Value of a decimal digit; anything else raises ValueError."""
    cp = _cp(code_point)
    if is_ascii_digit(cp):
        return cp - ord("0")
    raise ValueError(f"not an ASCII digit: {cp:#x}")


def parse_ascii_hex_digit(code_point) -> int:
    """Value of a hexadecimal digit; anything else raises ValueError."""
    cp = _cp(code_point)
    if is_ascii_digit(cp):
        return parse_ascii_digit(cp)
    if ord("A") <= cp <= ord("F"):
        return cp - ord("A") + 10
    if ord("a") <= cp <= ord("f"):
        return cp - ord("a") + 10
    raise ValueError(f"not an ASCII hex digit: {cp:#x}")


def parse_ascii_base36_digit(code_point) -> int:
    """Value of a base-36 digit; anything else raises ValueError."""
    cp = _cp(code_point)
    if is_ascii_digit(cp):
        return parse_ascii_digit(cp)
    if ord("A") <= cp <= ord("Z"):
        return cp - ord("A") + 10
    if ord("a") <= cp <= ord("z"):
        return cp - ord("a") + 10
    raise ValueError(f"not an ASCII base-36 digit: {cp:#x}")


def to_ascii_base36_digit(digit: int) -> int:
    """Code point of the lower-case base-36 digit for ``digit``."""
    if not 0 <= digit < len(_BASE36_DIGITS):
        raise ValueError(f"base-36 digit out of range: {digit}")
    return ord(_BASE36_DIGITS[digit])