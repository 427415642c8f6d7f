"""Consistency checks between a brace format string and its argument count."""

from __future__ import annotations

from dataclasses import dataclass, field

_MAX_USED_ARGUMENTS = 128
_MAX_SPECIFIER_DEPTH = 4


class FormatStringError(ValueError):
    """A format string does not match its arguments or cannot be analysed."""


@dataclass
class FormatParams:
    """What a scan of a format string found."""

    used_arguments: list[int] = field(default_factory=list)
    next_implicit_argument_index: int = 0
    has_explicit_argument_references: bool = False
    unclosed_braces: int = 0
    extra_closed_braces: int = 0
    nesting_level: int = 0

    @property
    def total_used_argument_count(self) -> int:
        return len(self.used_arguments)


def _extract_used_argument_index(fmt: str, start: int, end: int, params: FormatParams) -> int:
    digits = ""
    for ch in fmt[start:end]:
        if not "0" <= ch <= "9":
            break
        digits += ch
    if not digits:
        index = params.next_implicit_argument_index
        params.next_implicit_argument_index += 1
        return index
    return int(digits)


def count_fmt_params(fmt: str) -> FormatParams:
    """Scan ``fmt`` for replacement fields and the arguments they use."""
    params = FormatParams()
    specifier_starts: list[int] = []
    length = len(fmt)
    i = 0
    while i < length:
        ch = fmt[i]
        if ch == "{":
            if i + 1 < length and fmt[i + 1] == "{":
                i += 2
                continue
            if len(specifier_starts) >= _MAX_SPECIFIER_DEPTH - 1:
                raise FormatStringError(
                    "Format-String Checker internal error: Format specifier nested too deep"
                )
            specifier_starts.append(i + 1)
            params.unclosed_braces += 1
            params.nesting_level += 1
        elif ch == "}":
            if params.nesting_level == 0 and i + 1 < length and fmt[i + 1] == "}":
                i += 2
                continue
            if params.unclosed_braces:
                params.nesting_level -= 1
                params.unclosed_braces -= 1
                if not specifier_starts:
                    raise FormatStringError(
                        "Format-String Checker internal error: Expected location information"
                    )
                start = specifier_starts.pop()
                if params.total_used_argument_count >= _MAX_USED_ARGUMENTS:
                    raise FormatStringError(
                        "Format-String Checker internal error: Too many format arguments in format string"
                    )
                index = _extract_used_argument_index(fmt, start, i, params)
                if index + 1 != params.next_implicit_argument_index:
                    params.has_explicit_argument_references = True
                params.used_arguments.append(index)
            else:
                params.extra_closed_braces += 1
        i += 1
    return params


def check_format_parameter_consistency(fmt: str, param_count: int) -> bool:
    """Raise FormatStringError unless ``fmt`` uses exactly ``param_count`` arguments."""
    check = count_fmt_params(fmt)
    if check.unclosed_braces != 0:
        raise FormatStringError("Extra unclosed braces in format string")
    if check.extra_closed_braces != 0:
        raise FormatStringError("Extra closing braces in format string")
    if any(entry >= param_count for entry in check.used_arguments):
        raise FormatStringError("Format string references nonexistent parameter")
    if not check.has_explicit_argument_references and check.total_used_argument_count != param_count:
        raise FormatStringError("Format string does not reference all passed parameters")
    if check.has_explicit_argument_references:
        used = set(check.used_arguments)
        if not all(index in used for index in range(param_count)):
            raise FormatStringError("Format string does not reference all passed parameters")
    return True


class CheckedFormatString:
    """A format string, checked against ``param_count`` when one is given."""

    __slots__ = ("_string",)

    def __init__(self, fmt: str, param_count: int | None = None):
        if param_count is not None:
            check_format_parameter_consistency(fmt, param_count)
        self._string = fmt

    def __repr__(self) -> str:
        return f"CheckedFormatString({self._string!r})"

    def view(self) -> str:
        return self._string