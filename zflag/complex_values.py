"""Flag values holding complex numbers."""

from __future__ import annotations

import math
from collections.abc import Iterable
from decimal import Decimal

from .count import _underscores_ok
from .errors import _quote
from .values import SliceValue, Value

_DECIMAL = "0123456789"
_HEX = "0123456789abcdefABCDEF"


class _RangeError(ValueError):
    """A number too large to hold, with the infinite value it became."""

    def __init__(self, message: str, value: complex) -> None:
        super().__init__(message)
        self.value = value


def _infinity_prefix(rest: str, sign: float, nsign: int) -> tuple[float, int, bool] | None:
    matched = 0
    for got, want in zip(rest.lower(), "infinity"):
        if got != want:
            break
        matched += 1
    if 3 < matched < 8:
        matched = 3
    if matched in (3, 8):
        return sign * math.inf, nsign + matched, False
    return None


def _special_prefix(s: str) -> tuple[float, int, bool] | None:
    if not s:
        return None
    if s[0] in "+-":
        return _infinity_prefix(s[1:], -1.0 if s[0] == "-" else 1.0, 1)
    if s[0] in "iI":
        return _infinity_prefix(s, 1.0, 0)
    if s[:3].lower() == "nan":
        return math.nan, 3, False
    return None


def _float_prefix(s: str) -> tuple[float, int, bool] | None:
    """Read the longest float at the start of *s*: value, length, overflowed."""
    special = _special_prefix(s)
    if special is not None:
        return special

    i = 1 if s[:1] in ("+", "-") else 0
    start = i
    base = 10
    if i + 2 < len(s) and s[i] == "0" and s[i + 1] in "xX":
        base = 16
        i += 2
    digits = _HEX if base == 16 else _DECIMAL

    saw_dot = saw_digits = underscores = False
    while i < len(s):
        ch = s[i]
        if ch == "_":
            underscores = True
        elif ch == ".":
            if saw_dot:
                break
            saw_dot = True
        elif ch in digits:
            saw_digits = True
        else:
            break
        i += 1
    if not saw_digits:
        return None

    exp_char = "e" if base == 10 else "p"
    if i < len(s) and s[i].lower() == exp_char:
        i += 1
        if i < len(s) and s[i] in "+-":
            i += 1
        if i >= len(s) or s[i] not in _DECIMAL:
            return None
        while i < len(s) and (s[i] in _DECIMAL or s[i] == "_"):
            underscores = underscores or s[i] == "_"
            i += 1
    elif base == 16:
        return None

    if underscores and not _underscores_ok(s[start:i]):
        return None

    literal = s[:i].replace("_", "")
    if base == 16:
        try:
            return float.fromhex(literal), i, False
        except OverflowError:
            return (-math.inf if literal.startswith("-") else math.inf), i, True
    value = float(literal)
    return value, i, math.isinf(value)


def parse_complex(text: str) -> complex:
    """Parse a complex number such as ``1``, ``2i``, ``1+2i`` or ``(1-2i)``."""
    message = f"parse_complex: parsing {_quote(text)}"
    s = text
    if len(s) >= 2 and s[0] == "(" and s[-1] == ")":
        s = s[1:-1]

    def finish(result: complex, overflowed: bool) -> complex:
        if overflowed:
            raise _RangeError(f"{message}: value out of range", result)
        return result

    parsed = _float_prefix(s)
    if parsed is None:
        raise ValueError(f"{message}: invalid syntax")
    real, length, overflowed = parsed
    s = s[length:]
    if not s:
        return finish(complex(real, 0.0), overflowed)

    if s[0] == "+":
        if len(s) > 1 and s[1] != "+":
            s = s[1:]
    elif s[0] == "i" and len(s) == 1:
        return finish(complex(0.0, real), overflowed)
    elif s[0] != "-":
        raise ValueError(f"{message}: invalid syntax")

    parsed = _float_prefix(s)
    if parsed is None:
        raise ValueError(f"{message}: invalid syntax")
    imag, length, imag_overflowed = parsed
    if s[length:] != "i":
        raise ValueError(f"{message}: invalid syntax")
    return finish(complex(real, imag), overflowed or imag_overflowed)


def _fixed(part: float, plus: bool) -> str:
    if math.isnan(part):
        return "+NaN" if plus else "NaN"
    if math.isinf(part):
        if part < 0:
            return "-Inf"
        return "+Inf" if plus else "Inf"
    return f"{part:+f}" if plus else f"{part:f}"


def format_complex(value: complex) -> str:
    """Format with six decimals per part, such as ``(1.000000+2.000000i)``."""
    return f"({_fixed(value.real, False)}{_fixed(value.imag, True)}i)"


def _shortest(part: float) -> str:
    """Shortest text that reads back as *part*, in %g style."""
    if math.isnan(part):
        return "NaN"
    if math.isinf(part):
        return "+Inf" if part > 0 else "-Inf"
    if part == 0:
        return "-0" if math.copysign(1.0, part) < 0 else "0"
    sign, digit_tuple, exponent = Decimal(repr(part)).normalize().as_tuple()
    digits = "".join(map(str, digit_tuple))
    point = len(digits) + exponent
    prefix = "-" if sign else ""
    exp = point - 1
    if exp < -4 or exp >= 6:
        mantissa = digits[0] + ("." + digits[1:] if len(digits) > 1 else "")
        return f"{prefix}{mantissa}e{'-' if exp < 0 else '+'}{abs(exp):02d}"
    if point <= 0:
        return f"{prefix}0.{'0' * -point}{digits}"
    if point >= len(digits):
        return prefix + digits + "0" * (point - len(digits))
    return f"{prefix}{digits[:point]}.{digits[point:]}"


def _format_shortest(value: complex) -> str:
    imag = _shortest(value.imag)
    if imag[0] not in "+-":
        imag = "+" + imag
    return f"({_shortest(value.real)}{imag}i)"


class Complex128Value(Value):
    """A single complex number."""

    def __init__(self, default: complex = 0j) -> None:
        self._value = complex(default)

    def set(self, text: str) -> None:
        try:
            self._value = parse_complex(text.strip())
        except _RangeError as exc:
            self._value = exc.value
            raise
        except ValueError:
            self._value = 0j
            raise

    def get(self) -> complex:
        return self._value

    def type_name(self) -> str:
        return "complex128"

    def __str__(self) -> str:
        return _format_shortest(self._value)


class Complex128SliceValue(SliceValue):
    """A list of complex numbers; the first value given replaces the default."""

    def __init__(self, default: Iterable[complex] | None = None) -> None:
        self._value: list[complex] | None = (
            None if default is None else [complex(item) for item in default]
        )
        self._changed = False

    def set(self, text: str) -> None:
        item = parse_complex(text.strip())
        if not self._changed or self._value is None:
            self._value = []
        self._value.append(item)
        self._changed = True

    def get(self) -> list[complex] | None:
        return self._value

    def type_name(self) -> str:
        return "complex128Slice"

    def __str__(self) -> str:
        if self._value is None:
            return "[]"
        return "[" + " ".join(format_complex(item) for item in self._value) + "]"

    def append(self, text: str) -> None:
        item = parse_complex(text)
        if self._value is None:
            self._value = []
        self._value.append(item)

    def replace(self, texts: Iterable[str]) -> None:
        self._value = [parse_complex(text) for text in texts]

    def get_slice(self) -> list[str]:
        return [format_complex(item) for item in self._value or []]