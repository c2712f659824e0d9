"""A flag that counts how many times it was given."""

from __future__ import annotations

from .errors import _quote
from .values import Value

_INT64_MIN = -(1 << 63)
_INT64_MAX = (1 << 63) - 1
_PREFIX_BASES = {"0x": 16, "0o": 8, "0b": 2}
_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"


class _RangeError(ValueError):
    """An integer outside the 64-bit range, with the nearest value that fits."""

    def __init__(self, message: str, clamped: int) -> None:
        super().__init__(message)
        self.clamped = clamped


def _underscores_ok(body: str) -> bool:
    """Underscores may appear only between digits or after a base prefix."""
    saw = "^"
    rest = body
    hex_digits = False
    if len(body) >= 2 and body[0] == "0" and body[1].lower() in ("b", "o", "x"):
        saw = "0"
        hex_digits = body[1].lower() == "x"
        rest = body[2:]
    for ch in rest:
        if ch in "0123456789" or (hex_digits and ch.lower() in "abcdef"):
            saw = "0"
        elif ch == "_":
            if saw != "0":
                return False
            saw = "_"
        else:
            if saw == "_":
                return False
            saw = "!"
    return saw != "_"


def parse_int(text: str) -> int:
    """Parse a signed 64-bit integer; a 0x, 0o, 0b or 0 prefix sets the base."""
    syntax_error = ValueError(f"parse_int: parsing {_quote(text)}: invalid syntax")
    body = text
    negative = False
    if body[:1] in ("+", "-"):
        negative = body[0] == "-"
        body = body[1:]

    prefix = body[:2].lower()
    if prefix in _PREFIX_BASES:
        base, digits = _PREFIX_BASES[prefix], body[2:]
    elif len(body) > 1 and body[0] == "0":
        base, digits = 8, body[1:]
    else:
        base, digits = 10, body

    if "_" in body:
        if not _underscores_ok(body):
            raise syntax_error
        digits = digits.replace("_", "")

    allowed = _DIGITS[:base]
    if not digits or any(ch.lower() not in allowed or len(ch.lower()) != 1 for ch in digits):
        raise syntax_error

    number = int(digits, base)
    if negative:
        number = -number
    if number > _INT64_MAX or number < _INT64_MIN:
        clamped = _INT64_MAX if number > 0 else _INT64_MIN
        raise _RangeError(
            f"parse_int: parsing {_quote(text)}: value out of range", clamped
        )
    return number


class CountValue(Value):
    """An integer that goes up by one each time the flag is given bare."""

    def __init__(self, default: int = 0) -> None:
        self._value = int(default)

    def set(self, text: str) -> None:
        if text == "":
            self._value += 1
            return
        try:
            self._value = parse_int(text)
        except _RangeError as exc:
            self._value = exc.clamped
            raise
        except ValueError:
            self._value = 0
            raise

    def get(self) -> int:
        return self._value

    def type_name(self) -> str:
        return "count"

    def __str__(self) -> str:
        return str(self._value)

    def is_optional(self) -> bool:
        return True