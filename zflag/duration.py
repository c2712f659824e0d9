"""Flag values holding durations, kept as whole nanoseconds."""

from __future__ import annotations

from collections.abc import Iterable

from .errors import _quote
from .values import SliceValue, Value

_NANOSECOND = 1
_MICROSECOND = 1000 * _NANOSECOND
_MILLISECOND = 1000 * _MICROSECOND
_SECOND = 1000 * _MILLISECOND
_MINUTE = 60 * _SECOND
_HOUR = 60 * _MINUTE

_UNITS = {
    "ns": _NANOSECOND,
    "us": _MICROSECOND,
    "\u00b5s": _MICROSECOND,
    "\u03bcs": _MICROSECOND,
    "ms": _MILLISECOND,
    "s": _SECOND,
    "m": _MINUTE,
    "h": _HOUR,
}

_LIMIT = 1 << 63
_INT64_MAX = _LIMIT - 1


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def _digit_run(s: str) -> int:
    """Return how many ASCII digits *s* starts with."""
    for count, ch in enumerate(s):
        if not _is_digit(ch):
            return count
    return len(s)


def _leading_fraction(digits: str) -> tuple[int, float]:
    """Read fraction digits as far as they fit: the integer and its scale."""
    value = 0
    scale = 1.0
    for ch in digits:
        if value > _INT64_MAX // 10:
            break
        candidate = value * 10 + int(ch)
        if candidate > _LIMIT:
            break
        value = candidate
        scale *= 10
    return value, scale


def parse_duration(text: str) -> int:
    """Parse text such as ``300ms``, ``-1.5h`` or ``2h45m`` into nanoseconds."""
    invalid = ValueError(f"parse_duration: invalid duration {_quote(text)}")
    s = text
    negative = False
    if s[:1] in ("-", "+"):
        negative = s[0] == "-"
        s = s[1:]
    if s == "0":
        return 0
    if not s:
        raise invalid

    total = 0
    while s:
        if not (s[0] == "." or _is_digit(s[0])):
            raise invalid

        count = _digit_run(s)
        whole = int(s[:count]) if count else 0
        if whole > _LIMIT:
            raise invalid
        has_whole = count > 0
        s = s[count:]

        fraction, scale = 0, 1.0
        has_fraction = False
        if s.startswith("."):
            s = s[1:]
            count = _digit_run(s)
            fraction, scale = _leading_fraction(s[:count])
            has_fraction = count > 0
            s = s[count:]
        if not has_whole and not has_fraction:
            raise invalid

        end = len(s)
        for position, ch in enumerate(s):
            if ch == "." or _is_digit(ch):
                end = position
                break
        if end == 0:
            raise ValueError(f"parse_duration: missing unit in duration {_quote(text)}")
        unit_name, s = s[:end], s[end:]
        unit = _UNITS.get(unit_name)
        if unit is None:
            raise ValueError(
                f"parse_duration: unknown unit {_quote(unit_name)} "
                f"in duration {_quote(text)}"
            )

        if whole > _LIMIT // unit:
            raise invalid
        amount = whole * unit
        if fraction > 0:
            amount += int(float(fraction) * (float(unit) / scale))
            if amount > _LIMIT:
                raise invalid
        total += amount
        if total > _LIMIT:
            raise invalid

    if negative:
        return -total
    if total > _INT64_MAX:
        raise invalid
    return total


def _split_fraction(value: int, precision: int) -> tuple[int, str]:
    """Split off *precision* decimal digits, dropping trailing zeros."""
    whole, fraction = divmod(value, 10**precision)
    if fraction == 0:
        return whole, ""
    return whole, "." + f"{fraction:0{precision}d}".rstrip("0")


def format_duration(nanoseconds: int) -> str:
    """Format nanoseconds as text such as ``1h2m3.5s``, ``1.5µs`` or ``0s``."""
    magnitude = abs(nanoseconds)
    sign = "-" if nanoseconds < 0 else ""
    if magnitude == 0:
        return "0s"
    if magnitude < _MICROSECOND:
        return f"{sign}{magnitude}ns"
    if magnitude < _MILLISECOND:
        whole, fraction = _split_fraction(magnitude, 3)
        return f"{sign}{whole}{fraction}\u00b5s"
    if magnitude < _SECOND:
        whole, fraction = _split_fraction(magnitude, 6)
        return f"{sign}{whole}{fraction}ms"

    seconds, fraction = _split_fraction(magnitude, 9)
    text = f"{seconds % 60}{fraction}s"
    minutes = seconds // 60
    if minutes:
        text = f"{minutes % 60}m{text}"
        hours = minutes // 60
        if hours:
            text = f"{hours}h{text}"
    return sign + text


class DurationValue(Value):
    """A single duration in nanoseconds."""

    def __init__(self, default: int = 0) -> None:
        self._value = int(default)

    def set(self, text: str) -> None:
        try:
            self._value = parse_duration(text.strip())
        except ValueError:
            self._value = 0
            raise

    def get(self) -> int:
        return self._value

    def type_name(self) -> str:
        return "duration"

    def __str__(self) -> str:
        return format_duration(self._value)


class DurationSliceValue(SliceValue):
    """A list of durations; the first value given replaces the default."""

    def __init__(self, default: Iterable[int] | None = None) -> None:
        self._value: list[int] | None = (
            None if default is None else [int(item) for item in default]
        )
        self._changed = False

    def set(self, text: str) -> None:
        item = parse_duration(text.strip())
        if not self._changed or self._value is None:
            self._value = []
        self._value.append(item)
        self._changed = True

    def get(self) -> list[int] | None:
        return self._value

    def type_name(self) -> str:
        return "durationSlice"

    def __str__(self) -> str:
        if self._value is None:
            return "[]"
        return "[" + " ".join(format_duration(item) for item in self._value) + "]"

    def append(self, text: str) -> None:
        item = parse_duration(text)
        if self._value is None:
            self._value = []
        self._value.append(item)

    def replace(self, texts: Iterable[str]) -> None:
        self._value = [parse_duration(text) for text in texts]

    def get_slice(self) -> list[str]:
        return [format_duration(item) for item in self._value or []]