"""Flag value interfaces and the boolean flag values."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable

from .errors import _quote

_TRUE_WORDS = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE_WORDS = frozenset({"0", "f", "F", "FALSE", "false", "False"})


def parse_bool(text: str) -> bool:
    """Parse one of the accepted spellings of true or false."""
    if text in _TRUE_WORDS:
        return True
    if text in _FALSE_WORDS:
        return False
    raise ValueError(f"parse_bool: parsing {_quote(text)}: invalid syntax")


def format_bool(value: bool) -> str:
    """Format a boolean as ``true`` or ``false``."""
    return "true" if value else "false"


class Value(ABC):
    """The value held by a flag."""

    @abstractmethod
    def set(self, text: str) -> None:
        """Parse *text* and store the result."""

    @abstractmethod
    def get(self) -> object:
        """Return the stored value."""

    @abstractmethod
    def type_name(self) -> str:
        """Return the name of the value's type."""

    @abstractmethod
    def __str__(self) -> str:
        """Return the stored value as text."""

    def is_optional(self) -> bool:
        """Whether the flag may be given without a value."""
        return False

    def is_bool_flag(self) -> bool:
        """Whether the flag behaves as a boolean switch."""
        return False


class SliceValue(Value):
    """A flag value holding a list of items."""

    @abstractmethod
    def append(self, text: str) -> None:
        """Parse *text* and add it to the list."""

    @abstractmethod
    def replace(self, texts: Iterable[str]) -> None:
        """Parse every item of *texts* and make them the whole list."""

    @abstractmethod
    def get_slice(self) -> list[str]:
        """Return the items as text."""


class BoolValue(Value):
    """A boolean flag; given without a value it becomes true."""

    def __init__(self, default: bool = False) -> None:
        self._value = bool(default)

    def set(self, text: str) -> None:
        self._value = True if text == "" else parse_bool(text.strip())

    def get(self) -> bool:
        return self._value

    def type_name(self) -> str:
        return "bool"

    def __str__(self) -> str:
        return format_bool(self._value)

    def is_optional(self) -> bool:
        return True

    def is_bool_flag(self) -> bool:
        return True


class BoolSliceValue(SliceValue):
    """A list of booleans; the first value given replaces the default."""

    def __init__(self, default: Iterable[bool] | None = None) -> None:
        self._value: list[bool] | None = None if default is None else list(default)
        self._changed = False

    def set(self, text: str) -> None:
        item = parse_bool(text.strip())
        if not self._changed or self._value is None:
            self._value = []
        self._value.append(item)
        self._changed = True

    def get(self) -> list[bool] | None:
        return self._value

    def type_name(self) -> str:
        return "boolSlice"

    def __str__(self) -> str:
        if self._value is None:
            return "[]"
        return "[" + " ".join(format_bool(item) for item in self._value) + "]"

    def append(self, text: str) -> None:
        item = parse_bool(text)
        if self._value is None:
            self._value = []
        self._value.append(item)

    def replace(self, texts: Iterable[str]) -> None:
        self._value = [parse_bool(text) for text in texts]

    def get_slice(self) -> list[str]:
        return [format_bool(item) for item in self._value or []]