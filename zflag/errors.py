"""Errors raised while defining, parsing and reading flags."""

from __future__ import annotations

from collections.abc import Iterator

_ESCAPES = {
    "\a": "\\a",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\v": "\\v",
    '"': '\\"',
    "\\": "\\\\",
}


def _quote(text: str) -> str:
    """Return *text* in double quotes with control characters escaped."""
    parts = []
    for ch in text:
        if ch in _ESCAPES:
            parts.append(_ESCAPES[ch])
        elif ch.isprintable():
            parts.append(ch)
        else:
            code = ord(ch)
            if code < 0x80:
                parts.append(f"\\x{code:02x}")
            elif code < 0x10000:
                parts.append(f"\\u{code:04x}")
            else:
                parts.append(f"\\U{code:08x}")
    return '"' + "".join(parts) + '"'


def flag_with_dashes(name: str) -> str:
    """Return the flag name as written on a command line."""
    return ("-" if len(name) == 1 else "--") + name


class UnknownFlagError(LookupError):
    """A flag was given that has not been defined."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"unknown flag: {flag_with_dashes(self.name)}"


class MissingFlagsError(Exception):
    """One or more required flags were not set."""

    def __init__(self) -> None:
        super().__init__()
        self.flags: list[str] = []

    def add_missing_flag(self, name: str) -> None:
        """Record the flag called *name* as missing."""
        self.flags.append(flag_with_dashes(name))

    def __len__(self) -> int:
        return len(self.flags)

    def __iter__(self) -> Iterator[str]:
        return iter(self.flags)

    def __str__(self) -> str:
        names = ", ".join(_quote(flag) for flag in self.flags)
        return f"required flag(s) {names} not set"


class InvalidArgumentError(ValueError):
    """A flag was given a value it could not accept."""

    def __init__(self, flag_name: str, value: object, err: BaseException) -> None:
        super().__init__(flag_name, value, err)
        self.flag_name = flag_name
        self.value = value
        self.err = err
        self.__cause__ = err

    @classmethod
    def from_flag(
        cls,
        err: BaseException,
        value: object,
        name: str,
        shorthand: str | None = None,
        shorthand_deprecated: str = "",
        shorthand_only: bool = False,
    ) -> InvalidArgumentError:
        """Build the error for the flag described by the arguments."""
        if shorthand and not shorthand_deprecated:
            flag_name = f"-{shorthand}"
            if not shorthand_only:
                flag_name = f"{flag_name}, --{name}"
        else:
            flag_name = flag_with_dashes(name)
        return cls(flag_name, value, err)

    def __str__(self) -> str:
        shown = self.value if isinstance(self.value, str) else str(self.value)
        return (
            f"invalid argument {_quote(shown)} for {_quote(self.flag_name)} "
            f"flag: {self.err}"
        )