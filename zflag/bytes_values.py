"""Flag values holding raw bytes, given as hex or base64 text."""

from __future__ import annotations

import base64

from .values import Value

_HEX_DIGITS = frozenset(b"0123456789abcdefABCDEF")
_B64_ALPHABET = b"ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"
_B64_DECODE = {code: index for index, code in enumerate(_B64_ALPHABET)}
_NEWLINES = (ord("\n"), ord("\r"))
_PAD = ord("=")


def _invalid_byte(code: int) -> ValueError:
    ch = chr(code)
    shown = f"U+{code:04X}"
    if ch.isprintable():
        shown += f" '{ch}'"
    return ValueError(f"decode_hex: invalid byte: {shown}")


def decode_hex(text: str) -> bytes:
    """Decode hexadecimal text of either case into bytes."""
    src = text.encode("utf-8")
    for code in src[: len(src) - len(src) % 2]:
        if code not in _HEX_DIGITS:
            raise _invalid_byte(code)
    if len(src) % 2:
        if src[-1] not in _HEX_DIGITS:
            raise _invalid_byte(src[-1])
        raise ValueError("decode_hex: odd length hex string")
    return bytes.fromhex(src.decode("ascii"))


def _corrupt(offset: int) -> ValueError:
    return ValueError(f"illegal base64 data at input byte {offset}")


def decode_base64(text: str) -> bytes:
    """Decode padded standard base64 text; line breaks are skipped."""
    src = text.encode("utf-8")
    size = len(src)
    out = bytearray()
    si = 0
    while si < size:
        quantum = [0, 0, 0, 0]
        count = 4
        j = 0
        trailing: ValueError | None = None
        while j < 4:
            if si == size:
                if j == 0:
                    return bytes(out)
                raise _corrupt(si - j)
            code = src[si]
            si += 1
            if code in _B64_DECODE:
                quantum[j] = _B64_DECODE[code]
                j += 1
                continue
            if code in _NEWLINES:
                continue
            if code != _PAD or j < 2:
                raise _corrupt(si - 1)
            if j == 2:
                while si < size and src[si] in _NEWLINES:
                    si += 1
                if si == size:
                    raise _corrupt(size)
                if src[si] != _PAD:
                    raise _corrupt(si - 1)
                si += 1
            while si < size and src[si] in _NEWLINES:
                si += 1
            if si < size:
                trailing = _corrupt(si)
            count = j
            break
        bits = quantum[0] << 18 | quantum[1] << 12 | quantum[2] << 6 | quantum[3]
        out += bits.to_bytes(3, "big")[: count - 1]
        if trailing is not None:
            raise trailing
    return bytes(out)


class BytesHexValue(Value):
    """Bytes given on the command line as hexadecimal text."""

    def __init__(self, default: bytes = b"") -> None:
        self._value = bytes(default)

    def set(self, text: str) -> None:
        self._value = decode_hex(text.strip())

    def get(self) -> bytes:
        return self._value

    def type_name(self) -> str:
        return "bytesHex"

    def __str__(self) -> str:
        return self._value.hex().upper()


class BytesBase64Value(Value):
    """Bytes given on the command line as standard base64 text."""

    def __init__(self, default: bytes = b"") -> None:
        self._value = bytes(default)

    def set(self, text: str) -> None:
        self._value = decode_base64(text.strip())

    def get(self) -> bytes:
        return self._value

    def type_name(self) -> str:
        return "bytesBase64"

    def __str__(self) -> str:
        return base64.b64encode(self._value).decode("ascii")