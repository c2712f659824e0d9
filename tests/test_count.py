import pytest

from zflag.count import CountValue, parse_int
from zflag.errors import InvalidArgumentError


def _set_all(value, texts):
    for text in texts:
        value.set(text)
    return value


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("0", 0),
        ("3", 3),
        ("+7", 7),
        ("-5", -5),
        ("0x10", 16),
        ("0X1f", 31),
        ("010", 8),
        ("0o17", 15),
        ("0b101", 5),
        ("1_000", 1000),
        ("0x_ff", 255),
        ("0_7", 7),
        ("9223372036854775807", 9223372036854775807),
        ("-9223372036854775808", -9223372036854775808),
    ],
)
def test_parse_int_accepts(text, expected):
    assert parse_int(text) == expected


@pytest.mark.parametrize(
    "text", ["", "a", "-", "0x", "08", "0b2", "1__0", "1_", "_1", "+-1", " 3", "1.5"]
)
def test_parse_int_rejects(text):
    with pytest.raises(ValueError, match="invalid syntax"):
        parse_int(text)


def test_parse_int_syntax_message():
    with pytest.raises(ValueError) as info:
        parse_int("a")
    assert str(info.value) == 'parse_int: parsing "a": invalid syntax'


def test_parse_int_out_of_range():
    with pytest.raises(ValueError) as info:
        parse_int("9223372036854775808")
    assert str(info.value) == 'parse_int: parsing "9223372036854775808": value out of range'


@pytest.mark.parametrize(
    ("inputs", "expected"),
    [
        ([], 0),
        ([""], 1),
        (["", "", ""], 3),
        (["3", ""], 4),
        (["0"], 0),
    ],
)
def test_count(inputs, expected):
    value = _set_all(CountValue(), inputs)
    assert value.get() == expected
    assert str(value) == str(expected)


def test_count_invalid_message():
    value = CountValue()
    with pytest.raises(ValueError) as info:
        value.set("a")
    err = InvalidArgumentError.from_flag(info.value, "a", "verbose", shorthand="v")
    assert str(err) == (
        'invalid argument "a" for "-v, --verbose" flag: '
        'parse_int: parsing "a": invalid syntax'
    )


def test_count_invalid_resets_to_zero():
    value = _set_all(CountValue(), ["", ""])
    with pytest.raises(ValueError):
        value.set("a")
    assert value.get() == 0


def test_count_out_of_range_clamps():
    value = CountValue()
    with pytest.raises(ValueError):
        value.set("99999999999999999999")
    assert value.get() == 9223372036854775807


def test_count_default_and_flags():
    value = CountValue(2)
    value.set("")
    assert value.get() == 3
    assert value.type_name() == "count"
    assert value.is_optional() is True
    assert value.is_bool_flag() is False