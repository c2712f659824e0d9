import pytest

from zflag.errors import (
    InvalidArgumentError,
    MissingFlagsError,
    UnknownFlagError,
    flag_with_dashes,
)


@pytest.mark.parametrize(
    ("name", "expected"),
    [("v", "-v"), ("verbose", "--verbose"), ("no-bs", "--no-bs"), ("", "--")],
)
def test_flag_with_dashes(name, expected):
    assert flag_with_dashes(name) == expected


def test_unknown_long_flag_message():
    err = UnknownFlagError("no-non-existent")
    assert str(err) == "unknown flag: --no-non-existent"
    assert err.name == "no-non-existent"


def test_unknown_short_flag_message():
    assert str(UnknownFlagError("b")) == "unknown flag: -b"


def test_required_flag_message():
    missing = MissingFlagsError()
    missing.add_missing_flag("required")
    assert str(missing) == 'required flag(s) "--required" not set'


def test_required_flags_message_lists_all():
    missing = MissingFlagsError()
    missing.add_missing_flag("a")
    missing.add_missing_flag("bs")
    assert len(missing) == 2
    assert list(missing) == ["-a", "--bs"]
    assert str(missing) == 'required flag(s) "-a", "--bs" not set'


def test_missing_flags_starts_empty():
    assert len(MissingFlagsError()) == 0


def test_invalid_argument_long_only():
    cause = ValueError("bad")
    err = InvalidArgumentError.from_flag(cause, "blabla", "bs")
    assert str(err) == 'invalid argument "blabla" for "--bs" flag: bad'
    assert err.flag_name == "--bs"


def test_invalid_argument_with_shorthand():
    cause = ValueError("oops")
    err = InvalidArgumentError.from_flag(cause, "a", "verbose", shorthand="v")
    assert str(err) == 'invalid argument "a" for "-v, --verbose" flag: oops'


def test_invalid_argument_shorthand_only():
    err = InvalidArgumentError.from_flag(
        ValueError("x"), "a", "verbose", shorthand="v", shorthand_only=True
    )
    assert err.flag_name == "-v"


def test_invalid_argument_deprecated_shorthand_uses_long_name():
    err = InvalidArgumentError.from_flag(
        ValueError("x"), "a", "verbose", shorthand="v", shorthand_deprecated="gone"
    )
    assert err.flag_name == "--verbose"


def test_invalid_argument_keeps_cause():
    cause = ValueError("inner")
    err = InvalidArgumentError.from_flag(cause, "v", "name")
    assert err.__cause__ is cause
    assert err.err is cause


def test_invalid_argument_quotes_control_characters():
    err = InvalidArgumentError.from_flag(ValueError("e"), 'a\nb"c', "x1")
    assert str(err) == 'invalid argument "a\\nb\\"c" for "--x1" flag: e'


def test_invalid_argument_is_raisable():
    err = InvalidArgumentError.from_flag(ValueError("e"), "x", "bs")
    caught = None
    try:
        raise err
    except InvalidArgumentError as exc:
        caught = exc
    assert caught is err
    assert str(caught) == 'invalid argument "x" for "--bs" flag: e'