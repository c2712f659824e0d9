# zflag

Typed values for POSIX/GNU-style command-line flags, and the errors a flag
parser reports. Each value parses the text given for a flag, keeps the
result, and renders it back as text in a stable form.

## Installing

```
pip install zflag
```

For running the tests:

```
pip install "zflag[test]"
pytest
```

## Values

Every value type shares one small interface, `zflag.values.Value`:

- `set(text)` parses `text` and stores it, raising `ValueError` on bad input;
- `get()` returns the stored Python value;
- `type_name()` names the flag type (`"bool"`, `"count"`, `"durationSlice"`, ...);
- `str(value)` gives the value as text;
- `is_optional()` and `is_bool_flag()` tell whether the flag may appear
  without an argument (both are true for `BoolValue`; `CountValue` is optional).

Available types:

| Module | Classes | Python value |
| --- | --- | --- |
| `zflag.values` | `BoolValue`, `BoolSliceValue` | `bool`, `list[bool]` |
| `zflag.count` | `CountValue` | `int` |
| `zflag.bytes_values` | `BytesHexValue`, `BytesBase64Value` | `bytes` |
| `zflag.complex_values` | `Complex128Value`, `Complex128SliceValue` | `complex`, `list[complex]` |
| `zflag.duration` | `DurationValue`, `DurationSliceValue` | nanoseconds as `int`, list of them |

`set` trims surrounding whitespace before parsing, except on `CountValue`.
The slice methods `append` and `replace` parse their text as given.

### Booleans and counts

```python
from zflag.values import BoolValue
from zflag.count import CountValue

verbose = BoolValue(False)
verbose.set("")        # an empty value means true
verbose.set("FALSE")   # 1, 0, t, f, T, F, true, false, TRUE, FALSE, True, False
print(verbose.get())   # False

level = CountValue()
level.set("")          # each empty value adds one
level.set("")
print(level.get())     # 2
level.set("0x10")      # a number replaces the count
print(level.get())     # 16
```

`zflag.count.parse_int` reads signed 64-bit integers; a `0x`, `0o`, `0b` or
leading `0` chooses the base.

### Slices

Slice values (`zflag.values.SliceValue`) take one item per `set`. The first
`set` replaces the default; later ones append. `append(text)` adds one item,
`replace(texts)` swaps in a whole new list, and `get_slice()` returns the
items as text.

```python
from zflag.duration import DurationSliceValue

timeouts = DurationSliceValue([1_000_000_000])
timeouts.set("1m")
timeouts.set("1s")
print(str(timeouts))         # [1m0s 1s]
print(timeouts.get_slice())  # ['1m0s', '1s']
timeouts.replace(["5m"])
timeouts.append("2h")
```

A slice whose default is `None` prints as `[]` and `get()` returns `None`
until something is stored.

### Durations

`zflag.duration.parse_duration` reads text such as `300ms`, `-1.5h` or
`2h45m` (units `ns`, `us`, `µs`, `ms`, `s`, `m`, `h`) into nanoseconds;
`format_duration` writes them back, for example `1h2m3.5s`, `1.5µs` or `0s`.

### Bytes and complex numbers

```python
from zflag.bytes_values import BytesHexValue, BytesBase64Value
from zflag.complex_values import Complex128Value

key = BytesHexValue()
key.set("1234abcd")
print(str(key))              # 1234ABCD

blob = BytesBase64Value()
blob.set("Ynll")
print(blob.get())            # b'bye'

z = Complex128Value()
z.set("2.5+3.1i")
print(z.get())               # (2.5+3.1j)
```

`decode_hex` and `decode_base64` (padded standard alphabet, line breaks
skipped) are available on their own in `zflag.bytes_values`.
`zflag.complex_values.parse_complex` accepts forms such as `1`, `2i`, `1+2i`
and `(1-2i)`; `format_complex` writes six decimals per part, as in
`(1.000000+2.000000i)`, which is the form slices use.

## Errors

`zflag.errors` holds the errors a parser reports:

- `UnknownFlagError(name)` reads `unknown flag: --name`;
- `MissingFlagsError()` collects flags added with `add_missing_flag(name)`
  and reads `required flag(s) "--a", "-b" not set`;
- `InvalidArgumentError.from_flag(err, value, name, shorthand, ...)` reads
  `invalid argument "x" for "-v, --verbose" flag: <reason>` and keeps `err`
  as its cause.

`flag_with_dashes(name)` gives `-n` for one-letter names and `--name` otherwise.

## What this package does not do

There is no flag set and no command-line parser here: nothing splits an
argument list, looks flags up by name or shorthand, checks required flags or
prints usage and help text. Nor are there value types for strings, plain
integers, floats or key=value maps. The values and errors above are the
building blocks such a parser would use.