# respwire

A small parser and serializer for RESP2, the serialization protocol used
between clients and key-value servers. It covers the five RESP2 types:

| Type           | First byte | `RespType`  | Python value             |
|----------------|------------|-------------|--------------------------|
| Simple string  | `+`        | `STRING`    | `str`                    |
| Simple error   | `-`        | `ERROR`     | `str`                    |
| Integer        | `:`        | `INTEGER`   | `int` (signed 64-bit)    |
| Bulk string    | `$`        | `BULK`      | `str`, or `None` (null)  |
| Array          | `*`        | `ARRAY`     | `list`, or `None` (null) |

`RespType` is an `IntEnum` whose values are the first bytes; its `marker`
property gives the first byte as a one-character string.

## Installation

```
pip install respwire
```

## Parsing

`respwire.parser.parse` takes one complete RESP message as `bytes`,
`bytearray`, `memoryview` or `str` (encoded as UTF-8) and returns a
`Message`, a frozen dataclass with three fields:

- `kind`: the `RespType`
- `value`: the decoded value (see the table above)
- `raw`: the bytes that were parsed

```python
from respwire.parser import RespType, parse

msg = parse(b"*2\r\n+foo\r\n:123\r\n")
assert msg.kind is RespType.ARRAY
assert msg.value == ["foo", 123]

assert parse(b"$-1\r\n").value is None
assert parse(b":-456\r\n").value == -456
```

Simple strings, errors and integers must end in exactly one CRLF: a stray
CR or LF in the content, or any data after the terminator, is an error.
Integers may carry a leading `+` or `-` and must fit in a signed 64-bit
integer. Bulk strings are read by their length prefix, so they may contain
CR and LF; a length of `-1` is the null bulk string. Arrays may be nested,
and `*-1\r\n` is the null array.

Malformed input raises a subclass of `RespError` (itself a `ValueError`):

- `EmptyInputError`: no data at all
- `InvalidInputError`: input shorter than three bytes, or a broken array
- `InvalidTypeIdError`: unknown first byte
- `InvalidSimpleStringError`, `InvalidSimpleErrorError`: bad line framing
- `InvalidIntegerError`: non-digits, no digits, or outside the 64-bit range
- `InvalidBulkStringError`: bad length prefix or missing terminator

## Serializing

`respwire.serializer.serialize` turns a `Message` into RESP text and
returns it as a `str`.

```python
from respwire.parser import Message, RespType
from respwire.serializer import serialize

serialize(Message(RespType.STRING, "OK"))           # "+OK\r\n"
serialize(Message(RespType.INTEGER, 42))            # ":42\r\n"
serialize(Message(RespType.BULK, "Hello World"))    # "$11\r\nHello World\r\n"
serialize(Message(RespType.ARRAY, ["GET", "key", 42]))
# "*3\r\n$3\r\nGET\r\n$3\r\nkey\r\n:42\r\n"
```

A `Message` returned by `parse` can be passed straight back to `serialize`.

Inside arrays, strings are written as bulk strings, integers as integers,
lists and tuples as nested arrays and `None` as a null bulk string;
`True` and `False` become the bulk strings `true` and `false`, and any
other value is written as a bulk string of its `str()` form. A `None`
array serializes to `*-1\r\n`, a `None` bulk string to `$-1\r\n`.

`serialize` raises a `RespError` subclass when the value does not fit the
type: a simple string or error that is not a `str` or contains CR or LF,
an integer that is not an `int` (or is a `bool`) or lies outside the
64-bit range, a bulk string that is not a `str` or is over 512 MiB, or an
array value that is not a list or tuple.

## Example

To see a few sample messages parsed and serialized:

```
respwire-example
```

## What it does not do

`respwire` works on single, complete messages held in memory. It does not
read from sockets or streams, does not split a buffer holding several
messages, does not connect to a server, and does not support the RESP3
types.

## Running the tests

```
pip install respwire[test]
pytest
```