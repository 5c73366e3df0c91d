"""Parsing of RESP2 (Redis Serialization Protocol) messages."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Iterator, Optional, Tuple, Type, Union

MAX_BULK_SIZE = 512 * 1024 * 1024
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

_CR = 0x0D
_LF = 0x0A
_CRLF = b"\r\n"
_NUMBER = re.compile(rb"[+-]?[0-9]+")


class RespType(IntEnum):
    """The RESP2 data types, keyed by their first byte."""

    INTEGER = ord(":")
    STRING = ord("+")
    BULK = ord("$")
    ARRAY = ord("*")
    ERROR = ord("-")

    @property
    def marker(self) -> str:
        """The type's first character on the wire."""
        return chr(self.value)


class RespError(ValueError):
    """Base class for malformed RESP data."""

    default_message = "invalid RESP data"

    def __init__(self, message: Optional[str] = None) -> None:
        super().__init__(message or self.default_message)


class EmptyInputError(RespError):
    default_message = "input data is empty"


class InvalidInputError(RespError):
    default_message = "input data is invalid"


class InvalidSimpleStringError(RespError):
    default_message = "input data is invalid for simple string"


class InvalidSimpleErrorError(RespError):
    default_message = "input data is invalid for simple error"


class InvalidIntegerError(RespError):
    default_message = "invalid input for integer error"


class InvalidTypeIdError(RespError):
    default_message = "invalid ID for input error"


class InvalidBulkStringError(RespError):
    default_message = "invalid bulk string input error"


@dataclass(frozen=True)
class Message:
    """A RESP value together with its type and, when parsed, its raw bytes.

    ``value`` is a ``str`` for simple strings, errors and bulk strings, an
    ``int`` for integers, a ``list`` for arrays, and ``None`` for null bulk
    strings and null arrays.
    """

    kind: RespType
    value: Any = None
    raw: bytes = b""


def _text(raw: bytes) -> str:
    return raw.decode("utf-8", "surrogateescape")


def _to_number(raw: bytes) -> Optional[int]:
    if not _NUMBER.fullmatch(raw):
        return None
    number = int(raw)
    if not INT64_MIN <= number <= INT64_MAX:
        return None
    return number


def _line_bytes(body: bytes, error: Type[RespError]) -> Iterator[int]:
    """Yield the content bytes of a line that must end in exactly one CRLF."""
    seen_cr = seen_lf = False
    for byte in body:
        if seen_cr and seen_lf:
            raise error()
        if byte == _CR:
            if seen_cr:
                raise error()
            seen_cr = True
            continue
        if byte == _LF:
            if seen_lf or not seen_cr:
                raise error()
            seen_lf = True
            continue
        yield byte
    if not (seen_cr and seen_lf):
        raise error()


def _parse_simple(msg: bytes, error: Type[RespError]) -> str:
    return _text(bytes(_line_bytes(msg[1:], error)))


def _parse_integer(msg: bytes) -> int:
    sign_byte = msg[1]
    negative = sign_byte == ord("-")
    body = msg[2:] if sign_byte in (ord("+"), ord("-")) else msg[1:]
    result = 0
    found_digit = False
    for byte in _line_bytes(body, InvalidIntegerError):
        if not ord("0") <= byte <= ord("9"):
            raise InvalidIntegerError()
        digit = byte - ord("0")
        result = result * 10 - digit if negative else result * 10 + digit
        if not INT64_MIN <= result <= INT64_MAX:
            raise InvalidIntegerError()
        found_digit = True
    if not found_digit:
        raise InvalidIntegerError()
    return result


def _parse_bulk(msg: bytes) -> Optional[str]:
    size = len(msg)
    if size < 4 or size > MAX_BULK_SIZE:
        raise InvalidBulkStringError()
    cr = msg.find(_CR)
    if cr == -1 or cr + 1 >= size or msg[cr + 1] != _LF:
        raise InvalidBulkStringError()
    length = _to_number(msg[1:cr])
    if length is None:
        raise InvalidBulkStringError()
    if length == -1:
        return None
    if length < 0:
        raise InvalidBulkStringError()
    start = cr + 2
    end = start + length
    if end + 2 > size or msg[end : end + 2] != _CRLF:
        raise InvalidBulkStringError()
    return _text(msg[start:end])


def _parse_value(msg: bytes, pos: int) -> Tuple[Any, int]:
    if pos >= len(msg):
        raise InvalidInputError()
    type_byte = msg[pos]
    if type_byte in (RespType.STRING, RespType.ERROR, RespType.INTEGER):
        crlf = msg.find(_CRLF, pos)
        if crlf == -1:
            raise InvalidInputError()
        element = msg[pos : crlf + 2]
        return _SCALAR_PARSERS[RespType(type_byte)](element), crlf + 2
    if type_byte == RespType.BULK:
        cr = msg.find(_CR, pos)
        if cr == -1:
            raise InvalidBulkStringError()
        length = _to_number(msg[pos + 1 : cr])
        if length is None:
            raise InvalidBulkStringError()
        start = cr + 2
        if length == -1:
            if start > len(msg):
                raise InvalidBulkStringError()
            return None, start
        if length < 0:
            raise InvalidBulkStringError()
        end = start + length
        if end + 2 > len(msg):
            raise InvalidBulkStringError()
        return _parse_bulk(msg[pos : end + 2]), end + 2
    if type_byte == RespType.ARRAY:
        return _parse_array(msg, pos)
    raise InvalidTypeIdError()


def _parse_array(msg: bytes, pos: int) -> Tuple[Optional[list], int]:
    if pos >= len(msg) or msg[pos] != RespType.ARRAY:
        raise InvalidTypeIdError()
    cr = msg.find(_CR, pos)
    if cr == -1 or cr + 1 >= len(msg) or msg[cr + 1] != _LF:
        raise InvalidInputError()
    length = _to_number(msg[pos + 1 : cr])
    if length is None or length < -1:
        raise InvalidInputError()
    cursor = cr + 2
    if length == -1:
        return None, cursor
    elements = []
    for _ in range(length):
        if cursor >= len(msg):
            raise InvalidInputError()
        value, cursor = _parse_value(msg, cursor)
        elements.append(value)
    return elements, cursor


_SCALAR_PARSERS = {
    RespType.STRING: lambda msg: _parse_simple(msg, InvalidSimpleStringError),
    RespType.ERROR: lambda msg: _parse_simple(msg, InvalidSimpleErrorError),
    RespType.INTEGER: _parse_integer,
    RespType.BULK: _parse_bulk,
    RespType.ARRAY: lambda msg: _parse_array(msg, 0)[0],
}


def parse(data: Union[bytes, bytearray, memoryview, str]) -> Message:
    """Parse one RESP2 message.

    Raises a subclass of :class:`RespError` when the data is malformed.
    """
    msg = data.encode("utf-8") if isinstance(data, str) else bytes(data)
    if not msg:
        raise EmptyInputError()
    if len(msg) < 3:
        raise InvalidInputError()
    try:
        kind = RespType(msg[0])
    except ValueError:
        raise InvalidTypeIdError() from None
    return Message(kind=kind, value=_SCALAR_PARSERS[kind](msg), raw=msg)