"""Serialization of values into RESP2 (Redis Serialization Protocol) messages."""

from __future__ import annotations

from typing import Any, Callable, Dict

from .parser import (
    INT64_MAX,
    INT64_MIN,
    MAX_BULK_SIZE,
    InvalidBulkStringError,
    InvalidInputError,
    InvalidIntegerError,
    InvalidSimpleErrorError,
    InvalidSimpleStringError,
    InvalidTypeIdError,
    Message,
    RespError,
    RespType,
)


def _simple_line(marker: str, value: Any, error: type[RespError]) -> str:
    if not isinstance(value, str):
        raise error()
    if "\r" in value or "\n" in value:
        raise error()
    return f"{marker}{value}\r\n"


def _serialize_string(value: Any) -> str:
    return _simple_line("+", value, InvalidSimpleStringError)


def _serialize_error(value: Any) -> str:
    return _simple_line("-", value, InvalidSimpleErrorError)


def _serialize_integer(value: Any) -> str:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidIntegerError()
    if not INT64_MIN <= value <= INT64_MAX:
        raise InvalidIntegerError()
    return f":{value}\r\n"


def _serialize_bulk(value: Any) -> str:
    if value is None:
        return "$-1\r\n"
    if not isinstance(value, str):
        raise InvalidBulkStringError()
    size = len(value.encode("utf-8", "surrogateescape"))
    if size > MAX_BULK_SIZE:
        raise InvalidBulkStringError()
    return f"${size}\r\n{value}\r\n"


def _element_message(element: Any) -> Message:
    """Choose the wire type for one array element."""
    if element is None:
        return Message(RespType.BULK, None)
    if isinstance(element, bool):
        return Message(RespType.BULK, "true" if element else "false")
    if isinstance(element, str):
        return Message(RespType.BULK, element)
    if isinstance(element, int):
        return Message(RespType.INTEGER, element)
    if isinstance(element, (list, tuple)):
        return Message(RespType.ARRAY, list(element))
    return Message(RespType.BULK, str(element))


def _serialize_array(value: Any) -> str:
    if value is None:
        return "*-1\r\n"
    if not isinstance(value, (list, tuple)):
        raise InvalidInputError()
    parts = [f"*{len(value)}\r\n"]
    parts.extend(serialize(_element_message(element)) for element in value)
    return "".join(parts)


_SERIALIZERS: Dict[RespType, Callable[[Any], str]] = {
    RespType.STRING: _serialize_string,
    RespType.ERROR: _serialize_error,
    RespType.INTEGER: _serialize_integer,
    RespType.BULK: _serialize_bulk,
    RespType.ARRAY: _serialize_array,
}


def serialize(message: Message) -> str:
    """Render a message in RESP2 wire format.

    Array elements are written as bulk strings, integers, nested arrays or
    null bulk strings; any other element is written as its string form.
    Raises a subclass of :class:`RespError` when the value does not fit the type.
    """
    try:
        kind = RespType(message.kind)
    except ValueError:
        raise InvalidTypeIdError() from None
    return _SERIALIZERS[kind](message.value)