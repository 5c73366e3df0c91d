"""Demonstration of parsing and serializing RESP2 messages."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from .parser import Message, RespError, RespType, parse
from .serializer import serialize


def _show_parsed(label: str, wire: bytes) -> None:
    message = parse(wire)
    print(f"Parsed {label}ID: {message.kind.marker}")
    print(f"Parsed {label}value: {message.value!r}")
    print(f"Parsed {label}raw message: {message.raw!r}")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Parse and serialize a few sample messages, printing the results."""
    argparse.ArgumentParser(
        prog="respwire-example",
        description="Show RESP2 parsing and serialization on sample messages.",
    ).parse_args(argv)

    try:
        _show_parsed("", b"+OK\r\n")
        _show_parsed("integer ", b":123\r\n")
        _show_parsed("array ", b"*2\r\n+foo\r\n:123\r\n")

        samples = [
            Message(RespType.STRING, "OK"),
            Message(RespType.INTEGER, 42),
            Message(RespType.BULK, "Hello World"),
            Message(RespType.ARRAY, ["GET", "key", 42]),
        ]
        for sample in samples:
            print(serialize(sample))
    except RespError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())