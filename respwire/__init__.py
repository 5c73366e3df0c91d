"""Parse and serialize single messages in the RESP2 wire protocol."""

__version__ = "0.1.0"
__all__ = ["parser", "serializer", "example"]