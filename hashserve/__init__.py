"""Streaming MD5 hashing of newline-delimited records, with a buffer queue and environment settings."""

__version__ = "0.1.0"
__all__ = ["buffers", "config", "stream"]