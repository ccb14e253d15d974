"""Server configuration read from ``HASHER_SERVER_*`` environment variables."""

from __future__ import annotations

import os
import re
from collections.abc import Callable, Mapping
from dataclasses import dataclass

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class ConfigurationError(RuntimeError):
    """Raised when an environment setting cannot be parsed or is out of range."""


def _parse_int(value: str) -> int:
    """Parse a leading integer, ignoring trailing text, within 32-bit range."""
    match = _LEADING_INT.match(value)
    if match is None:
        raise ValueError("stoi")
    number = int(match.group(1))
    if not _INT_MIN <= number <= _INT_MAX:
        raise ValueError("stoi")
    return number


def validate_greater(value: int, min_value: int) -> None:
    """Reject ``value`` if it is below ``min_value``."""
    if value < min_value:
        raise ValueError("validator greater failed")


def validate_range(value: int, min_value: int, max_value: int) -> None:
    """Reject ``value`` unless it lies in the inclusive range."""
    if min_value > max_value or value < min_value or value > max_value:
        raise ValueError("validator integer range failed")


def convert_int(name: str, value: str, validate: Callable[[int], None]) -> int:
    """Parse and validate an integer setting, wrapping failures in ConfigurationError."""
    try:
        number = _parse_int(value)
        validate(number)
    except Exception as exc:
        raise ConfigurationError(f"configuration: {name} : {value} : {exc}") from exc
    print(f"{name} = {number}")
    return number


@dataclass
class Configuration:
    """Optional server settings; ``None`` means use the server's default."""

    port: int | None = None
    addr: str | None = None
    conn_pool_capacity: int | None = None
    compute_pool_capacity: int | None = None
    socket_listen_capacity: int | None = None

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "Configuration":
        """Build a configuration from ``environ`` (the process environment by default)."""
        env = os.environ if environ is None else environ
        config = cls()
        if (v := env.get("HASHER_SERVER_PORT")) is not None:
            config.port = convert_int(
                "HASHER_SERVER_PORT", v, lambda n: validate_greater(n, 1024)
            )
        if (v := env.get("HASHER_SERVER_SOCK_LISTEN")) is not None:
            config.socket_listen_capacity = convert_int(
                "HASHER_SERVER_SOCK_LISTEN", v, lambda n: validate_greater(n, 1)
            )
        if (v := env.get("HASHER_SERVER_ADDRESS")) is not None:
            config.addr = v
        if (v := env.get("HASHER_SERVER_CONN_CAP")) is not None:
            config.conn_pool_capacity = convert_int(
                "HASHER_SERVER_CONN_CAP", v, lambda n: validate_range(n, 1, 256)
            )
        if (v := env.get("HASHER_SERVER_COMPUTE_CAP")) is not None:
            config.compute_pool_capacity = convert_int(
                "HASHER_SERVER_COMPUTE_CAP", v, lambda n: validate_range(n, 1, 256)
            )
        return config