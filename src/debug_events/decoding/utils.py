"""Decoding utilities: text decoding, typed cleaners and value normalization."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from eth_utils import is_0x_prefixed, to_text

from debug_events.core.errors import InvalidValueError
from debug_events.core.interfaces import TextDecoder

BYTES32 = "bytes32"


def get_attr(obj: Any, key: str, default: Any = None) -> Any:
    """Read `key` from a mapping or an attribute object."""
    if isinstance(obj, Mapping):
        return obj.get(key, default)
    return getattr(obj, key, default)


def hex_to_utf8(value: Any) -> str:
    """Decode a fixed-width on-chain value (0x-hex string or bytes) as UTF-8."""
    try:
        if isinstance(value, (bytes, bytearray)):
            return to_text(primitive=bytes(value))
        if isinstance(value, str):
            if is_0x_prefixed(value):
                return to_text(hexstr=value)
            # Already decoded by the log decoder
            return value
    except (UnicodeDecodeError, ValueError) as e:
        raise InvalidValueError(value, BYTES32, str(e)) from e
    raise InvalidValueError(value, BYTES32, "expected hex string or bytes")


def clean_string(value: Any, text_decoder: TextDecoder = hex_to_utf8) -> str:
    """Decode a NUL-padded short string and remove every NUL character."""
    return text_decoder(value).replace("\x00", "")


def clean_uint(value: Any, type: str = "uint256") -> int | float:
    """Coerce a numeric value (int, decimal or 0x-hex string, BN-like object) to a number."""
    if isinstance(value, (int, float)):
        return int(value) if isinstance(value, bool) else value
    s = str(value).strip()
    if not s:
        return 0
    try:
        if is_0x_prefixed(s):
            return int(s, 16)
        return int(s)
    except ValueError:
        pass
    # Decimal and exponent notation ("1.5", "1e3")
    try:
        number = float(s)
    except ValueError as e:
        raise InvalidValueError(value, type, "not a number") from e
    return int(number) if number.is_integer() else number


def normalize_value(
    value: Any,
    type: str | None = BYTES32,
    *,
    text_decoder: TextDecoder = hex_to_utf8,
) -> Any:
    """Normalize one raw log value according to its declared ABI type.

    - bytes32 (or no type): decoded to text with NUL padding stripped
    - any uint width: coerced to a number
    - anything else: returned unchanged
    """
    if not type or type == BYTES32:
        return clean_string(value, text_decoder)
    if "uint" in type:
        return clean_uint(value, type)
    return value
