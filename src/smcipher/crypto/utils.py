"""Base64 and hex encoding utilities for smcipher."""

import base64
import binascii

from ..errors import DecodeError


def to_base64(data: bytes) -> str:
    """Encode bytes to standard base64.

    Args:
        data: The bytes to encode.

    Returns:
        Standard base64 string with padding.
    """
    return base64.b64encode(data).decode("ascii")


def from_base64(s: str) -> bytes:
    """Decode a standard base64 string to bytes.

    Characters outside the base64 alphabet are rejected instead of
    being discarded.

    Args:
        s: The base64 string to decode.

    Returns:
        The decoded bytes.

    Raises:
        DecodeError: If the input is not valid base64.
    """
    if not isinstance(s, str):
        raise DecodeError(f"Expected base64 text, got {type(s).__name__}")
    try:
        return base64.b64decode(s, validate=True)
    except (binascii.Error, ValueError) as e:
        raise DecodeError(f"Invalid base64 input: {e}") from e


def base64_to_hex(s: str) -> str:
    """Convert base64 text to its lowercase hex representation.

    Every decoded byte becomes exactly two zero-padded hex digits,
    in byte order, without separators.

    Args:
        s: The base64 string to convert.

    Returns:
        The lowercase hex string.

    Raises:
        DecodeError: If the input is not valid base64.
    """
    return from_base64(s).hex()


def hex_to_bytes(s: str) -> bytes:
    """Decode a hex string to bytes.

    Raises:
        DecodeError: If the input is not valid hex.
    """
    try:
        return bytes.fromhex(s)
    except (TypeError, ValueError) as e:
        raise DecodeError(f"Invalid hex input: {e}") from e
