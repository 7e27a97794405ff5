"""SM2 asymmetric encryption for smcipher.

Point multiplication comes from gmssl. The nonce is drawn from
``secrets``, and the key stream and C3 digest use ``cryptography``
(the SM2 KDF is X9.63 KDF over SM3).
"""

from __future__ import annotations

import hmac
import logging
from typing import overload

from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.kdf.x963kdf import X963KDF

from ..constants import LOGGER_NAME
from ..errors import DecodeError, DecryptionError, EncryptionError, MissingKeyError
from .constants import (
    SM2_C3_SIZE,
    SM2_CIPHER_MODE_C1C2C3,
    SM2_CIPHER_MODE_C1C3C2,
    SM2_PUBLIC_KEY_SIZE,
    UNCOMPRESSED_POINT_PREFIX,
)
from .hashing import sm3_digest
from .keys import CURVE_G, is_on_curve, random_scalar, scalar_multiply
from .utils import base64_to_hex, hex_to_bytes

logger = logging.getLogger(LOGGER_NAME)

# C1 length in bytes (bare X || Y, without the 04 marker)
_C1_SIZE = SM2_PUBLIC_KEY_SIZE - 1

# Minimum C1 || C3 length in bytes
_MIN_CIPHERTEXT_SIZE = _C1_SIZE + SM2_C3_SIZE


def _strip_point_prefix(point_hex: str) -> str:
    """Drop the uncompressed point marker; the primitive takes bare X || Y."""
    if len(point_hex) == SM2_PUBLIC_KEY_SIZE * 2 and point_hex.startswith(
        UNCOMPRESSED_POINT_PREFIX
    ):
        return point_hex[len(UNCOMPRESSED_POINT_PREFIX) :]
    return point_hex


def _key_stream(shared_point: bytes, length: int) -> bytes:
    return X963KDF(algorithm=hashes.SM3(), length=length, sharedinfo=None).derive(shared_point)


def _check_mode(mode: int) -> None:
    if mode not in (SM2_CIPHER_MODE_C1C2C3, SM2_CIPHER_MODE_C1C3C2):
        raise ValueError(f"Unsupported SM2 cipher mode: {mode}, expected 0 or 1")


def sm2_encrypt_bytes(data: bytes, public_key_hex: str, mode: int) -> bytes:
    """Encrypt raw bytes under an SM2 public point.

    Args:
        data: The plaintext bytes, not empty.
        public_key_hex: Bare ``X || Y`` hex of the public point.
        mode: ``1`` for C1C3C2 output, ``0`` for C1C2C3.

    Returns:
        The ciphertext bytes without the ``04`` marker.

    Raises:
        ValueError: If the data is empty or the mode is unknown.
    """
    _check_mode(mode)
    if not data:
        raise ValueError("SM2 plaintext must not be empty")

    while True:
        k = random_scalar()
        c1 = bytes.fromhex(scalar_multiply(k, CURVE_G))
        shared_point = bytes.fromhex(scalar_multiply(k, public_key_hex))
        key_stream = _key_stream(shared_point, len(data))
        # An all-zero key stream requires a fresh k
        if any(key_stream):
            break

    c2 = bytes(m ^ t for m, t in zip(data, key_stream))
    half = len(shared_point) // 2
    c3 = sm3_digest(shared_point[:half] + data + shared_point[half:])

    if mode == SM2_CIPHER_MODE_C1C3C2:
        return c1 + c3 + c2
    return c1 + c2 + c3


def sm2_decrypt_bytes(data: bytes, private_key_hex: str, mode: int) -> bytes:
    """Decrypt raw SM2 ciphertext and verify its C3 digest.

    Args:
        data: Ciphertext bytes without the ``04`` marker.
        private_key_hex: The private scalar as hex.
        mode: Component ordering used at encryption time.

    Returns:
        The plaintext bytes.

    Raises:
        DecryptionError: If C1 is not a curve point, the key stream is zero
            or the C3 digest does not match.
    """
    _check_mode(mode)
    c1 = data[:_C1_SIZE]
    if mode == SM2_CIPHER_MODE_C1C3C2:
        c3 = data[_C1_SIZE:_MIN_CIPHERTEXT_SIZE]
        c2 = data[_MIN_CIPHERTEXT_SIZE:]
    else:
        c2 = data[_C1_SIZE:-SM2_C3_SIZE]
        c3 = data[-SM2_C3_SIZE:]

    if not is_on_curve(c1.hex()):
        raise DecryptionError("SM2 ciphertext C1 is not a point on the curve")

    # Shared point (x2, y2) = d * C1
    shared_point = bytes.fromhex(scalar_multiply(int(private_key_hex, 16), c1.hex()))
    key_stream = _key_stream(shared_point, len(c2))
    if not any(key_stream):
        raise DecryptionError("SM2 decryption failed: derived key stream is zero")

    plaintext = bytes(c ^ t for c, t in zip(c2, key_stream))
    half = len(shared_point) // 2
    expected_c3 = sm3_digest(shared_point[:half] + plaintext + shared_point[half:])
    if not hmac.compare_digest(c3, expected_c3):
        raise DecryptionError("SM2 integrity check failed - wrong key or tampered data")
    return plaintext


class Sm2Encryptor:
    """SM2 encryptor with an injected default public key.

    Ciphertext is always ``"04" + C1C3C2 hex``; the receiving party
    depends on this exact framing.

    Example:
        ```python
        encryptor = Sm2Encryptor(default_public_key=config.default_public_key)
        cipher_text = encryptor.encrypt('{"username": "admin"}')
        ```
    """

    def __init__(
        self,
        default_public_key: str | None = None,
        private_key: str | None = None,
    ) -> None:
        """Initialize the encryptor.

        Args:
            default_public_key: Base64 SM2 public key used when ``encrypt``
                gets no explicit key.
            private_key: Base64 SM2 private key used by ``decrypt``.
        """
        self._default_public_key = default_public_key
        self._private_key = private_key

    @property
    def default_public_key(self) -> str | None:
        """The configured default public key, if any."""
        return self._default_public_key

    def _resolve_public_key(self, public_key: str | None) -> str:
        if public_key:
            return public_key
        if not self._default_public_key:
            raise MissingKeyError(
                "No SM2 public key given and no default public key configured"
            )
        logger.debug("Using configured default SM2 public key")
        return self._default_public_key

    @overload
    def encrypt(self, text: str, public_key: str | None = None) -> str: ...

    @overload
    def encrypt(self, text: None, public_key: str | None = None) -> None: ...

    def encrypt(self, text: str | None, public_key: str | None = None) -> str | None:
        """Encrypt text under an SM2 public key.

        Empty or missing text is returned unchanged without touching the
        primitive.

        Args:
            text: The plaintext.
            public_key: Base64 SM2 public key. Falls back to the default.

        Returns:
            ``"04"`` followed by the C1C3C2 ciphertext hex, or ``text``
            unchanged when it is empty.

        Raises:
            MissingKeyError: If no key is given and none is configured.
            DecodeError: If the public key is not valid base64.
            EncryptionError: If the key is not a curve point or the
                primitive rejects the input.
        """
        if not text:
            return text

        point = _strip_point_prefix(base64_to_hex(self._resolve_public_key(public_key)))
        if not is_on_curve(point):
            raise EncryptionError("SM2 public key is not a point on the curve")

        try:
            result = sm2_encrypt_bytes(text.encode("utf-8"), point, SM2_CIPHER_MODE_C1C3C2)
        except Exception as e:
            raise EncryptionError(f"SM2 encryption failed: {e}") from e

        return UNCOMPRESSED_POINT_PREFIX + result.hex()

    def decrypt(self, cipher_text: str, private_key: str | None = None) -> str:
        """Decrypt ciphertext produced by ``encrypt``.

        Args:
            cipher_text: ``"04"``-framed C1C3C2 ciphertext hex.
            private_key: Base64 SM2 private key. Falls back to the configured one.

        Returns:
            The decrypted text.

        Raises:
            MissingKeyError: If no private key is given and none is configured.
            DecryptionError: If the input is malformed or fails integrity checks.
        """
        private_key = private_key or self._private_key
        if not private_key:
            raise MissingKeyError("No SM2 private key given and no private key configured")

        if not cipher_text.startswith(UNCOMPRESSED_POINT_PREFIX):
            raise DecryptionError("SM2 ciphertext is missing the uncompressed point marker")

        try:
            private_key_hex = base64_to_hex(private_key)
            data = hex_to_bytes(cipher_text[len(UNCOMPRESSED_POINT_PREFIX) :])
        except DecodeError as e:
            raise DecryptionError(f"Malformed SM2 input: {e}") from e

        if len(data) <= _MIN_CIPHERTEXT_SIZE:
            raise DecryptionError(
                f"SM2 ciphertext too short: {len(data)} bytes, "
                f"expected more than {_MIN_CIPHERTEXT_SIZE}"
            )

        try:
            plaintext = sm2_decrypt_bytes(data, private_key_hex, SM2_CIPHER_MODE_C1C3C2)
        except DecryptionError:
            raise
        except Exception as e:
            raise DecryptionError(f"SM2 decryption failed: {e}") from e

        try:
            return plaintext.decode("utf-8")
        except UnicodeDecodeError as e:
            raise DecryptionError(f"Failed to decode decrypted SM2 text: {e}") from e
