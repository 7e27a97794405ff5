"""SM4 symmetric encryption for smcipher.

Defaults match the receiving party: ECB mode, PKCS#7 padding, UTF-8
plaintext and hex ciphertext.
"""

from __future__ import annotations

from cryptography.hazmat.primitives import padding as sym_padding
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from ..errors import CipherError, DecodeError
from ..types import CiphertextEncoding, Sm4Mode, Sm4Padding
from .constants import (
    SM4_BLOCK_SIZE,
    SM4_DEFAULT_ENCODING,
    SM4_DEFAULT_MODE,
    SM4_DEFAULT_PADDING,
    SM4_HEX_KEY_LENGTH,
    SM4_KEY_SIZE,
)
from .utils import from_base64, hex_to_bytes, to_base64


def _to_key_bytes(value: str, name: str) -> bytes:
    """Convert key or IV text to bytes.

    A 32-character value is hex decoded, a 16-character value is taken
    as its UTF-8 bytes. Anything else is rejected.
    """
    if not isinstance(value, str):
        raise CipherError(f"SM4 {name} must be a string, got {type(value).__name__}")
    if len(value) == SM4_HEX_KEY_LENGTH:
        try:
            return hex_to_bytes(value)
        except DecodeError as e:
            raise CipherError(f"Invalid SM4 {name}: {e}") from e
    if len(value) == SM4_KEY_SIZE:
        raw = value.encode("utf-8")
        if len(raw) == SM4_KEY_SIZE:
            return raw
    raise CipherError(
        f"Invalid SM4 {name} length: {len(value)}, expected {SM4_HEX_KEY_LENGTH} hex "
        f"characters or {SM4_KEY_SIZE} bytes"
    )


def _build_cipher(key: bytes, mode: Sm4Mode, iv: bytes | None) -> Cipher[modes.Mode]:
    mode = mode.upper()  # type: ignore[assignment]
    if mode == "ECB":
        cipher_mode: modes.Mode = modes.ECB()
    elif mode == "CBC":
        if iv is None:
            raise CipherError("SM4 CBC mode requires an IV")
        cipher_mode = modes.CBC(iv)
    else:
        raise CipherError(f"Unsupported SM4 mode: {mode}, expected ECB or CBC")
    return Cipher(algorithms.SM4(key), cipher_mode)


def _check_padding(padding: Sm4Padding) -> None:
    if padding not in ("pkcs7", "none"):
        raise CipherError(f"Unsupported SM4 padding: {padding}, expected pkcs7 or none")


def sm4_encrypt_bytes(
    data: bytes,
    key: bytes,
    *,
    mode: Sm4Mode = SM4_DEFAULT_MODE,
    iv: bytes | None = None,
    padding: Sm4Padding = SM4_DEFAULT_PADDING,
) -> bytes:
    """Encrypt raw bytes with SM4.

    Args:
        data: The plaintext bytes.
        key: The 16-byte key.
        mode: Block cipher mode.
        iv: 16-byte IV, required for CBC.
        padding: Padding scheme. With ``"none"`` the data must be block aligned.

    Returns:
        The ciphertext bytes.

    Raises:
        CipherError: If the key, IV, mode or data is rejected.
    """
    _check_padding(padding)
    try:
        if padding == "pkcs7":
            padder = sym_padding.PKCS7(SM4_BLOCK_SIZE * 8).padder()
            data = padder.update(data) + padder.finalize()
        encryptor = _build_cipher(key, mode, iv).encryptor()
        return encryptor.update(data) + encryptor.finalize()
    except CipherError:
        raise
    except Exception as e:
        raise CipherError(f"SM4 encryption failed: {e}") from e


def sm4_decrypt_bytes(
    data: bytes,
    key: bytes,
    *,
    mode: Sm4Mode = SM4_DEFAULT_MODE,
    iv: bytes | None = None,
    padding: Sm4Padding = SM4_DEFAULT_PADDING,
) -> bytes:
    """Decrypt raw SM4 ciphertext.

    Args:
        data: The ciphertext bytes.
        key: The 16-byte key.
        mode: Block cipher mode.
        iv: 16-byte IV, required for CBC.
        padding: Padding scheme used at encryption time.

    Returns:
        The plaintext bytes.

    Raises:
        CipherError: If the ciphertext is malformed or the padding is invalid.
    """
    _check_padding(padding)
    try:
        decryptor = _build_cipher(key, mode, iv).decryptor()
        plaintext = decryptor.update(data) + decryptor.finalize()
        if padding == "pkcs7":
            unpadder = sym_padding.PKCS7(SM4_BLOCK_SIZE * 8).unpadder()
            plaintext = unpadder.update(plaintext) + unpadder.finalize()
        return plaintext
    except CipherError:
        raise
    except Exception as e:
        raise CipherError(f"SM4 decryption failed: {e}") from e


def encrypt_symmetric(
    text: str,
    key: str,
    *,
    mode: Sm4Mode = SM4_DEFAULT_MODE,
    iv: str | None = None,
    padding: Sm4Padding = SM4_DEFAULT_PADDING,
    encoding: CiphertextEncoding = SM4_DEFAULT_ENCODING,
) -> str:
    """Encrypt text with SM4.

    Args:
        text: The plaintext.
        key: 32 hex characters (e.g. from ``generate_symmetric_key``) or
            a 16-character string.
        mode: ``"ECB"`` or ``"CBC"``.
        iv: IV for CBC, same format as ``key``.
        padding: ``"pkcs7"`` or ``"none"``.
        encoding: ``"hex"`` or ``"base64"`` output.

    Returns:
        The encoded ciphertext.

    Raises:
        CipherError: If the key, IV or options are rejected.
    """
    key_bytes = _to_key_bytes(key, "key")
    iv_bytes = _to_key_bytes(iv, "IV") if iv is not None else None
    ciphertext = sm4_encrypt_bytes(
        text.encode("utf-8"), key_bytes, mode=mode, iv=iv_bytes, padding=padding
    )
    if encoding == "hex":
        return ciphertext.hex()
    if encoding == "base64":
        return to_base64(ciphertext)
    raise CipherError(f"Unsupported ciphertext encoding: {encoding}, expected hex or base64")


def decrypt_symmetric(
    cipher_text: str,
    key: str,
    *,
    mode: Sm4Mode = SM4_DEFAULT_MODE,
    iv: str | None = None,
    padding: Sm4Padding = SM4_DEFAULT_PADDING,
    encoding: CiphertextEncoding = SM4_DEFAULT_ENCODING,
) -> str:
    """Decrypt SM4 ciphertext back to text.

    Args:
        cipher_text: Ciphertext as produced by ``encrypt_symmetric``.
        key: The key used for encryption.
        mode: ``"ECB"`` or ``"CBC"``.
        iv: IV for CBC, same format as ``key``.
        padding: ``"pkcs7"`` or ``"none"``.
        encoding: ``"hex"`` or ``"base64"`` input.

    Returns:
        The decrypted text.

    Raises:
        CipherError: If the ciphertext is malformed, the key is wrong or
            the result is not UTF-8.
    """
    key_bytes = _to_key_bytes(key, "key")
    iv_bytes = _to_key_bytes(iv, "IV") if iv is not None else None
    try:
        if encoding == "hex":
            data = hex_to_bytes(cipher_text)
        elif encoding == "base64":
            data = from_base64(cipher_text)
        else:
            raise CipherError(
                f"Unsupported ciphertext encoding: {encoding}, expected hex or base64"
            )
    except DecodeError as e:
        raise CipherError(f"Malformed SM4 ciphertext: {e}") from e

    plaintext = sm4_decrypt_bytes(data, key_bytes, mode=mode, iv=iv_bytes, padding=padding)
    try:
        return plaintext.decode("utf-8")
    except UnicodeDecodeError as e:
        raise CipherError(f"Failed to decode decrypted SM4 text: {e}") from e
