"""Error hierarchy for smcipher."""

from __future__ import annotations


class SmCipherError(Exception):
    """Base exception for all smcipher errors."""

    pass


class DecodeError(SmCipherError, ValueError):
    """Malformed base64 or hex input."""

    pass


class MissingKeyError(SmCipherError):
    """No key available for the requested operation.

    Raised when neither an explicit key nor a configured default exists.
    """

    pass


class EncryptionError(SmCipherError):
    """The SM2 primitive rejected the key or the plaintext."""

    pass


class DecryptionError(SmCipherError):
    """SM2 decryption failure."""

    pass


class CipherError(SmCipherError):
    """SM4 failure: wrong key length, malformed ciphertext or bad padding.

    Never silently ignored; a corrupted or tampered payload surfaces here.
    """

    pass
