"""SM3 and SHA-256 digests for smcipher."""

from __future__ import annotations

from cryptography.hazmat.primitives import hashes


def _digest(algorithm: hashes.HashAlgorithm, data: bytes) -> bytes:
    digest = hashes.Hash(algorithm)
    digest.update(data)
    return digest.finalize()


def sm3_digest(data: bytes) -> bytes:
    """Compute the raw 32-byte SM3 digest of ``data``."""
    return _digest(hashes.SM3(), data)


def sm3_hash(text: str, salt: str | None = None) -> str:
    """Hash text with SM3.

    Args:
        text: The text to hash (UTF-8 encoded).
        salt: Optional salt, prepended to the text before hashing.

    Returns:
        The lowercase hex digest (64 characters).
    """
    data = text.encode("utf-8")
    if salt:
        data = salt.encode("utf-8") + data
    return sm3_digest(data).hex()


def sha256_hash(text: str) -> str:
    """Hash UTF-8 text with SHA-256 and return the lowercase hex digest."""
    return _digest(hashes.SHA256(), text.encode("utf-8")).hex()
