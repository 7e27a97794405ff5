"""Type definitions for smcipher."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

# SM4 block cipher modes supported by the receiving party
Sm4Mode = Literal["ECB", "CBC"]

# SM4 padding schemes
Sm4Padding = Literal["pkcs7", "none"]

# Text encodings for SM4 ciphertext
CiphertextEncoding = Literal["hex", "base64"]


@dataclass(frozen=True)
class CryptoConfig:
    """Configuration for CryptoClient.

    Attributes:
        default_public_key: Base64-encoded SM2 public key used when no
            explicit key is passed to asymmetric encryption.
        private_key: Base64-encoded SM2 private key used for decryption.
    """

    default_public_key: str | None = None
    private_key: str | None = None


@dataclass(frozen=True)
class Sm2Keypair:
    """SM2 keypair in the layout expected by the receiving party.

    Attributes:
        public_key: Base64 of the 65-byte uncompressed point (04 || X || Y).
        private_key: Base64 of the 32-byte big-endian private scalar.
        public_key_hex: Hex form of ``public_key``.
        private_key_hex: Hex form of ``private_key``.
    """

    public_key: str
    private_key: str
    public_key_hex: str
    private_key_hex: str
