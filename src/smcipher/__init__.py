"""smcipher - SM2/SM4 client-side encryption helpers.

Encrypts outbound data for a remote endpoint: SM2 encryption under the
endpoint's public key, fresh SM4 keys, and SM4 payload encryption.

Example:
    ```python
    from smcipher import encrypt_asymmetric, encrypt_symmetric, generate_symmetric_key

    sm4_key = generate_symmetric_key()
    body = encrypt_symmetric('{"username": "admin"}', sm4_key)

    # Falls back to SMCIPHER_SM2_PUBLIC_KEY when no key is passed
    encrypted_key = encrypt_asymmetric(sm4_key)
    ```
"""

from __future__ import annotations

from typing import overload

from .client import CryptoClient
from .config import load_config
from .constants import ENV_SM2_PRIVATE_KEY, ENV_SM2_PUBLIC_KEY
from .crypto import (
    Sm2Encryptor,
    base64_to_hex,
    decrypt_symmetric,
    encrypt_symmetric,
    generate_sm2_keypair,
    generate_symmetric_key,
    sha256_hash,
    sm3_hash,
)
from .errors import (
    CipherError,
    DecodeError,
    DecryptionError,
    EncryptionError,
    MissingKeyError,
    SmCipherError,
)
from .types import CryptoConfig, Sm2Keypair

__version__ = "0.1.0"


@overload
def encrypt_asymmetric(text: str, public_key: str | None = None) -> str: ...


@overload
def encrypt_asymmetric(text: None, public_key: str | None = None) -> None: ...


def encrypt_asymmetric(text: str | None, public_key: str | None = None) -> str | None:
    """Encrypt text with SM2 using the environment's default key as fallback.

    The environment is read on each call. Use ``CryptoClient`` to inject
    the key explicitly instead.
    """
    if not text:
        return text
    return Sm2Encryptor(default_public_key=load_config().default_public_key).encrypt(
        text, public_key
    )


def decrypt_asymmetric(cipher_text: str, private_key: str | None = None) -> str:
    """Decrypt SM2 ciphertext using the environment's private key as fallback."""
    return Sm2Encryptor(private_key=load_config().private_key).decrypt(
        cipher_text, private_key
    )


__all__ = [
    "ENV_SM2_PRIVATE_KEY",
    "ENV_SM2_PUBLIC_KEY",
    "CipherError",
    "CryptoClient",
    "CryptoConfig",
    "DecodeError",
    "DecryptionError",
    "EncryptionError",
    "MissingKeyError",
    "Sm2Encryptor",
    "Sm2Keypair",
    "SmCipherError",
    "__version__",
    "base64_to_hex",
    "decrypt_asymmetric",
    "decrypt_symmetric",
    "encrypt_asymmetric",
    "encrypt_symmetric",
    "generate_sm2_keypair",
    "generate_symmetric_key",
    "load_config",
    "sha256_hash",
    "sm3_hash",
]
