"""Cryptographic operations for smcipher."""

from .constants import SM2_CIPHER_MODE_C1C3C2, UNCOMPRESSED_POINT_PREFIX
from .keys import (
    derive_sm2_public_key,
    generate_sm2_keypair,
    generate_symmetric_key,
    is_on_curve,
)
from .sm2 import Sm2Encryptor, sm2_decrypt_bytes, sm2_encrypt_bytes
from .hashing import sha256_hash, sm3_digest, sm3_hash
from .sm4 import decrypt_symmetric, encrypt_symmetric, sm4_decrypt_bytes, sm4_encrypt_bytes
from .utils import base64_to_hex, from_base64, hex_to_bytes, to_base64

__all__ = [
    "SM2_CIPHER_MODE_C1C3C2",
    "UNCOMPRESSED_POINT_PREFIX",
    "Sm2Encryptor",
    "base64_to_hex",
    "decrypt_symmetric",
    "derive_sm2_public_key",
    "encrypt_symmetric",
    "from_base64",
    "generate_sm2_keypair",
    "generate_symmetric_key",
    "hex_to_bytes",
    "is_on_curve",
    "sha256_hash",
    "sm2_decrypt_bytes",
    "sm2_encrypt_bytes",
    "sm3_digest",
    "sm3_hash",
    "sm4_decrypt_bytes",
    "sm4_encrypt_bytes",
    "to_base64",
]
