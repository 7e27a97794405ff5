"""Key generation and SM2 curve helpers for smcipher."""

from __future__ import annotations

import secrets
import uuid

from gmssl.sm2 import CryptSM2, default_ecc_table

from ..types import Sm2Keypair
from .constants import SM2_PRIVATE_KEY_SIZE, SM2_PUBLIC_KEY_SIZE, UNCOMPRESSED_POINT_PREFIX
from .utils import to_base64

# SM2 recommended curve parameters
CURVE_P = int(default_ecc_table["p"], 16)
CURVE_A = int(default_ecc_table["a"], 16)
CURVE_B = int(default_ecc_table["b"], 16)
CURVE_N = int(default_ecc_table["n"], 16)
CURVE_G = default_ecc_table["g"].lower()

# Bare X || Y point length in hex characters
POINT_HEX_LENGTH = (SM2_PUBLIC_KEY_SIZE - 1) * 2


def random_scalar() -> int:
    """Draw a scalar uniformly from ``[1, n - 1]`` using the OS CSPRNG."""
    return secrets.randbelow(CURVE_N - 1) + 1


def is_on_curve(point_hex: str) -> bool:
    """Check that bare ``X || Y`` hex is an affine point of the SM2 curve.

    Args:
        point_hex: 128 hex characters, without the ``04`` marker.

    Returns:
        True if ``y^2 = x^3 + ax + b (mod p)`` holds with both coordinates
        reduced, False otherwise.
    """
    if len(point_hex) != POINT_HEX_LENGTH:
        return False
    try:
        x = int(point_hex[: POINT_HEX_LENGTH // 2], 16)
        y = int(point_hex[POINT_HEX_LENGTH // 2 :], 16)
    except ValueError:
        return False
    if not (0 <= x < CURVE_P and 0 <= y < CURVE_P):
        return False
    return (y * y - (x * x * x + CURVE_A * x + CURVE_B)) % CURVE_P == 0


def scalar_multiply(k: int, point_hex: str) -> str:
    """Compute ``k * P`` on the SM2 curve.

    Uses ``CryptSM2._kg`` from gmssl, a private method; the gmssl version
    range in pyproject.toml is pinned for it.

    Args:
        k: The scalar.
        point_hex: Bare ``X || Y`` hex of P.

    Returns:
        Bare ``X || Y`` hex of the product, lowercase and zero padded.

    Raises:
        ValueError: If the product is the point at infinity.
    """
    curve = CryptSM2(private_key=None, public_key="")
    product = curve._kg(k, point_hex)
    if product is None:
        raise ValueError("SM2 scalar multiplication gave the point at infinity")
    return str(product).lower()


def generate_symmetric_key() -> str:
    """Generate a fresh SM4 key.

    The key is the 32 hex digits of a random UUID4 with the hyphens
    removed. UUID4 draws from ``os.urandom``, so concurrent callers never
    share state. This is uniform randomness only, not a key derivation.

    Returns:
        A 32-character lowercase hex string (128 bits).
    """
    return str(uuid.uuid4()).replace("-", "")


def derive_sm2_public_key(private_key_hex: str) -> str:
    """Derive the uncompressed SM2 public point for a private scalar.

    Args:
        private_key_hex: The private scalar as hex.

    Returns:
        Hex of ``04 || X || Y``.
    """
    return UNCOMPRESSED_POINT_PREFIX + scalar_multiply(int(private_key_hex, 16), CURVE_G)


def generate_sm2_keypair() -> Sm2Keypair:
    """Generate a new SM2 keypair.

    The private scalar is drawn with ``secrets`` from ``[1, n - 1]``.

    Returns:
        A new Sm2Keypair with base64 and hex forms of both keys.
    """
    private_key_hex = format(random_scalar(), f"0{SM2_PRIVATE_KEY_SIZE * 2}x")
    public_key_hex = derive_sm2_public_key(private_key_hex)
    return Sm2Keypair(
        public_key=to_base64(bytes.fromhex(public_key_hex)),
        private_key=to_base64(bytes.fromhex(private_key_hex)),
        public_key_hex=public_key_hex,
        private_key_hex=private_key_hex,
    )
