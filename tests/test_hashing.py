"""Tests for crypto/hashing.py module."""

import hashlib

from smcipher import sha256_hash, sm3_hash
from smcipher.crypto import sm3_digest

# GB/T 32905-2016 example 1
ABC_SM3_DIGEST = "66c7f0f462eeedd9d1f2d46bdc10e4e24167c4875cf2f7a2297da02b8f4ba8e0"


class TestSm3:
    """Tests for SM3 hashing."""

    def test_standard_vector(self) -> None:
        """Test the published digest of 'abc'."""
        assert sm3_hash("abc") == ABC_SM3_DIGEST

    def test_raw_digest(self) -> None:
        """Test that the raw digest is 32 bytes."""
        assert sm3_digest(b"abc").hex() == ABC_SM3_DIGEST

    def test_salt_is_prepended(self) -> None:
        """Test that the salt is hashed before the text."""
        assert sm3_hash("bc", salt="a") == ABC_SM3_DIGEST

    def test_empty_salt_ignored(self) -> None:
        """Test that an empty salt changes nothing."""
        assert sm3_hash("abc", salt="") == ABC_SM3_DIGEST


# FIPS 180-2 appendix B.1
ABC_SHA256_DIGEST = "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"


class TestSha256:
    """Tests for SHA-256 hashing."""

    def test_standard_vector(self) -> None:
        """Test the published digest of 'abc'."""
        assert sha256_hash("abc") == ABC_SHA256_DIGEST

    def test_empty_string(self) -> None:
        """Test the published digest of the empty message."""
        assert sha256_hash("") == (
            "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"
        )

    def test_utf8_input(self) -> None:
        """Test that text is hashed as UTF-8."""
        assert sha256_hash("国密") == hashlib.sha256("国密".encode("utf-8")).hexdigest()
