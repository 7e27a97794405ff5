"""Tests for CryptoClient and the module-level functions."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest

import smcipher
from smcipher import (
    ENV_SM2_PRIVATE_KEY,
    ENV_SM2_PUBLIC_KEY,
    CryptoClient,
    CryptoConfig,
    MissingKeyError,
    generate_sm2_keypair,
)
from smcipher.types import Sm2Keypair


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Start every test without smcipher variables set."""
    monkeypatch.delenv(ENV_SM2_PUBLIC_KEY, raising=False)
    monkeypatch.delenv(ENV_SM2_PRIVATE_KEY, raising=False)


@pytest.fixture(scope="module")
def keypair() -> Sm2Keypair:
    """A real SM2 keypair."""
    return generate_sm2_keypair()


class TestCryptoClientInit:
    """Tests for CryptoClient configuration."""

    def test_default_configuration(self) -> None:
        """Test that a bare client has no keys."""
        client = CryptoClient()
        assert client.config == CryptoConfig()

    def test_config_object(self) -> None:
        """Test that a config object is used as is."""
        config = CryptoConfig(default_public_key="cHVi", private_key="cHJpdg==")
        assert CryptoClient(config).config == config

    def test_keyword_overrides(self) -> None:
        """Test that keyword arguments override the config object."""
        config = CryptoConfig(default_public_key="cHVi", private_key="cHJpdg==")
        client = CryptoClient(config, default_public_key="b3RoZXI=")
        assert client.config.default_public_key == "b3RoZXI="
        assert client.config.private_key == "cHJpdg=="

    def test_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test building a client from the environment."""
        monkeypatch.setenv(ENV_SM2_PUBLIC_KEY, "ZW52")
        assert CryptoClient.from_env().config.default_public_key == "ZW52"

    def test_from_env_file(self, tmp_path: Path) -> None:
        """Test building a client from a dotenv file."""
        env_file = tmp_path / ".env"
        env_file.write_text(f"{ENV_SM2_PUBLIC_KEY}=ZmlsZQ==\n")
        assert CryptoClient.from_env(env_file).config.default_public_key == "ZmlsZQ=="

    @patch("smcipher.client.load_config")
    def test_from_env_uses_load_config(self, mock_load) -> None:
        """Test that from_env passes the env file to load_config."""
        mock_load.return_value = CryptoConfig(default_public_key="bG9hZGVk")

        client = CryptoClient.from_env("custom.env")

        mock_load.assert_called_once_with("custom.env")
        assert client.config.default_public_key == "bG9hZGVk"

    def test_environment_not_read_after_construction(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test that an injected client ignores later environment changes."""
        client = CryptoClient()
        monkeypatch.setenv(ENV_SM2_PUBLIC_KEY, "ZW52")
        with pytest.raises(MissingKeyError):
            client.encrypt_asymmetric("hello")


class TestCryptoClientOperations:
    """Tests for the client operations."""

    def test_hybrid_flow(self, keypair: Sm2Keypair) -> None:
        """Test encrypting a payload with SM4 and its key with SM2."""
        client = CryptoClient(
            default_public_key=keypair.public_key, private_key=keypair.private_key
        )
        payload = '{"username":"admin","phone":"15151515151"}'

        sm4_key = client.generate_symmetric_key()
        body = client.encrypt_symmetric(payload, sm4_key)
        header = client.encrypt_asymmetric(sm4_key)

        assert header.startswith("04")
        recovered_key = client.decrypt_asymmetric(header)
        assert recovered_key == sm4_key
        assert client.decrypt_symmetric(body, recovered_key) == payload

    def test_empty_text_passes_through(self) -> None:
        """Test that empty plaintext needs no key."""
        client = CryptoClient()
        assert client.encrypt_asymmetric("") == ""
        assert client.encrypt_asymmetric(None) is None

    def test_missing_key(self) -> None:
        """Test that encryption without any key raises MissingKeyError."""
        with pytest.raises(MissingKeyError):
            CryptoClient().encrypt_asymmetric("hello")

    def test_symmetric_options(self) -> None:
        """Test that SM4 options are forwarded."""
        client = CryptoClient()
        key = client.generate_symmetric_key()
        cipher_text = client.encrypt_symmetric("hello", key, encoding="base64")
        assert client.decrypt_symmetric(cipher_text, key, encoding="base64") == "hello"


class TestModuleFunctions:
    """Tests for the module-level convenience functions."""

    def test_missing_default_key(self) -> None:
        """Test that no explicit key and no configured default raises."""
        with pytest.raises(MissingKeyError):
            smcipher.encrypt_asymmetric("hello")

    @patch("smcipher.crypto.sm2.sm2_encrypt_bytes")
    def test_empty_text_skips_primitive(self, mock_encrypt) -> None:
        """Test that empty input never reaches the primitive."""
        assert smcipher.encrypt_asymmetric("") == ""
        assert smcipher.encrypt_asymmetric(None) is None
        assert mock_encrypt.call_count == 0

    def test_default_key_read_at_call_time(
        self, keypair: Sm2Keypair, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test that a key set after import is used."""
        monkeypatch.setenv(ENV_SM2_PUBLIC_KEY, keypair.public_key)
        monkeypatch.setenv(ENV_SM2_PRIVATE_KEY, keypair.private_key)

        cipher_text = smcipher.encrypt_asymmetric("hello")

        assert cipher_text.startswith("04")
        assert smcipher.decrypt_asymmetric(cipher_text) == "hello"

    def test_explicit_key(self, keypair: Sm2Keypair) -> None:
        """Test that an explicit key works without configuration."""
        cipher_text = smcipher.encrypt_asymmetric("hello", keypair.public_key)
        assert smcipher.decrypt_asymmetric(cipher_text, keypair.private_key) == "hello"

    def test_symmetric_round_trip(self) -> None:
        """Test the SM4 functions exported at package level."""
        key = smcipher.generate_symmetric_key()
        assert smcipher.decrypt_symmetric(smcipher.encrypt_symmetric("hi", key), key) == "hi"

    def test_base64_to_hex(self) -> None:
        """Test the package-level encoding converter."""
        assert smcipher.base64_to_hex("AQID") == "010203"
