"""CryptoClient - main entry point for smcipher."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import overload

from .config import load_config
from .constants import LOGGER_NAME
from .crypto import (
    Sm2Encryptor,
    decrypt_symmetric,
    encrypt_symmetric,
    generate_symmetric_key,
)
from .types import CiphertextEncoding, CryptoConfig, Sm4Mode, Sm4Padding

logger = logging.getLogger(LOGGER_NAME)


class CryptoClient:
    """Client-side encryption for data sent to a remote endpoint.

    The SM2 keys are injected at construction; nothing is read from the
    environment afterwards unless the client was built with ``from_env``.

    Example:
        ```python
        client = CryptoClient(default_public_key=server_public_key_b64)

        sm4_key = client.generate_symmetric_key()
        body = client.encrypt_symmetric(payload_json, sm4_key)
        header = client.encrypt_asymmetric(sm4_key)
        ```
    """

    def __init__(
        self,
        config: CryptoConfig | None = None,
        *,
        default_public_key: str | None = None,
        private_key: str | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            config: Full configuration. Keyword arguments override its fields.
            default_public_key: Base64 SM2 public key for ``encrypt_asymmetric``.
            private_key: Base64 SM2 private key for ``decrypt_asymmetric``.
        """
        config = config or CryptoConfig()
        self._config = CryptoConfig(
            default_public_key=default_public_key or config.default_public_key,
            private_key=private_key or config.private_key,
        )
        self._sm2 = Sm2Encryptor(
            default_public_key=self._config.default_public_key,
            private_key=self._config.private_key,
        )
        if self._config.default_public_key is None:
            logger.debug("CryptoClient created without a default SM2 public key")

    @classmethod
    def from_env(cls, env_file: str | Path | None = None) -> CryptoClient:
        """Create a client configured from the environment.

        Args:
            env_file: Optional ``.env`` file whose values take precedence.

        Returns:
            A new CryptoClient.
        """
        return cls(load_config(env_file))

    @property
    def config(self) -> CryptoConfig:
        """The effective configuration."""
        return self._config

    @overload
    def encrypt_asymmetric(self, text: str, public_key: str | None = None) -> str: ...

    @overload
    def encrypt_asymmetric(self, text: None, public_key: str | None = None) -> None: ...

    def encrypt_asymmetric(self, text: str | None, public_key: str | None = None) -> str | None:
        """Encrypt text with SM2. See ``Sm2Encryptor.encrypt``."""
        return self._sm2.encrypt(text, public_key)

    def decrypt_asymmetric(self, cipher_text: str, private_key: str | None = None) -> str:
        """Decrypt SM2 ciphertext. See ``Sm2Encryptor.decrypt``."""
        return self._sm2.decrypt(cipher_text, private_key)

    def generate_symmetric_key(self) -> str:
        """Generate a fresh 32-character hex SM4 key."""
        return generate_symmetric_key()

    def encrypt_symmetric(
        self,
        text: str,
        key: str,
        *,
        mode: Sm4Mode = "ECB",
        iv: str | None = None,
        padding: Sm4Padding = "pkcs7",
        encoding: CiphertextEncoding = "hex",
    ) -> str:
        """Encrypt text with SM4. See ``smcipher.crypto.sm4.encrypt_symmetric``."""
        return encrypt_symmetric(text, key, mode=mode, iv=iv, padding=padding, encoding=encoding)

    def decrypt_symmetric(
        self,
        cipher_text: str,
        key: str,
        *,
        mode: Sm4Mode = "ECB",
        iv: str | None = None,
        padding: Sm4Padding = "pkcs7",
        encoding: CiphertextEncoding = "hex",
    ) -> str:
        """Decrypt SM4 ciphertext. See ``smcipher.crypto.sm4.decrypt_symmetric``."""
        return decrypt_symmetric(
            cipher_text, key, mode=mode, iv=iv, padding=padding, encoding=encoding
        )
