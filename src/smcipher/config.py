"""Environment-sourced configuration for smcipher."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from dotenv import dotenv_values

from .constants import ENV_SM2_PRIVATE_KEY, ENV_SM2_PUBLIC_KEY, LOGGER_NAME
from .types import CryptoConfig

logger = logging.getLogger(LOGGER_NAME)


def _lookup(name: str, file_values: dict[str, str | None]) -> str | None:
    """Return a non-empty setting, preferring values from the env file."""
    value = file_values.get(name)
    if not value:
        value = os.getenv(name)
    return value or None


def load_config(env_file: str | Path | None = None) -> CryptoConfig:
    """Read SM2 key configuration from the process environment.

    The environment is read on every call, so changes made before an
    operation runs are picked up.

    Args:
        env_file: Optional path to a ``.env`` file. Values found there take
            precedence over the process environment.

    Returns:
        A CryptoConfig instance. Unset or empty variables map to None.
    """
    file_values: dict[str, str | None] = {}
    if env_file is not None:
        path = Path(env_file)
        if path.is_file():
            file_values = dict(dotenv_values(path))
        else:
            logger.debug("Env file %s not found, using process environment", path)

    return CryptoConfig(
        default_public_key=_lookup(ENV_SM2_PUBLIC_KEY, file_values),
        private_key=_lookup(ENV_SM2_PRIVATE_KEY, file_values),
    )
