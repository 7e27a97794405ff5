"""Default configuration constants for smcipher."""

# Logger name shared by all modules
LOGGER_NAME = "smcipher"

# Environment variables read by config.load_config()
ENV_SM2_PUBLIC_KEY = "SMCIPHER_SM2_PUBLIC_KEY"
ENV_SM2_PRIVATE_KEY = "SMCIPHER_SM2_PRIVATE_KEY"
