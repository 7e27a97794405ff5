"""Cryptographic constants for smcipher."""

# Marker prepended to SM2 ciphertext (uncompressed point encoding)
UNCOMPRESSED_POINT_PREFIX = "04"

# SM2 ciphertext component ordering: 1 = C1C3C2, 0 = C1C2C3.
# The receiving party expects C1C3C2; do not make this configurable.
SM2_CIPHER_MODE_C1C3C2 = 1
SM2_CIPHER_MODE_C1C2C3 = 0

# SM2 sizes in bytes
SM2_PRIVATE_KEY_SIZE = 32
SM2_PUBLIC_KEY_SIZE = 65
SM2_C3_SIZE = 32

# SM4 constants
SM4_KEY_SIZE = 16
SM4_BLOCK_SIZE = 16
SM4_HEX_KEY_LENGTH = 32
SM4_DEFAULT_MODE = "ECB"
SM4_DEFAULT_PADDING = "pkcs7"
SM4_DEFAULT_ENCODING = "hex"

# Length of a generated symmetric key (hex characters)
SYMMETRIC_KEY_LENGTH = 32
