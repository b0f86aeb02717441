from __future__ import annotations

import logging
import secrets
import string

from cryptography.hazmat.primitives.asymmetric import rsa

from ..errors import KeyGenerationError
from ..types import KeyPair

logger = logging.getLogger(__name__)

MIN_KEY_SIZE = 2048
DEVICE_ID_LENGTH = 12
_DEVICE_ID_ALPHABET = string.ascii_lowercase + string.digits


class KeyPairGenerator:
    """Generates RSA key pairs for device registration."""

    def __init__(self, key_size: int = MIN_KEY_SIZE) -> None:
        if key_size < MIN_KEY_SIZE:
            raise ValueError(f"RSA key size must be at least {MIN_KEY_SIZE} bits, got {key_size}")
        self.key_size = key_size

    def generate(self) -> KeyPair:
        try:
            private_key = rsa.generate_private_key(public_exponent=65537, key_size=self.key_size)
        except Exception as e:
            logger.error(f"Failed to generate RSA key: {e}")
            raise KeyGenerationError(f"failed to generate RSA key: {e}") from e
        return KeyPair(private_key=private_key)


def new_device_id() -> str:
    """Return a 12 character random string to use as a device id."""
    return "".join(secrets.choice(_DEVICE_ID_ALPHABET) for _ in range(DEVICE_ID_LENGTH))
