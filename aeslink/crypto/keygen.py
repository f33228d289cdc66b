# aeslink/crypto/keygen.py
"""
Random printable keys.

Exports:
 - KEY_SIZE (16 bytes, AES-128)
 - ALPHABET (94 printable ASCII characters)
 - generate_key(length, rng) -> key bytes drawn from ALPHABET
"""
import logging
import secrets
import string

logger = logging.getLogger(__name__)

KEY_SIZE = 16

# letters, digits, then every printable symbol except space
ALPHABET = string.ascii_uppercase + string.ascii_lowercase + string.digits + string.punctuation

def generate_key(length: int = KEY_SIZE, rng=None) -> bytes:
    """
    Draw `length` characters uniformly from ALPHABET.

    rng is anything with a choice() method (e.g. a seeded random.Random);
    the secrets CSPRNG is used when it is None.
    """
    if length < 0:
        raise ValueError("key length must be non-negative")
    choice = rng.choice if rng is not None else secrets.choice
    key = "".join(choice(ALPHABET) for _ in range(length)).encode("ascii")
    logger.debug("generated %d-byte key (%s source)", length,
                 "caller" if rng is not None else "secrets")
    return key
