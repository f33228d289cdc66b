# aeslink/crypto/aes.py
import logging
from typing import Optional

from Crypto.Cipher import AES
from Crypto.Random import get_random_bytes

from aeslink.common.errors import CryptoInitError, InvalidInput
from aeslink.crypto.keygen import KEY_SIZE
from aeslink.crypto.padding import pad, unpad

logger = logging.getLogger(__name__)

BLOCK = AES.block_size  # 16

# Constant IV shared by encrypt() and decrypt(). Not secret and not random:
# equal plaintext prefixes under one key give equal leading ciphertext blocks.
# seal()/open_sealed() use a fresh IV per message instead.
FIXED_IV = bytes([0xff, 0x01, 0x02, 0x03, 0x04, 0x05, 0x06, 0x07,
                  0x08, 0x09, 0x0a, 0x0b, 0x0c, 0x0d, 0x0e, 0x0f])

def _new_cipher(key: bytes, iv: bytes):
    if len(key) != KEY_SIZE:
        raise CryptoInitError(f"Key length must be {KEY_SIZE} bytes")
    if len(iv) != BLOCK:
        raise InvalidInput(f"IV length must be {BLOCK} bytes")
    try:
        return AES.new(bytes(key), AES.MODE_CBC, iv=bytes(iv))
    except (ValueError, TypeError) as e:
        raise CryptoInitError(f"cannot initialise AES-CBC: {e}") from e

def _check_aligned(data: bytes):
    if not data or len(data) % BLOCK:
        raise InvalidInput(f"data length {len(data)} is not a positive multiple of {BLOCK}")

def encrypt(plaintext: bytes, key: bytes, iv: bytes = FIXED_IV) -> bytes:
    """
    AES-128-CBC over an already padded buffer. No padding is added here.
    Key must be 16 bytes, plaintext a positive multiple of 16 bytes.
    """
    _check_aligned(plaintext)
    cipher = _new_cipher(key, iv)
    ct = cipher.encrypt(bytes(plaintext))
    logger.debug("encrypted %d bytes", len(ct))
    return ct

def decrypt(ciphertext: bytes, key: bytes, iv: bytes = FIXED_IV) -> bytes:
    """Inverse of encrypt(). Returns the padded buffer; padding is left in place."""
    _check_aligned(ciphertext)
    cipher = _new_cipher(key, iv)
    pt = cipher.decrypt(bytes(ciphertext))
    logger.debug("decrypted %d bytes", len(pt))
    return pt

def seal(message: bytes, key: bytes, capacity: Optional[int] = None) -> bytes:
    """Pad, encrypt under a random IV and return iv || ciphertext."""
    iv = get_random_bytes(BLOCK)
    return iv + encrypt(pad(message, BLOCK, capacity=capacity), key, iv)

def open_sealed(blob: bytes, key: bytes, strict: bool = True) -> bytes:
    """Inverse of seal(). Raises PaddingError if the blob was altered or the key is wrong."""
    if len(blob) < 2 * BLOCK:
        raise InvalidInput("sealed blob is shorter than IV plus one block")
    iv, ct = blob[:BLOCK], blob[BLOCK:]
    return unpad(decrypt(ct, key, iv), BLOCK, strict=strict)
