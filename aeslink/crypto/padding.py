# aeslink/crypto/padding.py
import logging
from typing import Optional

from Crypto.Util import Padding

from aeslink.common.errors import MessageTooLarge, PaddingError

logger = logging.getLogger(__name__)

BLOCK_SIZE = 16

def padded_length(length: int, block_size: int = BLOCK_SIZE) -> int:
    """Length after padding; always at least one byte longer than `length`."""
    return (length // block_size + 1) * block_size

def pad(message: bytes, block_size: int = BLOCK_SIZE, capacity: Optional[int] = None) -> bytes:
    """
    PKCS#7: append N bytes of value N so the result is a multiple of block_size.
    A block-aligned message gains a whole extra block.
    Raises MessageTooLarge if the result would exceed `capacity`.
    """
    if not 1 <= block_size <= 255:
        raise ValueError("block size must be between 1 and 255")
    total = padded_length(len(message), block_size)
    if capacity is not None and total > capacity:
        raise MessageTooLarge(len(message), total, capacity)
    logger.debug("padding %d -> %d bytes", len(message), total)
    return Padding.pad(bytes(message), block_size, style="pkcs7")

def unpad(buf: bytes, block_size: int = BLOCK_SIZE, strict: bool = True) -> bytes:
    """
    Strip padding added by pad().

    strict=True is full PKCS#7 validation. strict=False only requires the last
    byte p to satisfy 1 <= p <= block_size and fit inside the buffer.
    Raises PaddingError otherwise (wrong key or corrupted ciphertext).
    """
    if not buf:
        raise PaddingError()
    if strict:
        try:
            return Padding.unpad(bytes(buf), block_size, style="pkcs7")
        except ValueError as e:
            raise PaddingError() from e
    p = buf[-1]
    if p < 1 or p > block_size or p > len(buf):
        raise PaddingError()
    return bytes(buf[:-p])
