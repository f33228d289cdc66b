# aeslink/common/utils.py
import base64


def b64e(b: bytes) -> str:
    """Base64 encode bytes -> str."""
    return base64.b64encode(b).decode()

def b64d(s: str) -> bytes:
    """Base64 decode str -> bytes."""
    return base64.b64decode(s)

def hex_dump(data: bytes) -> str:
    """Render bytes as space-separated uppercase hex pairs, e.g. '0A FF 10'."""
    return " ".join(f"{b:02X}" for b in data)

def parse_hex(s: str) -> bytes:
    """Inverse of hex_dump. Any whitespace between pairs is ignored."""
    return bytes.fromhex("".join(s.split()))
