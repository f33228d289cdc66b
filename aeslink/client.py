# aeslink/client.py
"""
One encrypt/decrypt exchange: key -> pad -> encrypt -> decrypt -> unpad.

Usage:
  python -m aeslink.client --message "HELLO"
  echo "HELLO" | python -m aeslink.client --tamper
"""

import os, sys, argparse, logging, traceback
from typing import Optional
from aeslink.common.errors import MessageTooLarge, PaddingError
from aeslink.common.protocol import Exchange, RoundTrip
from aeslink.common.utils import b64e, b64d, hex_dump
from aeslink.crypto import aes as aesmod
from aeslink.crypto.keygen import generate_key
from aeslink.crypto.padding import pad, unpad, BLOCK_SIZE

def buffer_size_from_env(default: int = 64) -> int:
    raw = os.environ.get("AESLINK_BUFFER_SIZE")
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"AESLINK_BUFFER_SIZE must be an integer, got {raw!r}") from None

BUFFER_SIZE = buffer_size_from_env()

def run_exchange(message: bytes, key: Optional[bytes] = None, capacity: int = BUFFER_SIZE,
                 random_iv: bool = False, tamper: bool = False, strict: bool = True) -> RoundTrip:
    """
    Encrypt `message` and decrypt it again under the same key.

    random_iv routes the exchange through seal()/open_sealed(); otherwise the
    fixed IV is used. MessageTooLarge is raised before any cipher work; a
    padding failure on the way back is recorded in the result rather than raised.
    """
    if random_iv:
        if key is None:
            key = generate_key()
        blob = aesmod.seal(message, key, capacity=capacity)
        iv, ct = blob[:BLOCK_SIZE], blob[BLOCK_SIZE:]
    else:
        padded = pad(message, BLOCK_SIZE, capacity=capacity)
        if key is None:
            key = generate_key()
        iv, ct = aesmod.FIXED_IV, aesmod.encrypt(padded, key)
    ex = Exchange(key=b64e(key), iv=b64e(iv), ct=b64e(ct), padded_len=len(ct))

    received = b64d(ex.ct)
    if tamper:
        # flip every bit of the final byte
        received = received[:-1] + bytes([received[-1] ^ 0xff])
    text = message.decode("utf-8", errors="replace")
    try:
        if random_iv:
            recovered = aesmod.open_sealed(b64d(ex.iv) + received, key, strict=strict)
        else:
            recovered = unpad(aesmod.decrypt(received, key), BLOCK_SIZE, strict=strict)
    except PaddingError as e:
        return RoundTrip(message=text, exchange=ex, ok=False, error=str(e))
    return RoundTrip(message=text, exchange=ex, ok=True,
                     recovered=recovered.decode("utf-8", errors="replace"))

def read_line(stream) -> str:
    """Read one line from stream and trim surrounding whitespace."""
    return stream.readline().strip()

def key_text(key: bytes) -> str:
    """Printable form of the raw key; bytes outside ASCII are shown as escapes."""
    return key.decode("ascii", errors="backslashreplace")

def print_round_trip(rt: RoundTrip):
    print(rt.message)
    print("Key:", key_text(b64d(rt.exchange.key)))
    print("Encrypted (HEX):")
    print(hex_dump(b64d(rt.exchange.ct)))
    if rt.ok:
        print("Decrypted (padding removed):")
        print(rt.recovered)
    else:
        print("Padding error!")

def main(argv=None):
    parser = argparse.ArgumentParser(prog="aeslink",
                                     description="AES-128-CBC round trip of one line of text")
    parser.add_argument("--message", help="text to encrypt (default: one line from stdin)")
    parser.add_argument("--random-iv", action="store_true", help="use a fresh IV instead of the fixed one")
    parser.add_argument("--tamper", action="store_true", help="flip the last ciphertext byte before decrypting")
    parser.add_argument("--loose", action="store_true", help="only check the last padding byte")
    parser.add_argument("--json", action="store_true", help="print the exchange as JSON")
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    if args.message is not None:
        line = args.message.strip()
    else:
        print("Enter a line and press Enter:")
        line = read_line(sys.stdin)
    try:
        rt = run_exchange(line.encode("utf-8"), random_iv=args.random_iv,
                          tamper=args.tamper, strict=not args.loose)
    except MessageTooLarge as e:
        print("Message too large:", e)
        return 2
    except Exception as e:
        traceback.print_exc()
        print("Error:", e)
        return 1

    if args.json:
        print(rt.model_dump_json(indent=2))
    else:
        print_round_trip(rt)
    return 0 if rt.ok else 1

if __name__=="__main__":
    sys.exit(main())
