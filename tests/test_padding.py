import unittest

from Crypto.Util import Padding

from aeslink.common.errors import MessageTooLarge, PaddingError
from aeslink.crypto.padding import pad, padded_length, unpad


class TestPad(unittest.TestCase):
    def test_hello_gets_eleven_0b_bytes(self):
        self.assertEqual(pad(b"HELLO"), b"HELLO" + b"\x0b" * 11)

    def test_aligned_message_gains_full_block(self):
        msg = b"A" * 32
        out = pad(msg)
        self.assertEqual(len(out), 48)
        self.assertEqual(out[32:], b"\x10" * 16)

    def test_empty_message_is_one_block_of_padding(self):
        self.assertEqual(pad(b""), b"\x10" * 16)

    def test_last_byte_counts_trailing_padding(self):
        for n in range(0, 48):
            out = pad(b"x" * n)
            p = out[-1]
            self.assertTrue(1 <= p <= 16)
            self.assertEqual(len(out) - n, p)
            self.assertEqual(len(out) % 16, 0)
            self.assertEqual(out[:n], b"x" * n)

    def test_padded_length(self):
        self.assertEqual(padded_length(0), 16)
        self.assertEqual(padded_length(15), 16)
        self.assertEqual(padded_length(16), 32)
        self.assertEqual(padded_length(47), 48)

    def test_capacity_boundary(self):
        self.assertEqual(len(pad(b"x" * 47, capacity=64)), 48)
        self.assertEqual(len(pad(b"x" * 48, capacity=64)), 64)
        out = pad(b"x" * 63, capacity=64)
        self.assertEqual(len(out), 64)
        self.assertEqual(out[-1], 1)

    def test_capacity_is_enforced(self):
        with self.assertRaises(MessageTooLarge) as cm:
            pad(b"x" * 64, capacity=64)
        self.assertEqual(cm.exception.length, 64)
        self.assertEqual(cm.exception.padded_length, 80)
        self.assertEqual(cm.exception.capacity, 64)

    def test_matches_pycryptodome_pkcs7(self):
        for n in range(0, 48):
            msg = bytes(range(n))
            self.assertEqual(pad(msg), Padding.pad(msg, 16, style="pkcs7"))
            self.assertEqual(unpad(pad(msg)), Padding.unpad(pad(msg), 16, style="pkcs7"))

    def test_bad_block_size(self):
        with self.assertRaises(ValueError):
            pad(b"abc", block_size=0)
        with self.assertRaises(ValueError):
            pad(b"abc", block_size=256)


class TestUnpad(unittest.TestCase):
    def test_strips_padding(self):
        self.assertEqual(unpad(b"HELLO" + b"\x0b" * 11), b"HELLO")
        self.assertEqual(unpad(b"\x10" * 16), b"")

    def test_zero_pad_byte_rejected(self):
        with self.assertRaises(PaddingError):
            unpad(b"A" * 15 + b"\x00")

    def test_pad_byte_above_block_size_rejected(self):
        with self.assertRaises(PaddingError):
            unpad(b"A" * 15 + b"\x11")

    def test_pad_longer_than_buffer_rejected(self):
        with self.assertRaises(PaddingError):
            unpad(b"\x05\x05\x05", block_size=16)

    def test_empty_buffer_rejected(self):
        with self.assertRaises(PaddingError):
            unpad(b"")

    def test_strict_checks_every_pad_byte(self):
        buf = b"HELLO" + b"\x0b" * 5 + b"\x07" + b"\x0b" * 5
        with self.assertRaises(PaddingError):
            unpad(buf)
        self.assertEqual(unpad(buf, strict=False), b"HELLO")

    def test_strict_requires_block_alignment(self):
        with self.assertRaises(PaddingError):
            unpad(b"AB\x01")
        self.assertEqual(unpad(b"AB\x01", strict=False), b"AB")

    def test_padding_error_is_value_error(self):
        with self.assertRaises(ValueError):
            unpad(b"\xff" * 16)


if __name__ == "__main__":
    unittest.main()
