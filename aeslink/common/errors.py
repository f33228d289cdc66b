# aeslink/common/errors.py
"""
Error kinds raised by the crypto helpers.

 - PaddingError: trailing pad bytes are not a valid length encoding
 - MessageTooLarge: padded message would not fit the working buffer
 - InvalidInput: misaligned cipher input or wrong IV size
 - CryptoInitError: bad key length or the cipher could not be built
"""


class AESLinkError(Exception):
    """Base class for every aeslink error."""


class PaddingError(AESLinkError, ValueError):
    def __init__(self, msg: str = "invalid padding"):
        super().__init__(msg)


class MessageTooLarge(AESLinkError, ValueError):
    def __init__(self, length: int, padded_length: int, capacity: int):
        self.length = length
        self.padded_length = padded_length
        self.capacity = capacity
        super().__init__(
            f"message of {length} bytes pads to {padded_length} bytes, "
            f"buffer holds {capacity}"
        )


class InvalidInput(AESLinkError, ValueError):
    pass


class CryptoInitError(AESLinkError, ValueError):
    pass
