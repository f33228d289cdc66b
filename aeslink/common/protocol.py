# aeslink/common/protocol.py
from pydantic import BaseModel
from typing import Optional

class Exchange(BaseModel):
    key: str         # base64 of the raw AES key bytes
    iv: str          # base64
    ct: str          # base64
    padded_len: int

class RoundTrip(BaseModel):
    message: str
    exchange: Exchange
    ok: bool
    recovered: Optional[str] = None
    error: Optional[str] = None
