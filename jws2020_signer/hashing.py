import hashlib
from typing import Union


def sha256(payload: Union[bytes, str]) -> bytes:
    if isinstance(payload, str):
        payload = payload.encode("utf-8")
    return hashlib.sha256(payload).digest()


def hex_encode(data: bytes) -> str:
    return data.hex()
