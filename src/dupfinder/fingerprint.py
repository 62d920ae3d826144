from __future__ import annotations

import hashlib
import os
from typing import Optional


# http://isthe.com/chongo/tech/comp/fnv/
FNV_OFFSET_BASIS = 0xCBF29CE484222325
FNV_PRIME = 0x100000001B3
_MASK_64 = (1 << 64) - 1

DEFAULT_CHUNK_SIZE = 8192
HEX_DIGEST_LENGTH = 32


def bucket_hash(data: bytes | str) -> int:
    """FNV-1 over the bytes of data (str is UTF-8 encoded first)."""
    if isinstance(data, str):
        data = data.encode("utf-8")
    h = FNV_OFFSET_BASIS
    for byte in data:
        h ^= byte
        h = (h * FNV_PRIME) & _MASK_64
    return h


def data_digest(data: bytes) -> str:
    return hashlib.md5(data).hexdigest()


def file_digest(path: str | os.PathLike[str], chunk_size: int = DEFAULT_CHUNK_SIZE) -> Optional[str]:
    """
    MD5 of the whole file as 32 lowercase hex characters.

    Returns None when the file cannot be opened or read; a partial digest is
    never returned.
    """
    h = hashlib.md5()
    try:
        with open(path, "rb") as f:
            for chunk in iter(lambda: f.read(chunk_size), b""):
                h.update(chunk)
    except OSError:
        return None
    return h.hexdigest()
