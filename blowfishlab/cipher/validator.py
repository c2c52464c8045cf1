from __future__ import annotations

from typing import List, Tuple

from .errors import InvalidBlockLength, InvalidKeyLength

MIN_KEY_BYTES = 4
MAX_KEY_BYTES = 56
BLOCK_BYTES = 8

_BYTES_LIKE = (bytes, bytearray, memoryview)


def _as_bytes(data, what: str) -> bytes:
    if not isinstance(data, _BYTES_LIKE):
        raise TypeError(f"{what} must be bytes-like, got {type(data).__name__}")
    return bytes(data)


def validate_key(key) -> Tuple[bool, List[str]]:
    errs: List[str] = []

    if not isinstance(key, _BYTES_LIKE):
        errs.append(f"key must be bytes-like, got {type(key).__name__}")
        return False, errs

    n = len(bytes(key))
    if n < MIN_KEY_BYTES:
        errs.append(f"key is {n} bytes, minimum is {MIN_KEY_BYTES} ({MIN_KEY_BYTES * 8} bits)")
    if n > MAX_KEY_BYTES:
        errs.append(f"key is {n} bytes, maximum is {MAX_KEY_BYTES} ({MAX_KEY_BYTES * 8} bits)")

    return (len(errs) == 0), errs


def check_key(key) -> bytes:
    """Return ``key`` as bytes or raise InvalidKeyLength / TypeError."""
    raw = _as_bytes(key, "key")
    if not MIN_KEY_BYTES <= len(raw) <= MAX_KEY_BYTES:
        raise InvalidKeyLength(len(raw), min_len=MIN_KEY_BYTES, max_len=MAX_KEY_BYTES)
    return raw


def check_block(block) -> bytes:
    """Return ``block`` as bytes or raise InvalidBlockLength / TypeError."""
    raw = _as_bytes(block, "block")
    if len(raw) != BLOCK_BYTES:
        raise InvalidBlockLength(len(raw), block_len=BLOCK_BYTES)
    return raw
