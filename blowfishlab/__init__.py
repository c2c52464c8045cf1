"""Blowfish block cipher: key schedule, Feistel transform and an evaluation harness.

Research / education only. Do NOT use in production. Only the single-block
primitive is provided; modes of operation and padding are left to callers.
"""

from .cipher import (
    Blowfish,
    BlowfishError,
    CipherState,
    InvalidBlockLength,
    InvalidKeyLength,
    decrypt_block,
    encrypt_block,
    new_cipher,
    schedule_key,
)

__version__ = "0.1.0"

__all__ = [
    "Blowfish",
    "new_cipher",
    "encrypt_block",
    "decrypt_block",
    "schedule_key",
    "CipherState",
    "BlowfishError",
    "InvalidKeyLength",
    "InvalidBlockLength",
]
