from __future__ import annotations

import struct
from typing import Tuple

from .feistel import MASK32, decrypt_words, encrypt_words
from .key_schedule import schedule_key
from .state import CipherState
from .validator import BLOCK_BYTES, MAX_KEY_BYTES, MIN_KEY_BYTES, check_block

_BLOCK = struct.Struct(">II")


class Blowfish:
    """A Blowfish instance bound to one key.

    The key is expanded once in ``__init__`` and the resulting state is
    read-only, so one instance can be shared between threads. To use a
    different key, build a new instance.

    Research / education only. Do NOT use in production.
    """

    block_size = BLOCK_BYTES
    min_key_size = MIN_KEY_BYTES
    max_key_size = MAX_KEY_BYTES

    __slots__ = ("_state",)

    def __init__(self, key: bytes):
        self._state: CipherState = schedule_key(key)

    def __repr__(self) -> str:
        return f"Blowfish(fingerprint={self._state.fingerprint()[:16]}...)"

    @property
    def state(self) -> CipherState:
        return self._state

    def fingerprint(self) -> str:
        return self._state.fingerprint()

    def encrypt_words(self, left: int, right: int) -> Tuple[int, int]:
        return encrypt_words(self._state, left & MASK32, right & MASK32)

    def decrypt_words(self, left: int, right: int) -> Tuple[int, int]:
        return decrypt_words(self._state, left & MASK32, right & MASK32)

    def encrypt_block(self, plaintext_block: bytes) -> bytes:
        left, right = _BLOCK.unpack(check_block(plaintext_block))
        return _BLOCK.pack(*encrypt_words(self._state, left, right))

    def decrypt_block(self, ciphertext_block: bytes) -> bytes:
        left, right = _BLOCK.unpack(check_block(ciphertext_block))
        return _BLOCK.pack(*decrypt_words(self._state, left, right))


def new_cipher(key: bytes) -> Blowfish:
    return Blowfish(key)


def encrypt_block(cipher: Blowfish, block: bytes) -> bytes:
    return cipher.encrypt_block(block)


def decrypt_block(cipher: Blowfish, block: bytes) -> bytes:
    return cipher.decrypt_block(block)
