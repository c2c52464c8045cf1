"""Blowfish key expansion.

1. XOR the P-array with the key, read as big-endian words and repeated
   cyclically.
2. Encrypt a running all-zero block with the partially built state and
   write each result over the next two P-array entries, then over every
   S-box entry pair. That is 9 + 4 * 128 = 521 block encryptions.

Research / education only. Do NOT use in production.
"""
from __future__ import annotations

import logging
from itertools import cycle, islice
from typing import List

from .constants import P_ARRAY_LEN
from .feistel import encrypt_words
from .state import CipherState, WorkingState
from .validator import check_key

logger = logging.getLogger(__name__)


def key_words(key: bytes, count: int = P_ARRAY_LEN) -> List[int]:
    """Read ``count`` big-endian 32-bit words from ``key`` repeated cyclically."""
    stream = cycle(key)
    words: List[int] = []
    for _ in range(count):
        word = 0
        for byte in islice(stream, 4):
            word = (word << 8) | byte
        words.append(word)
    return words


def schedule_key(key: bytes) -> CipherState:
    key = check_key(key)
    state = WorkingState.from_constants()

    for i, word in enumerate(key_words(key)):
        state.p_array[i] ^= word

    left = right = 0
    encryptions = 0

    for i in range(0, P_ARRAY_LEN, 2):
        left, right = encrypt_words(state, left, right)
        state.p_array[i] = left
        state.p_array[i + 1] = right
        encryptions += 1

    for box in state.s_boxes:
        for j in range(0, len(box), 2):
            left, right = encrypt_words(state, left, right)
            box[j] = left
            box[j + 1] = right
            encryptions += 1

    logger.debug("Scheduled %d-byte key (%d block encryptions)", len(key), encryptions)
    return state.freeze()
