"""Blowfish round function and the 16-round Feistel network.

Both transforms only read ``state.p_array`` and ``state.s_boxes``, so they
work on a ``CipherState`` and on the ``WorkingState`` that the key schedule
is still filling in.

Research / education only. Do NOT use in production.
"""
from __future__ import annotations

from typing import Tuple

MASK32 = 0xFFFFFFFF
ROUNDS = 16


def round_function(s_boxes, x: int) -> int:
    """F(x) = ((S0[a] + S1[b]) ^ S2[c]) + S3[d] mod 2^32, with a the high byte."""
    s0, s1, s2, s3 = s_boxes
    a = (x >> 24) & 0xFF
    b = (x >> 16) & 0xFF
    c = (x >> 8) & 0xFF
    d = x & 0xFF
    return ((((s0[a] + s1[b]) & MASK32) ^ s2[c]) + s3[d]) & MASK32


def encrypt_words(state, left: int, right: int) -> Tuple[int, int]:
    p = state.p_array
    s_boxes = state.s_boxes

    for i in range(ROUNDS):
        left ^= p[i]
        right ^= round_function(s_boxes, left)
        left, right = right, left

    # Undo the last swap.
    left, right = right, left
    right ^= p[ROUNDS]
    left ^= p[ROUNDS + 1]
    return left, right


def decrypt_words(state, left: int, right: int) -> Tuple[int, int]:
    p = state.p_array
    s_boxes = state.s_boxes

    for i in range(ROUNDS + 1, 1, -1):
        left ^= p[i]
        right ^= round_function(s_boxes, left)
        left, right = right, left

    left, right = right, left
    right ^= p[1]
    left ^= p[0]
    return left, right
