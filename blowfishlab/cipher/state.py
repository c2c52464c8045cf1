"""Per-key cipher state: the P-array and four S-boxes.

``WorkingState`` holds mutable copies of the constant tables while the key
schedule rewrites them. ``freeze()`` turns it into a ``CipherState`` that
block transforms read from and nothing writes to.
"""
from __future__ import annotations

import hashlib
import struct
from dataclasses import dataclass
from typing import List, Tuple

from .constants import P_ARRAY, P_ARRAY_LEN, S_BOXES, SBOX_LEN


@dataclass
class WorkingState:
    p_array: List[int]
    s_boxes: List[List[int]]

    @classmethod
    def from_constants(cls) -> "WorkingState":
        return cls(
            p_array=list(P_ARRAY),
            s_boxes=[list(box) for box in S_BOXES],
        )

    def freeze(self) -> "CipherState":
        return CipherState(
            p_array=tuple(self.p_array),
            s_boxes=tuple(tuple(box) for box in self.s_boxes),
        )


@dataclass(frozen=True)
class CipherState:
    p_array: Tuple[int, ...]
    s_boxes: Tuple[Tuple[int, ...], ...]

    def __post_init__(self):
        if len(self.p_array) != P_ARRAY_LEN:
            raise ValueError(f"P-array must have {P_ARRAY_LEN} words")
        if len(self.s_boxes) != 4 or any(len(box) != SBOX_LEN for box in self.s_boxes):
            raise ValueError(f"Expected 4 S-boxes of {SBOX_LEN} words")

    def __repr__(self) -> str:
        # Subkeys are key material.
        return f"CipherState(fingerprint={self.fingerprint()[:16]}...)"

    def to_bytes(self) -> bytes:
        words = list(self.p_array)
        for box in self.s_boxes:
            words.extend(box)
        return struct.pack(f">{len(words)}I", *words)

    def fingerprint(self) -> str:
        return hashlib.sha256(self.to_bytes()).hexdigest()
