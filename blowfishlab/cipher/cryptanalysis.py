from __future__ import annotations

import random
from typing import Callable, Dict

from .blowfish import Blowfish, new_cipher

CipherFactory = Callable[[bytes], Blowfish]


def _hamming_distance_bytes(a: bytes, b: bytes) -> int:
    if len(a) != len(b):
        raise ValueError("hamming distance length mismatch")
    dist = 0
    for x, y in zip(a, b):
        dist += (x ^ y).bit_count()
    return dist


def _flip_bit(data: bytes, bit_index: int) -> bytes:
    byte_i = bit_index // 8
    bit_i = bit_index % 8
    if byte_i < 0 or byte_i >= len(data):
        raise IndexError("bit_index out of range")
    mask = 1 << bit_i
    out = bytearray(data)
    out[byte_i] ^= mask
    return bytes(out)


def _rand_bytes(rng: random.Random, n: int) -> bytes:
    return bytes(rng.randrange(0, 256) for _ in range(n))


def avalanche_plaintext(
    *,
    key_size_bytes: int,
    block_size_bytes: int = 8,
    trials: int = 200,
    flips_per_trial: int = 1,
    seed: int = 1337,
    cipher_factory: CipherFactory = new_cipher,
) -> Dict[str, float]:
    rng = random.Random(seed)
    total_frac = 0.0
    total_bits = block_size_bytes * 8
    for _ in range(trials):
        cipher = cipher_factory(_rand_bytes(rng, key_size_bytes))
        pt = _rand_bytes(rng, block_size_bytes)
        ct = cipher.encrypt_block(pt)
        for _ in range(flips_per_trial):
            bit = rng.randrange(0, total_bits)
            ct2 = cipher.encrypt_block(_flip_bit(pt, bit))
            total_frac += _hamming_distance_bytes(ct, ct2) / total_bits
    denom = trials * flips_per_trial
    return {
        "mean": total_frac / denom if denom else 0.0,
    }


def avalanche_key(
    *,
    key_size_bytes: int,
    block_size_bytes: int = 8,
    trials: int = 200,
    flips_per_trial: int = 1,
    seed: int = 1337,
    cipher_factory: CipherFactory = new_cipher,
) -> Dict[str, float]:
    """Mean flipped-bit fraction and count of unchanged ciphertexts under one-bit key flips.

    Every flip re-runs the key schedule, so this is far slower than
    ``avalanche_plaintext`` for the same ``trials``.
    """
    rng = random.Random(seed + 1)
    total_frac = 0.0
    unchanged = 0
    total_bits = block_size_bytes * 8
    key_bits = key_size_bytes * 8
    for _ in range(trials):
        key = _rand_bytes(rng, key_size_bytes)
        pt = _rand_bytes(rng, block_size_bytes)
        ct = cipher_factory(key).encrypt_block(pt)
        for _ in range(flips_per_trial):
            bit = rng.randrange(0, key_bits)
            ct2 = cipher_factory(_flip_bit(key, bit)).encrypt_block(pt)
            if ct2 == ct:
                unchanged += 1
            total_frac += _hamming_distance_bytes(ct, ct2) / total_bits
    denom = trials * flips_per_trial
    return {
        "mean": total_frac / denom if denom else 0.0,
        "unchanged": float(unchanged),
    }


def score_avalanche(mean: float) -> float:
    # 1.0 is perfect (0.5), 0.0 is terrible (0 or 1)
    return max(0.0, 1.0 - abs(mean - 0.5) / 0.5)
