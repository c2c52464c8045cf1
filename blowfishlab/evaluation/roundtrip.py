"""Algebraic unit testing: roundtrip verification P = D(E(P, K), K).

Generates randomized test vectors and verifies that decryption perfectly
inverts encryption for every vector.

Research / education only. Do NOT use in production.
"""
from __future__ import annotations

import logging
import random
import time
from dataclasses import dataclass, field, asdict
from typing import Any, Callable, Dict, List, Optional, Sequence

from blowfishlab.cipher.blowfish import new_cipher
from blowfishlab.cipher.cryptanalysis import _rand_bytes
from blowfishlab.cipher.spec import BlowfishSpec
from blowfishlab.cipher.validator import MAX_KEY_BYTES, MIN_KEY_BYTES

logger = logging.getLogger(__name__)


@dataclass
class RoundtripFailure:
    """Details of a single failed roundtrip test vector."""
    vector_index: int
    plaintext_hex: str
    key_hex: str
    ciphertext_hex: str
    decrypted_hex: str       # What decrypt returned (should equal plaintext)
    error: Optional[str]     # Exception message if decrypt/encrypt threw


@dataclass
class RoundtripResult:
    """Aggregate result of roundtrip testing for one key size."""
    algorithm_name: str
    block_size_bits: int
    key_size_bits: int
    rounds: int
    total_vectors: int
    passed: int
    failed: int
    failures: List[RoundtripFailure] = field(default_factory=list)
    elapsed_seconds: float = 0.0
    seed: int = 1337

    @property
    def success_rate(self) -> float:
        return self.passed / self.total_vectors if self.total_vectors > 0 else 0.0

    @property
    def is_perfect(self) -> bool:
        return self.failed == 0

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def summary(self) -> str:
        status = "PASS" if self.is_perfect else "FAIL"
        return (
            f"[{status}] {self.algorithm_name} ({self.key_size_bits}-bit key): "
            f"{self.passed}/{self.total_vectors} vectors passed "
            f"({self.elapsed_seconds:.2f}s)"
        )


def run_roundtrip_tests(
    spec: BlowfishSpec,
    *,
    num_vectors: int = 1000,
    seed: Optional[int] = None,
    max_failures_recorded: int = 10,
    blocks_per_key: int = 4,
) -> RoundtripResult:
    """Run roundtrip verification P = D(E(P, K), K) across many test vectors.

    Args:
        spec: Harness parameters; ``spec.key_size_bits`` sizes the random keys.
        num_vectors: Number of random (plaintext, key) pairs to test.
        seed: Random seed; defaults to ``spec.seed``.
        max_failures_recorded: Maximum number of failure details to keep.
        blocks_per_key: Plaintexts checked per scheduled key. Key expansion
            dominates the cost, so reusing a key for a few blocks keeps the
            run short.

    Returns:
        RoundtripResult with pass/fail counts and failure details.
    """
    seed = spec.seed if seed is None else seed
    key_bytes = spec.key_size_bytes
    block_bytes = spec.block_size_bytes

    rng = random.Random(seed)
    passed = 0
    failed = 0
    failures: List[RoundtripFailure] = []

    start = time.perf_counter()
    cipher = None
    key = b""

    for i in range(num_vectors):
        if i % max(1, blocks_per_key) == 0:
            key = _rand_bytes(rng, key_bytes)
            cipher = None
        pt = _rand_bytes(rng, block_bytes)

        try:
            if cipher is None:
                cipher = new_cipher(key)
            ct = cipher.encrypt_block(pt)
            pt2 = cipher.decrypt_block(ct)

            if pt == pt2:
                passed += 1
            else:
                failed += 1
                if len(failures) < max_failures_recorded:
                    failures.append(RoundtripFailure(
                        vector_index=i,
                        plaintext_hex=pt.hex(),
                        key_hex=key.hex(),
                        ciphertext_hex=ct.hex(),
                        decrypted_hex=pt2.hex(),
                        error=None,
                    ))
        except Exception as exc:
            failed += 1
            if len(failures) < max_failures_recorded:
                failures.append(RoundtripFailure(
                    vector_index=i,
                    plaintext_hex=pt.hex(),
                    key_hex=key.hex(),
                    ciphertext_hex="<error>",
                    decrypted_hex="<error>",
                    error=str(exc),
                ))

    elapsed = time.perf_counter() - start
    if failed:
        logger.warning("%s: %d/%d roundtrip vectors failed", spec.name, failed, num_vectors)

    return RoundtripResult(
        algorithm_name=spec.name,
        block_size_bits=spec.block_size_bits,
        key_size_bits=spec.key_size_bits,
        rounds=spec.rounds,
        total_vectors=num_vectors,
        passed=passed,
        failed=failed,
        failures=failures,
        elapsed_seconds=round(elapsed, 4),
        seed=seed,
    )


def run_all_key_sizes(
    *,
    num_vectors: int = 100,
    seed: int = 1337,
    key_sizes: Optional[Sequence[int]] = None,
    progress_callback: Optional[Callable[[int, int, int], None]] = None,
) -> List[RoundtripResult]:
    """Run roundtrip tests once per key length.

    Args:
        num_vectors: Number of test vectors per key length.
        seed: Random seed for reproducibility.
        key_sizes: Key lengths in bytes; defaults to every valid length.
        progress_callback: Optional callback(key_size_bytes, current_index, total).

    Returns:
        List of RoundtripResult ordered by key size.
    """
    sizes = list(key_sizes) if key_sizes is not None else list(range(MIN_KEY_BYTES, MAX_KEY_BYTES + 1))
    results: List[RoundtripResult] = []

    for idx, n in enumerate(sizes):
        if progress_callback:
            progress_callback(n, idx, len(sizes))

        spec = BlowfishSpec(key_size_bits=n * 8, seed=seed)
        results.append(run_roundtrip_tests(spec, num_vectors=num_vectors, seed=seed + n))

    return sorted(results, key=lambda r: r.key_size_bits)
