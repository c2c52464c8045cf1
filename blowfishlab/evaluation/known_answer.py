"""Conformance testing against published known-answer vectors.

Each vector is checked in both directions: E(P, K) must equal the published
ciphertext and D(C, K) must give back the plaintext.

Research / education only. Do NOT use in production.
"""
from __future__ import annotations

import logging
import time
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional, Sequence

from blowfishlab.cipher.blowfish import new_cipher
from blowfishlab.cipher.spec import KnownAnswerVector
from blowfishlab.cipher.vectors import all_vectors

logger = logging.getLogger(__name__)


@dataclass
class KnownAnswerFailure:
    """Details of one vector that did not reproduce."""
    vector_index: int
    source: str
    key_hex: str
    plaintext_hex: str
    expected_hex: str
    got_hex: str             # What encrypt returned
    decrypted_hex: str       # What decrypt of the expected ciphertext returned
    error: Optional[str]


@dataclass
class KnownAnswerResult:
    total_vectors: int
    passed: int
    failed: int
    failures: List[KnownAnswerFailure] = field(default_factory=list)
    elapsed_seconds: float = 0.0

    @property
    def is_perfect(self) -> bool:
        return self.failed == 0

    def to_dict(self) -> Dict[str, Any]:
        d = asdict(self)
        d["is_perfect"] = self.is_perfect
        return d

    def summary(self) -> str:
        status = "PASS" if self.is_perfect else "FAIL"
        return (
            f"[{status}] Known-answer: {self.passed}/{self.total_vectors} vectors passed "
            f"({self.elapsed_seconds:.2f}s)"
        )


def run_known_answer_tests(
    vectors: Optional[Sequence[KnownAnswerVector]] = None,
    *,
    max_failures_recorded: int = 10,
) -> KnownAnswerResult:
    vectors = list(vectors) if vectors is not None else all_vectors()
    passed = 0
    failed = 0
    failures: List[KnownAnswerFailure] = []

    start = time.perf_counter()

    for i, vec in enumerate(vectors):
        got = b""
        back = b""
        error: Optional[str] = None
        try:
            cipher = new_cipher(vec.key_bytes)
            got = cipher.encrypt_block(vec.plaintext_bytes)
            back = cipher.decrypt_block(vec.ciphertext_bytes)
            ok = got == vec.ciphertext_bytes and back == vec.plaintext_bytes
        except Exception as exc:
            ok = False
            error = str(exc)

        if ok:
            passed += 1
            continue

        failed += 1
        logger.warning("Known-answer vector %d (%s) failed", i, vec.source)
        if len(failures) < max_failures_recorded:
            failures.append(KnownAnswerFailure(
                vector_index=i,
                source=vec.source,
                key_hex=vec.key,
                plaintext_hex=vec.plaintext,
                expected_hex=vec.ciphertext,
                got_hex=got.hex() if got else "<error>",
                decrypted_hex=back.hex() if back else "<error>",
                error=error,
            ))

    elapsed = time.perf_counter() - start

    return KnownAnswerResult(
        total_vectors=len(vectors),
        passed=passed,
        failed=failed,
        failures=failures,
        elapsed_seconds=round(elapsed, 4),
    )
