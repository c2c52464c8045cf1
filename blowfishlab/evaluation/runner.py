"""Full evaluation suite: known-answer vectors, roundtrip, avalanche and SAC.

Research / education only. Do NOT use in production.
"""
from __future__ import annotations

import logging
import time
from typing import Callable, Optional, Sequence

from blowfishlab.cipher.cryptanalysis import avalanche_key, avalanche_plaintext
from blowfishlab.cipher.spec import BlowfishSpec
from blowfishlab.config import Settings
from blowfishlab.utils.repro import make_run_dir, set_global_seed, write_text

from .avalanche import compute_sac
from .known_answer import run_known_answer_tests
from .report import EvaluationReport
from .roundtrip import run_all_key_sizes

logger = logging.getLogger(__name__)

# Lengths in bytes: minimum, DES-sized, common, maximum.
DEFAULT_ROUNDTRIP_KEY_SIZES = (4, 8, 16, 32, 56)


def run_evaluation(
    settings: Settings,
    *,
    key_sizes: Sequence[int] = DEFAULT_ROUNDTRIP_KEY_SIZES,
    include_sac: bool = True,
    progress_callback: Optional[Callable[[str, int, int], None]] = None,
) -> EvaluationReport:
    """Run the whole suite with sizes taken from ``settings``.

    Args:
        settings: Seed and trial counts.
        key_sizes: Key lengths (bytes) for the roundtrip stage.
        include_sac: Skip the per-bit SAC stage when False; it dominates the
            run time because every key-bit flip re-runs the key schedule.
        progress_callback: Optional callback(stage, current, total).

    Returns:
        EvaluationReport with every stage that ran.
    """
    set_global_seed(settings.global_seed)
    stages = 4 if include_sac else 3
    seed = settings.global_seed

    def _progress(stage: str, idx: int) -> None:
        logger.info("Stage %d/%d: %s", idx + 1, stages, stage)
        if progress_callback:
            progress_callback(stage, idx, stages)

    start = time.perf_counter()

    _progress("known_answer", 0)
    kat = run_known_answer_tests()
    if not kat.is_perfect:
        logger.warning("%d known-answer vectors failed", kat.failed)

    _progress("roundtrip", 1)
    per_size = max(1, settings.roundtrip_vectors // max(1, len(key_sizes)))
    roundtrip = run_all_key_sizes(num_vectors=per_size, seed=seed, key_sizes=key_sizes)

    _progress("avalanche", 2)
    key_bytes = settings.sac_key_size_bits // 8
    avalanche = {
        "plaintext": avalanche_plaintext(
            key_size_bytes=key_bytes, trials=settings.avalanche_trials, seed=seed,
        ),
        "key": avalanche_key(
            key_size_bytes=key_bytes, trials=settings.avalanche_trials, seed=seed,
        ),
    }

    sac_results = []
    if include_sac:
        _progress("sac", 3)
        spec = BlowfishSpec(key_size_bits=settings.sac_key_size_bits, seed=seed)
        for input_type in ("plaintext", "key"):
            sac_results.append(compute_sac(spec, input_type=input_type, trials=settings.sac_trials))

    logger.info("Evaluation finished in %.2fs", time.perf_counter() - start)

    return EvaluationReport(
        known_answer=kat,
        roundtrip_results=roundtrip,
        sac_results=sac_results,
        avalanche=avalanche,
        settings=settings.model_dump(exclude={"project_root"}),
    )


def save_report(report: EvaluationReport, runs_root: str, run_name: str = "blowfish") -> str:
    paths = make_run_dir(runs_root, run_name)
    report.save(paths.report_json)
    write_text(paths.summary_txt, report.to_summary())
    logger.info("Report written to %s", paths.run_dir)
    return str(paths.run_dir)
