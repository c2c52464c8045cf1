"""Run the Blowfish evaluation suite and write a report.

Usage:
    python scripts/run_conformance.py                       # full suite
    python scripts/run_conformance.py --skip-sac            # quick check
    python scripts/run_conformance.py --kat-only            # published vectors only

Research / education only. Do NOT use in production.
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

# Ensure project root is on path
_project_root = Path(__file__).parent.parent
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

from blowfishlab.config import load_settings
from blowfishlab.evaluation import EvaluationReport, run_evaluation, run_known_answer_tests, save_report


def _cli_progress(message: str, current: int, total: int) -> None:
    """Print progress to stderr."""
    pct = (current / total * 100) if total > 0 else 0
    print(f"  [{current + 1}/{total}] ({pct:.0f}%) {message}", file=sys.stderr)


def main() -> int:
    parser = argparse.ArgumentParser(
        description="Blowfish conformance and diffusion checks",
    )
    parser.add_argument(
        "--seed", type=int, default=None,
        help="Random seed (default: GLOBAL_SEED or 1337)",
    )
    parser.add_argument(
        "--output-dir", type=str, default=None,
        help="Runs directory (default: RUNS_DIR or runs)",
    )
    parser.add_argument(
        "--sac-trials", type=int, default=None,
        help="SAC trials per input bit (default: SAC_TRIALS or 20)",
    )
    parser.add_argument(
        "--skip-sac", action="store_true",
        help="Skip the per-bit SAC stage",
    )
    parser.add_argument(
        "--kat-only", action="store_true",
        help="Only check the published known-answer vectors",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true",
        help="Enable verbose logging",
    )

    args = parser.parse_args()
    settings = load_settings()

    # Configure logging
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    overrides = {}
    if args.seed is not None:
        overrides["global_seed"] = args.seed
    if args.output_dir is not None:
        overrides["runs_dir"] = args.output_dir
    if args.sac_trials is not None:
        overrides["sac_trials"] = args.sac_trials
    if overrides:
        settings = settings.model_copy(update=overrides)

    if args.kat_only:
        report = EvaluationReport(known_answer=run_known_answer_tests())
    else:
        report = run_evaluation(
            settings, include_sac=not args.skip_sac, progress_callback=_cli_progress,
        )

    print(report.to_summary())

    runs_root = Path(settings.runs_dir)
    if not runs_root.is_absolute():
        runs_root = Path(settings.project_root) / runs_root
    out_dir = save_report(report, str(runs_root))
    print(f"\nAll results saved to: {out_dir}")

    return 0 if report.all_pass else 1


if __name__ == "__main__":
    sys.exit(main())
