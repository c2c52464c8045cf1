"""Deterministic Cryptographic Evaluation Framework.

Provides conformance testing against published vectors, algebraic unit
testing (roundtrip verification) and statistical analysis (avalanche, SAC).

Research / education only. Do NOT use in production.
"""

from .known_answer import KnownAnswerFailure, KnownAnswerResult, run_known_answer_tests
from .roundtrip import RoundtripResult, RoundtripFailure, run_roundtrip_tests, run_all_key_sizes
from .avalanche import SACResult, compute_sac
from .report import EvaluationReport
from .runner import run_evaluation, save_report

__all__ = [
    "KnownAnswerFailure",
    "KnownAnswerResult",
    "run_known_answer_tests",
    "RoundtripResult",
    "RoundtripFailure",
    "run_roundtrip_tests",
    "run_all_key_sizes",
    "SACResult",
    "compute_sac",
    "EvaluationReport",
    "run_evaluation",
    "save_report",
]
