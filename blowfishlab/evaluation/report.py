"""Structured evaluation report builder.

Aggregates results from known-answer tests, roundtrip tests, avalanche
measurements and SAC analysis into a single serializable report.

Research / education only. Do NOT use in production.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional

from blowfishlab.utils.repro import write_json

from .avalanche import SACResult
from .known_answer import KnownAnswerResult
from .roundtrip import RoundtripResult


@dataclass
class EvaluationReport:
    """Complete evaluation report aggregating all analysis results."""
    timestamp: str = ""
    known_answer: Optional[KnownAnswerResult] = None
    roundtrip_results: List[RoundtripResult] = field(default_factory=list)
    sac_results: List[SACResult] = field(default_factory=list)
    avalanche: Optional[Dict[str, Any]] = None
    settings: Optional[Dict[str, Any]] = None

    def __post_init__(self):
        if not self.timestamp:
            self.timestamp = datetime.now(timezone.utc).isoformat()

    @property
    def all_pass(self) -> bool:
        kat_ok = self.known_answer is None or self.known_answer.is_perfect
        return kat_ok and not self.failing_key_sizes()

    def to_dict(self) -> Dict[str, Any]:
        """Serialize full report for JSON export."""
        return {
            "timestamp": self.timestamp,
            "settings": self.settings,
            "known_answer": self.known_answer.to_dict() if self.known_answer else None,
            "roundtrip": [r.to_dict() for r in self.roundtrip_results],
            "sac": [s.to_dict() for s in self.sac_results],
            "avalanche": self.avalanche,
            "summary": {
                "known_answer_pass": self.known_answer.is_perfect if self.known_answer else None,
                "roundtrip_all_pass": all(r.is_perfect for r in self.roundtrip_results),
                "sac_all_pass": all(s.passes_sac for s in self.sac_results),
                "failing_key_sizes": self.failing_key_sizes(),
            },
        }

    def to_summary(self) -> str:
        lines = [f"Evaluation Report - {self.timestamp}", "=" * 50]

        if self.known_answer:
            lines.append(f"\n{self.known_answer.summary()}")
            for f in self.known_answer.failures:
                lines.append(f"  #{f.vector_index} {f.source}: expected {f.expected_hex}, got {f.got_hex}")

        if self.roundtrip_results:
            rt_pass = sum(1 for r in self.roundtrip_results if r.is_perfect)
            lines.append(f"\nRoundtrip Tests: {rt_pass}/{len(self.roundtrip_results)} key sizes pass")
            for r in self.roundtrip_results:
                if not r.is_perfect:
                    lines.append(f"  {r.summary()}")

        if self.avalanche:
            pt = self.avalanche.get("plaintext", {}).get("mean", 0.0)
            kk = self.avalanche.get("key", {}).get("mean", 0.0)
            lines.append(f"\nAvalanche: plaintext={pt:.4f}, key={kk:.4f}")

        if self.sac_results:
            sac_pass = sum(1 for s in self.sac_results if s.passes_sac)
            lines.append(f"\nSAC Analysis: {sac_pass}/{len(self.sac_results)} pass")
            for s in self.sac_results:
                lines.append(f"  {s.summary()}")
            weak = self.weak_sac_inputs()
            if weak:
                lines.append(f"  Weak diffusion for: {', '.join(weak)}")

        return "\n".join(lines)

    def failing_key_sizes(self) -> List[int]:
        """Return key sizes (bits) with roundtrip failures."""
        return [r.key_size_bits for r in self.roundtrip_results if not r.is_perfect]

    def weak_sac_inputs(self) -> List[str]:
        return [s.input_type for s in self.sac_results if not s.passes_sac]

    def save(self, path: str | Path) -> Path:
        path = Path(path)
        write_json(path, self.to_dict())
        return path
