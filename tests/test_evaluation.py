import json
from pathlib import Path

import pytest

from blowfishlab.cipher.spec import BlowfishSpec
from blowfishlab.config import Settings
from blowfishlab.evaluation import (
    SACResult,
    EvaluationReport,
    run_evaluation,
    run_known_answer_tests,
    run_roundtrip_tests,
    save_report,
)
from blowfishlab.utils.repro import read_json


@pytest.fixture
def small_settings(tmp_path):
    return Settings(
        global_seed=42,
        roundtrip_vectors=8,
        avalanche_trials=3,
        sac_trials=1,
        sac_key_size_bits=32,
        runs_dir=str(tmp_path / "runs"),
    )


def test_run_evaluation_small(small_settings):
    stages = []
    report = run_evaluation(
        small_settings,
        key_sizes=(4, 56),
        progress_callback=lambda stage, i, n: stages.append(stage),
    )
    assert stages == ["known_answer", "roundtrip", "avalanche", "sac"]
    assert report.known_answer.is_perfect
    assert [r.key_size_bits for r in report.roundtrip_results] == [32, 448]
    assert report.all_pass
    assert report.failing_key_sizes() == []
    assert [s.input_type for s in report.sac_results] == ["plaintext", "key"]
    assert set(report.avalanche) == {"plaintext", "key"}
    assert report.settings["global_seed"] == 42
    assert "project_root" not in report.settings


def test_run_evaluation_without_sac(small_settings):
    report = run_evaluation(small_settings, key_sizes=(8,), include_sac=False)
    assert report.sac_results == []
    assert report.to_dict()["summary"]["sac_all_pass"] is True


def test_report_serializes_to_json(small_settings, tmp_path):
    report = run_evaluation(small_settings, key_sizes=(16,), include_sac=False)
    d = report.to_dict()
    json.dumps(d)
    assert d["summary"]["known_answer_pass"] is True
    assert d["summary"]["roundtrip_all_pass"] is True

    path = report.save(tmp_path / "out" / "report.json")
    loaded = read_json(path)
    assert loaded["known_answer"]["total_vectors"] == report.known_answer.total_vectors
    assert loaded["timestamp"] == report.timestamp


def test_save_report_writes_run_dir(small_settings):
    report = EvaluationReport(known_answer=run_known_answer_tests())
    run_dir = save_report(report, small_settings.runs_dir, run_name="kat only")
    files = sorted(p.name for p in Path(run_dir).iterdir())
    assert files == ["report.json", "summary.txt"]
    assert run_dir.endswith("_kat_only")


def test_summary_lists_failures():
    spec = BlowfishSpec(key_size_bits=64)
    rt = run_roundtrip_tests(spec, num_vectors=4)
    rt.failed, rt.passed = 1, 3
    report = EvaluationReport(roundtrip_results=[rt])
    text = report.to_summary()
    assert "Roundtrip Tests: 0/1 key sizes pass" in text
    assert "[FAIL]" in text
    assert report.failing_key_sizes() == [64]
    assert not report.all_pass


def test_spec_rejects_bad_sizes():
    with pytest.raises(ValueError):
        BlowfishSpec(key_size_bits=24)
    with pytest.raises(ValueError):
        BlowfishSpec(key_size_bits=456)
    with pytest.raises(ValueError):
        BlowfishSpec(key_size_bits=36)
    with pytest.raises(ValueError):
        BlowfishSpec(rounds=8)
    assert BlowfishSpec(key_size_bits=448).key_size_bytes == 56


def test_summary_flags_weak_sac_inputs():
    good = SACResult("Blowfish", "plaintext", 4, 64, 64, global_mean=0.5, min_bit_prob=0.45, sac_deviation=0.01)
    weak = SACResult("Blowfish", "key", 4, 64, 64, global_mean=0.3, min_bit_prob=0.1, sac_deviation=0.2)
    report = EvaluationReport(sac_results=[good, weak])
    assert report.weak_sac_inputs() == ["key"]
    text = report.to_summary()
    assert "SAC Analysis: 1/2 pass" in text
    assert "Weak diffusion for: key" in text
    assert report.to_dict()["summary"]["sac_all_pass"] is False

    clean = EvaluationReport(sac_results=[good])
    assert clean.weak_sac_inputs() == []
    assert "Weak diffusion" not in clean.to_summary()
