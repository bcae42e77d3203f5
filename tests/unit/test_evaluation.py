"""Tests for the offline evaluation harness."""

import argparse
from pathlib import Path

import pytest

from evaluation.config import EvalConfig
from evaluation.loader import load_cases, sample_cases
from evaluation.run import run_evaluation, summarize

DATASET = Path(__file__).parents[2] / "evaluation" / "data" / "applicants.csv"


def test_load_cases_parses_documents():
    """Test documents are split on semicolons and labels parsed."""
    cases = load_cases(DATASET)

    first = cases[0]
    assert first.evidence.full_name == "John Doe"
    assert first.evidence.documents == (
        "https://cdn.example.com/cert.pdf",
        "https://cdn.example.com/id.jpg",
    )
    assert first.evidence.note is None
    assert first.expected_is_coach is True
    assert any(not case.expected_is_coach for case in cases)


def test_load_cases_missing_file(tmp_path):
    """Test a missing dataset raises."""
    with pytest.raises(FileNotFoundError):
        load_cases(tmp_path / "missing.csv")


def test_sample_cases_balances_labels():
    """Test sampling keeps both coaches and non-coaches."""
    sampled = sample_cases(load_cases(DATASET), n=2)
    assert {case.expected_is_coach for case in sampled} == {True, False}


def test_summarize():
    """Test accuracy and mode counts."""
    results = [
        {"expected_is_coach": True, "predicted_is_coach": True, "mode": "ai_assisted", "error": None},
        {"expected_is_coach": False, "predicted_is_coach": True, "mode": "ai_assisted", "error": None},
    ]
    summary = summarize(results)
    assert summary["accuracy"] == 0.5
    assert summary["modes"] == {"ai_assisted": 2}


@pytest.mark.asyncio
async def test_offline_evaluation(tmp_path):
    """Test an offline run scores every case with the fallback scorer."""
    config = EvalConfig(data_path=DATASET, results_dir=tmp_path, offline=True)

    output = await run_evaluation(config)

    assert output["summary"]["total_cases"] == 6
    assert output["summary"]["modes"] == {"fallback_unconfigured": 6}
    assert output["summary"]["accuracy"] == 1.0


def test_config_from_args(tmp_path):
    """Test command-line options map onto the config."""
    args = argparse.Namespace(
        data=str(DATASET), output=str(tmp_path / "out.json"), delay=0.5, offline=True, sample=2
    )

    config = EvalConfig.from_args(args)

    assert config.data_path == DATASET
    assert config.output_path == tmp_path / "out.json"
    assert config.offline is True
    assert config.sample_size == 2


def test_config_default_output_uses_run_id(tmp_path):
    """Test results default to a per-run file under results_dir."""
    config = EvalConfig(results_dir=tmp_path, run_id="20240101_000000")
    assert config.output_path == tmp_path / "20240101_000000_results.json"
    assert not (tmp_path / "20240101_000000_results.json").exists()


@pytest.mark.parametrize(
    "kwargs",
    [{"delay_between_cases": -1.0}, {"sample_size": 0}, {"data_path": Path("applicants.json")}],
)
def test_config_rejects_invalid_values(kwargs):
    """Test invalid evaluation settings are rejected at construction."""
    with pytest.raises(ValueError):
        EvalConfig(**kwargs)
