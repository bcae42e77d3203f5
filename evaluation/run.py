"""Main evaluation script - generates JSON results."""

import argparse
import asyncio
import json
import logging
import sys
from collections import Counter
from datetime import datetime
from pathlib import Path
from typing import Any

sys.path.insert(0, str(Path(__file__).parent.parent))

from evaluation.config import EvalConfig
from evaluation.executor import Executor
from evaluation.loader import Case, load_cases, sample_cases
from src.infrastructure.logging.logger import setup_logging

logger = logging.getLogger(__name__)


async def evaluate_case(executor: Executor, case: Case) -> dict[str, Any]:
    """Evaluate a single applicant."""
    logger.info(f"[{case.id}] {case.evidence.full_name} ({case.evidence.user_type})")

    predicted = await executor.run_verification(case.evidence)

    return {
        "id": case.id,
        "full_name": case.evidence.full_name,
        "expected_is_coach": case.expected_is_coach,
        "predicted_is_coach": predicted.get("isCoach"),
        "confidence_score": predicted.get("confidenceScore"),
        "mode": predicted.get("mode"),
        "reasons": predicted.get("verificationReasons", []),
        "error": predicted.get("error"),
    }


def summarize(results: list[dict[str, Any]]) -> dict[str, Any]:
    """Compute accuracy and mode counts over evaluated cases."""
    scored = [r for r in results if r.get("error") is None]
    correct = sum(1 for r in scored if r["predicted_is_coach"] == r["expected_is_coach"])

    return {
        "total_cases": len(results),
        "scored_cases": len(scored),
        "accuracy": round(correct / len(scored), 4) if scored else None,
        "modes": dict(Counter(r["mode"] for r in scored)),
    }


async def run_evaluation(config: EvalConfig) -> dict[str, Any]:
    """Run evaluation and return results."""
    cases = load_cases(config.data_path)

    if config.sample_size:
        cases = sample_cases(cases, n=config.sample_size)
        logger.info(f"Sampled {len(cases)} cases")

    results: list[dict[str, Any]] = []
    async with Executor(offline=config.offline) as executor:
        for i, case in enumerate(cases):
            results.append(await evaluate_case(executor, case))
            logger.info(f"[{i + 1}/{len(cases)}] Done")

            if not config.offline and i < len(cases) - 1:
                await asyncio.sleep(config.delay_between_cases)

    return {
        "metadata": {
            "timestamp": datetime.now().isoformat(),
            "dataset": config.data_path.name,
            "offline": config.offline,
            "run_id": config.run_id,
        },
        "summary": summarize(results),
        "results": results,
    }


async def main() -> None:
    parser = argparse.ArgumentParser(description="Run coach verification evaluation")
    parser.add_argument("--sample", type=int, help="Number of cases to sample")
    parser.add_argument("--delay", type=float, default=1.0, help="Delay between AI calls")
    parser.add_argument("--offline", action="store_true", help="Score without the AI provider")
    parser.add_argument("--data", type=str, help="Path to applicants CSV")
    parser.add_argument("--output", type=str, help="Output JSON path")
    args = parser.parse_args()

    setup_logging(level="INFO", json_output=False)

    config = EvalConfig.from_args(args)
    output = await run_evaluation(config)

    output_path = config.output_path
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(output, f, indent=2, ensure_ascii=False, default=str)

    logger.info(f"Results saved to {output_path}")


if __name__ == "__main__":
    asyncio.run(main())
