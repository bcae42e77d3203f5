"""Evaluation configuration."""

import argparse
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path

DEFAULT_DATASET = Path(__file__).parent / "data" / "applicants.csv"
DEFAULT_RESULTS_DIR = Path(__file__).parent / "results"


@dataclass
class EvalConfig:
    """Configuration for evaluation runs."""

    data_path: Path = DEFAULT_DATASET
    results_dir: Path = DEFAULT_RESULTS_DIR
    output: Path | None = None

    # Offline runs score with the fallback rules and never wait between cases
    delay_between_cases: float = 1.0
    offline: bool = False
    sample_size: int | None = None

    run_id: str = field(default_factory=lambda: datetime.now().strftime("%Y%m%d_%H%M%S"))

    def __post_init__(self) -> None:
        if self.delay_between_cases < 0:
            raise ValueError("delay_between_cases must be >= 0")
        if self.sample_size is not None and self.sample_size <= 0:
            raise ValueError("sample_size must be a positive number of cases")
        if self.data_path.suffix.lower() != ".csv":
            raise ValueError(f"Applicants dataset must be a CSV file: {self.data_path}")

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "EvalConfig":
        """Build a config from the evaluation command line."""
        return cls(
            data_path=Path(args.data) if args.data else DEFAULT_DATASET,
            output=Path(args.output) if args.output else None,
            delay_between_cases=args.delay,
            offline=args.offline,
            sample_size=args.sample,
        )

    @property
    def output_path(self) -> Path:
        """Explicit output path, or a per-run file under results_dir."""
        if self.output is not None:
            return self.output
        return self.results_dir / f"{self.run_id}_results.json"
