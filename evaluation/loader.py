"""Dataset loader for labelled applicant cases."""

import csv
import logging
from dataclasses import dataclass
from pathlib import Path

from src.services.verification.models import Evidence

logger = logging.getLogger(__name__)

_TRUE_VALUES = {"1", "true", "yes", "y"}


@dataclass
class Case:
    """A single labelled applicant."""

    id: int
    evidence: Evidence
    expected_is_coach: bool


def _parse_documents(raw: str) -> tuple[str, ...]:
    return tuple(doc.strip() for doc in raw.split(";") if doc.strip())


def load_cases(path: Path) -> list[Case]:
    """Load applicant cases from CSV file."""
    if not path.exists():
        raise FileNotFoundError(f"Dataset not found: {path}")

    cases = []

    with open(path, encoding="utf-8-sig") as f:
        reader = csv.DictReader(f)

        for idx, row in enumerate(reader):
            evidence = Evidence(
                user_type=row.get("user_type", "").strip(),
                full_name=row.get("full_name", "").strip(),
                email=row.get("email", "").strip(),
                about=row.get("about", "").strip(),
                specialization=row.get("specialization", "").strip(),
                years_of_experience=row.get("years_of_experience", "").strip(),
                certifications=row.get("certifications", "").strip(),
                location=row.get("location", "").strip(),
                documents=_parse_documents(row.get("documents", "")),
                note=row.get("note", "").strip() or None,
            )
            expected = row.get("expected_is_coach", "").strip().lower() in _TRUE_VALUES

            if evidence.full_name:
                cases.append(Case(id=idx, evidence=evidence, expected_is_coach=expected))

    logger.info(f"Loaded {len(cases)} cases from {path}")
    return cases


def sample_cases(cases: list[Case], n: int = 10) -> list[Case]:
    """Sample n cases, balanced between coaches and non-coaches."""
    if n >= len(cases):
        return cases

    groups: dict[bool, list[Case]] = {}
    for case in cases:
        groups.setdefault(case.expected_is_coach, []).append(case)

    samples_per_group = max(1, n // len(groups))
    sampled: list[Case] = []

    for group_cases in groups.values():
        sampled.extend(group_cases[:samples_per_group])

    return sampled[:n]
