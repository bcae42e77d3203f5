"""Confidence aggregator for AI-assisted verification."""

import math

from src.config.constants import (
    AI_CONFIDENCE_WEIGHT,
    CERTIFICATIONS_WEIGHT,
    COACH_TYPE_WEIGHT,
    DECISION_THRESHOLD,
    DOCUMENTS_WEIGHT,
    SPECIALIZATION_WEIGHT,
    JudgmentSource,
    VerificationMode,
)
from src.services.verification.models import (
    AIJudgment,
    DocumentClassification,
    Evidence,
    is_blank,
)
from src.services.verification.verification_result import VerificationResult


def clamp_score(score: float) -> float:
    """Bound a score to [0.0, 1.0]."""
    return min(1.0, max(0.0, score))


def calculate_confidence_score(
    judgment: AIJudgment,
    documents: DocumentClassification,
    evidence: Evidence,
) -> float:
    """Weighted sum of AI confidence, documents and form data."""
    contributions = [judgment.confidence * AI_CONFIDENCE_WEIGHT]

    if documents.is_valid:
        contributions.append(DOCUMENTS_WEIGHT)

    if evidence.is_coach_type:
        contributions.append(COACH_TYPE_WEIGHT)
    if not is_blank(evidence.specialization):
        contributions.append(SPECIALIZATION_WEIGHT)
    if not is_blank(evidence.certifications):
        contributions.append(CERTIFICATIONS_WEIGHT)

    # fsum keeps 0.4 + 0.3 + 3 * 0.1 at exactly 1.0
    return clamp_score(math.fsum(contributions))


def build_verification_reasons(
    judgment: AIJudgment,
    documents: DocumentClassification,
    evidence: Evidence,
) -> list[str]:
    """AI reasons first, then document and form-data reasons."""
    reasons = list(judgment.reasons)

    if documents.is_valid:
        reasons.append(f"{documents.documents_verified} verification document(s) provided")
    if not is_blank(evidence.specialization):
        reasons.append(f"Specialization: {evidence.specialization.strip()}")
    if not is_blank(evidence.certifications):
        reasons.append("Certifications mentioned")
    if not is_blank(evidence.years_of_experience):
        reasons.append(f"Experience: {evidence.years_of_experience.strip()} years")

    return reasons


def aggregate_confidence(
    judgment: AIJudgment,
    documents: DocumentClassification,
    evidence: Evidence,
    judgment_source: JudgmentSource | None = None,
) -> VerificationResult:
    """
    Combine the AI judgment, document classification and evidence.

    Args:
        judgment: Parsed AI judgment
        documents: Classification of the submitted documents
        evidence: Applicant evidence
        judgment_source: How the judgment was decoded, for provenance

    Returns:
        AI-assisted VerificationResult
    """
    score = calculate_confidence_score(judgment, documents, evidence)

    return VerificationResult(
        is_coach=score >= DECISION_THRESHOLD,
        confidence_score=score,
        reasons=tuple(build_verification_reasons(judgment, documents, evidence)),
        analysis=judgment.analysis,
        document_analysis=documents,
        mode=VerificationMode.AI_ASSISTED,
        judgment_source=judgment_source,
    )
