"""Rule-based scorer used when the AI provider is unconfigured or fails."""

import math

from src.config.constants import (
    DECISION_THRESHOLD,
    FALLBACK_ANALYSIS,
    FALLBACK_CERTIFICATIONS_WEIGHT,
    FALLBACK_COACH_TYPE_WEIGHT,
    FALLBACK_DOCUMENTS_WEIGHT,
    FALLBACK_EXPERIENCE_WEIGHT,
    FALLBACK_SPECIALIZATION_WEIGHT,
    VerificationMode,
)
from src.services.verification.aggregator import clamp_score
from src.services.verification.models import DocumentClassification, Evidence, is_blank
from src.services.verification.verification_result import VerificationResult


def score_without_ai(
    evidence: Evidence,
    mode: VerificationMode = VerificationMode.FALLBACK_UNCONFIGURED,
) -> VerificationResult:
    """
    Score evidence with fixed rules only. Pure and never raises.

    Documents are counted but not typed: every submitted document counts
    as verified.
    """
    contributions: list[float] = []
    reasons: list[str] = []
    document_count = len(evidence.documents)

    if evidence.is_coach_type:
        contributions.append(FALLBACK_COACH_TYPE_WEIGHT)
        reasons.append("User type: Coach/Trainer")
    if not is_blank(evidence.specialization):
        contributions.append(FALLBACK_SPECIALIZATION_WEIGHT)
        reasons.append(f"Specialization: {evidence.specialization.strip()}")
    if not is_blank(evidence.certifications):
        contributions.append(FALLBACK_CERTIFICATIONS_WEIGHT)
        reasons.append("Certifications mentioned")
    if document_count > 0:
        contributions.append(FALLBACK_DOCUMENTS_WEIGHT)
        reasons.append(f"{document_count} document(s) provided")
    if not is_blank(evidence.years_of_experience):
        contributions.append(FALLBACK_EXPERIENCE_WEIGHT)
        reasons.append(f"Experience: {evidence.years_of_experience.strip()} years")

    score = clamp_score(math.fsum(contributions))

    return VerificationResult(
        is_coach=score >= DECISION_THRESHOLD,
        confidence_score=score,
        reasons=tuple(reasons),
        analysis=FALLBACK_ANALYSIS,
        document_analysis=DocumentClassification(
            documents_verified=document_count,
            total_documents=document_count,
        ),
        mode=mode,
    )
