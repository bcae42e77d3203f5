"""Verification result model."""

from dataclasses import dataclass, field
from typing import Any

from src.config.constants import JudgmentSource, VerificationMode
from src.services.verification.models import DocumentClassification


@dataclass(frozen=True)
class VerificationResult:
    """Final coach verification decision."""

    is_coach: bool
    confidence_score: float
    reasons: tuple[str, ...] = field(default_factory=tuple)
    analysis: str | None = None
    document_analysis: DocumentClassification | None = None
    mode: VerificationMode = VerificationMode.AI_ASSISTED
    judgment_source: JudgmentSource | None = None

    @property
    def is_fallback(self) -> bool:
        return self.mode is not VerificationMode.AI_ASSISTED

    def to_dict(self) -> dict[str, Any]:
        """Convert to the API response shape."""
        return {
            "isCoach": self.is_coach,
            "confidenceScore": self.confidence_score,
            "verificationReasons": list(self.reasons),
            "aiAnalysis": self.analysis,
            "documentAnalysis": (
                self.document_analysis.to_dict() if self.document_analysis else None
            ),
            "mode": self.mode.value,
        }
