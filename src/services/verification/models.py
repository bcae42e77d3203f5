"""Coach verification service models."""

import math
from dataclasses import dataclass, field
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from src.config.constants import COACH_TYPE_KEYWORDS, DocumentCategory, JudgmentSource


def is_blank(value: str | None) -> bool:
    """True for None, empty, or whitespace-only text."""
    return not value or not value.strip()


@dataclass(frozen=True)
class Evidence:
    """Applicant-submitted data driving a verification decision."""

    user_type: str
    full_name: str
    email: str
    about: str
    specialization: str
    years_of_experience: str
    certifications: str
    location: str
    documents: tuple[str, ...] = ()
    note: str | None = None

    def __post_init__(self) -> None:
        # Freeze caller-supplied lists so the evidence cannot change under us
        object.__setattr__(self, "documents", tuple(self.documents))

    @property
    def is_coach_type(self) -> bool:
        """User type mentions coach or trainer."""
        user_type = (self.user_type or "").lower()
        return any(keyword in user_type for keyword in COACH_TYPE_KEYWORDS)


@dataclass(frozen=True)
class DocumentClassification:
    """Per-document categories plus aggregate counters."""

    documents_verified: int
    total_documents: int
    document_types: tuple[DocumentCategory, ...] = ()

    @property
    def is_valid(self) -> bool:
        return self.documents_verified > 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "documentsVerified": self.documents_verified,
            "totalDocuments": self.total_documents,
            "documentTypes": [category.value for category in self.document_types],
            "isValid": self.is_valid,
        }


@dataclass(frozen=True)
class AIJudgment:
    """Structured opinion returned by the AI provider."""

    is_coach: bool = False
    confidence: float = 0.0
    analysis: str = ""
    reasons: tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class ParsedJudgment:
    """Judgment tagged with how it was decoded."""

    judgment: AIJudgment
    source: JudgmentSource

    @property
    def decoded(self) -> bool:
        return self.source is not JudgmentSource.DEFAULT


class JudgmentPayload(BaseModel):
    """Wire shape of the provider's JSON answer.

    Every field is optional; values of the wrong type fall back to the
    field default instead of failing validation.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    is_coach: bool = Field(default=False, alias="isCoach")
    confidence: float = 0.0
    analysis: str = ""
    reasons: list[str] = Field(default_factory=list)

    @field_validator("is_coach", mode="before")
    @classmethod
    def coerce_is_coach(cls, v: Any) -> bool:
        return v if isinstance(v, bool) else False

    @field_validator("confidence", mode="before")
    @classmethod
    def clamp_confidence(cls, v: Any) -> float:
        # bool is an int subclass, reject it explicitly
        if isinstance(v, bool) or not isinstance(v, (int, float)):
            return 0.0
        try:
            value = float(v)
        except OverflowError:
            return 0.0 if v < 0 else 1.0
        if math.isnan(value):
            return 0.0
        return min(1.0, max(0.0, value))

    @field_validator("analysis", mode="before")
    @classmethod
    def coerce_analysis(cls, v: Any) -> str:
        return v if isinstance(v, str) else ""

    @field_validator("reasons", mode="before")
    @classmethod
    def coerce_reasons(cls, v: Any) -> list[str]:
        if not isinstance(v, list):
            return []
        return [reason for reason in v if isinstance(reason, str)]

    def to_judgment(self) -> AIJudgment:
        return AIJudgment(
            is_coach=self.is_coach,
            confidence=self.confidence,
            analysis=self.analysis,
            reasons=tuple(self.reasons),
        )
