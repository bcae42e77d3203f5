"""
Constants, enums, and static values.
"""

from enum import Enum


class DocumentCategory(str, Enum):
    """Coarse document categories detected from the reference string."""

    CERTIFICATION = "certification"
    IDENTITY = "identity"
    LICENSE = "license"
    OTHER = "other"


class JudgmentSource(str, Enum):
    """How the AI judgment was decoded from the provider payload."""

    DIRECT = "direct"  # Whole payload was valid JSON
    EXTRACTED = "extracted"  # JSON object recovered from surrounding prose
    DEFAULT = "default"  # Nothing decodable, safe default used


class VerificationMode(str, Enum):
    """Terminal state that produced a verification result."""

    AI_ASSISTED = "ai_assisted"
    FALLBACK_UNCONFIGURED = "fallback_unconfigured"
    FALLBACK_PROVIDER_ERROR = "fallback_provider_error"


class VerificationStep(str, Enum):
    """Verification pipeline steps."""
    UNCONFIGURED = "unconfigured"
    PROMPT = "prompt"
    CALLING = "calling"
    PARSING = "parsing"
    CLASSIFYING = "classifying"
    AGGREGATING = "aggregating"
    FALLBACK = "fallback"


# Keyword sets checked in priority order; first match wins
DOCUMENT_KEYWORDS: tuple[tuple[DocumentCategory, tuple[str, ...]], ...] = (
    (DocumentCategory.CERTIFICATION, ("certification", "cert")),
    (DocumentCategory.IDENTITY, ("id", "identity")),
    (DocumentCategory.LICENSE, ("license", "licence")),
)

COACH_TYPE_KEYWORDS: tuple[str, ...] = ("coach", "trainer")

DECISION_THRESHOLD = 0.5

# AI-assisted weighting (maximum contributions sum to 1.0)
AI_CONFIDENCE_WEIGHT = 0.4
DOCUMENTS_WEIGHT = 0.3
COACH_TYPE_WEIGHT = 0.1
SPECIALIZATION_WEIGHT = 0.1
CERTIFICATIONS_WEIGHT = 0.1

# Rule-only weighting used without AI
FALLBACK_COACH_TYPE_WEIGHT = 0.3
FALLBACK_SPECIALIZATION_WEIGHT = 0.2
FALLBACK_CERTIFICATIONS_WEIGHT = 0.2
FALLBACK_DOCUMENTS_WEIGHT = 0.2
FALLBACK_EXPERIENCE_WEIGHT = 0.1

FALLBACK_ANALYSIS = "Fallback mode (verified without AI assistance)"
PARSING_ERROR_ANALYSIS = "parsing error"
