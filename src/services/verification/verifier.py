"""Coach verifier service."""

import asyncio
import logging
import time
from dataclasses import dataclass
from typing import Any

from src.config.constants import VerificationMode, VerificationStep
from src.config.prompts import build_verification_user_input
from src.config.settings import Settings
from src.infrastructure.llm.provider import JudgmentProvider, create_judgment_provider
from src.infrastructure.logging.logger import StructuredLogger
from src.services.verification.aggregator import aggregate_confidence
from src.services.verification.document_classifier import classify_documents
from src.services.verification.fallback import score_without_ai
from src.services.verification.judgment_parser import parse_judgment
from src.services.verification.models import Evidence
from src.services.verification.verification_result import VerificationResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProviderOutcome:
    """Raw provider text, or the error that prevented getting it."""

    text: str | None = None
    error: BaseException | None = None

    @property
    def succeeded(self) -> bool:
        return self.error is None and isinstance(self.text, str)


class CoachVerifier:
    """Decides whether an applicant is a professional coach."""

    def __init__(self, settings: Settings, provider: JudgmentProvider | None = None):
        """Initialize coach verifier."""
        self.settings = settings
        self.provider = provider if provider is not None else create_judgment_provider(settings)
        self._structured = StructuredLogger(__name__)

        if not self.settings.ai_verification_enabled:
            logger.warning("OPENAI_API_KEY not configured. Coach verification will use fallback mode.")
        else:
            logger.info("OpenAI API key configured for coach verification")

    async def __aenter__(self) -> "CoachVerifier":
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.close()

    async def close(self) -> None:
        """Release the provider's HTTP client, if it holds one."""
        close = getattr(self.provider, "close", None)
        if close is not None:
            await close()

    async def verify(self, evidence: Evidence) -> VerificationResult:
        """
        Verify an applicant.

        Uses the AI provider when a credential is configured, otherwise (or
        when the provider call fails) scores the evidence with fixed rules.

        Args:
            evidence: Applicant evidence

        Returns:
            VerificationResult; this method never raises
        """
        if not self.settings.ai_verification_enabled or self.provider is None:
            logger.info("Using fallback verification mode")
            self._structured.log_step(VerificationStep.UNCONFIGURED, {"documents": len(evidence.documents)})
            return self._fallback(evidence, VerificationMode.FALLBACK_UNCONFIGURED)

        prompt = build_verification_user_input(evidence)
        self._structured.log_step(
            VerificationStep.PROMPT,
            {"prompt_length": len(prompt), "documents": len(evidence.documents)},
        )

        outcome = await self._request_judgment(prompt)
        if not outcome.succeeded:
            return self._fallback(evidence, VerificationMode.FALLBACK_PROVIDER_ERROR)

        parsed = parse_judgment(outcome.text)
        self._structured.log_step(
            VerificationStep.PARSING,
            {"source": parsed.source.value, "confidence": parsed.judgment.confidence},
        )

        documents = classify_documents(evidence.documents)
        self._structured.log_step(
            VerificationStep.CLASSIFYING,
            {
                "documents_verified": documents.documents_verified,
                "total_documents": documents.total_documents,
            },
        )

        result = aggregate_confidence(
            parsed.judgment, documents, evidence, judgment_source=parsed.source
        )
        self._structured.log_step(
            VerificationStep.AGGREGATING,
            {"is_coach": result.is_coach, "confidence_score": result.confidence_score},
        )
        return result

    async def _request_judgment(self, prompt: str) -> ProviderOutcome:
        """Call the provider under the configured timeout, capturing any failure."""
        start = time.perf_counter()
        logger.info("Calling AI provider for coach verification...")
        try:
            text = await asyncio.wait_for(
                self.provider.request_judgment(prompt),
                timeout=self.settings.verification_timeout,
            )
        except Exception as e:
            self._structured.log_error(
                VerificationStep.CALLING,
                e,
                {"elapsed_ms": round((time.perf_counter() - start) * 1000, 2)},
            )
            return ProviderOutcome(error=e)

        self._structured.log_step(
            VerificationStep.CALLING,
            {"response_length": len(text) if isinstance(text, str) else 0},
            duration_ms=(time.perf_counter() - start) * 1000,
        )
        return ProviderOutcome(text=text)

    def _fallback(self, evidence: Evidence, mode: VerificationMode) -> VerificationResult:
        result = score_without_ai(evidence, mode=mode)
        self._structured.log_step(
            VerificationStep.FALLBACK,
            {"mode": mode.value, "is_coach": result.is_coach, "confidence_score": result.confidence_score},
        )
        return result
