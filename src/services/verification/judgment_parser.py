"""Judgment parser.

Turns whatever text the AI provider returned into an AIJudgment. Providers
sometimes wrap the JSON answer in prose, so decoding happens in two stages:
the whole text, then the first balanced brace-delimited substring.
"""

import logging

from src.config.constants import PARSING_ERROR_ANALYSIS, JudgmentSource
from src.services.verification.models import AIJudgment, JudgmentPayload, ParsedJudgment
from src.utils.json_parser import JSONParser

logger = logging.getLogger(__name__)

SAFE_DEFAULT_JUDGMENT = AIJudgment(
    is_coach=False,
    confidence=0.0,
    analysis=PARSING_ERROR_ANALYSIS,
    reasons=(),
)


def parse_judgment(raw_text: str) -> ParsedJudgment:
    """
    Parse a raw provider response. Never raises.

    Args:
        raw_text: Message content returned by the provider

    Returns:
        ParsedJudgment tagged with the stage that succeeded
    """
    payload = JSONParser.loads_object(raw_text)
    if payload is not None:
        return ParsedJudgment(_to_judgment(payload), JudgmentSource.DIRECT)

    logger.warning("Provider response is not plain JSON, searching for embedded object")
    candidate = JSONParser.find_balanced_object(raw_text)
    if candidate is not None:
        payload = JSONParser.loads_object(candidate)
        if payload is not None:
            return ParsedJudgment(_to_judgment(payload), JudgmentSource.EXTRACTED)

    logger.error(f"Failed to extract JSON from provider response ({len(raw_text)} characters)")
    return ParsedJudgment(SAFE_DEFAULT_JUDGMENT, JudgmentSource.DEFAULT)


def _to_judgment(payload: dict) -> AIJudgment:
    return JudgmentPayload.model_validate(payload).to_judgment()
