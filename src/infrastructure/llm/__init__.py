"""LLM infrastructure module."""

from src.infrastructure.llm.provider import (
    JudgmentProvider,
    JudgmentProviderError,
    OpenAIJudgmentProvider,
    create_judgment_provider,
)

__all__ = [
    "JudgmentProvider",
    "JudgmentProviderError",
    "OpenAIJudgmentProvider",
    "create_judgment_provider",
]
