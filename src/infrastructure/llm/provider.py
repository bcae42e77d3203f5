"""AI judgment provider backed by the OpenAI chat completions API."""

import logging
from typing import Protocol

from openai import AsyncOpenAI

from src.config.prompts import build_verification_system_prompt
from src.config.settings import Settings

logger = logging.getLogger(__name__)


class JudgmentProviderError(Exception):
    """Provider answered without usable message content."""


class JudgmentProvider(Protocol):
    """Anything that turns a prompt into raw judgment text."""

    async def request_judgment(self, prompt: str) -> str: ...


class OpenAIJudgmentProvider:
    """Requests a JSON coach/not-coach judgment from an OpenAI chat model."""

    def __init__(self, settings: Settings, client: AsyncOpenAI | None = None):
        self.settings = settings
        # Retries are disabled: a failed call routes to rule-based scoring
        self._client = client or AsyncOpenAI(
            api_key=settings.openai_api_key,
            base_url=settings.openai_base_url,
            timeout=settings.verification_timeout,
            max_retries=0,
        )

    async def request_judgment(self, prompt: str) -> str:
        """
        Send the prompt and return the raw message content.

        Raises:
            JudgmentProviderError: If the response carries no content
            openai.APIError: On transport, timeout or non-2xx failures
        """
        response = await self._client.chat.completions.create(
            model=self.settings.verification_agent_model,
            messages=[
                {"role": "system", "content": build_verification_system_prompt()},
                {"role": "user", "content": prompt},
            ],
            temperature=self.settings.verification_temperature,
            max_tokens=self.settings.verification_max_tokens,
            response_format={"type": "json_object"},
        )

        if not response.choices:
            raise JudgmentProviderError("Provider returned no choices")
        content = response.choices[0].message.content
        if content is None:
            raise JudgmentProviderError("Provider returned an empty message")

        logger.info(f"OpenAI API response received ({len(content)} characters)")
        return content

    async def close(self) -> None:
        await self._client.close()


def create_judgment_provider(settings: Settings) -> JudgmentProvider | None:
    """Build the configured provider, or None when no credential is set."""
    if not settings.ai_verification_enabled:
        return None
    logger.debug(f"Creating OpenAI judgment provider with model: {settings.verification_agent_model}")
    return OpenAIJudgmentProvider(settings)
