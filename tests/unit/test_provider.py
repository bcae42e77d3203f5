"""Tests for the OpenAI judgment provider."""

from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest

from src.infrastructure.llm.provider import (
    JudgmentProviderError,
    OpenAIJudgmentProvider,
    create_judgment_provider,
)


def _client(content="{}", choices=None):
    if choices is None:
        choices = [SimpleNamespace(message=SimpleNamespace(content=content))]
    client = MagicMock()
    client.chat.completions.create = AsyncMock(return_value=SimpleNamespace(choices=choices))
    client.close = AsyncMock()
    return client


@pytest.mark.asyncio
async def test_request_judgment_returns_content(settings):
    """Test the message content is returned verbatim."""
    client = _client(content='{"isCoach": true}')
    provider = OpenAIJudgmentProvider(settings, client=client)

    assert await provider.request_judgment("prompt") == '{"isCoach": true}'


@pytest.mark.asyncio
async def test_request_judgment_sends_fixed_request_shape(settings):
    """Test model, system instruction, temperature and output cap."""
    client = _client()
    provider = OpenAIJudgmentProvider(settings, client=client)

    await provider.request_judgment("describe the applicant")

    kwargs = client.chat.completions.create.await_args.kwargs
    assert kwargs["model"] == "gpt-3.5-turbo"
    assert kwargs["temperature"] == 0.3
    assert kwargs["max_tokens"] == 1000
    assert kwargs["response_format"] == {"type": "json_object"}
    assert kwargs["messages"][0]["role"] == "system"
    assert "JSON" in kwargs["messages"][0]["content"]
    assert kwargs["messages"][1] == {"role": "user", "content": "describe the applicant"}


@pytest.mark.asyncio
async def test_request_judgment_without_content_raises(settings):
    """Test an empty message is reported as a provider error."""
    provider = OpenAIJudgmentProvider(settings, client=_client(content=None))

    with pytest.raises(JudgmentProviderError):
        await provider.request_judgment("prompt")


@pytest.mark.asyncio
async def test_request_judgment_without_choices_raises(settings):
    """Test a response with no choices is reported as a provider error."""
    provider = OpenAIJudgmentProvider(settings, client=_client(choices=[]))

    with pytest.raises(JudgmentProviderError):
        await provider.request_judgment("prompt")


@pytest.mark.asyncio
async def test_close_closes_client(settings):
    """Test closing the provider closes the HTTP client."""
    client = _client()
    await OpenAIJudgmentProvider(settings, client=client).close()
    client.close.assert_awaited_once()


def test_create_judgment_provider_unconfigured(unconfigured_settings):
    """Test no provider is built without a credential."""
    assert create_judgment_provider(unconfigured_settings) is None


def test_create_judgment_provider_configured(settings):
    """Test an OpenAI provider is built when a credential is set."""
    provider = create_judgment_provider(settings)
    assert isinstance(provider, OpenAIJudgmentProvider)
