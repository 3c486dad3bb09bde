"""Unit tests for the Workers AI chat provider."""

import httpx
import pytest

from ailyze.errors import InferenceError
from ailyze.llm.providers.workers_ai import WorkersAILLMProvider
from ailyze.workers_ai import WorkersAI

MESSAGES = [{"role": "user", "content": "hi"}]


def _provider(fake, **kwargs) -> WorkersAILLMProvider:
    return WorkersAILLMProvider(
        WorkersAI(api_key="k", account_id="a", transport=fake.transport), **kwargs
    )


@pytest.mark.unit
class TestWorkersAILLMProvider:
    def test_default_model(self, fake_ai, text_response):
        fake = fake_ai(lambda request: text_response("x"))
        assert _provider(fake).default_model == "@cf/meta/llama-2-7b-chat-int8"

    @pytest.mark.asyncio
    async def test_chat(self, fake_ai, text_response):
        fake = fake_ai(lambda request: text_response("Hello there!"))
        result = await _provider(fake).chat(MESSAGES)

        assert result.content == "Hello there!"
        assert result.provider == "workers_ai"
        assert result.model == "@cf/meta/llama-2-7b-chat-int8"
        assert fake.last_json == {"messages": MESSAGES}
        assert fake.requests[0].url.path.endswith("/ai/run/@cf/meta/llama-2-7b-chat-int8")

    @pytest.mark.asyncio
    async def test_model_override_and_extra(self, fake_ai, text_response):
        fake = fake_ai(lambda request: text_response("ok"))
        result = await _provider(fake).chat(MESSAGES, model="@cf/other", max_tokens=64)
        assert result.model == "@cf/other"
        assert fake.last_json == {"messages": MESSAGES, "max_tokens": 64}
        assert fake.requests[0].url.path.endswith("/ai/run/@cf/other")

    @pytest.mark.asyncio
    async def test_usage(self, fake_ai):
        fake = fake_ai(
            lambda request: httpx.Response(
                200,
                json={
                    "result": {"response": "ok", "usage": {"total_tokens": 12}},
                    "success": True,
                },
            )
        )
        result = await _provider(fake).chat(MESSAGES)
        assert result.usage == {"total_tokens": 12}

    @pytest.mark.asyncio
    async def test_missing_response_field(self, fake_ai):
        fake = fake_ai(lambda request: httpx.Response(200, json={"result": {}, "success": True}))
        with pytest.raises(InferenceError):
            await _provider(fake).chat(MESSAGES)

    @pytest.mark.asyncio
    async def test_missing_result(self, fake_ai):
        fake = fake_ai(lambda request: httpx.Response(200, json={"success": True}))
        with pytest.raises(InferenceError):
            await _provider(fake).chat(MESSAGES)
