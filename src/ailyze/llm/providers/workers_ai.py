"""Cloudflare Workers AI 文本生成

响应格式: {"result": {"response": "..."}, "success": true, "errors": [], "messages": []}
"""

import logging
from typing import Any

from ...config import DEFAULT_TEXT_MODEL
from ...errors import InferenceError
from ...workers_ai import WorkersAI
from ..base import ChatResult, LLMProvider

logger = logging.getLogger(__name__)


class WorkersAILLMProvider(LLMProvider):
    """Workers AI Chat 模型（llama 系列等）"""

    def __init__(self, ai: WorkersAI, *, model: str = DEFAULT_TEXT_MODEL):
        self.ai = ai
        self._model = model

    @property
    def name(self) -> str:
        return "workers_ai"

    @property
    def default_model(self) -> str:
        return self._model

    async def chat(
        self,
        messages: list[dict[str, Any]],
        *,
        model: str | None = None,
        **kwargs: Any,
    ) -> ChatResult:
        self._log_request("chat", messages, model=model, **kwargs)
        use_model = model or self._model
        payload: dict[str, Any] = {"messages": messages, **kwargs}

        result = await self.ai.run_json(use_model, payload)
        if not isinstance(result, dict) or not isinstance(result.get("response"), str):
            raise InferenceError(f"Workers AI 响应缺少 result.response: {result!r}"[:300])

        usage = result.get("usage")
        return ChatResult(
            content=result["response"],
            provider=self.name,
            model=use_model,
            usage=usage if isinstance(usage, dict) else {},
        )
