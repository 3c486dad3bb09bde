"""LLM Provider 抽象接口"""

import json
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any

logger = logging.getLogger(__name__)


@dataclass
class ChatResult:
    """Chat 响应结果"""

    content: str | None = None
    provider: str = ""
    model: str = ""
    usage: dict[str, int] = field(default_factory=dict)


class LLMProvider(ABC):
    """LLM Provider 抽象基类"""

    @property
    @abstractmethod
    def name(self) -> str:
        """Provider 名称"""

    @property
    @abstractmethod
    def default_model(self) -> str:
        """当前使用的模型名"""

    @abstractmethod
    async def chat(
        self,
        messages: list[dict[str, Any]],
        *,
        model: str | None = None,
        **kwargs: Any,
    ) -> ChatResult:
        """Chat Completions

        Args:
            messages: [{"role": "system" | "user" | "assistant", "content": "..."}]
            model: 可选模型覆盖
            kwargs: 透传给模型的额外参数（如 max_tokens、temperature）
        """

    def close(self) -> None:
        """释放资源（可选覆盖）"""

    def _log_request(
        self,
        method: str,
        messages: list[dict[str, Any]],
        *,
        model: str | None,
        **kwargs: Any,
    ) -> None:
        """统一的请求日志（DEBUG 级别）"""
        logger.debug(
            "=== %s.%s ===\nmodel: %s\nextra: %s\nmessages:\n%s",
            self.name,
            method,
            model or self.default_model,
            kwargs or None,
            json.dumps(messages, ensure_ascii=False, indent=2),
        )
