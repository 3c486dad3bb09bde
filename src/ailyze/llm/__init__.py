"""统一 LLM 入口"""

from .base import ChatResult, LLMProvider

__all__ = ["ChatResult", "LLMProvider"]
