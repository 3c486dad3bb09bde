"""模块级接口

initialize() 之后直接调用 generate_photo / optimize_text。
重复 initialize() 会整体替换之前的配置。需要多套配置时请直接使用 AilyzeClient。
"""

import logging

import httpx

from .client import AilyzeClient
from .config import AilyzeConfig
from .errors import NotInitializedError
from .result import GeneratePhotoResult, OptimizeTextResult
from .storage.base import StorageProvider

logger = logging.getLogger(__name__)

_client: AilyzeClient | None = None


def initialize(
    config: AilyzeConfig,
    *,
    storage: StorageProvider | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> None:
    """用 API 凭据初始化 Ailyze"""
    global _client
    _client = AilyzeClient(config, storage=storage, transport=transport)
    logger.info(
        "Ailyze 已初始化: account=%s, storage=%s",
        config.cloudflare_account_id,
        _client.storage_name,
    )


async def generate_photo(prompt: str) -> GeneratePhotoResult:
    """根据文本生成图片"""
    client = _client
    if client is None:
        err = NotInitializedError()
        logger.error("生成图片失败: %s", err)
        return GeneratePhotoResult.failure(err)
    return await client.generate_photo(prompt)


async def optimize_text(prompt: str) -> OptimizeTextResult:
    """优化润色文本"""
    client = _client
    if client is None:
        err = NotInitializedError()
        logger.error("优化文本失败: %s", err)
        return OptimizeTextResult.failure(err)
    return await client.optimize_text(prompt)
