"""Ailyze 客户端

AilyzeClient 持有不可变配置，构造时选定存储实现；
generate_photo / optimize_text 永不抛异常，失败信息放在结果里。
"""

import logging
import sys

import httpx

from .config import AilyzeConfig
from .errors import InferenceError
from .image.client import ImageClient
from .image.providers.workers_ai import WorkersAIImageProvider
from .llm.providers.workers_ai import WorkersAILLMProvider
from .result import GeneratePhotoResult, OptimizeTextResult
from .storage.base import StorageProvider
from .storage.cloudinary import CloudinaryStorage
from .storage.inline import InlineStorage
from .workers_ai import WorkersAI

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "You are a helpful assistant that optimizes and enhances text "
    "to make it more professional, clear, and engaging."
)
USER_PROMPT_TEMPLATE = "Please optimize and enhance the following text: {prompt}"

# 浏览器 / WASI 沙箱没有原生 socket，cloudinary SDK 无法使用
_RESTRICTED_PLATFORMS = ("emscripten", "wasi")


def _upload_capable() -> bool:
    return sys.platform not in _RESTRICTED_PLATFORMS


def build_storage(config: AilyzeConfig) -> StorageProvider:
    """按配置和运行环境选择存储实现"""
    if config.cloudinary_config is None:
        return InlineStorage()

    if not _upload_capable():
        logger.warning("当前运行环境不支持 Cloudinary 上传，cloudinary_config 将被忽略")
        return InlineStorage()

    cfg = config.cloudinary_config
    return CloudinaryStorage(
        cloud_name=cfg.cloud_name,
        api_key=cfg.api_key,
        api_secret=cfg.api_secret,
    )


def build_messages(prompt: str) -> list[dict[str, str]]:
    return [
        {"role": "system", "content": SYSTEM_PROMPT},
        {"role": "user", "content": USER_PROMPT_TEMPLATE.format(prompt=prompt)},
    ]


class AilyzeClient:
    """Ailyze 客户端

    用法:
        client = AilyzeClient(AilyzeConfig.from_env())
        result = await client.generate_photo("a red balloon")
        if result.success:
            print(result.image_url)

    Args:
        config: 凭据和模型配置
        storage: 自定义存储（如 R2Storage），默认按 config 选择
        transport: 自定义 httpx 传输层，测试时传入 httpx.MockTransport
    """

    def __init__(
        self,
        config: AilyzeConfig,
        *,
        storage: StorageProvider | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._config = config
        ai = WorkersAI(
            api_key=config.cloudflare_api_key,
            account_id=config.cloudflare_account_id,
            base_url=config.base_url,
            timeout=config.timeout,
            transport=transport,
        )
        self._images = ImageClient(
            provider=WorkersAIImageProvider(ai, model=config.image_model),
            storage=storage or build_storage(config),
        )
        self._llm = WorkersAILLMProvider(ai, model=config.text_model)

    @property
    def config(self) -> AilyzeConfig:
        return self._config

    @property
    def storage_name(self) -> str:
        return self._images.storage_name

    async def generate_photo(self, prompt: str) -> GeneratePhotoResult:
        """根据文本生成图片，返回托管 URL 或 data URL"""
        try:
            result = await self._images.text_to_image(prompt)
            if not result.url:
                raise InferenceError("Workers AI 未返回图片")
        except Exception as e:
            logger.error("生成图片失败: %s", e)
            return GeneratePhotoResult.failure(e)
        return GeneratePhotoResult(image_url=result.url, success=True)

    async def optimize_text(self, prompt: str) -> OptimizeTextResult:
        """优化润色文本"""
        try:
            result = await self._llm.chat(build_messages(prompt))
            if not result.content:
                raise InferenceError("Workers AI 返回了空文本")
        except Exception as e:
            logger.error("优化文本失败: %s", e)
            return OptimizeTextResult.failure(e)
        return OptimizeTextResult(enhanced=result.content, success=True)

    def close(self) -> None:
        self._images.close()
        self._llm.close()
