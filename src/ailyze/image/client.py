"""统一图片生成客户端

provider 返回原始字节后，交给 storage 生成 URL：
Cloudinary/R2 返回托管地址，InlineStorage 返回 data URL。
"""

import logging
import uuid

from ..errors import AilyzeError, UploadError
from ..storage.base import StorageProvider
from ..storage.inline import InlineStorage
from .base import ImageProvider, ImageResult

logger = logging.getLogger(__name__)


class ImageClient:
    """统一图片生成客户端

    用法:
        client = ImageClient(provider=WorkersAIImageProvider(ai), storage=cloudinary)
        result = await client.text_to_image("a red balloon")
        print(result.url)  # Cloudinary 的 secure_url
    """

    def __init__(
        self,
        *,
        provider: ImageProvider,
        storage: StorageProvider | None = None,
        storage_key_prefix: str = "ailyze",
    ):
        self._provider = provider
        self._storage = storage or InlineStorage()
        self._storage_key_prefix = storage_key_prefix

    @property
    def provider_name(self) -> str:
        return self._provider.name

    @property
    def storage_name(self) -> str:
        return self._storage.name

    async def _ensure_url(self, result: ImageResult) -> ImageResult:
        """结果只有字节没有 url 时，上传到 storage 获取 url"""
        if result.has_url or not result.has_data:
            return result

        key = f"{self._storage_key_prefix}/{uuid.uuid4().hex}.{result.extension}"
        try:
            upload = await self._storage.upload_bytes(
                result.data, key, content_type=result.mime_type
            )
        except AilyzeError:
            raise
        except Exception as e:
            raise UploadError(f"{self._storage.name} 上传失败: {e}", original_error=e) from e
        if not upload.url:
            raise UploadError(f"{self._storage.name} 未返回 url")
        logger.info("图片已存储: storage=%s, key=%s", self._storage.name, key)

        result.url = upload.url
        return result

    async def text_to_image(self, prompt: str, **kwargs) -> ImageResult:
        """文生图，返回带 URL 的结果"""
        result = await self._provider.text_to_image(prompt, **kwargs)
        return await self._ensure_url(result)

    def close(self) -> None:
        self._provider.close()
        self._storage.close()
