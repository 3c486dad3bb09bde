"""Cloudinary 存储

凭据随每次上传传入，不修改 cloudinary SDK 的全局配置。
"""

import asyncio
import io
import logging
import posixpath

import cloudinary.exceptions
import cloudinary.uploader

from ..errors import UploadError
from .base import StorageProvider, UploadResult

logger = logging.getLogger(__name__)


class CloudinaryStorage(StorageProvider):
    """Cloudinary 图片托管"""

    def __init__(
        self,
        *,
        cloud_name: str,
        api_key: str,
        api_secret: str,
        folder: str | None = None,
    ):
        self.cloud_name = cloud_name
        self.folder = folder
        self._credentials = {
            "cloud_name": cloud_name,
            "api_key": api_key,
            "api_secret": api_secret,
        }

    @property
    def name(self) -> str:
        return "cloudinary"

    def _upload(self, data: bytes, public_id: str) -> dict:
        options = {"resource_type": "image", "public_id": public_id, **self._credentials}
        if self.folder:
            options["folder"] = self.folder
        return cloudinary.uploader.upload(io.BytesIO(data), **options)

    async def upload_bytes(
        self,
        data: bytes,
        key: str,
        *,
        content_type: str = "image/png",
    ) -> UploadResult:
        # public_id 不带扩展名，Cloudinary 会按格式自动追加
        public_id = posixpath.splitext(key)[0]
        try:
            resp = await asyncio.to_thread(self._upload, data, public_id)
        except cloudinary.exceptions.Error as e:
            logger.error("Cloudinary 上传失败: %s", e)
            raise UploadError(f"Cloudinary 上传失败: {e}", original_error=e) from e

        url = resp.get("secure_url") if isinstance(resp, dict) else None
        if not url:
            raise UploadError("Cloudinary 未返回 secure_url")
        logger.info("Cloudinary 上传完成: %s", url)
        return UploadResult(url=url, key=resp.get("public_id", public_id), bucket=self.cloud_name)
