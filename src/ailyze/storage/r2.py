"""Cloudflare R2 存储

需要安装 r2 extra: pip install "ailyze[r2]"
"""

import asyncio
import logging

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from ..errors import ConfigurationError, UploadError
from .base import StorageProvider, UploadResult

logger = logging.getLogger(__name__)


class R2Storage(StorageProvider):
    """Cloudflare R2 (S3 兼容)"""

    def __init__(
        self,
        *,
        access_key_id: str,
        access_key_secret: str,
        endpoint: str,
        bucket: str,
        public_domain: str,
    ):
        if not public_domain:
            raise ConfigurationError("R2Storage 需要 public_domain 才能返回公开 URL")
        self.bucket = bucket
        self.public_domain = public_domain.rstrip("/")
        self.s3 = boto3.client(
            "s3",
            endpoint_url=endpoint,
            aws_access_key_id=access_key_id,
            aws_secret_access_key=access_key_secret,
            region_name="auto",
        )

    @property
    def name(self) -> str:
        return "r2"

    async def upload_bytes(
        self,
        data: bytes,
        key: str,
        *,
        content_type: str = "image/png",
    ) -> UploadResult:
        try:
            await asyncio.to_thread(
                self.s3.put_object,
                Bucket=self.bucket,
                Key=key,
                Body=data,
                ContentType=content_type,
            )
        except (BotoCoreError, ClientError) as e:
            logger.error("R2 上传失败: %s", e)
            raise UploadError(f"R2 上传失败: {e}", original_error=e) from e

        url = f"{self.public_domain}/{key}"
        logger.info("R2 上传完成: %s", url)
        return UploadResult(url=url, key=key, bucket=self.bucket)
