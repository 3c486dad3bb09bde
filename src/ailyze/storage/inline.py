"""内联存储：不上传，直接编码为 data URL

未配置媒体托管或运行环境不支持上传时使用。
"""

import base64

from .base import StorageProvider, UploadResult


def to_data_url(data: bytes, content_type: str = "image/png") -> str:
    encoded = base64.b64encode(data).decode("ascii")
    return f"data:{content_type};base64,{encoded}"


class InlineStorage(StorageProvider):
    """把图片字节编码为 base64 data URL"""

    @property
    def name(self) -> str:
        return "inline"

    async def upload_bytes(
        self,
        data: bytes,
        key: str,
        *,
        content_type: str = "image/png",
    ) -> UploadResult:
        return UploadResult(url=to_data_url(data, content_type), key=key)
