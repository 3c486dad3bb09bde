"""Cloudflare Workers AI 图片生成

SDXL 等模型直接返回图片二进制；flux 系列返回 JSON 信封，图片在 result.image（base64）。
"""

import base64
import binascii
import io
import logging
from typing import Any

import httpx
from PIL import Image

from ...config import DEFAULT_IMAGE_MODEL
from ...errors import InferenceError
from ...workers_ai import WorkersAI
from ..base import ImageProvider, ImageResult

logger = logging.getLogger(__name__)

# SDXL 支持的可选参数，其余忽略
_SUPPORTED_PARAMS = ("negative_prompt", "width", "height", "num_steps", "guidance", "seed")


def _detect_mime(data: bytes, content_type: str = "") -> str:
    """按文件头识别图片 MIME，识别不了再看 Content-Type，默认 image/png"""
    try:
        with Image.open(io.BytesIO(data)) as img:
            mime = Image.MIME.get(img.format or "")
    except Exception:
        # 识别失败时回退到 Content-Type
        mime = None
    if mime:
        return mime

    content_type = content_type.split(";", 1)[0].strip().lower()
    if content_type.startswith("image/"):
        return content_type
    return "image/png"


class WorkersAIImageProvider(ImageProvider):
    """Workers AI 文生图"""

    def __init__(self, ai: WorkersAI, *, model: str = DEFAULT_IMAGE_MODEL):
        self.ai = ai
        self.model = model

    @property
    def name(self) -> str:
        return "workers_ai"

    async def text_to_image(self, prompt: str, **kwargs) -> ImageResult:
        payload: dict[str, Any] = {"prompt": prompt}
        for key in _SUPPORTED_PARAMS:
            if kwargs.get(key) is not None:
                payload[key] = kwargs[key]

        logger.info("Workers AI 文生图: model=%s, params=%s", self.model, sorted(payload))
        resp = await self.ai.run(self.model, payload)

        content_type = resp.headers.get("content-type", "").lower()
        if content_type.startswith("application/json"):
            data = self._decode_envelope(resp)
        else:
            data = resp.content
        if not data:
            raise InferenceError(
                "Workers AI 未返回图片", status_code=resp.status_code, response=resp.text
            )

        return ImageResult(
            data=data,
            mime_type=_detect_mime(data, content_type),
            provider=self.name,
            metadata={"model": self.model},
        )

    @staticmethod
    def _decode_envelope(resp: httpx.Response) -> bytes:
        """解析 {"result": {"image": "<base64>"}} 信封"""
        try:
            result = resp.json().get("result")
        except (ValueError, AttributeError) as e:
            raise InferenceError(
                f"Workers AI 响应格式错误: {e}", status_code=resp.status_code, response=resp.text
            ) from e

        image = result.get("image") if isinstance(result, dict) else None
        if not isinstance(image, str) or not image:
            raise InferenceError(
                f"Workers AI 未返回图片: {resp.text[:200]}",
                status_code=resp.status_code,
                response=resp.text,
            )
        try:
            return base64.b64decode(image, validate=True)
        except (binascii.Error, ValueError) as e:
            raise InferenceError(
                f"Workers AI 图片 base64 解码失败: {e}", status_code=resp.status_code
            ) from e
