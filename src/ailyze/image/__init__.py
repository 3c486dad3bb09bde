"""统一图片生成入口"""

from .base import ImageProvider, ImageResult
from .client import ImageClient

__all__ = ["ImageClient", "ImageProvider", "ImageResult"]
