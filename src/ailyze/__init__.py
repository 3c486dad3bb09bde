"""Ailyze - Workers AI 图片生成与文本优化"""

from .api import generate_photo, initialize, optimize_text
from .client import AilyzeClient
from .config import AilyzeConfig, CloudinaryConfig
from .errors import (
    AilyzeError,
    ConfigurationError,
    InferenceError,
    NotInitializedError,
    UploadError,
)
from .result import ErrorKind, GeneratePhotoResult, OptimizeTextResult

__all__ = [
    "AilyzeClient",
    "AilyzeConfig",
    "AilyzeError",
    "CloudinaryConfig",
    "ConfigurationError",
    "ErrorKind",
    "GeneratePhotoResult",
    "InferenceError",
    "NotInitializedError",
    "OptimizeTextResult",
    "UploadError",
    "generate_photo",
    "initialize",
    "optimize_text",
]
