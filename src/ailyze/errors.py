"""Ailyze 异常定义

每个异常类携带 kind，供 client 层转换为带标签的结果。
"""

from .result import ErrorKind


class AilyzeError(Exception):
    """所有 ailyze 异常的基类"""

    kind: ErrorKind = ErrorKind.UNKNOWN


class NotInitializedError(AilyzeError):
    """未调用 initialize() 就使用了模块级接口"""

    kind = ErrorKind.UNINITIALIZED

    def __init__(
        self, message: str = "Ailyze package not initialized. Call initialize() first."
    ) -> None:
        super().__init__(message)


class ConfigurationError(AilyzeError):
    """配置不完整或非法"""


class InferenceError(AilyzeError):
    """Workers AI 调用失败（网络、非 2xx、响应格式错误）"""

    kind = ErrorKind.TRANSPORT

    def __init__(self, message: str, status_code: int = 0, response: str = "") -> None:
        self.status_code = status_code
        self.response = response
        super().__init__(message)


class UploadError(AilyzeError):
    """媒体托管上传失败"""

    kind = ErrorKind.UPLOAD

    def __init__(self, message: str, original_error: Exception | None = None) -> None:
        self.original_error = original_error
        super().__init__(message)
