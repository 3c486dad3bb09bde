"""操作结果类型

两个公开操作都不抛异常，失败信息通过 error / error_kind 返回。
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any

UNKNOWN_ERROR = "Unknown error occurred"


class ErrorKind(str, Enum):
    """失败类别"""

    UNINITIALIZED = "uninitialized"
    TRANSPORT = "transport"
    UPLOAD = "upload"
    UNKNOWN = "unknown"


def _describe(exc: BaseException) -> tuple[str, ErrorKind]:
    message = str(exc) or UNKNOWN_ERROR
    kind = getattr(exc, "kind", None)
    if not isinstance(kind, ErrorKind):
        kind = ErrorKind.UNKNOWN
    return message, kind


@dataclass(frozen=True)
class GeneratePhotoResult:
    """图片生成结果"""

    image_url: str = ""
    success: bool = False
    error: str | None = None
    error_kind: ErrorKind | None = None

    @classmethod
    def failure(cls, exc: BaseException) -> "GeneratePhotoResult":
        message, kind = _describe(exc)
        return cls(image_url="", success=False, error=message, error_kind=kind)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"image_url": self.image_url, "success": self.success}
        if self.error is not None:
            data["error"] = self.error
        return data


@dataclass(frozen=True)
class OptimizeTextResult:
    """文本优化结果"""

    enhanced: str = ""
    success: bool = False
    error: str | None = None
    error_kind: ErrorKind | None = None

    @classmethod
    def failure(cls, exc: BaseException) -> "OptimizeTextResult":
        message, kind = _describe(exc)
        return cls(enhanced="", success=False, error=message, error_kind=kind)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"enhanced": self.enhanced, "success": self.success}
        if self.error is not None:
            data["error"] = self.error
        return data
