"""图片生成抽象接口"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field


@dataclass
class ImageResult:
    """图片生成结果"""

    data: bytes = b""
    url: str = ""
    mime_type: str = "image/png"
    provider: str = ""
    metadata: dict = field(default_factory=dict)

    @property
    def has_url(self) -> bool:
        return bool(self.url)

    @property
    def has_data(self) -> bool:
        return bool(self.data)

    @property
    def extension(self) -> str:
        return self.mime_type.split("/", 1)[-1].split("+", 1)[0] or "png"


class ImageProvider(ABC):
    """图片生成 Provider 抽象基类"""

    @property
    @abstractmethod
    def name(self) -> str:
        """Provider 名称"""

    @abstractmethod
    async def text_to_image(self, prompt: str, **kwargs) -> ImageResult:
        """文生图"""

    def close(self) -> None:
        """释放资源"""
