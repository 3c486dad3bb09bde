"""Ailyze 配置

凭据全部通过 AilyzeConfig 传入；from_env() 只是从环境变量构造的便捷方法。

环境变量（from_env）:
    CLOUDFLARE_API_KEY: Workers AI API Token（必需）
    CLOUDFLARE_ACCOUNT_ID: Cloudflare 账号 ID（必需）
    CLOUDINARY_CLOUD_NAME / CLOUDINARY_API_KEY / CLOUDINARY_API_SECRET:
        三项齐全时启用 Cloudinary 上传
    AILYZE_IMAGE_MODEL: 图片模型（默认 @cf/stabilityai/stable-diffusion-xl-base-1.0）
    AILYZE_TEXT_MODEL: 文本模型（默认 @cf/meta/llama-2-7b-chat-int8）
    AILYZE_BASE_URL: API 地址（默认 https://api.cloudflare.com/client/v4）
    AILYZE_TIMEOUT: HTTP 超时秒数（默认 120）
"""

import os
from dataclasses import dataclass

from .errors import ConfigurationError

DEFAULT_IMAGE_MODEL = "@cf/stabilityai/stable-diffusion-xl-base-1.0"
DEFAULT_TEXT_MODEL = "@cf/meta/llama-2-7b-chat-int8"
DEFAULT_BASE_URL = "https://api.cloudflare.com/client/v4"
DEFAULT_TIMEOUT = 120.0


@dataclass(frozen=True)
class CloudinaryConfig:
    """Cloudinary 凭据"""

    cloud_name: str
    api_key: str
    api_secret: str

    def __repr__(self) -> str:
        return f"CloudinaryConfig(cloud_name={self.cloud_name!r}, api_key=***, api_secret=***)"


@dataclass(frozen=True)
class AilyzeConfig:
    """Ailyze 配置，构造后不可变"""

    cloudflare_api_key: str
    cloudflare_account_id: str
    cloudinary_config: CloudinaryConfig | None = None
    image_model: str = DEFAULT_IMAGE_MODEL
    text_model: str = DEFAULT_TEXT_MODEL
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT

    def __post_init__(self) -> None:
        if not self.cloudflare_api_key:
            raise ConfigurationError("cloudflare_api_key 不能为空")
        if not self.cloudflare_account_id:
            raise ConfigurationError("cloudflare_account_id 不能为空")

    def __repr__(self) -> str:
        return (
            f"AilyzeConfig(cloudflare_api_key=***, "
            f"cloudflare_account_id={self.cloudflare_account_id!r}, "
            f"cloudinary_config={self.cloudinary_config!r}, "
            f"image_model={self.image_model!r}, text_model={self.text_model!r})"
        )

    @classmethod
    def from_env(cls) -> "AilyzeConfig":
        """从环境变量构造配置"""
        cloudinary = None
        cloud_name = os.environ.get("CLOUDINARY_CLOUD_NAME")
        api_key = os.environ.get("CLOUDINARY_API_KEY")
        api_secret = os.environ.get("CLOUDINARY_API_SECRET")
        if cloud_name and api_key and api_secret:
            cloudinary = CloudinaryConfig(
                cloud_name=cloud_name, api_key=api_key, api_secret=api_secret
            )

        return cls(
            cloudflare_api_key=os.environ["CLOUDFLARE_API_KEY"],
            cloudflare_account_id=os.environ["CLOUDFLARE_ACCOUNT_ID"],
            cloudinary_config=cloudinary,
            image_model=os.environ.get("AILYZE_IMAGE_MODEL", DEFAULT_IMAGE_MODEL),
            text_model=os.environ.get("AILYZE_TEXT_MODEL", DEFAULT_TEXT_MODEL),
            base_url=os.environ.get("AILYZE_BASE_URL", DEFAULT_BASE_URL),
            timeout=float(os.environ.get("AILYZE_TIMEOUT", DEFAULT_TIMEOUT)),
        )
