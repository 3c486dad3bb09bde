"""统一存储入口

R2Storage 依赖 boto3，需单独导入: from ailyze.storage.r2 import R2Storage
"""

from .base import StorageProvider, UploadResult
from .cloudinary import CloudinaryStorage
from .inline import InlineStorage

__all__ = [
    "CloudinaryStorage",
    "InlineStorage",
    "StorageProvider",
    "UploadResult",
]
