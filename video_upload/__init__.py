"""
Video Upload Module

Uploads a recording to YouTube with metadata derived from its filename.

Public API:
    - UploadController: Upload workflow coordinator
    - UploadConfig: Deployment configuration
    - CategoryCatalog: Category lookup by title
    - create_uploader: Factory function

Usage:
    from video_upload import UploadConfig, UploadController, create_uploader
    from video_upload import get_category_catalog

    config = UploadConfig()
    controller = UploadController(
        uploader=create_uploader(config),
        catalog=get_category_catalog(config.categories_path),
        config=config,
    )
    result = controller.upload_video("/videos/ouP-2021-02-11_12-27-41.avi")
"""

from video_upload.catalog.category_catalog import (
    Category,
    CategoryCatalog,
    get_category_catalog,
)
from video_upload.config import UploadConfig
from video_upload.constants import PrivacyStatus, UploadStatus
from video_upload.controllers.upload_controller import UploadController
from video_upload.exceptions import (
    AuthError,
    CategoryNotFoundError,
    ConfigLoadError,
    DateParseError,
    FileAccessError,
    UploadError,
    UsageError,
    VideoUploadError,
)
from video_upload.factory import create_uploader
from video_upload.models import UploadProgressEvent, UploadResult, VideoMetadata

# Public API
__all__ = [
    "AuthError",
    "Category",
    "CategoryCatalog",
    "CategoryNotFoundError",
    "ConfigLoadError",
    "DateParseError",
    "FileAccessError",
    "PrivacyStatus",
    "UploadConfig",
    "UploadController",
    "UploadError",
    "UploadProgressEvent",
    "UploadResult",
    "UploadStatus",
    "UsageError",
    "VideoMetadata",
    "VideoUploadError",
    "create_uploader",
    "get_category_catalog",
]
