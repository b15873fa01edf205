"""
Models Package

Data classes passed between the upload components.
"""

from video_upload.models.upload_progress import UploadProgressEvent, UploadResult
from video_upload.models.video_metadata import VideoMetadata

__all__ = [
    "UploadProgressEvent",
    "UploadResult",
    "VideoMetadata",
]
