"""
Upload Progress Models

Transient events emitted by transports while an upload runs,
and the result returned once it finishes.
"""

from dataclasses import dataclass
from typing import Optional

from video_upload.constants import UploadStatus
from video_upload.models.video_metadata import VideoMetadata


@dataclass(frozen=True)
class UploadProgressEvent:
    """
    One notification from the transport.

    Variants (by status):
        UPLOADING: bytes_sent
        COMPLETED: resource_id
        FAILED: error (and bytes_sent at the time of failure)
    """

    status: UploadStatus
    bytes_sent: int = 0
    resource_id: Optional[str] = None
    error: Optional[str] = None

    @classmethod
    def uploading(cls, bytes_sent: int) -> "UploadProgressEvent":
        return cls(status=UploadStatus.UPLOADING, bytes_sent=bytes_sent)

    @classmethod
    def completed(cls, resource_id: str) -> "UploadProgressEvent":
        return cls(status=UploadStatus.COMPLETED, resource_id=resource_id)

    @classmethod
    def failed(cls, error: str, bytes_sent: int = 0) -> "UploadProgressEvent":
        return cls(status=UploadStatus.FAILED, bytes_sent=bytes_sent, error=error)


@dataclass
class UploadResult:
    """
    Result of a successful upload run.

    Attributes:
        success: True if the remote resource was created
        video_id: YouTube video ID
        status: Final upload status
        file_size: Size of uploaded file in bytes
        upload_duration: Time taken to upload in seconds
        metadata: Metadata the video was uploaded with
    """

    success: bool
    video_id: Optional[str] = None
    status: UploadStatus = UploadStatus.COMPLETED
    file_size: int = 0
    upload_duration: float = 0.0
    metadata: Optional[VideoMetadata] = None
