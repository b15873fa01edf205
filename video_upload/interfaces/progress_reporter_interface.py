"""
Progress Reporter Interface

Observer attached to an upload before it starts. Transports push
UploadProgressEvent objects through ``handle``; implementations decide how
to render them.

Delivery is ordered and single-threaded, so implementations need no locking.
"""

from abc import ABC, abstractmethod
from typing import Optional

from video_upload.constants import UploadStatus
from video_upload.models.upload_progress import UploadProgressEvent


class ProgressReporter(ABC):
    """
    Abstract base class for upload progress observers.

    Usage:
        reporter = ConsoleProgressReporter()
        reporter.begin(total_size=os.path.getsize(path))
        uploader.upload(metadata, stream, reporter)
    """

    def __init__(self):
        self.total_size: Optional[int] = None

    def begin(self, total_size: int) -> None:
        """
        Fix the expected byte count before the upload starts.

        Raises:
            ValueError: If a different total size was already set
        """
        if self.total_size is not None and self.total_size != total_size:
            raise ValueError(
                f"Total size already set to {self.total_size}, got {total_size}"
            )
        self.total_size = total_size

    def fraction(self, bytes_sent: int) -> float:
        """Share of the total that ``bytes_sent`` represents (0.0 - 1.0)"""
        if not self.total_size:
            return 1.0
        return bytes_sent / self.total_size

    def handle(self, event: UploadProgressEvent) -> None:
        """Dispatch a transport event to the matching callback"""
        if event.status == UploadStatus.COMPLETED:
            self.on_complete(event.resource_id)
        else:
            self.on_progress(event.status, event.bytes_sent, event.error)

    @abstractmethod
    def on_progress(
        self,
        status: UploadStatus,
        bytes_sent: int,
        error: Optional[str] = None,
    ) -> None:
        """
        Called for every Uploading or Failed notification.

        Args:
            status: UPLOADING or FAILED
            bytes_sent: Bytes confirmed so far (non-decreasing while uploading)
            error: Failure detail (FAILED only)
        """

    @abstractmethod
    def on_complete(self, resource_id: str) -> None:
        """Called once, after the remote service confirmed all bytes"""
