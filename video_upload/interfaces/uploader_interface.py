"""
Uploader Interface

Abstract interface for upload transports.
High-level code (UploadController) depends on this abstraction,
not on the concrete YouTube client.
"""

from abc import ABC, abstractmethod
from typing import BinaryIO

from video_upload.interfaces.progress_reporter_interface import ProgressReporter
from video_upload.models.video_metadata import VideoMetadata


class UploaderInterface(ABC):
    """
    Abstract base class for video upload transports.

    Any transport (YouTube, stub, ...) must implement these methods.
    """

    @abstractmethod
    def authenticate(self) -> None:
        """
        Obtain credentials for the upload.

        May run an interactive consent flow the first time.

        Raises:
            AuthError: If credentials cannot be obtained
            ConfigLoadError: If the client secret is missing or malformed
        """

    @abstractmethod
    def upload(
        self,
        metadata: VideoMetadata,
        stream: BinaryIO,
        reporter: ProgressReporter,
    ) -> str:
        """
        Upload the video and block until it finishes.

        The transport emits UploadProgressEvent objects through
        ``reporter.handle`` in order: any number of UPLOADING events,
        then exactly one COMPLETED or FAILED.

        Args:
            metadata: Title, description, tags, category, privacy
            stream: Open binary file positioned at the start
            reporter: Observer whose ``begin`` was already called

        Returns:
            ID of the created video

        Raises:
            UploadError: With every cause the transport collected
            AuthError: If credentials stop working mid-upload
        """

    @abstractmethod
    def is_available(self) -> bool:
        """True if the transport is authenticated and ready"""

    @abstractmethod
    def test_connection(self) -> bool:
        """
        Verify authentication and connectivity without uploading.

        Returns:
            True if connection successful
        """
