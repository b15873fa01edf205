"""
Mock Uploader Implementation

Stub transport for tests and dry runs. Reads the stream in chunks and
reports progress like the real uploader, without any network access.
"""

import logging
import time
from typing import BinaryIO, Iterable, List, Optional
from uuid import uuid4

from video_upload.constants import UPLOAD_CHUNK_SIZE
from video_upload.exceptions import UploadError
from video_upload.interfaces.progress_reporter_interface import ProgressReporter
from video_upload.interfaces.uploader_interface import UploaderInterface
from video_upload.models.upload_progress import UploadProgressEvent
from video_upload.models.video_metadata import VideoMetadata


class MockUploader(UploaderInterface):
    """
    Mock video uploader for testing.

    Useful for:
    - Unit tests
    - Dry runs without YouTube credentials (UPLOADER_MODE=mock)
    - CI/CD pipelines
    """

    def __init__(
        self,
        video_id: Optional[str] = None,
        fail_with: Optional[Iterable[str]] = None,
        chunk_size: int = UPLOAD_CHUNK_SIZE,
    ):
        """
        Initialize mock uploader.

        Args:
            video_id: ID returned for every upload (None = random mock_ ID)
            fail_with: Error messages to fail every upload with
            chunk_size: Bytes read per simulated chunk

        Example:
            # Fixed ID for assertions
            uploader = MockUploader(video_id="abc123")

            # Test error handling
            uploader = MockUploader(fail_with=["quotaExceeded"])
        """
        self.logger = logging.getLogger(__name__)
        self.video_id = video_id
        self.fail_with = list(fail_with) if fail_with else []
        self.chunk_size = chunk_size

        self.authenticated = False
        self.upload_history: List[dict] = []

        self.logger.info(
            f"Mock Uploader initialized "
            f"(video_id: {video_id}, failures: {len(self.fail_with)})",
        )

    def authenticate(self) -> None:
        """Mock credentials are always granted"""
        self.authenticated = True

    def upload(
        self,
        metadata: VideoMetadata,
        stream: BinaryIO,
        reporter: ProgressReporter,
    ) -> str:
        """
        Simulate a chunked upload.

        Reads the whole stream, emitting one UPLOADING event per chunk.
        """
        start_time = time.time()
        self.authenticate()

        bytes_sent = 0
        while True:
            chunk = stream.read(self.chunk_size)
            if not chunk:
                break
            bytes_sent += len(chunk)

            if self.fail_with:
                break

            reporter.handle(UploadProgressEvent.uploading(bytes_sent))

        if self.fail_with:
            self.logger.error(f"[MOCK] Upload failed: {self.fail_with}")
            reporter.handle(
                UploadProgressEvent.failed("\n".join(self.fail_with), bytes_sent),
            )
            raise UploadError("Simulated upload failure", self.fail_with)

        video_id = self.video_id or f"mock_{uuid4().hex[:11]}"

        self.upload_history.append(
            {
                "video_id": video_id,
                "metadata": metadata,
                "bytes_sent": bytes_sent,
                "timestamp": start_time,
            }
        )

        reporter.handle(UploadProgressEvent.completed(video_id))

        self.logger.info(
            f"[MOCK] ✅ Upload successful: {video_id} "
            f"({time.time() - start_time:.1f}s)",
        )
        return video_id

    def is_available(self) -> bool:
        """Mock uploader is always available"""
        return True

    def test_connection(self) -> bool:
        """Simulate connection test"""
        self.logger.info("[MOCK] ✅ Connection test successful")
        return True

    # =========================================================================
    # TESTING HELPER METHODS
    # =========================================================================

    def get_upload_history(self) -> List[dict]:
        """Copy of all uploads performed"""
        return self.upload_history.copy()

    def get_last_upload(self) -> Optional[dict]:
        """
        Get most recent upload.

        Returns:
            Last upload record, or None
        """
        return self.upload_history[-1] if self.upload_history else None

    def clear_history(self) -> None:
        self.upload_history.clear()
        self.logger.debug("[MOCK] Upload history cleared")
