"""
Upload Controller

High-level coordinator for a single video upload:
filename → metadata → authenticate → open file → upload → result.

Everything local (date parsing, category lookup) runs before any
network call, so a badly named file fails fast.
"""

import logging
import os
import time
from pathlib import Path
from typing import Any, Dict, Optional, Union

from video_upload.catalog.category_catalog import CategoryCatalog
from video_upload.config import UploadConfig
from video_upload.constants import UploadStatus
from video_upload.exceptions import CategoryNotFoundError, FileAccessError
from video_upload.implementations.console_reporter import ConsoleProgressReporter
from video_upload.interfaces.progress_reporter_interface import ProgressReporter
from video_upload.interfaces.uploader_interface import UploaderInterface
from video_upload.models.upload_progress import UploadResult
from video_upload.models.video_metadata import VideoMetadata
from video_upload.utils.filename_utils import format_title_date, parse_video_date


class UploadController:
    """
    High-level video upload controller.

    This class:
    - Derives video metadata from the filename and config
    - Resolves the category id from the catalog
    - Opens the file and hands it to the transport with a progress reporter

    Usage:
        controller = UploadController(uploader, catalog, config)
        result = controller.upload_video("/videos/ouP-2021-02-11_12-27-41.avi")
        print(result.video_id)
    """

    def __init__(
        self,
        uploader: UploaderInterface,
        catalog: CategoryCatalog,
        config: Optional[UploadConfig] = None,
    ):
        """
        Initialize upload controller.

        Args:
            uploader: Transport implementation
            catalog: Category catalog, loaded once at startup
            config: Upload configuration (None = defaults from environment)

        Example:
            mock = MockUploader(video_id="abc123")
            controller = UploadController(mock, CategoryCatalog.load(path))
        """
        self.logger = logging.getLogger(__name__)

        self.uploader = uploader
        self.catalog = catalog
        self.config = config if config is not None else UploadConfig()

        self.logger.debug("Upload Controller initialized")

    def build_metadata(self, video_path: Union[str, Path]) -> VideoMetadata:
        """
        Derive video metadata from the filename.

        Args:
            video_path: Path to video file

        Returns:
            VideoMetadata with title, description, tags, category, privacy

        Raises:
            DateParseError: If the filename carries no valid timestamp
            CategoryNotFoundError: If the configured category is not in the catalog

        Example:
            build_metadata("ouP-2021-02-11_12-27-41.avi").title
            # "COINBASE PRO - 2021-02-11 12:27:41"
        """
        video_date = parse_video_date(video_path, prefix=self.config.filename_prefix)
        date_text = format_title_date(video_date)

        category = self.catalog.get_by_name(self.config.category_name)
        if category is None:
            raise CategoryNotFoundError(
                f"Category '{self.config.category_name}' not found in catalog"
            )

        if not category.assignable:
            self.logger.warning(
                f"Category '{category.title}' ({category.id}) is not assignable"
            )

        return VideoMetadata(
            title=f"{self.config.title_prefix} - {date_text}",
            description=self.config.description_template.format(date=date_text),
            tags=tuple(self.config.tags),
            category_id=category.id,
            privacy_status=self.config.privacy_status,
        )

    def upload_video(
        self,
        video_path: Union[str, Path],
        reporter: Optional[ProgressReporter] = None,
    ) -> UploadResult:
        """
        Upload a video file with metadata derived from its name.

        This is the main workflow method. Errors are raised, not returned:
        a returned result always describes a created video.

        Args:
            video_path: Path to video file
            reporter: Progress observer (default: console output)

        Returns:
            UploadResult with the new video id

        Raises:
            FileAccessError: If the file is missing or unreadable
            DateParseError: If the filename carries no valid timestamp
            CategoryNotFoundError: If the configured category is missing
            AuthError: If authentication fails
            UploadError: If the transport reports a failure
        """
        video_path = Path(video_path)

        if not video_path.is_file():
            raise FileAccessError(f"File does not exist {video_path}")

        metadata = self.build_metadata(video_path)
        self.logger.info(f"Uploading video: {video_path}")
        self.logger.debug(
            f"Title: {metadata.title}, Category: {metadata.category_id}, "
            f"Privacy: {metadata.privacy_status.value}"
        )

        self.uploader.authenticate()

        if reporter is None:
            reporter = ConsoleProgressReporter()

        try:
            stream = open(video_path, "rb")
        except OSError as e:
            raise FileAccessError(f"Cannot read {video_path}: {e}") from e

        start_time = time.time()
        with stream:
            total_size = os.fstat(stream.fileno()).st_size
            reporter.begin(total_size)
            video_id = self.uploader.upload(metadata, stream, reporter)
        upload_duration = time.time() - start_time

        self.logger.info(
            f"✅ Upload successful: {video_id} "
            f"({upload_duration:.1f}s, {total_size / (1024 * 1024):.1f} MB)",
        )

        return UploadResult(
            success=True,
            video_id=video_id,
            status=UploadStatus.COMPLETED,
            file_size=total_size,
            upload_duration=upload_duration,
            metadata=metadata,
        )

    def test_connection(self) -> bool:
        """
        Test connection to the upload service.

        Returns:
            True if connection successful
        """
        self.logger.info("Testing upload connection...")

        result = self.uploader.test_connection()
        if result:
            self.logger.info("✅ Connection test passed")
        else:
            self.logger.warning("❌ Connection test failed")
        return result

    def is_ready(self) -> bool:
        """True if the transport is authenticated and ready"""
        return self.uploader.is_available()

    def get_status(self) -> Dict[str, Any]:
        """
        Get current controller status.

        Returns:
            Dictionary with status information
        """
        return {
            "ready": self.is_ready(),
            "uploader_type": type(self.uploader).__name__,
            "category_name": self.config.category_name,
            "categories_loaded": len(self.catalog),
        }
