"""
YouTube Uploader Implementation

Concrete implementation of UploaderInterface for YouTube API v3.
Uploads through the client library's resumable upload protocol;
retry/backoff of individual chunks is left to the library.
"""

import logging
from typing import Any, BinaryIO, List, Optional

import httplib2
from google.auth.exceptions import GoogleAuthError
from googleapiclient.discovery import build
from googleapiclient.errors import HttpError
from googleapiclient.http import MediaIoBaseUpload

from video_upload.auth.oauth_manager import OAuthManager
from video_upload.constants import (
    UPLOAD_CHUNK_SIZE,
    UPLOAD_NUM_RETRIES,
    UPLOAD_PARTS,
    VIDEO_MIME_TYPE,
    YOUTUBE_API_SERVICE_NAME,
    YOUTUBE_API_VERSION,
)
from video_upload.exceptions import AuthError, UploadError, VideoUploadError
from video_upload.interfaces.progress_reporter_interface import ProgressReporter
from video_upload.interfaces.uploader_interface import UploaderInterface
from video_upload.models.upload_progress import UploadProgressEvent
from video_upload.models.video_metadata import VideoMetadata


class YouTubeUploader(UploaderInterface):
    """
    YouTube video uploader using YouTube Data API v3.

    Features:
    - Resumable, chunked uploads from an open file stream
    - Progress events after every chunk
    - HTTP errors collected into a single UploadError
    """

    def __init__(
        self,
        oauth_manager: OAuthManager,
        chunk_size: int = UPLOAD_CHUNK_SIZE,
        num_retries: int = UPLOAD_NUM_RETRIES,
        youtube_service: Any = None,
    ):
        """
        Initialize YouTube uploader.

        No network access happens here; call authenticate() first.

        Args:
            oauth_manager: OAuth manager for authentication
            chunk_size: Bytes per resumable chunk (multiple of 256 KB)
            num_retries: Retries the client library applies per chunk
            youtube_service: Pre-built API resource (tests)

        Example:
            oauth = OAuthManager(client_secret_path, token_path)
            uploader = YouTubeUploader(oauth)
            uploader.authenticate()
        """
        self.logger = logging.getLogger(__name__)

        self.oauth_manager = oauth_manager
        self.chunk_size = chunk_size
        self.num_retries = num_retries
        self.youtube_service = youtube_service

        self.logger.debug("YouTube Uploader initialized")

    def authenticate(self) -> None:
        """
        Initialize YouTube API service with authenticated credentials.

        Raises:
            AuthError: If credentials or service initialization fail
        """
        if self.youtube_service is not None:
            return

        credentials = self.oauth_manager.get_credentials()

        try:
            self.youtube_service = build(
                YOUTUBE_API_SERVICE_NAME,
                YOUTUBE_API_VERSION,
                credentials=credentials,
                cache_discovery=False,
            )
        except Exception as e:
            raise AuthError(f"Failed to initialize YouTube service: {e}") from e

        self.logger.info("YouTube API service initialized")

    def upload(
        self,
        metadata: VideoMetadata,
        stream: BinaryIO,
        reporter: ProgressReporter,
    ) -> str:
        """
        Upload video to YouTube.

        Args:
            metadata: Video metadata
            stream: Open binary video stream
            reporter: Progress observer

        Returns:
            Video ID of the uploaded video

        Raises:
            UploadError: If the upload fails
            AuthError: If the token cannot be refreshed mid-upload
        """
        self.authenticate()

        media = MediaIoBaseUpload(
            stream,
            mimetype=VIDEO_MIME_TYPE,
            chunksize=self.chunk_size,
            resumable=True,
        )

        request = self.youtube_service.videos().insert(
            part=UPLOAD_PARTS,
            body=metadata.to_request_body(),
            media_body=media,
        )

        self.logger.info(f"Starting upload: {metadata.title} ({media.size()} bytes)")

        response = self._execute_upload(request, reporter)

        video_id = response.get("id") if isinstance(response, dict) else None
        if not video_id:
            message = "Upload completed but no video ID returned"
            reporter.handle(UploadProgressEvent.failed(message, media.size()))
            raise UploadError(message)

        reporter.handle(UploadProgressEvent.uploading(media.size()))
        reporter.handle(UploadProgressEvent.completed(video_id))

        self.logger.info(f"✅ Upload successful: {video_id}")
        return video_id

    def _execute_upload(self, request, reporter: ProgressReporter) -> Any:
        """
        Drive the resumable upload chunk by chunk.

        Args:
            request: YouTube API insert request
            reporter: Progress observer

        Returns:
            Parsed JSON response of the final chunk
        """
        response = None
        bytes_sent = 0

        while response is None:
            try:
                status, response = request.next_chunk(num_retries=self.num_retries)
            except HttpError as e:
                errors = self._collect_http_errors(e)
                self._fail(reporter, errors, bytes_sent)
                raise UploadError(f"Upload failed: {errors[0]}", errors) from e
            except GoogleAuthError as e:
                self._fail(reporter, [f"Authorization failed: {e}"], bytes_sent)
                raise AuthError(f"Credentials rejected during upload: {e}") from e
            except (httplib2.HttpLib2Error, OSError) as e:
                errors = [f"Network error: {e}"]
                self._fail(reporter, errors, bytes_sent)
                raise UploadError(errors[0], errors) from e

            if status:
                bytes_sent = status.resumable_progress
                reporter.handle(UploadProgressEvent.uploading(bytes_sent))

        return response

    def _fail(
        self,
        reporter: ProgressReporter,
        errors: List[str],
        bytes_sent: int,
    ) -> None:
        """Emit the FAILED event and log every cause"""
        for error in errors:
            self.logger.error(f"Upload failed: {error}")
        reporter.handle(UploadProgressEvent.failed("\n".join(errors), bytes_sent))

    def _collect_http_errors(self, error: HttpError) -> List[str]:
        """
        Flatten an HTTP error into one message per cause.

        The API reports a top-level reason plus a list of detailed errors
        (e.g. quotaExceeded, uploadLimitExceeded).
        """
        status = getattr(error.resp, "status", "?")
        errors = [f"HTTP {status}: {error.reason}"]

        details: Optional[Any] = getattr(error, "error_details", None)
        if isinstance(details, list):
            for detail in details:
                if isinstance(detail, dict):
                    message = detail.get("message") or detail.get("reason")
                    if message and message != error.reason:
                        errors.append(str(message))

        return errors

    def is_available(self) -> bool:
        """
        Check if uploader is ready.

        Returns:
            True if authenticated and service initialized
        """
        return (
            self.oauth_manager.is_authenticated() and self.youtube_service is not None
        )

    def test_connection(self) -> bool:
        """
        Test connection to YouTube API.

        The upload-only scope cannot list channels, so this fetches the
        public category list instead.

        Returns:
            True if connection successful
        """
        try:
            self.authenticate()
            self.youtube_service.videoCategories().list(
                part="snippet",
                regionCode="US",
            ).execute()

            self.logger.info("✅ YouTube API connection test successful")
            return True

        except (HttpError, VideoUploadError, httplib2.HttpLib2Error, OSError) as e:
            self.logger.error(f"❌ YouTube API connection test failed: {e}")
            return False
