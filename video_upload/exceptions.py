"""
Upload Exceptions

Error kinds raised by the upload workflow. Every error is terminal for a
single run: the CLI prints it and exits with ``exit_code``.
"""

from typing import Iterable, List, Optional

from video_upload.constants import EXIT_FAILURE, EXIT_USAGE


class VideoUploadError(Exception):
    """Base class for all upload workflow errors"""

    exit_code = EXIT_FAILURE


class UsageError(VideoUploadError):
    """Missing or invalid command-line argument"""

    exit_code = EXIT_USAGE


class FileAccessError(VideoUploadError):
    """Video file missing or unreadable"""


class ConfigLoadError(VideoUploadError):
    """Category catalog, client secret or config file missing/malformed"""


class DateParseError(VideoUploadError):
    """Filename does not carry a timestamp in the expected pattern"""


class CategoryNotFoundError(VideoUploadError):
    """Named category absent from the catalog"""


class AuthError(VideoUploadError):
    """OAuth flow or token refresh failed"""


class UploadError(VideoUploadError):
    """
    Transport-reported upload failure.

    The transport may aggregate several underlying causes; each one is kept
    in ``errors`` so the CLI can print them line by line.
    """

    def __init__(self, message: str, errors: Optional[Iterable[str]] = None):
        super().__init__(message)
        self.errors: List[str] = list(errors) if errors else [message]
