"""
Upload Constants

Centralized constants and enums for the video upload module.
Deployment-specific values (paths, account, category name) live in
config/settings.py instead.
"""

from enum import Enum

# =============================================================================
# YOUTUBE API CONFIGURATION
# =============================================================================

# Upload-only scope: lets the app add videos to the channel, nothing else
# https://developers.google.com/youtube/v3/guides/authentication
YOUTUBE_SCOPES = [
    "https://www.googleapis.com/auth/youtube.upload",
]

# YouTube API service details
YOUTUBE_API_SERVICE_NAME = "youtube"
YOUTUBE_API_VERSION = "v3"

# Resource parts sent with videos.insert
UPLOAD_PARTS = "snippet,status"

# Declared media type for the upload body
VIDEO_MIME_TYPE = "video/*"

# =============================================================================
# UPLOAD CONFIGURATION
# =============================================================================

# YouTube requires chunk sizes in multiples of 256 KB
CHUNK_SIZE_MULTIPLE = 256 * 1024

# Chunk size for resumable uploads (in bytes)
UPLOAD_CHUNK_SIZE = 10 * 1024 * 1024  # 10 MB

# Retries handed to the client library for each chunk (its own backoff)
UPLOAD_NUM_RETRIES = 3

# =============================================================================
# FILENAME CONVENTION
# =============================================================================

# ouP-2021-02-11_12-27-41.avi
DEFAULT_FILENAME_PREFIX = "ouP-"
FILENAME_DATE_FORMAT = "%Y-%m-%d_%H-%M-%S"
FILENAME_DATE_PATTERN = r"[0-9]{4}-[0-9]{2}-[0-9]{2}_[0-9]{2}-[0-9]{2}-[0-9]{2}"

# Timestamp format used inside titles and descriptions
TITLE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# =============================================================================
# CLI EXIT CODES
# =============================================================================

EXIT_SUCCESS = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2

# =============================================================================
# ENUMS
# =============================================================================


class PrivacyStatus(Enum):
    """Video visibility levels accepted by the API"""

    UNLISTED = "unlisted"
    PRIVATE = "private"
    PUBLIC = "public"


class UploadStatus(Enum):
    """Upload progress states reported by transports"""

    UPLOADING = "uploading"  # Bytes are being sent
    COMPLETED = "completed"  # Remote resource created
    FAILED = "failed"  # Transport gave up
