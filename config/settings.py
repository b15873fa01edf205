"""
Central Configuration File

ALL configuration defaults live here. This is the single source of truth.

Guidelines:
- Secrets (client_secret.json, token.json) stay on disk, NOT here
- Deployment-specific values come from .env / environment variables
- Per-deployment overrides can also go in a YAML file (see UploadConfig)
"""

import os
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

CONFIG_DIR = Path(__file__).resolve().parent

# =============================================================================
# CATEGORY CONFIGURATION
# =============================================================================

# Catalog of YouTube video categories (videoCategories.list response)
YOUTUBE_CATEGORIES_PATH = os.getenv(
    "YOUTUBE_CATEGORIES_PATH",
    str(CONFIG_DIR / "youtube-categories.json"),
)

# Category applied to every upload, looked up by title
YOUTUBE_CATEGORY_NAME = os.getenv("YOUTUBE_CATEGORY_NAME", "Science & Technology")

# =============================================================================
# VIDEO METADATA CONFIGURATION
# =============================================================================

# Filename prefix stripped before the timestamp: ouP-2021-02-11_12-27-41.avi
VIDEO_FILENAME_PREFIX = os.getenv("VIDEO_FILENAME_PREFIX", "ouP-")

# Title format: "{VIDEO_TITLE_PREFIX} - YYYY-MM-DD HH:MM:SS"
VIDEO_TITLE_PREFIX = os.getenv("VIDEO_TITLE_PREFIX", "COINBASE PRO")

# {date} is replaced with the recording timestamp
VIDEO_DESCRIPTION_TEMPLATE = (
    "Data Video for AI Machine Learning Training Bot - "
    "COINBASE PRO recording on  {date}"
)

DEFAULT_VIDEO_TAGS = ["Coinbase", "Coinbase Pro"]

# public, private, or unlisted
VIDEO_PRIVACY_STATUS = os.getenv("VIDEO_PRIVACY_STATUS", "unlisted")

# =============================================================================
# UPLOAD CONFIGURATION
# =============================================================================

# "youtube" uploads for real, "mock" is a dry run without network access
UPLOADER_MODE = os.getenv("UPLOADER_MODE", "youtube")

UPLOAD_CHUNK_SIZE = 10 * 1024 * 1024  # 10 MB chunks
UPLOAD_NUM_RETRIES = 3

# Optional YAML file with overrides for any of the values above
UPLOADER_CONFIG_PATH = os.getenv(
    "UPLOADER_CONFIG_PATH",
    str(CONFIG_DIR / "uploader.yaml"),
)

# =============================================================================
# LOGGING CONFIGURATION
# =============================================================================

LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")
LOG_DIR = os.getenv("LOG_DIR", "")  # Empty = console only
LOG_FILE = "uploader.log"

# =============================================================================
# SECRETS (loaded from .env)
# =============================================================================
# IMPORTANT: The files these point to should NEVER be committed!

# YouTube OAuth Configuration (file-based)
YOUTUBE_CLIENT_SECRET_PATH = os.getenv(
    "YOUTUBE_CLIENT_SECRET_PATH",
    "credentials/client_secret.json",
)
YOUTUBE_TOKEN_PATH = os.getenv("YOUTUBE_TOKEN_PATH", "credentials/token.json")

# Google account the consent screen is pre-filled with
YOUTUBE_ACCOUNT_ID = os.getenv("YOUTUBE_ACCOUNT_ID", "")

# Local port for the OAuth redirect (0 = pick a free port)
OAUTH_PORT = int(os.getenv("OAUTH_PORT", "0"))
