"""
Upload Configuration Handler

Collects the deployment-specific inputs of an upload run.
Defaults come from config/settings.py (environment / .env),
an optional YAML file overrides them, and keyword overrides win last.
"""

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from config import settings
from video_upload.constants import CHUNK_SIZE_MULTIPLE, PrivacyStatus
from video_upload.exceptions import ConfigLoadError


class UploadConfig:
    """
    Upload configuration with YAML file support.

    Usage:
        config = UploadConfig()
        category = config.category_name

        # Tests / scripts
        config = UploadConfig(config_path=Path("none.yaml"), title_prefix="TEST")
    """

    def __init__(self, config_path: Optional[Path] = None, **overrides: Any):
        """
        Initialize configuration.

        Args:
            config_path: Path to YAML config file (None = UPLOADER_CONFIG_PATH)
            **overrides: Values that take precedence over file and defaults

        Raises:
            ConfigLoadError: If the YAML file is malformed or a value is invalid
        """
        self.logger = logging.getLogger(__name__)
        self.config_path = Path(config_path or settings.UPLOADER_CONFIG_PATH)

        unknown = set(overrides) - set(self._get_defaults())
        if unknown:
            raise ConfigLoadError(f"Unknown config keys: {sorted(unknown)}")

        self._config = self._load_config()
        self._config.update(overrides)
        self._validate_config(self._config)

        self.logger.debug(f"Upload config loaded ({self.config_path})")

    def _get_defaults(self) -> Dict[str, Any]:
        """Get default configuration values from settings"""
        return {
            # Auth
            "client_secret_path": settings.YOUTUBE_CLIENT_SECRET_PATH,
            "token_path": settings.YOUTUBE_TOKEN_PATH,
            "account_id": settings.YOUTUBE_ACCOUNT_ID,
            "oauth_port": settings.OAUTH_PORT,
            # Category
            "categories_path": settings.YOUTUBE_CATEGORIES_PATH,
            "category_name": settings.YOUTUBE_CATEGORY_NAME,
            # Metadata
            "filename_prefix": settings.VIDEO_FILENAME_PREFIX,
            "title_prefix": settings.VIDEO_TITLE_PREFIX,
            "description_template": settings.VIDEO_DESCRIPTION_TEMPLATE,
            "tags": list(settings.DEFAULT_VIDEO_TAGS),
            "privacy_status": settings.VIDEO_PRIVACY_STATUS,
            # Upload
            "uploader_mode": settings.UPLOADER_MODE,
            "chunk_size": settings.UPLOAD_CHUNK_SIZE,
            "num_retries": settings.UPLOAD_NUM_RETRIES,
            # Logging
            "log_level": settings.LOG_LEVEL,
            "log_dir": settings.LOG_DIR,
        }

    def _load_config(self) -> Dict[str, Any]:
        """Load configuration from YAML file on top of defaults"""
        config = self._get_defaults()

        if not self.config_path.exists():
            self.logger.debug(
                f"Config file not found at {self.config_path}. Using defaults."
            )
            return config

        try:
            with open(self.config_path, "r", encoding="utf-8") as f:
                file_config = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigLoadError(
                f"Failed to load config from {self.config_path}: {e}"
            ) from e

        if not isinstance(file_config, dict):
            raise ConfigLoadError(
                f"Config file {self.config_path} must contain a mapping"
            )

        unknown = set(file_config) - set(config)
        if unknown:
            self.logger.warning(
                f"Ignoring unknown keys in {self.config_path}: {sorted(unknown)}"
            )

        config.update({k: v for k, v in file_config.items() if k in config})
        self.logger.info(f"Loaded config from {self.config_path}")
        return config

    def _validate_config(self, config: Dict[str, Any]) -> None:
        """Validate configuration values"""
        try:
            PrivacyStatus(config["privacy_status"])
        except ValueError as e:
            raise ConfigLoadError(
                f"Invalid privacy_status: {config['privacy_status']!r}. "
                f"Expected one of {[s.value for s in PrivacyStatus]}"
            ) from e

        chunk_size = config["chunk_size"]
        if (
            isinstance(chunk_size, bool)
            or not isinstance(chunk_size, int)
            or chunk_size <= 0
            or chunk_size % CHUNK_SIZE_MULTIPLE
        ):
            raise ConfigLoadError(
                f"chunk_size must be a positive multiple of "
                f"{CHUNK_SIZE_MULTIPLE} bytes, got {chunk_size!r}"
            )

        if not config["category_name"]:
            raise ConfigLoadError("category_name cannot be empty")

        if not isinstance(config["tags"], list):
            raise ConfigLoadError("tags must be a list of strings")

    # =========================================================================
    # PROPERTY ACCESSORS
    # =========================================================================

    @property
    def client_secret_path(self) -> Path:
        return Path(self._config["client_secret_path"])

    @property
    def token_path(self) -> Path:
        return Path(self._config["token_path"])

    @property
    def account_id(self) -> str:
        """Google account hint for the consent screen"""
        return self._config["account_id"]

    @property
    def oauth_port(self) -> int:
        return int(self._config["oauth_port"])

    @property
    def categories_path(self) -> Path:
        return Path(self._config["categories_path"])

    @property
    def category_name(self) -> str:
        return self._config["category_name"]

    @property
    def filename_prefix(self) -> str:
        return self._config["filename_prefix"]

    @property
    def title_prefix(self) -> str:
        return self._config["title_prefix"]

    @property
    def description_template(self) -> str:
        return self._config["description_template"]

    @property
    def tags(self) -> List[str]:
        return [str(tag) for tag in self._config["tags"]]

    @property
    def privacy_status(self) -> PrivacyStatus:
        return PrivacyStatus(self._config["privacy_status"])

    @property
    def uploader_mode(self) -> str:
        return self._config["uploader_mode"]

    @property
    def chunk_size(self) -> int:
        return self._config["chunk_size"]

    @property
    def num_retries(self) -> int:
        return int(self._config["num_retries"])

    @property
    def log_level(self) -> str:
        return str(self._config["log_level"]).upper()

    @property
    def log_dir(self) -> Optional[Path]:
        """Directory for rotating log files, or None for console only"""
        return Path(self._config["log_dir"]) if self._config["log_dir"] else None

    # =========================================================================
    # UTILITY METHODS
    # =========================================================================

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value by key"""
        return self._config.get(key, default)

    def as_dict(self) -> Dict[str, Any]:
        """Copy of the effective configuration"""
        return dict(self._config)
