"""
Upload Factory

Factory pattern for creating uploader implementations
from an UploadConfig.
"""

import logging
from typing import Literal, Optional

from video_upload.auth.oauth_manager import OAuthManager
from video_upload.config import UploadConfig
from video_upload.exceptions import ConfigLoadError
from video_upload.implementations.mock_uploader import MockUploader
from video_upload.implementations.youtube_uploader import YouTubeUploader
from video_upload.interfaces.uploader_interface import UploaderInterface

# Type alias
UploaderMode = Literal["youtube", "mock"]


class UploaderFactory:
    """
    Factory for creating uploader implementations.

    Usage:
        # Mode from config (UPLOADER_MODE)
        uploader = UploaderFactory.create_uploader(config)

        # Force mock for testing
        uploader = UploaderFactory.create_uploader(config, mode="mock")
    """

    _logger = logging.getLogger(__name__)

    @classmethod
    def create_uploader(
        cls,
        config: Optional[UploadConfig] = None,
        mode: Optional[UploaderMode] = None,
    ) -> UploaderInterface:
        """
        Create an uploader instance.

        Args:
            config: Upload configuration (None = defaults from environment)
            mode: "youtube" or "mock" (None = config.uploader_mode)

        Returns:
            UploaderInterface implementation

        Raises:
            ConfigLoadError: If the mode is unknown or the client secret is missing
        """
        if config is None:
            config = UploadConfig()
        mode = mode or config.uploader_mode

        if mode == "mock":
            cls._logger.info("Creating Mock Uploader")
            return MockUploader(chunk_size=config.chunk_size)

        if mode == "youtube":
            cls._logger.info("Creating YouTube Uploader")
            return cls._create_youtube_uploader(config)

        raise ConfigLoadError(
            f"Unknown uploader mode: {mode!r}. Expected 'youtube' or 'mock'"
        )

    @classmethod
    def _create_youtube_uploader(cls, config: UploadConfig) -> YouTubeUploader:
        """
        Create YouTube uploader from configuration.

        Nothing is contacted yet; authentication happens on first use.
        """
        oauth_manager = OAuthManager(
            client_secret_path=config.client_secret_path,
            token_path=config.token_path,
            account_id=config.account_id,
            port=config.oauth_port,
        )

        return YouTubeUploader(
            oauth_manager=oauth_manager,
            chunk_size=config.chunk_size,
            num_retries=config.num_retries,
        )


# Convenience function for quick creation
def create_uploader(
    config: Optional[UploadConfig] = None,
    force_mock: bool = False,
) -> UploaderInterface:
    """
    Quick uploader creation with simple mock override.

    Args:
        config: Upload configuration (None = defaults)
        force_mock: If True, always use mock

    Example:
        uploader = create_uploader()
        uploader = create_uploader(force_mock=True)
    """
    mode = "mock" if force_mock else None
    return UploaderFactory.create_uploader(config=config, mode=mode)
