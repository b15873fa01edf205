"""
Implementations Package

Concrete transports and progress reporters.
"""

from video_upload.implementations.console_reporter import ConsoleProgressReporter
from video_upload.implementations.mock_uploader import MockUploader
from video_upload.implementations.youtube_uploader import YouTubeUploader

__all__ = [
    "ConsoleProgressReporter",
    "MockUploader",
    "YouTubeUploader",
]
