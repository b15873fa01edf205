"""
Interfaces Package

Abstract interfaces for upload transports and progress observers.
"""

from video_upload.interfaces.progress_reporter_interface import ProgressReporter
from video_upload.interfaces.uploader_interface import UploaderInterface

__all__ = [
    "ProgressReporter",
    "UploaderInterface",
]
