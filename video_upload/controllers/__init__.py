"""
Controllers Package

High-level upload coordinators.
"""

from video_upload.controllers.upload_controller import UploadController

__all__ = [
    "UploadController",
]
