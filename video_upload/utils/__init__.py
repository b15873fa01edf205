"""
Utils Package

Helper functions for the upload module.
"""

from video_upload.utils.filename_utils import (
    format_title_date,
    format_video_date,
    parse_video_date,
)

__all__ = [
    "format_title_date",
    "format_video_date",
    "parse_video_date",
]
