"""
Filename Utilities

Recording timestamps are embedded in video filenames:

    ouP-2021-02-11_12-27-41.avi  ->  2021-02-11 12:27:41
"""

import os
import re
from datetime import datetime
from pathlib import Path
from typing import Union

from video_upload.constants import (
    DEFAULT_FILENAME_PREFIX,
    FILENAME_DATE_FORMAT,
    FILENAME_DATE_PATTERN,
    TITLE_DATE_FORMAT,
)
from video_upload.exceptions import DateParseError

_DATE_RE = re.compile(FILENAME_DATE_PATTERN)


def strip_prefix(stem: str, prefix: str = DEFAULT_FILENAME_PREFIX) -> str:
    """Remove ``prefix`` from the start of ``stem`` if present"""
    if prefix and stem.startswith(prefix):
        return stem[len(prefix):]
    return stem


def parse_video_date(
    file_path: Union[str, Path],
    prefix: str = DEFAULT_FILENAME_PREFIX,
) -> datetime:
    """
    Extract the recording timestamp from a video filename.

    Args:
        file_path: Path or bare filename of the video
        prefix: Literal token stripped from the start of the name (optional)

    Returns:
        Naive datetime of the recording

    Raises:
        DateParseError: If the name is not exactly YYYY-MM-DD_hh-mm-ss
            (after the prefix) or a field is out of range

    Example:
        parse_video_date("/videos/ouP-2021-02-11_12-27-41.avi")
        # datetime(2021, 2, 11, 12, 27, 41)
    """
    stem = os.path.splitext(os.path.basename(str(file_path)))[0]
    value = strip_prefix(stem, prefix)

    # strptime alone accepts unpadded fields ("2021-2-1_1-2-3")
    if not _DATE_RE.fullmatch(value):
        raise DateParseError(
            f"Filename '{stem}' does not match "
            f"'{prefix}YYYY-MM-DD_hh-mm-ss'"
        )

    try:
        return datetime.strptime(value, FILENAME_DATE_FORMAT)
    except ValueError as e:
        raise DateParseError(f"Invalid timestamp in filename '{stem}': {e}") from e


def format_video_date(date: datetime, prefix: str = "") -> str:
    """Render a timestamp in the filename convention (inverse of parse)"""
    return f"{prefix}{date.strftime(FILENAME_DATE_FORMAT)}"


def format_title_date(date: datetime) -> str:
    """Timestamp as shown in titles: 2021-02-11 12:27:41"""
    return date.strftime(TITLE_DATE_FORMAT)
