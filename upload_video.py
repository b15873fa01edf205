#!/usr/bin/env python3
"""
YouTube Video Upload

Uploads one recording to YouTube. Title, description and category are
derived from the filename (ouP-YYYY-MM-DD_hh-mm-ss.ext) and config.

Usage:
    python upload_video.py /path/to/ouP-2021-02-11_12-27-41.avi

Requirements:
    1. client_secret.json from Google Cloud Console
    2. .env file with YOUTUBE_CLIENT_SECRET_PATH, YOUTUBE_TOKEN_PATH
       and YOUTUBE_ACCOUNT_ID
    3. The first run opens a browser for consent; the token is cached
"""

import argparse
import logging
import logging.handlers
import sys
from pathlib import Path
from typing import List, Optional

from config import settings
from video_upload.catalog.category_catalog import (
    CategoryCatalog,
    get_category_catalog,
)
from video_upload.config import UploadConfig
from video_upload.constants import EXIT_FAILURE, EXIT_SUCCESS
from video_upload.controllers.upload_controller import UploadController
from video_upload.exceptions import UsageError, VideoUploadError
from video_upload.factory import create_uploader
from video_upload.interfaces.uploader_interface import UploaderInterface

logger = logging.getLogger(__name__)


def setup_logging(level: str = "WARNING", log_dir: Optional[Path] = None) -> None:
    """
    Setup logging.

    Logs go to stderr so stdout only carries upload progress.
    With a log directory, also logs to a file rotated daily (7 days kept).
    """
    root = logging.getLogger()
    root.setLevel(logging.DEBUG)

    log_format = logging.Formatter("%(message)s | %(name)s")

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(log_format)
    root.addHandler(console_handler)

    if log_dir is None:
        return

    try:
        log_dir.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.TimedRotatingFileHandler(
            str(log_dir / settings.LOG_FILE),
            when="midnight",
            interval=1,
            backupCount=7,
            encoding="utf-8",
        )
    except OSError as e:
        logger.warning(f"Cannot write logs to {log_dir}: {e}")
        return

    file_handler.setLevel(logging.INFO)
    file_handler.setFormatter(log_format)
    root.addHandler(file_handler)


def parse_args(argv: Optional[List[str]]) -> Path:
    """
    Parse the single positional argument.

    Raises:
        UsageError: If no file name was given or the file does not exist
    """
    parser = argparse.ArgumentParser(
        description="Upload a video to YouTube with metadata from its filename",
    )
    parser.add_argument("file", nargs="?", help="Path to the video file")
    args = parser.parse_args(argv)

    if not args.file:
        raise UsageError("You must specify a file name")

    video_path = Path(args.file)
    if not video_path.is_file():
        raise UsageError(f"File does not exist {args.file}")

    return video_path


def run(
    argv: Optional[List[str]] = None,
    config: Optional[UploadConfig] = None,
    uploader: Optional[UploaderInterface] = None,
    catalog: Optional[CategoryCatalog] = None,
) -> int:
    """
    Run one upload and return the process exit code.

    Collaborators can be injected (tests); by default they are built
    from the environment.
    """
    try:
        video_path = parse_args(argv)

        print("YouTube Data API: Upload Video")
        print("==============================")

        if config is None:
            config = UploadConfig()
        if catalog is None:
            catalog = get_category_catalog(config.categories_path)
        if uploader is None:
            uploader = create_uploader(config)

        controller = UploadController(uploader=uploader, catalog=catalog, config=config)
        controller.upload_video(video_path)
        return EXIT_SUCCESS

    except VideoUploadError as e:
        for message in getattr(e, "errors", None) or [str(e)]:
            print(f"Error: {message}")
        logger.debug("Upload aborted", exc_info=True)
        return e.exit_code


def main() -> None:
    """
    Main entry point.

    Sets up logging and runs the upload.
    """
    try:
        config = UploadConfig()
    except VideoUploadError as e:
        print(f"Error: {e}")
        sys.exit(e.exit_code)

    setup_logging(config.log_level, config.log_dir)

    try:
        exit_code = run(sys.argv[1:], config=config)
    except Exception as e:
        logger.critical(f"Fatal error in main: {e}", exc_info=True)
        sys.exit(EXIT_FAILURE)

    sys.exit(exit_code)


if __name__ == "__main__":
    main()
