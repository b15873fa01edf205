"""
Console Progress Reporter

Prints upload progress to a text stream (stdout by default):

    250000 bytes sent. (25.00%)
    Video id 'abc123' was successfully uploaded.
"""

import logging
import sys
from typing import List, Optional, TextIO

from video_upload.constants import UploadStatus
from video_upload.interfaces.progress_reporter_interface import ProgressReporter


class ConsoleProgressReporter(ProgressReporter):
    """
    Renders every transport event as one console line.

    Attributes:
        percentages: Fractions printed so far, in order
        resource_id: Video ID once the upload completed
        errors: Failure details received
    """

    def __init__(self, stream: Optional[TextIO] = None):
        super().__init__()
        self.logger = logging.getLogger(__name__)
        self.stream = stream
        self.percentages: List[float] = []
        self.resource_id: Optional[str] = None
        self.errors: List[str] = []

    def _print(self, message: str) -> None:
        # Resolved per call so a redirected sys.stdout is honoured
        print(message, file=self.stream or sys.stdout, flush=True)

    def on_progress(
        self,
        status: UploadStatus,
        bytes_sent: int,
        error: Optional[str] = None,
    ) -> None:
        if status == UploadStatus.UPLOADING:
            fraction = self.fraction(bytes_sent)
            self.percentages.append(fraction)
            self._print(f"{bytes_sent} bytes sent. ({fraction:.2%})")

        elif status == UploadStatus.FAILED:
            self.errors.append(error or "")
            self._print(f"An error prevented the upload from completing.\n{error}")
            self.logger.debug(f"Upload failed after {bytes_sent} bytes: {error}")

    def on_complete(self, resource_id: str) -> None:
        self.resource_id = resource_id
        self._print(f"Video id '{resource_id}' was successfully uploaded.")
