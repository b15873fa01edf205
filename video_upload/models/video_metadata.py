"""
Video Metadata Model

Metadata sent with a videos.insert request.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Tuple

from video_upload.constants import PrivacyStatus


@dataclass(frozen=True)
class VideoMetadata:
    """
    Title, description, tags, category and visibility of one upload.

    Built once per run from the filename and config; never mutated.
    """

    title: str
    description: str
    category_id: str
    tags: Tuple[str, ...] = field(default_factory=tuple)
    privacy_status: PrivacyStatus = PrivacyStatus.UNLISTED

    def __post_init__(self):
        """Freeze tags even when a list is passed"""
        object.__setattr__(self, "tags", tuple(self.tags))

    def to_request_body(self) -> Dict[str, Any]:
        """
        Render the videos.insert request body.

        Returns:
            {"snippet": {...}, "status": {"privacyStatus": ...}}
        """
        return {
            "snippet": {
                "title": self.title,
                "description": self.description,
                "tags": list(self.tags),
                "categoryId": self.category_id,
            },
            "status": {
                "privacyStatus": self.privacy_status.value,
            },
        }
