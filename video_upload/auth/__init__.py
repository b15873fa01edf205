"""
Authentication Package

OAuth 2.0 authentication for YouTube API.
"""

from video_upload.auth.oauth_manager import OAuthManager

__all__ = [
    "OAuthManager",
]
