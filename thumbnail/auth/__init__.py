"""
Authentication Package

OAuth 2.0 authorization for the YouTube Data API.
"""

from thumbnail.auth.oauth_manager import OAuthManager

__all__ = [
    "OAuthManager",
]
