"""
Thumbnail Uploader Factory

Factory pattern for creating uploader implementations.
Configuration comes from config/settings.py (which loads .env).
"""

import logging
from typing import Literal, Optional

from config import settings
from thumbnail.auth.oauth_manager import OAuthManager
from thumbnail.constants import CREDENTIAL_DATASTORE, YOUTUBE_SCOPES
from thumbnail.implementations.mock_thumbnail_uploader import MockThumbnailUploader
from thumbnail.implementations.youtube_thumbnail_uploader import (
    YouTubeThumbnailUploader,
    build_youtube_service,
)
from thumbnail.interfaces.thumbnail_interface import (
    AuthorizationError,
    ThumbnailUploaderInterface,
)

# Type alias
UploaderMode = Literal["youtube", "mock"]


class ThumbnailUploaderFactory:
    """
    Factory for creating thumbnail uploader implementations.

    Reads configuration from settings:
    - YOUTUBE_CLIENT_SECRET_PATH: Path to client_secrets.json
    - YOUTUBE_CREDENTIALS_DIR: Directory of stored OAuth tokens
    - OAUTH_CALLBACK_PORT: Local port for the browser flow
    - THUMBNAIL_CHUNK_SIZE: Resumable upload chunk size

    Usage:
        # Real uploader (runs OAuth if needed)
        uploader = ThumbnailUploaderFactory.create_uploader(mode="youtube")

        # Force mock for testing
        uploader = ThumbnailUploaderFactory.create_uploader(mode="mock")
    """

    _logger = logging.getLogger(__name__)

    @classmethod
    def create_uploader(
        cls,
        mode: UploaderMode = "youtube",
        oauth_manager: Optional[OAuthManager] = None,
    ) -> ThumbnailUploaderInterface:
        """
        Create an uploader instance.

        Args:
            mode: "youtube" (real) or "mock" (simulated, explicit opt-in only)
            oauth_manager: Override the OAuthManager built from settings

        Returns:
            ThumbnailUploaderInterface implementation

        Raises:
            AuthorizationError: If mode="youtube" and authorization fails
            RuntimeError: If mode="youtube" and the client cannot be built
            ValueError: If mode is unknown
        """
        if mode == "mock":
            cls._logger.info("Creating Mock Thumbnail Uploader (forced)")
            return MockThumbnailUploader()

        if mode == "youtube":
            try:
                uploader = cls._create_youtube_uploader(oauth_manager)
            except AuthorizationError:
                raise
            except Exception as e:
                raise RuntimeError(
                    f"YouTube uploader requested but not available: {e}",
                ) from e
            cls._logger.info("Creating YouTube Thumbnail Uploader (forced)")
            return uploader

        raise ValueError(f"Unknown uploader mode: {mode}")

    @classmethod
    def _create_youtube_uploader(
        cls,
        oauth_manager: Optional[OAuthManager] = None,
    ) -> YouTubeThumbnailUploader:
        """
        Authorize and build the YouTube uploader.

        Returns:
            Configured YouTubeThumbnailUploader

        Raises:
            AuthorizationError: If credentials cannot be obtained
        """
        oauth = oauth_manager or OAuthManager(
            client_secret_path=settings.YOUTUBE_CLIENT_SECRET_PATH,
            credentials_dir=settings.YOUTUBE_CREDENTIALS_DIR,
            port=settings.OAUTH_CALLBACK_PORT,
        )

        credentials = oauth.authorize(YOUTUBE_SCOPES, CREDENTIAL_DATASTORE)
        youtube_service = build_youtube_service(credentials)

        return YouTubeThumbnailUploader(
            youtube_service=youtube_service,
            chunk_size=settings.THUMBNAIL_CHUNK_SIZE,
        )


# Convenience function for quick creation
def create_uploader(force_mock: bool = False) -> ThumbnailUploaderInterface:
    """
    Quick uploader creation with simple mock override.

    Args:
        force_mock: If True, always use mock

    Returns:
        ThumbnailUploaderInterface

    Example:
        uploader = create_uploader()
        uploader = create_uploader(force_mock=True)
    """
    mode = "mock" if force_mock else settings.THUMBNAIL_UPLOADER_MODE
    return ThumbnailUploaderFactory.create_uploader(mode=mode)
