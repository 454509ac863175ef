"""
Thumbnail Module

Custom video thumbnail upload for YouTube with OAuth authorization.

Public API:
    - ThumbnailController: Interactive upload coordinator
    - ThumbnailResult: Upload operation result
    - ThumbnailStatus: Status codes
    - UploadState: Resumable upload states
    - create_uploader: Factory function

Usage:
    from thumbnail import ThumbnailController, create_uploader

    controller = ThumbnailController(uploader=create_uploader())
    exit_code = controller.run()
"""

from thumbnail.constants import ThumbnailStatus, UploadState
from thumbnail.controllers.thumbnail_controller import ThumbnailController
from thumbnail.factory import create_uploader
from thumbnail.interfaces.thumbnail_interface import (
    AuthorizationError,
    InputValidationError,
    ThumbnailError,
    ThumbnailResult,
)

# Public API
__all__ = [
    "AuthorizationError",
    "InputValidationError",
    "ThumbnailController",
    "ThumbnailError",
    "ThumbnailResult",
    "ThumbnailStatus",
    "UploadState",
    "create_uploader",
]
