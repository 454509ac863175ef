"""
Thumbnail Uploader Interface

Abstract interface for thumbnail upload implementations.
High-level code depends on this abstraction, not on the concrete
YouTube API implementation.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, Optional

from thumbnail.constants import ThumbnailStatus, UploadState

# Called on every upload state transition.
# The fraction is only meaningful for MEDIA_IN_PROGRESS.
ProgressCallback = Callable[[UploadState, float], None]


@dataclass
class ThumbnailResult:
    """
    Result of a thumbnail upload.

    Attributes:
        success: True if the thumbnail was set
        video_id: Video the thumbnail was uploaded for
        thumbnail_url: URL of the "default" thumbnail variant (if successful)
        status: Thumbnail status code
        error_code: HTTP status returned by the API (API errors only)
        error_message: Error description (if failed)
        file_size: Size of the uploaded image in bytes
        upload_duration: Time taken to upload in seconds
        exception: Exception behind a failure, logged with its trace by the caller
    """

    success: bool
    video_id: Optional[str] = None
    thumbnail_url: Optional[str] = None
    status: ThumbnailStatus = ThumbnailStatus.SUCCESS
    error_code: Optional[int] = None
    error_message: Optional[str] = None
    file_size: int = 0
    upload_duration: float = 0.0
    exception: Optional[BaseException] = None


class ThumbnailUploaderInterface(ABC):
    """
    Abstract base class for thumbnail uploaders.

    Implementations report failures through ThumbnailResult rather than
    raising, so callers only have to inspect the returned status.
    """

    @abstractmethod
    def set_thumbnail(
        self,
        video_id: str,
        image_path: str,
        progress_callback: Optional[ProgressCallback] = None,
    ) -> ThumbnailResult:
        """
        Upload an image and set it as the video's custom thumbnail.

        Args:
            video_id: ID of the video being updated
            image_path: Path to the image file
            progress_callback: Observer for upload state transitions

        Returns:
            ThumbnailResult with success status and thumbnail URL

        Example:
            result = uploader.set_thumbnail("dQw4w9WgXcQ", "thumb.png")
            if result.success:
                print(result.thumbnail_url)
        """

    @abstractmethod
    def is_available(self) -> bool:
        """
        Check if uploader is ready to upload.

        Returns:
            True if the uploader holds an authenticated client
        """


class ThumbnailError(Exception):
    """
    Exception raised for thumbnail-related errors.

    Examples:
    - Empty user input
    - Authorization failed
    - API returned no thumbnail
    """

    def __init__(self, message: str, status: ThumbnailStatus = ThumbnailStatus.IO_ERROR):
        super().__init__(message)
        self.status = status


class InputValidationError(ThumbnailError):
    """Raised when a required console value is empty"""

    def __init__(self, message: str):
        super().__init__(message, status=ThumbnailStatus.INVALID_INPUT)


class AuthorizationError(ThumbnailError, OSError):
    """Raised when OAuth credentials cannot be obtained"""

    def __init__(self, message: str):
        super().__init__(message, status=ThumbnailStatus.AUTH_ERROR)
