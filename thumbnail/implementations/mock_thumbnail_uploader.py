"""
Mock Thumbnail Uploader Implementation

Simulated uploader for testing without the YouTube API.
"""

import logging
import os
import time
from typing import Optional

from thumbnail.constants import ThumbnailStatus, UploadState
from thumbnail.interfaces.thumbnail_interface import (
    ProgressCallback,
    ThumbnailResult,
    ThumbnailUploaderInterface,
)

MOCK_THUMBNAIL_URL = "https://i.ytimg.com/vi/{video_id}/default.jpg"


class MockThumbnailUploader(ThumbnailUploaderInterface):
    """
    Mock thumbnail uploader for testing.

    Reads the image for real and walks through the full upload state
    sequence, but never touches the network.
    Useful for:
    - Unit tests
    - Development without YouTube credentials
    - CI/CD pipelines
    """

    def __init__(
        self,
        chunk_count: int = 2,
        fail_status: Optional[ThumbnailStatus] = None,
        fail_code: Optional[int] = None,
        fail_message: str = "Simulated upload failure",
    ):
        """
        Initialize mock uploader.

        Args:
            chunk_count: Number of simulated MEDIA_IN_PROGRESS steps
            fail_status: If set, every upload fails with this status
            fail_code: Error code reported with fail_status
            fail_message: Error message reported with fail_status

        Example:
            # Always succeeds
            uploader = MockThumbnailUploader()

            # Test API error handling
            uploader = MockThumbnailUploader(
                fail_status=ThumbnailStatus.API_ERROR,
                fail_code=403,
                fail_message="forbidden",
            )
        """
        self.logger = logging.getLogger(__name__)
        self.chunk_count = max(chunk_count, 1)
        self.fail_status = fail_status
        self.fail_code = fail_code
        self.fail_message = fail_message

        # Track upload history for testing
        self.upload_history: list[dict] = []

        self.logger.info(
            f"Mock Thumbnail Uploader initialized (fail_status: {fail_status})",
        )

    def set_thumbnail(
        self,
        video_id: str,
        image_path: str,
        progress_callback: Optional[ProgressCallback] = None,
    ) -> ThumbnailResult:
        """Simulate a thumbnail upload"""
        start_time = time.time()
        file_size = 0

        try:
            with open(image_path, "rb") as image_file:
                file_size = os.fstat(image_file.fileno()).st_size
        except OSError as e:
            self.logger.info(f"[MOCK] Cannot read image: {e}")
            return ThumbnailResult(
                success=False,
                video_id=video_id,
                status=ThumbnailStatus.IO_ERROR,
                error_message=str(e),
                exception=e,
            )

        self.logger.info(
            f"[MOCK] Starting thumbnail upload: {image_path} ({file_size} bytes)",
        )

        if self.fail_status is not None:
            self.logger.info(f"[MOCK] Upload failed: {self.fail_message}")
            return ThumbnailResult(
                success=False,
                video_id=video_id,
                status=self.fail_status,
                error_code=self.fail_code,
                error_message=self.fail_message,
                file_size=file_size,
                upload_duration=time.time() - start_time,
            )

        if progress_callback:
            progress_callback(UploadState.NOT_STARTED, 0.0)
            progress_callback(UploadState.INITIATION_STARTED, 0.0)
            progress_callback(UploadState.INITIATION_COMPLETE, 0.0)
            for chunk in range(1, self.chunk_count):
                progress_callback(
                    UploadState.MEDIA_IN_PROGRESS,
                    chunk / self.chunk_count,
                )
            progress_callback(UploadState.MEDIA_COMPLETE, 1.0)

        thumbnail_url = MOCK_THUMBNAIL_URL.format(video_id=video_id)

        self.upload_history.append(
            {
                "video_id": video_id,
                "image_path": image_path,
                "file_size": file_size,
                "thumbnail_url": thumbnail_url,
                "timestamp": time.time(),
            },
        )

        upload_duration = time.time() - start_time
        self.logger.info(f"[MOCK] ✅ Thumbnail set: {thumbnail_url}")

        return ThumbnailResult(
            success=True,
            video_id=video_id,
            thumbnail_url=thumbnail_url,
            status=ThumbnailStatus.SUCCESS,
            file_size=file_size,
            upload_duration=upload_duration,
        )

    def is_available(self) -> bool:
        """Mock uploader is always available"""
        return True

    # =========================================================================
    # TESTING HELPER METHODS
    # =========================================================================

    def get_upload_history(self) -> list[dict]:
        """
        Get list of all uploads performed.

        Returns:
            List of upload records
        """
        return self.upload_history.copy()

    def get_last_upload(self) -> Optional[dict]:
        """Most recent upload record, or None"""
        return self.upload_history[-1] if self.upload_history else None

    def clear_history(self) -> None:
        """Clear upload history"""
        self.upload_history.clear()
        self.logger.debug("[MOCK] Upload history cleared")
