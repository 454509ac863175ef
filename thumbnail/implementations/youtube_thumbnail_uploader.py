"""
YouTube Thumbnail Uploader Implementation

Concrete implementation of ThumbnailUploaderInterface for YouTube API v3.
Sets custom video thumbnails with the resumable upload protocol.
"""

import logging
import os
import time
from typing import Any, Dict, Optional

import httplib2
from google.oauth2.credentials import Credentials
from google_auth_httplib2 import AuthorizedHttp
from googleapiclient.discovery import build
from googleapiclient.errors import HttpError
from googleapiclient.http import MediaIoBaseUpload, set_user_agent

from thumbnail.constants import (
    APPLICATION_NAME,
    CHUNK_SIZE_UNIT,
    IMAGE_FILE_FORMAT,
    YOUTUBE_API_SERVICE_NAME,
    YOUTUBE_API_VERSION,
    ThumbnailStatus,
    UploadState,
)
from thumbnail.interfaces.thumbnail_interface import (
    ProgressCallback,
    ThumbnailError,
    ThumbnailResult,
    ThumbnailUploaderInterface,
)


def build_youtube_service(
    credentials: Credentials,
    application_name: str = APPLICATION_NAME,
) -> Any:
    """
    Build an authenticated YouTube API client.

    Args:
        credentials: OAuth credentials from OAuthManager.authorize()
        application_name: Sent as the User-Agent of every request

    Returns:
        YouTube Data API v3 resource

    Example:
        credentials = oauth.authorize(YOUTUBE_SCOPES, CREDENTIAL_DATASTORE)
        youtube = build_youtube_service(credentials)
    """
    http = AuthorizedHttp(credentials, http=httplib2.Http())
    http = set_user_agent(http, application_name)

    return build(
        YOUTUBE_API_SERVICE_NAME,
        YOUTUBE_API_VERSION,
        http=http,
        cache_discovery=False,
    )


class YouTubeThumbnailUploader(ThumbnailUploaderInterface):
    """
    YouTube thumbnail uploader using YouTube Data API v3.

    Features:
    - Resumable uploads (handles network interruptions)
    - Progress reporting for every upload state
    - API and I/O errors reported as ThumbnailResult
    """

    def __init__(
        self,
        youtube_service: Any,
        chunk_size: int = 4 * CHUNK_SIZE_UNIT,
    ):
        """
        Initialize YouTube thumbnail uploader.

        Args:
            youtube_service: Client from build_youtube_service()
            chunk_size: Resumable chunk size in bytes (multiple of 256 KB)

        Raises:
            ValueError: If chunk_size is not a positive multiple of 256 KB

        Example:
            youtube = build_youtube_service(credentials)
            uploader = YouTubeThumbnailUploader(youtube)
        """
        self.logger = logging.getLogger(__name__)

        if chunk_size <= 0 or chunk_size % CHUNK_SIZE_UNIT != 0:
            raise ValueError(
                f"Chunk size must be a positive multiple of {CHUNK_SIZE_UNIT} bytes, "
                f"got {chunk_size}",
            )

        self.youtube_service = youtube_service
        self.chunk_size = chunk_size

        self.logger.info("YouTube Thumbnail Uploader initialized")

    def set_thumbnail(
        self,
        video_id: str,
        image_path: str,
        progress_callback: Optional[ProgressCallback] = None,
    ) -> ThumbnailResult:
        """
        Upload an image as the video's thumbnail.

        The image is always declared as image/png and sent in resumable
        chunks of self.chunk_size bytes.

        Args:
            video_id: ID of the video being updated
            image_path: Path to the image file
            progress_callback: Observer for upload state transitions

        Returns:
            ThumbnailResult with the "default" thumbnail URL
        """
        start_time = time.time()
        file_size = 0
        notify = progress_callback or _ignore_progress

        try:
            with open(image_path, "rb") as image_file:
                file_size = os.fstat(image_file.fileno()).st_size

                self.logger.info(
                    f"Starting thumbnail upload: {image_path} ({file_size} bytes) "
                    f"for video {video_id}",
                )

                media = MediaIoBaseUpload(
                    image_file,
                    mimetype=IMAGE_FILE_FORMAT,
                    chunksize=self.chunk_size,
                    resumable=True,
                )

                request = self.youtube_service.thumbnails().set(
                    videoId=video_id,
                    media_body=media,
                )

                response = self._execute_upload(request, notify)

            thumbnail_url = self._extract_default_url(response)
            upload_duration = time.time() - start_time

            self.logger.info(
                f"✅ Thumbnail set: {thumbnail_url} ({upload_duration:.1f}s)",
            )

            return ThumbnailResult(
                success=True,
                video_id=video_id,
                thumbnail_url=thumbnail_url,
                status=ThumbnailStatus.SUCCESS,
                file_size=file_size,
                upload_duration=upload_duration,
            )

        except HttpError as e:
            # YouTube API errors
            upload_duration = time.time() - start_time
            self.logger.info(f"YouTube API error {e.resp.status}: {e.reason}")

            return ThumbnailResult(
                success=False,
                video_id=video_id,
                status=ThumbnailStatus.API_ERROR,
                error_code=e.resp.status,
                error_message=e.reason,
                file_size=file_size,
                upload_duration=upload_duration,
                exception=e,
            )

        except ThumbnailError as e:
            upload_duration = time.time() - start_time
            self.logger.info(f"Thumbnail upload failed: {e}")

            return ThumbnailResult(
                success=False,
                video_id=video_id,
                status=e.status,
                error_message=str(e),
                file_size=file_size,
                upload_duration=upload_duration,
                exception=e,
            )

        except OSError as e:
            # File or network I/O errors
            upload_duration = time.time() - start_time
            self.logger.info(f"I/O error during thumbnail upload: {e}")

            return ThumbnailResult(
                success=False,
                video_id=video_id,
                status=ThumbnailStatus.IO_ERROR,
                error_message=str(e),
                file_size=file_size,
                upload_duration=upload_duration,
                exception=e,
            )

    def _execute_upload(self, request, notify: ProgressCallback) -> Dict[str, Any]:
        """
        Drive the resumable upload to completion.

        The first next_chunk() call sends the initiation request, later
        calls send media chunks. Errors are not retried.

        Args:
            request: thumbnails().set request
            notify: Progress callback

        Returns:
            ThumbnailSetResponse as a dict
        """
        response = None
        initiated = False

        notify(UploadState.NOT_STARTED, 0.0)

        while response is None:
            if not initiated:
                notify(UploadState.INITIATION_STARTED, 0.0)

            status, response = request.next_chunk()

            if not initiated:
                initiated = True
                notify(UploadState.INITIATION_COMPLETE, 0.0)

            if status:
                progress = status.progress()
                self.logger.debug(f"Upload progress: {progress:.0%}")
                notify(UploadState.MEDIA_IN_PROGRESS, progress)

        notify(UploadState.MEDIA_COMPLETE, 1.0)
        return response

    def _extract_default_url(self, response: Dict[str, Any]) -> str:
        """
        Get the "default" variant URL of the first returned thumbnail.

        Raises:
            ThumbnailError: If the response holds no thumbnail
        """
        items = response.get("items") or []
        if not items:
            raise ThumbnailError(
                "Upload completed but no thumbnail returned",
                status=ThumbnailStatus.EMPTY_RESPONSE,
            )

        url = items[0].get("default", {}).get("url")
        if not url:
            raise ThumbnailError(
                "Upload completed but no default thumbnail URL returned",
                status=ThumbnailStatus.EMPTY_RESPONSE,
            )

        return url

    def is_available(self) -> bool:
        """
        Check if uploader is ready.

        Returns:
            True if a YouTube service is attached
        """
        return self.youtube_service is not None


def _ignore_progress(state: UploadState, fraction: float) -> None:
    """Default progress callback"""
