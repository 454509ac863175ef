"""
Thumbnail Controller

High-level coordinator for the interactive thumbnail upload.

- Prompts for the video id and image path
- Delegates the upload to a ThumbnailUploaderInterface
- Prints progress, the resulting URL, or a diagnostic
- Turns the outcome into a process exit code
"""

import logging
import sys
from typing import Optional, Tuple

from thumbnail.constants import (
    EXIT_INVALID_INPUT,
    EXIT_SUCCESS,
    EXIT_UPLOAD_FAILED,
    IMAGE_PATH_EMPTY_MESSAGE,
    IMAGE_PATH_PROMPT,
    RESULT_DIVIDER,
    VIDEO_ID_EMPTY_MESSAGE,
    VIDEO_ID_PROMPT,
    ThumbnailStatus,
)
from thumbnail.implementations.console_input import ConsoleLineReader
from thumbnail.interfaces.input_interface import LineReaderInterface
from thumbnail.interfaces.thumbnail_interface import (
    InputValidationError,
    ProgressCallback,
    ThumbnailResult,
    ThumbnailUploaderInterface,
)
from thumbnail.utils.input_utils import read_required_line
from thumbnail.utils.progress_utils import ProgressReporter


class ThumbnailController:
    """
    Interactive thumbnail upload controller.

    Usage:
        controller = ThumbnailController(uploader=uploader)
        sys.exit(controller.run())

        # Testing
        controller = ThumbnailController(
            uploader=MockThumbnailUploader(),
            reader=ScriptedLineReader(["dQw4w9WgXcQ", "thumb.png"]),
        )
    """

    def __init__(
        self,
        uploader: ThumbnailUploaderInterface,
        reader: Optional[LineReaderInterface] = None,
        progress_callback: Optional[ProgressCallback] = None,
    ):
        """
        Initialize thumbnail controller.

        Args:
            uploader: Uploader holding an authenticated client
            reader: Source of user input (default: console)
            progress_callback: Upload state observer (default: ProgressReporter)
        """
        self.logger = logging.getLogger(__name__)

        self.uploader = uploader
        self.reader = reader or ConsoleLineReader()
        self.progress_callback = progress_callback or ProgressReporter()

        if not self.uploader.is_available():
            self.logger.warning(
                "Uploader initialized but not available. "
                "Check authentication and network connection.",
            )

        self.logger.info("Thumbnail Controller initialized")

    def run(self) -> int:
        """
        Run the full interactive flow.

        Returns:
            EXIT_SUCCESS, EXIT_INVALID_INPUT for empty answers,
            or EXIT_UPLOAD_FAILED when the upload fails
        """
        try:
            video_id, image_path = self.collect_input()
        except InputValidationError as e:
            print(str(e), file=sys.stderr)
            self.logger.info(f"Input rejected: {e}")
            return EXIT_INVALID_INPUT

        result = self.upload_thumbnail(video_id, image_path)

        return EXIT_SUCCESS if result.success else EXIT_UPLOAD_FAILED

    def collect_input(self) -> Tuple[str, str]:
        """
        Prompt for the video id, then the image path.

        Returns:
            (video_id, image_path)

        Raises:
            InputValidationError: On the first empty answer; later
                prompts are not shown
        """
        video_id = read_required_line(
            self.reader,
            VIDEO_ID_PROMPT,
            VIDEO_ID_EMPTY_MESSAGE,
        )
        print(f"You chose {video_id} to upload a thumbnail.")

        image_path = read_required_line(
            self.reader,
            IMAGE_PATH_PROMPT,
            IMAGE_PATH_EMPTY_MESSAGE,
        )
        print(f"You chose {image_path} to upload.")

        return video_id, image_path

    def upload_thumbnail(self, video_id: str, image_path: str) -> ThumbnailResult:
        """
        Upload the image and report the outcome on the console.

        Args:
            video_id: Video to update
            image_path: Image file to upload

        Returns:
            ThumbnailResult from the uploader
        """
        self.logger.info(f"Uploading thumbnail for video {video_id}: {image_path}")

        result = self.uploader.set_thumbnail(
            video_id=video_id,
            image_path=image_path,
            progress_callback=self.progress_callback,
        )

        self.report_result(result)
        return result

    def report_result(self, result: ThumbnailResult) -> None:
        """
        Print the thumbnail URL, or a one-line diagnostic on stderr.

        On failure the diagnostic comes first, then the logged trace of
        the underlying exception.

        Args:
            result: Outcome of an upload
        """
        if result.success:
            print(RESULT_DIVIDER)
            print(f"  - Url: {result.thumbnail_url}")
            return

        if result.status == ThumbnailStatus.API_ERROR:
            diagnostic = (
                f"YouTube API error code: {result.error_code} : {result.error_message}"
            )
        elif result.status in (ThumbnailStatus.IO_ERROR, ThumbnailStatus.AUTH_ERROR):
            diagnostic = f"I/O error: {result.error_message}"
        else:
            diagnostic = f"Thumbnail upload failed: {result.error_message}"

        print(diagnostic, file=sys.stderr)
        self.logger.error(
            f"❌ Thumbnail upload failed: {result.error_message} "
            f"(status: {result.status.value})",
            exc_info=result.exception,
        )
