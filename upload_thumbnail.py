#!/usr/bin/env python3
"""
YouTube Thumbnail Upload

Prompts for a video ID and an image path, then sets the image as the
video's custom thumbnail.

Usage:
    python upload_thumbnail.py

Requirements:
    1. client_secrets.json from Google Cloud Console
    2. Optional .env file (see config/settings.py)
    3. The first run opens a browser window to authorize access

Exit codes:
    0 - Thumbnail set
    1 - Empty video ID or image path
    2 - Authorization or upload failed, or unknown uploader mode
    130 - Cancelled with Ctrl+C
"""

import logging
import sys

from config import settings
from thumbnail.constants import EXIT_CANCELLED, EXIT_UPLOAD_FAILED
from thumbnail.controllers.thumbnail_controller import ThumbnailController
from thumbnail.factory import create_uploader
from thumbnail.interfaces.thumbnail_interface import AuthorizationError

logger = logging.getLogger(__name__)


def setup_logging() -> None:
    """Configure root logging from settings"""
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format=settings.LOG_FORMAT,
    )


def main() -> int:
    """Main upload flow"""
    setup_logging()

    try:
        uploader = create_uploader()
    except AuthorizationError as e:
        print(f"I/O error: {e}", file=sys.stderr)
        logger.error("Authorization failed", exc_info=True)
        return EXIT_UPLOAD_FAILED
    except (RuntimeError, ValueError) as e:
        print(f"Thumbnail upload failed: {e}", file=sys.stderr)
        logger.error("Uploader creation failed", exc_info=True)
        return EXIT_UPLOAD_FAILED

    controller = ThumbnailController(uploader=uploader)
    return controller.run()


def run() -> None:
    """Console script entry point"""
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print("\n❌ Cancelled by user", file=sys.stderr)
        sys.exit(EXIT_CANCELLED)


if __name__ == "__main__":
    run()
