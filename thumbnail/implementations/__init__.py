"""
Implementations Package

Concrete uploader and input implementations.
"""

from thumbnail.implementations.console_input import ConsoleLineReader
from thumbnail.implementations.mock_thumbnail_uploader import MockThumbnailUploader
from thumbnail.implementations.scripted_input import ScriptedLineReader
from thumbnail.implementations.youtube_thumbnail_uploader import (
    YouTubeThumbnailUploader,
    build_youtube_service,
)

__all__ = [
    "ConsoleLineReader",
    "MockThumbnailUploader",
    "ScriptedLineReader",
    "YouTubeThumbnailUploader",
    "build_youtube_service",
]
