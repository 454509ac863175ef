"""
Interfaces Package

Abstract interfaces for thumbnail upload and console input.
"""

from thumbnail.interfaces.input_interface import LineReaderInterface
from thumbnail.interfaces.thumbnail_interface import (
    AuthorizationError,
    InputValidationError,
    ProgressCallback,
    ThumbnailError,
    ThumbnailResult,
    ThumbnailUploaderInterface,
)

__all__ = [
    "AuthorizationError",
    "InputValidationError",
    "LineReaderInterface",
    "ProgressCallback",
    "ThumbnailError",
    "ThumbnailResult",
    "ThumbnailUploaderInterface",
]
