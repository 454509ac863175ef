"""
Controllers Package

High-level thumbnail upload coordinators.
"""

from thumbnail.controllers.thumbnail_controller import ThumbnailController

__all__ = [
    "ThumbnailController",
]
