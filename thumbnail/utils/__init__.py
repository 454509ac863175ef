"""
Utilities Package

Input and progress helpers for the thumbnail controller.
"""

from thumbnail.utils.input_utils import read_required_line
from thumbnail.utils.progress_utils import ProgressReporter, format_progress

__all__ = [
    "ProgressReporter",
    "format_progress",
    "read_required_line",
]
