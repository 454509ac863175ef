"""
Progress Utilities

Console reporting for resumable upload state transitions.

The uploader drives the states; this module only observes them:

    NOT_STARTED -> INITIATION_STARTED -> INITIATION_COMPLETE
        -> MEDIA_IN_PROGRESS (repeats, with completion fraction)
        -> MEDIA_COMPLETE
"""

import logging
from typing import Callable, Dict, List, Tuple

from thumbnail.constants import UploadState

# One label per state. Every UploadState member must be present.
STATE_LABELS: Dict[UploadState, str] = {
    UploadState.NOT_STARTED: "Upload Not Started!",
    UploadState.INITIATION_STARTED: "Initiation Started",
    UploadState.INITIATION_COMPLETE: "Initiation Completed",
    UploadState.MEDIA_IN_PROGRESS: "Upload in progress",
    UploadState.MEDIA_COMPLETE: "Upload Completed!",
}


def format_progress(state: UploadState, fraction: float = 0.0) -> List[str]:
    """
    Build the console lines for one state transition.

    Args:
        state: Upload state just entered
        fraction: Completion fraction (0.0 to 1.0), used for MEDIA_IN_PROGRESS

    Returns:
        Lines to print, in order

    Raises:
        ValueError: If state is not an UploadState

    Example:
        format_progress(UploadState.MEDIA_IN_PROGRESS, 0.5)
        # ["Upload in progress", "Upload percentage: 0.5"]
    """
    try:
        label = STATE_LABELS[state]
    except KeyError:
        raise ValueError(f"Unknown upload state: {state!r}") from None

    if state is UploadState.MEDIA_IN_PROGRESS:
        return [label, f"Upload percentage: {fraction}"]
    return [label]


class ProgressReporter:
    """
    Progress callback that prints each upload state.

    Pass an instance wherever a ProgressCallback is expected.
    It never changes control flow; it only prints and records.

    Usage:
        reporter = ProgressReporter()
        uploader.set_thumbnail(video_id, path, progress_callback=reporter)
        reporter.observed  # [(UploadState.NOT_STARTED, 0.0), ...]
    """

    def __init__(self, output: Callable[[str], None] = print):
        """
        Initialize reporter.

        Args:
            output: Function receiving each line (default: print)
        """
        self.logger = logging.getLogger(__name__)
        self.output = output
        self.observed: List[Tuple[UploadState, float]] = []

    def __call__(self, state: UploadState, fraction: float = 0.0) -> None:
        self.observed.append((state, fraction))
        self.logger.debug(f"Upload state: {state} ({fraction:.2f})")

        for line in format_progress(state, fraction):
            self.output(line)

    @property
    def states(self) -> List[UploadState]:
        """States observed so far, in order"""
        return [state for state, _ in self.observed]

    def reset(self) -> None:
        """Forget observed states"""
        self.observed.clear()
