"""
Scripted Line Reader

Line reader that replays canned answers.
Similar to MockThumbnailUploader: lets the controller run without a terminal.
"""

import logging
from typing import Iterable, List

from thumbnail.interfaces.input_interface import LineReaderInterface


class ScriptedLineReader(LineReaderInterface):
    """
    Line reader returning pre-recorded lines in order.

    Useful for:
    - Unit tests
    - Driving the program from a script

    Example:
        reader = ScriptedLineReader(["dQw4w9WgXcQ", "thumb.png"])
        reader.read_line("Video id: ")  # "dQw4w9WgXcQ"
    """

    def __init__(self, lines: Iterable[str], echo: bool = False):
        """
        Initialize scripted reader.

        Args:
            lines: Answers to return, one per read_line call
            echo: If True, print prompts like the console does
        """
        self.logger = logging.getLogger(__name__)
        self._lines: List[str] = list(lines)
        self.echo = echo

        # Track prompts for testing
        self.prompts: List[str] = []

    def read_line(self, prompt: str) -> str:
        """Return the next canned line ("" once exhausted)"""
        self.prompts.append(prompt)

        if self.echo:
            print(prompt, end="")

        if not self._lines:
            self.logger.debug("No scripted lines left")
            return ""

        line = self._lines.pop(0)
        # Only the line terminator is dropped
        return line.rstrip("\r\n")

    @property
    def remaining(self) -> int:
        """Number of answers not consumed yet"""
        return len(self._lines)
