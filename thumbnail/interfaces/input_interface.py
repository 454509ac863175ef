"""
Line Reader Interface

Abstract source of console input, so the controller can be driven
without a real terminal.
"""

from abc import ABC, abstractmethod


class LineReaderInterface(ABC):
    """
    Abstract base class for line-oriented input.

    Implementations show the prompt (if they have somewhere to show it)
    and return one line without its terminator.
    """

    @abstractmethod
    def read_line(self, prompt: str) -> str:
        """
        Prompt for and read a single line.

        Args:
            prompt: Text shown before reading

        Returns:
            The line without its line terminator, or "" at end of input
        """
