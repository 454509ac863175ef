"""
Input Utilities

Prompting helpers shared by the controller.
"""

from thumbnail.interfaces.input_interface import LineReaderInterface
from thumbnail.interfaces.thumbnail_interface import InputValidationError


def read_required_line(
    reader: LineReaderInterface,
    prompt: str,
    empty_message: str,
) -> str:
    """
    Read a value that must not be empty.

    The value is returned as read; blank answers are rejected but
    non-blank ones are not trimmed.

    Args:
        reader: Source of console input
        prompt: Prompt shown to the user
        empty_message: Error message when the answer is empty

    Returns:
        The entered value

    Raises:
        InputValidationError: If the answer is empty or whitespace only

    Example:
        video_id = read_required_line(reader, "Video id: ", "Video id can't be empty!")
    """
    value = reader.read_line(prompt)

    if not value or not value.strip():
        raise InputValidationError(empty_message)

    return value
