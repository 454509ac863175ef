"""
Console Line Reader

Reads user input from standard input.
"""

import logging

from thumbnail.interfaces.input_interface import LineReaderInterface


class ConsoleLineReader(LineReaderInterface):
    """Line reader backed by the interactive console"""

    def __init__(self):
        self.logger = logging.getLogger(__name__)

    def read_line(self, prompt: str) -> str:
        """Prompt on stdout and read one line from stdin"""
        try:
            return input(prompt)
        except EOFError:
            # Closed stdin is treated like an empty answer
            self.logger.debug("End of input reached")
            return ""
