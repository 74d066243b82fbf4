"""
Resolution of conflicts with an existing output file.

The writer asks an injectable prompt what to do when the target file
exists. ConsolePrompt asks the user on the terminal; tests pass any
callable taking the path and returning a WriteMode.
"""

import sys
from enum import Enum
from pathlib import Path
from typing import Callable, Optional, TextIO


class WriteMode(Enum):
    """How the output file is opened."""

    CREATE = "create"
    OVERWRITE = "overwrite"
    APPEND = "append"
    ABORT = "abort"


ConflictPrompt = Callable[[Path], WriteMode]

PROMPT_MESSAGE = (
    "The file {path} already exists. \n"
    "If you want to overwrite it, enter \"O\", "
    "if you want to append the data to the end of the file, enter \"A\"\n"
    "If you want to terminate the execution of the program, enter any other letter, or press CTRL+C"
)


def parse_choice(token: Optional[str]) -> WriteMode:
    """
    Map a user answer to a write mode.

    Args:
        token: Answer read from the user, None at end of input

    Returns:
        OVERWRITE for "o"/"O", APPEND for "a"/"A", ABORT for anything else
    """
    if token is None:
        return WriteMode.ABORT

    choice = token.strip().lower()
    if choice == "o":
        return WriteMode.OVERWRITE
    if choice == "a":
        return WriteMode.APPEND
    return WriteMode.ABORT


class ConsolePrompt:
    """Ask the user on the console whether to overwrite, append or abort."""

    def __init__(
        self,
        input_stream: Optional[TextIO] = None,
        output_stream: Optional[TextIO] = None
    ):
        """
        Initialize console prompt.

        Args:
            input_stream: Stream answers are read from (default: stdin)
            output_stream: Stream the question is printed to (default: stdout)
        """
        self.input_stream = input_stream
        self.output_stream = output_stream

    def _read_token(self) -> Optional[str]:
        """Read the next whitespace-delimited token, skipping blank lines."""
        stream = self.input_stream or sys.stdin
        for line in stream:
            tokens = line.split()
            if tokens:
                return tokens[0]
        return None

    def __call__(self, path: Path) -> WriteMode:
        output = self.output_stream or sys.stdout
        print(PROMPT_MESSAGE.format(path=path), file=output, flush=True)
        return parse_choice(self._read_token())
