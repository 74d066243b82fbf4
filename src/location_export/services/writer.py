"""
CSV writer for exported locations.

Decides how to open the output file and writes one row per location.
"""

import csv
import logging
from pathlib import Path
from typing import Iterable, Optional, Union

from ..core import constants
from ..exceptions import IOFailureError, OutputFileExistsError
from ..models import Location
from .prompt import ConflictPrompt, ConsolePrompt, WriteMode

_OPEN_MODES = {
    WriteMode.CREATE: "x",
    WriteMode.OVERWRITE: "w",
    WriteMode.APPEND: "a",
}


class CsvLocationWriter:
    """Write locations to a CSV file, asking before touching an existing one."""

    def __init__(
        self,
        prompt: Optional[ConflictPrompt] = None,
        encoding: str = constants.DEFAULT_OUTPUT_ENCODING,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize CSV writer.

        Args:
            prompt: Called with the path when the output file exists (default: ConsolePrompt)
            encoding: Output file encoding
            logger: Logger instance
        """
        self.prompt = prompt or ConsolePrompt()
        self.encoding = encoding
        self.logger = logger or logging.getLogger(__name__)

    def resolve_mode(self, path: Path) -> WriteMode:
        """
        Decide how the output file is opened.

        Args:
            path: Output file path

        Returns:
            CREATE if the file does not exist, otherwise the prompt's answer

        Raises:
            IOFailureError: If the path exists but is not a regular file
        """
        if not path.exists():
            return WriteMode.CREATE

        if not path.is_file():
            raise IOFailureError(f"Output path {path} exists and is not a file")

        mode = self.prompt(path)
        self.logger.info(f"Output file {path} exists, chosen action: {mode.value}")
        return mode

    def write(self, locations: Iterable[Location], path: Union[str, Path]) -> WriteMode:
        """
        Write locations to a CSV file.

        A header row is written unless the rows are appended to an existing file.

        Args:
            locations: Locations to write, one row each
            path: Output file path

        Returns:
            The write mode that was used

        Raises:
            OutputFileExistsError: If the file exists and the user aborted
            IOFailureError: If the file cannot be opened or written
        """
        path = Path(path)
        mode = self.resolve_mode(path)

        if mode is WriteMode.ABORT:
            raise OutputFileExistsError(path)

        rows = 0
        try:
            with open(path, _OPEN_MODES[mode], encoding=self.encoding, newline="") as f:
                writer = csv.writer(
                    f,
                    quoting=csv.QUOTE_MINIMAL,
                    lineterminator=constants.CSV_LINE_TERMINATOR
                )
                if mode is not WriteMode.APPEND:
                    writer.writerow(constants.CSV_COLUMNS)
                for location in locations:
                    writer.writerow(location.as_row())
                    rows += 1
        except FileExistsError as e:
            # Created by someone else between the check and the open
            raise OutputFileExistsError(path) from e
        except OSError as e:
            self.logger.error(f"Writing {path} failed after {rows} rows: {e}")
            raise IOFailureError(f"Writing {path} failed: {e}") from e

        self.logger.info(f"Wrote {rows} locations to {path} ({mode.value})")
        return mode
