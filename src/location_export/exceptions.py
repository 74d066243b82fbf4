"""
Exception hierarchy for location export.

Library exceptions are translated into these where they occur so the entry
point can report each failure kind with its own message.
"""

from pathlib import Path
from typing import Union


class LocationExportError(Exception):
    """Base class for all location export failures."""

    kind = "LocationExportError"


class MalformedURLError(LocationExportError):
    """The request URL could not be built or is not a valid HTTP URL."""

    kind = "MalformedURL"


class IOFailureError(LocationExportError):
    """Network or disk I/O failed."""

    kind = "IOFailure"


class ParseFailureError(LocationExportError):
    """The API response is not JSON or does not have the expected shape."""

    kind = "ParseFailure"


class OutputFileExistsError(LocationExportError):
    """The output file exists and the user chose neither overwrite nor append."""

    kind = "FileExists"

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        super().__init__(f"File {self.path} already exists")
