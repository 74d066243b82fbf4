"""
Service layer for location export.

Fetching locations from the API and writing them to CSV.
"""

from .fetcher import LocationFetcher
from .prompt import ConflictPrompt, ConsolePrompt, WriteMode, parse_choice
from .writer import CsvLocationWriter

__all__ = [
    "LocationFetcher",
    "ConflictPrompt",
    "ConsolePrompt",
    "WriteMode",
    "parse_choice",
    "CsvLocationWriter",
]
