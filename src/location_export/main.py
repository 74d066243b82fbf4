"""
Main entry point for location export.

Looks up a city name and writes the suggested locations to a CSV file.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .core import Config, setup_logger, LoggerContext
from .api import LocationSuggestAPI
from .exceptions import (
    IOFailureError,
    LocationExportError,
    MalformedURLError,
    OutputFileExistsError,
    ParseFailureError,
)
from .services import ConflictPrompt, CsvLocationWriter, LocationFetcher

USAGE_MESSAGE = (
    "You need to supply the name of the location in the form \"LOCATION_NAME\", e.g. \"BERLIN\""
)

ERROR_MESSAGES = {
    MalformedURLError: "Caught MalformedURL while trying to access API: {error}",
    IOFailureError: "Caught IOFailure while reading from the API or writing the CSV file: {error}",
    ParseFailureError: "Caught ParseFailure while reading locations from the API response: {error}",
    OutputFileExistsError: (
        "Caught FileExists because the file already exists and user chose "
        "neither to overwrite it, nor to append the data to it: {error}"
    ),
}


class LocationExportApp:
    """Main application for location export."""

    def __init__(
        self,
        config_file: Optional[str] = None,
        output_path: Optional[str] = None,
        prompt: Optional[ConflictPrompt] = None,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize application.

        Args:
            config_file: Path to configuration file
            output_path: CSV path overriding the configured one
            prompt: Conflict prompt for an existing output file (default: console)
            logger: Logger instance (default: application logger from configuration)
        """
        self.config = Config(config_file)
        self.output_path = Path(output_path or self.config.output_path)

        self.logger = logger or setup_logger(
            log_file=self.config.log_file,
            log_level=self.config.log_level
        )
        self.logger.debug(f"Configuration: {self.config}")

        self.api_client = LocationSuggestAPI(
            base_url=self.config.api_base_url,
            timeout=self.config.api_timeout,
            max_retries=self.config.api_max_retries,
            verify_ssl=self.config.api_verify_ssl,
            logger=self.logger
        )
        self.fetcher = LocationFetcher(api_client=self.api_client, logger=self.logger)
        self.writer = CsvLocationWriter(
            prompt=prompt,
            encoding=self.config.output_encoding,
            logger=self.logger
        )

    def run(self, city_name: str) -> Path:
        """
        Fetch the locations for a city and write them to the output file.

        Args:
            city_name: City name to look up

        Returns:
            Path of the written CSV file
        """
        try:
            with LoggerContext(self.logger, f"location lookup for {city_name!r}"):
                locations = self.fetcher.fetch_locations(city_name)

            with LoggerContext(self.logger, f"CSV export to {self.output_path}"):
                self.writer.write(locations, self.output_path)

            return self.output_path

        finally:
            self.api_client.close()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="location-export",
        description="Export the locations suggested for a city name to a CSV file"
    )
    parser.add_argument(
        "city",
        nargs="*",
        help="Name of the location, e.g. BERLIN"
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to configuration file"
    )
    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="CSV output path (default: ./locations.csv)"
    )
    return parser


def format_error(error: LocationExportError) -> str:
    """Human readable message for an export failure, specific to its kind."""
    for error_type, template in ERROR_MESSAGES.items():
        if isinstance(error, error_type):
            return template.format(error=error)
    return f"Caught {error.kind}: {error}"


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    # City names may start with "-", argparse leaves those unrecognized
    args, unrecognized = build_parser().parse_known_args(argv)
    cities = args.city + unrecognized

    # Exactly one city name, anything else only prints usage
    if len(cities) != 1 or not cities[0]:
        print(USAGE_MESSAGE)
        return 0

    try:
        app = LocationExportApp(config_file=args.config, output_path=args.output)
    except LocationExportError as e:
        print(format_error(e), file=sys.stderr)
        return 1
    except (FileNotFoundError, ValueError) as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 1

    try:
        app.run(cities[0])
    except LocationExportError as e:
        print(format_error(e), file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
