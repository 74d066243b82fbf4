"""
Position suggest operations.

Handles retrieval of the locations matching a city name.
"""

import logging
from typing import Any, Dict, List

from ..exceptions import ParseFailureError


class LocationsAPI:
    """Mixin for location-related API operations."""

    logger: logging.Logger

    def get_json(self, endpoint: str) -> Any:
        """Method provided by APIClient, which precedes this mixin in the MRO."""
        ...

    def suggest_positions(self, city_name: str) -> List[Dict[str, Any]]:
        """
        Get the raw location entries suggested for a city name.

        The city name is used as the last path segment as given.

        Args:
            city_name: City name to look up

        Returns:
            List of location objects in API order

        Raises:
            ParseFailureError: If the response is not a JSON array
        """
        self.logger.info(f"Fetching position suggestions for {city_name!r}")
        result = self.get_json(city_name)

        if not isinstance(result, list):
            raise ParseFailureError(
                f"Expected a JSON array of locations, got {type(result).__name__}"
            )
        return result
