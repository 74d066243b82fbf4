"""
Location fetching service.

Looks up a city name and maps the API response to Location records.
"""

import logging
from typing import List, Optional, TYPE_CHECKING

from ..models import Location

if TYPE_CHECKING:
    from ..api import LocationSuggestAPI


class LocationFetcher:
    """Fetch and map the locations suggested for a city name."""

    def __init__(
        self,
        api_client: "LocationSuggestAPI",
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize location fetcher.

        Args:
            api_client: API client instance
            logger: Logger instance
        """
        self.api_client = api_client
        self.logger = logger or logging.getLogger(__name__)

    def fetch_locations(self, city_name: str) -> List[Location]:
        """
        Fetch the locations for a city name.

        Args:
            city_name: City name, used verbatim in the request URL

        Returns:
            Locations in the order the API returned them (possibly empty)

        Raises:
            ValueError: If city_name is empty
            MalformedURLError, IOFailureError, ParseFailureError: From the lookup
        """
        if not city_name:
            raise ValueError("City name must not be empty")

        entries = self.api_client.suggest_positions(city_name)
        locations = [Location.from_json(entry, index) for index, entry in enumerate(entries)]

        self.logger.info(f"Found {len(locations)} locations for {city_name!r}")
        for location in locations:
            self.logger.debug(str(location))

        return locations
