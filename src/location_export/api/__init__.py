"""
API layer for the position suggest service.

Provides a low-level HTTP client and the location lookup operations.
"""

import logging
from typing import Optional

from ..core import constants
from .client import APIClient
from .locations import LocationsAPI


class LocationSuggestAPI(APIClient, LocationsAPI):
    """
    Unified API client for the position suggest service.

    Combines the HTTP client with the location lookup operations.
    """

    def __init__(
        self,
        base_url: str = constants.DEFAULT_API_BASE_URL,
        timeout: float = constants.DEFAULT_API_TIMEOUT,
        max_retries: int = constants.DEFAULT_API_MAX_RETRIES,
        verify_ssl: bool = True,
        logger: Optional[logging.Logger] = None
    ):
        super().__init__(
            base_url=base_url,
            timeout=timeout,
            max_retries=max_retries,
            verify_ssl=verify_ssl,
            logger=logger
        )


__all__ = [
    "APIClient",
    "LocationsAPI",
    "LocationSuggestAPI",
]
