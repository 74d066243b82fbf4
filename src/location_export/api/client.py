"""
Base API client for the position suggest API.

Handles HTTP requests, session management, and translation of transport
errors into the application's exception types.
"""

import logging
from typing import Any, Optional
from urllib.parse import urlsplit

import requests  # type: ignore
from requests.adapters import HTTPAdapter  # type: ignore
from urllib3.util.retry import Retry  # type: ignore

from ..core import constants
from ..exceptions import IOFailureError, MalformedURLError, ParseFailureError


class APIClient:
    """Base client for interacting with the position suggest API."""

    def __init__(
        self,
        base_url: str = constants.DEFAULT_API_BASE_URL,
        timeout: float = constants.DEFAULT_API_TIMEOUT,
        max_retries: int = constants.DEFAULT_API_MAX_RETRIES,
        verify_ssl: bool = True,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize API client.

        Args:
            base_url: Base URL for the API
            timeout: Request timeout in seconds
            max_retries: Maximum number of retry attempts (0 disables retries)
            verify_ssl: Whether to verify SSL certificates
            logger: Logger instance
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.verify_ssl = verify_ssl
        self.logger = logger or logging.getLogger(__name__)

        # Disable SSL warnings when verify_ssl is False
        if not verify_ssl:
            import urllib3
            urllib3.disable_warnings(urllib3.exceptions.InsecureRequestWarning)

        self.session = requests.Session()
        retry_strategy = Retry(
            total=max_retries,
            backoff_factor=1,
            status_forcelist=[429, 500, 502, 503, 504],
            allowed_methods=["GET"],
            raise_on_status=False
        )
        adapter = HTTPAdapter(max_retries=retry_strategy)
        self.session.mount("http://", adapter)
        self.session.mount("https://", adapter)

        self.session.headers.update({
            "Accept": "application/json"
        })

    def build_url(self, endpoint: str) -> str:
        """
        Join the base URL and an endpoint.

        The endpoint is appended verbatim, no percent-encoding is applied.

        Args:
            endpoint: Path appended after the base URL

        Returns:
            Full request URL

        Raises:
            MalformedURLError: If the result is not an http(s) URL with a host
        """
        url = f"{self.base_url}/{endpoint}"

        try:
            parts = urlsplit(url)
        except ValueError as e:
            raise MalformedURLError(f"Invalid API URL {url!r}: {e}") from e

        if parts.scheme not in ("http", "https") or not parts.netloc:
            raise MalformedURLError(f"Invalid API URL {url!r}: expected an http(s) URL with a host")

        return url

    def _make_request(self, method: str, endpoint: str, **kwargs) -> requests.Response:
        """
        Make HTTP request to API.

        Args:
            method: HTTP method
            endpoint: API endpoint (without base URL)
            **kwargs: Additional arguments for requests

        Returns:
            Response object

        Raises:
            MalformedURLError: If requests rejects the URL
            IOFailureError: On connection failure, timeout, truncated body or HTTP error status
        """
        url = self.build_url(endpoint)
        kwargs.setdefault("verify", self.verify_ssl)

        self.logger.debug(f"{method} {url}")

        try:
            response = self.session.request(
                method=method,
                url=url,
                timeout=self.timeout,
                **kwargs
            )
            response.raise_for_status()
            return response

        except (requests.exceptions.MissingSchema,
                requests.exceptions.InvalidSchema,
                requests.exceptions.InvalidURL) as e:
            self.logger.error(f"Malformed API URL: {url} - {e}")
            raise MalformedURLError(f"Invalid API URL {url!r}: {e}") from e

        except requests.exceptions.RequestException as e:
            self.logger.error(f"API request failed: {method} {url} - {e}")
            raise IOFailureError(f"Request to {url} failed: {e}") from e

    def get_json(self, endpoint: str) -> Any:
        """
        Make GET request and decode the JSON body.

        Args:
            endpoint: API endpoint

        Returns:
            Decoded JSON document

        Raises:
            ParseFailureError: If the body is not valid JSON
        """
        response = self._make_request("GET", endpoint)

        # requests' JSONDecodeError is a ValueError
        try:
            return response.json()
        except ValueError as e:
            raise ParseFailureError(f"Response from {response.url} is not valid JSON: {e}") from e

    def close(self) -> None:
        """Close the session."""
        self.session.close()

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
