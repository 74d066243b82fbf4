"""
Tests for the API client and the position suggest operations.

HTTP is replaced by a mock on the session, no network access is needed.
"""

import json
import unittest
from unittest.mock import Mock

import requests  # type: ignore

from location_export.api import APIClient, LocationSuggestAPI
from location_export.exceptions import IOFailureError, MalformedURLError, ParseFailureError

BASE_URL = "http://api.example.com/api/v2/position/suggest/en"


def make_response(body, status_code=200, url=BASE_URL):
    """Build a requests Response without a connection."""
    response = requests.Response()
    response.status_code = status_code
    response.url = url
    response.encoding = "utf-8"
    response._content = body if isinstance(body, bytes) else json.dumps(body).encode("utf-8")
    return response


class TestBuildUrl(unittest.TestCase):
    """Test request URL construction."""

    def test_appends_endpoint(self):
        client = APIClient(base_url=BASE_URL + "/", logger=Mock())

        self.assertEqual(client.build_url("Berlin"), BASE_URL + "/Berlin")

    def test_does_not_encode(self):
        client = APIClient(base_url=BASE_URL, logger=Mock())

        self.assertEqual(client.build_url("New York"), BASE_URL + "/New York")
        self.assertEqual(client.build_url("Zürich"), BASE_URL + "/Zürich")

    def test_rejects_missing_scheme(self):
        client = APIClient(base_url="api.example.com/suggest", logger=Mock())

        with self.assertRaises(MalformedURLError):
            client.build_url("Berlin")

    def test_rejects_other_scheme(self):
        client = APIClient(base_url="ftp://api.example.com/suggest", logger=Mock())

        with self.assertRaises(MalformedURLError):
            client.build_url("Berlin")


class TestGetJson(unittest.TestCase):
    """Test request execution and error translation."""

    def setUp(self):
        """Set up test fixtures."""
        self.client = LocationSuggestAPI(base_url=BASE_URL, logger=Mock())
        self.client.session.request = Mock()

    def tearDown(self):
        self.client.close()

    def test_single_get(self):
        self.client.session.request.return_value = make_response([])

        self.assertEqual(self.client.get_json("Berlin"), [])
        self.client.session.request.assert_called_once()
        kwargs = self.client.session.request.call_args.kwargs
        self.assertEqual(kwargs["method"], "GET")
        self.assertEqual(kwargs["url"], BASE_URL + "/Berlin")
        self.assertEqual(kwargs["timeout"], 30)

    def test_connection_error(self):
        self.client.session.request.side_effect = requests.exceptions.ConnectionError("refused")

        with self.assertRaises(IOFailureError):
            self.client.get_json("Berlin")
        self.assertEqual(self.client.session.request.call_count, 1)

    def test_timeout(self):
        self.client.session.request.side_effect = requests.exceptions.ReadTimeout("timed out")

        with self.assertRaises(IOFailureError):
            self.client.get_json("Berlin")

    def test_truncated_body(self):
        self.client.session.request.side_effect = requests.exceptions.ChunkedEncodingError("short read")

        with self.assertRaises(IOFailureError):
            self.client.get_json("Berlin")

    def test_http_error_status(self):
        self.client.session.request.return_value = make_response(b"Not Found", status_code=404)

        with self.assertRaises(IOFailureError):
            self.client.get_json("Berlin")

    def test_invalid_url_from_requests(self):
        self.client.session.request.side_effect = requests.exceptions.InvalidURL("bad host")

        with self.assertRaises(MalformedURLError):
            self.client.get_json("Berlin")

    def test_invalid_json(self):
        self.client.session.request.return_value = make_response(b"<html>oops</html>")

        with self.assertRaises(ParseFailureError):
            self.client.get_json("Berlin")

    def test_suggest_positions_returns_list(self):
        payload = [{"_id": 1, "name": "Berlin"}]
        self.client.session.request.return_value = make_response(payload)

        self.assertEqual(self.client.suggest_positions("Berlin"), payload)

    def test_suggest_positions_rejects_object(self):
        self.client.session.request.return_value = make_response({"error": "unknown city"})

        with self.assertRaises(ParseFailureError):
            self.client.suggest_positions("Berlin")


if __name__ == "__main__":
    unittest.main()
