"""
Application-wide constants for location export.

Defaults used when neither the configuration file nor the environment
provides a value.
"""

# Position suggest endpoint, the city name is appended after a "/"
DEFAULT_API_BASE_URL = "http://api.goeuro.com/api/v2/position/suggest/en"
DEFAULT_API_TIMEOUT = 30  # seconds
DEFAULT_API_MAX_RETRIES = 0

# Output
DEFAULT_OUTPUT_PATH = "./locations.csv"
DEFAULT_OUTPUT_ENCODING = "utf-8"
CSV_COLUMNS = ("id", "name", "type", "latitude", "longitude")
CSV_LINE_TERMINATOR = "\n"

# Logging
DEFAULT_LOG_FILE = "logs/location_export.log"
DEFAULT_LOG_LEVEL = "INFO"

# Source field names in the API response
FIELD_ID = "_id"
FIELD_NAME = "name"
FIELD_TYPE = "type"
FIELD_GEO_POSITION = "geo_position"
FIELD_LATITUDE = "latitude"
FIELD_LONGITUDE = "longitude"
