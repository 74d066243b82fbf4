"""
Configuration module for location export.

Loads configuration from an optional JSON file and environment variables.
"""

import json
import os
from typing import Dict, Any, Optional
from pathlib import Path

from . import constants
from ..exceptions import IOFailureError

DEFAULT_CONFIG_FILE = "config.json"


class Config:
    """Configuration manager for the application."""

    def __init__(self, config_file: Optional[str] = None):
        """
        Initialize configuration.

        Args:
            config_file: Path to configuration JSON file. If None, uses CONFIG_FILE env var
                        or defaults to 'config.json'. Only the implicit default may be missing.
        """
        explicit = config_file or os.getenv("CONFIG_FILE")
        self.config_file = explicit or DEFAULT_CONFIG_FILE
        self.config: Dict[str, Any] = {}
        self._load_config(required=bool(explicit))
        self._override_from_env()
        self._validate_config()

    def _load_config(self, required: bool) -> None:
        """Load configuration from JSON file."""
        config_path = Path(self.config_file)
        if not config_path.exists():
            if required:
                raise FileNotFoundError(f"Configuration file not found: {self.config_file}")
            return

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                loaded = json.load(f)
        except OSError as e:
            raise IOFailureError(f"Cannot read configuration file {self.config_file}: {e}") from e

        if not isinstance(loaded, dict):
            raise ValueError(f"Configuration file must contain a JSON object: {self.config_file}")
        self.config = loaded

    def _set(self, section: str, key: str, value: Any) -> None:
        self.config.setdefault(section, {})[key] = value

    def _override_from_env(self) -> None:
        """Override configuration with environment variables."""
        # API configuration
        if os.getenv("LOCATIONS_API_BASE_URL"):
            self._set("api", "base_url", os.getenv("LOCATIONS_API_BASE_URL"))

        if os.getenv("LOCATIONS_API_TIMEOUT"):
            try:
                self._set("api", "timeout", float(os.environ["LOCATIONS_API_TIMEOUT"]))
            except ValueError as e:
                raise ValueError(
                    f"LOCATIONS_API_TIMEOUT must be a number, got {os.environ['LOCATIONS_API_TIMEOUT']!r}"
                ) from e

        # Output
        if os.getenv("LOCATIONS_OUTPUT_FILE"):
            self._set("output", "path", os.getenv("LOCATIONS_OUTPUT_FILE"))

        # Logging
        if os.getenv("LOG_LEVEL"):
            self._set("logging", "level", os.getenv("LOG_LEVEL"))

        if os.getenv("LOG_FILE"):
            self._set("logging", "file", os.getenv("LOG_FILE"))

    def _validate_config(self) -> None:
        """Validate value types of the settings that have them."""
        timeout = self.api_timeout
        if isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout <= 0:
            raise ValueError(f"api.timeout must be a positive number, got {timeout!r}")

        retries = self.api_max_retries
        if isinstance(retries, bool) or not isinstance(retries, int) or retries < 0:
            raise ValueError(f"api.max_retries must be a non-negative integer, got {retries!r}")

        if not isinstance(self.output_path, str) or not self.output_path:
            raise ValueError("output.path must be a non-empty string")

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value by key (supports dot notation).

        Args:
            key: Configuration key (e.g., 'api.base_url')
            default: Default value if key not found

        Returns:
            Configuration value
        """
        keys = key.split(".")
        value = self.config

        for k in keys:
            if isinstance(value, dict):
                value = value.get(k)
                if value is None:
                    return default
            else:
                return default

        return value

    @property
    def api_base_url(self) -> str:
        """Get position suggest API base URL."""
        return self.get("api.base_url", constants.DEFAULT_API_BASE_URL)

    @property
    def api_timeout(self) -> float:
        """Get API timeout in seconds."""
        return self.get("api.timeout", constants.DEFAULT_API_TIMEOUT)

    @property
    def api_max_retries(self) -> int:
        """Get maximum API retry attempts."""
        return self.get("api.max_retries", constants.DEFAULT_API_MAX_RETRIES)

    @property
    def api_verify_ssl(self) -> bool:
        """Get API SSL verification setting."""
        return self.get("api.verify_ssl", True)

    @property
    def output_path(self) -> str:
        """Get CSV output path."""
        return self.get("output.path", constants.DEFAULT_OUTPUT_PATH)

    @property
    def output_encoding(self) -> str:
        """Get CSV output encoding."""
        return self.get("output.encoding", constants.DEFAULT_OUTPUT_ENCODING)

    @property
    def log_level(self) -> str:
        """Get logging level."""
        return self.get("logging.level", constants.DEFAULT_LOG_LEVEL)

    @property
    def log_file(self) -> Optional[str]:
        """Get log file path."""
        return self.get("logging.file")

    def __repr__(self) -> str:
        """String representation of config."""
        return f"Config(file={self.config_file}, base_url={self.api_base_url}, output={self.output_path})"
