"""
Location Export

This package queries the position suggest API for a city name and exports
the returned locations to a CSV file.
"""

__version__ = "0.1.0"
__description__ = "Export position suggest API results for a city to CSV"


def __getattr__(name):
    """Lazy import to avoid importing dependencies when not needed."""
    if name == "LocationExportApp":
        from .main import LocationExportApp
        return LocationExportApp
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "LocationExportApp",
]
