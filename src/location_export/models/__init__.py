"""
Data models for location export.
"""

from .location import Location

__all__ = [
    "Location",
]
