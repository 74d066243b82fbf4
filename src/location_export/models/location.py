"""
Location data models.

Contains the flat location record exported to CSV.
"""

import math
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Tuple

from ..core import constants
from ..exceptions import ParseFailureError


def _field_label(field: str, index: Optional[int]) -> str:
    if index is None:
        return f"'{field}'"
    return f"'{field}' of location #{index}"


def _require(entry: Mapping[str, Any], field: str, index: Optional[int]) -> Any:
    if field not in entry:
        raise ParseFailureError(f"Missing field {_field_label(field, index)}")
    value = entry[field]
    if value is None:
        raise ParseFailureError(f"Field {_field_label(field, index)} is null")
    return value


def _as_int(value: Any, field: str, index: Optional[int]) -> int:
    if isinstance(value, bool):
        raise ParseFailureError(f"Field {_field_label(field, index)} is not an integer: {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            pass
    raise ParseFailureError(f"Field {_field_label(field, index)} is not an integer: {value!r}")


def _as_float(value: Any, field: str, index: Optional[int]) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float, str)):
        raise ParseFailureError(f"Field {_field_label(field, index)} is not a number: {value!r}")
    try:
        number = float(value)
    except ValueError as e:
        raise ParseFailureError(f"Field {_field_label(field, index)} is not a number: {value!r}") from e
    if not math.isfinite(number):
        raise ParseFailureError(f"Field {_field_label(field, index)} is not finite: {value!r}")
    return number


def _as_text(value: Any, field: str, index: Optional[int]) -> str:
    if isinstance(value, (dict, list)):
        raise ParseFailureError(f"Field {_field_label(field, index)} is not text: {value!r}")
    return value if isinstance(value, str) else str(value)


@dataclass(frozen=True)
class Location:
    """A location suggested for a city name, flattened for export."""

    id: int
    name: str
    type: str
    latitude: float
    longitude: float

    @classmethod
    def from_json(cls, entry: Any, index: Optional[int] = None) -> "Location":
        """
        Build a location from one element of the API response.

        Expected element format:
        {
            "_id": 376217,
            "name": "Berlin",
            "type": "location",
            "geo_position": {"latitude": 52.52437, "longitude": 13.41053},
            ...
        }

        Fields other than these are ignored.

        Args:
            entry: Decoded JSON object
            index: Position of the element in the response, used in error messages

        Returns:
            Location instance

        Raises:
            ParseFailureError: If a field is missing, null or of the wrong type
        """
        if not isinstance(entry, Mapping):
            where = "" if index is None else f" #{index}"
            raise ParseFailureError(f"Location{where} is not a JSON object: {entry!r}")

        geo_position = _require(entry, constants.FIELD_GEO_POSITION, index)
        if not isinstance(geo_position, Mapping):
            raise ParseFailureError(
                f"Field {_field_label(constants.FIELD_GEO_POSITION, index)} is not a JSON object"
            )

        latitude_field = f"{constants.FIELD_GEO_POSITION}.{constants.FIELD_LATITUDE}"
        longitude_field = f"{constants.FIELD_GEO_POSITION}.{constants.FIELD_LONGITUDE}"

        return cls(
            id=_as_int(_require(entry, constants.FIELD_ID, index), constants.FIELD_ID, index),
            name=_as_text(_require(entry, constants.FIELD_NAME, index), constants.FIELD_NAME, index),
            type=_as_text(_require(entry, constants.FIELD_TYPE, index), constants.FIELD_TYPE, index),
            latitude=_as_float(
                _require(geo_position, constants.FIELD_LATITUDE, index), latitude_field, index
            ),
            longitude=_as_float(
                _require(geo_position, constants.FIELD_LONGITUDE, index), longitude_field, index
            ),
        )

    def as_row(self) -> Tuple[int, str, str, float, float]:
        """Values in CSV column order."""
        return (self.id, self.name, self.type, self.latitude, self.longitude)

    def __str__(self) -> str:
        return (
            "Location: {\n"
            f"_id: {self.id}\n"
            f"name: {self.name}\n"
            f"type: {self.type}\n"
            f"latitude: {self.latitude}\n"
            f"longitude: {self.longitude}\n"
            "}"
        )
