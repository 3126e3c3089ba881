"""Error taxonomy shared by the gateways and the dashboard controller."""
from __future__ import annotations


class BikecastError(Exception):
    """Base class for every error raised by this package."""


class NetworkError(BikecastError):
    """The transport call could not complete."""


class ServiceError(BikecastError):
    """A remote service answered with a non-success status."""

    def __init__(self, status: int, reason: str = "") -> None:
        self.status = status
        self.reason = reason
        super().__init__(f"Live data service returned an error: {status} {reason}".rstrip())


class ParseError(BikecastError):
    """A response body was malformed or lacked the expected shape."""


class ValidationError(BikecastError):
    """A response was well-formed but semantically invalid."""


class InferenceError(BikecastError):
    """The prediction call failed for a reason not otherwise classified."""


class UnknownStationError(BikecastError, KeyError):
    def __init__(self, station_id: int) -> None:
        self.station_id = station_id
        super().__init__(f"Unknown station: {station_id}")

    def __str__(self) -> str:
        return f"Unknown station: {self.station_id}"
