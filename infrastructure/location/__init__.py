"""Host history/location mechanism."""

from infrastructure.location.history import InMemoryHistory, LocationHost, PopCallback

__all__ = [
    "LocationHost",
    "InMemoryHistory",
    "PopCallback",
]
