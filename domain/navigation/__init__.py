"""
Navigation state: the single description of what is on screen.

All functions in this module are pure; pushing locations to a host happens in
the application layer.
"""

from domain.navigation.location import Location, base_path_of, state_from_location, state_to_location
from domain.navigation.state import NavigationChange, NavigationState, ViewFormat, ViewKind

__all__ = [
    "NavigationState",
    "NavigationChange",
    "ViewFormat",
    "ViewKind",
    "Location",
    "state_to_location",
    "state_from_location",
    "base_path_of",
]
