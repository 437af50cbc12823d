"""The navigator: owner of the current navigation state and its host location."""

import logging
from typing import Any

from domain.navigation import (
    Location,
    NavigationChange,
    NavigationState,
    base_path_of,
    state_from_location,
    state_to_location,
)
from infrastructure.location import LocationHost

logger = logging.getLogger(__name__)


class Navigator:
    """
    Single source of truth for what is displayed.

    - `read_from_location()` derives the state from the host (startup, back/forward)
    - `navigate()` applies a partial change, repairs it and pushes the new location
    """

    def __init__(self, host: LocationHost, *, base_path: str | None = None) -> None:
        self.host = host
        self.base_path = base_path if base_path is not None else base_path_of(host.current_location())
        self._state = NavigationState()

    @property
    def state(self) -> NavigationState:
        return self._state

    def read_from_location(self) -> NavigationState:
        location = self.host.current_location()
        self._state = state_from_location(location)
        logger.debug("State read from %s -> %s", location.to_url(), self._state.view.value)
        return self._state

    def navigate(self, change: NavigationChange | None = None, **fields: Any) -> NavigationState:
        """
        Apply `change` (or keyword fields, e.g. `navigate(term_id="ex:Widget")`).

        Never raises on malformed input: fields that would break the state invariants are dropped.
        """
        change = change if change is not None else NavigationChange(**fields)
        new_state = self._state.apply(change)
        self._state = new_state
        self.host.push_location(self.location_of(new_state))
        logger.info("Navigated to %s", self.location_of(new_state).to_url())
        return new_state

    def location_of(self, state: NavigationState) -> Location:
        return state_to_location(state, self.base_path)

    def href_for(self, change: NavigationChange, state: NavigationState | None = None) -> str:
        """Location URL reached by applying `change` to `state` (default: the current state)."""
        base = state if state is not None else self._state
        return self.location_of(base.apply(change)).to_url()
