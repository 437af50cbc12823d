"""Host location/history capabilities."""

import inspect
import logging
from abc import ABC, abstractmethod
from collections.abc import Awaitable, Callable

from domain.navigation import Location

logger = logging.getLogger(__name__)

PopCallback = Callable[[Location], Awaitable[None] | None]


class LocationHost(ABC):
    """
    What the browser needs from its host: read the location, push a new one, and be
    told when the user moves back/forward.
    """

    @abstractmethod
    def current_location(self) -> Location: ...

    @abstractmethod
    def push_location(self, location: Location) -> None: ...

    @abstractmethod
    def on_location_popped(self, callback: PopCallback) -> None: ...


class InMemoryHistory(LocationHost):
    """
    A session history stack, used by the CLI and tests.

    Pushing drops any forward entries. Pushing the current location again is a no-op.
    `back()` / `forward()` notify subscribers and await coroutine callbacks.
    """

    def __init__(self, initial: Location | str = "/") -> None:
        first = Location.from_url(initial) if isinstance(initial, str) else initial
        self._entries: list[Location] = [first]
        self._index = 0
        self._callbacks: list[PopCallback] = []

    @property
    def entries(self) -> list[Location]:
        return list(self._entries)

    @property
    def can_go_back(self) -> bool:
        return self._index > 0

    @property
    def can_go_forward(self) -> bool:
        return self._index < len(self._entries) - 1

    def current_location(self) -> Location:
        return self._entries[self._index]

    def push_location(self, location: Location) -> None:
        if location == self.current_location():
            return
        del self._entries[self._index + 1 :]
        self._entries.append(location)
        self._index += 1
        logger.debug("History push %s (depth=%d)", location.to_url(), len(self._entries))

    def on_location_popped(self, callback: PopCallback) -> None:
        self._callbacks.append(callback)

    async def back(self) -> Location | None:
        if not self.can_go_back:
            return None
        self._index -= 1
        return await self._pop()

    async def forward(self) -> Location | None:
        if not self.can_go_forward:
            return None
        self._index += 1
        return await self._pop()

    async def _pop(self) -> Location:
        location = self.current_location()
        logger.debug("History pop -> %s", location.to_url())
        for callback in self._callbacks:
            result = callback(location)
            if inspect.isawaitable(result):
                await result
        return location
