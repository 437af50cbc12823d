"""The browsing session: navigate, resolve what the state needs, dispatch and render."""

import logging
import uuid
from collections.abc import Callable

from pydantic import BaseModel, ConfigDict

from application.cache import AdapterCache
from application.dispatch import RenderAction, ViewDispatcher
from application.lists import ListCache
from application.navigation import Navigator
from application.rendering import RenderContext, make_renderer, render_error_html, render_loading_html
from domain.errors import BrowserError, CyclicHierarchyError, LoadError, TermNotFoundError
from domain.navigation import Location, NavigationChange, NavigationState
from domain.schemas import VocabList
from infrastructure.config.models import BrowserConfig
from infrastructure.http import Fetcher
from infrastructure.location import LocationHost
from infrastructure.observability.logging import clear_view_context, set_log_context
from infrastructure.vocabulary import VocabularyAdapter

logger = logging.getLogger(__name__)

LoadingCallback = Callable[[str], None]


class RenderedView(BaseModel):
    """What ended up on screen for one state: the HTML and, on failure, the error."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    state: NavigationState
    html: str
    action: RenderAction | None = None
    error: BrowserError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


RenderCallback = Callable[[RenderedView], None]


class VocabBrowser:
    """
    One browsing session.

    Every navigation bumps a generation counter; a render that finds the counter moved
    on after its fetches completed is discarded (last navigation wins). Loads started by
    a superseded navigation still land in the cache.
    """

    def __init__(
        self,
        *,
        navigator: Navigator,
        cache: AdapterCache,
        lists: ListCache,
        dispatcher: ViewDispatcher | None = None,
        on_loading: LoadingCallback | None = None,
        on_render: RenderCallback | None = None,
        session_id: str | None = None,
    ) -> None:
        self.navigator = navigator
        self._cache = cache
        self._lists = lists
        self._dispatcher = dispatcher or ViewDispatcher()
        self._on_loading = on_loading
        self._on_render = on_render
        self.session_id = session_id or uuid.uuid4().hex
        self._generation = 0
        self._current_view: RenderedView | None = None
        self._started = False

    @classmethod
    def from_cfg(
        cls,
        cfg: BrowserConfig,
        *,
        host: LocationHost,
        fetcher: Fetcher,
        on_loading: LoadingCallback | None = None,
        on_render: RenderCallback | None = None,
    ) -> "VocabBrowser":
        navigator = Navigator(host, base_path=cfg.base_path or None)
        return cls(
            navigator=navigator,
            cache=AdapterCache(fetcher=fetcher, source=cfg.vocabulary),
            lists=ListCache(fetcher=fetcher, source=cfg.vocabulary),
            on_loading=on_loading,
            on_render=on_render,
        )

    @property
    def state(self) -> NavigationState:
        return self.navigator.state

    @property
    def current_view(self) -> RenderedView | None:
        return self._current_view

    @property
    def cache(self) -> AdapterCache:
        return self._cache

    async def start(self) -> RenderedView | None:
        """Read the host location, follow back/forward from now on, render the first view."""
        if not self._started:
            self.navigator.host.on_location_popped(self._on_popped)
            self._started = True
        clear_view_context()
        set_log_context(session_id_full=self.session_id)
        self.navigator.read_from_location()
        logger.info("Session started at %s", self.navigator.host.current_location().to_url())
        return await self._render()

    async def navigate(self, change: NavigationChange | None = None, **fields: object) -> RenderedView | None:
        """
        Navigate and render.

        Returns:
            The rendered view, or None when a later navigation superseded this one
        """
        self.navigator.navigate(change, **fields)
        return await self._render()

    async def _on_popped(self, location: Location) -> None:
        logger.debug("Location popped: %s", location.to_url())
        self.navigator.read_from_location()
        await self._render()

    def dispatch(self) -> RenderAction:
        """
        Dispatch the current state against already-loaded data, without fetching.

        Raises:
            ValueError: If the state needs a list or vocabulary that is not loaded yet
            TermNotFoundError: If the state names a term the vocabulary does not have
        """
        state = self.state
        adapter = self._cache.get(state.taxonomy_id) if state.taxonomy_id else None
        vocab_list = self._lists.current if state.list_id and self._lists.has(state.list_id) else None
        return self._dispatcher.dispatch(state, adapter, vocab_list)

    def _needs_fetch(self, state: NavigationState) -> bool:
        if state.list_id and not self._lists.has(state.list_id):
            return True
        return bool(state.taxonomy_id) and state.taxonomy_id not in self._cache

    async def _resolve(self, state: NavigationState) -> tuple[VocabList | None, VocabularyAdapter | None]:
        vocab_list = await self._lists.resolve(state.list_id) if state.list_id else None
        adapter = await self._cache.resolve(state.taxonomy_id) if state.taxonomy_id else None
        return vocab_list, adapter

    async def _render(self) -> RenderedView | None:
        self._generation += 1
        generation = self._generation
        state = self.navigator.state
        set_log_context(
            list_id=state.list_id or "",
            taxonomy_id=state.taxonomy_id or "",
            term_id=state.term_id or "",
        )

        if self._needs_fetch(state) and self._on_loading is not None:
            self._on_loading(render_loading_html(state))

        try:
            vocab_list, adapter = await self._resolve(state)
        except LoadError as e:
            if generation != self._generation:
                return self._superseded(state)
            logger.error("Load failed for %s: %s", self.navigator.location_of(state).to_url(), e)
            return self._publish(RenderedView(state=state, html=render_error_html(e), error=e))

        if generation != self._generation:
            return self._superseded(state)

        try:
            action = self._dispatcher.dispatch(state, adapter, vocab_list)
            ctx = RenderContext(
                state=state,
                href_for=lambda change: self.navigator.href_for(change, state),
                adapter=adapter,
                vocab_list=vocab_list,
            )
            html = make_renderer(action.kind).render(action, ctx)
        except (TermNotFoundError, CyclicHierarchyError) as e:
            logger.warning("Cannot render %s: %s", self.navigator.location_of(state).to_url(), e)
            return self._publish(RenderedView(state=state, html=render_error_html(e), error=e))

        logger.debug("Rendered %s view (%d chars)", action.kind.value, len(html))
        return self._publish(RenderedView(state=state, html=html, action=action))

    def _superseded(self, state: NavigationState) -> None:
        logger.info("Discarding superseded render of %s", self.navigator.location_of(state).to_url())
        return None

    def _publish(self, view: RenderedView) -> RenderedView:
        self._current_view = view
        if self._on_render is not None:
            self._on_render(view)
        return view
