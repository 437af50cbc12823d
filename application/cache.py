"""Session cache of loaded vocabulary adapters."""

import asyncio
import logging
from collections.abc import Callable

from domain.errors import FetchError, LoadError
from domain.vocabulary import VocabularyGraph, parse_vocabulary_document
from infrastructure.config.models import VocabularySourceConfig
from infrastructure.http import Fetcher
from infrastructure.vocabulary import VocabularyAdapter, make_adapter, parse_json_document

logger = logging.getLogger(__name__)

AdapterFactory = Callable[..., VocabularyAdapter]


class AdapterCache:
    """
    Map taxonomy id -> adapter, fetching and parsing each id at most once.

    - Entries are inserted only after a complete, successful load (insert-if-absent,
      never overwritten); a failed load stores nothing, so a later resolve retries.
    - Concurrent resolves of one id share the same in-flight load.
    - The base vocabulary is fetched and parsed once and shared by every adapter.
    - No eviction policy; `invalidate()` drops a single entry.
    """

    def __init__(
        self,
        *,
        fetcher: Fetcher,
        source: VocabularySourceConfig,
        adapter_factory: AdapterFactory = make_adapter,
        base: VocabularyGraph | None = None,
    ) -> None:
        self._fetcher = fetcher
        self._source = source
        self._adapter_factory = adapter_factory
        self._entries: dict[str, VocabularyAdapter] = {}
        self._pending: dict[str, asyncio.Future[VocabularyAdapter]] = {}
        self._base = base
        self._base_pending: asyncio.Future[VocabularyGraph] | None = None

    def __contains__(self, taxonomy_id: object) -> bool:
        return taxonomy_id in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def get(self, taxonomy_id: str) -> VocabularyAdapter | None:
        return self._entries.get(taxonomy_id)

    def invalidate(self, taxonomy_id: str) -> bool:
        """Drop one entry; other entries and the base vocabulary are kept."""
        removed = self._entries.pop(taxonomy_id, None) is not None
        if removed:
            logger.info("Invalidated cached vocabulary '%s'", taxonomy_id)
        return removed

    async def resolve(self, taxonomy_id: str) -> VocabularyAdapter:
        """
        Return the adapter for `taxonomy_id`, loading it on first use.

        Raises:
            LoadError: If the taxonomy (or the base vocabulary) fails to fetch or parse
        """
        cached = self._entries.get(taxonomy_id)
        if cached is not None:
            logger.debug("Cache hit for '%s'", taxonomy_id)
            return cached

        pending = self._pending.get(taxonomy_id)
        if pending is None:
            pending = asyncio.ensure_future(self._load(taxonomy_id))
            self._pending[taxonomy_id] = pending
        else:
            logger.debug("Joining in-flight load of '%s'", taxonomy_id)
        # shield: a superseded caller must not cancel a load other callers share
        return await asyncio.shield(pending)

    async def _load(self, taxonomy_id: str) -> VocabularyAdapter:
        try:
            base = await self._base_graph(taxonomy_id)
            url = self._source.taxonomy_url(taxonomy_id)
            logger.info("Loading vocabulary '%s' from %s", taxonomy_id, url)
            try:
                text = await self._fetcher.fetch_text(url)
            except FetchError as e:
                raise LoadError(taxonomy_id, e) from e
            try:
                adapter = self._adapter_factory(taxonomy_id, base=base, document_text=text)
            except ValueError as e:
                raise LoadError(taxonomy_id, e) from e

            stored = self._entries.setdefault(taxonomy_id, adapter)
            logger.info("Cached vocabulary '%s' (%d entries)", taxonomy_id, len(self._entries))
            return stored
        except LoadError as e:
            logger.warning("Loading '%s' failed: %s", taxonomy_id, e.cause)
            raise
        finally:
            self._pending.pop(taxonomy_id, None)

    async def _base_graph(self, taxonomy_id: str) -> VocabularyGraph:
        if self._base is not None:
            return self._base
        if self._base_pending is None:
            self._base_pending = asyncio.ensure_future(self._load_base())
        try:
            return await asyncio.shield(self._base_pending)
        except (FetchError, ValueError) as e:
            raise LoadError(taxonomy_id, e) from e

    async def _load_base(self) -> VocabularyGraph:
        url = self._source.base_vocabulary_url
        logger.info("Loading base vocabulary from %s", url)
        try:
            text = await self._fetcher.fetch_text(url)
            base = parse_vocabulary_document(parse_json_document(text))
        except (FetchError, ValueError):
            # allow a later resolve to retry the base vocabulary
            self._base_pending = None
            raise
        self._base = base
        logger.info("Base vocabulary ready (%d nodes)", len(base.nodes))
        return base
