"""Loading of vocabulary lists."""

import logging

from domain.errors import FetchError, LoadError
from domain.schemas import VocabList
from domain.vocabulary import parse_vocab_list
from infrastructure.config.models import VocabularySourceConfig
from infrastructure.http import Fetcher
from infrastructure.vocabulary import parse_json_document

logger = logging.getLogger(__name__)


class ListCache:
    """Holds the current list; a list is fetched again only when the list id changes."""

    def __init__(self, *, fetcher: Fetcher, source: VocabularySourceConfig) -> None:
        self._fetcher = fetcher
        self._source = source
        self._current: VocabList | None = None

    @property
    def current(self) -> VocabList | None:
        return self._current

    def has(self, list_id: str) -> bool:
        return self._current is not None and self._current.list_id == list_id

    async def resolve(self, list_id: str) -> VocabList:
        """
        Raises:
            LoadError: If the list document fails to fetch or parse
        """
        if self._current is not None and self._current.list_id == list_id:
            return self._current

        url = self._source.list_url(list_id)
        logger.info("Loading list '%s' from %s", list_id, url)
        try:
            text = await self._fetcher.fetch_text(url)
            vocab_list = parse_vocab_list(parse_json_document(text), list_id)
        except (FetchError, ValueError) as e:
            logger.warning("Loading list '%s' failed: %s", list_id, e)
            raise LoadError(list_id, e) from e

        self._current = vocab_list
        logger.info("List '%s' ready (%d vocabularies)", list_id, len(vocab_list.entries))
        return vocab_list
