"""Choose exactly one rendering action for a navigation state."""

import logging
from enum import Enum

from pydantic import BaseModel, ConfigDict

from domain.errors import TermNotFoundError
from domain.navigation import NavigationState, ViewKind
from domain.schemas import TermKind, VocabList
from infrastructure.vocabulary import VocabularyAdapter

logger = logging.getLogger(__name__)


class RenderKind(str, Enum):
    EMPTY = "empty"
    LIST = "list"
    OVERVIEW = "overview"
    RAW = "raw"
    CLASS = "class"
    PROPERTY = "property"
    ENUMERATION = "enumeration"
    ENUMERATION_MEMBER = "enumeration_member"
    DATA_TYPE = "data_type"


RENDER_KIND_BY_TERM_KIND: dict[TermKind, RenderKind] = {
    TermKind.CLASS: RenderKind.CLASS,
    TermKind.PROPERTY: RenderKind.PROPERTY,
    TermKind.ENUMERATION: RenderKind.ENUMERATION,
    TermKind.ENUMERATION_MEMBER: RenderKind.ENUMERATION_MEMBER,
    TermKind.DATA_TYPE: RenderKind.DATA_TYPE,
}


class RenderAction(BaseModel):
    """The dispatcher's decision: which renderer runs for which state/term."""

    model_config = ConfigDict(frozen=True)

    kind: RenderKind
    state: NavigationState
    term_id: str | None = None
    term_kind: TermKind | None = None


class ViewDispatcher:
    """First match wins; the cases are mutually exclusive given the state invariants."""

    def dispatch(
        self,
        state: NavigationState,
        adapter: VocabularyAdapter | None = None,
        vocab_list: VocabList | None = None,
    ) -> RenderAction:
        """
        Raises:
            TermNotFoundError: If a term view names a term the vocabulary does not have
            ValueError: If the data the state needs was not supplied
        """
        view = state.view

        if view is ViewKind.EMPTY:
            return RenderAction(kind=RenderKind.EMPTY, state=state)

        if view is ViewKind.LIST:
            if vocab_list is None:
                raise ValueError(f"List view of '{state.list_id}' dispatched without a loaded list")
            return RenderAction(kind=RenderKind.LIST, state=state)

        if adapter is None:
            raise ValueError(f"View of '{state.taxonomy_id}' dispatched without a loaded vocabulary")

        if view is ViewKind.RAW:
            return RenderAction(kind=RenderKind.RAW, state=state)
        if view is ViewKind.TAXONOMY:
            return RenderAction(kind=RenderKind.OVERVIEW, state=state)

        term_id = state.term_id or ""
        if not adapter.has_term(term_id):
            logger.warning("Term '%s' not in vocabulary '%s'", term_id, state.taxonomy_id)
            raise TermNotFoundError(state.taxonomy_id, term_id)

        term_kind = adapter.get_term_kind(term_id)
        return RenderAction(
            kind=RENDER_KIND_BY_TERM_KIND[term_kind],
            state=state,
            term_id=term_id,
            term_kind=term_kind,
        )
