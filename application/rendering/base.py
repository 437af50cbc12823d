"""Base renderer interface and the data every renderer receives."""

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable

from application.dispatch import RenderAction, RenderKind
from domain.classification import TermClassifier
from domain.errors import BrowserError
from domain.hierarchy import HierarchyPathEnumerator
from domain.navigation import NavigationChange, NavigationState
from domain.schemas import VocabList
from infrastructure.vocabulary import VocabularyAdapter

from .html import esc

logger = logging.getLogger(__name__)

HrefFor = Callable[[NavigationChange], str]


class RenderContext:
    """Read-only inputs of one render: state, loaded data and link builders."""

    def __init__(
        self,
        *,
        state: NavigationState,
        href_for: HrefFor,
        adapter: VocabularyAdapter | None = None,
        vocab_list: VocabList | None = None,
    ) -> None:
        self.state = state
        self.href_for = href_for
        self.adapter = adapter
        self.vocab_list = vocab_list
        self.classifier = TermClassifier(
            snapshot=adapter.membership_snapshot() if adapter is not None else None,
            href_for=lambda term_id: href_for(NavigationChange(term_id=term_id)),
            resolvers=[adapter.get_canonical_id] if adapter is not None else [],
        )
        self.enumerator: HierarchyPathEnumerator | None = adapter.hierarchy() if adapter is not None else None

    def require_adapter(self) -> VocabularyAdapter:
        if self.adapter is None:
            raise ValueError("This view needs a loaded vocabulary")
        return self.adapter

    def require_enumerator(self) -> HierarchyPathEnumerator:
        if self.enumerator is None:
            raise ValueError("This view needs a loaded vocabulary")
        return self.enumerator


class Renderer(ABC):
    """
    Abstract base class for view renderers.

    Renderers are thin: they only template what the context reports.
    """

    kind: RenderKind

    @abstractmethod
    def render(self, action: RenderAction, ctx: RenderContext) -> str:
        """Return the HTML of the view."""
        raise NotImplementedError


def render_loading_html(state: NavigationState) -> str:
    target = state.taxonomy_id or state.list_id or ""
    return f'<div class="vocab-browser-loading">Loading {esc(target)}&hellip;</div>'


def render_error_html(error: BrowserError) -> str:
    return (
        '<div class="vocab-browser-error">'
        f"<h1>{esc(type(error).__name__)}</h1>"
        f"<p>{esc(str(error))}</p>"
        "</div>"
    )
