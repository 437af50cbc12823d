"""Decide whether a referenced term is navigable in place or must be followed out."""

import logging
from collections.abc import Callable, Iterable, Mapping, Sequence

from pydantic import BaseModel, ConfigDict, Field

from domain.errors import TermNotFoundError, UnresolvedTermError
from domain.schemas import TermKind

logger = logging.getLogger(__name__)

HrefBuilder = Callable[[str], str]
IriResolver = Callable[[str], str]


class MembershipSnapshot(BaseModel):
    """Immutable per-kind term sets of the active vocabulary."""

    model_config = ConfigDict(frozen=True)

    members: dict[TermKind, frozenset[str]] = Field(default_factory=dict)

    @classmethod
    def from_lists(cls, lists: Mapping[TermKind, Iterable[str]]) -> "MembershipSnapshot":
        return cls(members={kind: frozenset(lists.get(kind, ())) for kind in TermKind})

    def __contains__(self, term_id: object) -> bool:
        return any(term_id in ids for ids in self.members.values())


class TermReference(BaseModel):
    model_config = ConfigDict(frozen=True)

    term_id: str
    href: str

    @property
    def is_internal(self) -> bool:
        return False


class InternalReference(TermReference):
    """A link that re-navigates the browser to the term (`navigate({term_id})`)."""

    @property
    def is_internal(self) -> bool:
        return True


class ExternalReference(TermReference):
    """An outbound link to the term's canonical absolute IRI."""

    @property
    def iri(self) -> str:
        return self.href


class TermClassifier:
    """
    Classify term references against the active vocabulary only.

    Args:
        snapshot: Membership of the active vocabulary, or None when none is loaded
        href_for: Builds the in-app location URL for a term of the active vocabulary
        resolvers: Canonical-IRI lookups tried in order for external terms; each may
            raise TermNotFoundError
    """

    def __init__(
        self,
        *,
        snapshot: MembershipSnapshot | None,
        href_for: HrefBuilder,
        resolvers: Sequence[IriResolver] = (),
    ) -> None:
        self.snapshot = snapshot
        self._href_for = href_for
        self._resolvers = tuple(resolvers)

    def is_internal(self, term_id: str) -> bool:
        return self.snapshot is not None and term_id in self.snapshot

    def classify(self, term_id: str) -> InternalReference | ExternalReference:
        """
        Raises:
            UnresolvedTermError: If the term is external and no resolver knows it
        """
        if self.is_internal(term_id):
            return InternalReference(term_id=term_id, href=self._href_for(term_id))

        for resolve in self._resolvers:
            try:
                return ExternalReference(term_id=term_id, href=resolve(term_id))
            except TermNotFoundError:
                continue

        logger.debug("No resolver knows term '%s'", term_id)
        raise UnresolvedTermError(term_id)

    def href(self, term_id: str) -> str:
        return self.classify(term_id).href
