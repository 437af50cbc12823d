"""Base adapter interface for loaded vocabularies."""

import logging
from abc import ABC, abstractmethod
from functools import cached_property
from typing import Any

from domain.classification import MembershipSnapshot
from domain.hierarchy import HierarchyPathEnumerator, SuperTypeRelation
from domain.schemas import TermKind

logger = logging.getLogger(__name__)


class VocabularyAdapter(ABC):
    """
    Abstract base class for a queryable vocabulary (one taxonomy merged with the base vocabulary).

    Relation queries return ordered term ids, empty when nothing is related, and
    raise TermNotFoundError for ids the adapter does not know.
    """

    taxonomy_id: str

    def __init__(self, *, taxonomy_id: str) -> None:
        self.taxonomy_id = taxonomy_id

    # ---- hierarchy ----
    @abstractmethod
    def get_super_classes(self, term_id: str) -> list[str]: ...

    @abstractmethod
    def get_super_properties(self, term_id: str) -> list[str]: ...

    @abstractmethod
    def get_super_data_types(self, term_id: str) -> list[str]: ...

    @abstractmethod
    def get_sub_classes(self, term_id: str) -> list[str]: ...

    @abstractmethod
    def get_sub_properties(self, term_id: str) -> list[str]: ...

    # ---- relations ----
    @abstractmethod
    def get_properties(self, term_id: str) -> list[str]:
        """Properties whose domain includes the class."""

    @abstractmethod
    def get_domains(self, term_id: str) -> list[str]: ...

    @abstractmethod
    def get_ranges(self, term_id: str) -> list[str]: ...

    @abstractmethod
    def get_enumeration_members(self, term_id: str) -> list[str]: ...

    @abstractmethod
    def get_domain_enumerations(self, term_id: str) -> list[str]: ...

    @abstractmethod
    def is_range_of(self, term_id: str) -> list[str]:
        """Properties whose range includes the term."""

    # ---- term data ----
    @abstractmethod
    def has_term(self, term_id: str) -> bool: ...

    @abstractmethod
    def get_term_kind(self, term_id: str) -> TermKind: ...

    @abstractmethod
    def get_description(self, term_id: str) -> str | None: ...

    @abstractmethod
    def get_canonical_id(self, term_id: str) -> str: ...

    @abstractmethod
    def list_members_by_kind(self, kind: TermKind) -> list[str]:
        """Terms of `kind` defined by the taxonomy itself (base vocabulary excluded)."""

    # ---- vocabulary metadata ----
    @property
    @abstractmethod
    def name(self) -> str: ...

    @property
    @abstractmethod
    def namespaces(self) -> dict[str, str]: ...

    @property
    @abstractmethod
    def document(self) -> dict[str, Any]:
        """The taxonomy's raw JSON-LD document."""

    # ---- derived helpers ----
    @cached_property
    def _snapshot(self) -> MembershipSnapshot:
        return MembershipSnapshot.from_lists({kind: self.list_members_by_kind(kind) for kind in TermKind})

    def membership_snapshot(self) -> MembershipSnapshot:
        """Immutable membership sets, computed once per adapter."""
        return self._snapshot

    def hierarchy(self) -> HierarchyPathEnumerator:
        return HierarchyPathEnumerator(
            {
                SuperTypeRelation.SUPER_CLASSES: self.get_super_classes,
                SuperTypeRelation.SUPER_PROPERTIES: self.get_super_properties,
                SuperTypeRelation.SUPER_DATA_TYPES: self.get_super_data_types,
            }
        )
