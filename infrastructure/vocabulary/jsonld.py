"""Vocabulary adapter over a merged JSON-LD graph (schema.org style)."""

import logging
from collections import defaultdict
from typing import Any

from domain.errors import TermNotFoundError
from domain.schemas import TermKind
from domain.vocabulary.graph import RDF_PROPERTY, RDFS_CLASS, TermNode, VocabularyGraph, is_schema_iri
from infrastructure.vocabulary.base import VocabularyAdapter

logger = logging.getLogger(__name__)


class JsonLdVocabularyAdapter(VocabularyAdapter):
    """
    Answers term queries from a VocabularyGraph.

    - Kinds are derived once at construction: rdf:Property -> Property; rdfs:Class
      (or schema:DataType typed) nodes are Data Types under schema:DataType,
      Enumerations under schema:Enumeration, Classes otherwise; nodes typed with an
      Enumeration are Enumeration Members. Other nodes are not terms.
    - Reverse relations (sub-types, members, properties per domain, range-of) are
      indexed once, in graph order.
    """

    def __init__(
        self,
        *,
        taxonomy_id: str,
        graph: VocabularyGraph,
        own_term_ids: list[str],
        namespaces: dict[str, str] | None = None,
    ) -> None:
        super().__init__(taxonomy_id=taxonomy_id)
        self._graph = graph
        self._own_term_ids = list(own_term_ids)
        self._namespaces = dict(namespaces if namespaces is not None else graph.context)

        self._kinds: dict[str, TermKind] = self._derive_kinds()

        self._sub_classes: dict[str, list[str]] = defaultdict(list)
        self._sub_properties: dict[str, list[str]] = defaultdict(list)
        self._members: dict[str, list[str]] = defaultdict(list)
        self._properties_by_domain: dict[str, list[str]] = defaultdict(list)
        self._range_of: dict[str, list[str]] = defaultdict(list)
        self._build_indexes()

        logger.debug(
            "Adapter for '%s': %d terms (%d own)",
            taxonomy_id,
            len(self._kinds),
            sum(1 for t in self._own_term_ids if t in self._kinds),
        )

    # ---- construction ----
    def _expanded_types(self, node: TermNode) -> set[str]:
        return {self._graph.expand(t) for t in node.types}

    def _strict_ancestors(self, term_id: str) -> list[str]:
        """Every rdfs:subClassOf ancestor, nearest first (cycle-safe)."""
        seen: set[str] = {term_id}
        queue = list(self._graph.nodes[term_id].sub_class_of)
        out: list[str] = []
        while queue:
            current = queue.pop(0)
            if current in seen:
                continue
            seen.add(current)
            out.append(current)
            node = self._graph.nodes.get(current)
            if node is not None:
                queue.extend(node.sub_class_of)
        return out

    def _is_typed_data_type(self, term_id: str) -> bool:
        node = self._graph.nodes.get(term_id)
        return node is not None and any(is_schema_iri(t, "DataType") for t in self._expanded_types(node))

    def _derive_kinds(self) -> dict[str, TermKind]:
        kinds: dict[str, TermKind] = {}
        for term_id, node in self._graph.nodes.items():
            types = self._expanded_types(node)
            is_data_type = self._is_typed_data_type(term_id)
            if RDF_PROPERTY in types:
                kinds[term_id] = TermKind.PROPERTY
            elif RDFS_CLASS in types or is_data_type:
                ancestors = self._strict_ancestors(term_id)
                expanded = [self._graph.expand(a) for a in ancestors]
                if (
                    is_data_type
                    or any(is_schema_iri(a, "DataType") for a in expanded)
                    or any(self._is_typed_data_type(a) for a in ancestors)
                ):
                    kinds[term_id] = TermKind.DATA_TYPE
                elif any(is_schema_iri(a, "Enumeration") for a in expanded):
                    kinds[term_id] = TermKind.ENUMERATION
                else:
                    kinds[term_id] = TermKind.CLASS

        # enumeration members need every enumeration classified first
        for term_id, node in self._graph.nodes.items():
            if term_id not in kinds and any(kinds.get(t) is TermKind.ENUMERATION for t in node.types):
                kinds[term_id] = TermKind.ENUMERATION_MEMBER
        return kinds

    def _build_indexes(self) -> None:
        for term_id, node in self._graph.nodes.items():
            kind = self._kinds.get(term_id)
            if kind is None:
                continue
            if kind is TermKind.PROPERTY:
                for parent in node.sub_property_of:
                    self._sub_properties[parent].append(term_id)
                for domain in node.domain_includes:
                    self._properties_by_domain[domain].append(term_id)
                for range_ in node.range_includes:
                    self._range_of[range_].append(term_id)
            elif kind is TermKind.ENUMERATION_MEMBER:
                for enum_id in node.types:
                    if self._kinds.get(enum_id) is TermKind.ENUMERATION:
                        self._members[enum_id].append(term_id)
            else:
                for parent in node.sub_class_of:
                    self._sub_classes[parent].append(term_id)

    def _node(self, term_id: str) -> TermNode:
        if term_id not in self._kinds:
            raise TermNotFoundError(self.taxonomy_id, term_id)
        return self._graph.nodes[term_id]

    # ---- hierarchy ----
    # super-types outside the loaded vocabularies (e.g. rdfs:Class) are not walked
    def get_super_classes(self, term_id: str) -> list[str]:
        return [s for s in self._node(term_id).sub_class_of if s in self._kinds]

    def get_super_properties(self, term_id: str) -> list[str]:
        return [s for s in self._node(term_id).sub_property_of if self._kinds.get(s) is TermKind.PROPERTY]

    def get_super_data_types(self, term_id: str) -> list[str]:
        return [s for s in self._node(term_id).sub_class_of if self._kinds.get(s) is TermKind.DATA_TYPE]

    def get_sub_classes(self, term_id: str) -> list[str]:
        self._node(term_id)
        return list(self._sub_classes.get(term_id, []))

    def get_sub_properties(self, term_id: str) -> list[str]:
        self._node(term_id)
        return list(self._sub_properties.get(term_id, []))

    # ---- relations ----
    def get_properties(self, term_id: str) -> list[str]:
        self._node(term_id)
        return list(self._properties_by_domain.get(term_id, []))

    def get_domains(self, term_id: str) -> list[str]:
        return list(self._node(term_id).domain_includes)

    def get_ranges(self, term_id: str) -> list[str]:
        return list(self._node(term_id).range_includes)

    def get_enumeration_members(self, term_id: str) -> list[str]:
        self._node(term_id)
        return list(self._members.get(term_id, []))

    def get_domain_enumerations(self, term_id: str) -> list[str]:
        return [t for t in self._node(term_id).types if self._kinds.get(t) is TermKind.ENUMERATION]

    def is_range_of(self, term_id: str) -> list[str]:
        self._node(term_id)
        return list(self._range_of.get(term_id, []))

    # ---- term data ----
    def has_term(self, term_id: str) -> bool:
        return term_id in self._kinds

    def get_term_kind(self, term_id: str) -> TermKind:
        self._node(term_id)
        return self._kinds[term_id]

    def get_description(self, term_id: str) -> str | None:
        return self._node(term_id).comment

    def get_canonical_id(self, term_id: str) -> str:
        self._node(term_id)
        return self._graph.expand(term_id)

    def list_members_by_kind(self, kind: TermKind) -> list[str]:
        return [t for t in self._own_term_ids if self._kinds.get(t) is kind]

    # ---- vocabulary metadata ----
    @property
    def name(self) -> str:
        return self._graph.name or self.taxonomy_id

    @property
    def namespaces(self) -> dict[str, str]:
        return dict(self._namespaces)

    @property
    def document(self) -> dict[str, Any]:
        return self._graph.document
