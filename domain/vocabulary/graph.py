"""In-memory model of a parsed JSON-LD vocabulary graph."""

from typing import Any

from pydantic import BaseModel, Field

RDF_NS = "http://www.w3.org/1999/02/22-rdf-syntax-ns#"
RDFS_NS = "http://www.w3.org/2000/01/rdf-schema#"
SCHEMA_NAMESPACES = ("https://schema.org/", "http://schema.org/")

RDFS_CLASS = RDFS_NS + "Class"
RDF_PROPERTY = RDF_NS + "Property"


def is_schema_iri(iri: str, local_name: str) -> bool:
    """True if `iri` is schema.org's `local_name` under either scheme."""
    return any(iri == ns + local_name for ns in SCHEMA_NAMESPACES)


def _merge_unique(left: list[str], right: list[str]) -> list[str]:
    out = list(left)
    for item in right:
        if item not in out:
            out.append(item)
    return out


class TermNode(BaseModel):
    """One node of the graph, with ids already compacted against the document context."""

    term_id: str
    types: list[str] = Field(default_factory=list)
    label: str | None = None
    comment: str | None = None
    sub_class_of: list[str] = Field(default_factory=list)
    sub_property_of: list[str] = Field(default_factory=list)
    domain_includes: list[str] = Field(default_factory=list)
    range_includes: list[str] = Field(default_factory=list)

    def merged_with(self, other: "TermNode") -> "TermNode":
        """Combine two descriptions of the same term; `other` extends `self`."""
        return TermNode(
            term_id=self.term_id,
            types=_merge_unique(self.types, other.types),
            label=other.label or self.label,
            comment=other.comment or self.comment,
            sub_class_of=_merge_unique(self.sub_class_of, other.sub_class_of),
            sub_property_of=_merge_unique(self.sub_property_of, other.sub_property_of),
            domain_includes=_merge_unique(self.domain_includes, other.domain_includes),
            range_includes=_merge_unique(self.range_includes, other.range_includes),
        )


class VocabularyGraph(BaseModel):
    """Nodes of one (or several merged) vocabulary documents plus their prefix map."""

    context: dict[str, str] = Field(default_factory=dict)  # prefix -> namespace IRI
    nodes: dict[str, TermNode] = Field(default_factory=dict)  # insertion order = document order
    name: str | None = None
    document: dict[str, Any] = Field(default_factory=dict)

    def expand(self, term_id: str) -> str:
        """Expand a compact id (`schema:Thing`) to an absolute IRI; absolute ids pass through."""
        prefix, sep, local = term_id.partition(":")
        if sep and not local.startswith("//") and prefix in self.context:
            return self.context[prefix] + local
        return term_id

    def compact(self, iri: str) -> str:
        """Compact an absolute IRI with the longest matching namespace; unknown IRIs pass through."""
        best: tuple[str, str] | None = None
        for prefix, ns in self.context.items():
            if iri.startswith(ns) and len(iri) > len(ns):
                if best is None or len(ns) > len(best[1]):
                    best = (prefix, ns)
        if best is None:
            return iri
        return f"{best[0]}:{iri[len(best[1]):]}"

    def merged_with(self, overlay: "VocabularyGraph") -> "VocabularyGraph":
        """
        Merge `overlay` on top of this graph.

        Prefixes already bound here keep their namespace. Nodes present in both are
        combined; new overlay nodes are appended in overlay order. The merged graph
        keeps the overlay's name and raw document.
        """
        context = dict(self.context)
        for prefix, ns in overlay.context.items():
            context.setdefault(prefix, ns)

        merged = VocabularyGraph(context=context)

        def recompact(ids: list[str]) -> list[str]:
            return [merged.compact(i) if "://" in i else i for i in ids]

        nodes = dict(self.nodes)
        for node in overlay.nodes.values():
            node = node.model_copy(
                update={
                    "term_id": recompact([node.term_id])[0],
                    "types": recompact(node.types),
                    "sub_class_of": recompact(node.sub_class_of),
                    "sub_property_of": recompact(node.sub_property_of),
                    "domain_includes": recompact(node.domain_includes),
                    "range_includes": recompact(node.range_includes),
                }
            )
            term_id = node.term_id
            nodes[term_id] = nodes[term_id].merged_with(node) if term_id in nodes else node

        return VocabularyGraph(
            context=context,
            nodes=nodes,
            name=overlay.name or self.name,
            document=overlay.document,
        )
