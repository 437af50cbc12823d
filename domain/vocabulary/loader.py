"""Parse vocabulary and list documents from pre-loaded JSON-LD dicts."""

from typing import Any

from domain.schemas import ListEntry, VocabList
from domain.vocabulary.graph import RDFS_NS, SCHEMA_NAMESPACES, TermNode, VocabularyGraph

# absolute predicate IRI -> TermNode field
_PREDICATES: dict[str, str] = {
    RDFS_NS + "subClassOf": "sub_class_of",
    RDFS_NS + "subPropertyOf": "sub_property_of",
    RDFS_NS + "label": "label",
    RDFS_NS + "comment": "comment",
}
for _ns in SCHEMA_NAMESPACES:
    _PREDICATES[_ns + "domainIncludes"] = "domain_includes"
    _PREDICATES[_ns + "rangeIncludes"] = "range_includes"

_TEXT_FIELDS = {"label", "comment"}


def _parse_context(raw: Any) -> dict[str, str]:
    """Collect `prefix -> namespace` bindings; term definitions and remote contexts are ignored."""
    blocks = raw if isinstance(raw, list) else [raw]
    context: dict[str, str] = {}
    for block in blocks:
        if not isinstance(block, dict):
            continue
        for key, value in block.items():
            if key.startswith("@") or not isinstance(value, str):
                continue
            if value.endswith(("/", "#")):
                context[str(key)] = value
    return context


def _as_list(value: Any) -> list[Any]:
    if value is None:
        return []
    return value if isinstance(value, list) else [value]


def _ids(value: Any, graph: VocabularyGraph) -> list[str]:
    out: list[str] = []
    for item in _as_list(value):
        raw = item.get("@id") if isinstance(item, dict) else item
        if not isinstance(raw, str) or not raw.strip():
            continue
        term_id = graph.compact(raw.strip())
        if term_id not in out:
            out.append(term_id)
    return out


def _text(value: Any) -> str | None:
    """Pick one literal: an English `@value` if present, else the first one."""
    items = _as_list(value)
    fallback: str | None = None
    for item in items:
        if isinstance(item, dict):
            literal = item.get("@value")
            if literal is None:
                continue
            if item.get("@language") in (None, "en"):
                return str(literal)
            fallback = fallback or str(literal)
        elif item is not None:
            return str(item)
    return fallback


def _parse_node(raw: dict[str, Any], graph: VocabularyGraph) -> TermNode | None:
    raw_id = raw.get("@id")
    if not isinstance(raw_id, str) or not raw_id.strip():
        return None

    fields: dict[str, Any] = {
        "term_id": graph.compact(raw_id.strip()),
        "types": _ids(raw.get("@type"), graph),
    }
    for key, value in raw.items():
        if key.startswith("@"):
            continue
        field = _PREDICATES.get(graph.expand(key))
        if field is None:
            continue
        fields[field] = _text(value) if field in _TEXT_FIELDS else _ids(value, graph)
    return TermNode(**fields)


def parse_vocabulary_document(data: dict[str, Any]) -> VocabularyGraph:
    """
    Parse a JSON-LD vocabulary document into a VocabularyGraph.

    This is a pure function - fetching happens in the infrastructure layer.

    Args:
        data: Dictionary from json.loads()

    Returns:
        VocabularyGraph with compacted term ids, in document order

    Raises:
        ValueError: If the document is not a JSON-LD object or has no usable nodes
    """
    if not isinstance(data, dict):
        raise ValueError(f"Vocabulary document must be a JSON object, got {type(data).__name__}")

    graph = VocabularyGraph(context=_parse_context(data.get("@context")), document=data)

    raw_nodes = data.get("@graph")
    if raw_nodes is None:
        raw_nodes = [data] if "@id" in data else []
    if not isinstance(raw_nodes, list):
        raise ValueError("@graph must be a list")

    for raw in raw_nodes:
        if not isinstance(raw, dict):
            continue
        node = _parse_node(raw, graph)
        if node is None:
            continue
        if node.term_id in graph.nodes:
            graph.nodes[node.term_id] = graph.nodes[node.term_id].merged_with(node)
        else:
            graph.nodes[node.term_id] = node

    if not graph.nodes:
        raise ValueError("Vocabulary document defines no nodes")

    for key in ("schema:name", "name", "http://schema.org/name", "https://schema.org/name"):
        if key in data:
            graph.name = _text(data[key])
            break

    return graph


def parse_vocab_list(data: dict[str, Any], list_id: str) -> VocabList:
    """
    Parse a list document (`schema:name`, `schema:hasPart[]`) into a VocabList.

    Raises:
        ValueError: If the document or one of its parts has the wrong shape
    """
    if not isinstance(data, dict):
        raise ValueError(f"List document must be a JSON object, got {type(data).__name__}")

    parts = data.get("schema:hasPart", []) or []
    if not isinstance(parts, list):
        raise ValueError("schema:hasPart must be a list")

    entries: list[ListEntry] = []
    for part in parts:
        if not isinstance(part, dict) or not isinstance(part.get("@id"), str):
            raise ValueError(f"List part without a string @id: {part!r}")
        iri = part["@id"].strip()
        author = part.get("schema:author")
        entries.append(
            ListEntry(
                taxonomy_id=iri.rstrip("/").split("/")[-1],
                iri=iri,
                name=_text(part.get("schema:name")),
                author=_text(author.get("schema:name")) if isinstance(author, dict) else _text(author),
                description=_text(part.get("schema:description")),
            )
        )

    return VocabList(list_id=list_id, name=_text(data.get("schema:name")) or list_id, entries=entries)
