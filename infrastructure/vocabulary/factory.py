"""Factory for creating vocabulary adapters."""

import json
import logging
from typing import Any

from domain.vocabulary import VocabularyGraph, parse_vocabulary_document

from .base import VocabularyAdapter
from .jsonld import JsonLdVocabularyAdapter

logger = logging.getLogger(__name__)


def parse_json_document(text: str) -> dict[str, Any]:
    """
    Decode a fetched JSON-LD document.

    Raises:
        ValueError: If the text is not a JSON object (json.JSONDecodeError is a ValueError)
    """
    data = json.loads(text)
    if not isinstance(data, dict):
        raise ValueError(f"Expected a JSON object, got {type(data).__name__}")
    return data


def make_adapter(
    taxonomy_id: str,
    *,
    base: VocabularyGraph,
    document_text: str,
) -> VocabularyAdapter:
    """
    Parse a taxonomy document and merge it on top of the base vocabulary.

    Args:
        taxonomy_id: Identifier the adapter is cached under
        base: The already-parsed base reference vocabulary (shared, never mutated)
        document_text: Raw JSON-LD text of the taxonomy

    Returns:
        A JsonLdVocabularyAdapter whose membership lists contain only the terms the
        taxonomy itself introduces

    Raises:
        ValueError: If the document does not parse
    """
    taxonomy = parse_vocabulary_document(parse_json_document(document_text))
    merged = base.merged_with(taxonomy)

    own: list[str] = []
    for term_id in taxonomy.nodes:
        term_id = merged.compact(term_id) if "://" in term_id else term_id
        if term_id not in base.nodes and term_id not in own:
            own.append(term_id)

    logger.debug("Merged '%s' (%d nodes) onto base (%d nodes)", taxonomy_id, len(taxonomy.nodes), len(base.nodes))
    return JsonLdVocabularyAdapter(
        taxonomy_id=taxonomy_id,
        graph=merged,
        own_term_ids=own,
        namespaces=taxonomy.context,
    )
