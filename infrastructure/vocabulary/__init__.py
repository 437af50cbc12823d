"""
Vocabulary adapters.

Implements the adapter pattern for the semantic data source:
- VocabularyAdapter: the query interface the browser core consumes
- JsonLdVocabularyAdapter: schema.org-style JSON-LD graphs

Use make_adapter() to build one from a fetched taxonomy document.
"""

from infrastructure.vocabulary.base import VocabularyAdapter
from infrastructure.vocabulary.factory import make_adapter, parse_json_document
from infrastructure.vocabulary.jsonld import JsonLdVocabularyAdapter

__all__ = [
    # Abstract base
    "VocabularyAdapter",
    # Concrete implementation
    "JsonLdVocabularyAdapter",
    # Factory (most commonly used)
    "make_adapter",
    "parse_json_document",
]
