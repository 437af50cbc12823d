"""
Domain layer: Browser logic with minimal external dependencies.

Contains:
- schemas: term kinds and vocabulary lists
- navigation: navigation state, invariant repair, location codec
- hierarchy: ancestor path enumeration for breadcrumbs
- classification: internal/external term references
- vocabulary: JSON-LD graph parsing
- errors: the browser's error types
"""

from domain.errors import (
    BrowserError,
    CyclicHierarchyError,
    FetchError,
    LoadError,
    TermNotFoundError,
    UnresolvedTermError,
)
from domain.schemas import ListEntry, TermKind, VocabList

__all__ = [
    "TermKind",
    "ListEntry",
    "VocabList",
    "BrowserError",
    "FetchError",
    "LoadError",
    "TermNotFoundError",
    "CyclicHierarchyError",
    "UnresolvedTermError",
]
