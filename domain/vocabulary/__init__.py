"""
Vocabulary documents: graph model and JSON-LD parsing.

All functions in this module are pure (no file or network I/O).
"""

from domain.vocabulary.graph import TermNode, VocabularyGraph
from domain.vocabulary.loader import parse_vocab_list, parse_vocabulary_document

__all__ = [
    "TermNode",
    "VocabularyGraph",
    "parse_vocabulary_document",
    "parse_vocab_list",
]
