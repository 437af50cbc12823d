"""Internal-vs-external classification of term references."""

from domain.classification.classifier import (
    ExternalReference,
    InternalReference,
    MembershipSnapshot,
    TermClassifier,
    TermReference,
)

__all__ = [
    "TermClassifier",
    "MembershipSnapshot",
    "TermReference",
    "InternalReference",
    "ExternalReference",
]
