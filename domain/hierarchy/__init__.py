"""Ancestor path enumeration for breadcrumbs (pure, no I/O)."""

from domain.hierarchy.paths import AncestorPath, HierarchyPathEnumerator, SuperTypeRelation

__all__ = [
    "AncestorPath",
    "HierarchyPathEnumerator",
    "SuperTypeRelation",
]
