"""Enumerate every ancestor path of a term in a multiple-inheritance hierarchy."""

from collections.abc import Callable, Iterable, Mapping, Sequence
from enum import Enum

from domain.errors import CyclicHierarchyError

AncestorPath = tuple[str, ...]
SuperTypeLookup = Callable[[str], Sequence[str]]


class SuperTypeRelation(str, Enum):
    """Which super-type function a walk follows."""

    SUPER_CLASSES = "super_classes"
    SUPER_PROPERTIES = "super_properties"
    SUPER_DATA_TYPES = "super_data_types"


class HierarchyPathEnumerator:
    """
    Compute root-to-term chains under a super-type relation.

    Example (schema.org Campground):
        [
          ("schema:Thing", "schema:Organization", "schema:LocalBusiness", "schema:LodgingBusiness", "schema:Campground"),
          ("schema:Thing", "schema:Place", "schema:LocalBusiness", "schema:LodgingBusiness", "schema:Campground"),
          ("schema:Thing", "schema:Place", "schema:CivicStructure", "schema:Campground"),
        ]

    Paths are recomputed on every call; nothing is cached.
    """

    def __init__(self, relations: Mapping[SuperTypeRelation, SuperTypeLookup]) -> None:
        self._relations = dict(relations)

    def enumerate(
        self,
        term_id: str,
        relation: SuperTypeRelation = SuperTypeRelation.SUPER_CLASSES,
    ) -> list[AncestorPath]:
        """
        Return every ancestor path of `term_id`, each ending with `term_id`.

        Ordering follows the order in which super-types are reported, recursively.

        Raises:
            KeyError: If no lookup is registered for `relation`
            CyclicHierarchyError: If a term appears twice on one path
        """
        lookup = self._relations.get(relation)
        if lookup is None:
            raise KeyError(f"No super-type lookup registered for relation={relation.value}")
        return self._walk(term_id, lookup, ())

    def enumerate_many(
        self,
        term_ids: Iterable[str],
        relation: SuperTypeRelation = SuperTypeRelation.SUPER_CLASSES,
    ) -> list[AncestorPath]:
        """Concatenate the paths of several starting terms, dropping repeats."""
        out: list[AncestorPath] = []
        for term_id in term_ids:
            for path in self.enumerate(term_id, relation):
                if path not in out:
                    out.append(path)
        return out

    def _walk(self, term_id: str, lookup: SuperTypeLookup, below: tuple[str, ...]) -> list[AncestorPath]:
        # `below` holds the walk so far, from the starting term upwards
        if term_id in below:
            raise CyclicHierarchyError(term_id, below)

        supers = list(lookup(term_id))
        if not supers:
            return [(term_id,)]

        chain = (*below, term_id)
        paths: list[AncestorPath] = []
        seen: set[AncestorPath] = set()
        for super_id in supers:
            for path in self._walk(super_id, lookup, chain):
                extended = (*path, term_id)
                if extended not in seen:
                    seen.add(extended)
                    paths.append(extended)
        return paths
