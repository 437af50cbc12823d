import pytest

from domain.errors import CyclicHierarchyError
from domain.hierarchy import HierarchyPathEnumerator, SuperTypeRelation


def _enumerator(parents: dict[str, list[str]]) -> HierarchyPathEnumerator:
    return HierarchyPathEnumerator({SuperTypeRelation.SUPER_CLASSES: lambda t: parents.get(t, [])})


def test_root_term_has_single_path_of_itself() -> None:
    enumerator = _enumerator({})

    assert enumerator.enumerate("schema:Thing") == [("schema:Thing",)]


def test_single_chain_is_root_first() -> None:
    enumerator = _enumerator({"C": ["B"], "B": ["A"]})

    assert enumerator.enumerate("C") == [("A", "B", "C")]


def test_campground_paths_follow_reported_order() -> None:
    parents = {
        "schema:Campground": ["schema:LodgingBusiness", "schema:CivicStructure"],
        "schema:LodgingBusiness": ["schema:LocalBusiness"],
        "schema:LocalBusiness": ["schema:Organization", "schema:Place"],
        "schema:CivicStructure": ["schema:Place"],
        "schema:Organization": ["schema:Thing"],
        "schema:Place": ["schema:Thing"],
    }

    paths = _enumerator(parents).enumerate("schema:Campground")

    assert paths == [
        ("schema:Thing", "schema:Organization", "schema:LocalBusiness", "schema:LodgingBusiness", "schema:Campground"),
        ("schema:Thing", "schema:Place", "schema:LocalBusiness", "schema:LodgingBusiness", "schema:Campground"),
        ("schema:Thing", "schema:Place", "schema:CivicStructure", "schema:Campground"),
    ]
    for path in paths:
        assert path[-1] == "schema:Campground"
        assert len(set(path)) == len(path)


def test_duplicate_super_types_do_not_repeat_paths() -> None:
    enumerator = _enumerator({"B": ["A", "A"]})

    assert enumerator.enumerate("B") == [("A", "B")]


def test_cycle_raises_with_offending_term() -> None:
    enumerator = _enumerator({"A": ["B"], "B": ["A"]})

    with pytest.raises(CyclicHierarchyError) as exc_info:
        enumerator.enumerate("A")

    assert exc_info.value.term_id == "A"
    assert exc_info.value.path == ("A", "B")


def test_self_loop_is_a_cycle() -> None:
    with pytest.raises(CyclicHierarchyError):
        _enumerator({"A": ["A"]}).enumerate("A")


def test_diamond_is_not_a_cycle() -> None:
    enumerator = _enumerator({"D": ["B", "C"], "B": ["A"], "C": ["A"]})

    assert enumerator.enumerate("D") == [("A", "B", "D"), ("A", "C", "D")]


def test_unregistered_relation_raises_key_error() -> None:
    with pytest.raises(KeyError):
        _enumerator({}).enumerate("A", SuperTypeRelation.SUPER_PROPERTIES)


def test_enumerate_many_concatenates_and_drops_repeats() -> None:
    enumerator = _enumerator({"X": ["A"], "Y": ["A"], "Z": ["B"]})

    paths = enumerator.enumerate_many(["X", "Y", "X", "Z"])

    assert paths == [("A", "X"), ("A", "Y"), ("B", "Z")]


def test_paths_are_recomputed_on_every_call() -> None:
    parents: dict[str, list[str]] = {"B": ["A"]}
    enumerator = _enumerator(parents)
    assert enumerator.enumerate("B") == [("A", "B")]

    parents["B"] = ["C"]

    assert enumerator.enumerate("B") == [("C", "B")]
