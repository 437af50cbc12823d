import pytest

from domain.navigation import (
    Location,
    NavigationState,
    base_path_of,
    state_from_location,
    state_to_location,
)


def test_list_location_shape() -> None:
    state = NavigationState.from_fields(list_id="L1", taxonomy_id="T1", term_id="ex:Widget")

    location = state_to_location(state)

    assert location.path == "/list/L1"
    assert location.query == {"voc": "T1", "term": "ex:Widget"}


def test_standalone_vocabulary_location_shape() -> None:
    location = state_to_location(NavigationState.from_fields(taxonomy_id="T1", format="jsonld"))

    assert location.to_url() == "/voc/T1?format=jsonld"


def test_empty_state_is_root() -> None:
    assert state_to_location(NavigationState()).to_url() == "/"


def test_base_path_is_prefixed() -> None:
    location = state_to_location(NavigationState.from_fields(taxonomy_id="T1"), "/browser/")

    assert location.path == "/browser/voc/T1"


@pytest.mark.parametrize(
    "fields",
    [
        {},
        {"list_id": "L1"},
        {"list_id": "L1", "taxonomy_id": "T1"},
        {"list_id": "L1", "taxonomy_id": "T1", "term_id": "ex:Widget"},
        {"list_id": "L1", "taxonomy_id": "T1", "format": "jsonld"},
        {"taxonomy_id": "T1", "term_id": "schema:Thing"},
        {"taxonomy_id": "a b/c", "term_id": "ex:Odd Name"},
    ],
)
def test_round_trip_through_url(fields: dict[str, str]) -> None:
    state = NavigationState.from_fields(**fields)

    url = state_to_location(state, "apps/browser").to_url()
    parsed = state_from_location(Location.from_url(url))

    assert parsed == state
    # reading twice yields the same state
    assert state_from_location(Location.from_url(url)) == parsed


def test_last_segment_pair_decides() -> None:
    location = Location.from_url("https://host.example/voc/old/list/L7?voc=T3")

    state = state_from_location(location)

    assert state.list_id == "L7"
    assert state.taxonomy_id == "T3"


def test_voc_query_without_path_pair() -> None:
    state = state_from_location(Location.from_url("/index.html?voc=T1&term=ex:Red"))

    assert state.taxonomy_id == "T1"
    assert state.term_id == "ex:Red"


def test_malformed_location_is_repaired() -> None:
    state = state_from_location(Location.from_url("/list/L1?term=ex:Red&format=jsonld"))

    assert state == NavigationState(list_id="L1")


def test_base_path_of() -> None:
    assert base_path_of(Location.from_url("/apps/browser/list/L1?voc=T1")) == "apps/browser"
    assert base_path_of(Location.from_url("/voc/T1")) == ""
    assert base_path_of(Location.from_url("/")) == ""
