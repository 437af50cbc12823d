import pytest

from application.dispatch import RenderKind, ViewDispatcher
from application.rendering import RenderContext, get_renderer_class, make_renderer, register_renderer
from application.rendering.html import breadcrumbs, esc, pretty_iri, term_link
from domain.navigation import Location, NavigationState, state_to_location
from domain.schemas import ListEntry, VocabList


def _render(state: NavigationState, adapter=None, vocab_list=None) -> str:
    action = ViewDispatcher().dispatch(state, adapter, vocab_list)
    ctx = RenderContext(
        state=state,
        href_for=lambda change: state_to_location(state.apply(change)).to_url(),
        adapter=adapter,
        vocab_list=vocab_list,
    )
    return make_renderer(action.kind).render(action, ctx)


def test_every_render_kind_has_a_renderer() -> None:
    for kind in RenderKind:
        assert make_renderer(kind).kind is kind


def test_duplicate_registration_is_rejected() -> None:
    make_renderer(RenderKind.EMPTY)
    existing = get_renderer_class(RenderKind.EMPTY)

    with pytest.raises(RuntimeError):
        register_renderer(RenderKind.EMPTY, existing)


def test_helpers_escape_and_prettify() -> None:
    assert esc('<a href="x">') == "&lt;a href=&quot;x&quot;&gt;"
    assert pretty_iri("schema:Thing") == "Thing"
    assert pretty_iri("https://schema.org/Thing") == "Thing"
    assert pretty_iri("ex:Widget") == "ex:Widget"


def test_list_view_links_entries_into_the_list() -> None:
    vocab_list = VocabList(
        list_id="L1",
        name="Demo <List>",
        entries=[ListEntry(taxonomy_id="T1", iri="https://semantify.it/voc/T1", name="Widgets", author="Jane")],
    )

    html = _render(NavigationState.from_fields(list_id="L1"), vocab_list=vocab_list)

    assert "Demo &lt;List&gt;" in html
    assert 'href="/list/L1?voc=T1"' in html
    assert "Jane" in html


def test_overview_lists_only_taxonomy_terms(adapter) -> None:
    html = _render(NavigationState.from_fields(taxonomy_id="T1"), adapter)

    assert "<h1>Example Widgets</h1>" in html
    assert "2 Classes" in html
    assert "1 Enumeration<" in html
    assert "2 Enumeration Members" in html
    assert 'href="/voc/T1?term=ex%3AWidget"' in html
    assert 'href="/voc/T1?format=jsonld"' in html
    # base vocabulary terms are not listed
    assert "?term=schema%3AThing" not in html


def test_overview_links_back_to_list(adapter) -> None:
    vocab_list = VocabList(list_id="L1", name="Demo List")

    html = _render(NavigationState.from_fields(list_id="L1", taxonomy_id="T1"), adapter, vocab_list)

    assert 'from List: <a class="a-js-link" href="/list/L1">Demo List</a>' in html


def test_raw_view_pretty_prints_document(adapter) -> None:
    html = _render(NavigationState.from_fields(taxonomy_id="T1", format="jsonld"), adapter)

    assert html.startswith("<pre")
    assert "&quot;ex:Widget&quot;" in html


def test_class_view_breadcrumbs_and_inherited_properties(adapter) -> None:
    html = _render(NavigationState.from_fields(taxonomy_id="T1", term_id="ex:Widget"), adapter)

    assert html.count('class="breadcrumbs"') == 3
    # base terms link out, taxonomy terms link in place
    assert 'href="https://schema.org/LocalBusiness"' in html
    assert 'href="/voc/T1?term=ex%3AGadget"' in html
    assert "Properties from" in html
    assert 'href="/voc/T1?term=ex%3Acolor"' in html
    assert 'href="https://schema.org/name"' in html
    assert 'href="/voc/T1?term=ex%3Aserial"' in html


def test_property_view(adapter) -> None:
    html = _render(NavigationState.from_fields(taxonomy_id="T1", term_id="ex:serial"), adapter)

    assert "Values expected to be one of these types" in html
    assert 'href="/voc/T1?term=ex%3ASerialNumber"' in html
    assert "Super-properties" in html
    assert "The name of the item." in html


def test_enumeration_view_lists_members_and_ranges(adapter) -> None:
    html = _render(NavigationState.from_fields(taxonomy_id="T1", term_id="ex:Color"), adapter)

    assert "Enumeration members" in html
    assert 'href="/voc/T1?term=ex%3ARed"' in html
    assert 'href="/voc/T1?term=ex%3ABlue"' in html
    assert "may appear as a value for the following properties" in html


def test_enumeration_member_view(adapter) -> None:
    html = _render(NavigationState.from_fields(taxonomy_id="T1", term_id="ex:Red"), adapter)

    assert "A member value for enumeration: " in html
    assert " :: " in html


def test_data_type_view(adapter) -> None:
    html = _render(NavigationState.from_fields(taxonomy_id="T1", term_id="ex:SerialNumber"), adapter)

    assert 'href="https://schema.org/DataType"' in html
    assert 'href="https://schema.org/Text"' in html


def test_unresolvable_term_renders_as_text(adapter) -> None:
    ctx = RenderContext(
        state=NavigationState.from_fields(taxonomy_id="T1"),
        href_for=lambda change: "/",
        adapter=adapter,
    )

    assert term_link(ctx.classifier, "foo:<Bar>") == "foo:&lt;Bar&gt;"


def test_breadcrumbs_one_line_per_path(adapter) -> None:
    ctx = RenderContext(
        state=NavigationState.from_fields(taxonomy_id="T1"),
        href_for=lambda change: state_to_location(NavigationState.from_fields(taxonomy_id="T1").apply(change)).to_url(),
        adapter=adapter,
    )
    paths = adapter.hierarchy().enumerate("ex:Widget")

    html = breadcrumbs(ctx.classifier, paths, "rdfs:subClassOf")

    assert html.count("<br>") == len(paths) - 1
    assert html.count('property="rdfs:subClassOf"') == len(paths)


def test_location_query_is_url_encoded() -> None:
    location = state_to_location(NavigationState.from_fields(taxonomy_id="T1", term_id="ex:Widget"))

    assert location.to_url() == "/voc/T1?term=ex%3AWidget"
    assert Location.from_url(location.to_url()).query["term"] == "ex:Widget"


@pytest.mark.parametrize("term_id", [None, "ex:Widget", "ex:serial", "ex:Color", "ex:Red", "ex:SerialNumber"])
def test_headings_carry_external_link_legend(adapter, term_id) -> None:
    html = _render(NavigationState.from_fields(taxonomy_id="T1", term_id=term_id), adapter)

    assert html.count('class="external-link-legend"') == 1
    assert "External link to schema.org" in html
    assert html.index("</h1>") < html.index("external-link-legend")
