"""Renderers for the five term kinds."""

import logging
from collections.abc import Sequence

from application.dispatch import RenderAction, RenderKind
from domain.hierarchy import AncestorPath, SuperTypeRelation
from domain.navigation import NavigationChange

from .base import RenderContext, Renderer
from .html import (
    breadcrumbs,
    definition_table,
    esc,
    external_link_legend,
    internal_link,
    main_content,
    semantic_link,
    table_row,
    term_link,
)
from .registry import register_renderer

logger = logging.getLogger(__name__)


def _term_id(action: RenderAction) -> str:
    if action.term_id is None:
        raise ValueError(f"{action.kind.value} view dispatched without a term")
    return action.term_id


def term_header(
    ctx: RenderContext,
    term_id: str,
    paths: Sequence[AncestorPath],
    relationship: str,
    start: str = "",
    end: str = "",
) -> str:
    """Back link to the vocabulary, title, breadcrumbs and description."""
    adapter = ctx.require_adapter()
    back = internal_link(ctx.href_for(NavigationChange(term_id=None)), adapter.name)
    return (
        f'<span style="float: right;">(from Vocabulary: {back})</span>'
        f'<h1 property="rdfs:label" class="page-title">{esc(term_id)}</h1>'
        + external_link_legend()
        + breadcrumbs(ctx.classifier, paths, relationship, start, end)
        + f'<div property="rdfs:comment">{esc(adapter.get_description(term_id) or "")}<br><br></div>'
    )


def property_row(ctx: RenderContext, property_id: str, only_domain_includes: bool = False) -> str:
    """Property / expected types (or domains) / description row."""
    adapter = ctx.require_adapter()
    separator = "&nbsp; or <br>"
    expected = ""
    if not only_domain_includes:
        expected = separator.join(
            semantic_link(ctx.classifier, "rangeIncludes", r) + term_link(ctx.classifier, r)
            for r in adapter.get_ranges(property_id)
        )
    domains = (separator if only_domain_includes else "").join(
        semantic_link(ctx.classifier, "domainIncludes", d) + (term_link(ctx.classifier, d) if only_domain_includes else "")
        for d in adapter.get_domains(property_id)
    )
    side_cols = (
        f'<td class="prop-etc">{expected}{domains}</td>'
        f'<td class="prop-desc" property="rdfs:comment">{esc(adapter.get_description(property_id) or "")}</td>'
    )
    return table_row(
        "rdf:Property",
        ctx.classifier.href(property_id),
        "rdfs:label",
        term_link(ctx.classifier, property_id),
        side_cols,
        "prop-name",
    )


def ranges_of(ctx: RenderContext, term_id: str, for_enumeration: bool = False) -> str:
    """Table of properties that accept instances of the term as values."""
    properties = ctx.require_adapter().is_range_of(term_id)
    if not properties:
        return ""
    rows = [property_row(ctx, p, only_domain_includes=True) for p in properties]
    suffix = " and its enumeration members or subtypes" if for_enumeration else ""
    return (
        f'<div id="incoming">Instances of {term_link(ctx.classifier, term_id)}{suffix} '
        "may appear as a value for the following properties</div><br>"
        + definition_table(["Property", "On Types", "Description"], rows)
    )


def _link_list(ctx: RenderContext, term_ids: Sequence[str]) -> str:
    return "<ul>" + "".join(f"<li>{term_link(ctx.classifier, t)}</li>" for t in term_ids) + "</ul>"


class ClassRenderer(Renderer):
    kind = RenderKind.CLASS

    def render(self, action: RenderAction, ctx: RenderContext) -> str:
        term_id = _term_id(action)
        paths = ctx.require_enumerator().enumerate(term_id, SuperTypeRelation.SUPER_CLASSES)
        content = term_header(ctx, term_id, paths, "rdfs:subClassOf") + self._properties(ctx, term_id, paths)
        return main_content("rdfs:Class", content)

    def _properties(self, ctx: RenderContext, term_id: str, paths: Sequence[AncestorPath]) -> str:
        adapter = ctx.require_adapter()

        # the class itself, then every ancestor nearest-first, each once
        classes: list[str] = [term_id]
        for path in paths:
            for ancestor in reversed(path[:-1]):
                if ancestor not in classes:
                    classes.append(ancestor)

        html = (
            '<table class="definition-table"><thead><tr>'
            "<th>Property</th><th>Expected Type</th><th>Description</th>"
            "</tr></thead>"
        )
        for class_id in classes:
            properties = adapter.get_properties(class_id)
            if not properties:
                continue
            html += (
                '<tbody><tr class="supertype"><th class="supertype-name" colspan="3">'
                f"Properties from {term_link(ctx.classifier, class_id)}</th></tr></tbody><tbody>"
                + "".join(property_row(ctx, p) for p in properties)
                + "</tbody>"
            )
        html += "</table><br>"

        sub_classes = adapter.get_sub_classes(term_id)
        if sub_classes:
            html += (
                '<b><a id="subtypes" title="Link: #subtypes" href="#subtypes" class="clickableAnchor">'
                "More specific Types</a></b>" + _link_list(ctx, sub_classes) + "<br>"
            )
        return html


class PropertyRenderer(Renderer):
    kind = RenderKind.PROPERTY

    def render(self, action: RenderAction, ctx: RenderContext) -> str:
        term_id = _term_id(action)
        adapter = ctx.require_adapter()
        start = (
            term_link(ctx.classifier, "schema:Thing")
            + " &gt; "
            + term_link(ctx.classifier, "schema:Property", {"title": "Defined in section: meta.schema.org"})
            + " &gt; "
        )
        paths = ctx.require_enumerator().enumerate(term_id, SuperTypeRelation.SUPER_PROPERTIES)
        content = (
            term_header(ctx, term_id, paths, "rdfs:subPropertyOf", start)
            + self._linked_table(ctx, adapter.get_ranges(term_id), "Values expected to be one of these types", "rangeIncludes")
            + self._linked_table(ctx, adapter.get_domains(term_id), "Used on these types", "domainIncludes")
            + self._related(ctx, adapter.get_super_properties(term_id), "Super-properties")
            + self._related(ctx, adapter.get_sub_properties(term_id), "Sub-properties")
        )
        return main_content("rdf:Property", content)

    def _linked_table(self, ctx: RenderContext, term_ids: list[str], header: str, rdfa_property: str) -> str:
        cells = "<br>".join(
            semantic_link(ctx.classifier, rdfa_property, t) + term_link(ctx.classifier, t) for t in term_ids
        )
        return definition_table(header, f"<td>{cells}</td>")

    def _related(self, ctx: RenderContext, term_ids: list[str], header: str) -> str:
        if not term_ids:
            return ""
        cells = "<br>".join(
            term_link(ctx.classifier, t, {"title": f"{t}: ''{self._description(ctx, t)}''"}) for t in term_ids
        )
        return definition_table(header, f"<td>{cells}</td>")

    def _description(self, ctx: RenderContext, term_id: str) -> str:
        adapter = ctx.require_adapter()
        # related properties may live outside the loaded vocabularies
        if not adapter.has_term(term_id):
            return ""
        return adapter.get_description(term_id) or ""


class EnumerationRenderer(Renderer):
    kind = RenderKind.ENUMERATION

    def render(self, action: RenderAction, ctx: RenderContext) -> str:
        term_id = _term_id(action)
        paths = ctx.require_enumerator().enumerate(term_id, SuperTypeRelation.SUPER_CLASSES)
        members = ctx.require_adapter().get_enumeration_members(term_id)
        content = term_header(ctx, term_id, paths, "rdfs:subClassOf")
        if members:
            content += (
                "An Enumeration with:<br>"
                '<b><a id="enumbers" title="Link: #enumbers" href="#enumbers" class="clickableAnchor">'
                "Enumeration members</a></b>" + _link_list(ctx, members) + "<br>"
            )
        content += ranges_of(ctx, term_id, for_enumeration=True)
        return main_content("rdfs:Class", content)


class EnumerationMemberRenderer(Renderer):
    kind = RenderKind.ENUMERATION_MEMBER

    def render(self, action: RenderAction, ctx: RenderContext) -> str:
        term_id = _term_id(action)
        enumerations = ctx.require_adapter().get_domain_enumerations(term_id)
        paths = ctx.require_enumerator().enumerate_many(enumerations, SuperTypeRelation.SUPER_CLASSES)
        end = " :: " + term_link(ctx.classifier, term_id)
        content = (
            term_header(ctx, term_id, paths, "@type", end=end)
            + f"A member value for enumeration{'s' if len(enumerations) > 1 else ''}: "
            + ", ".join(term_link(ctx.classifier, e) for e in enumerations)
            + "<br>"
        )
        return main_content("rdfs:Class", content)


class DataTypeRenderer(Renderer):
    kind = RenderKind.DATA_TYPE

    def render(self, action: RenderAction, ctx: RenderContext) -> str:
        term_id = _term_id(action)
        start = (
            semantic_link(ctx.classifier, "rdfs:subClassOf", "schema:DataType")
            + term_link(ctx.classifier, "schema:DataType")
            + " &gt; "
        )
        paths = ctx.require_enumerator().enumerate(term_id, SuperTypeRelation.SUPER_DATA_TYPES)
        content = term_header(ctx, term_id, paths, "", start) + ranges_of(ctx, term_id)
        return main_content("rdfs:Class", content)


register_renderer(RenderKind.CLASS, ClassRenderer)
register_renderer(RenderKind.PROPERTY, PropertyRenderer)
register_renderer(RenderKind.ENUMERATION, EnumerationRenderer)
register_renderer(RenderKind.ENUMERATION_MEMBER, EnumerationMemberRenderer)
register_renderer(RenderKind.DATA_TYPE, DataTypeRenderer)
