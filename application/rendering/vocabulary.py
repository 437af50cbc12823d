"""Vocabulary overview and raw JSON-LD renderers."""

import json

from application.dispatch import RenderAction, RenderKind
from domain.navigation import NavigationChange, ViewFormat
from domain.schemas import TermKind

from .base import RenderContext, Renderer
from .html import (
    definition_table,
    esc,
    external_link,
    external_link_legend,
    internal_link,
    main_content,
    table_row,
    term_link,
)
from .registry import register_renderer


def _anchor(text: str) -> str:
    return text.replace(" ", "_")


class OverviewRenderer(Renderer):
    """Heading, namespaces, content counts and one table per non-empty term kind."""

    kind = RenderKind.OVERVIEW

    def render(self, action: RenderAction, ctx: RenderContext) -> str:
        adapter = ctx.require_adapter()
        members = {kind: adapter.list_members_by_kind(kind) for kind in TermKind}

        content = self._heading(ctx) + self._namespaces(ctx) + self._contents(members)
        for kind in TermKind:
            content += self._section(ctx, kind, members[kind])
        return main_content("schema:DataSet", content)

    def _heading(self, ctx: RenderContext) -> str:
        adapter = ctx.require_adapter()
        links = [internal_link(ctx.href_for(NavigationChange(format=ViewFormat.JSONLD)), "JSON-LD serialization")]
        if ctx.vocab_list is not None:
            back = ctx.href_for(NavigationChange(taxonomy_id=None))
            links.append("from List: " + internal_link(back, ctx.vocab_list.name))
        return (
            f'<span style="float: right;">({" | ".join(links)})</span><h1>{esc(adapter.name)}</h1>'
            + external_link_legend()
        )

    def _namespaces(self, ctx: RenderContext) -> str:
        items = "".join(
            f"<li>{esc(prefix)}: {external_link(ns)}</li>" for prefix, ns in ctx.require_adapter().namespaces.items()
        )
        return f"<h2>Namespaces</h2><ul>{items}</ul>"

    def _contents(self, members: dict[TermKind, list[str]]) -> str:
        items = ""
        for kind, ids in members.items():
            if not ids:
                continue
            label = kind.value if len(ids) == 1 else kind.plural
            items += f'<li><a class="a-section-link" href="#{_anchor(kind.plural)}">{len(ids)} {esc(label)}</a></li>'
        return f"<h2>Content</h2><ul>{items}</ul>"

    def _section(self, ctx: RenderContext, kind: TermKind, term_ids: list[str]) -> str:
        if not term_ids:
            return ""
        adapter = ctx.require_adapter()
        if kind is TermKind.ENUMERATION_MEMBER:
            headers = [kind.value, "of Enumeration", "Description"]
        else:
            headers = [kind.value, "Description"]

        rows: list[str] = []
        for term_id in term_ids:
            side_cols = ""
            if kind is TermKind.ENUMERATION_MEMBER:
                hosts = "<br>".join(term_link(ctx.classifier, e) for e in adapter.get_domain_enumerations(term_id))
                side_cols += f"<td>{hosts}</td>"
            side_cols += f'<td property="rdfs:comment">{esc(adapter.get_description(term_id) or "")}</td>'
            rows.append(
                table_row(
                    kind.value,
                    ctx.classifier.href(term_id),
                    "@id",
                    term_link(ctx.classifier, term_id),
                    side_cols,
                )
            )
        return f'<h2 id="{_anchor(kind.plural)}">{esc(kind.plural)}</h2>' + definition_table(
            headers, rows, {"class": "supertype"}
        )


class RawRenderer(Renderer):
    """The vocabulary's JSON-LD document, pretty-printed."""

    kind = RenderKind.RAW

    def render(self, action: RenderAction, ctx: RenderContext) -> str:
        document = json.dumps(ctx.require_adapter().document, indent=2, ensure_ascii=False)
        return f'<pre class="vocab-browser-jsonld">{esc(document)}</pre>'


register_renderer(RenderKind.OVERVIEW, OverviewRenderer)
register_renderer(RenderKind.RAW, RawRenderer)
