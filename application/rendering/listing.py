"""List and empty-state renderers."""

from application.dispatch import RenderAction, RenderKind
from domain.navigation import NavigationChange
from domain.schemas import ListEntry

from .base import RenderContext, Renderer
from .html import definition_table, esc, external_link, internal_link, main_content, table_row
from .registry import register_renderer


class EmptyRenderer(Renderer):
    kind = RenderKind.EMPTY

    def render(self, action: RenderAction, ctx: RenderContext) -> str:
        return main_content("schema:WebPage", "<p>No vocabulary or list selected.</p>")


class ListRenderer(Renderer):
    """A list of vocabularies: one row per entry, linking into the vocabulary overview."""

    kind = RenderKind.LIST

    def render(self, action: RenderAction, ctx: RenderContext) -> str:
        if ctx.vocab_list is None:
            raise ValueError("List view rendered without a loaded list")
        rows = [self._row(entry, ctx) for entry in ctx.vocab_list.entries]
        table = definition_table(["Name", "IRI", "Author", "Description"], rows, {"class": "supertype"})
        return main_content("schema:DataSet", f"<h1>{esc(ctx.vocab_list.name)}</h1>{table}")

    def _row(self, entry: ListEntry, ctx: RenderContext) -> str:
        href = ctx.href_for(NavigationChange(taxonomy_id=entry.taxonomy_id))
        side_cols = (
            f'<td property="@id">{external_link(entry.iri)}</td>'
            f'<td property="schema:author">{esc(entry.author or "")}</td>'
            f'<td property="schema:description">{esc(entry.description or "")}</td>'
        )
        return table_row(
            "http://vocab.sti2.at/ds/Vocabulary",
            entry.iri,
            "schema:name",
            internal_link(href, entry.name or "No Name"),
            side_cols,
        )


register_renderer(RenderKind.EMPTY, EmptyRenderer)
register_renderer(RenderKind.LIST, ListRenderer)
