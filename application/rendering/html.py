"""HTML templating helpers shared by the renderers."""

import html
import logging
import re
from collections.abc import Sequence

from domain.classification import TermClassifier
from domain.errors import UnresolvedTermError
from domain.hierarchy import AncestorPath

logger = logging.getLogger(__name__)

_SCHEMA_PREFIX = re.compile(r"^(schema:|https?://schema\.org/)(.+)")


def esc(text: object) -> str:
    return html.escape(str(text), quote=True)


def attrs(attr: dict[str, str] | None) -> str:
    if not attr:
        return ""
    return "".join(f' {esc(k)}="{esc(v)}"' for k, v in attr.items())


def pretty_iri(iri: str) -> str:
    """Strip 'schema:', 'http://schema.org/' and 'https://schema.org/'."""
    return _SCHEMA_PREFIX.sub(r"\2", iri)


def is_schema_link(href: str) -> bool:
    return "://schema.org" in href


def internal_link(href: str, text: str, attr: dict[str, str] | None = None) -> str:
    return f'<a class="a-js-link" href="{esc(href)}"{attrs(attr)}>{esc(text)}</a>'


def external_link(href: str, text: str | None = None, attr: dict[str, str] | None = None) -> str:
    css = "external-link external-link-schema" if is_schema_link(href) else "external-link"
    return (
        f'<a class="{css}" href="{esc(href)}" target="_blank" rel="noopener"{attrs(attr)}>'
        f"{esc(pretty_iri(text or href))}</a>"
    )


def external_link_legend() -> str:
    """Key for the two external-link styles (schema.org and elsewhere)."""
    return (
        '<p class="external-link-legend" style="font-size: 12px; margin-top: 0">'
        '(<span class="external-link"></span>External link'
        '<span class="external-link external-link-schema"></span>External link to schema.org )'
        "</p>"
    )


def term_link(classifier: TermClassifier, term_id: str, attr: dict[str, str] | None = None) -> str:
    """Link a term in place or out; terms nobody can resolve are printed as text."""
    try:
        ref = classifier.classify(term_id)
    except UnresolvedTermError:
        logger.warning("Rendering unresolvable term '%s' as plain text", term_id)
        return esc(term_id)
    if ref.is_internal:
        return internal_link(ref.href, term_id, attr)
    return external_link(ref.href, term_id, attr)


def semantic_link(classifier: TermClassifier, rdfa_property: str, term_id: str) -> str:
    """RDFa `<link>` for a relation; empty when the property or term is unknown."""
    if not rdfa_property:
        return ""
    try:
        href = classifier.href(term_id)
    except UnresolvedTermError:
        return ""
    return f'<link property="{esc(rdfa_property)}" href="{esc(href)}">'


def main_content(rdfa_typeof: str, content: str) -> str:
    return f'<div id="mainContent" vocab="http://schema.org/" typeof="{esc(rdfa_typeof)}">{content}</div>'


def table_row(
    rdfa_typeof: str,
    rdfa_resource: str,
    main_col_property: str,
    main_col_html: str,
    side_cols: str,
    main_col_class: str | None = None,
) -> str:
    css = f' class="{esc(main_col_class)}"' if main_col_class else ""
    return (
        f'<tr typeof="{esc(rdfa_typeof)}" resource="{esc(rdfa_resource)}">'
        f'<th{css} scope="row"><code property="{esc(main_col_property)}">{main_col_html}</code></th>'
        f"{side_cols}</tr>"
    )


def definition_table(
    headers: str | Sequence[str],
    rows: str | Sequence[str],
    tbody_attr: dict[str, str] | None = None,
) -> str:
    """Table with class 'definition-table'; rows may already carry their <tr> tags."""
    ths = [headers] if isinstance(headers, str) else list(headers)
    trs = [rows] if isinstance(rows, str) else list(rows)
    head = "".join(f"<th>{th}</th>" for th in ths)
    body = "".join(tr if tr.startswith("<tr") else f"<tr>{tr}</tr>" for tr in trs)
    return (
        '<table class="definition-table">'
        f"<thead><tr>{head}</tr></thead>"
        f"<tbody{attrs(tbody_attr)}>{body}</tbody>"
        "</table>"
    )


def breadcrumbs(
    classifier: TermClassifier,
    paths: Sequence[AncestorPath],
    relationship: str,
    start: str = "",
    end: str = "",
) -> str:
    """
    One breadcrumb line per ancestor path.

    The RDFa `relationship` link is attached to the direct super-type (or to the
    last element when an `end` suffix names the term itself).
    """
    lines: list[str] = []
    for path in paths:
        crumbs: list[str] = []
        for i, term_id in enumerate(path):
            crumb = ""
            if (not end and i + 2 == len(path)) or (end and i + 1 == len(path)):
                crumb += semantic_link(classifier, relationship, term_id)
            crumb += term_link(classifier, term_id)
            crumbs.append(crumb)
        lines.append(f'<span class="breadcrumbs">{start}{" &gt; ".join(crumbs)}{end}</span>')
    return f"<h4>{'<br>'.join(lines)}</h4>"
