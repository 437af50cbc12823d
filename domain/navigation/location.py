"""Translate navigation states to and from host locations (path + query)."""

from urllib.parse import parse_qsl, quote, unquote, urlencode, urlsplit

from pydantic import BaseModel, ConfigDict, Field

from domain.navigation.state import NavigationState

LIST_SEGMENT = "list"
VOCAB_SEGMENT = "voc"

QUERY_VOCAB = "voc"
QUERY_TERM = "term"
QUERY_FORMAT = "format"


class Location(BaseModel):
    """Structured host location."""

    model_config = ConfigDict(frozen=True)

    path: str = "/"
    query: dict[str, str] = Field(default_factory=dict)

    def to_url(self) -> str:
        return self.path + (f"?{urlencode(self.query)}" if self.query else "")

    @classmethod
    def from_url(cls, url: str) -> "Location":
        """Parse a URL or path; scheme and host are ignored, the last repeated query value wins."""
        parts = urlsplit(url)
        return cls(path=parts.path or "/", query=dict(parse_qsl(parts.query, keep_blank_values=True)))


def _join(base_path: str, *segments: str) -> str:
    base = "/" + base_path.strip("/") if base_path.strip("/") else ""
    tail = "/".join(quote(s, safe="") for s in segments)
    return f"{base}/{tail}" if tail else (base or "/")


def state_to_location(state: NavigationState, base_path: str = "") -> Location:
    """
    Render a state as a location.

    Shapes:
        /list/<list>[?voc=<voc>[&term=<term>|&format=jsonld]]
        /voc/<voc>[?term=<term>|?format=jsonld]
        /  (empty state)
    """
    query: dict[str, str] = {}
    if state.list_id is not None:
        path = _join(base_path, LIST_SEGMENT, state.list_id)
        if state.taxonomy_id is not None:
            query[QUERY_VOCAB] = state.taxonomy_id
    elif state.taxonomy_id is not None:
        path = _join(base_path, VOCAB_SEGMENT, state.taxonomy_id)
    else:
        path = _join(base_path)

    if state.term_id is not None:
        query[QUERY_TERM] = state.term_id
    if state.format is not None:
        query[QUERY_FORMAT] = state.format.value

    return Location(path=path, query=query)


def state_from_location(location: Location) -> NavigationState:
    """
    Parse a location into a repaired state.

    The last `list/<id>` or `voc/<id>` segment pair decides the context, so the
    browser can live under any base path. Without such a pair, a `voc` query
    parameter names a stand-alone vocabulary.
    """
    segments = [s for s in location.path.split("/") if s]
    list_id: str | None = None
    taxonomy_id: str | None = None

    for i in range(len(segments) - 2, -1, -1):
        if segments[i] == LIST_SEGMENT:
            list_id = unquote(segments[i + 1])
            taxonomy_id = location.query.get(QUERY_VOCAB)
            break
        if segments[i] == VOCAB_SEGMENT:
            taxonomy_id = unquote(segments[i + 1])
            break
    else:
        taxonomy_id = location.query.get(QUERY_VOCAB)

    return NavigationState.from_fields(
        list_id=list_id,
        taxonomy_id=taxonomy_id,
        term_id=location.query.get(QUERY_TERM),
        format=location.query.get(QUERY_FORMAT),
    )


def base_path_of(location: Location) -> str:
    """The path prefix in front of the `list/...` or `voc/...` segments (empty if none)."""
    segments = [s for s in location.path.split("/") if s]
    for i in range(len(segments) - 2, -1, -1):
        if segments[i] in (LIST_SEGMENT, VOCAB_SEGMENT):
            return "/".join(segments[:i])
    return "/".join(segments)
