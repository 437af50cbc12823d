"""Error types raised by the vocabulary browser core."""


class BrowserError(Exception):
    """Base class for every error the browser surfaces to the rendering layer."""


class FetchError(BrowserError):
    """A document could not be retrieved (network failure or non-2xx status)."""

    def __init__(self, url: str, status: int | None = None, reason: str | None = None) -> None:
        self.url = url
        self.status = status
        self.reason = reason
        detail = f"status={status}" if status is not None else "no response"
        if reason:
            detail += f", {reason}"
        super().__init__(f"Failed to fetch {url} ({detail})")


class LoadError(BrowserError):
    """A taxonomy (or list) document failed to fetch or parse."""

    def __init__(self, taxonomy_id: str, cause: BaseException) -> None:
        self.taxonomy_id = taxonomy_id
        self.cause = cause
        super().__init__(f"Could not load '{taxonomy_id}': {cause}")


class TermNotFoundError(BrowserError):
    """The requested term id is absent from the resolved taxonomy."""

    def __init__(self, taxonomy_id: str | None, term_id: str) -> None:
        self.taxonomy_id = taxonomy_id
        self.term_id = term_id
        super().__init__(f"Term '{term_id}' not found in vocabulary '{taxonomy_id}'")


class CyclicHierarchyError(BrowserError):
    """A term appears twice on one ancestor path."""

    def __init__(self, term_id: str, path: tuple[str, ...] = ()) -> None:
        self.term_id = term_id
        self.path = path
        chain = " > ".join((*path, term_id)) if path else term_id
        super().__init__(f"Cyclic super-type hierarchy at '{term_id}': {chain}")


class UnresolvedTermError(BrowserError):
    """No loaded vocabulary can resolve a referenced term to an absolute IRI."""

    def __init__(self, term_id: str) -> None:
        self.term_id = term_id
        super().__init__(f"Term '{term_id}' cannot be resolved by any loaded vocabulary")
