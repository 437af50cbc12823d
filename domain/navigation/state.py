"""The navigation state value and its invariant repair."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator


class ViewFormat(str, Enum):
    """Output format of a vocabulary view."""

    DEFAULT = "default"
    JSONLD = "jsonld"  # raw serialization of the vocabulary document


class ViewKind(str, Enum):
    """Which of the mutually exclusive views a state describes."""

    EMPTY = "empty"
    LIST = "list"
    TAXONOMY = "taxonomy"
    TERM = "term"
    RAW = "raw"


_FORMAT_ALIASES = {"raw": ViewFormat.JSONLD, "json-ld": ViewFormat.JSONLD}


def _clean_id(value: Any) -> str | None:
    if value is None:
        return None
    s = str(value).strip()
    return s or None


def _clean_format(value: Any) -> ViewFormat | None:
    if value is None or isinstance(value, ViewFormat):
        return value
    s = str(value).strip().lower()
    if not s:
        return None
    if s in _FORMAT_ALIASES:
        return _FORMAT_ALIASES[s]
    try:
        return ViewFormat(s)
    except ValueError:
        # unknown formats are dropped, not reported
        return None


class NavigationChange(BaseModel):
    """
    A partial update to the navigation state.

    Only the fields passed explicitly are applied; passing `None` clears a field.
    Blank strings count as `None` and unknown formats are dropped.
    """

    model_config = ConfigDict(frozen=True)

    list_id: str | None = None
    taxonomy_id: str | None = None
    term_id: str | None = None
    format: ViewFormat | None = None

    @field_validator("list_id", "taxonomy_id", "term_id", mode="before")
    @classmethod
    def _ids(cls, v: Any) -> str | None:
        return _clean_id(v)

    @field_validator("format", mode="before")
    @classmethod
    def _format(cls, v: Any) -> ViewFormat | None:
        return _clean_format(v)

    def sets(self, field: str) -> bool:
        return field in self.model_fields_set


class NavigationState(BaseModel):
    """
    What should be on screen: which list, vocabulary, term and output format.

    Instances are immutable and always satisfy the invariants:
    - a term or a non-default format requires a vocabulary,
    - a term page and the raw format are exclusive,
    - `ViewFormat.DEFAULT` is stored as `None`.
    """

    model_config = ConfigDict(frozen=True)

    list_id: str | None = None
    taxonomy_id: str | None = None
    term_id: str | None = None
    format: ViewFormat | None = None

    @property
    def view(self) -> ViewKind:
        if self.taxonomy_id is None:
            return ViewKind.LIST if self.list_id is not None else ViewKind.EMPTY
        if self.term_id is not None:
            return ViewKind.TERM
        if self.format is ViewFormat.JSONLD:
            return ViewKind.RAW
        return ViewKind.TAXONOMY

    @classmethod
    def from_fields(
        cls,
        *,
        list_id: Any = None,
        taxonomy_id: Any = None,
        term_id: Any = None,
        format: Any = None,
    ) -> "NavigationState":
        """Build a repaired state from raw (possibly inconsistent) values."""
        return cls().apply(
            NavigationChange(list_id=list_id, taxonomy_id=taxonomy_id, term_id=term_id, format=format)
        )

    def apply(self, change: NavigationChange) -> "NavigationState":
        """
        Apply `change` and repair the result.

        Repairs, in order:
          (a) moving to another list without naming a vocabulary drops the vocabulary,
              its term and format (they belonged to the previous list context);
              switching vocabulary without naming a term/format drops them too
          (b) no vocabulary -> no term and no format
          (b') a term page wins over the raw format unless the change asks for the
               format alone; DEFAULT format is stored as None
        Never raises.
        """
        list_id = change.list_id if change.sets("list_id") else self.list_id
        taxonomy_id = change.taxonomy_id if change.sets("taxonomy_id") else self.taxonomy_id
        term_id = change.term_id if change.sets("term_id") else self.term_id
        fmt = change.format if change.sets("format") else self.format

        # (a)
        if list_id != self.list_id and not change.sets("taxonomy_id"):
            taxonomy_id = None
        if taxonomy_id != self.taxonomy_id:
            if not change.sets("term_id"):
                term_id = None
            if not change.sets("format"):
                fmt = None

        # (b)
        if taxonomy_id is None:
            term_id = None
            fmt = None

        # (b')
        if fmt is ViewFormat.DEFAULT:
            fmt = None
        if term_id is not None and fmt is not None:
            if change.sets("format") and not change.sets("term_id"):
                term_id = None
            else:
                fmt = None

        return NavigationState(list_id=list_id, taxonomy_id=taxonomy_id, term_id=term_id, format=fmt)
