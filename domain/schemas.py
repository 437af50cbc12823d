"""Pydantic models shared across the browser."""

from enum import Enum

from pydantic import BaseModel, Field


class TermKind(str, Enum):
    """The closed set of vocabulary term kinds."""

    CLASS = "Class"
    PROPERTY = "Property"
    ENUMERATION = "Enumeration"
    ENUMERATION_MEMBER = "Enumeration Member"
    DATA_TYPE = "Data Type"

    @property
    def plural(self) -> str:
        return TERM_KIND_PLURALS[self]


TERM_KIND_PLURALS: dict[TermKind, str] = {
    TermKind.CLASS: "Classes",
    TermKind.PROPERTY: "Properties",
    TermKind.ENUMERATION: "Enumerations",
    TermKind.ENUMERATION_MEMBER: "Enumeration Members",
    TermKind.DATA_TYPE: "Data Types",
}


class ListEntry(BaseModel):
    """One vocabulary reference inside a list."""

    taxonomy_id: str = Field(..., description="Identifier used to fetch the vocabulary (last IRI segment).")
    iri: str = Field(..., description="The vocabulary's absolute IRI as given by the list.")
    name: str | None = None
    author: str | None = None
    description: str | None = None


class VocabList(BaseModel):
    """A named, ordered collection of vocabulary references."""

    list_id: str
    name: str = "List"
    entries: list[ListEntry] = Field(default_factory=list)
