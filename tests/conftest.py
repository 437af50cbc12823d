"""Shared fixtures: a fake fetcher and small JSON-LD documents modelled on schema.org."""

import asyncio
import copy
import json
from collections import Counter
from typing import Any

import pytest

from application.browser import VocabBrowser
from application.cache import AdapterCache
from application.lists import ListCache
from application.navigation import Navigator
from domain.errors import FetchError
from domain.vocabulary import parse_vocabulary_document
from infrastructure.config.models import VocabularySourceConfig
from infrastructure.http import Fetcher
from infrastructure.location import InMemoryHistory
from infrastructure.vocabulary import make_adapter

RDF = "http://www.w3.org/1999/02/22-rdf-syntax-ns#"
RDFS = "http://www.w3.org/2000/01/rdf-schema#"

BASE_URL = "mem://base"
VOC_TEMPLATE = "mem://voc/{taxonomy_id}"
LIST_TEMPLATE = "mem://list/{list_id}"

BASE_DOC: dict[str, Any] = {
    "@context": {"schema": "https://schema.org/", "rdf": RDF, "rdfs": RDFS},
    "@graph": [
        {"@id": "schema:Thing", "@type": "rdfs:Class", "rdfs:label": "Thing", "rdfs:comment": "The most generic type of item."},
        {"@id": "schema:Place", "@type": "rdfs:Class", "rdfs:subClassOf": {"@id": "schema:Thing"}, "rdfs:comment": "Entities that have a somewhat fixed, physical extension."},
        {"@id": "schema:Organization", "@type": "rdfs:Class", "rdfs:subClassOf": {"@id": "schema:Thing"}, "rdfs:comment": "An organization such as a school, NGO, corporation, club, etc."},
        {
            "@id": "schema:LocalBusiness",
            "@type": "rdfs:Class",
            "rdfs:subClassOf": [{"@id": "schema:Organization"}, {"@id": "schema:Place"}],
            "rdfs:comment": "A particular physical business or branch of an organization.",
        },
        {"@id": "schema:Intangible", "@type": "rdfs:Class", "rdfs:subClassOf": {"@id": "schema:Thing"}},
        {"@id": "schema:Enumeration", "@type": "rdfs:Class", "rdfs:subClassOf": {"@id": "schema:Intangible"}},
        {"@id": "schema:DataType", "@type": "rdfs:Class", "rdfs:subClassOf": {"@id": "rdfs:Class"}},
        {"@id": "schema:Text", "@type": ["schema:DataType", "rdfs:Class"], "rdfs:comment": "Data type: Text."},
        {"@id": "schema:URL", "@type": "rdfs:Class", "rdfs:subClassOf": {"@id": "schema:Text"}, "rdfs:comment": "Data type: URL."},
        {
            "@id": "schema:name",
            "@type": "rdf:Property",
            "schema:domainIncludes": {"@id": "schema:Thing"},
            "schema:rangeIncludes": {"@id": "schema:Text"},
            "rdfs:comment": "The name of the item.",
        },
    ],
}

TAXONOMY_DOC: dict[str, Any] = {
    "@context": {"schema": "https://schema.org/", "rdf": RDF, "rdfs": RDFS, "ex": "https://example.org/voc/"},
    "schema:name": "Example Widgets",
    "@graph": [
        {
            "@id": "ex:Widget",
            "@type": "rdfs:Class",
            "rdfs:subClassOf": [{"@id": "schema:LocalBusiness"}, {"@id": "ex:Gadget"}],
            "rdfs:comment": "A widget.",
        },
        {"@id": "ex:Gadget", "@type": "rdfs:Class", "rdfs:subClassOf": {"@id": "schema:Thing"}, "rdfs:comment": "A gadget."},
        {"@id": "ex:Color", "@type": "rdfs:Class", "rdfs:subClassOf": {"@id": "schema:Enumeration"}, "rdfs:comment": "Widget colors."},
        {"@id": "ex:Red", "@type": "ex:Color", "rdfs:comment": "Red."},
        {"@id": "ex:Blue", "@type": "ex:Color", "rdfs:comment": "Blue."},
        {"@id": "ex:SerialNumber", "@type": "rdfs:Class", "rdfs:subClassOf": {"@id": "schema:Text"}},
        {
            "@id": "ex:color",
            "@type": "rdf:Property",
            "schema:domainIncludes": {"@id": "ex:Widget"},
            "schema:rangeIncludes": {"@id": "ex:Color"},
            "rdfs:comment": "The color of a widget.",
        },
        {
            "@id": "ex:serial",
            "@type": "rdf:Property",
            "rdfs:subPropertyOf": {"@id": "schema:name"},
            "schema:domainIncludes": {"@id": "ex:Gadget"},
            "schema:rangeIncludes": {"@id": "ex:SerialNumber"},
        },
    ],
}

OTHER_TAXONOMY_DOC: dict[str, Any] = {
    "@context": {"schema": "https://schema.org/", "rdfs": RDFS, "other": "https://other.example/"},
    "schema:name": "Other Things",
    "@graph": [
        {"@id": "other:Tool", "@type": "rdfs:Class", "rdfs:subClassOf": {"@id": "schema:Thing"}},
    ],
}

CYCLIC_TAXONOMY_DOC: dict[str, Any] = {
    "@context": {"rdfs": RDFS, "ex": "https://example.org/voc/"},
    "schema:name": "Loops",
    "@graph": [
        {"@id": "ex:A", "@type": "rdfs:Class", "rdfs:subClassOf": {"@id": "ex:B"}},
        {"@id": "ex:B", "@type": "rdfs:Class", "rdfs:subClassOf": {"@id": "ex:A"}},
    ],
}

LIST_DOC: dict[str, Any] = {
    "@context": {"schema": "https://schema.org/"},
    "schema:name": "Demo List",
    "schema:hasPart": [
        {
            "@id": "https://semantify.it/voc/T1",
            "schema:name": "Example Widgets",
            "schema:author": {"schema:name": "Jane Roe"},
            "schema:description": "Widgets & gadgets.",
        },
        {"@id": "https://semantify.it/voc/T2", "schema:name": "Other Things"},
    ],
}


class FakeFetcher(Fetcher):
    """Serves documents from a dict and counts fetches per URL."""

    def __init__(self, documents: dict[str, Any], delays: dict[str, float] | None = None) -> None:
        self.documents = dict(documents)
        self.delays = dict(delays or {})
        self.calls: Counter[str] = Counter()

    async def fetch_text(self, url: str) -> str:
        self.calls[url] += 1
        delay = self.delays.get(url, 0.0)
        await asyncio.sleep(delay)
        if url not in self.documents:
            raise FetchError(url, status=404, reason="Not Found")
        doc = self.documents[url]
        return doc if isinstance(doc, str) else json.dumps(doc)


def voc_url(taxonomy_id: str) -> str:
    return VOC_TEMPLATE.format(taxonomy_id=taxonomy_id)


def list_url(list_id: str) -> str:
    return LIST_TEMPLATE.format(list_id=list_id)


@pytest.fixture
def source() -> VocabularySourceConfig:
    return VocabularySourceConfig(
        base_vocabulary_url=BASE_URL,
        taxonomy_url_template=VOC_TEMPLATE,
        list_url_template=LIST_TEMPLATE,
    )


@pytest.fixture
def documents() -> dict[str, Any]:
    return {
        BASE_URL: BASE_DOC,
        voc_url("T1"): TAXONOMY_DOC,
        voc_url("T2"): OTHER_TAXONOMY_DOC,
        voc_url("LOOP"): CYCLIC_TAXONOMY_DOC,
        list_url("L1"): LIST_DOC,
    }


@pytest.fixture
def fetcher(documents: dict[str, Any]) -> FakeFetcher:
    return FakeFetcher(documents)


@pytest.fixture
def base_graph():
    return parse_vocabulary_document(BASE_DOC)


@pytest.fixture
def adapter(base_graph):
    return make_adapter("T1", base=base_graph, document_text=json.dumps(TAXONOMY_DOC))


@pytest.fixture
def history() -> InMemoryHistory:
    return InMemoryHistory("/")


@pytest.fixture
def browser(fetcher: FakeFetcher, source: VocabularySourceConfig, history: InMemoryHistory) -> VocabBrowser:
    return VocabBrowser(
        navigator=Navigator(history),
        cache=AdapterCache(fetcher=fetcher, source=source),
        lists=ListCache(fetcher=fetcher, source=source),
    )


@pytest.fixture
def base_doc() -> dict[str, Any]:
    return copy.deepcopy(BASE_DOC)


@pytest.fixture
def taxonomy_doc() -> dict[str, Any]:
    return copy.deepcopy(TAXONOMY_DOC)


@pytest.fixture
def list_doc() -> dict[str, Any]:
    return copy.deepcopy(LIST_DOC)


@pytest.fixture
def make_fetcher(documents: dict[str, Any]):
    """Build a FakeFetcher over the standard documents, with per-URL delays."""

    def _make(delays: dict[str, float] | None = None, extra: dict[str, Any] | None = None) -> FakeFetcher:
        return FakeFetcher({**documents, **(extra or {})}, delays)

    return _make
