"""
Pytest fixtures for wikiperson tests.
"""

import pytest
import pytest_asyncio

from wikiperson.client import close_default_client


@pytest.fixture
def elvis_binding():
    """Result row for Q303 with every variable bound."""
    return {
        "image": {
            "type": "uri",
            "value": "http://commons.wikimedia.org/wiki/Special:FilePath/Elvis%20Presley%201970.jpg",
        },
        "item": {"type": "uri", "value": "http://www.wikidata.org/entity/Q303"},
        "itemLabel": {"xml:lang": "en", "type": "literal", "value": "Elvis Presley"},
        "itemDescription": {
            "xml:lang": "en",
            "type": "literal",
            "value": "American singer and actor (1935–1977)",
        },
        "DR": {
            "datatype": "http://www.w3.org/2001/XMLSchema#dateTime",
            "type": "literal",
            "value": "1935-01-08T00:00:00Z",
        },
        "RIP": {
            "datatype": "http://www.w3.org/2001/XMLSchema#dateTime",
            "type": "literal",
            "value": "1977-08-16T00:00:00Z",
        },
        "article": {"type": "uri", "value": "https://en.wikipedia.org/wiki/Elvis_Presley"},
    }


@pytest.fixture
def living_binding():
    """Result row for a person with no death date and no image."""
    return {
        "item": {"type": "uri", "value": "http://www.wikidata.org/entity/Q1"},
        "itemLabel": {"xml:lang": "en", "type": "literal", "value": "Jane Doe"},
        "DR": {"type": "literal", "value": "1980-05-17T00:00:00Z"},
        "article": {"type": "uri", "value": "https://en.wikipedia.org/wiki/Jane_Doe"},
    }


@pytest.fixture
def elvis_response(elvis_binding):
    """SPARQL JSON document for get_by_id(303)."""
    return {
        "head": {"vars": ["image", "item", "itemLabel", "itemDescription", "DR", "RIP", "article"]},
        "results": {"bindings": [elvis_binding]},
    }


@pytest.fixture
def search_response(elvis_binding, living_binding):
    """SPARQL JSON document with two rows."""
    return {
        "head": {"vars": ["image", "item", "itemLabel", "itemDescription", "DR", "RIP", "article"]},
        "results": {"bindings": [elvis_binding, living_binding]},
    }


@pytest.fixture
def empty_response():
    """SPARQL JSON document with no rows."""
    return {"head": {"vars": ["item"]}, "results": {"bindings": []}}


@pytest_asyncio.fixture
async def reset_default_client():
    """Close the process-wide default client around a test."""
    await close_default_client()
    yield
    await close_default_client()
