"""
SPARQL query builders for the two supported lookup shapes.

Both queries select the same variables (see the *_VAR constants) so a
single mapper can turn either result set into Person records.
"""

from urllib.parse import quote

from .errors import IdOutOfRangeError, InvalidArgumentError

ENTITY_URI_PREFIX = "http://www.wikidata.org/entity/Q"
HUMAN_CLASS = "wd:Q5"

# Result variable names
ITEM_VAR = "item"
LABEL_VAR = "itemLabel"
DESCRIPTION_VAR = "itemDescription"
BIRTH_VAR = "DR"
DEATH_VAR = "RIP"
IMAGE_VAR = "image"
ARTICLE_VAR = "article"

_SELECT = (
    "SELECT DISTINCT (SAMPLE(?image) AS ?image) ?item ?itemLabel ?itemDescription "
    "(SAMPLE(?DR) AS ?DR) (SAMPLE(?RIP) AS ?RIP) (SAMPLE(?article) AS ?article) "
)

_ARTICLE = (
    "?article schema:about ?item . "
    "?article schema:inLanguage 'en' . "
    "?article schema:isPartOf <https://en.wikipedia.org/> . "
)

_OPTIONALS = (
    "OPTIONAL { ?item wdt:P569 ?DR . } "
    "OPTIONAL { ?item wdt:P570 ?RIP . } "
    "OPTIONAL { ?item wdt:P18 ?image . } "
    "SERVICE wikibase:label { bd:serviceParam wikibase:language 'en' . } "
)

_GROUP_BY = "GROUP BY ?item ?itemLabel ?itemDescription"


def _validate_search_term(term: str) -> None:
    """Validate a search term."""
    if not isinstance(term, str) or not term.strip():
        raise InvalidArgumentError("Search string cannot be None, empty or whitespace.")


def _validate_person_id(person_id: int) -> None:
    """Validate a person ID."""
    if isinstance(person_id, bool) or not isinstance(person_id, int):
        raise InvalidArgumentError(f"person_id must be an integer, got {person_id!r}")
    if person_id <= 0:
        raise IdOutOfRangeError(f"person_id must be greater than 0, got {person_id!r}")


def encode_search_term(term: str) -> str:
    """Percent-encode a trimmed search term so it cannot break out of its literal."""
    _validate_search_term(term)
    return quote(term.strip(), safe="")


def entity_uri(person_id: int) -> str:
    """Return the canonical entity URI for a person ID, e.g. Q303."""
    _validate_person_id(person_id)
    return f"{ENTITY_URI_PREFIX}{person_id}"


def build_search_query(term: str) -> str:
    """
    Build the search-by-name query.

    Matches humans whose English label or alias equals the encoded term
    and who have an English Wikipedia article.

    Raises:
        InvalidArgumentError: if term is not a non-blank string
    """
    encoded = encode_search_term(term)
    return (
        _SELECT
        + "WHERE { "
        + f"?item wdt:P31 {HUMAN_CLASS} . "
        + f"?item ?label '{encoded}'@en . "
        + _ARTICLE
        + _OPTIONALS
        + "} "
        + _GROUP_BY
    )


def build_person_query(person_id: int) -> str:
    """
    Build the get-by-id query for a single entity.

    Raises:
        IdOutOfRangeError: if person_id is zero or negative
        InvalidArgumentError: if person_id is not an integer
    """
    uri = entity_uri(person_id)
    return (
        _SELECT
        + "WHERE { "
        + _ARTICLE
        + f"FILTER ( ?item = <{uri}> ) "
        + _OPTIONALS
        + "} "
        + _GROUP_BY
    )
