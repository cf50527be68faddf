"""
Person record and the mapping from SPARQL JSON bindings.
"""

import logging
import re
from dataclasses import dataclass
from datetime import date
from typing import Any

from .queries import (
    ARTICLE_VAR,
    BIRTH_VAR,
    DEATH_VAR,
    DESCRIPTION_VAR,
    ENTITY_URI_PREFIX,
    IMAGE_VAR,
    ITEM_VAR,
    LABEL_VAR,
)

log = logging.getLogger(__name__)

Binding = dict[str, dict[str, str]]

# xsd:dateTime literals look like 1935-01-08T00:00:00Z
_DATE_RE = re.compile(r"^(\d{4})-(\d{2})-(\d{2})")


@dataclass
class Person:
    """A person returned by WikiData. Unknown fields are None."""
    id: int | None
    name: str | None = None
    description: str | None = None
    birthday: date | None = None
    death: date | None = None
    image: str | None = None
    link: str | None = None

    @property
    def qid(self) -> str | None:
        return f"Q{self.id}" if self.id is not None else None

    @property
    def entity_uri(self) -> str | None:
        return f"{ENTITY_URI_PREFIX}{self.id}" if self.id is not None else None

    @property
    def birth_year(self) -> int | None:
        return self.birthday.year if self.birthday else None

    @property
    def death_year(self) -> int | None:
        return self.death.year if self.death else None

    def __str__(self) -> str:
        name = self.name or self.qid or "Unknown person"
        if self.birth_year is None and self.death_year is None:
            return name
        born = str(self.birth_year) if self.birth_year is not None else "?"
        died = str(self.death_year) if self.death_year is not None else ""
        return f"{name} ({born}-{died})"

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-friendly dict. Dates become ISO strings."""
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "birthday": self.birthday.isoformat() if self.birthday else None,
            "death": self.death.isoformat() if self.death else None,
            "image": self.image,
            "link": self.link,
        }


def _literal(binding: Binding, name: str) -> str | None:
    """Return the literal string for a variable, or None if unbound."""
    cell = binding.get(name)
    if not isinstance(cell, dict):
        return None
    value = cell.get("value")
    return value if isinstance(value, str) else None


def _parse_entity_id(uri: str | None) -> int | None:
    """Extract 303 from http://www.wikidata.org/entity/Q303."""
    if uri is None or len(uri) <= len(ENTITY_URI_PREFIX):
        return None
    if not uri.startswith(ENTITY_URI_PREFIX):
        return None
    suffix = uri[len(ENTITY_URI_PREFIX):]
    if not suffix.isascii() or not suffix.isdigit():
        log.debug("Ignoring malformed entity URI %r", uri)
        return None
    return int(suffix)


def _parse_date(value: str | None) -> date | None:
    """Parse the calendar date of a literal; None when it is not a real date."""
    if value is None:
        return None
    match = _DATE_RE.match(value)
    if not match:
        return None
    year, month, day = (int(part) for part in match.groups())
    try:
        return date(year, month, day)
    except ValueError:
        # Year-precision values come back as 1935-00-00
        return None


def person_from_binding(binding: Binding) -> Person:
    """Map one result row to a Person."""
    return Person(
        id=_parse_entity_id(_literal(binding, ITEM_VAR)),
        name=_literal(binding, LABEL_VAR),
        description=_literal(binding, DESCRIPTION_VAR),
        birthday=_parse_date(_literal(binding, BIRTH_VAR)),
        death=_parse_date(_literal(binding, DEATH_VAR)),
        image=_literal(binding, IMAGE_VAR),
        link=_literal(binding, ARTICLE_VAR),
    )


def extract_bindings(document: Any) -> list[Binding]:
    """
    Return the results.bindings rows of a SPARQL JSON document.

    A document without that path is treated as having no rows.
    """
    if not isinstance(document, dict):
        return []
    results = document.get("results")
    if not isinstance(results, dict):
        return []
    bindings = results.get("bindings")
    if not isinstance(bindings, list):
        return []
    return [row for row in bindings if isinstance(row, dict)]
