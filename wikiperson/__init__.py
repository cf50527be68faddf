"""
wikiperson - people lookups on WikiData

Searches the WikiData SPARQL endpoint for humans by name and fetches
one person by Q-number.

Example:
    import asyncio
    from wikiperson import WikiDataClient

    async def main():
        async with WikiDataClient() as client:
            elvis = await client.get_by_id(303)
            print(elvis)

    asyncio.run(main())
"""

from .client import (
    WikiDataClient,
    DEFAULT_ENDPOINT,
    DEFAULT_TIMEOUT,
    DEFAULT_USER_AGENT,
    get_default_client,
    close_default_client,
    search_by_name,
    get_by_id,
)
from .errors import (
    WikiDataError,
    InvalidArgumentError,
    IdOutOfRangeError,
    NetworkError,
    ResponseParseError,
    PersonNotFoundError,
    LookupAbortedError,
    LookupCancelledError,
    LookupTimeoutError,
)
from .person import Person, person_from_binding
from .queries import build_person_query, build_search_query

__version__ = "0.1.0"
__all__ = [
    # Client
    "WikiDataClient",
    "DEFAULT_ENDPOINT",
    "DEFAULT_TIMEOUT",
    "DEFAULT_USER_AGENT",
    "get_default_client",
    "close_default_client",
    "search_by_name",
    "get_by_id",
    # Records
    "Person",
    "person_from_binding",
    # Queries
    "build_search_query",
    "build_person_query",
    # Errors
    "WikiDataError",
    "InvalidArgumentError",
    "IdOutOfRangeError",
    "NetworkError",
    "ResponseParseError",
    "PersonNotFoundError",
    "LookupAbortedError",
    "LookupCancelledError",
    "LookupTimeoutError",
]
