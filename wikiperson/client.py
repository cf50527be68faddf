"""
WikiData Client - person lookups against the WikiData SPARQL endpoint.

Two operations are supported:
- search_by_name: humans whose English label or alias equals a term
- get_by_id: one human by numeric Q-number

All calls on a WikiDataClient share one httpx.AsyncClient.
"""

import asyncio
import json
import logging
import threading

import httpx

from .errors import (
    LookupCancelledError,
    LookupTimeoutError,
    NetworkError,
    PersonNotFoundError,
    ResponseParseError,
)
from .person import Binding, Person, extract_bindings, person_from_binding
from .queries import build_person_query, build_search_query

log = logging.getLogger(__name__)

DEFAULT_ENDPOINT = "https://query.wikidata.org/sparql"
DEFAULT_TIMEOUT = 30.0
# WikiData rejects requests without a descriptive User-Agent
DEFAULT_USER_AGENT = "wikiperson/0.1.0 python-httpx"


class WikiDataClient:
    """
    Async client for person lookups on WikiData.

    The underlying httpx.AsyncClient is created on first use and reused
    for every call until stop(), or until a call arrives on a different
    event loop. Pass http_client to share a client you manage yourself;
    it is never closed or replaced by this class.
    """

    def __init__(
        self,
        endpoint: str = DEFAULT_ENDPOINT,
        timeout: float = DEFAULT_TIMEOUT,
        user_agent: str = DEFAULT_USER_AGENT,
        http_client: httpx.AsyncClient | None = None,
    ):
        """
        Initialize the client.

        Args:
            endpoint: SPARQL endpoint URL
            timeout: Upper bound on each request, in seconds
            user_agent: User-Agent header sent with every request
            http_client: Optional shared httpx.AsyncClient
        """
        self.endpoint = endpoint
        self.timeout = timeout
        self.user_agent = user_agent
        self._client = http_client
        self._owns_client = http_client is None
        self._loop: asyncio.AbstractEventLoop | None = None

    @property
    def headers(self) -> dict[str, str]:
        """Headers sent with every request, including on injected clients."""
        return {
            "User-Agent": self.user_agent,
            "Accept": "application/sparql-results+json",
        }

    def _ensure_client(self) -> httpx.AsyncClient:
        """Return the shared client, rebuilding an owned one on a new event loop."""
        loop = asyncio.get_running_loop()
        if self._client is not None and self._owns_client and self._loop is not loop:
            # The pool belongs to a previous (possibly closed) loop
            log.debug("Event loop changed, replacing the shared HTTP client")
            self._client = None
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self.timeout, headers=self.headers)
            self._owns_client = True
            self._loop = loop
        return self._client

    async def start(self) -> None:
        """Create the shared HTTP client now instead of on first use."""
        self._ensure_client()

    async def stop(self) -> None:
        """Close the shared HTTP client if this instance created it."""
        if self._client is not None and self._owns_client:
            if self._loop is asyncio.get_running_loop():
                await self._client.aclose()
            self._client = None
            self._loop = None

    async def __aenter__(self):
        await self.start()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.stop()
        return False

    async def _send(
        self,
        client: httpx.AsyncClient,
        query: str,
        subject: str,
        cancel: asyncio.Event | None,
    ) -> httpx.Response:
        """Issue the GET, racing it against the cancel signal and the timeout."""
        request = asyncio.ensure_future(
            client.get(
                self.endpoint,
                params={"query": query, "format": "json"},
                headers=self.headers,
            )
        )
        waiters = {request}
        cancel_wait = None
        if cancel is not None:
            cancel_wait = asyncio.ensure_future(cancel.wait())
            waiters.add(cancel_wait)

        try:
            done, _ = await asyncio.wait(
                waiters, timeout=self.timeout, return_when=asyncio.FIRST_COMPLETED
            )
        finally:
            pending = [task for task in waiters if not task.done()]
            for task in pending:
                task.cancel()
            # Let cancelled tasks unwind before returning
            await asyncio.gather(*pending, return_exceptions=True)

        if request in done:
            return request.result()
        if cancel_wait is not None and cancel_wait in done:
            log.info("WikiData lookup for %s cancelled", subject)
            raise LookupCancelledError(f"Request for WikiData {subject} was cancelled.")
        raise LookupTimeoutError(f"Request for WikiData {subject} timed out after {self.timeout}s.")

    async def _fetch_bindings(
        self,
        query: str,
        subject: str,
        cancel: asyncio.Event | None = None,
    ) -> list[Binding]:
        """Run a query and return its result rows."""
        if cancel is not None and cancel.is_set():
            raise LookupCancelledError(f"Request for WikiData {subject} was cancelled before it was sent.")

        client = self._ensure_client()
        log.debug("SPARQL query → %s (%d chars)", self.endpoint, len(query))

        try:
            response = await self._send(client, query, subject, cancel)
            response.raise_for_status()
            document = response.json()
        except httpx.TimeoutException as e:
            log.warning("WikiData request for %s timed out: %s", subject, e)
            raise LookupTimeoutError(f"Request for WikiData {subject} timed out after {self.timeout}s.") from e
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            log.warning("WikiData request for %s failed: HTTP %d", subject, status)
            raise NetworkError(f"Failed to retrieve WikiData {subject}: HTTP {status}.", status_code=status) from e
        except httpx.RequestError as e:
            log.warning("WikiData request for %s failed: %s", subject, e)
            raise NetworkError(f"Failed to retrieve WikiData {subject}: {e}") from e
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise ResponseParseError(f"Failed to parse WikiData response for {subject}.") from e

        bindings = extract_bindings(document)
        log.debug("SPARQL returned %d bindings", len(bindings))
        return bindings

    async def search_by_name(self, term: str, cancel: asyncio.Event | None = None) -> list[Person]:
        """
        Search for people by English label or alias.

        Args:
            term: Name to match exactly
            cancel: Optional event; setting it aborts the request

        Returns:
            Matching people in endpoint order, possibly empty

        Raises:
            InvalidArgumentError: term is None, empty or whitespace
            NetworkError: connection failure or non-2xx status
            ResponseParseError: body is not JSON
            LookupCancelledError: cancel was set
            LookupTimeoutError: request exceeded the timeout
        """
        query = build_search_query(term)
        bindings = await self._fetch_bindings(query, f"search results for '{term}'", cancel)
        return [person_from_binding(binding) for binding in bindings]

    async def get_by_id(self, person_id: int, cancel: asyncio.Event | None = None) -> Person:
        """
        Get one person by WikiData ID.

        Args:
            person_id: Numeric part of the Q-identifier (303 for Q303)
            cancel: Optional event; setting it aborts the request

        Returns:
            The person; only the first row is used if several come back

        Raises:
            IdOutOfRangeError: person_id is zero or negative
            PersonNotFoundError: no row for this ID
            NetworkError, ResponseParseError, LookupCancelledError,
            LookupTimeoutError: as for search_by_name
        """
        query = build_person_query(person_id)
        bindings = await self._fetch_bindings(query, f"person with ID Q{person_id}", cancel)
        if not bindings:
            raise PersonNotFoundError(person_id)
        if len(bindings) > 1:
            log.debug("Q%d returned %d rows, using the first", person_id, len(bindings))
        return person_from_binding(bindings[0])


# Process-wide default client
_default_client: WikiDataClient | None = None
_default_lock = threading.Lock()


def get_default_client() -> WikiDataClient:
    """Get the shared default client, creating it on first use."""
    global _default_client
    with _default_lock:
        if _default_client is None:
            _default_client = WikiDataClient()
        return _default_client


async def close_default_client() -> None:
    """Close and forget the shared default client."""
    global _default_client
    with _default_lock:
        client, _default_client = _default_client, None
    if client is not None:
        await client.stop()


async def search_by_name(term: str, cancel: asyncio.Event | None = None) -> list[Person]:
    """Search for people using the default client."""
    return await get_default_client().search_by_name(term, cancel)


async def get_by_id(person_id: int, cancel: asyncio.Event | None = None) -> Person:
    """Get one person by ID using the default client."""
    return await get_default_client().get_by_id(person_id, cancel)
