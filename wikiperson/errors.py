"""
Exceptions raised by the WikiData person lookup client.

Every error derives from WikiDataError so callers can catch the whole
family at once, or pick the specific condition they care about.
"""


class WikiDataError(Exception):
    """Base class for all wikiperson errors."""


class InvalidArgumentError(WikiDataError, ValueError):
    """An argument was rejected before any request was sent."""


class IdOutOfRangeError(InvalidArgumentError):
    """A person ID was zero or negative."""


class NetworkError(WikiDataError):
    """The endpoint could not be reached or answered with a non-2xx status."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class ResponseParseError(WikiDataError):
    """The response body was not valid JSON."""


class PersonNotFoundError(WikiDataError, LookupError):
    """No person exists for the requested ID."""

    def __init__(self, person_id: int):
        super().__init__(f"No person found with WikiData ID Q{person_id}.")
        self.person_id = person_id


class LookupAbortedError(WikiDataError):
    """The lookup ended before a response was received."""


class LookupCancelledError(LookupAbortedError):
    """The caller's cancel signal fired."""


class LookupTimeoutError(LookupAbortedError, TimeoutError):
    """The request exceeded the client timeout."""
