"""Domain-level exceptions.

Fetchers and services raise these errors to describe why a refresh cycle
could not produce a word of the day. The refresh scheduler catches them once
per cycle; route handlers map them to HTTP status codes.
"""


class DomainError(Exception):
    """Base class for all domain errors."""


class HttpError(DomainError):
    """Remote API answered with a non-success status."""

    def __init__(self, status: int, url: str = ""):
        self.status = status
        self.url = url
        super().__init__(f"HTTP {status} for {url}" if url else f"HTTP {status}")


class DecodeError(DomainError):
    """Response body is not valid JSON text."""

    def __init__(self, url: str = "", reason: str = ""):
        self.url = url
        self.reason = reason
        message = f"Invalid JSON from {url}" if url else "Invalid JSON"
        super().__init__(f"{message}: {reason}" if reason else message)


class TransportError(DomainError):
    """Request never produced a response (connection, timeout, protocol)."""

    def __init__(self, url: str = "", reason: str = ""):
        self.url = url
        self.reason = reason
        message = f"Request to {url} failed" if url else "Request failed"
        super().__init__(f"{message}: {reason}" if reason else message)


class MissingFieldError(DomainError):
    """Required fields are absent from the word-of-the-day payload."""

    def __init__(self, fields: list[str]):
        self.fields = list(fields)
        super().__init__(f"Missing {'/'.join(self.fields)} from word-of-the-day API")


class NoTranslationsError(DomainError):
    """Entry document yielded no translation for any wanted language."""

    def __init__(self, lemma: str):
        self.lemma = lemma
        super().__init__(f"No translations found for '{lemma}'")


class RefreshInProgressError(DomainError):
    """A refresh cycle is already running."""

    def __init__(self):
        super().__init__("A refresh is already in progress")
