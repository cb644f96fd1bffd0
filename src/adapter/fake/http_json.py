"""In-memory implementation of HttpJsonPort for testing."""

from domain.model.errors import HttpError
from domain.model.translation import JSONValue


class FakeHttpJsonClient:
    """Fake HTTP-JSON client that serves preconfigured responses by URL.

    A response may be a JSON value or an exception instance, which is raised.
    Unknown URLs raise HttpError(404).
    """

    def __init__(self, responses: dict[str, JSONValue | Exception] | None = None):
        self.responses = dict(responses or {})
        self.calls: list[dict] = []

    async def get_json(self, url: str, headers: dict[str, str]) -> JSONValue:
        self.calls.append({"url": url, "headers": dict(headers)})
        if url not in self.responses:
            raise HttpError(404, url)
        response = self.responses[url]
        if isinstance(response, Exception):
            raise response
        return response

    @property
    def urls(self) -> list[str]:
        return [call["url"] for call in self.calls]
