"""HTTP-JSON port: outbound interface for JSON-over-HTTP sources."""

from typing import Protocol

from domain.model.translation import JSONValue


class HttpJsonPort(Protocol):
    """Port for issuing a GET request and decoding the JSON body.

    Implementations raise HttpError for any status other than 200,
    DecodeError when the body is not JSON and TransportError when no
    response arrives. Cancellation must propagate unchanged.
    """

    async def get_json(self, url: str, headers: dict[str, str]) -> JSONValue: ...
