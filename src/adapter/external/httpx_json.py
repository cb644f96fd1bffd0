"""httpx adapter for HttpJsonPort.

One GET per call, no retries. Transport failures, non-200 statuses and
undecodable bodies are mapped to domain errors; cancellation propagates
so an aborted request never yields a partial document.
"""

import logging

import httpx

from domain.model.errors import DecodeError, HttpError, TransportError
from domain.model.translation import JSONValue

logger = logging.getLogger(__name__)

API_TIMEOUT_SECONDS = 10.0


class HttpxJsonClient:
    """Adapter that fetches JSON documents with httpx.AsyncClient."""

    def __init__(self, timeout: float = API_TIMEOUT_SECONDS):
        self.timeout = timeout

    async def get_json(self, url: str, headers: dict[str, str]) -> JSONValue:
        """GET `url` and return the decoded JSON body.

        Raises:
            HttpError: status is not 200 OK.
            DecodeError: body is not valid JSON.
            TransportError: no response was received.
        """
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.get(url, headers=headers)
        except httpx.RequestError as e:
            logger.warning(
                "LOD API request error",
                extra={"url": url, "error_type": type(e).__name__},
            )
            raise TransportError(url, type(e).__name__) from e

        if response.status_code != httpx.codes.OK:
            logger.warning(
                "LOD API HTTP error",
                extra={"url": url, "status_code": response.status_code},
            )
            raise HttpError(response.status_code, url)

        try:
            return response.json()
        except ValueError as e:
            logger.warning("LOD API returned invalid JSON", extra={"url": url})
            raise DecodeError(url, str(e)) from e
