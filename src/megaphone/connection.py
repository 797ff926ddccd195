"""HTTP connection to the Megaphone API.

Performs one authenticated request per call and returns the parsed JSON body.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

import httpx

from megaphone.config import Config
from megaphone.errors import (
    MegaphoneConnectionError,
    MegaphoneHTTPError,
    MegaphoneResponseError,
    MegaphoneTimeoutError,
)

logger = logging.getLogger(__name__)


class HttpMethod(str, Enum):
    """HTTP methods used by the Megaphone resources."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"


@dataclass(frozen=True)
class Request:
    """Describes a single API call.

    Attributes:
        url: Absolute URL of the endpoint.
        method: HTTP method.
        body: Mapping sent as the JSON request body.
        params: Mapping sent as the query string.
    """

    url: str
    method: HttpMethod = HttpMethod.GET
    body: Mapping[str, Any] | None = None
    params: Mapping[str, Any] | None = None


class Connection:
    """Authenticated transport shared by all resources of a client."""

    def __init__(
        self,
        config: Config,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """Initialize the connection.

        Args:
            config: Credentials, base URL and timeout.
            transport: Optional httpx transport, mainly for tests.
        """
        self.config = config
        self._client = httpx.Client(
            timeout=config.timeout,
            transport=transport,
            headers={
                "Authorization": f'Token token="{config.token}"',
                "Accept": "application/json",
                "Content-Type": "application/json",
            },
        )

    def __enter__(self) -> Connection:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def __call__(self, request: Request) -> Any:
        return self.request(request)

    def close(self) -> None:
        """Close the underlying HTTP client."""
        self._client.close()

    def request(self, request: Request) -> Any:
        """Send a request and return the decoded response body.

        Args:
            request: The call to perform.

        Returns:
            The parsed JSON value (a dict for single resources, a list for
            collections), or None when the response has no body.

        Raises:
            MegaphoneTimeoutError: If the request timed out.
            MegaphoneHTTPError: If the API returned a non-2xx status.
            MegaphoneConnectionError: If the API could not be reached.
            MegaphoneResponseError: If the body is not valid JSON.
        """
        method = HttpMethod(request.method).value
        logger.debug(f"{method} {request.url}")

        try:
            response = self._client.request(
                method,
                request.url,
                json=dict(request.body) if request.body is not None else None,
                params=dict(request.params) if request.params is not None else None,
            )
            response.raise_for_status()

        except httpx.TimeoutException as e:
            logger.warning(f"{method} {request.url} timed out")
            raise MegaphoneTimeoutError(
                f"Megaphone API request timed out after {self.config.timeout} seconds"
            ) from e

        except httpx.HTTPStatusError as e:
            logger.warning(f"{method} {request.url} returned {e.response.status_code}")
            raise MegaphoneHTTPError(e.response.status_code, e.response.text) from e

        except httpx.RequestError as e:
            logger.warning(f"{method} {request.url} failed: {e}")
            raise MegaphoneConnectionError(f"Failed to connect to Megaphone API: {e}") from e

        if not response.content.strip():
            return None

        try:
            return response.json()
        except ValueError as e:
            raise MegaphoneResponseError(
                f"Megaphone API returned invalid JSON response: {e}"
            ) from e
