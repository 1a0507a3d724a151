"""HTTP transport for the time-tracking API.

The transport issues requests relative to the API base URL, maps failures to
``TransportError`` and unwraps the ``{"data": ...}`` envelope.  It returns
plain JSON payloads; decoding them into wire records is left to the callers.

Envelope handling:

- ``{"data": <payload>}`` yields ``<payload>`` (possibly ``None``).
- A bare JSON array is passed through unchanged.
- An empty body or a JSON ``null`` yields ``None``.
- Any other JSON value raises ``DeserializationError``.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

import httpx
from loguru import logger

from toggl_client.errors import DeserializationError, TransportError

DEFAULT_BASE_URL = "https://www.toggl.com/api/v8"


@runtime_checkable
class Transport(Protocol):
    """Synchronous protocol for talking to the API.

    Every method returns the unwrapped payload and raises ``TransportError``
    on network failures or non-success statuses.
    """

    def get(self, path: str) -> Any:
        """GET *path* and return the unwrapped payload."""
        ...

    def post(self, path: str, body: Any = None) -> Any:
        """POST a JSON body and return the unwrapped payload."""
        ...

    def put(self, path: str, body: Any = None) -> Any:
        """PUT a JSON body (or nothing) and return the unwrapped payload."""
        ...

    def delete(self, path: str) -> Any:
        """DELETE *path* and return the unwrapped payload, if any."""
        ...


class HttpTransport:
    """``httpx``-backed implementation of the Transport protocol.

    Owns its ``httpx.Client`` unless one is passed in.  The API token is sent
    as HTTP basic auth with the literal password ``api_token``.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        *,
        api_token: str | None = None,
        timeout: float = 30.0,
        client: httpx.Client | None = None,
    ) -> None:
        self._owns_client = client is None
        self._client = client or httpx.Client(base_url=base_url, timeout=timeout)
        self._auth = httpx.BasicAuth(api_token, "api_token") if api_token else None

    # -- Verbs -------------------------------------------------------------------

    def get(self, path: str) -> Any:
        return self._request("GET", path)

    def post(self, path: str, body: Any = None) -> Any:
        return self._request("POST", path, body)

    def put(self, path: str, body: Any = None) -> Any:
        return self._request("PUT", path, body)

    def delete(self, path: str) -> Any:
        return self._request("DELETE", path)

    # -- Lifecycle ---------------------------------------------------------------

    def close(self) -> None:
        """Close the underlying client if this transport created it."""
        if self._owns_client:
            self._client.close()

    # -- Internals ---------------------------------------------------------------

    def _request(self, method: str, path: str, body: Any = None) -> Any:
        auth = self._auth if self._auth is not None else httpx.USE_CLIENT_DEFAULT
        try:
            response = self._client.request(method, path, json=body, auth=auth)
        except httpx.HTTPError as exc:
            msg = f"{method} {path} failed: {exc}"
            raise TransportError(msg) from exc

        logger.debug("{} {} -> {}", method, path, response.status_code)
        if not response.is_success:
            msg = f"{method} {path} returned {response.status_code}: {response.text[:200]}"
            raise TransportError(msg, status_code=response.status_code)

        return _unwrap(response)


def _unwrap(response: httpx.Response) -> Any:
    if not response.content.strip():
        return None
    try:
        payload = response.json()
    except ValueError as exc:
        msg = f"Response from {response.request.url} is not JSON"
        raise DeserializationError(msg) from exc

    if payload is None:
        return None
    if isinstance(payload, dict) and "data" in payload:
        return payload["data"]
    if isinstance(payload, list):
        return payload
    msg = f"Response from {response.request.url} is missing the data envelope"
    raise DeserializationError(msg)
