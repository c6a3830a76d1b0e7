"""Low-level API client for the Hue bridge.

This module provides direct HTTP communication with the bridge's v1 REST API.
It sends JSON bodies and returns the decoded JSON response unmodified; turning
responses into models is the job of the parsers.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from aiohttp import ClientError, ClientSession, ClientTimeout

from pyhuebridge.const import API_PATH, DEFAULT_TIMEOUT
from pyhuebridge.exceptions import HueConnectionError, HueTimeoutError


if TYPE_CHECKING:
    from types import TracebackType

_LOGGER = logging.getLogger(__name__)


class HueAPI:
    """Low-level API client for a Hue bridge.

    This class handles raw HTTP communication with the bridge: building the
    resource URL from the host and username, sending JSON bodies and decoding
    JSON responses. It performs exactly one request per call; there is no
    retry or caching.

    Example:
        ```python
        from pyhuebridge.api import HueAPI

        async with HueAPI("192.168.1.2", "my-username") as api:
            lights = await api.request("GET", "/lights")
            await api.request("PUT", "/lights/1/state", json_data={"on": True})
        ```

    Attributes:
        host: Host name or IP address of the bridge.
        username: Registered username, or None for unauthenticated requests.
    """

    def __init__(
        self,
        host: str,
        username: str | None = None,
        *,
        session: ClientSession | None = None,
        use_https: bool = False,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        """Initialize the API client.

        Args:
            host: Host name or IP address of the bridge.
            username: Registered username. Only user registration works without one.
            session: Optional aiohttp ClientSession. If not provided, one will be
                created when entering the context manager.
            use_https: Whether to talk to the bridge over HTTPS.
            timeout: Total timeout of a request in seconds.
        """
        self.host = host
        self.username = username
        self._session = session
        self._owns_session = session is None
        self._scheme = "https" if use_https else "http"
        self._timeout = ClientTimeout(total=timeout)

    async def __aenter__(self) -> HueAPI:
        """Enter the context manager, creating a session if needed.

        Returns:
            Self for use in async with statements.
        """
        if self._session is None:
            self._session = ClientSession()
            self._owns_session = True
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """Exit the context manager, closing the session if it is owned."""
        await self.close()

    async def close(self) -> None:
        """Close the session if it was created by this client."""
        if self._owns_session and self._session is not None:
            await self._session.close()
            self._session = None

    def url(self, path: str = "") -> str:
        """Build the URL of a resource path (e.g. "/lights/1/state")."""
        base = f"{self._scheme}://{self.host}{API_PATH}"
        if self.username is not None:
            base = f"{base}/{self.username}"
        return f"{base}{path}"

    async def request(
        self,
        method: str,
        path: str = "",
        *,
        json_data: Any = None,
        body: bytes | None = None,
    ) -> Any:
        """Send a request to the bridge and return the decoded JSON response.

        Args:
            method: HTTP method (GET, PUT, POST, DELETE).
            path: Resource path relative to the user's API root (e.g. "/lights").
            json_data: Optional JSON-compatible request body.
            body: Optional pre-serialized JSON request body.

        Returns:
            Decoded JSON response.

        Raises:
            RuntimeError: If the session is not initialized or is closed.
            HueTimeoutError: If the request times out.
            HueConnectionError: If the connection fails, the status is not
                successful or the response is not JSON.
        """
        if self._session is None:
            msg = "Session not initialized. Use 'async with' or provide a session."
            raise RuntimeError(msg)

        if self._session.closed:
            msg = "Session is closed. Cannot make request."
            raise RuntimeError(msg)

        url = self.url(path)
        headers = {"Content-Type": "application/json"} if body is not None else None
        _LOGGER.debug("%s %s", method, url)

        try:
            async with self._session.request(
                method,
                url,
                json=json_data if body is None else None,
                data=body,
                headers=headers,
                timeout=self._timeout,
            ) as response:
                if response.status >= 400:  # noqa: PLR2004
                    msg = f"Bridge returned HTTP {response.status} for {method} {path}"
                    raise HueConnectionError(msg)
                data = await response.json(content_type=None)

        except TimeoutError as err:
            _LOGGER.exception("Request to %s timed out", url)
            msg = f"Request to {url} timed out"
            raise HueTimeoutError(msg) from err

        except ClientError as err:
            _LOGGER.exception("Connection error for %s", url)
            msg = f"Connection error for {url}: {err}"
            raise HueConnectionError(msg) from err

        except ValueError as err:
            msg = f"Bridge returned invalid JSON for {method} {path}"
            raise HueConnectionError(msg) from err

        _LOGGER.debug("Response from %s: %s", url, data)
        return data
