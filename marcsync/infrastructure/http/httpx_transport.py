"""httpx transport — implements the Transport interface for the MarcSync API.

Sends every request with ``httpx.Client.request`` so a JSON body can ride
along on GET, which the filtered-read endpoints require.
"""

import logging

import httpx

from marcsync.application.interfaces.transport import Transport, TransportResponse
from marcsync.config import DEFAULT_BASE_URL
from marcsync.domain.exceptions import DecodeError, TransportError

logger = logging.getLogger(__name__)


class HttpxTransport(Transport):
    """Infrastructure adapter — one blocking httpx exchange per call.

    An injected ``http_client`` is used as-is and never closed here. Without
    one, a client is created lazily and released by ``close()``.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 30.0,
        connect_retries: int = 0,
        http_client: httpx.Client | None = None,
    ):
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._connect_retries = connect_retries
        self._http_client = http_client
        self._owned_client: httpx.Client | None = None

    @property
    def base_url(self) -> str:
        return self._base_url

    def _get_client(self) -> httpx.Client:
        """Return the injected client or the lazily created owned one."""
        if self._http_client is not None:
            return self._http_client
        if self._owned_client is None:
            self._owned_client = httpx.Client(
                timeout=self._timeout,
                transport=httpx.HTTPTransport(retries=self._connect_retries),
            )
        return self._owned_client

    def send(
        self,
        method: str,
        path: str,
        *,
        headers: dict[str, str],
        content: bytes | None = None,
        timeout: float | None = None,
    ) -> TransportResponse:
        url = f"{self._base_url}{path}"
        effective_timeout = self._timeout if timeout is None else timeout
        client = self._get_client()

        logger.debug("%s %s (timeout=%.1fs)", method, url, effective_timeout)
        try:
            response = client.request(
                method,
                url,
                headers=headers,
                content=content,
                timeout=effective_timeout,
            )
        except httpx.InvalidURL as exc:
            raise TransportError(f"Invalid URL {url}: {exc}", cause=exc) from exc
        except httpx.DecodingError as exc:
            logger.warning("%s %s returned an undecodable body: %s", method, url, exc)
            raise DecodeError(
                f"{method} {url} returned an undecodable body: {exc}"
            ) from exc
        except httpx.RequestError as exc:
            logger.warning("%s %s failed: %s", method, url, exc)
            raise TransportError(
                f"{method} {url} failed: {type(exc).__name__}: {exc}", cause=exc
            ) from exc

        logger.debug("%s %s -> %d", method, url, response.status_code)
        return TransportResponse(
            status_code=response.status_code,
            content=response.content,
            reason_phrase=response.reason_phrase,
            headers=dict(response.headers),
        )

    def close(self) -> None:
        if self._owned_client is not None:
            self._owned_client.close()
            self._owned_client = None
