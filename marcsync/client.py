"""MarcSync client — entry point holding the access token."""

import logging

from marcsync.application.interfaces.transport import Transport
from marcsync.application.services.api_requester import ApiRequester, collection_path
from marcsync.collection import Collection
from marcsync.config import Settings, get_settings
from marcsync.infrastructure.http import HttpxTransport

logger = logging.getLogger(__name__)


class Client:
    """Factory for collection handles bound to one access token.

    Unset arguments fall back to ``Settings`` (MARCSYNC_* environment
    variables). A custom ``transport`` replaces the httpx one entirely, in
    which case ``base_url`` and ``timeout`` are the transport's concern.

    Usage:
        with Client("my-token") as client:
            users = client.get_collection("users")
            entry = users.create_entry({"name": "Ada"})
    """

    def __init__(
        self,
        access_token: str | None = None,
        *,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: Transport | None = None,
        settings: Settings | None = None,
    ):
        settings = settings or get_settings()
        token = access_token if access_token is not None else settings.access_token
        if not token:
            raise ValueError("A MarcSync access token is required")

        self._owns_transport = transport is None
        if transport is None:
            transport = HttpxTransport(
                base_url=base_url or settings.base_url,
                timeout=timeout if timeout is not None else settings.timeout,
                connect_retries=settings.connect_retries,
            )
        self._requester = ApiRequester(token, transport)

    def __enter__(self) -> "Client":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        """Release the transport this client created; an injected one is left open."""
        if self._owns_transport:
            self._requester.transport.close()

    def get_collection(self, name: str) -> Collection:
        """Return a handle for ``name`` without contacting the backend."""
        return Collection(name, self._requester)

    def fetch_collection(self, name: str, *, timeout: float | None = None) -> Collection:
        """Return a handle for ``name`` after checking the backend knows it.

        Raises:
            RemoteError: If the backend does not report the collection.
        """
        self._requester.call(
            "GET", collection_path(name), action="fetch collection", timeout=timeout
        )
        return Collection(name, self._requester)

    def create_collection(self, name: str, *, timeout: float | None = None) -> Collection:
        """Create ``name`` on the backend and return its handle.

        Raises:
            RemoteError: If the collection exists already or the token lacks permission.
        """
        self._requester.call(
            "POST", collection_path(name), action="create collection", timeout=timeout
        )
        logger.info("Created collection '%s'", name)
        return Collection(name, self._requester)
