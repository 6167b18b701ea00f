"""Abstract HTTP transport interface (port) for talking to the MarcSync backend."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field


@dataclass
class TransportResponse:
    """Status and raw body of a single HTTP exchange."""

    status_code: int
    content: bytes = b""
    reason_phrase: str = ""
    headers: dict[str, str] = field(default_factory=dict)

    @property
    def text(self) -> str:
        return self.content.decode("utf-8", errors="replace")


class Transport(ABC):
    """Port — sends one request and returns one response, nothing more.

    Implementations must allow a body on any method, GET included, since
    filtered reads carry their filter as a JSON body.
    """

    @abstractmethod
    def send(
        self,
        method: str,
        path: str,
        *,
        headers: dict[str, str],
        content: bytes | None = None,
        timeout: float | None = None,
    ) -> TransportResponse:
        """Perform a single request/response round trip.

        Args:
            method: HTTP method (GET, POST, PUT, DELETE).
            path: Path relative to the backend base URL, e.g. '/v1/entries/users'.
            headers: Request headers, sent verbatim.
            content: Encoded request body, or None for no body.
            timeout: Per-call timeout in seconds; None uses the transport default.

        Returns:
            The response status and body, whatever the status code.

        Raises:
            TransportError: If no response status could be obtained.
            DecodeError: If the response body could not be decoded (e.g. a broken
                content-encoding).
        """
        ...

    def close(self) -> None:
        """Release any resources held by the transport."""
