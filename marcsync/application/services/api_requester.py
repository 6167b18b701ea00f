"""Request/response contract shared by every MarcSync handle.

Serializes payload DTOs into UTF-8 JSON bodies, attaches the standard
headers, enforces the "200 or RemoteError" rule and decodes response bodies
into DTOs, translating malformed bodies into DecodeError.
"""

import logging
from typing import TypeVar
from urllib.parse import quote

from pydantic import BaseModel, ValidationError

from marcsync.application.interfaces.transport import Transport, TransportResponse
from marcsync.application.schemas.payloads import ErrorResponse
from marcsync.domain.exceptions import DecodeError, RemoteError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

_SUCCESS_STATUS = 200


def collection_path(collection_name: str) -> str:
    return f"/v0/collection/{quote(collection_name, safe='')}"


def entries_path(collection_name: str) -> str:
    return f"/v1/entries/{quote(collection_name, safe='')}"


class ApiRequester:
    """Performs authenticated single round trips against the backend."""

    def __init__(self, access_token: str, transport: Transport):
        self._access_token = access_token
        self._transport = transport

    @property
    def transport(self) -> Transport:
        return self._transport

    def _get_headers(self, *, with_body: bool) -> dict[str, str]:
        """Standard headers; the token is sent raw, without a scheme prefix."""
        headers = {
            "accept": "application/json",
            "authorization": self._access_token,
        }
        if with_body:
            headers["content-type"] = "application/json"
        return headers

    def call(
        self,
        method: str,
        path: str,
        *,
        action: str,
        payload: BaseModel | None = None,
        timeout: float | None = None,
    ) -> TransportResponse:
        """Send one request and return the response if its status is 200.

        Raises:
            RemoteError: If the backend answers with any other status.
            TransportError: If the backend could not be reached.
        """
        content = None
        if payload is not None:
            content = payload.model_dump_json(by_alias=True).encode("utf-8")

        response = self._transport.send(
            method,
            path,
            headers=self._get_headers(with_body=content is not None),
            content=content,
            timeout=timeout,
        )

        if response.status_code != _SUCCESS_STATUS:
            message = self._extract_error_message(response)
            logger.warning(
                "Failed to %s: %d %s", action, response.status_code, message
            )
            raise RemoteError(response.status_code, message, action)

        return response

    @staticmethod
    def decode(response: TransportResponse, model: type[ModelT]) -> ModelT:
        """Validate a response body against a DTO.

        Raises:
            DecodeError: If the body is not JSON or does not match the model.
        """
        try:
            return model.model_validate_json(response.content)
        except ValidationError as exc:
            raise DecodeError(
                f"Unexpected {model.__name__} body: {exc.error_count()} error(s)",
                body=response.text[:500],
            ) from exc

    @staticmethod
    def _extract_error_message(response: TransportResponse) -> str:
        """Best human-readable message for a non-200 response."""
        if response.content:
            try:
                message = ErrorResponse.model_validate_json(response.content).best_message()
            except ValidationError:
                message = None
            if message:
                return message
            return response.text[:500]
        return response.reason_phrase
