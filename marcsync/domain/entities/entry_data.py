"""Domain entity — a schema-less MarcSync record."""

import json
from typing import Any, Union

from marcsync.domain.exceptions import DecodeError

# Any value the backend can store in a record field.
JsonValue = Union[str, int, float, bool, None, list["JsonValue"], dict[str, "JsonValue"]]

ID_FIELD = "_id"


class EntryData(dict[str, Any]):
    """Field map of a single entry.

    Any set of fields is legal. The reserved ``_id`` field is assigned by the
    backend on creation and is never written by the client.
    """

    @property
    def id(self) -> str | None:
        """The backend-assigned identifier, or None before creation."""
        value = self.get(ID_FIELD)
        return None if value is None else str(value)

    @classmethod
    def from_json(cls, text: str | bytes) -> "EntryData":
        """Parse a JSON object into an EntryData.

        Raises:
            DecodeError: If the text is not valid JSON or not a JSON object.
        """
        try:
            data = json.loads(text)
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise DecodeError(f"Invalid entry JSON: {exc}", body=_as_text(text)) from exc
        if not isinstance(data, dict):
            raise DecodeError(
                f"Expected a JSON object, got {type(data).__name__}",
                body=_as_text(text),
            )
        return cls(data)

    @classmethod
    def by_id(cls, entry_id: str) -> "EntryData":
        """Filter matching exactly the entry with the given id."""
        return cls({ID_FIELD: entry_id})


def _as_text(text: str | bytes) -> str:
    if isinstance(text, bytes):
        return text.decode("utf-8", errors="replace")
    return text
