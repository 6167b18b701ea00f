"""Pydantic DTOs for MarcSync request bodies and response bodies."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


# ── Requests ──


class CollectionUpdatePayload(BaseModel):
    """Body of a collection rename."""

    name: str


class EntryDataPayload(BaseModel):
    """Body of an entry creation — the record travels under ``data``."""

    data: dict[str, Any]


class EntryFilterPayload(BaseModel):
    """Body of a filtered read or delete."""

    filters: dict[str, Any] = Field(default_factory=dict)


class EntryUpdatePayload(BaseModel):
    """Body of a filtered update: ``data`` is merged into every match."""

    filters: dict[str, Any] = Field(default_factory=dict)
    data: dict[str, Any]


# ── Responses ──


class EntriesResponse(BaseModel):
    """Response of a filtered read."""

    entries: list[dict[str, Any]]

    model_config = ConfigDict(extra="ignore")


class EntryCreatedResponse(BaseModel):
    """Response of an entry creation; the backend may echo the new id."""

    object_id: str | None = Field(None, alias="objectId")
    id: str | None = Field(None, alias="_id")

    model_config = ConfigDict(
        extra="ignore", populate_by_name=True, coerce_numbers_to_str=True
    )

    @property
    def entry_id(self) -> str | None:
        return self.object_id or self.id


class ErrorResponse(BaseModel):
    """Error body some endpoints return alongside a non-200 status."""

    message: str | None = None
    error: str | dict[str, Any] | None = None

    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    def best_message(self) -> str | None:
        if self.message:
            return self.message
        if isinstance(self.error, dict):
            nested = self.error.get("message")
            return None if nested is None else str(nested)
        return self.error
