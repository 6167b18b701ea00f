from .payloads import (
    CollectionUpdatePayload,
    EntryDataPayload,
    EntryFilterPayload,
    EntryUpdatePayload,
    EntriesResponse,
    EntryCreatedResponse,
    ErrorResponse,
)

__all__ = [
    "CollectionUpdatePayload",
    "EntryDataPayload",
    "EntryFilterPayload",
    "EntryUpdatePayload",
    "EntriesResponse",
    "EntryCreatedResponse",
    "ErrorResponse",
]
