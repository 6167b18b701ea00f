"""Python client for the MarcSync document store.

    from marcsync import Client

    client = Client("my-token")
    users = client.get_collection("users")
    ada = users.create_entry({"name": "Ada"})
    users.update_entry_by_id(ada.id, {"role": "admin"})
"""

from marcsync.client import Client
from marcsync.collection import Collection
from marcsync.config import Settings, get_settings
from marcsync.domain.entities import EntryData, JsonValue
from marcsync.domain.exceptions import (
    BulkOperationNotConfirmedError,
    DecodeError,
    EmptyResultError,
    MarcSyncError,
    RemoteError,
    TransportError,
)
from marcsync.entry import Entry

__version__ = "0.1.0"

__all__ = [
    "Client",
    "Collection",
    "Entry",
    "EntryData",
    "JsonValue",
    "Settings",
    "get_settings",
    "MarcSyncError",
    "RemoteError",
    "TransportError",
    "DecodeError",
    "EmptyResultError",
    "BulkOperationNotConfirmedError",
]
