"""Entry handle — one record fetched from or created in a collection."""

import logging
from typing import Any

from marcsync.application.schemas.payloads import EntryFilterPayload, EntryUpdatePayload
from marcsync.application.services.api_requester import ApiRequester, entries_path
from marcsync.domain.entities import ID_FIELD, EntryData

logger = logging.getLogger(__name__)


class Entry:
    """A locally cached copy of one backend record.

    The cache is never refreshed behind the caller's back: ``update_value``
    and ``update_values`` change the backend only, and return the values the
    handle held before the update. Fetch the entry again to see the result.

    Entries are produced by Collection operations; they are not meant to be
    built by hand.
    """

    def __init__(self, collection_name: str, values: dict[str, Any], requester: ApiRequester):
        self._collection_name = collection_name
        self._values = EntryData(values)
        self._requester = requester

    def __repr__(self) -> str:
        return f"<Entry {self._collection_name}/{self.id}>"

    @property
    def id(self) -> str | None:
        return self._values.id

    @property
    def collection_name(self) -> str:
        return self._collection_name

    def get_collection_name(self) -> str:
        return self._collection_name

    def get_values(self) -> EntryData:
        """Return a copy of the cached values. No I/O."""
        return EntryData(self._values)

    def get_value(self, key: str) -> Any:
        """Return a single cached field, or None when absent. No I/O."""
        return self._values.get(key)

    def update_value(self, key: str, value: Any, *, timeout: float | None = None) -> EntryData:
        """Set one field of this entry on the backend.

        Returns:
            The cached values as they were before the update.
        """
        return self.update_values({key: value}, timeout=timeout)

    def update_values(self, values: dict[str, Any], *, timeout: float | None = None) -> EntryData:
        """Merge several fields into this entry on the backend.

        Returns:
            The cached values as they were before the update.
        """
        payload = EntryUpdatePayload(filters=self._own_filter(), data=dict(values))
        self._requester.call(
            "PUT",
            entries_path(self._collection_name),
            action="update entry",
            payload=payload,
            timeout=timeout,
        )
        logger.debug(
            "Updated %d field(s) of entry %s in '%s'",
            len(values), self.id, self._collection_name,
        )
        return self.get_values()

    def delete(self, *, timeout: float | None = None) -> None:
        """Delete this entry from the backend. Cannot be undone.

        The handle stays usable for reads; further mutations address an id
        the backend no longer holds.
        """
        self._requester.call(
            "DELETE",
            entries_path(self._collection_name),
            action="delete entry",
            payload=EntryFilterPayload(filters=self._own_filter()),
            timeout=timeout,
        )
        logger.debug("Deleted entry %s from '%s'", self.id, self._collection_name)

    def _own_filter(self) -> EntryData:
        entry_id = self._values.get(ID_FIELD)
        if entry_id is None:
            raise ValueError(
                f"Entry in '{self._collection_name}' has no _id; it cannot be addressed"
            )
        return EntryData({ID_FIELD: entry_id})
