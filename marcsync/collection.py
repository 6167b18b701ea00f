"""Collection handle — collection management and entry CRUD."""

import logging
from typing import Any

from marcsync.application.schemas.payloads import (
    CollectionUpdatePayload,
    EntriesResponse,
    EntryCreatedResponse,
    EntryDataPayload,
    EntryFilterPayload,
    EntryUpdatePayload,
)
from marcsync.application.interfaces.transport import TransportResponse
from marcsync.application.services.api_requester import (
    ApiRequester,
    collection_path,
    entries_path,
)
from marcsync.domain.entities import ID_FIELD, EntryData
from marcsync.domain.exceptions import (
    BulkOperationNotConfirmedError,
    DecodeError,
    EmptyResultError,
    MarcSyncError,
)
from marcsync.entry import Entry

logger = logging.getLogger(__name__)


class Collection:
    """A named MarcSync collection.

    Creating the handle performs no I/O and does not check that the
    collection exists. Its name never changes: ``set_name`` returns a new
    handle bound to the new name.

    Every method is a single round trip and raises ``RemoteError`` when the
    backend answers with anything but 200, except ``exists``.
    """

    def __init__(self, name: str, requester: ApiRequester):
        self._name = name
        self._requester = requester

    def __repr__(self) -> str:
        return f"<Collection {self._name!r}>"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Collection):
            return NotImplemented
        return self._name == other._name and self._requester is other._requester

    def __hash__(self) -> int:
        return hash(self._name)

    @property
    def name(self) -> str:
        return self._name

    def get_name(self) -> str:
        return self._name

    # ── Collection management ──

    def drop(self, *, timeout: float | None = None) -> None:
        """Delete the collection and all of its entries. Cannot be undone."""
        self._requester.call(
            "DELETE",
            collection_path(self._name),
            action="drop collection",
            timeout=timeout,
        )
        logger.info("Dropped collection '%s'", self._name)

    def set_name(self, name: str, *, timeout: float | None = None) -> "Collection":
        """Rename the collection on the backend.

        Returns:
            A new handle bound to ``name``. This handle keeps the old name.
        """
        self._requester.call(
            "PUT",
            collection_path(self._name),
            action="rename collection",
            payload=CollectionUpdatePayload(name=name),
            timeout=timeout,
        )
        logger.info("Renamed collection '%s' to '%s'", self._name, name)
        return Collection(name, self._requester)

    def exists(self, *, timeout: float | None = None) -> bool:
        """Whether the backend reports the collection. Never raises."""
        try:
            self._requester.call(
                "GET",
                collection_path(self._name),
                action="fetch collection",
                timeout=timeout,
            )
        except MarcSyncError as exc:
            logger.debug("Collection '%s' treated as missing: %s", self._name, exc)
            return False
        return True

    # ── Entries ──

    def create_entry(self, values: dict[str, Any], *, timeout: float | None = None) -> Entry:
        """Create an entry from ``values``.

        The returned handle wraps a copy of ``values``; the backend's stored
        copy is not re-fetched. An id echoed by the backend is added as ``_id``;
        a body without a readable id still counts as a successful creation.
        """
        record = EntryData(values)
        response = self._requester.call(
            "POST",
            entries_path(self._name),
            action="create entry",
            payload=EntryDataPayload(data=record),
            timeout=timeout,
        )

        if ID_FIELD not in record:
            entry_id = self._echoed_id(response)
            if entry_id is not None:
                record[ID_FIELD] = entry_id

        logger.debug("Created entry %s in '%s'", record.id, self._name)
        return Entry(self._name, record, self._requester)

    def _echoed_id(self, response: TransportResponse) -> str | None:
        """The id the backend echoed on creation, if the body carries one."""
        if not response.content.strip():
            return None
        try:
            created = self._requester.decode(response, EntryCreatedResponse)
        except DecodeError as exc:
            logger.warning(
                "Entry created in '%s' but its id could not be read: %s", self._name, exc
            )
            return None
        if created.entry_id is None:
            logger.debug("Entry created in '%s' without an echoed id", self._name)
        return created.entry_id

    def get_entry_by_id(self, entry_id: str, *, timeout: float | None = None) -> Entry:
        """Fetch the entry with the given id.

        Raises:
            EmptyResultError: If no entry has that id.
        """
        entries = self._fetch(EntryData.by_id(entry_id), action="get entry", timeout=timeout)
        if not entries:
            raise EmptyResultError(self._name, entry_id)
        return entries[0]

    def get_entries(
        self, filters: dict[str, Any] | None = None, *, timeout: float | None = None
    ) -> list[Entry]:
        """Fetch every entry matching ``filters``, in backend order.

        An empty filter matches every entry of the collection.
        """
        return self._fetch(EntryData(filters or {}), action="get entries", timeout=timeout)

    def delete_entry_by_id(self, entry_id: str, *, timeout: float | None = None) -> None:
        """Delete the entry with the given id. Cannot be undone."""
        self._requester.call(
            "DELETE",
            entries_path(self._name),
            action="delete entry",
            payload=EntryFilterPayload(filters=EntryData.by_id(entry_id)),
            timeout=timeout,
        )

    def delete_entries(
        self,
        filters: dict[str, Any],
        *,
        confirm_all: bool = False,
        timeout: float | None = None,
    ) -> None:
        """Delete every entry matching ``filters``. Cannot be undone.

        An empty filter deletes every entry of the collection and is only
        sent when ``confirm_all`` is True.

        Raises:
            BulkOperationNotConfirmedError: On an empty filter without confirm_all.
        """
        if not filters and not confirm_all:
            raise BulkOperationNotConfirmedError(self._name, "delete")

        self._requester.call(
            "DELETE",
            entries_path(self._name),
            action="delete entries",
            payload=EntryFilterPayload(filters=dict(filters)),
            timeout=timeout,
        )
        if not filters:
            logger.warning("Deleted all entries of '%s'", self._name)

    def update_entry_by_id(
        self, entry_id: str, values: dict[str, Any], *, timeout: float | None = None
    ) -> None:
        """Merge ``values`` into the entry with the given id."""
        self._requester.call(
            "PUT",
            entries_path(self._name),
            action="update entry",
            payload=EntryUpdatePayload(filters=EntryData.by_id(entry_id), data=dict(values)),
            timeout=timeout,
        )

    def update_entries(
        self,
        filters: dict[str, Any],
        values: dict[str, Any],
        *,
        timeout: float | None = None,
    ) -> None:
        """Merge ``values`` into every entry matching ``filters``.

        An empty filter updates every entry of the collection.
        """
        self._requester.call(
            "PUT",
            entries_path(self._name),
            action="update entries",
            payload=EntryUpdatePayload(filters=dict(filters), data=dict(values)),
            timeout=timeout,
        )

    def _fetch(self, filters: EntryData, *, action: str, timeout: float | None) -> list[Entry]:
        # filters travel as a JSON body on GET
        response = self._requester.call(
            "GET",
            entries_path(self._name),
            action=action,
            payload=EntryFilterPayload(filters=filters),
            timeout=timeout,
        )
        body = self._requester.decode(response, EntriesResponse)
        return [Entry(self._name, values, self._requester) for values in body.entries]
