"""Unit tests for the Entry handle."""

import pytest

from fake_backend import FakeMarcSyncBackend
from marcsync import Client, Collection, Entry
from marcsync.domain.exceptions import RemoteError


@pytest.fixture
def users(client: Client, backend: FakeMarcSyncBackend) -> Collection:
    backend.collections["users"] = []
    return client.get_collection("users")


@pytest.fixture
def ada(users: Collection) -> Entry:
    return users.create_entry({"name": "Ada", "role": "user"})


def test_reads_come_from_cache(ada: Entry, backend: FakeMarcSyncBackend):
    sent_before = len(backend.requests)

    assert ada.get_value("name") == "Ada"
    assert ada.get_value("missing") is None
    assert ada.get_values()["role"] == "user"
    assert ada.get_collection_name() == "users"
    assert len(backend.requests) == sent_before


def test_get_values_returns_a_copy(ada: Entry):
    values = ada.get_values()
    values["name"] = "Grace"

    assert ada.get_value("name") == "Ada"


def test_update_value_leaves_cache_stale(users: Collection, ada: Entry, backend: FakeMarcSyncBackend):
    returned = ada.update_value("role", "admin")

    assert backend.requests[-1].method == "PUT"
    assert backend.last_body() == {"filters": {"_id": ada.id}, "data": {"role": "admin"}}
    assert returned["role"] == "user"
    assert ada.get_value("role") == "user"
    assert users.get_entry_by_id(ada.id).get_value("role") == "admin"


def test_update_values_merges_several_fields(users: Collection, ada: Entry, backend: FakeMarcSyncBackend):
    returned = ada.update_values({"role": "admin", "team": {"name": "core"}})

    assert backend.last_body()["data"] == {"role": "admin", "team": {"name": "core"}}
    assert returned == {"_id": ada.id, "name": "Ada", "role": "user"}
    fresh = users.get_entry_by_id(ada.id).get_values()
    assert fresh == {"_id": ada.id, "name": "Ada", "role": "admin", "team": {"name": "core"}}


def test_failed_update_leaves_cache_unchanged(ada: Entry, backend: FakeMarcSyncBackend):
    del backend.collections["users"]

    with pytest.raises(RemoteError) as exc_info:
        ada.update_value("role", "admin")

    assert exc_info.value.status_code == 404
    assert ada.get_value("role") == "user"


def test_delete_removes_only_this_entry(users: Collection, ada: Entry, backend: FakeMarcSyncBackend):
    users.create_entry({"name": "Grace"})

    ada.delete()

    assert backend.requests[-1].method == "DELETE"
    assert backend.last_body() == {"filters": {"_id": ada.id}}
    assert [r["name"] for r in backend.collections["users"]] == ["Grace"]
    assert ada.get_value("name") == "Ada"


def test_entry_without_id_cannot_be_mutated(users: Collection, backend: FakeMarcSyncBackend):
    backend.echo_object_id = False
    entry = users.create_entry({"name": "Ada"})
    sent_before = len(backend.requests)

    with pytest.raises(ValueError):
        entry.update_value("role", "admin")
    with pytest.raises(ValueError):
        entry.delete()

    assert len(backend.requests) == sent_before
