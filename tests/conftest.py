"""Shared fixtures for the MarcSync client tests."""

import pytest

from fake_backend import TEST_TOKEN, FakeMarcSyncBackend, make_transport
from marcsync import Client
from marcsync.config import Settings


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None, access_token="")


@pytest.fixture
def backend() -> FakeMarcSyncBackend:
    return FakeMarcSyncBackend()


@pytest.fixture
def client(backend: FakeMarcSyncBackend, settings: Settings) -> Client:
    return Client(TEST_TOKEN, transport=make_transport(backend), settings=settings)
