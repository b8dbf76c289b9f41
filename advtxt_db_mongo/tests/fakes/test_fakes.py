"""Tests for the fake port implementation itself."""

import pytest

from advtxt_db_mongo.core.errors import UpdateError
from advtxt_db_mongo.tests.fakes import FakeDataStorePort

VALID_CONFIG = {"adapter": "mongodb", "mongodb": {"uri": "mongodb://localhost/advtxt"}}


@pytest.fixture
async def store() -> FakeDataStorePort:
    fake = FakeDataStorePort()
    await fake.initialize(VALID_CONFIG)
    return fake


@pytest.mark.asyncio
async def test_records_calls(store: FakeDataStorePort) -> None:
    await store.insert_one("users", {"name": "Alice"})
    await store.update("users", {"name": "Alice"}, {"age": 30})
    await store.find_one("users", {"name": "Alice"})

    assert store.insert_one_calls == [("users", {"name": "Alice"})]
    assert store.update_calls == [("users", {"name": "Alice"}, {"age": 30})]
    assert store.find_one_calls == [("users", {"name": "Alice"})]


@pytest.mark.asyncio
async def test_update_counts_only_changed_documents(store: FakeDataStorePort) -> None:
    await store.insert_one("users", {"name": "Alice", "age": 30})
    await store.insert_one("users", {"name": "Alice", "age": 31})

    assert await store.update("users", {"name": "Alice"}, {"age": 30}) == 1


@pytest.mark.asyncio
async def test_find_one_returns_copy(store: FakeDataStorePort) -> None:
    await store.insert_one("users", {"name": "Alice"})

    found = await store.find_one("users", {"name": "Alice"})
    found["name"] = "Mallory"

    assert await store.find_one("users", {"name": "Alice"}) is not None


@pytest.mark.asyncio
async def test_fail_with_applies_once(store: FakeDataStorePort) -> None:
    store.fail_with = UpdateError("Failed to update DB. boom")

    with pytest.raises(UpdateError):
        await store.update("users", {}, {"age": 1})

    assert await store.update("users", {}, {"age": 1}) == 0


@pytest.mark.asyncio
async def test_second_initialize_keeps_first_config(store: FakeDataStorePort) -> None:
    first = store.config

    await store.initialize(
        {"adapter": "mongodb", "mongodb": {"uri": "mongodb://elsewhere/advtxt"}}
    )

    assert store.config is first
    assert store.initialize_call_count == 2


@pytest.mark.asyncio
async def test_reset(store: FakeDataStorePort) -> None:
    await store.insert_one("users", {"name": "Alice"})

    store.reset()

    assert store.collections == {}
    assert store.is_ready is False
    assert store.insert_one_calls == []
