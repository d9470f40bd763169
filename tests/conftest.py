"""
Pytest Configuration and Fixtures

Replaces the Redis-backed store with an in-memory double so the HTTP
layer can be exercised without a running Redis server.
"""

import asyncio
from typing import Dict, List, Optional
from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from api.dependencies import get_store
from main import app
from redis_client import KeyValueStore


class InMemoryStore:
    """Async get/set/keys over a dict, same surface as KeyValueStore"""

    def __init__(self):
        self.data: Dict[str, str] = {}

    async def set(self, key: str, value: str) -> None:
        # Yield so concurrent writers interleave
        await asyncio.sleep(0)
        self.data[key] = value

    async def get(self, key: str) -> Optional[str]:
        return self.data.get(key)

    async def keys(self, pattern: str = "*") -> List[str]:
        if pattern == "*":
            return list(self.data)
        prefix = pattern.rstrip("*")
        return [k for k in self.data if k.startswith(prefix)]

    async def ping(self) -> bool:
        return True

    async def close(self) -> None:
        pass


# ============================================================================
# Store Fixtures
# ============================================================================

@pytest.fixture
def memory_store() -> InMemoryStore:
    return InMemoryStore()


@pytest.fixture
def redis_mock() -> AsyncMock:
    """A redis.asyncio client double; configure side effects per test."""
    return AsyncMock()


@pytest.fixture
def broken_store(redis_mock) -> KeyValueStore:
    """Real KeyValueStore whose Redis connection refuses every command."""
    from redis.exceptions import ConnectionError as RedisConnectionError

    refused = RedisConnectionError("Error 111 connecting to cache:6379. Connection refused.")
    redis_mock.get.side_effect = refused
    redis_mock.set.side_effect = refused
    redis_mock.keys.side_effect = refused
    redis_mock.ping.side_effect = refused
    return KeyValueStore(redis_mock, timeout=0.5)


# ============================================================================
# HTTP Fixtures
# ============================================================================

def _client_for(store) -> TestClient:
    app.dependency_overrides[get_store] = lambda: store
    return TestClient(app)


@pytest.fixture
def client(memory_store):
    yield _client_for(memory_store)
    app.dependency_overrides.clear()


@pytest.fixture
def broken_client(broken_store):
    yield _client_for(broken_store)
    app.dependency_overrides.clear()
