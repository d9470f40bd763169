"""
Key-Value Store Client
Thin async wrapper over redis.asyncio with a bounded timeout on every command
"""

import asyncio
from typing import Any, Awaitable, List, Optional

import redis.asyncio as redis
from redis.exceptions import RedisError

from config.settings import settings
from services.entries.exceptions import StoreUnavailable
from utils.logger import logger


class KeyValueStore:
    """
    Async key/value store backed by Redis

    Exposes the three commands the API needs (get, set, keys). Timeouts and
    Redis errors surface as StoreUnavailable so callers never hang or see
    driver-specific exceptions.
    """

    def __init__(self, client: redis.Redis, timeout: float = 5.0):
        self._client = client
        self.timeout = timeout

    @classmethod
    def from_url(cls, url: str, timeout: Optional[float] = None) -> "KeyValueStore":
        """Build a store from a connection string such as redis://cache:6379/0"""
        timeout = timeout if timeout is not None else settings.REDIS_TIMEOUT_SECONDS
        client = redis.from_url(
            url,
            decode_responses=True,
            socket_timeout=timeout,
            socket_connect_timeout=timeout,
        )
        logger.info(f"Key-value store client created for {url}")
        return cls(client, timeout=timeout)

    async def _run(self, operation: str, command: Awaitable[Any]) -> Any:
        try:
            return await asyncio.wait_for(command, timeout=self.timeout)
        except asyncio.TimeoutError:
            logger.error(f"Store {operation} timed out after {self.timeout}s")
            raise StoreUnavailable(operation, f"timed out after {self.timeout}s")
        except (RedisError, OSError) as e:
            logger.error(f"Store {operation} failed: {type(e).__name__}: {e}")
            raise StoreUnavailable(operation, str(e)) from e

    async def set(self, key: str, value: str) -> None:
        await self._run("set", self._client.set(key, value))

    async def get(self, key: str) -> Optional[str]:
        """Return the string stored under key, or None when absent"""
        return await self._run("get", self._client.get(key))

    async def keys(self, pattern: str = "*") -> List[str]:
        return list(await self._run("keys", self._client.keys(pattern)))

    async def ping(self) -> bool:
        """Check connectivity without raising"""
        try:
            return bool(await self._run("ping", self._client.ping()))
        except StoreUnavailable:
            return False

    async def close(self) -> None:
        await self._client.aclose()
        logger.info("Key-value store connection closed")


def create_store() -> KeyValueStore:
    """Create a store from the configured REDIS_URL"""
    config = settings.get_redis_config()
    return KeyValueStore.from_url(config["url"], timeout=config["timeout"])
