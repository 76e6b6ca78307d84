"""Cache gateway backed by Redis."""

from __future__ import annotations

from typing import Any, Callable, Mapping

import redis
from redis.exceptions import ConnectionError as RedisConnectionError
from redis.exceptions import RedisError, TimeoutError as RedisTimeoutError

from ..errors import StoreError, StoreUnavailable

STORE = "cache"


class CacheStore:
    """Key, list and hash access with store errors translated.

    Values are strings (the client decodes responses); route payloads are JSON
    text.
    """

    def __init__(self, client: redis.Redis) -> None:
        self._client = client

    def _call(self, operation: str, command: Callable[[], Any]) -> Any:
        try:
            return command()
        except (RedisConnectionError, RedisTimeoutError) as exc:
            raise StoreUnavailable(STORE, operation, str(exc)) from exc
        except RedisError as exc:
            raise StoreError(STORE, operation, str(exc)) from exc

    def ping(self) -> bool:
        return bool(self._call("ping", self._client.ping))

    def get(self, key: str) -> str | None:
        """Return the value, or None on a miss."""
        return self._call("get", lambda: self._client.get(key))

    def set(self, key: str, value: str, ttl_seconds: int | None = None) -> None:
        self._call("set", lambda: self._client.set(key, value, ex=ttl_seconds))

    def exists(self, key: str) -> bool:
        return self._call("exists", lambda: self._client.exists(key)) > 0

    def list_push(self, key: str, *values: str) -> int:
        return self._call("list push", lambda: self._client.lpush(key, *values))

    def list_range(self, key: str, start: int = 0, end: int = -1) -> list[str]:
        return self._call("list range", lambda: self._client.lrange(key, start, end))

    def hash_set(self, key: str, mapping: Mapping[str, Any]) -> None:
        self._call("hash set", lambda: self._client.hset(key, mapping=dict(mapping)))

    def hash_get_all(self, key: str) -> dict[str, str]:
        return self._call("hash get all", lambda: self._client.hgetall(key))
