"""Redis cache client implementation."""

from typing import Optional

import redis.asyncio as aioredis
from redis.exceptions import RedisError

from concierge.infrastructure.cache.i_cache_client import ICacheClient
from concierge.infrastructure.monitoring import get_logger

logger = get_logger(__name__)


class RedisCacheClient(ICacheClient):
    """
    Redis cache client using async redis library.

    Construction never touches the network; the connection pool is created
    on first use and connectivity is only known after a command runs.
    A closed client stays closed.
    """

    def __init__(
        self,
        host: str = "localhost",
        port: int = 6379,
        db: int = 0,
        password: Optional[str] = None,
    ):
        """
        Store connection parameters; no connection is made here.

        Args:
            host: Redis server host
            port: Redis server port
            db: Logical database index
            password: AUTH password; empty means none
        """
        self.host = host
        self.port = port
        self.db = db
        self.password = password if password else None
        self._client: Optional[aioredis.Redis] = None
        self._closed = False

    @classmethod
    def from_settings(cls, settings) -> "RedisCacheClient":
        """Build a client from REDIS_* settings."""
        return cls(
            host=settings.REDIS_HOST,
            port=settings.REDIS_PORT,
            db=settings.REDIS_DB,
            password=settings.REDIS_PASSWORD,
        )

    @property
    def url(self) -> str:
        """Connection URL without credentials."""
        return f"redis://{self.host}:{self.port}/{self.db}"

    async def connect(self) -> None:
        """
        Create the connection pool (no round trip).

        Raises:
            RuntimeError: If the client has been closed
        """
        if self._closed:
            raise RuntimeError("Cache client closed")
        if self._client is not None:
            return

        self._client = aioredis.from_url(
            self.url,
            password=self.password,
            encoding="utf-8",
            decode_responses=True,
        )

    async def close(self) -> None:
        """Close the pool for good; later operations fail instead of reconnecting."""
        self._closed = True
        if self._client is None:
            return

        await self._client.aclose()
        self._client = None
        logger.info("Redis connection closed")

    async def set(
        self,
        key: str,
        value: str,
        expire_seconds: Optional[int] = None,
    ) -> bool:
        """Store a value, with SETEX when a TTL is given."""
        await self.connect()

        if expire_seconds:
            await self._client.setex(key, expire_seconds, value)
        else:
            await self._client.set(key, value)

        return True

    async def get(self, key: str) -> Optional[str]:
        await self.connect()
        return await self._client.get(key)

    async def delete(self, key: str) -> bool:
        """Delete a key; True only if it existed."""
        await self.connect()
        return await self._client.delete(key) > 0

    async def exists(self, key: str) -> bool:
        await self.connect()
        return await self._client.exists(key) > 0

    async def ping(self) -> bool:
        """
        Round-trip to the server.

        Returns:
            False instead of raising when Redis cannot be reached or
            the client has been closed
        """
        if self._closed:
            return False

        await self.connect()

        try:
            await self._client.ping()
        except (RedisError, OSError) as e:
            logger.warning(f"Redis ping to {self.url} failed: {e}")
            return False
        return True


def build_cache(settings) -> Optional[RedisCacheClient]:
    """
    Build the cache client for settings.

    Returns:
        RedisCacheClient, or None when REDIS_ENABLED is false
    """
    if not settings.REDIS_ENABLED:
        logger.info("Redis disabled, running without cache")
        return None
    return RedisCacheClient.from_settings(settings)
