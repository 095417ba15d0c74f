"""
Unit tests for RedisCacheClient.

Usage:
    pytest concierge/tests/unit/infrastructure
"""

from unittest.mock import AsyncMock

import pytest

from concierge.infrastructure.cache import RedisCacheClient, build_cache
from helpers.fakes import make_settings


class TestRedisCacheClient:
    """Unit tests for RedisCacheClient."""

    # ================================================================
    # Construction tests
    # ================================================================

    def test_from_settings_does_not_connect(self):
        """Building the client opens no connection."""
        settings = make_settings(
            REDIS_HOST="cache.internal",
            REDIS_PORT=6380,
            REDIS_DB=3,
            REDIS_PASSWORD="secret",
        )

        client = RedisCacheClient.from_settings(settings)

        assert client.url == "redis://cache.internal:6380/3"
        assert client.password == "secret"
        assert client._client is None

    def test_empty_password_means_no_auth(self):
        """An empty password is treated as no password."""
        client = RedisCacheClient(password="")

        assert client.password is None

    def test_build_cache_disabled(self):
        """No client is built when Redis is disabled."""
        assert build_cache(make_settings(REDIS_ENABLED=False)) is None

    def test_build_cache_enabled(self):
        """A client is built when Redis is enabled."""
        cache = build_cache(make_settings(REDIS_ENABLED=True))

        assert isinstance(cache, RedisCacheClient)

    # ================================================================
    # Lifecycle tests
    # ================================================================

    async def test_close_without_connect_is_noop(self):
        """Closing a never-used client does nothing."""
        client = RedisCacheClient()

        await client.close()

        assert client._client is None

    async def test_close_releases_pool(self):
        """close() closes the redis client and forgets it."""
        client = RedisCacheClient()
        redis_client = AsyncMock()
        client._client = redis_client

        await client.close()

        redis_client.aclose.assert_awaited_once()
        assert client._client is None

    async def test_closed_client_does_not_reconnect(self):
        """After close() no operation builds a new pool."""
        client = RedisCacheClient(port=1)
        await client.connect()

        await client.close()

        assert await client.ping() is False
        assert client._client is None
        with pytest.raises(RuntimeError, match="closed"):
            await client.connect()
        with pytest.raises(RuntimeError, match="closed"):
            await client.get("key")
        with pytest.raises(RuntimeError, match="closed"):
            await client.set("key", "value")
        assert client._client is None

    async def test_close_is_idempotent(self):
        """A second close() is a no-op."""
        client = RedisCacheClient()
        redis_client = AsyncMock()
        client._client = redis_client

        await client.close()
        await client.close()

        redis_client.aclose.assert_awaited_once()

    async def test_connect_is_lazy_and_idempotent(self):
        """connect() builds the pool once without a round trip."""
        client = RedisCacheClient()

        await client.connect()
        first = client._client
        await client.connect()

        assert first is not None
        assert client._client is first

        await client.close()

    # ================================================================
    # Operation tests
    # ================================================================

    async def test_set_with_expiration_uses_setex(self):
        """Values with a TTL are stored with SETEX."""
        client = RedisCacheClient()
        client._client = AsyncMock()

        assert await client.set("key", "value", expire_seconds=30) is True

        client._client.setex.assert_awaited_once_with("key", 30, "value")

    async def test_delete_reports_removed_keys(self):
        """delete() is True only when a key was removed."""
        client = RedisCacheClient()
        client._client = AsyncMock()
        client._client.delete.return_value = 0

        assert await client.delete("missing") is False

    async def test_ping_false_on_connection_error(self):
        """ping() reports an unreachable server as False."""
        client = RedisCacheClient()
        client._client = AsyncMock()
        client._client.ping.side_effect = ConnectionRefusedError()

        assert await client.ping() is False

    async def test_get_and_exists_round_trip(self):
        """get() and exists() pass through to Redis."""
        client = RedisCacheClient()
        client._client = AsyncMock()
        client._client.get.return_value = "value"
        client._client.exists.return_value = 1

        assert await client.get("key") == "value"
        assert await client.exists("key") is True

        client._client.get.assert_awaited_once_with("key")
        client._client.exists.assert_awaited_once_with("key")

    async def test_exists_false_for_missing_key(self):
        client = RedisCacheClient()
        client._client = AsyncMock()
        client._client.exists.return_value = 0

        assert await client.exists("missing") is False
