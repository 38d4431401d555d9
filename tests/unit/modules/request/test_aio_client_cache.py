import pytest
from unittest.mock import AsyncMock, MagicMock, patch
from src.modules.request.aio_client_cache import AioSessionCache


def make_session() -> MagicMock:
    session = MagicMock()
    session.closed = False
    session.close = AsyncMock()
    return session


class TestAioSessionCache:
    """Test cases for AioSessionCache."""

    @pytest.mark.asyncio
    async def test_reuses_open_session(self):
        first, second = make_session(), make_session()
        cache = AioSessionCache()

        with patch("aiohttp.ClientSession", side_effect=[first, second]):
            assert await cache.get_session(timeout=10) is first
            assert await cache.get_session(timeout=10) is first

        assert cache.is_open

    @pytest.mark.asyncio
    async def test_recreates_on_timeout_change(self):
        first, second = make_session(), make_session()
        cache = AioSessionCache()

        with patch("aiohttp.ClientSession", side_effect=[first, second]):
            await cache.get_session(timeout=10)
            assert await cache.get_session(timeout=20) is second

        first.close.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_close(self):
        session = make_session()
        cache = AioSessionCache()

        with patch("aiohttp.ClientSession", return_value=session):
            await cache.get_session(timeout=10)
        await cache.close()
        await cache.close()

        session.close.assert_awaited_once()
        assert cache.client_session is None
        assert not cache.is_open
