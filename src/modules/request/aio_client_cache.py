from typing import Optional
import aiohttp
from aiohttp import ClientTimeout

class AioSessionCache:
    """Holds one client session, recreated when closed or when the timeout changes."""

    def __init__(self):
        self.client_session: Optional[aiohttp.ClientSession] = None
        self._timeout: Optional[int] = None

    @property
    def is_open(self) -> bool:
        return self.client_session is not None and not self.client_session.closed

    async def get_session(self, timeout: int) -> aiohttp.ClientSession:
        if self.is_open and self._timeout != timeout:
            await self.close()
        if not self.is_open:
            self.client_session = aiohttp.ClientSession(timeout=ClientTimeout(total=timeout))
            self._timeout = timeout
        return self.client_session

    async def close(self) -> None:
        if self.client_session is not None:
            await self.client_session.close()
        self.client_session = None
        self._timeout = None
