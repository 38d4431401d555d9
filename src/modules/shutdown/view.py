"""Main view capability and the adapters the application closes through."""

import asyncio
from typing import Optional, Protocol

from ..logging import BaseLogger


class MainView(Protocol):
    """The application's primary surface. Closing it starts normal shutdown."""

    def close(self) -> None:
        ...


class LoopBoundView:
    """Marshals ``close()`` onto the event loop that owns the wrapped view."""

    def __init__(self, view: MainView, loop: asyncio.AbstractEventLoop):
        self.view = view
        self.loop = loop

    def close(self) -> None:
        self.loop.call_soon_threadsafe(self.view.close)


class ConsoleView:
    """Foreground console surface that stays open until closed."""

    def __init__(self, logger: BaseLogger):
        self.logger = logger
        self._closed = asyncio.Event()

    @property
    def closed(self) -> bool:
        return self._closed.is_set()

    def close(self) -> None:
        if self._closed.is_set():
            return
        self.logger.log_info("Closing main view")
        self._closed.set()

    async def wait_closed(self, timeout: Optional[float] = None) -> bool:
        """Wait for the view to close.

        Returns:
            bool: True if the view closed within the timeout
        """
        try:
            await asyncio.wait_for(self._closed.wait(), timeout=timeout)
        except asyncio.TimeoutError:
            return False
        return True
