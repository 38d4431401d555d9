"""Tests for the main view adapters."""

import asyncio
import threading
import pytest
from unittest.mock import Mock

from src.modules.shutdown.view import ConsoleView, LoopBoundView
from tests.utils.test_logger import create_test_logger


@pytest.mark.asyncio
async def test_console_view_close():
    """Test closing the console view wakes waiters."""
    view = ConsoleView(create_test_logger())
    waiter = asyncio.create_task(view.wait_closed())

    await asyncio.sleep(0)
    assert not waiter.done()

    view.close()
    assert await waiter is True
    assert view.closed


@pytest.mark.asyncio
async def test_console_view_wait_times_out():
    """Test waiting on an open view returns False after the timeout."""
    view = ConsoleView(create_test_logger())

    assert await view.wait_closed(timeout=0.01) is False
    assert not view.closed


@pytest.mark.asyncio
async def test_console_view_close_is_idempotent():
    """Test that repeated closes only log once."""
    logger = create_test_logger()
    view = ConsoleView(logger)

    view.close()
    view.close()

    assert logger.get_logs() == ["INFO: Closing main view"]


@pytest.mark.asyncio
async def test_loop_bound_view_marshals_close():
    """Test that close() from another thread runs on the owning loop."""
    loop = asyncio.get_running_loop()
    closed_on = []
    view = Mock()
    view.close = Mock(side_effect=lambda: closed_on.append(threading.current_thread()))
    bound = LoopBoundView(view, loop)

    thread = threading.Thread(target=bound.close)
    thread.start()
    thread.join()

    # Let the loop run the scheduled callback
    await asyncio.sleep(0.01)

    view.close.assert_called_once_with()
    assert closed_on == [threading.current_thread()]
