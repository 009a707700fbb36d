# k6ctl/utils/async_utils.py
"""Asynchronous operation utilities"""

import asyncio
from typing import Any, Coroutine, TypeVar

T = TypeVar('T')


def run_async(coro: Coroutine[Any, Any, T]) -> T:
    """
    Run async coroutine in sync context

    Args:
        coro: Coroutine to run

    Returns:
        Coroutine result

    Raises:
        RuntimeError: If an event loop is already running in this thread
    """
    try:
        asyncio.get_running_loop()
    except RuntimeError:
        # No running loop, use asyncio.run
        return asyncio.run(coro)

    coro.close()
    raise RuntimeError("run_async() cannot be called from a running event loop")
