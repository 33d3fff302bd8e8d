"""
Sync API wrappers for async client methods.
"""

import asyncio
import concurrent.futures
import threading
from functools import wraps
from typing import Any, Awaitable, Callable, TypeVar, cast

F = TypeVar("F", bound=Callable[..., Any])

_thread_local = threading.local()


def detect_event_loop_state() -> str:
    """Detect current event loop state.

    Returns:
        - "running": an event loop is running in this thread
        - "none": no running event loop
    """
    try:
        asyncio.get_running_loop()
        return "running"
    except RuntimeError:
        return "none"


def get_or_create_event_loop() -> asyncio.AbstractEventLoop:
    """Get the thread-local loop used for sync calls, creating it once."""
    loop = getattr(_thread_local, "loop", None)
    if loop is None or loop.is_closed():
        loop = asyncio.new_event_loop()
        _thread_local.loop = loop
    return cast(asyncio.AbstractEventLoop, loop)


def run_in_thread_pool(coro: Awaitable[Any], timeout: float = 300) -> Any:
    """Run coroutine in thread pool executor."""
    with concurrent.futures.ThreadPoolExecutor(max_workers=1) as executor:
        future = executor.submit(asyncio.run, coro)
        return future.result(timeout=timeout)


def sync_wrapper(async_func: F) -> F:
    """
    Decorator to create sync version of async method.

    Handles thread-safe event loop management.
    """

    @wraps(async_func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        if detect_event_loop_state() == "running":
            # Called from async code; run on a separate thread to avoid blocking
            return run_in_thread_pool(async_func(*args, **kwargs))

        loop = get_or_create_event_loop()
        return loop.run_until_complete(async_func(*args, **kwargs))

    return cast(F, wrapper)


class SyncClientMixin:
    """Mixin providing sync access to async client methods."""

    def run_sync(self, async_func: Callable[..., Awaitable[Any]], *args: Any, **kwargs: Any) -> Any:
        """Call any coroutine function of the client synchronously.

        Example:
            >>> client.run_sync(client.ai.search.v2, question="What is WorqHat?")
        """
        return sync_wrapper(async_func)(*args, **kwargs)

    def check_authentication_sync(self) -> Any:
        """Synchronous version of check_authentication."""
        return sync_wrapper(getattr(self, "check_authentication"))()
