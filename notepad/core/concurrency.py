"""
Concurrency Infrastructure.

Shared thread pool for blocking work that must not run on the event loop
(bcrypt hashing and verification). The pool is created lazily on first
access and shut down during application shutdown.

Usage:
    from notepad.core.concurrency import run_blocking

    digest = await run_blocking(hash_password, password)
"""

import asyncio
import contextvars
from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor
from typing import Any, TypeVar

from notepad.core.logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T")

_io_pool: ThreadPoolExecutor | None = None


class TracedThreadPoolExecutor(ThreadPoolExecutor):
    """ThreadPoolExecutor that propagates contextvars to worker threads.

    Standard ThreadPoolExecutor does not carry structlog context (request_id,
    user_id) into worker threads. This subclass copies the current context
    before dispatching.
    """

    def submit(self, fn, /, *args, **kwargs):
        ctx = contextvars.copy_context()
        return super().submit(ctx.run, fn, *args, **kwargs)


def get_io_pool() -> TracedThreadPoolExecutor:
    """Get the shared thread pool for blocking operations.

    Creates the pool lazily on first call using config from concurrency.yaml.
    """
    global _io_pool
    if _io_pool is None:
        from notepad.core.config import get_app_config
        max_workers = get_app_config().concurrency.thread_pool.max_workers
        _io_pool = TracedThreadPoolExecutor(max_workers=max_workers)
        logger.info("Thread pool created", extra={"max_workers": max_workers})
    return _io_pool


async def run_blocking(fn: Callable[..., T], *args: Any) -> T:
    """Run a blocking callable on the shared thread pool and await its result."""
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(get_io_pool(), fn, *args)


async def shutdown_pools() -> None:
    """Shut down the thread pool. Called during application shutdown."""
    global _io_pool

    if _io_pool is not None:
        await asyncio.to_thread(_io_pool.shutdown, wait=True)
        logger.info("Thread pool shut down")
        _io_pool = None
