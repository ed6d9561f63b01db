"""Helper utilities for retrying remote calls."""

import asyncio
from functools import wraps
from typing import Any, Awaitable, Callable, Tuple, Type, TypeVar

from src.utils.logger import get_logger

T = TypeVar("T")

logger = get_logger(__name__)


def retry_async(
    max_attempts: int = 3,
    delay: float = 1.0,
    exceptions: Tuple[Type[BaseException], ...] = (Exception,),
) -> Callable[[Callable[..., Awaitable[T]]], Callable[..., Awaitable[T]]]:
    """Retry an async function with linear backoff.

    Only exceptions listed in ``exceptions`` trigger another attempt; the
    last failure is re-raised unchanged.
    """

    def decorator(func: Callable[..., Awaitable[T]]) -> Callable[..., Awaitable[T]]:
        @wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> T:
            for attempt in range(max_attempts):
                try:
                    return await func(*args, **kwargs)
                except exceptions as exc:
                    if attempt == max_attempts - 1:
                        raise
                    logger.warning(
                        "%s failed (attempt %d/%d): %s",
                        func.__name__,
                        attempt + 1,
                        max_attempts,
                        exc,
                    )
                    await asyncio.sleep(delay * (attempt + 1))
            raise RuntimeError("retry_async requires max_attempts >= 1")

        return wrapper

    return decorator
