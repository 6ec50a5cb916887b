"""
Exponential backoff for rate-limited provider calls.

Only rate-limit errors are retried. Everything else propagates on the first
failure, as the same exception object.
"""

import asyncio
from typing import Awaitable, Callable, Optional, TypeVar

from tenacity import (
    AsyncRetrying,
    RetryCallState,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
)

from core.utils import warn

T = TypeVar("T")

RATE_LIMIT_STATUS = "RESOURCE_EXHAUSTED"

DEFAULT_RETRIES = 3
DEFAULT_DELAY = 2.0


def is_rate_limit_error(exc: BaseException) -> bool:
    """True if exc signals HTTP 429 or a resource-exhausted status."""
    if getattr(exc, "status", None) == RATE_LIMIT_STATUS:
        return True
    if getattr(exc, "code", None) == 429:
        return True
    message = getattr(exc, "message", None)
    if not isinstance(message, str):
        message = str(exc)
    return "429" in message


def _log_retry(retries: int) -> Callable[[RetryCallState], None]:
    def before_sleep(retry_state: RetryCallState) -> None:
        left = retries - retry_state.attempt_number + 1
        wait = retry_state.next_action.sleep if retry_state.next_action else 0
        warn(f"Rate limit hit. Retrying in {wait:g}s... ({left} attempts left)")

    return before_sleep


async def with_retry(
    fn: Callable[[], Awaitable[T]],
    retries: int = DEFAULT_RETRIES,
    delay: float = DEFAULT_DELAY,
    max_delay: Optional[float] = None,
    sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
) -> T:
    """
    Await fn(), retrying rate-limit failures with doubling delays.

    Args:
        fn: Zero-argument coroutine function to attempt
        retries: Retries allowed after the first attempt
        delay: Seconds to wait before the first retry
        max_delay: Optional ceiling for the delay (None = unbounded)
        sleep: Awaitable sleep, injectable for tests

    Returns:
        The first successful result of fn()

    Raises:
        The last exception raised by fn(), unchanged
    """
    wait_kwargs = {"multiplier": delay, "exp_base": 2}
    if max_delay is not None:
        wait_kwargs["max"] = max_delay

    retrying = AsyncRetrying(
        retry=retry_if_exception(is_rate_limit_error),
        stop=stop_after_attempt(retries + 1),
        wait=wait_exponential(**wait_kwargs),
        before_sleep=_log_retry(retries),
        sleep=sleep,
        reraise=True,
    )
    return await retrying(fn)
