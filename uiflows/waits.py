"""Condition polling with a bounded timeout and exponential backoff."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from typing import TypeVar

from uiflows.errors import WaitTimeoutError

logger = logging.getLogger(__name__)

T = TypeVar("T")


def wait_until(
    predicate: Callable[[], T],
    timeout: float = 10.0,
    interval: float = 0.1,
    backoff: float = 2.0,
    max_interval: float = 2.0,
    message: str = "condition not met",
    sleep: Callable[[float], None] = time.sleep,
    clock: Callable[[], float] = time.monotonic,
) -> T:
    """
    Poll ``predicate`` until it returns a truthy value.

    The delay between attempts starts at ``interval`` and is multiplied by
    ``backoff`` after every miss, capped at ``max_interval``. The last sleep
    never overshoots the deadline.

    Args:
        predicate: Zero-argument callable; its first truthy result is returned.
        timeout: Overall bound in seconds.
        interval: First delay in seconds.
        backoff: Multiplier applied to the delay after each miss.
        max_interval: Upper bound on a single delay.
        message: Description used in the timeout error.
        sleep: Sleep function (injectable for tests).
        clock: Monotonic clock (injectable for tests).

    Returns:
        The first truthy value returned by ``predicate``.

    Raises:
        WaitTimeoutError: If the deadline passes without a truthy result.
    """
    if timeout < 0:
        raise ValueError("timeout must be non-negative")
    if backoff < 1:
        raise ValueError("backoff must be >= 1")

    deadline = clock() + timeout
    delay = interval
    attempts = 0
    while True:
        attempts += 1
        result = predicate()
        if result:
            logger.debug("Condition met after %d attempt(s): %s", attempts, message)
            return result
        remaining = deadline - clock()
        if remaining <= 0:
            raise WaitTimeoutError(message, timeout, attempts)
        sleep(min(delay, remaining))
        delay = min(delay * backoff, max_interval)
