"""
Retry with exponential backoff for oracle calls.

Wraps a single fetch so transient failures (connection resets, 429/5xx) are
retried a bounded number of times. Results are never cached across calls.
"""
from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Any, Callable, Optional, Tuple, Type, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class RetryConfig:
    """Configuration for retry with exponential backoff."""
    max_retries: int = 3
    base_delay_s: float = 0.5
    max_delay_s: float = 10.0
    backoff_factor: float = 1.5
    retry_on_status_codes: tuple[int, ...] = (429, 500, 502, 503, 504)

    def delay_for(self, attempt: int) -> float:
        """Sleep before the attempt following `attempt` (1-based)."""
        return min(
            self.base_delay_s * (self.backoff_factor ** (attempt - 1)),
            self.max_delay_s,
        )


def resilient_call(
    func: Callable[..., T],
    *args: Any,
    retry_config: Optional[RetryConfig] = None,
    retry_on: Tuple[Type[BaseException], ...] = (Exception,),
    **kwargs: Any,
) -> T:
    """
    Execute a call with retry protection.

    Only exceptions listed in `retry_on` are retried; anything else propagates
    immediately. Raises the last exception if all retries are exhausted.
    """
    cfg = retry_config or RetryConfig()
    attempts = max(1, cfg.max_retries)

    last_err: Optional[BaseException] = None
    for attempt in range(1, attempts + 1):
        try:
            return func(*args, **kwargs)
        except retry_on as exc:
            last_err = exc
            logger.debug(
                "Attempt %d/%d failed: %s: %s",
                attempt, attempts, type(exc).__name__, exc,
            )
            if attempt < attempts:
                time.sleep(cfg.delay_for(attempt))

    raise last_err  # type: ignore[misc]
