"""
Fetch-with-retry over HTTP GET.

Returns the status code and body of the final attempt; deciding what a status
code means (200 ok, 404 unused address, anything else an error) is left to the
adapters. Only connection-level failures raise here.
"""
from __future__ import annotations

import functools
import logging
from dataclasses import dataclass
from typing import Callable, Optional

import requests

from ..core.errors import TransportError
from .resilience import RetryConfig, resilient_call

logger = logging.getLogger(__name__)

HTTP_TIMEOUT_S = 15.0
USER_AGENT = "chain-oracles"


@dataclass(frozen=True)
class HttpResponse:
    """Status code and raw body of one GET."""

    status_code: int
    content: bytes

    @property
    def text(self) -> str:
        return self.content.decode("utf-8", errors="replace")


HttpGet = Callable[[str], HttpResponse]


class _RetryableStatus(Exception):
    def __init__(self, response: HttpResponse) -> None:
        super().__init__(f"HTTP {response.status_code}")
        self.response = response


def http_get_retry(
    url: str,
    retry_config: Optional[RetryConfig] = None,
    timeout: Optional[float] = None,
) -> HttpResponse:
    """
    GET `url`, retrying connection errors and retryable status codes (429/5xx).

    After the last attempt a retryable status is returned as-is; a connection
    failure raises TransportError.
    """
    if retry_config is None or timeout is None:
        from chain_oracles import config

        cfg = retry_config or config.retry_config()
        timeout_s = config.http_timeout_s() if timeout is None else timeout
    else:
        cfg, timeout_s = retry_config, timeout

    def _get() -> HttpResponse:
        resp = requests.get(url, timeout=timeout_s, headers={"User-Agent": USER_AGENT})
        out = HttpResponse(status_code=resp.status_code, content=resp.content)
        if resp.status_code in cfg.retry_on_status_codes:
            raise _RetryableStatus(out)
        return out

    try:
        return resilient_call(
            _get,
            retry_config=cfg,
            retry_on=(requests.RequestException, _RetryableStatus),
        )
    except _RetryableStatus as exc:
        logger.warning("Giving up on %s after HTTP %d", url, exc.response.status_code)
        return exc.response
    except requests.RequestException as exc:
        raise TransportError(f"Request to {url} failed: {exc}", url=url) from exc


def configured_http_get() -> HttpGet:
    """http_get_retry bound to the configured retry policy and timeout, read once."""
    from chain_oracles import config

    retry, timeout = config.http_settings()
    return functools.partial(http_get_retry, retry_config=retry, timeout=timeout)
