"""
Shared fetch -> dump -> decode step used by the HTTP oracles, plus payload helpers.
"""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, List, Optional, Union

from ..core.errors import FormatError, TransportError
from .base import Lookup, OracleParams
from .http import HttpGet

logger = logging.getLogger(__name__)


def write_raw(path: Optional[str], content: Union[bytes, str]) -> None:
    """Dump the wire payload verbatim."""
    if not path:
        return
    data = content.encode("utf-8") if isinstance(content, str) else content
    Path(path).write_bytes(data)


def write_json(path: Optional[str], data: Any) -> None:
    """Dump a decoded payload as pretty-printed JSON."""
    if not path:
        return
    Path(path).write_text(json.dumps(data, indent=4), encoding="utf-8")


def decode_json(content: Union[bytes, str], provider: str) -> Any:
    try:
        return json.loads(content)
    except (TypeError, ValueError) as exc:
        raise FormatError(f"{provider} returned a payload that is not JSON: {exc}", provider=provider) from exc


def require_field(info: Any, key: str, provider: str) -> Any:
    """info[key], or FormatError if info is not an object or lacks the key."""
    if not isinstance(info, dict):
        raise FormatError(
            f"{provider} returned {type(info).__name__} where an object was expected",
            provider=provider,
        )
    if key not in info or info[key] is None:
        raise FormatError(f"{provider} response missing field '{key}'", provider=provider)
    return info[key]


def as_record_list(data: Any, provider: str, key_field: str = "address") -> List[Any]:
    """
    Normalize a collection payload to a list.
    Some oracles send a bare object instead of a one-element list for a single address.
    """
    if isinstance(data, dict) and key_field in data:
        return [data]
    if isinstance(data, list):
        return data
    raise FormatError(
        f"{provider} returned {type(data).__name__} where a list of addresses was expected",
        provider=provider,
    )


def fetch_payload(
    url: str,
    http_get: HttpGet,
    params: OracleParams,
    provider: str,
    log: Optional[logging.Logger] = None,
    dump_decoded: bool = True,
) -> Lookup:
    """
    GET `url` and decode it.

    200 -> Lookup.found(decoded JSON); 404 -> Lookup.not_found(); else TransportError.
    The raw body goes to params.oracle_raw before anything is parsed and the decoded
    payload to params.oracle_json before it is normalized, unless dump_decoded is
    False and the caller writes it once its own envelope checks pass.
    """
    log = log or logger
    log.debug("Retrieving addresses metadata from %s", url)

    result = http_get(url)
    write_raw(params.oracle_raw, result.content)

    if result.status_code == 404:
        log.info("%s has no record for %s", provider, url)
        return Lookup.not_found()
    if result.status_code != 200:
        raise TransportError(
            f"Got unexpected response code {result.status_code} from {provider}",
            status_code=result.status_code,
            url=url,
        )

    log.info("Received address info from %s server.", provider)
    data = decode_json(result.content, provider)
    if dump_decoded:
        write_json(params.oracle_json, data)
    return Lookup.found(data)

