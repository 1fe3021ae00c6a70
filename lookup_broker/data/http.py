"""
One place that performs an upstream GET and turns every way it can go wrong
into an UpstreamError with a message safe to hand back to the client.
"""
import logging
import time
from typing import Any

import httpx

from ..core.errors import UpstreamError
from ..core.metrics import observe_upstream

logger = logging.getLogger(__name__)


async def fetch_json(
    upstream: str,
    url: str,
    *,
    params: dict[str, Any],
    headers: dict[str, str] | None = None,
    timeout: float = 10,
    transport: httpx.AsyncBaseTransport | None = None,
) -> Any:
    """
    GET `url` and return the parsed JSON body.

    Error messages never include the request URL because query strings carry
    API keys.
    """
    start = time.perf_counter()
    outcome = "ok"
    try:
        async with httpx.AsyncClient(timeout=timeout, transport=transport) as client:
            try:
                r = await client.get(url, params=params, headers=headers)
            except httpx.RequestError as exc:
                outcome = "transport_error"
                raise UpstreamError(upstream, f"{upstream} request failed: {exc.__class__.__name__}") from exc
            if r.is_error:
                outcome = "http_error"
                raise UpstreamError(upstream, f"{upstream} responded with HTTP {r.status_code}")
            try:
                return r.json()
            except ValueError as exc:
                outcome = "invalid_json"
                raise UpstreamError(upstream, f"{upstream} returned a non-JSON response") from exc
    finally:
        elapsed = time.perf_counter() - start
        observe_upstream(upstream, outcome, elapsed)
        logger.debug("upstream call finished", extra={"upstream": upstream, "outcome": outcome})
