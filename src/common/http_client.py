"""Shared HTTP helpers used by the remote artifact resolver.

Encapsulates common request/timeout error handling so callers avoid
duplicating try/except blocks.
"""
from __future__ import annotations

import logging
import time
from typing import Any, Tuple

import requests

from constants import Constants
from common.logging_utils import extra_context, is_debug_enabled, safe_url, Timer

logger = logging.getLogger(__name__)


def safe_get(url: str, *, context: str, **kwargs: Any) -> requests.Response:
    """Perform a GET request with consistent DEBUG traces.

    Transport errors are traced and re-raised; callers decide whether they
    are fatal.

    Args:
        url: Target URL.
        context: Human-readable source tag for logs (e.g., repository id).
        **kwargs: Passed through to requests.get.

    Returns:
        requests.Response: The HTTP response object.
    """
    safe_target = safe_url(url)
    with Timer() as t:
        if is_debug_enabled(logger):
            logger.debug(
                "HTTP request",
                extra=extra_context(
                    event="http_request",
                    component="http_client",
                    action="GET",
                    target=safe_target,
                    context=context
                )
            )
        try:
            res = requests.get(url, timeout=Constants.REQUEST_TIMEOUT, **kwargs)
        except requests.Timeout:
            logger.debug(
                "%s request timed out after %s seconds",
                context,
                Constants.REQUEST_TIMEOUT,
                extra=extra_context(
                    event="http_exception",
                    component="http_client",
                    action="GET",
                    outcome="timeout",
                    target=safe_target
                )
            )
            raise
        except requests.RequestException as exc:  # includes ConnectionError
            logger.debug(
                "%s connection error: %s",
                context,
                exc,
                extra=extra_context(
                    event="http_exception",
                    component="http_client",
                    action="GET",
                    outcome="request_exception",
                    target=safe_target
                )
            )
            raise
        if is_debug_enabled(logger):
            logger.debug(
                "HTTP response ok",
                extra=extra_context(
                    event="http_response",
                    component="http_client",
                    action="GET",
                    outcome="success",
                    status_code=res.status_code,
                    duration_ms=t.duration_ms(),
                    target=safe_target,
                    context=context
                )
            )
        return res


def fetch_bytes(url: str, *, context: str, **kwargs: Any) -> Tuple[int, bytes]:
    """Download a URL with retries and exponential backoff.

    Server errors (5xx) and transport errors are retried up to
    ``Constants.HTTP_RETRY_MAX`` attempts; any other status is returned as is.

    Returns:
        Tuple of (status_code, body). ``(0, b"")`` when every attempt failed
        at the transport level.
    """
    safe_target = safe_url(url)
    status_code = 0
    for attempt in range(Constants.HTTP_RETRY_MAX):
        if attempt:
            time.sleep(Constants.HTTP_RETRY_BASE_DELAY_SEC * (2 ** (attempt - 1)))
        try:
            response = safe_get(url, context=context, **kwargs)
        except requests.RequestException:
            if is_debug_enabled(logger):
                logger.debug(
                    "HTTP request exception",
                    extra=extra_context(
                        event="http_exception",
                        component="http_client",
                        action="GET",
                        outcome="request_exception",
                        attempt=attempt + 1,
                        target=safe_target
                    )
                )
            continue
        status_code = response.status_code
        if status_code < 500:
            return status_code, response.content
        if is_debug_enabled(logger):
            logger.debug(
                "HTTP server error, retrying",
                extra=extra_context(
                    event="http_response",
                    component="http_client",
                    action="GET",
                    outcome="server_error",
                    status_code=status_code,
                    attempt=attempt + 1,
                    target=safe_target
                )
            )
    return status_code, b""
