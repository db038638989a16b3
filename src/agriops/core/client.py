"""AgriOps record-store client - core functions only.

The record store is an action-dispatch endpoint: every request is a JSON
POST of the form ``{"action": "<name>", ...params}`` and every response is
``{"ok": true, "data": ...}`` or ``{"ok": false, "error": "..."}``.
"""

import logging

import httpx
from tenacity import (
    before_sleep_log,
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential_jitter,
)

from agriops.core.config import settings

logger = logging.getLogger(__name__)

PADDOCKS_ENDPOINT = "/api/paddocks"

# =============================================================================
# Retry Configuration
# =============================================================================

MAX_RETRIES = 3
MIN_WAIT_SECONDS = 1
MAX_WAIT_SECONDS = 10


# =============================================================================
# Exceptions
# =============================================================================


class RecordStoreError(Exception):
    """Raised when the record store answers with ``ok: false``."""

    def __init__(self, action: str, error: str | None, status_code: int | None = None):
        self.action = action
        self.error = error or "Unknown error"
        self.status_code = status_code
        super().__init__(f"{action} failed: {self.error}")


class RetryableError(Exception):
    """Transient error that should be retried (timeouts, connection errors, 5xx)."""

    pass


class RecordStoreAPIError(Exception):
    """Non-retryable error from the record store."""

    pass


# =============================================================================
# Client Functions
# =============================================================================


def _headers() -> dict[str, str]:
    headers = {"Content-Type": "application/json"}
    if settings.agriops_api_key:
        headers["Authorization"] = f"Bearer {settings.agriops_api_key}"
    return headers


async def call_action(action: str, endpoint: str = PADDOCKS_ENDPOINT, **params) -> object:
    """Execute a single record-store action.

    This is the low-level function that makes a single request without retry.
    For most use cases, prefer `call_action_with_retry()` which handles transient errors.

    Args:
        action: Action name (e.g. "listWithCounts", "upsertSeeding")
        endpoint: Path of the action endpoint
        **params: Action parameters, sent alongside the action name

    Returns:
        The ``data`` member of the response

    Raises:
        RecordStoreError: If the response has ``ok: false``
        httpx.HTTPStatusError: If the HTTP request fails without a JSON error body
    """
    payload = {"action": action, **params}

    async with httpx.AsyncClient(base_url=settings.agriops_api_url) as client:
        response = await client.post(
            endpoint,
            headers=_headers(),
            json=payload,
            timeout=settings.request_timeout_seconds,
        )

        try:
            result = response.json()
        except ValueError:
            result = None

        # The endpoint reports validation failures as 400 with a JSON error body
        if isinstance(result, dict) and result.get("ok") is False and response.status_code < 500:
            raise RecordStoreError(action, result.get("error"), response.status_code)

        response.raise_for_status()

        if not isinstance(result, dict):
            raise RecordStoreError(action, f"Bad JSON from {endpoint}: {response.text[:200] or '<empty>'}")
        if not result.get("ok"):
            raise RecordStoreError(action, result.get("error"), response.status_code)

        return result.get("data")


@retry(
    retry=retry_if_exception_type(RetryableError),
    stop=stop_after_attempt(MAX_RETRIES),
    wait=wait_exponential_jitter(initial=MIN_WAIT_SECONDS, max=MAX_WAIT_SECONDS, jitter=2),
    before_sleep=before_sleep_log(logger, logging.WARNING),
    reraise=True,
)
async def call_action_with_retry(action: str, endpoint: str = PADDOCKS_ENDPOINT, **params) -> object:
    """Execute a record-store action with automatic retry on transient errors.

    Retries on:
    - Timeouts
    - Connection errors
    - HTTP 5xx errors

    After MAX_RETRIES failures, the last RetryableError is re-raised.

    Args:
        action: Action name
        endpoint: Path of the action endpoint
        **params: Action parameters

    Returns:
        The ``data`` member of the response

    Raises:
        RecordStoreAPIError: If a non-retryable error occurs
        RetryableError: If all retries fail
    """
    try:
        return await call_action(action, endpoint, **params)
    except httpx.TimeoutException as e:
        raise RetryableError(f"Request timed out: {e}") from e
    except httpx.ConnectError as e:
        raise RetryableError(f"Connection failed: {e}") from e
    except httpx.HTTPStatusError as e:
        try:
            body = e.response.text
        except Exception:
            body = "(unable to read response body)"

        if e.response.status_code >= 500:
            # Server error - retry with backoff
            raise RetryableError(f"HTTP {e.response.status_code}: {body}") from e
        # Client error (4xx) - don't retry, include full response
        raise RecordStoreAPIError(f"HTTP {e.response.status_code}: {body}") from e
    except RecordStoreError as e:
        raise RecordStoreAPIError(str(e)) from e
