"""HTTP access for proposal sources."""

import logging
from typing import Optional, Dict, Any
import httpx

from proposal_analyzer.core.config import Settings
from proposal_analyzer.core.exceptions import FetchFailed, UpstreamDataMissing

logger = logging.getLogger(__name__)


async def fetch_html(
    url: str,
    settings: Settings,
    extra_headers: Optional[Dict[str, str]] = None
) -> str:
    """
    Fetch a proposal page.

    Args:
        url: Page URL
        settings: Application settings (timeout, user agent)
        extra_headers: Headers added on top of the browser defaults

    Returns:
        Response body as text

    Raises:
        FetchFailed: On HTTP status or transport errors
    """
    headers = {
        "Accept": "text/html",
        "User-Agent": settings.HTTP_USER_AGENT,
        "Cache-Control": "no-cache",
    }
    if extra_headers:
        headers.update(extra_headers)

    try:
        async with httpx.AsyncClient(
            timeout=settings.HTTP_TIMEOUT,
            follow_redirects=True
        ) as client:
            response = await client.get(url, headers=headers)
            response.raise_for_status()
    except httpx.HTTPError as e:
        raise _fetch_failed(e) from e

    html = response.text
    logger.info(f"Fetched {url}: {len(html)} chars")
    return html


async def post_json(
    url: str,
    payload: Dict[str, Any],
    settings: Settings,
    headers: Optional[Dict[str, str]] = None
) -> Dict[str, Any]:
    """
    POST a JSON payload and decode the JSON reply.

    Raises:
        FetchFailed: On HTTP status or transport errors
        UpstreamDataMissing: When the reply is not a JSON object
    """
    request_headers = {
        "Content-Type": "application/json",
        "Accept": "application/json",
    }
    if headers:
        request_headers.update(headers)

    try:
        async with httpx.AsyncClient(timeout=settings.HTTP_TIMEOUT) as client:
            response = await client.post(url, json=payload, headers=request_headers)
            response.raise_for_status()
    except httpx.HTTPError as e:
        raise _fetch_failed(e) from e

    try:
        data = response.json()
    except ValueError as e:
        raise UpstreamDataMissing(f"Non-JSON response from {url}: {e}") from e

    if not isinstance(data, dict):
        raise UpstreamDataMissing(f"Unexpected response from {url}: {data!r}")
    return data


def _fetch_failed(error: httpx.HTTPError) -> FetchFailed:
    """Normalize an httpx error, keeping the remote status and message when present."""
    if isinstance(error, httpx.HTTPStatusError):
        status = error.response.status_code
        message = _remote_message(error.response) or error.response.reason_phrase or str(error)
        logger.error(f"Proposal fetch failed with HTTP {status}: {message}")
        return FetchFailed(
            f"Failed to fetch proposal content ({status}): {message}",
            upstream_status=status
        )

    logger.error(f"Proposal fetch failed: {error!r}")
    return FetchFailed(f"Failed to fetch proposal content: {str(error) or type(error).__name__}")


def _remote_message(response: httpx.Response) -> Optional[str]:
    try:
        data = response.json()
    except ValueError:
        return None
    if isinstance(data, dict) and isinstance(data.get("message"), str):
        return data["message"]
    return None
