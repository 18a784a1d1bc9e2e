"""HTTP fetch of the raw stats payload."""

import logging

import httpx

from server_stats_monitor.errors import FetchError

logger = logging.getLogger(__name__)


def fetch_stats(
    url: str,
    timeout: float = 10.0,
    client: httpx.Client | None = None,
) -> bytes:
    """Fetch the raw stats payload from ``url``.

    Args:
        url: Stats endpoint.
        timeout: Request timeout in seconds.
        client: Optional client to send the request with.

    Returns:
        The response body.

    Raises:
        FetchError: If the request cannot be made or the response is not 200.
    """
    logger.info(f"Fetching server stats from {url}")
    try:
        if client is not None:
            response = client.get(url, timeout=timeout)
        else:
            response = httpx.get(url, timeout=timeout)
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        raise FetchError(url, f"request to {url} failed: {e}") from e

    if response.status_code != httpx.codes.OK:
        raise FetchError(
            url,
            f"received non-200 response: {response.status_code}",
            status_code=response.status_code,
        )

    return response.content
