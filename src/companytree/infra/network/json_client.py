from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import requests

from companytree.domain.errors import DecodeError, NetworkError
from companytree.infra.network.common import DEFAULT_TIMEOUT, USER_AGENT

logger = logging.getLogger(__name__)


def fetch_records(url: str, *, timeout: Optional[float] = DEFAULT_TIMEOUT) -> List[Dict[str, Any]]:
    """
    Fetch a JSON array of records with a single blocking GET.

    The HTTP status is not checked: any response whose body decodes to a
    JSON array is accepted.

    Raises:
        NetworkError: On any transport failure, timeouts included.
        DecodeError: If the body is not JSON or its root is not an array.
    """
    headers = {"User-Agent": USER_AGENT, "Accept": "application/json"}
    logger.debug(f"Network: GET {url} (timeout={timeout})")

    try:
        response = requests.get(url, headers=headers, timeout=timeout)
    except requests.exceptions.Timeout as e:
        logger.warning(f"Network: Request to {url} timed out after {timeout}s.")
        raise NetworkError(f"Request timed out: {e}", url=url) from e
    except requests.exceptions.RequestException as e:
        raise NetworkError(str(e), url=url) from e

    if not response.ok:
        logger.warning(f"Network: {url} answered with HTTP {response.status_code}.")

    try:
        data = response.json()
    except ValueError as e:
        raise DecodeError(f"Error decoding JSON response from {url}: {e}", url=url) from e

    if not isinstance(data, list):
        raise DecodeError(
            f"Expected a JSON array from {url}, received {type(data).__name__}.",
            url=url,
        )

    size_kb = len(response.content) / 1024
    logger.info(f"Network: {len(data)} records received from {url} ({size_kb:.1f} KB).")
    return data
