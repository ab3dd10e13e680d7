"""Fetch the Rector rules overview markdown from GitHub."""

import logging
from collections.abc import Callable

import requests

from rectorrules.config import (
    DEFAULT_TIMEOUT,
    DEFAULT_USER_AGENT,
    RECTOR_RULES_URL,
    CatalogConfig,
)
from rectorrules.core import FetchError

logger = logging.getLogger(__name__)


def fetch_rules_markdown(
    url: str = RECTOR_RULES_URL,
    timeout: float = DEFAULT_TIMEOUT,
    user_agent: str = DEFAULT_USER_AGENT,
) -> str:
    """Fetch the rules markdown document.

    Args:
        url: Location of the raw markdown file
        timeout: Request timeout in seconds
        user_agent: User-Agent header value

    Returns:
        The markdown content

    Raises:
        FetchError: On timeout, connection failure or a non-2xx response
    """
    logger.debug("Fetching %s", url)
    try:
        response = requests.get(url, headers={"User-Agent": user_agent}, timeout=timeout)
    except requests.exceptions.Timeout as e:
        raise FetchError("Request timeout") from e
    except requests.exceptions.RequestException as e:
        raise FetchError(f"Fetch failed: {e}") from e

    if not response.ok:
        raise FetchError(f"HTTP {response.status_code}: {response.reason}")

    # GitHub raw serves text/plain without charset; don't let requests guess latin-1
    if response.encoding is None or response.encoding.lower() == 'iso-8859-1':
        response.encoding = "utf-8"

    return response.text


def make_fetcher(config: CatalogConfig) -> Callable[[], str]:
    """Bind a config to a zero-argument fetch function for the cache."""
    def fetch() -> str:
        return fetch_rules_markdown(
            url=config.source_url,
            timeout=config.timeout,
            user_agent=config.user_agent,
        )
    return fetch
