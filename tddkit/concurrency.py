"""Check many websites at once."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from concurrent.futures import ThreadPoolExecutor

WebsiteChecker = Callable[[str], bool]


def check_websites(checker: WebsiteChecker, urls: Iterable[str]) -> dict[str, bool]:
    """Run ``checker`` on every URL concurrently and map each URL to its result."""
    url_list = list(urls)
    if not url_list:
        return {}
    with ThreadPoolExecutor(max_workers=len(url_list)) as pool:
        outcomes = list(pool.map(checker, url_list))
    return dict(zip(url_list, outcomes))