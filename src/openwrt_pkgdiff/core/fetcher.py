"""
Upstream Index Fetcher.

Downloads the `Packages` index of each configured feed with plain GET
requests, one after another, and merges them in order. There is no retry,
no cache and no parallelism: any failure aborts the run.
"""

import logging

import httpx

from openwrt_pkgdiff.core.differ import merge_collections
from openwrt_pkgdiff.core.errors import NetworkError, ParseError
from openwrt_pkgdiff.core.feeds import DEFAULT_ARCH, FeedConfig
from openwrt_pkgdiff.models.package import PackageCollection
from openwrt_pkgdiff.parsers.index import load_index

logger = logging.getLogger(__name__)

REQUEST_TIMEOUT = 30.0


async def fetch_index(client: httpx.AsyncClient, url: str) -> PackageCollection:
    """
    Fetch and parse a single package index.

    Raises:
        NetworkError: Transport failure or non-200 status.
        ParseError: The body is not a valid index.
    """
    logger.info(f"GET {url}")
    try:
        resp = await client.get(url)
    except httpx.HTTPError as e:
        raise NetworkError(url, reason=f"{type(e).__name__}: {e}") from e

    if resp.status_code != 200:
        raise NetworkError(url, status_code=resp.status_code)

    logger.debug(f"Downloaded {len(resp.content)} bytes from {url}")
    try:
        return load_index(resp.text)
    except ParseError as e:
        raise e.with_source(url)


async def fetch_upstream(
    config: FeedConfig,
    version: str,
    arch: str = DEFAULT_ARCH,
    feeds: tuple[str, ...] = (),
    client: httpx.AsyncClient | None = None,
) -> PackageCollection:
    """
    Fetch base, addon and any extra feeds sequentially and merge them.

    Later feeds win on name collision, so addon entries replace base entries.

    Args:
        config: URL templates to use.
        version: OpenWRT release.
        arch: Package architecture.
        feeds: Extra feed names.
        client: Optional pre-configured client (tests inject a mock transport).
    """
    urls = config.urls(version, arch, feeds)

    if client is None:
        async with httpx.AsyncClient(follow_redirects=True, timeout=REQUEST_TIMEOUT) as own_client:
            return await _fetch_all(own_client, urls)
    return await _fetch_all(client, urls)


async def _fetch_all(client: httpx.AsyncClient, urls: list[tuple[str, str]]) -> PackageCollection:
    collections = []
    for feed, url in urls:
        packages = await fetch_index(client, url)
        logger.info(f"Loaded {len(packages)} upstream {feed} packages")
        collections.append(packages)

    merged = merge_collections(*collections)
    logger.info(f"Merged upstream set: {len(merged)} packages")
    return merged
