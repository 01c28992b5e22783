"""
Example: Compare a firmware manifest against an OpenWRT release.

Usage:
    python examples/diff_release.py 23.05.5 path/to/firmware.manifest
"""

import asyncio
import sys

from openwrt_pkgdiff.core.differ import diff_packages
from openwrt_pkgdiff.core.feeds import FeedConfig
from openwrt_pkgdiff.core.fetcher import fetch_upstream
from openwrt_pkgdiff.parsers.manifest import load_manifest
from openwrt_pkgdiff.reporters import TableReporter


async def main(release: str, manifest: str):
    # Base + addon feeds plus LuCI
    upstream = await fetch_upstream(FeedConfig.default(), release, "x86_64", feeds=("luci",))
    downstream = load_manifest(manifest)

    result = diff_packages(downstream, upstream)
    TableReporter().report(result, release, "x86_64")

    print(f"\n{len(result.differences)} differences, {len(result.downstream_only)} downstream-only packages")


if __name__ == "__main__":
    asyncio.run(main(sys.argv[1], sys.argv[2]))
