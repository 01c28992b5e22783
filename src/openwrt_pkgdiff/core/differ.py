"""
Package set comparison.

Answers "what does downstream have that disagrees with, or is missing from,
upstream". Packages only present upstream are never reported.
"""

import logging

from openwrt_pkgdiff.core.version import compare_versions
from openwrt_pkgdiff.models.package import Diff, DiffResult, PackageCollection

logger = logging.getLogger(__name__)


def merge_collections(*collections: PackageCollection) -> PackageCollection:
    """Merge collections into a new one; later collections win on name collision."""
    merged: PackageCollection = {}
    for collection in collections:
        merged.update(collection)
    return merged


def diff_packages(downstream: PackageCollection, upstream: PackageCollection) -> DiffResult:
    """
    Compare downstream packages against upstream.

    Membership in the result is decided by plain version string inequality.
    The comparator verdict is recorded on each Diff for display only.

    Args:
        downstream: Packages from the firmware manifest.
        upstream: Packages from the merged upstream indices.

    Returns:
        DiffResult in downstream order.
    """
    result = DiffResult()
    for name, record in downstream.items():
        other = upstream.get(name)
        if other is None:
            result.downstream_only.append(record)
            continue
        if record.version != other.version:
            result.differences.append(
                Diff(
                    name=name,
                    upstream_version=other.version,
                    downstream_version=record.version,
                    ordering=compare_versions(record.version, other.version),
                )
            )

    logger.info(
        f"Compared {len(downstream)} downstream packages: "
        f"{len(result.differences)} differ, {len(result.downstream_only)} downstream-only"
    )
    return result
