"""
openwrt-pkgdiff - Compare OpenWRT firmware manifests against upstream package indices.

Fetches the official `Packages` indices of an OpenWRT release, parses the
package manifest of a locally built firmware, and reports the packages whose
versions disagree or which upstream does not ship at all.
"""

__version__ = "1.0.0"


def __getattr__(name: str):
    """Lazy import for the public helpers."""
    if name == "compare_versions":
        from openwrt_pkgdiff.core.version import compare_versions

        return compare_versions
    if name == "diff_packages":
        from openwrt_pkgdiff.core.differ import diff_packages

        return diff_packages
    if name == "PackageRecord":
        from openwrt_pkgdiff.models.package import PackageRecord

        return PackageRecord
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = ["compare_versions", "diff_packages", "PackageRecord", "__version__"]
