"""
OpenWRT Version Comparison.

A heuristic ordering over OpenWRT package version strings. It understands
`[epoch:]major.minor.patch[-rN]` and date-stamped versions and falls back to
plain string ordering for everything else. This is not dpkg's algorithm and
is only approximate.
"""

import re
from datetime import date
from functools import cmp_to_key

SEMVER_PATTERN = re.compile(r"^(?:(\d+):)?(\d+)\.(\d+)\.(\d+)(?:-r(\d+))?$")
DATE_PATTERN = re.compile(r"(\d{4})-(\d{2})-(\d{2})")


def _cmp(a, b) -> int:
    return (a > b) - (a < b)


def _parse_date(version: str) -> date | None:
    """Return the first YYYY-MM-DD date embedded in the version, if valid."""
    match = DATE_PATTERN.search(version)
    if not match:
        return None
    try:
        return date(*(int(part) for part in match.groups()))
    except ValueError:
        return None


def _compare_semver(m1: re.Match, m2: re.Match) -> int:
    epoch1, epoch2 = m1.group(1), m2.group(1)
    # An absent epoch is not treated as 0; the step is skipped.
    if epoch1 is not None and epoch2 is not None:
        result = _cmp(int(epoch1), int(epoch2))
        if result:
            return result

    for i in (2, 3, 4):
        result = _cmp(int(m1.group(i)), int(m2.group(i)))
        if result:
            return result

    rev1, rev2 = m1.group(5), m2.group(5)
    if rev1 is not None and rev2 is not None:
        return _cmp(int(rev1), int(rev2))
    # One-sided revision: the side carrying it is newer.
    if rev1 is not None:
        return 1
    if rev2 is not None:
        return -1
    return 0


def compare_versions(v1: str, v2: str) -> int:
    """
    Compare two OpenWRT version strings.

    Args:
        v1: Left-hand version.
        v2: Right-hand version.

    Returns:
        -1 if v1 is older than v2, 1 if newer, 0 if they are considered equal.
    """
    if v1 == v2:
        return 0

    m1, m2 = SEMVER_PATTERN.match(v1), SEMVER_PATTERN.match(v2)
    if m1 and m2:
        return _compare_semver(m1, m2)

    d1, d2 = _parse_date(v1), _parse_date(v2)
    if d1 is not None and d2 is not None:
        return _cmp(d1, d2)

    return _cmp(v1, v2)


version_key = cmp_to_key(compare_versions)
