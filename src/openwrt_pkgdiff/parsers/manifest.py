"""
Firmware Manifest Parser.

Reads the `<name> - <version>` listing produced by an OpenWRT image build.
Names or versions that themselves contain " - " are not supported.
"""

import sys
from collections.abc import Iterable
from pathlib import Path

from openwrt_pkgdiff.core.errors import InvalidManifestLine, ManifestIOError
from openwrt_pkgdiff.models.package import PackageCollection, PackageRecord

SEPARATOR = " - "


def parse_manifest(content: str | bytes | Iterable[str]) -> PackageCollection:
    """
    Parse manifest content into a name-keyed collection.

    Args:
        content: Manifest text, bytes, or an iterable of lines.

    Returns:
        Collection of PackageRecord; the last duplicate name wins.

    Raises:
        InvalidManifestLine: A non-blank line does not split into exactly two parts.
    """
    if isinstance(content, bytes):
        content = content.decode("utf-8", errors="replace")
    if isinstance(content, str):
        content = content.splitlines()

    packages: PackageCollection = {}
    for line_number, raw in enumerate(content, start=1):
        line = raw.strip()
        if not line:
            continue
        parts = line.split(SEPARATOR)
        if len(parts) != 2:
            raise InvalidManifestLine("invalid manifest line", line=line, line_number=line_number)
        name, version = parts
        packages[name] = PackageRecord(name=name, version=version)
    return packages


def load_manifest(path: str | Path | None) -> PackageCollection:
    """
    Load a manifest from a file, or from stdin when path is None or "-".

    Raises:
        ManifestIOError: The file cannot be opened or read.
        InvalidManifestLine: See parse_manifest.
    """
    if path is None or str(path) == "-":
        try:
            data = sys.stdin.buffer.read()
        except OSError as e:
            raise ManifestIOError("<stdin>", e.strerror or str(e)) from e
        return parse_manifest(data)

    try:
        text = Path(path).read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        raise ManifestIOError(str(path), e.strerror or str(e)) from e
    try:
        return parse_manifest(text)
    except InvalidManifestLine as e:
        raise e.with_source(str(path))
