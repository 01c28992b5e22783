"""
Reporter Protocol - Base interface for all output formats.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from openwrt_pkgdiff.models.package import DiffResult


@runtime_checkable
class Reporter(Protocol):
    """
    Protocol that all reporters must implement.

    Reporters receive the DiffResult of a run and write it to the terminal
    in their respective format (rich tables, JSON, etc.).
    """

    def report(self, result: DiffResult, release: str, arch: str) -> None:
        """Write the comparison result."""
        ...
