"""Output formats for comparison results."""

from collections.abc import Callable

from openwrt_pkgdiff.reporters.base import Reporter
from openwrt_pkgdiff.reporters.json_report import JSONReporter
from openwrt_pkgdiff.reporters.table import TableReporter


def get_reporter(format_name: str, pause: Callable[[], None] | None = None) -> Reporter:
    """Factory function to create a reporter by format name."""
    match format_name:
        case "table":
            return TableReporter(pause=pause)
        case "json":
            return JSONReporter()
        case _:
            raise ValueError(f"Unknown output format: {format_name!r}. Use 'table' or 'json'.")


__all__ = ["Reporter", "TableReporter", "JSONReporter", "get_reporter"]
