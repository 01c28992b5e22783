"""
Table Reporter - column-aligned rich tables.

Prints the version differences first and the downstream-only packages
second, with an optional pause in between so the first table can be read
before the second scrolls it away.
"""

import logging
from collections.abc import Callable

from rich.console import Console
from rich.table import Table

from openwrt_pkgdiff.models.package import DiffResult

logger = logging.getLogger(__name__)

NEWER_LABELS = {1: "downstream", -1: "upstream", 0: "="}


class TableReporter:
    """
    Renders a DiffResult as two rich tables.

    Args:
        console: Target console (defaults to stdout).
        pause: Called between the two tables; None disables the pause.
    """

    def __init__(self, console: Console | None = None, pause: Callable[[], None] | None = None):
        self.console = console or Console()
        self.pause = pause

    def report(self, result: DiffResult, release: str, arch: str) -> None:
        self.console.print(self._differences_table(result, release, arch))
        if not result.differences:
            self.console.print("[green]No version differences.[/green]")

        if self.pause is not None:
            self.pause()

        self.console.print(self._downstream_only_table(result))
        if not result.downstream_only:
            self.console.print("[green]No downstream-only packages.[/green]")

        logger.debug(f"[Table] Rendered {len(result.differences)} differences")

    def _differences_table(self, result: DiffResult, release: str, arch: str) -> Table:
        table = Table(title=f"Version differences ({release}, {arch})", title_justify="left")
        table.add_column("Name", style="bold")
        table.add_column("Upstream", style="cyan")
        table.add_column("Downstream", style="magenta")
        table.add_column("Newer")
        for diff in result.differences:
            table.add_row(diff.name, diff.upstream_version, diff.downstream_version, NEWER_LABELS[diff.ordering])
        return table

    def _downstream_only_table(self, result: DiffResult) -> Table:
        table = Table(title="Downstream-only packages", title_justify="left")
        table.add_column("Name", style="bold")
        table.add_column("Version", style="magenta")
        for record in result.downstream_only:
            table.add_row(record.name, record.version)
        return table
