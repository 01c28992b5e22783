"""
JSON Reporter - machine-readable comparison output.
"""

import json
import logging

import click

from openwrt_pkgdiff.models.package import DiffResult

logger = logging.getLogger(__name__)


class JSONReporter:
    """Writes the whole DiffResult as a single JSON document to stdout."""

    def __init__(self, indent: int | None = 2):
        self.indent = indent

    def report(self, result: DiffResult, release: str, arch: str) -> None:
        payload = {"release": release, "arch": arch, **result.to_dict()}
        click.echo(json.dumps(payload, indent=self.indent))
        logger.debug(f"[JSON] Reported {len(result.differences)} differences")
