"""
openwrt-pkgdiff CLI - compare a firmware manifest against upstream OpenWRT indices.

Usage:
    openwrt-pkgdiff diff --release 23.05.5 manifest.txt
    cat manifest.txt | openwrt-pkgdiff diff --release 23.05.5 --arch aarch64_cortex-a53 --no-pause
    openwrt-pkgdiff diff -V 23.05.5 --feed luci --format json manifest.txt
    openwrt-pkgdiff compare 1.0.0-r1 1.0.0-r2
    openwrt-pkgdiff urls --release 23.05.5
"""

import asyncio
import logging
import sys

import click

from openwrt_pkgdiff.core.feeds import DEFAULT_ARCH, EXTRA_FEEDS

logger = logging.getLogger(__name__)


def _configure_logging(verbose: bool) -> None:
    log_level = logging.INFO if verbose else logging.WARNING
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def _wait_for_enter() -> None:
    """Read one line from stdin between the two tables, on a terminal only."""
    if not (sys.stdin.isatty() and sys.stdout.isatty()):
        return
    click.prompt(
        "Press Enter to show downstream-only packages...",
        default="",
        show_default=False,
        prompt_suffix="",
    )


def _build_config(fixed_x86_64: bool, base_url_template: str | None, addon_url_template: str | None):
    from openwrt_pkgdiff.core.feeds import FeedConfig

    config = FeedConfig.fixed_x86_64() if fixed_x86_64 else FeedConfig.default()
    return config.with_overrides(base_template=base_url_template, addon_template=addon_url_template)


def _feed_options(func):
    """Options shared by every command that builds upstream URLs."""
    options = [
        click.option(
            "--release",
            "--version",
            "-V",
            "release",
            required=True,
            help="OpenWRT release to compare against, e.g. 23.05.5.",
        ),
        click.option(
            "--arch",
            "-a",
            default=DEFAULT_ARCH,
            show_default=True,
            envvar="OPENWRT_PKGDIFF_ARCH",
            help="Package architecture of the upstream indices.",
        ),
        click.option(
            "--fixed-x86-64",
            is_flag=True,
            help="Use URL templates with x86_64 hard-coded, ignoring --arch.",
        ),
        click.option(
            "--base-url-template",
            envvar="OPENWRT_PKGDIFF_BASE_URL",
            default=None,
            help="Override the base index URL template ({version} and {arch} placeholders).",
        ),
        click.option(
            "--addon-url-template",
            envvar="OPENWRT_PKGDIFF_ADDON_URL",
            default=None,
            help="Override the addon index URL template ({version} and {arch} placeholders).",
        ),
        click.option(
            "--feed",
            "-f",
            "feeds",
            multiple=True,
            type=click.Choice(list(EXTRA_FEEDS)),
            help="Extra feed to fetch after base and addon (repeatable).",
        ),
    ]
    for option in reversed(options):
        func = option(func)
    return func


@click.group()
@click.version_option(package_name="openwrt-pkgdiff")
def cli():
    """openwrt-pkgdiff - Compare firmware packages against upstream OpenWRT releases."""
    pass


@cli.command()
@click.argument("manifest", required=False, type=click.Path(dir_okay=False, allow_dash=True))
@_feed_options
@click.option(
    "--format",
    "fmt",
    type=click.Choice(["table", "json"]),
    default="table",
    help="Output format.",
)
@click.option("--no-pause", is_flag=True, help="Don't pause between the two tables.")
@click.option("--verbose", "-v", is_flag=True, help="Log constructed URLs and package counts.")
def diff(manifest, release, arch, fixed_x86_64, base_url_template, addon_url_template, feeds, fmt, no_pause, verbose):
    """Show packages in MANIFEST whose versions differ from upstream.

    MANIFEST is a '<name> - <version>' listing; omit it or pass '-' to read stdin.
    """
    from rich.console import Console

    from openwrt_pkgdiff.core.differ import diff_packages
    from openwrt_pkgdiff.core.errors import FlagError, PkgDiffError
    from openwrt_pkgdiff.core.fetcher import fetch_upstream
    from openwrt_pkgdiff.parsers.manifest import load_manifest
    from openwrt_pkgdiff.reporters import get_reporter

    _configure_logging(verbose)
    config = _build_config(fixed_x86_64, base_url_template, addon_url_template)
    if fixed_x86_64:
        arch = DEFAULT_ARCH

    try:
        with Console(stderr=True).status("[bold cyan]Fetching upstream indices...[/bold cyan]"):
            upstream = asyncio.run(fetch_upstream(config, release, arch, tuple(feeds)))

        downstream = load_manifest(manifest)
        logger.info(f"Loaded {len(downstream)} downstream packages")

        result = diff_packages(downstream, upstream)
    except FlagError as e:
        raise click.UsageError(str(e)) from e
    except PkgDiffError as e:
        raise click.ClickException(str(e)) from e

    pause = None if no_pause else _wait_for_enter
    reporter = get_reporter(fmt, pause=pause)
    reporter.report(result, release, arch)


@cli.command()
@click.argument("version1")
@click.argument("version2")
def compare(version1, version2):
    """Compare two OpenWRT version strings.

    Prints VERSION1 <, = or > VERSION2.
    """
    from openwrt_pkgdiff.core.version import compare_versions

    symbol = {-1: "<", 0: "=", 1: ">"}[compare_versions(version1, version2)]
    click.echo(f"{version1} {symbol} {version2}")


@cli.command()
@_feed_options
def urls(release, arch, fixed_x86_64, base_url_template, addon_url_template, feeds):
    """Print the upstream index URLs that diff would fetch."""
    from openwrt_pkgdiff.core.errors import FlagError

    config = _build_config(fixed_x86_64, base_url_template, addon_url_template)
    if fixed_x86_64:
        arch = DEFAULT_ARCH
    try:
        for feed, url in config.urls(release, arch, tuple(feeds)):
            click.echo(f"{feed}\t{url}")
    except FlagError as e:
        raise click.UsageError(str(e)) from e


if __name__ == "__main__":
    cli()
