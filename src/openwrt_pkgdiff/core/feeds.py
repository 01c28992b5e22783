"""
OpenWRT Feed URL Templates.

Builds the download URLs of the `Packages` index for each feed of a release.
Templates are plain `str.format` strings with `{version}` and `{arch}`
placeholders, so a test or a mirror can inject its own endpoints.
"""

from dataclasses import dataclass

from openwrt_pkgdiff.core.errors import FlagError

DOWNLOADS_BASE_URL = "https://downloads.openwrt.org/releases/{version}/packages"
DEFAULT_ARCH = "x86_64"

BASE_TEMPLATE = f"{DOWNLOADS_BASE_URL}/{{arch}}/base/Packages"
ADDON_TEMPLATE = f"{DOWNLOADS_BASE_URL}/{{arch}}/packages/Packages"

# Optional feeds, fetched after base and addon when requested
EXTRA_FEEDS = ("luci", "routing", "telephony")


def _feed_template(feed: str, arch: str = "{arch}") -> str:
    return f"{DOWNLOADS_BASE_URL}/{arch}/{feed}/Packages"


@dataclass(frozen=True)
class FeedConfig:
    """Named URL templates for the upstream indices."""

    base_template: str = BASE_TEMPLATE
    addon_template: str = ADDON_TEMPLATE
    # (feed name, template) pairs
    extra_templates: tuple[tuple[str, str], ...] = tuple((feed, _feed_template(feed)) for feed in EXTRA_FEEDS)

    @classmethod
    def default(cls) -> "FeedConfig":
        """Templates parameterized by architecture."""
        return cls()

    @classmethod
    def fixed_x86_64(cls) -> "FeedConfig":
        """Templates with the x86_64 package architecture hard-coded."""
        return cls(
            base_template=_feed_template("base", DEFAULT_ARCH),
            addon_template=_feed_template("packages", DEFAULT_ARCH),
            extra_templates=tuple((feed, _feed_template(feed, DEFAULT_ARCH)) for feed in EXTRA_FEEDS),
        )

    def with_overrides(self, base_template: str | None = None, addon_template: str | None = None) -> "FeedConfig":
        """Return a copy with the base and/or addon template replaced."""
        return FeedConfig(
            base_template=base_template or self.base_template,
            addon_template=addon_template or self.addon_template,
            extra_templates=self.extra_templates,
        )

    def urls(self, version: str, arch: str = DEFAULT_ARCH, feeds: tuple[str, ...] = ()) -> list[tuple[str, str]]:
        """
        Build the index URLs to fetch, in merge order.

        Args:
            version: OpenWRT release, e.g. '23.05.5'.
            arch: Package architecture, e.g. 'x86_64'.
            feeds: Extra feed names to append after base and addon.

        Returns:
            List of (feed name, URL), base first and addon second.
        """
        if not version:
            raise FlagError("release version cannot be empty")
        if not arch:
            raise FlagError("architecture cannot be empty")

        extras = dict(self.extra_templates)
        templates = [("base", self.base_template), ("addon", self.addon_template)]
        for feed in feeds:
            if feed not in extras:
                raise FlagError(f"unknown feed {feed!r}; choose from {', '.join(sorted(extras))}")
            templates.append((feed, extras[feed]))

        try:
            return [(name, template.format(version=version, arch=arch)) for name, template in templates]
        except (KeyError, IndexError, ValueError) as e:
            raise FlagError(f"invalid URL template: {e}") from e
