"""
Package Model - records parsed from OpenWRT indices and firmware manifests.

Both the upstream `Packages` indices and the downstream firmware manifest
are normalized into PackageRecord objects keyed by package name.
"""

from dataclasses import asdict, dataclass, field


@dataclass(frozen=True)
class PackageRecord:
    """
    A single package entry.

    Manifest entries only carry name and version; index stanzas fill in
    whatever extended fields they declare.
    """

    name: str
    version: str = ""
    depends: tuple[str, ...] = ()
    provides: str | None = None
    alternatives: tuple[str, ...] = ()
    license: str | None = None
    section: str | None = None
    cpe_id: str | None = None
    architecture: str | None = None
    installed_size: int | None = None
    filename: str | None = None
    size: int | None = None
    sha256sum: str | None = None
    description: str | None = None

    def to_dict(self) -> dict:
        """Serialize to JSON-compatible dictionary, dropping unset fields."""
        data = asdict(self)
        data["depends"] = list(self.depends)
        data["alternatives"] = list(self.alternatives)
        return {k: v for k, v in data.items() if v not in (None, [])}


# name -> record
PackageCollection = dict[str, PackageRecord]


@dataclass(frozen=True)
class Diff:
    """A package present on both sides whose version strings disagree."""

    name: str
    upstream_version: str
    downstream_version: str
    ordering: int = 0  # compare_versions(downstream, upstream)

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class DiffResult:
    """Output of a downstream/upstream comparison."""

    differences: list[Diff] = field(default_factory=list)
    downstream_only: list[PackageRecord] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "differences": [d.to_dict() for d in self.differences],
            "downstream_only": [p.to_dict() for p in self.downstream_only],
        }
