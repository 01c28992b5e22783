"""
OpenWRT Package Index Parser.

Parses the Debian-control-like `Packages` files published for each OpenWRT
feed. A stanza is a run of `Key: Value` lines terminated by a blank line or
by the next `Package:` line. Parsing is strict: the first malformed line
aborts the whole stream.
"""

from collections.abc import Iterable

from openwrt_pkgdiff.core.errors import MalformedField, MalformedLine
from openwrt_pkgdiff.models.package import PackageCollection, PackageRecord

# Index key -> PackageRecord attribute
FIELD_MAP = {
    "Package": "name",
    "Version": "version",
    "Depends": "depends",
    "Provides": "provides",
    "Alternatives": "alternatives",
    "License": "license",
    "Section": "section",
    "CPE-ID": "cpe_id",
    "Architecture": "architecture",
    "Installed-Size": "installed_size",
    "Filename": "filename",
    "Size": "size",
    "SHA256sum": "sha256sum",
    "Description": "description",
}

LIST_FIELDS = {"Depends", "Alternatives"}
INT_FIELDS = {"Installed-Size", "Size"}


def _split_lines(content: str | bytes | Iterable[str]) -> Iterable[str]:
    if isinstance(content, bytes):
        content = content.decode("utf-8", errors="replace")
    if isinstance(content, str):
        return content.splitlines()
    return (line.rstrip("\r\n") for line in content)


def _split_list(value: str) -> tuple[str, ...]:
    return tuple(item.strip() for item in value.split(", ") if item.strip())


class _Stanza:
    """Accumulates the fields of one stanza before it becomes a record."""

    def __init__(self, line_number: int):
        self.line_number = line_number
        self.first_line = ""
        self.fields: dict[str, tuple[str, int]] = {}
        self.last_key: str | None = None

    def add(self, key: str, value: str, line_number: int, line: str) -> None:
        if not self.fields:
            self.first_line = line
            self.line_number = line_number
        self.fields[key] = (value, line_number)
        self.last_key = key

    def extend(self, text: str) -> None:
        value, line_number = self.fields[self.last_key]
        self.fields[self.last_key] = (f"{value}\n{text}" if value else text, line_number)

    def build(self) -> PackageRecord:
        name, _ = self.fields.get("Package", ("", 0))
        if not name:
            raise MalformedLine("stanza has no Package name", line=self.first_line, line_number=self.line_number)

        kwargs: dict = {}
        for key, (value, line_number) in self.fields.items():
            attr = FIELD_MAP.get(key)
            if attr is None:
                continue
            if key in LIST_FIELDS:
                kwargs[attr] = _split_list(value)
            elif key in INT_FIELDS:
                try:
                    kwargs[attr] = int(value)
                except ValueError:
                    raise MalformedField(key, value, line_number=line_number) from None
            else:
                kwargs[attr] = value
        return PackageRecord(**kwargs)


def parse_index(content: str | bytes | Iterable[str]) -> list[PackageRecord]:
    """
    Parse package index content into records, in order of appearance.

    Args:
        content: Raw index text, bytes, or an iterable of lines.

    Returns:
        List of PackageRecord. Empty input yields an empty list.

    Raises:
        MalformedLine: A line is not a `Key: Value` pair, or a stanza has no name.
        MalformedField: `Installed-Size` or `Size` is not an integer.
    """
    records: list[PackageRecord] = []
    stanza: _Stanza | None = None

    def flush() -> None:
        nonlocal stanza
        if stanza is not None and stanza.fields:
            records.append(stanza.build())
        stanza = None

    for line_number, line in enumerate(_split_lines(content), start=1):
        if not line.strip():
            flush()
            continue

        # Folded continuation of the previous field (multi-line Description)
        if line[0] in " \t":
            if stanza is None or stanza.last_key is None:
                raise MalformedLine("continuation line outside of a stanza", line=line, line_number=line_number)
            stanza.extend(line.strip())
            continue

        key, sep, value = line.partition(":")
        if not sep:
            raise MalformedLine("missing ':' separator", line=line, line_number=line_number)
        key = key.strip()

        if key == "Package":
            flush()
        if stanza is None:
            stanza = _Stanza(line_number)
        stanza.add(key, value.strip(), line_number, line)

    flush()
    return records


def to_collection(records: Iterable[PackageRecord]) -> PackageCollection:
    """Collapse records into a name-keyed collection; the last duplicate wins."""
    return {record.name: record for record in records}


def load_index(content: str | bytes | Iterable[str]) -> PackageCollection:
    """Parse index content straight into a name-keyed collection."""
    return to_collection(parse_index(content))
