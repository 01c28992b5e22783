"""
Error taxonomy.

Every error is terminal for the current run: the pipeline aborts and the
CLI reports the error once.
"""


class PkgDiffError(Exception):
    """Base class for all openwrt-pkgdiff errors."""


class FlagError(PkgDiffError):
    """Bad or missing command-line arguments."""


class NetworkError(PkgDiffError):
    """Transport failure or a non-200 response while fetching an index."""

    def __init__(self, url: str, status_code: int | None = None, reason: str | None = None):
        self.url = url
        self.status_code = status_code
        self.reason = reason
        if status_code is not None:
            message = f"unexpected status code {status_code} for {url}"
        else:
            message = f"request to {url} failed: {reason or 'unknown error'}"
        super().__init__(message)


class ParseError(PkgDiffError):
    """Malformed index or manifest content."""

    def __init__(
        self,
        message: str,
        line: str | None = None,
        line_number: int | None = None,
        source: str | None = None,
    ):
        self.message = message
        self.line = line
        self.line_number = line_number
        self.source = source
        super().__init__(self._format())

    def _format(self) -> str:
        text = self.message
        if self.line_number is not None:
            text = f"line {self.line_number}: {text}"
        if self.source:
            text = f"{self.source}: {text}"
        if self.line is not None:
            text = f"{text}: {self.line!r}"
        return text

    def with_source(self, source: str) -> "ParseError":
        """Attach the origin (URL or path) of the content being parsed."""
        self.source = source
        self.args = (self._format(),)
        return self


class MalformedLine(ParseError):
    """An index line that is not a `Key: Value` pair."""


class MalformedField(ParseError):
    """A declared-integer index field whose value is not an integer."""

    def __init__(self, field: str, value: str, line_number: int | None = None):
        self.field = field
        self.value = value
        super().__init__(f"field {field!r} is not an integer", line=value, line_number=line_number)


class InvalidManifestLine(ParseError):
    """A manifest line not of the form `<name> - <version>`."""


class ManifestIOError(PkgDiffError):
    """The manifest file could not be opened or read."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"cannot read manifest {path}: {reason}")
