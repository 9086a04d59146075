"""Error taxonomy for the registry search."""
from typing import Optional


class InputInvalid(Exception):
    """The incoming request is missing a required field or is unreadable."""


class SourceUnavailable(Exception):
    """A registry could not be queried: transport, timeout, auth or format failure."""

    def __init__(self, cause: str, source: Optional[str] = None):
        self.cause = cause
        self.source = source
        super().__init__(f"{source}: {cause}" if source else cause)


class MalformedUpstreamResponse(SourceUnavailable):
    """A 2xx response whose body is not the JSON we asked for (HTML challenge, error page)."""


class UpstreamStatusError(SourceUnavailable):
    """Registry answered with a non-2xx status we do not treat as 'no results'."""

    def __init__(self, status: int, url: str, source: Optional[str] = None):
        self.status = status
        self.url = url
        super().__init__(f"HTTP {status} from {url}", source=source)


class AggregationFailure(Exception):
    """Failure outside any single source, e.g. in merging."""
