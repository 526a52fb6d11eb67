"""Exception types for client errors.

Extraction errors describe a page that does not look the way the parsers
expect. Transport and auth errors describe the conversation with the site.
"""

from typing import Optional


class HNClientError(Exception):
    """Base class for every error raised by this package."""


class ConfigurationError(HNClientError):
    """Raised when the selector table or configuration is unusable."""


class ExtractionError(HNClientError):
    """Base class for failures turning a page into records.

    Attributes:
        field: Name of the field being extracted when the failure happened.
    """

    def __init__(self, field: str, message: str) -> None:
        self.field = field
        super().__init__(message)


class MissingField(ExtractionError):
    """A required element or attribute is absent from the page."""

    def __init__(self, field: str) -> None:
        super().__init__(field, f"Missing field: {field}")


class ParseFailure(ExtractionError):
    """An element is present but its content has the wrong shape.

    Attributes:
        raw: The text or attribute value that failed to parse.
    """

    def __init__(self, field: str, raw: str) -> None:
        self.raw = raw
        super().__init__(field, f"Could not parse {field} from {raw!r}")


class StructuralInconsistency(ExtractionError):
    """Records were extracted but do not fit together, e.g. an orphaned reply."""

    def __init__(self, message: str, comment_id: Optional[str] = None) -> None:
        self.comment_id = comment_id
        super().__init__("comments", message)


class TransportError(HNClientError):
    """A request failed on the network or returned a non-2xx status."""

    def __init__(self, message: str, url: str, status_code: Optional[int] = None) -> None:
        self.url = url
        self.status_code = status_code
        super().__init__(f"{message} (url: {url}, status: {status_code})")


class AuthError(HNClientError):
    """Login or signup was rejected by the site.

    Attributes:
        username: Account the attempt was made for.
        detail: First line of text on the page the site answered with, if any.
    """

    def __init__(self, message: str, username: str, detail: Optional[str] = None) -> None:
        self.username = username
        self.detail = detail
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)
