"""Errors raised while building or parsing URIs."""

from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    """The reason a URI could not be constructed; the value is its message."""

    INVALID_URI_CHAR = "invalid uri character"
    INVALID_SCHEME = "invalid scheme"
    INVALID_AUTHORITY = "invalid authority"
    INVALID_PORT = "invalid port"
    INVALID_FORMAT = "invalid format"
    SCHEME_MISSING = "scheme missing"
    AUTHORITY_MISSING = "authority missing"
    PATH_AND_QUERY_MISSING = "path missing"
    TOO_LONG = "uri too long"
    EMPTY = "empty string"
    SCHEME_TOO_LONG = "scheme too long"


class InvalidUri(ValueError):
    """Raised when text cannot be parsed as a URI or URI component."""

    def __init__(self, kind: ErrorKind) -> None:
        super().__init__(kind.value)
        self.kind = kind

    def __str__(self) -> str:
        return self.kind.value


class InvalidUriParts(InvalidUri):
    """Raised when a set of URI parts does not form a valid URI."""

    def __init__(self, kind: ErrorKind) -> None:
        super().__init__(kind)