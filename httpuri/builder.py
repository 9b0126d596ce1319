"""Step-by-step assembly of a URI."""

from __future__ import annotations

from .authority import Authority
from .errors import InvalidUri
from .path import PathAndQuery
from .scheme import Scheme
from .uri import Parts, Uri


class Builder:
    """Collects URI parts and checks them when :meth:`build` is called.

    Errors from invalid parts are held back and raised by :meth:`build`;
    once one has occurred, later settings are ignored.
    """

    def __init__(self) -> None:
        self._parts = Parts()
        self._error: InvalidUri | None = None

    @classmethod
    def from_uri(cls, uri: Uri) -> Builder:
        """Start a builder from the parts of an existing URI."""
        builder = cls()
        builder._parts = uri.into_parts()
        return builder

    def scheme(self, scheme: Scheme | str | bytes | bytearray) -> Builder:
        """Set the scheme."""
        if self._error is None:
            try:
                self._parts.scheme = scheme if isinstance(scheme, Scheme) else Scheme.parse(scheme)
            except InvalidUri as error:
                self._error = error
        return self

    def authority(self, authority: Authority | str | bytes | bytearray) -> Builder:
        """Set the authority."""
        if self._error is None:
            try:
                self._parts.authority = (
                    authority if isinstance(authority, Authority) else Authority.parse(authority)
                )
            except InvalidUri as error:
                self._error = error
        return self

    def path_and_query(self, value: PathAndQuery | str | bytes | bytearray) -> Builder:
        """Set the path and query."""
        if self._error is None:
            try:
                self._parts.path_and_query = (
                    value if isinstance(value, PathAndQuery) else PathAndQuery.parse(value)
                )
            except InvalidUri as error:
                self._error = error
        return self

    def build(self) -> Uri:
        """Return the URI, raising the first error met while building."""
        if self._error is not None:
            raise self._error
        return Uri.from_parts(
            Parts(
                scheme=self._parts.scheme,
                authority=self._parts.authority,
                path_and_query=self._parts.path_and_query,
            )
        )