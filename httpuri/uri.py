"""The URI type: scheme, authority, path and query together."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from .authority import Authority, authority_end
from .errors import ErrorKind, InvalidUri, InvalidUriParts
from .path import PathAndQuery
from .port import Port
from .scheme import Scheme, parse_prefix
from .tables import MAX_LEN

if TYPE_CHECKING:
    from .builder import Builder


def _to_bytes(value: str | bytes | bytearray) -> bytes:
    if isinstance(value, str):
        return value.encode("utf-8", "surrogatepass")
    return bytes(value)


@dataclass
class Parts:
    """The separate components of a URI, each of which may be absent."""

    scheme: Scheme | None = None
    authority: Authority | None = None
    path_and_query: PathAndQuery | None = None


class Uri:
    """A request target: origin, absolute, authority or asterisk form.

    ``Uri()`` is the URI ``/``.
    """

    __slots__ = ("_scheme", "_authority", "_path_and_query")

    _scheme: Scheme | None
    _authority: Authority
    _path_and_query: PathAndQuery

    def __init__(self, value: str | bytes | bytearray = "/") -> None:
        parsed = type(self).parse(value)
        self._scheme = parsed._scheme
        self._authority = parsed._authority
        self._path_and_query = parsed._path_and_query

    @classmethod
    def _new(
        cls,
        scheme: Scheme | None = None,
        authority: Authority | None = None,
        path_and_query: PathAndQuery | None = None,
    ) -> Uri:
        uri = object.__new__(cls)
        uri._scheme = scheme
        uri._authority = authority if authority is not None else Authority._empty()
        uri._path_and_query = (
            path_and_query if path_and_query is not None else PathAndQuery._empty()
        )
        return uri

    @classmethod
    def parse(cls, value: str | bytes | bytearray) -> Uri:
        """Parse text in any of the request-target forms."""
        raw = _to_bytes(value)
        if len(raw) > MAX_LEN:
            raise InvalidUri(ErrorKind.TOO_LONG)
        if not raw:
            raise InvalidUri(ErrorKind.EMPTY)
        if len(raw) == 1:
            if raw == b"/":
                return cls._new(path_and_query=PathAndQuery._slash())
            if raw == b"*":
                return cls._new(path_and_query=PathAndQuery._star())
            return cls._new(authority=Authority.parse(raw))
        if raw[0] == ord("/"):
            return cls._new(path_and_query=PathAndQuery.parse(raw))
        return cls._parse_full(raw)

    @classmethod
    def _parse_full(cls, raw: bytes) -> Uri:
        scheme, consumed = parse_prefix(raw)
        rest = raw[consumed:]
        end = authority_end(rest)

        if scheme is None:
            if end != len(rest):
                raise InvalidUri(ErrorKind.INVALID_FORMAT)
            return cls._new(authority=Authority._unchecked(rest.decode("ascii")))

        # An absolute URI needs an authority.
        if end == 0:
            raise InvalidUri(ErrorKind.INVALID_FORMAT)
        authority = Authority._unchecked(rest[:end].decode("ascii"))
        return cls._new(scheme, authority, PathAndQuery.parse(rest[end:]))

    @classmethod
    def from_parts(cls, parts: Parts) -> Uri:
        """Assemble a URI from parts, checking they form a valid combination."""
        if parts.scheme is not None:
            if parts.authority is None:
                raise InvalidUriParts(ErrorKind.AUTHORITY_MISSING)
            if parts.path_and_query is None:
                raise InvalidUriParts(ErrorKind.PATH_AND_QUERY_MISSING)
        elif parts.authority is not None and parts.path_and_query is not None:
            raise InvalidUriParts(ErrorKind.SCHEME_MISSING)
        return cls._new(parts.scheme, parts.authority, parts.path_and_query)

    def into_parts(self) -> Parts:
        """Split this URI into its parts."""
        return Parts(
            scheme=self._scheme,
            authority=self.authority,
            path_and_query=self._path_and_query if self._has_path() else None,
        )

    @classmethod
    def builder(cls) -> Builder:
        """Return a new builder for assembling a URI."""
        from .builder import Builder

        return Builder()

    @classmethod
    def from_authority(cls, authority: Authority) -> Uri:
        """Return a URI in authority form."""
        return cls._new(authority=authority)

    @classmethod
    def from_path_and_query(cls, path_and_query: PathAndQuery) -> Uri:
        """Return a URI in origin form."""
        return cls._new(path_and_query=path_and_query)

    def _has_path(self) -> bool:
        return not self._path_and_query.is_empty or self._scheme is not None

    @property
    def path_and_query(self) -> PathAndQuery | None:
        """The path and query, unless this is an authority-form URI."""
        if self._scheme is not None or not str(self._authority):
            return self._path_and_query
        return None

    @property
    def path(self) -> str:
        """The path; empty for an authority-form URI."""
        return self._path_and_query.path if self._has_path() else ""

    @property
    def scheme(self) -> Scheme | None:
        """The scheme, if the URI is absolute."""
        return self._scheme

    @property
    def scheme_str(self) -> str | None:
        """The scheme as text, if there is one."""
        return None if self._scheme is None else str(self._scheme)

    @property
    def authority(self) -> Authority | None:
        """The authority, if there is one."""
        return self._authority if str(self._authority) else None

    @property
    def host(self) -> str | None:
        """The host of the authority, if there is one."""
        authority = self.authority
        return None if authority is None else authority.host

    def port(self) -> Port | None:
        """The port of the authority, if there is one."""
        authority = self.authority
        return None if authority is None else authority.port()

    def port_u16(self) -> int | None:
        """The port as an integer, if there is one."""
        port = self.port()
        return None if port is None else int(port)

    @property
    def query(self) -> str | None:
        """The query string after ``?``, if there is one."""
        return self._path_and_query.query

    def _equals_text(self, text: str) -> bool:
        other = text.encode("utf-8", "surrogatepass")
        absolute = False

        if self._scheme is not None:
            scheme = str(self._scheme).encode("ascii")
            absolute = True
            if len(other) < len(scheme) + 3:
                return False
            if other[: len(scheme)].lower() != scheme.lower():
                return False
            other = other[len(scheme) :]
            if other[:3] != b"://":
                return False
            other = other[3:]

        authority = self.authority
        if authority is not None:
            auth = str(authority).encode("ascii")
            absolute = True
            if len(other) < len(auth):
                return False
            if other[: len(auth)].lower() != auth.lower():
                return False
            other = other[len(auth) :]

        path = self.path.encode("utf-8")
        if other.startswith(path):
            other = other[len(path) :]
        elif not (absolute and path == b"/"):
            # Only an absolute URI may omit a bare "/" path.
            return False

        query = self.query
        if query is not None:
            if not other:
                return query == ""
            if other[:1] != b"?":
                return False
            other = other[1:]
            encoded = query.encode("utf-8")
            if not other.startswith(encoded):
                return False
            other = other[len(encoded) :]

        return not other or other[:1] == b"#"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Uri):
            return (
                self.scheme == other.scheme
                and self.authority == other.authority
                and self.path == other.path
                and self.query == other.query
            )
        if isinstance(other, str):
            return self._equals_text(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self.scheme, self.authority, self.path, self.query))

    def __str__(self) -> str:
        text = ""
        if self._scheme is not None:
            text += f"{self._scheme}://"
        authority = self.authority
        if authority is not None:
            text += str(authority)
        text += self.path
        query = self.query
        if query is not None:
            text += f"?{query}"
        return text

    def __repr__(self) -> str:
        return f"Uri({str(self)!r})"