"""The path and query component of a URI."""

from __future__ import annotations

from .errors import ErrorKind, InvalidUri

_QUESTION, _HASH = ord("?"), ord("#")


def _ranges(*spans: tuple[int, int]) -> frozenset[int]:
    return frozenset(b for lo, hi in spans for b in range(lo, hi + 1))


# Bytes accepted unescaped in a path. The quote and braces ought to be
# percent-encoded but are sent as-is by real clients (JSON in paths), so
# they are let through.
_PATH_BYTES = _ranges(
    (0x21, 0x21),
    (0x22, 0x22),  # "
    (0x24, 0x3B),
    (0x3D, 0x3D),
    (0x40, 0x5F),
    (0x61, 0x7A),
    (0x7B, 0x7B),  # {
    (0x7C, 0x7C),
    (0x7D, 0x7D),  # }
    (0x7E, 0x7E),
    (0x7F, 0xFF),
)

# Bytes accepted in a query; most printable bytes are allowed.
_QUERY_BYTES = _ranges(
    (0x21, 0x21),
    (0x24, 0x3B),
    (0x3D, 0x3D),
    (0x3F, 0x7E),
    (0x7F, 0xFF),
)


def _to_bytes(value: str | bytes | bytearray) -> bytes:
    if isinstance(value, str):
        return value.encode("utf-8", "surrogatepass")
    return bytes(value)


def _scan(raw: bytes) -> tuple[bool, int]:
    """Validate ``raw`` and return whether it has a query and where it stops."""
    has_query = False
    position = 0
    for position, byte in enumerate(raw):
        if byte == _QUESTION:
            has_query = True
            break
        if byte == _HASH:
            return False, position
        if byte not in _PATH_BYTES:
            raise InvalidUri(ErrorKind.INVALID_URI_CHAR)
    else:
        return False, len(raw)

    for offset, byte in enumerate(raw[position + 1 :], start=position + 1):
        if byte == _HASH:
            return has_query, offset
        if byte not in _QUERY_BYTES:
            raise InvalidUri(ErrorKind.INVALID_URI_CHAR)
    return has_query, len(raw)


class PathAndQuery:
    """The path of a URI together with its optional query string.

    Any fragment (``#...``) is dropped while parsing.
    """

    __slots__ = ("_data", "_query")

    _data: str
    _query: int | None

    def __init__(self, value: str | bytes | bytearray) -> None:
        parsed = type(self).parse(value)
        self._data = parsed._data
        self._query = parsed._query

    @classmethod
    def _unchecked(cls, data: str, query: int | None = None) -> PathAndQuery:
        path_and_query = object.__new__(cls)
        path_and_query._data = data
        path_and_query._query = query
        return path_and_query

    @classmethod
    def _empty(cls) -> PathAndQuery:
        return cls._unchecked("")

    @classmethod
    def _slash(cls) -> PathAndQuery:
        return cls._unchecked("/")

    @classmethod
    def _star(cls) -> PathAndQuery:
        return cls._unchecked("*")

    @classmethod
    def parse(cls, value: str | bytes | bytearray) -> PathAndQuery:
        """Parse a path with an optional query, dropping any fragment."""
        raw = _to_bytes(value)
        has_query, end = _scan(raw)
        try:
            data = raw[:end].decode("utf-8")
        except UnicodeDecodeError:
            raise InvalidUri(ErrorKind.INVALID_URI_CHAR) from None
        query = data.index("?") if has_query else None
        return cls._unchecked(data, query)

    @property
    def is_empty(self) -> bool:
        """Whether no path or query text was stored at all."""
        return not self._data

    @property
    def path(self) -> str:
        """The path, case-sensitive; ``/`` when the path is empty."""
        path = self._data if self._query is None else self._data[: self._query]
        return path or "/"

    @property
    def query(self) -> str | None:
        """The query string after ``?``, or ``None`` if there is none."""
        if self._query is None:
            return None
        return self._data[self._query + 1 :]

    @property
    def as_str(self) -> str:
        """The path and query as stored; ``/`` when empty."""
        return self._data or "/"

    def __str__(self) -> str:
        if not self._data:
            return "/"
        if self._data[0] in "/*":
            return self._data
        return "/" + self._data

    def __repr__(self) -> str:
        return f"PathAndQuery({str(self)!r})"

    @staticmethod
    def _other_text(other: object) -> str | None:
        if isinstance(other, PathAndQuery):
            return other.as_str
        if isinstance(other, str):
            return other
        return None

    def __eq__(self, other: object) -> bool:
        if isinstance(other, PathAndQuery):
            return self._data == other._data
        if isinstance(other, str):
            return self.as_str == other
        return NotImplemented

    def __lt__(self, other: object) -> bool:
        text = self._other_text(other)
        if text is None:
            return NotImplemented
        return self.as_str < text

    def __le__(self, other: object) -> bool:
        text = self._other_text(other)
        if text is None:
            return NotImplemented
        return self.as_str <= text

    def __gt__(self, other: object) -> bool:
        text = self._other_text(other)
        if text is None:
            return NotImplemented
        return self.as_str > text

    def __ge__(self, other: object) -> bool:
        text = self._other_text(other)
        if text is None:
            return NotImplemented
        return self.as_str >= text

    def __hash__(self) -> int:
        return hash(self._data)