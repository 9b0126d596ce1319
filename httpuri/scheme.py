"""The scheme component of a URI."""

from __future__ import annotations

from typing import ClassVar

from .errors import ErrorKind, InvalidUri

MAX_SCHEME_LEN = 64

# scheme = ALPHA *( ALPHA / DIGIT / "+" / "-" / "." ), plus "~".
_SCHEME_CHARS = frozenset(b"+-.0123456789~" + bytes(range(0x41, 0x5B)) + bytes(range(0x61, 0x7B)))

_ASCII_LOWER = str.maketrans("ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz")


def _ascii_lower(text: str) -> str:
    return text.translate(_ASCII_LOWER)


def _to_bytes(value: str | bytes | bytearray) -> bytes:
    if isinstance(value, str):
        return value.encode("utf-8", "surrogatepass")
    return bytes(value)


def is_scheme_char(byte: int) -> bool:
    """Return whether ``byte`` may appear in a scheme name."""
    return byte in _SCHEME_CHARS


class Scheme:
    """A URI scheme such as ``http`` or ``https``.

    Comparison against text is ASCII case-insensitive.
    """

    __slots__ = ("_text", "_standard")

    HTTP: ClassVar[Scheme]
    HTTPS: ClassVar[Scheme]

    _text: str
    _standard: bool

    @classmethod
    def _new(cls, text: str, standard: bool = False) -> Scheme:
        scheme = object.__new__(cls)
        scheme._text = text
        scheme._standard = standard
        return scheme

    @classmethod
    def parse(cls, value: str | bytes | bytearray) -> Scheme:
        """Parse a whole scheme name, without any trailing ``://``."""
        data = _to_bytes(value)
        if data == b"http":
            return cls.HTTP
        if data == b"https":
            return cls.HTTPS
        if len(data) > MAX_SCHEME_LEN:
            raise InvalidUri(ErrorKind.SCHEME_TOO_LONG)
        if not all(is_scheme_char(b) for b in data):
            raise InvalidUri(ErrorKind.INVALID_SCHEME)
        return cls._new(data.decode("ascii"))

    @property
    def is_standard(self) -> bool:
        """Whether this is one of the built-in ``http``/``https`` schemes."""
        return self._standard

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"Scheme({self._text!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Scheme):
            if self._standard or other._standard:
                return self._standard and other._standard and self._text == other._text
            return _ascii_lower(self._text) == _ascii_lower(other._text)
        if isinstance(other, str):
            return _ascii_lower(self._text) == _ascii_lower(other)
        return NotImplemented

    def __hash__(self) -> int:
        if self._standard:
            return hash((True, self._text))
        return hash((False, _ascii_lower(self._text)))


Scheme.HTTP = Scheme._new("http", standard=True)
Scheme.HTTPS = Scheme._new("https", standard=True)


def parse_prefix(data: str | bytes | bytearray) -> tuple[Scheme | None, int]:
    """Find a leading ``scheme://`` in ``data``.

    Returns the scheme and the number of bytes it occupies including the
    ``://`` separator, or ``(None, 0)`` when there is no scheme.
    """
    raw = _to_bytes(data)
    if raw[:7].lower() == b"http://":
        return Scheme.HTTP, 7
    if raw[:8].lower() == b"https://":
        return Scheme.HTTPS, 8
    if len(raw) > 3:
        for i, b in enumerate(raw):
            if b == ord(":"):
                if len(raw) < i + 3 or raw[i + 1 : i + 3] != b"//":
                    break
                if i > MAX_SCHEME_LEN:
                    raise InvalidUri(ErrorKind.SCHEME_TOO_LONG)
                return Scheme._new(raw[:i].decode("ascii")), i + 3
            if not is_scheme_char(b):
                break
    return None, 0