"""The authority component of a URI."""

from __future__ import annotations

from .errors import ErrorKind, InvalidUri
from .port import Port
from .tables import uri_char_class

# Enough for a full IPv6 literal with a port, e.g.
# [FEDC:BA98:7654:3210:FEDC:BA98:7654:3210]:80
_MAX_COLONS = 8

_SLASH, _QUESTION, _HASH = ord("/"), ord("?"), ord("#")
_COLON, _AT, _PERCENT = ord(":"), ord("@"), ord("%")
_OPEN_BRACKET, _CLOSE_BRACKET = ord("["), ord("]")


def _to_bytes(value: str | bytes | bytearray) -> bytes:
    if isinstance(value, str):
        return value.encode("utf-8", "surrogatepass")
    return bytes(value)


def authority_end(data: str | bytes | bytearray) -> int:
    """Return where the authority at the start of ``data`` ends.

    The authority runs up to the first ``/``, ``?`` or ``#``. The result may
    be 0 when ``data`` holds no authority. Raises :class:`InvalidUri` if the
    authority part is malformed.
    """
    raw = _to_bytes(data)
    colon_count = 0
    start_bracket = False
    end_bracket = False
    has_percent = False
    at_sign_pos: int | None = None
    end = len(raw)

    for i, byte in enumerate(raw):
        cls = uri_char_class(byte)
        if cls in (_SLASH, _QUESTION, _HASH):
            end = i
            break
        if cls == _COLON:
            if colon_count >= _MAX_COLONS:
                raise InvalidUri(ErrorKind.INVALID_AUTHORITY)
            colon_count += 1
        elif cls == _OPEN_BRACKET:
            if has_percent or start_bracket:
                raise InvalidUri(ErrorKind.INVALID_AUTHORITY)
            start_bracket = True
        elif cls == _CLOSE_BRACKET:
            if not start_bracket or end_bracket:
                raise InvalidUri(ErrorKind.INVALID_AUTHORITY)
            end_bracket = True
            # The colons and percents were part of an IPv6 literal.
            colon_count = 0
            has_percent = False
        elif cls == _AT:
            at_sign_pos = i
            # The colons and percents were part of the userinfo.
            colon_count = 0
            has_percent = False
        elif cls == 0:
            if byte != _PERCENT:
                raise InvalidUri(ErrorKind.INVALID_URI_CHAR)
            # Allowed in userinfo and IPv6 zone identifiers only; cleared
            # above if it turns out to belong to either.
            has_percent = True

    if start_bracket != end_bracket:
        raise InvalidUri(ErrorKind.INVALID_AUTHORITY)
    if colon_count > 1:
        raise InvalidUri(ErrorKind.INVALID_AUTHORITY)
    if end > 0 and at_sign_pos == end - 1:
        raise InvalidUri(ErrorKind.INVALID_AUTHORITY)
    if has_percent:
        raise InvalidUri(ErrorKind.INVALID_AUTHORITY)
    return end


def _host(text: str) -> str:
    host_port = text.rsplit("@", 1)[-1]
    if not host_port:
        return ""
    if host_port[0] == "[":
        return host_port[: host_port.index("]") + 1]
    return host_port.split(":", 1)[0]


class Authority:
    """The authority of a URI: optional userinfo, a host and an optional port.

    Equality, ordering and hashing are ASCII case-insensitive.
    """

    __slots__ = ("_text",)

    _text: str

    def __init__(self, value: str | bytes | bytearray) -> None:
        self._text = str(type(self).parse(value))

    @classmethod
    def _unchecked(cls, text: str) -> Authority:
        authority = object.__new__(cls)
        authority._text = text
        return authority

    @classmethod
    def _empty(cls) -> Authority:
        return cls._unchecked("")

    @classmethod
    def parse(cls, value: str | bytes | bytearray) -> Authority:
        """Parse a whole, non-empty authority."""
        raw = _to_bytes(value)
        if not raw:
            raise InvalidUri(ErrorKind.EMPTY)
        if authority_end(raw) != len(raw):
            raise InvalidUri(ErrorKind.INVALID_URI_CHAR)
        return cls._unchecked(raw.decode("ascii"))

    @property
    def host(self) -> str:
        """The host: a bracketed IP literal, an IPv4 address or a name."""
        return _host(self._text)

    def port(self) -> Port | None:
        """The port following the last ``:``, if it is a valid port number."""
        index = self._text.rfind(":")
        if index < 0:
            return None
        try:
            return Port.parse(self._text[index + 1 :])
        except InvalidUri:
            return None

    def port_u16(self) -> int | None:
        """The port as an integer, if there is one."""
        port = self.port()
        return None if port is None else int(port)

    def _key(self) -> bytes:
        return self._text.encode("ascii").lower()

    @staticmethod
    def _other_key(other: object) -> bytes | None:
        if isinstance(other, Authority):
            return other._key()
        if isinstance(other, str):
            return other.encode("utf-8", "surrogatepass").lower()
        return None

    def __eq__(self, other: object) -> bool:
        key = self._other_key(other)
        if key is None:
            return NotImplemented
        return self._key() == key

    def __lt__(self, other: object) -> bool:
        key = self._other_key(other)
        if key is None:
            return NotImplemented
        return self._key() < key

    def __le__(self, other: object) -> bool:
        key = self._other_key(other)
        if key is None:
            return NotImplemented
        return self._key() <= key

    def __gt__(self, other: object) -> bool:
        key = self._other_key(other)
        if key is None:
            return NotImplemented
        return self._key() > key

    def __ge__(self, other: object) -> bool:
        key = self._other_key(other)
        if key is None:
            return NotImplemented
        return self._key() >= key

    def __hash__(self) -> int:
        return hash(self._key())

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"Authority({self._text!r})"