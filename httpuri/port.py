"""The port component of a URI authority."""

from __future__ import annotations

from .errors import ErrorKind, InvalidUri

_DIGITS = frozenset("0123456789")
_MAX_PORT = 0xFFFF


class Port:
    """A port number together with the text it was parsed from."""

    __slots__ = ("port", "text")

    def __init__(self, port: int, text: str) -> None:
        self.port = port
        self.text = text

    @classmethod
    def parse(cls, text: str) -> Port:
        """Parse decimal text as a port number in the range 0..65535."""
        digits = text[1:] if text.startswith("+") else text
        if not digits or not set(digits) <= _DIGITS:
            raise InvalidUri(ErrorKind.INVALID_PORT)
        value = int(digits)
        if value > _MAX_PORT:
            raise InvalidUri(ErrorKind.INVALID_PORT)
        return cls(value, text)

    def __int__(self) -> int:
        return self.port

    def __index__(self) -> int:
        return self.port

    def __str__(self) -> str:
        return str(self.port)

    def __repr__(self) -> str:
        return f"Port({self.port})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Port):
            return self.port == other.port
        if isinstance(other, int) and not isinstance(other, bool):
            return self.port == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.port)