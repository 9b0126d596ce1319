"""HTTP protocol versions."""

from __future__ import annotations

from enum import Enum


class Version(Enum):
    """A version of the HTTP specification, ordered from oldest to newest."""

    HTTP_09 = "HTTP/0.9"
    HTTP_10 = "HTTP/1.0"
    HTTP_11 = "HTTP/1.1"
    HTTP_2 = "HTTP/2.0"
    HTTP_3 = "HTTP/3.0"

    @classmethod
    def default(cls) -> Version:
        """Return the default version, HTTP/1.1."""
        return cls.HTTP_11

    @property
    def _rank(self) -> int:
        return list(type(self)).index(self)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._rank < other._rank

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._rank <= other._rank

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._rank > other._rank

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._rank >= other._rank

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return self.value