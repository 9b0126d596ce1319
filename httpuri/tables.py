"""Character tables shared by the URI parsers."""

from __future__ import annotations

# The longest URI accepted; one below the largest 16-bit value.
MAX_LEN = 0xFFFF - 1


def _ranges(*spans: tuple[int, int]) -> frozenset[int]:
    return frozenset(b for lo, hi in spans for b in range(lo, hi + 1))


# Bytes that may appear in a URI outside of percent-encoding. Every member
# is ASCII, so any run of them is valid UTF-8.
_URI_CHARS = _ranges(
    (0x21, 0x21),  # !
    (0x23, 0x24),  # # $
    (0x26, 0x3B),  # & ' ( ) * + , - . / 0-9 : ;
    (0x3D, 0x3D),  # =
    (0x3F, 0x5B),  # ? @ A-Z [
    (0x5D, 0x5D),  # ]
    (0x5F, 0x5F),  # _
    (0x61, 0x7A),  # a-z
    (0x7E, 0x7E),  # ~
)


def uri_char_class(byte: int) -> int:
    """Return ``byte`` itself if it may appear in a URI, otherwise 0."""
    return byte if byte in _URI_CHARS else 0


def is_uri_char(byte: int) -> bool:
    """Return whether ``byte`` may appear in a URI unescaped."""
    return byte in _URI_CHARS