import pytest

from httpuri.errors import ErrorKind, InvalidUri, InvalidUriParts


@pytest.mark.parametrize(
    "kind, message",
    [
        (ErrorKind.INVALID_URI_CHAR, "invalid uri character"),
        (ErrorKind.INVALID_SCHEME, "invalid scheme"),
        (ErrorKind.INVALID_AUTHORITY, "invalid authority"),
        (ErrorKind.INVALID_PORT, "invalid port"),
        (ErrorKind.INVALID_FORMAT, "invalid format"),
        (ErrorKind.SCHEME_MISSING, "scheme missing"),
        (ErrorKind.AUTHORITY_MISSING, "authority missing"),
        (ErrorKind.PATH_AND_QUERY_MISSING, "path missing"),
        (ErrorKind.TOO_LONG, "uri too long"),
        (ErrorKind.EMPTY, "empty string"),
        (ErrorKind.SCHEME_TOO_LONG, "scheme too long"),
    ],
)
def test_invalid_uri_message(kind, message):
    err = InvalidUri(kind)
    assert err.kind is kind
    assert str(err) == message


def test_invalid_uri_parts_message_matches_inner():
    err = InvalidUriParts(ErrorKind.SCHEME_MISSING)
    assert err.kind is ErrorKind.SCHEME_MISSING
    assert str(err) == str(InvalidUri(ErrorKind.SCHEME_MISSING))


def test_invalid_uri_parts_is_an_invalid_uri():
    err = InvalidUriParts(ErrorKind.AUTHORITY_MISSING)
    assert isinstance(err, InvalidUri)
    assert err.kind is ErrorKind.AUTHORITY_MISSING
    assert str(err) == "authority missing"


def test_invalid_uri_is_value_error():
    err = InvalidUri(ErrorKind.EMPTY)
    assert isinstance(err, ValueError)
    assert err.kind is ErrorKind.EMPTY
    assert str(err) == "empty string"