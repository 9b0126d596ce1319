import pytest

from httpuri.authority import Authority, authority_end
from httpuri.errors import ErrorKind, InvalidUri


def expect_kind(value, kind):
    with pytest.raises(InvalidUri) as info:
        Authority.parse(value)
    assert info.value.kind is kind


def test_parse_empty_string_is_error():
    expect_kind(b"", ErrorKind.EMPTY)
    expect_kind("", ErrorKind.EMPTY)


def test_equal_to_self_of_same_authority():
    a1 = Authority.parse("example.com")
    a2 = Authority.parse("EXAMPLE.COM")
    assert a1 == a2
    assert a2 == a1


def test_not_equal_to_self_of_different_authority():
    a1 = Authority.parse("example.com")
    a2 = Authority.parse("test.com")
    assert (a1 == a2) is False
    assert (a2 == a1) is False


def test_equates_with_a_str():
    authority = Authority.parse("example.com")
    assert authority == "EXAMPLE.com"
    assert "EXAMPLE.com" == authority


def test_constructor_equates_with_a_str():
    assert Authority("example.com") == "example.com"


def test_not_equal_with_a_str_of_a_different_authority():
    authority = Authority.parse("example.com")
    assert (authority == "test.com") is False
    assert ("test.com" == authority) is False
    assert authority == "example.com"


def test_compares_to_self():
    a1 = Authority.parse("abc.com")
    a2 = Authority.parse("def.com")
    assert a1 < a2
    assert a2 > a1


def test_compares_with_a_str():
    authority = Authority.parse("def.com")
    assert authority < "ghi.com"
    assert "ghi.com" > authority
    assert authority > "abc.com"
    assert "abc.com" < authority


def test_compares_case_insensitively():
    authority = Authority.parse("DEF.com")
    assert authority < "ghi.com"
    assert authority > "abc.com"
    assert authority <= "def.COM"
    assert authority >= "def.com"


def test_hash_is_case_insensitive():
    a = Authority.parse("HELLO.com")
    b = Authority.parse("hello.coM")
    assert hash(a) == hash(b)
    assert len({a, b}) == 1


def test_allows_percent_in_userinfo():
    text = "a%2f:b%2f@example.com"
    assert Authority.parse(text) == text


def test_rejects_percent_in_hostname():
    expect_kind(b"example%2f.com", ErrorKind.INVALID_AUTHORITY)
    expect_kind(b"a%2f:b%2f@example%2f.com", ErrorKind.INVALID_AUTHORITY)


def test_allows_percent_in_ipv6_address():
    text = "[fe80::1:2:3:4%25eth0]"
    assert Authority.parse(text) == text


def test_reject_obviously_invalid_ipv6_address():
    expect_kind(b"[0:1:2:3:4:5:6:7:8:9:10:11:12:13:14]", ErrorKind.INVALID_AUTHORITY)


def test_rejects_percent_outside_ipv6_address():
    expect_kind(b"1234%20[fe80::1:2:3:4]", ErrorKind.INVALID_AUTHORITY)
    expect_kind(b"[fe80::1:2:3:4]%20", ErrorKind.INVALID_AUTHORITY)


def test_rejects_invalid_utf8():
    expect_kind(b"\xc0", ErrorKind.INVALID_URI_CHAR)
    expect_kind(bytearray(b"\xc0"), ErrorKind.INVALID_URI_CHAR)


def test_rejects_invalid_use_of_brackets():
    expect_kind(b"[]@[", ErrorKind.INVALID_AUTHORITY)
    expect_kind(b"]o[", ErrorKind.INVALID_AUTHORITY)


def test_rejects_multiple_port_colons():
    expect_kind("localhost:8080:3030", ErrorKind.INVALID_AUTHORITY)


def test_rejects_trailing_at_sign():
    expect_kind("@", ErrorKind.INVALID_AUTHORITY)
    expect_kind("user@", ErrorKind.INVALID_AUTHORITY)


def test_rejects_path_after_authority():
    expect_kind("example.com/path", ErrorKind.INVALID_URI_CHAR)


def test_authority_end_stops_at_delimiters():
    assert authority_end(b"example.com/path") == 11
    assert authority_end("example.com?q") == 11
    assert authority_end("example.com#frag") == 11
    assert authority_end("example.com") == 11
    assert authority_end(b"/path") == 0
    assert authority_end(b"") == 0


def test_authority_end_rejects_control_char():
    with pytest.raises(InvalidUri) as info:
        authority_end("\0")
    assert info.value.kind is ErrorKind.INVALID_URI_CHAR


def test_host_of_name_with_port():
    assert Authority.parse("example.org:80").host == "example.org"


def test_host_after_userinfo():
    assert Authority.parse("user:password@localhost:3000").host == "localhost"


def test_host_of_ipv6_literal():
    assert Authority.parse("[::1]:8008").host == "[::1]"
    assert Authority.parse("[2001:db8::2:1]").host == "[2001:db8::2:1]"


def test_port_present():
    port = Authority.parse("example.org:80").port()
    assert int(port) == 80
    assert port.text == "80"
    assert Authority.parse("example.org:80").port_u16() == 80


def test_port_absent():
    authority = Authority.parse("example.org")
    assert authority.port() is None
    assert authority.port_u16() is None


def test_port_absent_for_bare_ipv6():
    assert Authority.parse("[::1]").port() is None


def test_str_and_repr_keep_original_text():
    authority = Authority.parse("HELLO.com:81")
    assert str(authority) == "HELLO.com:81"
    assert repr(authority) == "Authority('HELLO.com:81')"


def test_not_equal_to_other_types():
    assert (Authority.parse("example.com") == 5) is False
    with pytest.raises(TypeError):
        Authority.parse("example.com") < 5