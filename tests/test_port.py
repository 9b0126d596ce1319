import pytest

from httpuri.errors import ErrorKind, InvalidUri
from httpuri.port import Port


def test_partialeq_port():
    port_a = Port.parse("8080")
    port_b = Port.parse("8080")
    assert port_a == port_b


def test_partialeq_port_different_reprs():
    port_a = Port(8081, "8081")
    port_b = Port(8081, str("8081"))
    assert port_a == port_b
    assert port_b == port_a


def test_partialeq_u16():
    port = Port.parse("8080")
    assert port == 8080
    assert 8080 == port


def test_u16_from_port():
    port = Port.parse("8080")
    assert int(port) == 8080


def test_text_and_display():
    port = Port.parse("80")
    assert port.text == "80"
    assert port.port == 80
    assert str(port) == "80"


def test_display_uses_number_not_text():
    port = Port.parse("0080")
    assert port.text == "0080"
    assert str(port) == "80"


def test_leading_plus_accepted():
    port = Port.parse("+443")
    assert port == 443


def test_max_port_accepted():
    assert Port.parse("65535") == 65535


@pytest.mark.parametrize("text", ["", "+", "abc", "65536", "-1", "8 0", "８０"])
def test_invalid_port(text):
    with pytest.raises(InvalidUri) as info:
        Port.parse(text)
    assert info.value.kind is ErrorKind.INVALID_PORT


def test_hash_matches_equality():
    assert len({Port.parse("8080"), Port(8080, "8080")}) == 1


def test_usable_as_index():
    items = list(range(100))
    assert items[Port.parse("42")] == 42