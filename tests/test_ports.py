import pytest

from portwatch.errors import InvalidPortError
from portwatch.ports import parse_ports_spec


def test_parse_ports_single():
    assert parse_ports_spec("80") == {80}


def test_parse_ports_list():
    assert parse_ports_spec("80,443,8080") == {80, 443, 8080}


def test_parse_ports_range():
    assert parse_ports_spec("8000-8002") == {8000, 8001, 8002}


def test_parse_ports_mixed():
    assert parse_ports_spec("80,443,8000-8001,3000") == {80, 443, 8000, 8001, 3000}


def test_parse_ports_duplicates():
    assert parse_ports_spec("80,80,8000-8000") == {80, 8000}


def test_parse_ports_invalid_range():
    with pytest.raises(InvalidPortError, match=r"start \(8002\) > end \(8000\)"):
        parse_ports_spec("8002-8000")


@pytest.mark.parametrize("spec", ["80a", "80-82b"])
def test_parse_ports_invalid_char(spec):
    with pytest.raises(InvalidPortError):
        parse_ports_spec(spec)


@pytest.mark.parametrize("spec", ["0", "0-10", "10-0"])
def test_parse_port_zero(spec):
    with pytest.raises(InvalidPortError):
        parse_ports_spec(spec)


def test_zero_message():
    with pytest.raises(InvalidPortError) as info:
        parse_ports_spec("0")
    assert str(info.value) == "Invalid port specification: Port number cannot be 0"


def test_whitespace_around_items_is_ignored():
    assert parse_ports_spec(" 80 , 443 ") == {80, 443}


def test_out_of_range_port_rejected():
    with pytest.raises(InvalidPortError, match="Invalid port number: 65536"):
        parse_ports_spec("65536")


def test_highest_port_accepted():
    assert parse_ports_spec("65535") == {65535}


def test_triple_range_rejected():
    with pytest.raises(InvalidPortError, match="Invalid range format: 1-2-3"):
        parse_ports_spec("1-2-3")


def test_empty_item_rejected():
    with pytest.raises(InvalidPortError, match="Invalid port number"):
        parse_ports_spec("80,,81")


def test_range_end_message():
    with pytest.raises(InvalidPortError, match="Invalid range end: 82b"):
        parse_ports_spec("80-82b")