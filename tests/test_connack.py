import pytest

from mqttframe.connack import ConnAck, ConnectReturnCode
from mqttframe.core import parse_fixed_header
from mqttframe.errors import InvalidConnectReturnCode


def _read(stream):
    header = parse_fixed_header(stream)
    return ConnAck.read(header, stream[: header.frame_length()])


def test_connack_parsing_works():
    stream = bytes([0b0010_0000, 0x02, 0x01, 0x00, 0xDE, 0xAD, 0xBE, 0xEF])
    assert _read(stream) == ConnAck(
        session_present=True, code=ConnectReturnCode.SUCCESS
    )


def test_connack_encoding_works():
    connack = ConnAck(session_present=True, code=ConnectReturnCode.SUCCESS)
    buf = bytearray()
    written = connack.write(buf)
    assert bytes(buf) == bytes([0b0010_0000, 0x02, 0x01, 0x00])
    assert written == len(buf)


def test_size_matches_written_length():
    connack = ConnAck(ConnectReturnCode.NOT_AUTHORIZED)
    buf = bytearray()
    assert connack.write(buf) == connack.size() == len(buf)


@pytest.mark.parametrize("code", list(ConnectReturnCode))
@pytest.mark.parametrize("session_present", [True, False])
def test_round_trip(code, session_present):
    connack = ConnAck(code, session_present)
    buf = bytearray()
    connack.write(buf)
    assert _read(bytes(buf)) == connack


def test_invalid_return_code():
    with pytest.raises(InvalidConnectReturnCode) as info:
        _read(bytes([0x20, 0x02, 0x00, 0x06]))
    assert info.value.code == 6