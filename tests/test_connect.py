import pytest

from mqttframe.connect import Connect, LastWill, Login
from mqttframe.core import Protocol, QoS, parse_fixed_header
from mqttframe.errors import (
    IncorrectPacketFormat,
    InvalidProtocol,
    InvalidProtocolLevel,
)

PARSE_STREAM = bytes(
    [0x10, 39, 0x00, 0x04]
    + list(b"MQTT")
    + [0x04, 0b1100_1110, 0x00, 0x0A, 0x00, 0x04]
    + list(b"test")
    + [0x00, 0x02]
    + list(b"/a")
    + [0x00, 0x07]
    + list(b"offline")
    + [0x00, 0x04]
    + list(b"rumq")
    + [0x00, 0x02]
    + list(b"mq")
    + [0xDE, 0xAD, 0xBE, 0xEF]
)

SAMPLE_BYTES = bytes(
    [0x10, 39, 0x00, 0x04]
    + list(b"MQTT")
    + [0x04, 0b1100_1110, 0x00, 0x0A, 0x00, 0x04]
    + list(b"test")
    + [0x00, 0x02]
    + list(b"/a")
    + [0x00, 0x07]
    + list(b"offline")
    + [0x00, 0x04]
    + list(b"rust")
    + [0x00, 0x02]
    + list(b"mq")
)


def _read(stream):
    header = parse_fixed_header(stream)
    return Connect.read(header, stream[: header.frame_length()])


def _packet(body):
    return bytes([0x10, len(body)]) + body


def test_connect_parsing_works():
    packet = _read(PARSE_STREAM)
    assert packet == Connect(
        protocol=Protocol.V4,
        keep_alive=10,
        client_id="test",
        clean_session=True,
        last_will=LastWill("/a", "offline", QoS.AT_LEAST_ONCE, False),
        login=Login("rumq", "mq"),
    )


def test_connect_encoding_works():
    connect = Connect(
        protocol=Protocol.V4,
        keep_alive=10,
        client_id="test",
        clean_session=True,
        last_will=LastWill("/a", "offline", QoS.AT_LEAST_ONCE, False),
        login=Login("rust", "mq"),
    )
    buf = bytearray()
    written = connect.write(buf)
    assert bytes(buf) == SAMPLE_BYTES
    assert written == len(SAMPLE_BYTES)
    assert connect.size() == len(SAMPLE_BYTES)


def test_defaults():
    connect = Connect("abc")
    assert connect.keep_alive == 10
    assert connect.clean_session is True
    assert connect.protocol is Protocol.V4
    assert connect.last_will is None
    assert connect.login is None


def test_round_trip_with_retained_will_and_login():
    password = "password"
    connect = Connect("client", keep_alive=60, clean_session=False)
    connect.last_will = LastWill("status", b"\x00\x01", QoS.EXACTLY_ONCE, True)
    connect.set_login("user", password)
    buf = bytearray()
    connect.write(buf)
    assert _read(bytes(buf)) == connect


def test_round_trip_minimal():
    connect = Connect("x")
    buf = bytearray()
    size = connect.write(buf)
    assert size == len(buf) == connect.size()
    assert _read(bytes(buf)) == connect


def test_write_appends_after_existing_data():
    connect = Connect("test", login=Login("rust", "mq"))
    buf = bytearray(b"\xAA\xBB")
    connect.write(buf)
    assert buf[:2] == b"\xAA\xBB"
    assert _read(bytes(buf[2:])) == connect


def test_set_login_returns_self():
    password = "password"
    connect = Connect("c")
    assert connect.set_login("user", password) is connect
    assert connect.login == Login("user", password)


def test_login_validate():
    login = Login("rumq", "mq")
    assert login.validate("rumq", "mq")
    assert not login.validate("rumq", "other")
    assert not login.validate("other", "mq")


def test_last_will_accepts_str_message():
    will = LastWill("/a", "offline", 1)
    assert will.message == b"offline"
    assert will.qos is QoS.AT_LEAST_ONCE


def test_invalid_protocol_name():
    body = b"\x00\x04MQTX\x04\x02\x00\x0a\x00\x01a"
    with pytest.raises(InvalidProtocol):
        _read(_packet(body))


def test_invalid_protocol_level():
    body = b"\x00\x04MQTT\x03\x02\x00\x0a\x00\x01a"
    with pytest.raises(InvalidProtocolLevel) as info:
        _read(_packet(body))
    assert info.value.level == 3


def test_protocol_level_five_accepted():
    body = b"\x00\x04MQTT\x05\x02\x00\x0a\x00\x01a"
    assert _read(_packet(body)).protocol is Protocol.V5


def test_will_bits_without_will_flag_rejected():
    body = b"\x00\x04MQTT\x04\x0a\x00\x0a\x00\x01a"
    with pytest.raises(IncorrectPacketFormat):
        _read(_packet(body))