import pytest

from mqttframe.core import QoS, parse_fixed_header
from mqttframe.errors import PacketIdZero
from mqttframe.publish import Publish


def _read(stream):
    stream = bytes(stream)
    header = parse_fixed_header(stream)
    return Publish.read(header, stream[: header.frame_length()])


def test_qos1_publish_parsing_works():
    stream = bytes(
        [0b0011_0010, 11, 0x00, 0x03]
        + list(b"a/b")
        + [0x00, 0x0A, 0xF1, 0xF2, 0xF3, 0xF4, 0xDE, 0xAD, 0xBE, 0xEF]
    )
    packet = _read(stream)
    assert packet == Publish(
        topic="a/b",
        qos=QoS.AT_LEAST_ONCE,
        payload=bytes([0xF1, 0xF2, 0xF3, 0xF4]),
        dup=False,
        retain=False,
        pkid=10,
    )


def test_qos0_publish_parsing_works():
    stream = bytes(
        [0b0011_0000, 7, 0x00, 0x03] + list(b"a/b") + [0x01, 0x02, 0xDE, 0xAD, 0xBE, 0xEF]
    )
    packet = _read(stream)
    assert packet == Publish(
        topic="a/b",
        qos=QoS.AT_MOST_ONCE,
        payload=bytes([0x01, 0x02]),
        pkid=0,
    )


def test_qos1_publish_encoding_works():
    publish = Publish(
        topic="a/b",
        qos=QoS.AT_LEAST_ONCE,
        payload=bytes([0xF1, 0xF2, 0xF3, 0xF4]),
        pkid=10,
    )
    buf = bytearray()
    written = publish.write(buf)
    expected = bytes(
        [0b0011_0010, 11, 0x00, 0x03] + list(b"a/b") + [0x00, 0x0A, 0xF1, 0xF2, 0xF3, 0xF4]
    )
    assert bytes(buf) == expected
    assert written == len(expected)


def test_qos0_publish_encoding_works():
    publish = Publish(
        topic="a/b",
        qos=QoS.AT_MOST_ONCE,
        payload=bytes([0xE1, 0xE2, 0xE3, 0xE4]),
    )
    buf = bytearray()
    publish.write(buf)
    assert bytes(buf) == bytes(
        [0b0011_0000, 9, 0x00, 0x03] + list(b"a/b") + [0xE1, 0xE2, 0xE3, 0xE4]
    )


def test_write_qos1_with_zero_pkid_raises_and_leaves_buffer():
    publish = Publish(topic="a/b", qos=QoS.AT_LEAST_ONCE, payload=b"x")
    buf = bytearray(b"prefix")
    with pytest.raises(PacketIdZero):
        publish.write(buf)
    assert bytes(buf) == b"prefix"


def test_read_qos1_with_zero_pkid_raises():
    stream = bytes([0b0011_0010, 7, 0x00, 0x03] + list(b"a/b") + [0x00, 0x00])
    with pytest.raises(PacketIdZero):
        _read(stream)


def test_flags_round_trip():
    publish = Publish(
        topic="x/y/z",
        qos=QoS.EXACTLY_ONCE,
        payload=b"hello",
        dup=True,
        retain=True,
        pkid=513,
    )
    buf = bytearray()
    written = publish.write(buf)
    assert written == publish.size() == len(buf)
    assert _read(buf) == publish


def test_size_matches_large_payload():
    publish = Publish(topic="hello/world", qos=QoS.AT_LEAST_ONCE, payload=bytes(265))
    assert publish.size() == 281


def test_string_payload_is_encoded():
    assert Publish("t", QoS.AT_MOST_ONCE, "hi").payload == b"hi"