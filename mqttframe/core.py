"""Fixed header framing, field encoding helpers and shared enums."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from .errors import (
    BoundaryCrossed,
    InsufficientBytes,
    InvalidPacketType,
    InvalidQoS,
    MalformedPacket,
    MalformedRemainingLength,
    PayloadSizeLimitExceeded,
    PayloadTooLong,
    TopicNotUtf8,
)

MAX_REMAINING_LENGTH = 268_435_455


class QoS(enum.IntEnum):
    AT_MOST_ONCE = 0
    AT_LEAST_ONCE = 1
    EXACTLY_ONCE = 2


class PacketType(enum.IntEnum):
    CONNECT = 1
    CONNACK = 2
    PUBLISH = 3
    PUBACK = 4
    PUBREC = 5
    PUBREL = 6
    PUBCOMP = 7
    SUBSCRIBE = 8
    SUBACK = 9
    UNSUBSCRIBE = 10
    UNSUBACK = 11
    PINGREQ = 12
    PINGRESP = 13
    DISCONNECT = 14


class Protocol(enum.Enum):
    V4 = 4
    V5 = 5


@dataclass(frozen=True)
class FixedHeader:
    """First byte, header length (2 to 5 bytes) and remaining length of a packet."""

    byte1: int
    fixed_header_len: int
    remaining_len: int

    def packet_type(self) -> PacketType:
        num = self.byte1 >> 4
        try:
            return PacketType(num)
        except ValueError:
            raise InvalidPacketType(num) from None

    def frame_length(self) -> int:
        """Size of the whole packet: fixed header, variable header and payload."""
        return self.fixed_header_len + self.remaining_len


class ByteReader:
    """Sequential reader over the bytes of one framed packet."""

    def __init__(self, data):
        self._data = bytes(data)
        self._pos = 0

    def remaining(self) -> int:
        return len(self._data) - self._pos

    def advance(self, count: int) -> None:
        self._pos = min(self._pos + count, len(self._data))

    def rest(self) -> bytes:
        """Return all unread bytes and consume them."""
        data = self._data[self._pos:]
        self._pos = len(self._data)
        return data

    def read_u8(self) -> int:
        if self.remaining() < 1:
            raise MalformedPacket()
        value = self._data[self._pos]
        self._pos += 1
        return value

    def read_u16(self) -> int:
        if self.remaining() < 2:
            raise MalformedPacket()
        value = int.from_bytes(self._data[self._pos:self._pos + 2], "big")
        self._pos += 2
        return value

    def read_mqtt_bytes(self) -> bytes:
        length = self.read_u16()
        if length > self.remaining():
            raise BoundaryCrossed(length)
        data = self._data[self._pos:self._pos + length]
        self._pos += length
        return data

    def read_mqtt_string(self) -> str:
        raw = self.read_mqtt_bytes()
        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError:
            raise TopicNotUtf8() from None


def variable_length(stream) -> tuple[int, int]:
    """Decode a variable byte integer; return (bytes used, value)."""
    length = 0
    count = 0
    shift = 0
    done = False
    for byte in stream:
        count += 1
        length += (byte & 0x7F) << shift
        done = not (byte & 0x80)
        if done:
            break
        shift += 7
        if shift > 21:
            raise MalformedRemainingLength()
    if not done:
        raise InsufficientBytes(1)
    return count, length


def parse_fixed_header(stream) -> FixedHeader:
    with memoryview(stream) as view:
        if len(view) < 2:
            raise InsufficientBytes(2 - len(view))
        byte1 = view[0]
        count, length = variable_length(view[1:])
    return FixedHeader(byte1, count + 1, length)


def check(stream, max_packet_size: int) -> FixedHeader:
    """Return the fixed header if ``stream`` holds at least one whole packet."""
    stream_len = len(stream)
    header = parse_fixed_header(stream)
    if header.remaining_len > max_packet_size:
        raise PayloadSizeLimitExceeded(header.remaining_len)
    frame_length = header.frame_length()
    if stream_len < frame_length:
        raise InsufficientBytes(frame_length - stream_len)
    return header


def qos_from_byte(num: int) -> QoS:
    try:
        return QoS(num)
    except ValueError:
        raise InvalidQoS(num) from None


def write_remaining_length(buffer: bytearray, length: int) -> int:
    """Append ``length`` as a variable byte integer; return the bytes written."""
    if length > MAX_REMAINING_LENGTH:
        raise PayloadTooLong()
    count = 0
    while True:
        byte = length % 128
        length //= 128
        if length > 0:
            byte |= 0x80
        buffer.append(byte)
        count += 1
        if length == 0:
            return count


def len_len(length: int) -> int:
    """Number of bytes needed to encode ``length`` as a remaining length."""
    if length >= 2_097_152:
        return 4
    if length >= 16_384:
        return 3
    if length >= 128:
        return 2
    return 1


def write_mqtt_bytes(buffer: bytearray, data) -> None:
    data = bytes(data)
    buffer += (len(data) & 0xFFFF).to_bytes(2, "big")
    buffer += data


def write_mqtt_string(buffer: bytearray, string: str) -> None:
    write_mqtt_bytes(buffer, string.encode("utf-8"))