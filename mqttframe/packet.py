"""Reading and writing whole MQTT 3.1.1 packets of any type."""

from __future__ import annotations

from typing import Union

from .acks import PubAck, PubComp, PubRec, PubRel, UnsubAck
from .connack import ConnAck
from .connect import Connect
from .control import Disconnect, PingReq, PingResp
from .core import PacketType, check
from .errors import OutgoingPacketTooLarge, PayloadRequired
from .publish import Publish
from .suback import SubAck
from .subscribe import Subscribe
from .unsubscribe import Unsubscribe

Packet = Union[
    Connect,
    ConnAck,
    Publish,
    PubAck,
    PubRec,
    PubRel,
    PubComp,
    Subscribe,
    SubAck,
    Unsubscribe,
    UnsubAck,
    PingReq,
    PingResp,
    Disconnect,
]

_EMPTY_PACKETS = {
    PacketType.PINGREQ: PingReq,
    PacketType.PINGRESP: PingResp,
    PacketType.DISCONNECT: Disconnect,
}

_READERS = {
    PacketType.CONNECT: Connect.read,
    PacketType.CONNACK: ConnAck.read,
    PacketType.PUBLISH: Publish.read,
    PacketType.PUBACK: PubAck.read,
    PacketType.PUBREC: PubRec.read,
    PacketType.PUBREL: PubRel.read,
    PacketType.PUBCOMP: PubComp.read,
    PacketType.SUBSCRIBE: Subscribe.read,
    PacketType.SUBACK: SubAck.read,
    PacketType.UNSUBSCRIBE: Unsubscribe.read,
    PacketType.UNSUBACK: UnsubAck.read,
}


def packet_size(packet: Packet) -> int:
    """Encoded size of ``packet`` in bytes, fixed header included."""
    return packet.size()


def read_packet(stream: bytearray, max_size: int) -> Packet:
    """Take the next whole packet off the front of ``stream`` and decode it.

    Raises InsufficientBytes, leaving ``stream`` untouched, when the packet
    is not complete yet.
    """
    fixed_header = check(stream, max_size)
    frame_length = fixed_header.frame_length()
    frame = bytes(stream[:frame_length])
    del stream[:frame_length]

    packet_type = fixed_header.packet_type()

    if fixed_header.remaining_len == 0:
        empty = _EMPTY_PACKETS.get(packet_type)
        if empty is None:
            raise PayloadRequired()
        return empty()

    empty = _EMPTY_PACKETS.get(packet_type)
    if empty is not None:
        return empty()
    return _READERS[packet_type](fixed_header, frame)


def write_packet(packet: Packet, stream: bytearray, max_size: int) -> int:
    """Append ``packet`` to ``stream``; return the number of bytes written."""
    size = packet.size()
    if size > max_size:
        raise OutgoingPacketTooLarge(size, max_size)
    return packet.write(stream)