"""PUBLISH packet."""

from __future__ import annotations

from dataclasses import dataclass

from .core import (
    ByteReader,
    FixedHeader,
    QoS,
    len_len,
    qos_from_byte,
    write_mqtt_string,
    write_remaining_length,
)
from .errors import PacketIdZero


@dataclass
class Publish:
    """Application message sent to or received from the broker."""

    topic: str
    qos: QoS
    payload: bytes = b""
    dup: bool = False
    retain: bool = False
    pkid: int = 0

    def __post_init__(self):
        self.qos = QoS(self.qos)
        if isinstance(self.payload, str):
            self.payload = self.payload.encode("utf-8")
        else:
            self.payload = bytes(self.payload)

    def __str__(self) -> str:
        return (
            f"Topic = {self.topic}, Qos = {self.qos.name}, Retain = {self.retain}, "
            f"Pkid = {self.pkid}, Payload Size = {len(self.payload)}"
        )

    def _len(self) -> int:
        length = 2 + len(self.topic.encode("utf-8")) + len(self.payload)
        if self.qos != QoS.AT_MOST_ONCE and self.pkid != 0:
            length += 2
        return length

    def size(self) -> int:
        length = self._len()
        return 1 + len_len(length) + length

    @classmethod
    def read(cls, fixed_header: FixedHeader, data) -> Publish:
        byte1 = fixed_header.byte1
        qos = qos_from_byte((byte1 & 0b0110) >> 1)
        dup = bool(byte1 & 0b1000)
        retain = bool(byte1 & 0b0001)

        reader = ByteReader(data)
        reader.advance(fixed_header.fixed_header_len)
        topic = reader.read_mqtt_string()

        pkid = 0 if qos == QoS.AT_MOST_ONCE else reader.read_u16()
        if qos != QoS.AT_MOST_ONCE and pkid == 0:
            raise PacketIdZero()

        return cls(
            topic=topic,
            qos=qos,
            payload=reader.rest(),
            dup=dup,
            retain=retain,
            pkid=pkid,
        )

    def write(self, buffer: bytearray) -> int:
        """Append the encoded packet to ``buffer``; return its size."""
        length = self._len()
        packet = bytearray(
            [0b0011_0000 | int(self.retain) | (int(self.qos) << 1) | (int(self.dup) << 3)]
        )
        count = write_remaining_length(packet, length)
        write_mqtt_string(packet, self.topic)

        if self.qos != QoS.AT_MOST_ONCE:
            if self.pkid == 0:
                raise PacketIdZero()
            packet += self.pkid.to_bytes(2, "big")

        packet += self.payload
        buffer += packet
        return 1 + count + length