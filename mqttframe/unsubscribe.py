"""UNSUBSCRIBE packet."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from .core import (
    ByteReader,
    FixedHeader,
    len_len,
    write_mqtt_string,
    write_remaining_length,
)


@dataclass
class Unsubscribe:
    """Request to remove one or more topic filters."""

    pkid: int = 0
    topics: List[str] = field(default_factory=list)

    def _len(self) -> int:
        return 2 + sum(len(topic.encode("utf-8")) + 2 for topic in self.topics)

    def size(self) -> int:
        length = self._len()
        return 1 + len_len(length) + length

    @classmethod
    def read(cls, fixed_header: FixedHeader, data) -> Unsubscribe:
        reader = ByteReader(data)
        reader.advance(fixed_header.fixed_header_len)
        pkid = reader.read_u16()
        payload_bytes = fixed_header.remaining_len - 2
        topics = []
        while payload_bytes > 0:
            topic = reader.read_mqtt_string()
            payload_bytes -= len(topic.encode("utf-8")) + 2
            topics.append(topic)
        return cls(pkid=pkid, topics=topics)

    def write(self, buffer: bytearray) -> int:
        length = self._len()
        packet = bytearray([0xA2])
        count = write_remaining_length(packet, length)
        packet += (self.pkid & 0xFFFF).to_bytes(2, "big")
        for topic in self.topics:
            write_mqtt_string(packet, topic)
        buffer += packet
        return 1 + count + length