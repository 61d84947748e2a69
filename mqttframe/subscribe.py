"""SUBSCRIBE packet."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Iterable, List

from .core import (
    ByteReader,
    FixedHeader,
    QoS,
    len_len,
    qos_from_byte,
    write_mqtt_string,
    write_remaining_length,
)
from .errors import EmptySubscription


@dataclass
class SubscribeFilter:
    """A topic filter together with the requested QoS."""

    path: str
    qos: QoS

    def __post_init__(self):
        self.qos = QoS(self.qos)

    def _len(self) -> int:
        # filter length prefix + filter + options byte
        return 2 + len(self.path.encode("utf-8")) + 1

    def _write(self, buffer: bytearray) -> None:
        write_mqtt_string(buffer, self.path)
        buffer.append(int(self.qos))


class RetainForwardRule(enum.Enum):
    ON_EVERY_SUBSCRIBE = enum.auto()
    ON_NEW_SUBSCRIBE = enum.auto()
    NEVER = enum.auto()


@dataclass
class Subscribe:
    """Subscription request holding one or more filters."""

    pkid: int = 0
    filters: List[SubscribeFilter] = field(default_factory=list)

    @classmethod
    def many(cls, filters: Iterable[SubscribeFilter]) -> Subscribe:
        return cls(pkid=0, filters=list(filters))

    def add(self, path: str, qos: QoS) -> Subscribe:
        self.filters.append(SubscribeFilter(path, qos))
        return self

    def _len(self) -> int:
        return 2 + sum(f._len() for f in self.filters)

    def size(self) -> int:
        length = self._len()
        return 1 + len_len(length) + length

    @classmethod
    def read(cls, fixed_header: FixedHeader, data) -> Subscribe:
        reader = ByteReader(data)
        reader.advance(fixed_header.fixed_header_len)
        pkid = reader.read_u16()

        filters = []
        while reader.remaining():
            path = reader.read_mqtt_string()
            options = reader.read_u8()
            filters.append(SubscribeFilter(path, qos_from_byte(options & 0b0000_0011)))

        if not filters:
            raise EmptySubscription()
        return cls(pkid=pkid, filters=filters)

    def write(self, buffer: bytearray) -> int:
        """Append the encoded packet to ``buffer``; return its size."""
        length = self._len()
        packet = bytearray([0x82])
        count = write_remaining_length(packet, length)
        packet += (self.pkid & 0xFFFF).to_bytes(2, "big")
        for topic_filter in self.filters:
            topic_filter._write(packet)
        buffer += packet
        return 1 + count + length