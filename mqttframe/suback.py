"""SUBACK packet."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import List, Optional

from .core import ByteReader, FixedHeader, QoS, len_len, write_remaining_length
from .errors import InvalidSubscribeReasonCode, MalformedPacket


class SubscribeReasonCode(enum.IntEnum):
    """Per-filter result of a subscription: granted QoS or failure."""

    SUCCESS_AT_MOST_ONCE = 0
    SUCCESS_AT_LEAST_ONCE = 1
    SUCCESS_EXACTLY_ONCE = 2
    FAILURE = 0x80

    @property
    def qos(self) -> Optional[QoS]:
        """Granted QoS, or None for a failure."""
        if self is SubscribeReasonCode.FAILURE:
            return None
        return QoS(int(self))

    @classmethod
    def success(cls, qos: QoS) -> SubscribeReasonCode:
        return cls(int(QoS(qos)))


def subscribe_reason_code(value: int) -> SubscribeReasonCode:
    try:
        return SubscribeReasonCode(value)
    except ValueError:
        raise InvalidSubscribeReasonCode(value) from None


@dataclass
class SubAck:
    """Acknowledgement of a subscribe, one return code per filter."""

    pkid: int
    return_codes: List[SubscribeReasonCode] = field(default_factory=list)

    def _len(self) -> int:
        return 2 + len(self.return_codes)

    def size(self) -> int:
        length = self._len()
        return 1 + len_len(length) + length

    @classmethod
    def read(cls, fixed_header: FixedHeader, data) -> SubAck:
        reader = ByteReader(data)
        reader.advance(fixed_header.fixed_header_len)
        pkid = reader.read_u16()
        if not reader.remaining():
            raise MalformedPacket()
        return_codes = []
        while reader.remaining():
            return_codes.append(subscribe_reason_code(reader.read_u8()))
        return cls(pkid=pkid, return_codes=return_codes)

    def write(self, buffer: bytearray) -> int:
        length = self._len()
        packet = bytearray([0x90])
        count = write_remaining_length(packet, length)
        packet += (self.pkid & 0xFFFF).to_bytes(2, "big")
        packet += bytes(int(code) for code in self.return_codes)
        buffer += packet
        return 1 + count + length