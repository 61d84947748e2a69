"""Packets that carry only a packet identifier: PUBACK, PUBREC, PUBREL, PUBCOMP, UNSUBACK."""

from __future__ import annotations

from dataclasses import dataclass

from .core import ByteReader, FixedHeader, len_len, write_remaining_length
from .errors import PayloadSizeIncorrect

_PKID_LEN = 2


def _read_pkid(fixed_header: FixedHeader, data) -> int:
    reader = ByteReader(data)
    reader.advance(fixed_header.fixed_header_len)
    return reader.read_u16()


def _write_pkid(buffer: bytearray, header: int, pkid: int) -> int:
    buffer.append(header)
    count = write_remaining_length(buffer, _PKID_LEN)
    buffer += pkid.to_bytes(2, "big")
    return 1 + count + _PKID_LEN


def _pkid_size() -> int:
    return 1 + len_len(_PKID_LEN) + _PKID_LEN


@dataclass
class PubAck:
    """Acknowledgement of a QoS 1 publish."""

    pkid: int

    @classmethod
    def read(cls, fixed_header: FixedHeader, data) -> PubAck:
        return cls(_read_pkid(fixed_header, data))

    def write(self, buffer: bytearray) -> int:
        return _write_pkid(buffer, 0x40, self.pkid)

    def size(self) -> int:
        return _pkid_size()


@dataclass
class PubRec:
    """Receipt of a QoS 2 publish."""

    pkid: int

    @classmethod
    def read(cls, fixed_header: FixedHeader, data) -> PubRec:
        return cls(_read_pkid(fixed_header, data))

    def write(self, buffer: bytearray) -> int:
        return _write_pkid(buffer, 0x50, self.pkid)

    def size(self) -> int:
        return _pkid_size()


@dataclass
class PubRel:
    """Release of a QoS 2 publish, in response to PUBREC."""

    pkid: int

    @classmethod
    def read(cls, fixed_header: FixedHeader, data) -> PubRel:
        return cls(_read_pkid(fixed_header, data))

    def write(self, buffer: bytearray) -> int:
        return _write_pkid(buffer, 0x62, self.pkid)

    def size(self) -> int:
        return _pkid_size()


@dataclass
class PubComp:
    """Completion of a QoS 2 publish, in response to PUBREL."""

    pkid: int

    @classmethod
    def read(cls, fixed_header: FixedHeader, data) -> PubComp:
        return cls(_read_pkid(fixed_header, data))

    def write(self, buffer: bytearray) -> int:
        return _write_pkid(buffer, 0x70, self.pkid)

    def size(self) -> int:
        return _pkid_size()


@dataclass
class UnsubAck:
    """Acknowledgement of an unsubscribe."""

    pkid: int

    @classmethod
    def read(cls, fixed_header: FixedHeader, data) -> UnsubAck:
        if fixed_header.remaining_len != _PKID_LEN:
            raise PayloadSizeIncorrect()
        return cls(_read_pkid(fixed_header, data))

    def write(self, buffer: bytearray) -> int:
        buffer += bytes([0xB0, 0x02])
        buffer += self.pkid.to_bytes(2, "big")
        return 4

    def size(self) -> int:
        return 4