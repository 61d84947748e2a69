"""Packets without variable header or payload: PINGREQ, PINGRESP, DISCONNECT."""

from dataclasses import dataclass


@dataclass(frozen=True)
class PingReq:
    def write(self, buffer: bytearray) -> int:
        buffer += b"\xC0\x00"
        return 2

    def size(self) -> int:
        return 2


@dataclass(frozen=True)
class PingResp:
    def write(self, buffer: bytearray) -> int:
        buffer += b"\xD0\x00"
        return 2

    def size(self) -> int:
        return 2


@dataclass(frozen=True)
class Disconnect:
    def write(self, buffer: bytearray) -> int:
        buffer += b"\xE0\x00"
        return 2

    def size(self) -> int:
        return 2