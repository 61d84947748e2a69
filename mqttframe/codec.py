"""Stream codec that frames MQTT packets with size limits on both directions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .errors import InsufficientBytes
from .packet import Packet, read_packet, write_packet


@dataclass
class Codec:
    """Decoder and encoder for MQTT v4 packets."""

    max_incoming_size: int
    max_outgoing_size: int

    def decode(self, src: bytearray) -> Optional[Packet]:
        """Decode the next packet from ``src``, or return None if more bytes are needed."""
        try:
            return read_packet(src, self.max_incoming_size)
        except InsufficientBytes:
            return None

    def encode(self, item: Packet, dst: bytearray) -> None:
        """Append the encoded ``item`` to ``dst``."""
        write_packet(item, dst, self.max_outgoing_size)