"""CONNACK packet."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from .core import ByteReader, FixedHeader, len_len, write_remaining_length
from .errors import InvalidConnectReturnCode


class ConnectReturnCode(enum.IntEnum):
    SUCCESS = 0
    REFUSED_PROTOCOL_VERSION = 1
    BAD_CLIENT_ID = 2
    SERVICE_UNAVAILABLE = 3
    BAD_USER_NAME_PASSWORD = 4
    NOT_AUTHORIZED = 5


@dataclass
class ConnAck:
    """Acknowledgement of a CONNECT packet."""

    code: ConnectReturnCode
    session_present: bool = False

    _LEN = 2

    @classmethod
    def read(cls, fixed_header: FixedHeader, data) -> ConnAck:
        reader = ByteReader(data)
        reader.advance(fixed_header.fixed_header_len)
        flags = reader.read_u8()
        return_code = reader.read_u8()
        session_present = (flags & 0x01) == 1
        try:
            code = ConnectReturnCode(return_code)
        except ValueError:
            raise InvalidConnectReturnCode(return_code) from None
        return cls(code=code, session_present=session_present)

    def write(self, buffer: bytearray) -> int:
        buffer.append(0x20)
        count = write_remaining_length(buffer, self._LEN)
        buffer.append(int(self.session_present))
        buffer.append(int(self.code))
        return 1 + count + self._LEN

    def size(self) -> int:
        return 1 + len_len(self._LEN) + self._LEN