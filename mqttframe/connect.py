"""CONNECT packet, with its optional last will and login credentials."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .core import (
    ByteReader,
    FixedHeader,
    Protocol,
    QoS,
    len_len,
    qos_from_byte,
    write_mqtt_bytes,
    write_mqtt_string,
    write_remaining_length,
)
from .errors import IncorrectPacketFormat, InvalidProtocol, InvalidProtocolLevel

_PROTOCOL_NAME = "MQTT"


@dataclass
class LastWill:
    """Message the broker publishes on the client's behalf when it disconnects."""

    topic: str
    message: bytes
    qos: QoS
    retain: bool = False

    def __post_init__(self):
        if isinstance(self.message, str):
            self.message = self.message.encode("utf-8")
        else:
            self.message = bytes(self.message)
        self.qos = QoS(self.qos)

    def _len(self) -> int:
        return 2 + len(self.topic.encode("utf-8")) + 2 + len(self.message)

    @classmethod
    def _read(cls, connect_flags: int, reader: ByteReader) -> Optional[LastWill]:
        if not connect_flags & 0b100:
            if connect_flags & 0b0011_1000:
                raise IncorrectPacketFormat()
            return None
        topic = reader.read_mqtt_string()
        message = reader.read_mqtt_bytes()
        qos = qos_from_byte((connect_flags & 0b11000) >> 3)
        return cls(topic, message, qos, bool(connect_flags & 0b0010_0000))

    def _write(self, buffer: bytearray) -> int:
        flags = 0x04 | (int(self.qos) << 3)
        if self.retain:
            flags |= 0x20
        write_mqtt_string(buffer, self.topic)
        write_mqtt_bytes(buffer, self.message)
        return flags


@dataclass
class Login:
    """Username and password sent with CONNECT; empty fields are omitted."""

    username: str
    password: str

    def validate(self, username: str, password: str) -> bool:
        return self.username == username and self.password == password

    def _len(self) -> int:
        length = 0
        if self.username:
            length += 2 + len(self.username.encode("utf-8"))
        if self.password:
            length += 2 + len(self.password.encode("utf-8"))
        return length

    @classmethod
    def _read(cls, connect_flags: int, reader: ByteReader) -> Optional[Login]:
        username = reader.read_mqtt_string() if connect_flags & 0b1000_0000 else ""
        password = reader.read_mqtt_string() if connect_flags & 0b0100_0000 else ""
        if not username and not password:
            return None
        return cls(username, password)

    def _write(self, buffer: bytearray) -> int:
        flags = 0
        if self.username:
            flags |= 0x80
            write_mqtt_string(buffer, self.username)
        if self.password:
            flags |= 0x40
            write_mqtt_string(buffer, self.password)
        return flags


@dataclass
class Connect:
    """Connection request sent by the client."""

    client_id: str
    keep_alive: int = 10
    clean_session: bool = True
    last_will: Optional[LastWill] = None
    login: Optional[Login] = None
    protocol: Protocol = Protocol.V4

    def set_login(self, username: str, password: str) -> Connect:
        self.login = Login(username, password)
        return self

    def _len(self) -> int:
        # protocol name, protocol level, connect flags, keep alive
        length = 2 + len(_PROTOCOL_NAME) + 1 + 1 + 2
        length += 2 + len(self.client_id.encode("utf-8"))
        if self.last_will is not None:
            length += self.last_will._len()
        if self.login is not None:
            length += self.login._len()
        return length

    @classmethod
    def read(cls, fixed_header: FixedHeader, data) -> Connect:
        reader = ByteReader(data)
        reader.advance(fixed_header.fixed_header_len)

        protocol_name = reader.read_mqtt_string()
        protocol_level = reader.read_u8()
        if protocol_name != _PROTOCOL_NAME:
            raise InvalidProtocol()
        try:
            protocol = Protocol(protocol_level)
        except ValueError:
            raise InvalidProtocolLevel(protocol_level) from None

        connect_flags = reader.read_u8()
        clean_session = bool(connect_flags & 0b10)
        keep_alive = reader.read_u16()
        client_id = reader.read_mqtt_string()
        last_will = LastWill._read(connect_flags, reader)
        login = Login._read(connect_flags, reader)

        return cls(
            client_id=client_id,
            keep_alive=keep_alive,
            clean_session=clean_session,
            last_will=last_will,
            login=login,
            protocol=protocol,
        )

    def write(self, buffer: bytearray) -> int:
        """Append the encoded packet to ``buffer``; return its size."""
        start = len(buffer)
        length = self._len()
        buffer.append(0b0001_0000)
        count = write_remaining_length(buffer, length)
        write_mqtt_string(buffer, _PROTOCOL_NAME)
        buffer.append(self.protocol.value)

        flags_index = start + 1 + count + 2 + len(_PROTOCOL_NAME) + 1
        connect_flags = 0x02 if self.clean_session else 0
        buffer.append(connect_flags)
        buffer += (self.keep_alive & 0xFFFF).to_bytes(2, "big")
        write_mqtt_string(buffer, self.client_id)

        if self.last_will is not None:
            connect_flags |= self.last_will._write(buffer)
        if self.login is not None:
            connect_flags |= self.login._write(buffer)

        buffer[flags_index] = connect_flags
        return 1 + count + length

    def size(self) -> int:
        length = self._len()
        return 1 + len_len(length) + length