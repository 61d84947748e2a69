"""Exceptions raised while encoding and decoding MQTT packets."""


class MqttError(Exception):
    """Base class for every serialization and deserialization error."""

    default_message = "MQTT error"

    def __init__(self, message=None):
        super().__init__(message if message is not None else self.default_message)


class NotConnect(MqttError):
    """A packet other than CONNECT arrived where CONNECT was expected."""

    def __init__(self, packet_type):
        self.packet_type = packet_type
        name = getattr(packet_type, "name", packet_type)
        super().__init__(f"Expected Connect, received: {name}")


class UnexpectedConnect(MqttError):
    default_message = "Unexpected Connect"


class InvalidConnectReturnCode(MqttError):
    def __init__(self, code):
        self.code = code
        super().__init__(f"Invalid Connect return code: {code}")


class InvalidProtocol(MqttError):
    default_message = "Invalid protocol"


class InvalidProtocolLevel(MqttError):
    def __init__(self, level):
        self.level = level
        super().__init__(f"Invalid protocol level: {level}")


class IncorrectPacketFormat(MqttError):
    default_message = "Incorrect packet format"


class InvalidPacketType(MqttError):
    def __init__(self, packet_type):
        self.packet_type = packet_type
        super().__init__(f"Invalid packet type: {packet_type}")


class InvalidQoS(MqttError):
    def __init__(self, qos):
        self.qos = qos
        super().__init__(f"Invalid QoS level: {qos}")


class InvalidSubscribeReasonCode(MqttError):
    def __init__(self, code):
        self.code = code
        super().__init__(f"Invalid subscribe reason code: {code}")


class PacketIdZero(MqttError):
    default_message = "Packet id Zero"


class PayloadSizeIncorrect(MqttError):
    default_message = "Payload size is incorrect"


class PayloadTooLong(MqttError):
    default_message = "payload is too long"


class PayloadSizeLimitExceeded(MqttError):
    def __init__(self, size):
        self.size = size
        super().__init__(f"payload size limit exceeded: {size}")


class PayloadRequired(MqttError):
    default_message = "Payload required"


class TopicNotUtf8(MqttError):
    default_message = "Topic is not UTF-8"


class BoundaryCrossed(MqttError):
    def __init__(self, length):
        self.length = length
        super().__init__(f"Promised boundary crossed: {length}")


class MalformedPacket(MqttError):
    default_message = "Malformed packet"


class MalformedRemainingLength(MqttError):
    default_message = "Malformed remaining length"


class EmptySubscription(MqttError):
    default_message = "A Subscribe packet must contain atleast one filter"


class InsufficientBytes(MqttError):
    """More bytes are needed; ``needed`` is the minimum additional count."""

    def __init__(self, needed):
        self.needed = needed
        super().__init__(f"At least {needed} more bytes required to frame packet")


class OutgoingPacketTooLarge(MqttError):
    def __init__(self, pkt_size, max_size):
        self.pkt_size = pkt_size
        self.max_size = max_size
        super().__init__(
            f"Cannot send packet of size '{pkt_size}'. "
            f"It's greater than the broker's maximum packet size of: '{max_size}'"
        )