# mqttframe

Encode and decode MQTT 3.1.1 control packets in plain Python, with no
dependencies outside the standard library.

## Modules

The package has no top-level re-exports. Import from the modules directly.

- `mqttframe.core` holds the shared enums `QoS`, `PacketType` and
  `Protocol`, and `FixedHeader` with `packet_type()` and `frame_length()`.
  It also has:
  - `check(stream, max_packet_size)`, which returns the fixed header of the
    first packet in `stream`. It raises `InsufficientBytes` when the packet
    is not complete yet. It raises `PayloadSizeLimitExceeded` when the
    remaining length is larger than `max_packet_size`.
  - `parse_fixed_header` and `variable_length`.
  - `write_remaining_length` and `len_len`.
  - `write_mqtt_bytes`, `write_mqtt_string` and `qos_from_byte`.
  - `ByteReader`, a sequential reader used when decoding.
- The packet modules each provide packet classes:
  - `mqttframe.connect`: `Connect`, `LastWill` and `Login`.
  - `mqttframe.connack`: `ConnAck` and `ConnectReturnCode`.
  - `mqttframe.publish`: `Publish`.
  - `mqttframe.acks`: `PubAck`, `PubRec`, `PubRel`, `PubComp` and
    `UnsubAck`.
  - `mqttframe.subscribe`: `Subscribe`, `SubscribeFilter` and
    `RetainForwardRule`.
  - `mqttframe.suback`: `SubAck`, `SubscribeReasonCode` and
    `subscribe_reason_code`.
  - `mqttframe.unsubscribe`: `Unsubscribe`.
  - `mqttframe.control`: `PingReq`, `PingResp` and `Disconnect`.

  Each class has a `size()` method. Each also has `write(buffer)`, which
  appends to a `bytearray` and returns the number of bytes written. Every
  class except the three in `control` has a classmethod
  `read(fixed_header, data)`.
- `mqttframe.packet` works on packets of any type:
  - `packet_size(packet)` returns the encoded size.
  - `read_packet(stream, max_size)` removes the next whole packet from the
    front of a `bytearray` and decodes it. If the packet is incomplete it
    raises `InsufficientBytes` and leaves the stream as it was.
  - `write_packet(packet, stream, max_size)` raises
    `OutgoingPacketTooLarge` when the packet is larger than `max_size`.
- `mqttframe.codec` has `Codec(max_incoming_size, max_outgoing_size)`.
  `decode(src)` returns `None` until a full packet is present. Any other
  decoding error is raised. `encode(item, dst)` appends the encoded packet.
- `mqttframe.topic` has `has_wildcards`, `valid_topic`, `valid_filter` and
  `matches`.
- `mqttframe.errors` defines the exceptions. All of them derive from
  `MqttError`.

## Installing

```
pip install .
```

## Example

```python
from mqttframe.codec import Codec
from mqttframe.core import QoS
from mqttframe.publish import Publish

codec = Codec(max_incoming_size=1024, max_outgoing_size=1024)

out = bytearray()
publish = Publish("a/b", QoS.AT_LEAST_ONCE, b"\xf1\xf2\xf3\xf4", pkid=10)
codec.encode(publish, out)

incoming = bytearray(out)
packet = codec.decode(incoming)   # the Publish, now removed from `incoming`
```

Topic matching:

```python
from mqttframe.topic import matches, valid_filter

valid_filter("sport/+/player")   # True
matches("a/b/c", "a/+/c")        # True
matches("$SYS/load", "+/load")   # False: topics starting with $ never match
```

## What it does not do

This package only converts packets to and from bytes. It has no client or
broker: it opens no network connections, and it does not send keep-alive
pings. It keeps no session state, and it does not allocate or track packet
identifiers. It does not encode MQTT 5 properties.

## Running the tests

```
pip install .[test]
pytest
```