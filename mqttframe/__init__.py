"""Encoding, decoding and framing of MQTT 3.1.1 control packets, plus topic helpers."""

__version__ = "0.1.0"