"""OSC datagrams for the UseRight input toggle.

Packet: "/input/UseRight" padded to 16 bytes, ",i" type tag padded to 4,
one big-endian int32 (1 = pressed, 0 = released).
"""

from pythonosc.osc_message import OscMessage
from pythonosc.osc_message_builder import OscMessageBuilder

OSC_ADDRESS = "/input/UseRight"
DEST_HOST = "127.0.0.1"
PRESSED = 1
RELEASED = 0


def encode_value(value: int) -> bytes:
    builder = OscMessageBuilder(address=OSC_ADDRESS)
    builder.add_arg(int(value), OscMessageBuilder.ARG_TYPE_INT)
    return builder.build().dgram


def decode_value(dgram: bytes):
    msg = OscMessage(dgram)
    params = msg.params
    if len(params) != 1 or not isinstance(params[0], int):
        raise ValueError(f"Expected one int argument, got {params!r}")
    return msg.address, params[0]


def destination(port: int):
    return (DEST_HOST, int(port))
