import struct

import pytest

from jeronibot.packet import (
    HEADER,
    Drive,
    EnterRemoteControlMode,
    ExitRemoteControlMode,
    Operation,
    Packet,
    PacketType,
    Parameter,
)


def _checksum_holds(raw: bytes) -> bool:
    body = raw[2:-2]
    checksum = struct.unpack("<H", raw[-2:])[0]
    return ((sum(body) & 0xFFFF) ^ 0xFFFF) == checksum


def test_enter_remote_control_mode_wire_bytes():
    assert EnterRemoteControlMode().to_bytes() == bytes.fromhex("55aa040a037a010073ff")


def test_header_is_big_endian_first():
    raw = ExitRemoteControlMode().to_bytes()
    assert raw[:2] == struct.pack(">H", HEADER)


def test_enter_and_exit_payloads():
    assert EnterRemoteControlMode().payload == struct.pack("<H", 1)
    assert ExitRemoteControlMode().payload == struct.pack("<H", 0)


def test_remote_control_fields():
    raw = ExitRemoteControlMode().to_bytes()
    assert raw[3] == PacketType.COMMAND
    assert raw[4] == Operation.CONTROL_DRIVE_BASE
    assert raw[5] == Parameter.ENABLE_REMOTE_CONTROL


def test_drive_payload_encodes_signed_values():
    packet = Drive(-1, 256)
    assert packet.payload == struct.pack("<hh", -1, 256)
    assert packet.parameter == Parameter.SET_DRIVE


@pytest.mark.parametrize("throttle,steering", [(0, 0), (-32768, 32767), (1000, -1000), (65535, 0)])
def test_drive_checksum_and_length_invariants(throttle, steering):
    raw = Drive(throttle, steering).to_bytes()
    assert raw[2] == len(raw) - 6
    assert len(raw) == 8 + 4
    assert _checksum_holds(raw)


@pytest.mark.parametrize("throttle,steering", [(-32769, 0), (0, 65536)])
def test_drive_rejects_out_of_range(throttle, steering):
    with pytest.raises(ValueError):
        Drive(throttle, steering)


def test_generic_packet_roundtrip_fields():
    payload = bytes(range(10))
    packet = Packet(PacketType.NOTIFICATION, Operation.GET_SET_VALUE, 0x42, payload)
    raw = bytes(packet)
    assert raw[6:-2] == payload
    assert raw[2] == packet.length == len(payload) + 2
    assert struct.unpack("<H", raw[-2:])[0] == packet.checksum
    assert _checksum_holds(raw)


def test_packet_rejects_too_long_payload():
    with pytest.raises(ValueError):
        Packet(PacketType.COMMAND, Operation.GET_SET_VALUE, 0, bytes(254))


def test_packet_rejects_wide_fields():
    with pytest.raises(ValueError):
        Packet(0x100, Operation.GET_SET_VALUE, 0)