"""Command packets understood by the MiniPRO drive base."""

from __future__ import annotations

import struct
from enum import IntEnum

HEADER = 0x55AA

_CHECKSUM_SIZE = 2
_MAX_PAYLOAD = 0xFF - _CHECKSUM_SIZE


class PacketType(IntEnum):
    """Kind of packet."""

    COMMAND = 0x0A
    NOTIFICATION = 0x0D


class Operation(IntEnum):
    """Operation a command packet performs."""

    GET_SET_VALUE = 0x01
    CONTROL_DRIVE_BASE = 0x03


class Parameter(IntEnum):
    """Parameter an operation acts on."""

    ENABLE_REMOTE_CONTROL = 0x7A
    SET_DRIVE = 0x7B


def _check_byte(name: str, value: int) -> int:
    if not 0 <= value <= 0xFF:
        raise ValueError(f"{name} {value!r} does not fit in one byte")
    return int(value)


def _encode16(name: str, value: int) -> bytes:
    """Encode a signed or unsigned 16-bit value little-endian."""
    if not -0x8000 <= value <= 0xFFFF:
        raise ValueError(f"{name} {value!r} does not fit in 16 bits")
    return struct.pack("<H", value & 0xFFFF)


class Packet:
    """A framed packet: header, length, type, operation, parameter, payload, checksum."""

    def __init__(
        self,
        packet_type: int,
        operation: int,
        parameter: int,
        payload: bytes = b"",
    ) -> None:
        self.packet_type = _check_byte("packet type", packet_type)
        self.operation = _check_byte("operation", operation)
        self.parameter = _check_byte("parameter", parameter)
        self.payload = bytes(payload)
        if len(self.payload) > _MAX_PAYLOAD:
            raise ValueError(f"payload longer than {_MAX_PAYLOAD} bytes")

    @property
    def length(self) -> int:
        """Length field: payload plus checksum."""
        return len(self.payload) + _CHECKSUM_SIZE

    @property
    def checksum(self) -> int:
        """Ones' complement of the 16-bit sum of length, type, operation, parameter and payload."""
        total = self.length + self.packet_type + self.operation + self.parameter
        total += sum(self.payload)
        return (total & 0xFFFF) ^ 0xFFFF

    def to_bytes(self) -> bytes:
        """Serialise the packet as sent over the wire."""
        head = struct.pack(
            ">HBBBB",
            HEADER,
            self.length,
            self.packet_type,
            self.operation,
            self.parameter,
        )
        return head + self.payload + struct.pack("<H", self.checksum)

    def __bytes__(self) -> bytes:
        return self.to_bytes()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(type={self.packet_type:#04x}, "
            f"operation={self.operation:#04x}, parameter={self.parameter:#04x}, "
            f"payload={self.payload.hex()})"
        )


class Drive(Packet):
    """Set throttle and steering while in remote control mode."""

    def __init__(self, throttle: int, steering: int) -> None:
        super().__init__(
            PacketType.COMMAND,
            Operation.CONTROL_DRIVE_BASE,
            Parameter.SET_DRIVE,
            _encode16("throttle", throttle) + _encode16("steering", steering),
        )


class EnterRemoteControlMode(Packet):
    """Switch the drive base into remote control mode."""

    def __init__(self) -> None:
        super().__init__(
            PacketType.COMMAND,
            Operation.CONTROL_DRIVE_BASE,
            Parameter.ENABLE_REMOTE_CONTROL,
            struct.pack("<H", 0x0001),
        )


class ExitRemoteControlMode(Packet):
    """Return the drive base to normal mode."""

    def __init__(self) -> None:
        super().__init__(
            PacketType.COMMAND,
            Operation.CONTROL_DRIVE_BASE,
            Parameter.ENABLE_REMOTE_CONTROL,
            struct.pack("<H", 0x0000),
        )