"""Bluetooth UUIDs in their 16-, 32- and 128-bit forms."""

from __future__ import annotations

import re
import struct
from dataclasses import dataclass
from enum import IntEnum
from typing import Union

from jeronibot.byteutil import put_le16

GENERIC_AUDIO_UUID = "00001203-0000-1000-8000-00805f9b34fb"

HSP_HS_UUID = "00001108-0000-1000-8000-00805f9b34fb"
HSP_AG_UUID = "00001112-0000-1000-8000-00805f9b34fb"

HFP_HS_UUID = "0000111e-0000-1000-8000-00805f9b34fb"
HFP_AG_UUID = "0000111f-0000-1000-8000-00805f9b34fb"

ADVANCED_AUDIO_UUID = "0000110d-0000-1000-8000-00805f9b34fb"

A2DP_SOURCE_UUID = "0000110a-0000-1000-8000-00805f9b34fb"
A2DP_SINK_UUID = "0000110b-0000-1000-8000-00805f9b34fb"

AVRCP_REMOTE_UUID = "0000110e-0000-1000-8000-00805f9b34fb"
AVRCP_TARGET_UUID = "0000110c-0000-1000-8000-00805f9b34fb"

PANU_UUID = "00001115-0000-1000-8000-00805f9b34fb"
NAP_UUID = "00001116-0000-1000-8000-00805f9b34fb"
GN_UUID = "00001117-0000-1000-8000-00805f9b34fb"
BNEP_SVC_UUID = "0000000f-0000-1000-8000-00805f9b34fb"

PNPID_UUID = "00002a50-0000-1000-8000-00805f9b34fb"
DEVICE_INFORMATION_UUID = "0000180a-0000-1000-8000-00805f9b34fb"

GATT_UUID = "00001801-0000-1000-8000-00805f9b34fb"
IMMEDIATE_ALERT_UUID = "00001802-0000-1000-8000-00805f9b34fb"
LINK_LOSS_UUID = "00001803-0000-1000-8000-00805f9b34fb"
TX_POWER_UUID = "00001804-0000-1000-8000-00805f9b34fb"
BATTERY_UUID = "0000180f-0000-1000-8000-00805f9b34fb"
SCAN_PARAMETERS_UUID = "00001813-0000-1000-8000-00805f9b34fb"

SAP_UUID = "0000112D-0000-1000-8000-00805f9b34fb"

HEART_RATE_UUID = "0000180d-0000-1000-8000-00805f9b34fb"
HEART_RATE_MEASUREMENT_UUID = "00002a37-0000-1000-8000-00805f9b34fb"
BODY_SENSOR_LOCATION_UUID = "00002a38-0000-1000-8000-00805f9b34fb"
HEART_RATE_CONTROL_POINT_UUID = "00002a39-0000-1000-8000-00805f9b34fb"

HEALTH_THERMOMETER_UUID = "00001809-0000-1000-8000-00805f9b34fb"
TEMPERATURE_MEASUREMENT_UUID = "00002a1c-0000-1000-8000-00805f9b34fb"
TEMPERATURE_TYPE_UUID = "00002a1d-0000-1000-8000-00805f9b34fb"
INTERMEDIATE_TEMPERATURE_UUID = "00002a1e-0000-1000-8000-00805f9b34fb"
MEASUREMENT_INTERVAL_UUID = "00002a21-0000-1000-8000-00805f9b34fb"

CYCLING_SC_UUID = "00001816-0000-1000-8000-00805f9b34fb"
CSC_MEASUREMENT_UUID = "00002a5b-0000-1000-8000-00805f9b34fb"
CSC_FEATURE_UUID = "00002a5c-0000-1000-8000-00805f9b34fb"
SENSOR_LOCATION_UUID = "00002a5d-0000-1000-8000-00805f9b34fb"
SC_CONTROL_POINT_UUID = "00002a55-0000-1000-8000-00805f9b34fb"

RFCOMM_UUID_STR = "00000003-0000-1000-8000-00805f9b34fb"

HDP_UUID = "00001400-0000-1000-8000-00805f9b34fb"
HDP_SOURCE_UUID = "00001401-0000-1000-8000-00805f9b34fb"
HDP_SINK_UUID = "00001402-0000-1000-8000-00805f9b34fb"

HID_UUID = "00001124-0000-1000-8000-00805f9b34fb"

DUN_GW_UUID = "00001103-0000-1000-8000-00805f9b34fb"

GAP_UUID = "00001800-0000-1000-8000-00805f9b34fb"
PNP_UUID = "00001200-0000-1000-8000-00805f9b34fb"

SPP_UUID = "00001101-0000-1000-8000-00805f9b34fb"

OBEX_SYNC_UUID = "00001104-0000-1000-8000-00805f9b34fb"
OBEX_OPP_UUID = "00001105-0000-1000-8000-00805f9b34fb"
OBEX_FTP_UUID = "00001106-0000-1000-8000-00805f9b34fb"
OBEX_PCE_UUID = "0000112e-0000-1000-8000-00805f9b34fb"
OBEX_PSE_UUID = "0000112f-0000-1000-8000-00805f9b34fb"
OBEX_PBAP_UUID = "00001130-0000-1000-8000-00805f9b34fb"
OBEX_MAS_UUID = "00001132-0000-1000-8000-00805f9b34fb"
OBEX_MNS_UUID = "00001133-0000-1000-8000-00805f9b34fb"
OBEX_MAP_UUID = "00001134-0000-1000-8000-00805f9b34fb"

# GATT attribute types
GATT_PRIM_SVC_UUID = 0x2800
GATT_SND_SVC_UUID = 0x2801
GATT_INCLUDE_UUID = 0x2802
GATT_CHARAC_UUID = 0x2803

# GATT characteristic types
GATT_CHARAC_DEVICE_NAME = 0x2A00
GATT_CHARAC_APPEARANCE = 0x2A01
GATT_CHARAC_PERIPHERAL_PRIV_FLAG = 0x2A02
GATT_CHARAC_RECONNECTION_ADDRESS = 0x2A03
GATT_CHARAC_PERIPHERAL_PREF_CONN = 0x2A04
GATT_CHARAC_SERVICE_CHANGED = 0x2A05
GATT_CHARAC_SYSTEM_ID = 0x2A23
GATT_CHARAC_MODEL_NUMBER_STRING = 0x2A24
GATT_CHARAC_SERIAL_NUMBER_STRING = 0x2A25
GATT_CHARAC_FIRMWARE_REVISION_STRING = 0x2A26
GATT_CHARAC_HARDWARE_REVISION_STRING = 0x2A27
GATT_CHARAC_SOFTWARE_REVISION_STRING = 0x2A28
GATT_CHARAC_MANUFACTURER_NAME_STRING = 0x2A29
GATT_CHARAC_PNP_ID = 0x2A50

# GATT characteristic descriptors
GATT_CHARAC_EXT_PROPER_UUID = 0x2900
GATT_CHARAC_USER_DESC_UUID = 0x2901
GATT_CLIENT_CHARAC_CFG_UUID = 0x2902
GATT_SERVER_CHARAC_CFG_UUID = 0x2903
GATT_CHARAC_FMT_UUID = 0x2904
GATT_CHARAC_AGREG_FMT_UUID = 0x2905
GATT_CHARAC_VALID_RANGE_UUID = 0x2906
GATT_EXTERNAL_REPORT_REFERENCE = 0x2907
GATT_REPORT_REFERENCE = 0x2908

MAX_LEN_UUID_STR = 37

_BASE_UUID = bytes(
    [0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x10, 0x00,
     0x80, 0x00, 0x00, 0x80, 0x5F, 0x9B, 0x34, 0xFB]
)

_BASE_UUID128_RE = re.compile(r"0000[0-9a-fA-F]{4}-0000-1000-8000-00805[fF]9[bB]34[fF][bB]")
_UUID128_RE = re.compile(
    r"[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}"
)
_HEX_NUMBER_RE = re.compile(r"\s*([+-]?)(?:0[xX])?([0-9a-fA-F]+)")


class UuidType(IntEnum):
    """Width of a Bluetooth UUID in bits."""

    UNSPEC = 0
    UUID16 = 16
    UUID32 = 32
    UUID128 = 128


def _strtol16(text: str) -> tuple[int, str]:
    """Parse a leading base-16 number; return its value and the unparsed rest."""
    match = _HEX_NUMBER_RE.match(text)
    if match is None:
        return 0, text
    value = int(match.group(2), 16)
    if match.group(1) == "-":
        value = -value
    return value, text[match.end():]


def _is_uuid128(text: str) -> bool:
    return len(text) == 36 and all(text[i] == "-" for i in (8, 13, 18, 23))


@dataclass(frozen=True)
class BtUuid:
    """A Bluetooth UUID.

    ``value`` is an int for 16- and 32-bit UUIDs and 16 big-endian bytes for
    128-bit UUIDs.
    """

    type: UuidType
    value: Union[int, bytes] = 0

    def __post_init__(self) -> None:
        kind = UuidType(self.type)
        object.__setattr__(self, "type", kind)
        if kind is UuidType.UUID128:
            if not isinstance(self.value, (bytes, bytearray)) or len(self.value) != 16:
                raise ValueError("a 128-bit UUID needs 16 bytes")
            object.__setattr__(self, "value", bytes(self.value))
            return
        if not isinstance(self.value, int):
            raise TypeError("a 16- or 32-bit UUID needs an integer value")
        limit = {UuidType.UUID16: 0xFFFF, UuidType.UUID32: 0xFFFFFFFF}.get(kind, 0)
        if not 0 <= self.value <= limit:
            raise ValueError(f"UUID value {self.value:#x} out of range for {kind.name}")

    @classmethod
    def uuid16(cls, value: int) -> BtUuid:
        """Create a 16-bit UUID."""
        return cls(UuidType.UUID16, value)

    @classmethod
    def uuid32(cls, value: int) -> BtUuid:
        """Create a 32-bit UUID."""
        return cls(UuidType.UUID32, value)

    @classmethod
    def uuid128(cls, value: Union[int, bytes, bytearray]) -> BtUuid:
        """Create a 128-bit UUID from 16 big-endian bytes or an integer."""
        if isinstance(value, int):
            if not 0 <= value < 1 << 128:
                raise ValueError("128-bit UUID value out of range")
            value = value.to_bytes(16, "big")
        return cls(UuidType.UUID128, bytes(value))

    @classmethod
    def from_string(cls, text: str) -> BtUuid:
        """Parse a UUID string.

        UUIDs on the Bluetooth base become 16-bit UUIDs; other 36-character
        forms become 128-bit; 8 or 10 characters give 32-bit, 4 or 6 give
        16-bit. Raises ValueError for anything else.
        """
        if _is_uuid128(text) and _BASE_UUID128_RE.match(text):
            value, rest = _strtol16(text[4:])
            if rest == "" or rest.startswith("-"):
                return cls.uuid16(value & 0xFFFF)
            raise ValueError(f"invalid UUID string: {text!r}")
        if _is_uuid128(text):
            if not _UUID128_RE.fullmatch(text):
                raise ValueError(f"invalid UUID string: {text!r}")
            return cls.uuid128(bytes.fromhex(text.replace("-", "")))
        if len(text) in (8, 10):
            value, rest = _strtol16(text)
            if rest:
                raise ValueError(f"invalid UUID string: {text!r}")
            return cls.uuid32(value & 0xFFFFFFFF)
        if len(text) in (4, 6):
            value, rest = _strtol16(text)
            if rest and not rest.startswith("-"):
                raise ValueError(f"invalid UUID string: {text!r}")
            return cls.uuid16(value & 0xFFFF)
        raise ValueError(f"invalid UUID string: {text!r}")

    def to_uuid128(self) -> BtUuid:
        """Return the 128-bit form, placing short UUIDs on the Bluetooth base."""
        if self.type is UuidType.UUID128:
            return self
        if self.type is UuidType.UUID32:
            return BtUuid.uuid128(struct.pack(">I", self.value) + _BASE_UUID[4:])
        if self.type is UuidType.UUID16:
            return BtUuid.uuid128(_BASE_UUID[:2] + struct.pack(">H", self.value) + _BASE_UUID[4:])
        raise ValueError("UUID type is not set")

    def compare(self, other: BtUuid) -> int:
        """Compare the 128-bit forms: negative, zero or positive."""
        mine = self.to_uuid128().value
        theirs = other.to_uuid128().value
        return (mine > theirs) - (mine < theirs)

    def to_le(self) -> bytes:
        """Encode little-endian: 2 bytes for 16-bit UUIDs, 16 otherwise."""
        if self.type is UuidType.UUID16:
            return put_le16(self.value)
        if self.type in (UuidType.UUID32, UuidType.UUID128):
            return self.to_uuid128().value[::-1]
        raise ValueError("UUID type is not set")

    def __len__(self) -> int:
        return int(self.type) // 8

    def __str__(self) -> str:
        if self.type is UuidType.UUID16:
            return f"{self.value:04x}"
        if self.type is UuidType.UUID32:
            return f"{self.value:08x}"
        if self.type is UuidType.UUID128:
            h = self.value.hex()
            return f"{h[:8]}-{h[8:12]}-{h[12:16]}-{h[16:20]}-{h[20:]}"
        raise ValueError(f"Type of UUID ({int(self.type):x}) unknown.")


def uuid_strcmp(a: str, b: str) -> int:
    """Compare two UUID strings ignoring case: negative, zero or positive."""
    left, right = a.lower(), b.lower()
    return (left > right) - (left < right)