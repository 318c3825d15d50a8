"""ATT protocol constants and error descriptions."""

from __future__ import annotations

from enum import IntEnum, IntFlag

DEFAULT_LE_MTU = 23
MAX_LE_MTU = 517
MAX_VALUE_LEN = 512

ALL_REQUESTS = 0x00


class SecurityLevel(IntEnum):
    """ATT link security levels."""

    AUTO = 0
    LOW = 1
    MEDIUM = 2
    HIGH = 3


class AttOpcode(IntEnum):
    """ATT protocol opcodes."""

    ERROR_RSP = 0x01
    MTU_REQ = 0x02
    MTU_RSP = 0x03
    FIND_INFO_REQ = 0x04
    FIND_INFO_RSP = 0x05
    FIND_BY_TYPE_VAL_REQ = 0x06
    FIND_BY_TYPE_VAL_RSP = 0x07
    READ_BY_TYPE_REQ = 0x08
    READ_BY_TYPE_RSP = 0x09
    READ_REQ = 0x0A
    READ_RSP = 0x0B
    READ_BLOB_REQ = 0x0C
    READ_BLOB_RSP = 0x0D
    READ_MULT_REQ = 0x0E
    READ_MULT_RSP = 0x0F
    READ_BY_GRP_TYPE_REQ = 0x10
    READ_BY_GRP_TYPE_RSP = 0x11
    WRITE_REQ = 0x12
    WRITE_RSP = 0x13
    WRITE_CMD = 0x52
    SIGNED_WRITE_CMD = 0xD2
    PREP_WRITE_REQ = 0x16
    PREP_WRITE_RSP = 0x17
    EXEC_WRITE_REQ = 0x18
    EXEC_WRITE_RSP = 0x19
    HANDLE_VAL_NOT = 0x1B
    HANDLE_VAL_IND = 0x1D
    HANDLE_VAL_CONF = 0x1E


class AttError(IntEnum):
    """ATT error codes, including the common profile and service errors."""

    INVALID_HANDLE = 0x01
    READ_NOT_PERMITTED = 0x02
    WRITE_NOT_PERMITTED = 0x03
    INVALID_PDU = 0x04
    AUTHENTICATION = 0x05
    REQUEST_NOT_SUPPORTED = 0x06
    INVALID_OFFSET = 0x07
    AUTHORIZATION = 0x08
    PREPARE_QUEUE_FULL = 0x09
    ATTRIBUTE_NOT_FOUND = 0x0A
    ATTRIBUTE_NOT_LONG = 0x0B
    INSUFFICIENT_ENCRYPTION_KEY_SIZE = 0x0C
    INVALID_ATTRIBUTE_VALUE_LEN = 0x0D
    UNLIKELY = 0x0E
    INSUFFICIENT_ENCRYPTION = 0x0F
    UNSUPPORTED_GROUP_TYPE = 0x10
    INSUFFICIENT_RESOURCES = 0x11
    CCC_IMPROPERLY_CONFIGURED = 0xFD
    ALREADY_IN_PROGRESS = 0xFE
    OUT_OF_RANGE = 0xFF

    @property
    def description(self) -> str:
        """Human-readable text for this error."""
        return _DESCRIPTIONS[self]


_DESCRIPTIONS = {
    AttError.ATTRIBUTE_NOT_FOUND: "Attribute not found",
    AttError.ATTRIBUTE_NOT_LONG: "Attribute not long",
    AttError.AUTHENTICATION: "Authentication required",
    AttError.AUTHORIZATION: "Authorization required",
    AttError.INSUFFICIENT_ENCRYPTION_KEY_SIZE: "Insufficient encryption key size",
    AttError.INSUFFICIENT_ENCRYPTION: "Insufficient encryption",
    AttError.INSUFFICIENT_RESOURCES: "Insufficient resources",
    AttError.INVALID_ATTRIBUTE_VALUE_LEN: "Invalid attribute value length",
    AttError.INVALID_HANDLE: "Invalid handle",
    AttError.INVALID_OFFSET: "Invalid offset",
    AttError.INVALID_PDU: "Invalid PDU",
    AttError.PREPARE_QUEUE_FULL: "Prepare queue full",
    AttError.READ_NOT_PERMITTED: "Read not permitted",
    AttError.REQUEST_NOT_SUPPORTED: "Request not supported",
    AttError.UNLIKELY: "Unlikely error",
    AttError.UNSUPPORTED_GROUP_TYPE: "Group type not supported",
    AttError.WRITE_NOT_PERMITTED: "Write not permitted",
    AttError.ALREADY_IN_PROGRESS: "Already in progress",
    AttError.CCC_IMPROPERLY_CONFIGURED: "CCC improperly configured",
    AttError.OUT_OF_RANGE: "Out of range",
}

_UNKNOWN = "Unknown error type"


class Permission(IntFlag):
    """ATT attribute permission bits."""

    READ = 0x01
    WRITE = 0x02
    READ_ENCRYPT = 0x04
    WRITE_ENCRYPT = 0x08
    ENCRYPT = READ_ENCRYPT | WRITE_ENCRYPT
    READ_AUTHEN = 0x10
    WRITE_AUTHEN = 0x20
    AUTHEN = READ_AUTHEN | WRITE_AUTHEN
    AUTHOR = 0x40
    NONE = 0x80


class CharacteristicProperty(IntFlag):
    """GATT characteristic property bits."""

    BROADCAST = 0x01
    READ = 0x02
    WRITE_WITHOUT_RESP = 0x04
    WRITE = 0x08
    NOTIFY = 0x10
    INDICATE = 0x20
    AUTH = 0x40
    EXT_PROP = 0x80


class CharacteristicExtendedProperty(IntFlag):
    """GATT characteristic extended property bits."""

    RELIABLE_WRITE = 0x01
    WRITABLE_AUX = 0x02
    ENC_READ = 0x04
    ENC_WRITE = 0x08
    ENC = ENC_READ | ENC_WRITE
    AUTH_READ = 0x10
    AUTH_WRITE = 0x20
    AUTH = AUTH_READ | AUTH_WRITE


def error_to_string(ecode: int) -> str:
    """Describe an ATT error code; the code is taken as one byte."""
    try:
        return AttError(ecode & 0xFF).description
    except ValueError:
        return _UNKNOWN