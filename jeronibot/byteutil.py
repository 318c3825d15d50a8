"""Byte-order helpers, hex dumps, debug formatting and small-id bitmaps."""

from __future__ import annotations

import os
import stat
import struct
from collections.abc import Callable, Iterator

_DEBUG_MAX_LEN = 77
_HEXDUMP_WIDTH = 16
_UID_MASK = 0xFFFFFFFF

_LE16 = struct.Struct("<H")
_BE16 = struct.Struct(">H")
_LE32 = struct.Struct("<I")
_BE32 = struct.Struct(">I")
_LE64 = struct.Struct("<Q")
_BE64 = struct.Struct(">Q")


def debug(function: Callable[[str], object] | None, fmt: str | None, *args: object) -> None:
    """Format a printf-style message, cut to 77 characters, and pass it to ``function``."""
    if not function or not fmt:
        return
    function((fmt % args)[:_DEBUG_MAX_LEN])


def _printable(byte: int) -> str:
    return chr(byte) if 0x20 <= byte < 0x7F else "."


def hexdump(direction: str, data: bytes) -> Iterator[str]:
    """Yield hex-dump lines of 16 bytes each.

    The first line starts with ``direction``, later lines with a space.
    Each line holds the hex bytes, two spaces, then the printable characters.
    """
    prefix = direction
    for start in range(0, len(data), _HEXDUMP_WIDTH):
        chunk = data[start:start + _HEXDUMP_WIDTH]
        hex_part = "".join(f" {byte:02x}" for byte in chunk).ljust(_HEXDUMP_WIDTH * 3)
        text_part = "".join(_printable(byte) for byte in chunk).ljust(_HEXDUMP_WIDTH)
        yield f"{prefix}{hex_part}  {text_part}"
        prefix = " "


def is_directory(parent: str | os.PathLike[str], name: str) -> bool:
    """Return True if ``parent/name`` is a directory, without following symlinks."""
    try:
        info = os.lstat(os.path.join(parent, name))
    except OSError:
        return False
    return stat.S_ISDIR(info.st_mode)


def get_uid(bitmap: int, max_id: int) -> tuple[int, int]:
    """Reserve the lowest free id in 1..max_id of a 32-bit bitmap.

    Returns ``(uid, new_bitmap)``; ``uid`` is 0 and the bitmap unchanged when
    no id is available.
    """
    free = ~bitmap & _UID_MASK
    if not free:
        return 0, bitmap
    uid = (free & -free).bit_length()
    if uid > max_id:
        return 0, bitmap
    return uid, bitmap | (1 << (uid - 1))


def clear_uid(bitmap: int, uid: int) -> int:
    """Release ``uid`` in the bitmap; id 0 leaves it unchanged."""
    if not uid:
        return bitmap
    return bitmap & ~(1 << (uid - 1))


def get_le16(data: bytes, offset: int = 0) -> int:
    """Read an unsigned little-endian 16-bit value."""
    return _LE16.unpack_from(data, offset)[0]


def get_be16(data: bytes, offset: int = 0) -> int:
    """Read an unsigned big-endian 16-bit value."""
    return _BE16.unpack_from(data, offset)[0]


def get_le32(data: bytes, offset: int = 0) -> int:
    """Read an unsigned little-endian 32-bit value."""
    return _LE32.unpack_from(data, offset)[0]


def get_be32(data: bytes, offset: int = 0) -> int:
    """Read an unsigned big-endian 32-bit value."""
    return _BE32.unpack_from(data, offset)[0]


def get_le64(data: bytes, offset: int = 0) -> int:
    """Read an unsigned little-endian 64-bit value."""
    return _LE64.unpack_from(data, offset)[0]


def get_be64(data: bytes, offset: int = 0) -> int:
    """Read an unsigned big-endian 64-bit value."""
    return _BE64.unpack_from(data, offset)[0]


def put_le16(value: int) -> bytes:
    """Encode an unsigned 16-bit value little-endian."""
    return _LE16.pack(value)


def put_be16(value: int) -> bytes:
    """Encode an unsigned 16-bit value big-endian."""
    return _BE16.pack(value)


def put_le32(value: int) -> bytes:
    """Encode an unsigned 32-bit value little-endian."""
    return _LE32.pack(value)


def put_be32(value: int) -> bytes:
    """Encode an unsigned 32-bit value big-endian."""
    return _BE32.pack(value)


def put_le64(value: int) -> bytes:
    """Encode an unsigned 64-bit value little-endian."""
    return _LE64.pack(value)


def put_be64(value: int) -> bytes:
    """Encode an unsigned 64-bit value big-endian."""
    return _BE64.pack(value)