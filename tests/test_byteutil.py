import struct

import pytest

from jeronibot import byteutil


def test_debug_formats_and_passes_message():
    received = []
    byteutil.debug(received.append, "value=%d name=%s", 7, "abc")
    assert received == ["value=7 name=abc"]


def test_debug_truncates_to_77_characters():
    received = []
    byteutil.debug(received.append, "%s", "x" * 200)
    assert received == ["x" * 77]


def test_debug_without_format_does_nothing():
    received = []
    byteutil.debug(received.append, None)
    byteutil.debug(received.append, "")
    assert received == []


def test_hexdump_short_line_layout():
    lines = list(byteutil.hexdump("<", b"AB"))
    assert len(lines) == 1
    line = lines[0]
    assert len(line) == 67
    assert line.startswith("< 41 42")
    assert line[7:51].strip() == ""
    assert line[51:53] == "AB"
    assert line[53:].strip() == ""


def test_hexdump_non_printable_shown_as_dot():
    line = next(byteutil.hexdump(">", b"\x00A\xff"))
    assert line[51:54] == ".A."


def test_hexdump_full_line_only_one():
    data = bytes(range(0x30, 0x40))
    lines = list(byteutil.hexdump(">", data))
    assert len(lines) == 1
    assert lines[0][51:67] == data.decode("ascii")


def test_hexdump_continuation_line_prefix():
    lines = list(byteutil.hexdump(">", b"a" * 17))
    assert len(lines) == 2
    assert lines[0][0] == ">"
    assert lines[1][0] == " "
    assert all(len(line) == 67 for line in lines)
    assert lines[1].startswith("  61")


def test_hexdump_empty_yields_nothing():
    assert list(byteutil.hexdump(">", b"")) == []


def test_is_directory(tmp_path):
    (tmp_path / "sub").mkdir()
    (tmp_path / "file.txt").write_text("data")
    assert byteutil.is_directory(tmp_path, "sub") is True
    assert byteutil.is_directory(tmp_path, "file.txt") is False
    assert byteutil.is_directory(tmp_path, "missing") is False


def test_get_uid_allocates_lowest_free():
    uid, bitmap = byteutil.get_uid(0, 8)
    assert (uid, bitmap) == (1, 1)
    uid, bitmap = byteutil.get_uid(bitmap, 8)
    assert (uid, bitmap) == (2, 3)


def test_get_uid_exhausted_by_max():
    assert byteutil.get_uid(0xFF, 8) == (0, 0xFF)


def test_get_uid_full_bitmap():
    assert byteutil.get_uid(0xFFFFFFFF, 32) == (0, 0xFFFFFFFF)


def test_clear_uid_round_trip():
    uid, bitmap = byteutil.get_uid(0, 8)
    uid2, bitmap = byteutil.get_uid(bitmap, 8)
    bitmap = byteutil.clear_uid(bitmap, uid)
    again, bitmap = byteutil.get_uid(bitmap, 8)
    assert again == uid
    assert uid2 != uid


def test_clear_uid_zero_is_noop():
    assert byteutil.clear_uid(5, 0) == 5


def test_put_le16_and_be16_bytes():
    assert byteutil.put_le16(0x1234) == b"\x34\x12"
    assert byteutil.put_be16(0x1234) == b"\x12\x34"


@pytest.mark.parametrize(
    "put, get, value",
    [
        (byteutil.put_le16, byteutil.get_le16, 0xBEEF),
        (byteutil.put_be16, byteutil.get_be16, 0xBEEF),
        (byteutil.put_le32, byteutil.get_le32, 0xDEADBEEF),
        (byteutil.put_be32, byteutil.get_be32, 0xDEADBEEF),
        (byteutil.put_le64, byteutil.get_le64, 0x0123456789ABCDEF),
        (byteutil.put_be64, byteutil.get_be64, 0x0123456789ABCDEF),
    ],
)
def test_round_trip(put, get, value):
    assert get(put(value)) == value
    assert get(b"\x00" + put(value), 1) == value


def test_le_and_be_are_reversed():
    value = 0x0102030405060708
    assert byteutil.put_le64(value) == byteutil.put_be64(value)[::-1]
    assert byteutil.put_le32(0x01020304) == byteutil.put_be32(0x01020304)[::-1]


def test_get_short_buffer_raises():
    with pytest.raises(struct.error):
        byteutil.get_le32(b"\x01\x02")


def test_put_out_of_range_raises():
    with pytest.raises(struct.error):
        byteutil.put_le16(0x10000)