import pytest

from jeronibot.att import AttError, error_to_string


@pytest.mark.parametrize(
    "code, text",
    [
        (AttError.INVALID_HANDLE, "Invalid handle"),
        (AttError.ATTRIBUTE_NOT_FOUND, "Attribute not found"),
        (AttError.UNLIKELY, "Unlikely error"),
        (AttError.UNSUPPORTED_GROUP_TYPE, "Group type not supported"),
        (AttError.OUT_OF_RANGE, "Out of range"),
        (AttError.CCC_IMPROPERLY_CONFIGURED, "CCC improperly configured"),
    ],
)
def test_known_codes(code, text):
    assert error_to_string(code) == text
    assert error_to_string(int(code)) == text


@pytest.mark.parametrize("code", [0x00, 0x12, 0xE0, 0xFC])
def test_unknown_codes(code):
    assert error_to_string(code) == "Unknown error type"


def test_every_error_has_a_description():
    for code in AttError:
        assert error_to_string(code) == code.description
        assert code.description != "Unknown error type"


def test_code_is_taken_as_one_byte():
    assert error_to_string(0x100 | AttError.INVALID_PDU) == error_to_string(AttError.INVALID_PDU)