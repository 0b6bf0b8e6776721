import pytest

from geminipy.status import StatusCode, StatusCategory, parse_status
from geminipy.errors import HeaderFormatError


EXPECTED_CODES = {
    "10": StatusCategory.INPUT,
    "11": StatusCategory.INPUT,
    "20": StatusCategory.SUCCESS,
    "30": StatusCategory.REDIRECT,
    "31": StatusCategory.REDIRECT,
    "40": StatusCategory.TEMPORARY_FAILURE,
    "41": StatusCategory.TEMPORARY_FAILURE,
    "42": StatusCategory.TEMPORARY_FAILURE,
    "43": StatusCategory.TEMPORARY_FAILURE,
    "44": StatusCategory.TEMPORARY_FAILURE,
    "50": StatusCategory.PERMANENT_FAILURE,
    "51": StatusCategory.PERMANENT_FAILURE,
    "52": StatusCategory.PERMANENT_FAILURE,
    "53": StatusCategory.PERMANENT_FAILURE,
    "59": StatusCategory.PERMANENT_FAILURE,
    "60": StatusCategory.CERTIFICATE_FAILURE,
    "61": StatusCategory.CERTIFICATE_FAILURE,
    "62": StatusCategory.CERTIFICATE_FAILURE,
}


def test_code_table_is_closed():
    assert {code.to_wire() for code in StatusCode} == set(EXPECTED_CODES)


@pytest.mark.parametrize("code", list(StatusCode))
def test_parse_inverts_to_wire(code):
    assert StatusCode.parse(code.to_wire()) is code


@pytest.mark.parametrize("text, category", EXPECTED_CODES.items())
def test_codes_map_to_their_category(text, category):
    assert parse_status(text).category is category


@pytest.mark.parametrize("text", ["99", "12", "00", "1", "200", "", "2x", " 2", "²0"])
def test_parse_rejects_unknown_or_malformed_codes(text):
    with pytest.raises(HeaderFormatError, match="status code"):
        StatusCode.parse(text)


def test_error_carries_offending_text():
    with pytest.raises(HeaderFormatError, match=r"\(99\)"):
        StatusCode.parse("99")


def test_category_predicates():
    assert StatusCode.SUCCESS.is_success
    assert StatusCode.SENSITIVE_INPUT.is_input
    assert StatusCode.PERMANENT_REDIRECT.is_redirect
    assert StatusCode.SLOW_DOWN.is_failure
    assert StatusCode.NOT_FOUND.is_failure
    assert StatusCode.CERTIFICATE_NOT_VALID.is_failure
    assert not StatusCode.SUCCESS.is_failure


def test_str_is_wire_form():
    assert str(StatusCode.NOT_FOUND) == "51"
