"""Bearer Auth: header parsing order and messages.

Tests cover:
    - Each of the five header failures, in order
    - Case-sensitive scheme
    - Extra whitespace and trailing parts around the credential
"""

import pytest

from kanban_api.core.bearer_auth import (
    Rejected, decode_header_value, extract_bearer_credential,
)
from kanban_api.core.errors import BadRequestError


def _message(result) -> str:
    assert isinstance(result, Rejected)
    assert isinstance(result.error, BadRequestError)
    return result.error.message


def test_credential_extracted():
    assert extract_bearer_credential(b"Bearer abc123") == "abc123"


def test_surrounding_whitespace_is_ignored():
    assert extract_bearer_credential(b"  Bearer \t abc123  ") == "abc123"


def test_only_second_part_is_the_credential():
    assert extract_bearer_credential(b"Bearer abc extra") == "abc"


def test_missing_header():
    assert _message(extract_bearer_credential(None)) == "missing Authorization header"


@pytest.mark.parametrize("raw", [b"Bearer \xff", b"Bearer caf\xc3\xa9", b"Bearer a\x00b"])
def test_non_text_header_is_malformed(raw):
    assert _message(extract_bearer_credential(raw)) == "malformed Authorization header"


@pytest.mark.parametrize("raw", [b"", b"   ", b"\t"])
def test_blank_header_has_no_type(raw):
    assert _message(extract_bearer_credential(raw)) == "missing Authorization type"


@pytest.mark.parametrize("raw", [b"bearer abc", b"BEARER abc", b"Basic abc", b"Token abc"])
def test_scheme_must_be_exactly_bearer(raw):
    assert _message(extract_bearer_credential(raw)) == "unsupported Authorization type"


def test_scheme_checked_before_credential():
    assert _message(extract_bearer_credential(b"bearer")) == "unsupported Authorization type"


def test_bearer_without_credential():
    assert _message(extract_bearer_credential(b"Bearer   ")) == "missing Bearer token"


def test_decode_header_value_accepts_visible_ascii_and_tab():
    assert decode_header_value(b"Bearer\tx~!") == "Bearer\tx~!"


def test_decode_header_value_rejects_high_bytes():
    assert decode_header_value(b"\x7f") is None
