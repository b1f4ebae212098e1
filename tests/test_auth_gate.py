"""Tests for turning Authorization headers into caller identities."""

import pytest

from services.auth_gate import (
    AuthStatus,
    MalformedAuthorizationError,
    parse_authorization,
    resolve_caller,
)
from services.tokens import TokenService

from conftest import TEST_SECRET


@pytest.fixture
def token_service():
    return TokenService(TEST_SECRET)


def test_parse_bearer_header():
    assert parse_authorization("Bearer abc.def.ghi") == "abc.def.ghi"
    assert parse_authorization("bearer   abc") == "abc"


@pytest.mark.parametrize("header", [None, "", "   "])
def test_parse_missing_header(header):
    assert parse_authorization(header) is None


@pytest.mark.parametrize("header", ["Bearer", "Bearer   ", "abc.def.ghi", "Basic dXNlcjpwYXNz"])
def test_parse_malformed_header(header):
    with pytest.raises(MalformedAuthorizationError):
        parse_authorization(header)


def test_no_header_is_anonymous(token_service):
    result = resolve_caller(None, token_service)

    assert result.status is AuthStatus.ANONYMOUS
    assert result.caller is None
    assert not result.is_authenticated


def test_valid_token_identifies_caller(token_service):
    token = token_service.issue("1", "Alice")

    result = resolve_caller(f"Bearer {token}", token_service)

    assert result.status is AuthStatus.IDENTIFIED
    assert result.caller.user_id == "1"
    assert result.caller.name == "Alice"
    assert result.is_authenticated


@pytest.mark.parametrize("header", ["Bearer garbage", "Bearer", "Token abc"])
def test_bad_credentials_are_rejected_without_raising(token_service, header, caplog):
    result = resolve_caller(header, token_service)

    assert result.status is AuthStatus.REJECTED
    assert result.caller is None
    assert result.reason
    assert any(r.levelname == "WARNING" for r in caplog.records)


def test_expired_token_is_rejected(token_service):
    token = TokenService(TEST_SECRET, ttl_seconds=-1).issue("1", "Alice")

    result = resolve_caller(f"Bearer {token}", token_service)

    assert result.status is AuthStatus.REJECTED
