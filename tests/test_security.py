import uuid
from datetime import timedelta

import pytest

from livefit.core.security import (
    InvalidTokenError,
    TokenExpiredError,
    create_access_token,
    decode_token,
    get_password_hash,
    verify_password,
)

SECRET = "unit-secret"


def test_password_hash_round_trip():
    hashed = get_password_hash("Abcd1234")
    assert hashed != "Abcd1234"
    assert verify_password("Abcd1234", hashed)
    assert not verify_password("Abcd12345", hashed)


def test_access_token_carries_user_id():
    user_id = uuid.uuid4()
    token = create_access_token(user_id, SECRET, "HS256", timedelta(minutes=5))
    payload = decode_token(token, SECRET, "HS256")
    assert payload["id"] == str(user_id)
    assert "exp" in payload


def test_expired_token_is_reported_as_expired():
    token = create_access_token(uuid.uuid4(), SECRET, "HS256", timedelta(seconds=-30))
    with pytest.raises(TokenExpiredError):
        decode_token(token, SECRET, "HS256")


def test_token_signed_with_other_secret_is_invalid():
    token = create_access_token(uuid.uuid4(), "other-secret", "HS256", timedelta(minutes=5))
    with pytest.raises(InvalidTokenError) as excinfo:
        decode_token(token, SECRET, "HS256")
    assert not isinstance(excinfo.value, TokenExpiredError)


def test_garbage_token_is_invalid():
    with pytest.raises(InvalidTokenError):
        decode_token("not.a.token", SECRET, "HS256")
