# fishcast/tests/services/test_security.py
import jwt
import pytest

from fishcast.app.core.security import InvalidTokenError, SecurityManager


@pytest.fixture
def security():
    return SecurityManager(secret="unit-test-secret", bcrypt_rounds=4)


def test_password_hash_round_trip(security):
    hashed = security.hash_password("tight lines")

    assert hashed != "tight lines"
    assert security.verify_password("tight lines", hashed)
    assert not security.verify_password("loose lines", hashed)


def test_verify_password_rejects_malformed_hash(security):
    assert not security.verify_password("anything", "not-a-bcrypt-hash")


def test_token_round_trip(security):
    token = security.create_access_token(42, "alice@example.com", "Alice")
    payload = security.decode_token(token)

    assert payload["user_id"] == 42
    assert payload["sub"] == "42"
    assert payload["email"] == "alice@example.com"
    assert payload["name"] == "Alice"


def test_expired_token_is_rejected():
    expired = SecurityManager(secret="unit-test-secret", expire_days=-1)
    token = expired.create_access_token(1, "a@example.com", "A")

    with pytest.raises(jwt.ExpiredSignatureError):
        expired.decode_token(token)


def test_token_signed_with_other_secret_is_rejected(security):
    token = SecurityManager(secret="someone-else").create_access_token(1, "a@example.com", "A")

    with pytest.raises(InvalidTokenError):
        security.decode_token(token)


def test_token_without_user_id_is_rejected(security):
    token = jwt.encode({"sub": "1"}, "unit-test-secret", algorithm="HS256")

    with pytest.raises(InvalidTokenError):
        security.decode_token(token)
