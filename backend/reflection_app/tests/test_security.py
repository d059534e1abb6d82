"""
Tests for password hashing and token helpers.
"""
from datetime import timedelta
from reflection_app.core.security import (
    create_access_token, decode_access_token, get_password_hash, verify_password
)


def test_password_hash_roundtrip():
    """Test hashing and verifying a password."""
    hashed = get_password_hash("secret")
    assert hashed != "secret"
    assert verify_password("secret", hashed)
    assert not verify_password("Secret", hashed)


def test_long_password_is_supported():
    """Test passwords past bcrypt's 72-byte limit."""
    password = "x" * 200
    hashed = get_password_hash(password)
    assert verify_password(password, hashed)
    assert not verify_password("x" * 199, hashed)


def test_verify_against_non_bcrypt_value():
    """Test that a malformed stored hash never verifies."""
    assert verify_password("secret", "not-a-hash") is False


def test_token_roundtrip():
    """Test that token claims survive encoding."""
    token = create_access_token({"sub": "alice", "user_id": 7})
    payload = decode_access_token(token)
    assert payload["sub"] == "alice"
    assert payload["user_id"] == 7
    assert "exp" in payload


def test_expired_token_is_rejected():
    """Test that an expired token decodes to None."""
    token = create_access_token({"user_id": 1}, expires_delta=timedelta(seconds=-10))
    assert decode_access_token(token) is None


def test_garbage_token_is_rejected():
    assert decode_access_token("not.a.token") is None
