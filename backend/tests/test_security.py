"""
Portfolio Backend — Password Hashing and Token Tests
=====================================================

What we test:
    ✅ Expiry strings: plain seconds and unit suffixes; bad values rejected
    ✅ bcrypt hash verifies the right password and rejects others
    ✅ Tokens decode back to the email claim; expired tokens are refused
"""

from datetime import datetime, timedelta, timezone

import jwt
import pytest

from portfolio.security import (
    create_access_token,
    decode_access_token,
    hash_password,
    parse_expires_in,
    verify_password,
)

SECRET = "unit-test-secret-with-enough-length-0123"


class TestParseExpiresIn:

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("3600", timedelta(hours=1)),
            ("45s", timedelta(seconds=45)),
            ("30m", timedelta(minutes=30)),
            ("12h", timedelta(hours=12)),
            ("1d", timedelta(days=1)),
            ("2W", timedelta(weeks=2)),
        ],
    )
    def test_valid_values(self, value, expected):
        assert parse_expires_in(value) == expected

    @pytest.mark.parametrize("value", ["", "abc", "10y", "-5m", "0", "1.5h"])
    def test_invalid_values(self, value):
        with pytest.raises(ValueError):
            parse_expires_in(value)


class TestPasswordHashing:

    def test_hash_is_not_plaintext(self):
        hashed = hash_password("hunter2", rounds=4)
        assert hashed != "hunter2"
        assert hashed.startswith("$2")

    def test_same_password_gets_distinct_salts(self):
        assert hash_password("hunter2", rounds=4) != hash_password("hunter2", rounds=4)

    def test_verify_correct_password(self):
        hashed = hash_password("hunter2", rounds=4)
        assert verify_password("hunter2", hashed) is True

    def test_verify_wrong_password(self):
        hashed = hash_password("hunter2", rounds=4)
        assert verify_password("hunter3", hashed) is False

    def test_verify_against_non_bcrypt_value(self):
        assert verify_password("hunter2", "plain-text-password") is False

    def test_password_longer_than_72_bytes(self):
        password = "p" * 80
        hashed = hash_password(password, rounds=4)
        assert verify_password(password, hashed) is True

    def test_only_first_72_bytes_are_significant(self):
        hashed = hash_password("p" * 72 + "tail-one", rounds=4)
        assert verify_password("p" * 72 + "tail-two", hashed) is True
        assert verify_password("p" * 71, hashed) is False


class TestAccessToken:

    def test_token_carries_email(self):
        token = create_access_token("ada@example.com", SECRET, "1h")
        claims = decode_access_token(token, SECRET)
        assert claims["email"] == "ada@example.com"

    def test_expiry_follows_setting(self):
        issued = datetime(2026, 1, 1, tzinfo=timezone.utc)
        token = create_access_token("ada@example.com", SECRET, "2h", now=issued)
        claims = jwt.decode(
            token, SECRET, algorithms=["HS256"], options={"verify_exp": False}
        )
        assert claims["exp"] - claims["iat"] == 2 * 60 * 60

    def test_expired_token_rejected(self):
        issued = datetime.now(timezone.utc) - timedelta(days=2)
        token = create_access_token("ada@example.com", SECRET, "1d", now=issued)
        with pytest.raises(jwt.ExpiredSignatureError):
            decode_access_token(token, SECRET)

    def test_wrong_secret_rejected(self):
        token = create_access_token("ada@example.com", SECRET, "1h")
        with pytest.raises(jwt.PyJWTError):
            decode_access_token(token, "another-secret-with-enough-length-9876")
