"""
Portfolio Backend — Password Hashing and Login Tokens
=======================================================

What:  bcrypt password hashing and HS256 JWT issue/decode.
Why:   Keeps the two cryptographic primitives behind small functions so the
       auth service stays readable and tests can call them directly.
How:   bcrypt for salted, slow one-way hashes; PyJWT for signed tokens.

Token claims:
    {"email": "<user email>", "iat": <issued at>, "exp": <expiry>}

    The email is the only application claim. Tokens are issued at login and
    are not required by any endpoint of this API.

These functions are synchronous. bcrypt is CPU-bound by design, so callers
on the event loop run hash/verify through asyncio.to_thread.
"""

import re
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

import bcrypt
import jwt

JWT_ALGORITHM = "HS256"

_UNIT_SECONDS = {
    "s": 1,
    "m": 60,
    "h": 60 * 60,
    "d": 24 * 60 * 60,
    "w": 7 * 24 * 60 * 60,
}
_EXPIRES_IN_PATTERN = re.compile(r"^\s*(\d+)\s*([smhdw]?)\s*$", re.IGNORECASE)


def parse_expires_in(value: str) -> timedelta:
    """
    Converts an expiry setting into a timedelta.

    Accepts plain seconds ("3600") or a count with a unit suffix
    ("30m", "12h", "1d", "2w").

    Raises:
        ValueError: value is empty, negative, zero, or has an unknown unit.
    """
    match = _EXPIRES_IN_PATTERN.match(value or "")
    if not match:
        raise ValueError(
            f"Invalid expiry '{value}'. Use seconds or a number followed by s, m, h, d or w."
        )
    amount = int(match.group(1))
    unit = (match.group(2) or "s").lower()
    if amount <= 0:
        raise ValueError(f"Invalid expiry '{value}'. Token lifetime must be positive.")
    return timedelta(seconds=amount * _UNIT_SECONDS[unit])


# bcrypt only reads the first 72 bytes; newer releases raise instead of truncating
BCRYPT_MAX_BYTES = 72


def _password_bytes(password: str) -> bytes:
    return password.encode("utf-8")[:BCRYPT_MAX_BYTES]


def hash_password(password: str, rounds: int = 10) -> str:
    """Returns a salted bcrypt hash of `password` as a UTF-8 string."""
    salt = bcrypt.gensalt(rounds=rounds)
    return bcrypt.hashpw(_password_bytes(password), salt).decode("utf-8")


def verify_password(password: str, hashed: str) -> bool:
    """
    Checks `password` against a stored bcrypt hash.

    A stored value that is not a bcrypt hash counts as a mismatch.
    """
    try:
        return bcrypt.checkpw(_password_bytes(password), hashed.encode("utf-8"))
    except ValueError:
        return False


def create_access_token(
    email: str,
    secret: str,
    expires_in: str,
    now: Optional[datetime] = None,
) -> str:
    """Signs a token carrying `email`, valid for `expires_in` from `now`."""
    issued_at = now or datetime.now(timezone.utc)
    payload = {
        "email": email,
        "iat": issued_at,
        "exp": issued_at + parse_expires_in(expires_in),
    }
    return jwt.encode(payload, secret, algorithm=JWT_ALGORITHM)


def decode_access_token(token: str, secret: str) -> Dict[str, Any]:
    """
    Verifies signature and expiry and returns the claims.

    Raises:
        jwt.ExpiredSignatureError: the token is past its `exp`.
        jwt.PyJWTError: any other verification failure.
    """
    return jwt.decode(token, secret, algorithms=[JWT_ALGORITHM])
