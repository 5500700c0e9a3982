"""
Portfolio Backend — Auth Service
==================================

What:  User registration and login against the `users` collection.
How:   Registration checks for an existing email, then stores a bcrypt hash.
       Login looks the user up by email, compares hashes, and signs a JWT.

Uniqueness of email is enforced only by the pre-insert lookup; there is no
unique index, so two concurrent registrations for one email can both pass.

Tokens are issued, never checked: no endpoint in this API requires one.
"""

import asyncio
import logging

from pymongo.asynchronous.database import AsyncDatabase

from portfolio.config import settings
from portfolio.database import USERS_COLLECTION
from portfolio.exceptions import ConflictError, DatabaseError, UnauthorizedError
from portfolio.schemas.auth import LoginRequest, LoginResponse, RegisterRequest
from portfolio.schemas.common import MessageResponse
from portfolio.security import create_access_token, hash_password, verify_password

logger = logging.getLogger(__name__)


class AuthService:

    async def register(self, db: AsyncDatabase, payload: RegisterRequest) -> MessageResponse:
        """
        Creates a user unless the email is already taken.

        Raises:
            ConflictError: a user with this email exists (→ 400).
            DatabaseError: store failure (→ 500).
        """
        users = db[USERS_COLLECTION]
        try:
            existing = await users.find_one({"email": payload.email})
        except Exception as e:
            logger.error("Error looking up user: %s", str(e), exc_info=True)
            raise DatabaseError(context={"error_type": type(e).__name__})

        if existing:
            raise ConflictError(message="User already exists")

        hashed = await asyncio.to_thread(hash_password, payload.password, settings.bcrypt_rounds)

        try:
            await users.insert_one(
                {"name": payload.name, "email": payload.email, "password": hashed}
            )
        except Exception as e:
            logger.error("Error registering user: %s", str(e), exc_info=True)
            raise DatabaseError(context={"error_type": type(e).__name__})

        logger.info("User registered")
        return MessageResponse(message="User registered successfully")

    async def login(self, db: AsyncDatabase, payload: LoginRequest) -> LoginResponse:
        """
        Verifies credentials and returns a signed token.

        Raises:
            UnauthorizedError: unknown email or wrong password (→ 401).
            DatabaseError: store failure (→ 500).
        """
        try:
            user = await db[USERS_COLLECTION].find_one({"email": payload.email})
        except Exception as e:
            logger.error("Error looking up user: %s", str(e), exc_info=True)
            raise DatabaseError(context={"error_type": type(e).__name__})

        if not user:
            raise UnauthorizedError(context={"reason": "unknown_email"})

        stored_hash = user.get("password") or ""
        if not await asyncio.to_thread(verify_password, payload.password, stored_hash):
            raise UnauthorizedError(context={"reason": "password_mismatch"})

        token = create_access_token(
            email=user["email"],
            secret=settings.jwt_secret,
            expires_in=settings.expires_in,
        )
        return LoginResponse(token=token)


auth_service = AuthService()
