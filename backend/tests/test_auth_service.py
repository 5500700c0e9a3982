"""
Portfolio Backend — Auth Service Unit Tests
=============================================

What:  Register/login business rules against the in-memory collection.

What we test:
    ✅ Registration stores a bcrypt hash, never the plain password
    ✅ Registering a taken email raises ConflictError
    ✅ Unknown email and wrong password both raise UnauthorizedError
    ✅ Successful login returns a token decoding to the email
    ✅ Store failures surface as DatabaseError
"""

from unittest.mock import AsyncMock

import pytest
from pymongo.errors import PyMongoError, ServerSelectionTimeoutError

from portfolio.config import settings
from portfolio.exceptions import ConflictError, DatabaseError, UnauthorizedError
from portfolio.schemas.auth import LoginRequest, RegisterRequest
from portfolio.security import decode_access_token, verify_password
from portfolio.services.auth_service import AuthService

ADA = RegisterRequest(name="Ada", email="ada@example.com", password="analytical")


class TestRegister:

    def setup_method(self):
        self.service = AuthService()

    @pytest.mark.asyncio
    async def test_register_stores_hashed_password(self, fake_db):
        result = await self.service.register(fake_db, ADA)

        assert result.success is True
        assert result.message == "User registered successfully"
        [user] = fake_db["users"].documents
        assert user["name"] == "Ada"
        assert user["email"] == "ada@example.com"
        assert user["password"] != "analytical"
        assert verify_password("analytical", user["password"])

    @pytest.mark.asyncio
    async def test_register_duplicate_email_conflicts(self, fake_db):
        await self.service.register(fake_db, ADA)

        with pytest.raises(ConflictError, match="User already exists"):
            await self.service.register(
                fake_db, RegisterRequest(name="Other", email=ADA.email, password="x")
            )
        assert len(fake_db["users"].documents) == 1

    @pytest.mark.asyncio
    async def test_register_store_failure(self, fake_db):
        fake_db["users"].find_one = AsyncMock(
            side_effect=ServerSelectionTimeoutError("no servers")
        )
        with pytest.raises(DatabaseError):
            await self.service.register(fake_db, ADA)


class TestLogin:

    def setup_method(self):
        self.service = AuthService()

    @pytest.mark.asyncio
    async def test_login_success_returns_token(self, fake_db):
        await self.service.register(fake_db, ADA)

        result = await self.service.login(
            fake_db, LoginRequest(email=ADA.email, password="analytical")
        )

        assert result.success is True
        assert result.message == "Login successful"
        claims = decode_access_token(result.token, settings.jwt_secret)
        assert claims["email"] == "ada@example.com"

    @pytest.mark.asyncio
    async def test_login_wrong_password(self, fake_db):
        await self.service.register(fake_db, ADA)

        with pytest.raises(UnauthorizedError):
            await self.service.login(fake_db, LoginRequest(email=ADA.email, password="babbage"))

    @pytest.mark.asyncio
    async def test_login_unknown_email(self, fake_db):
        with pytest.raises(UnauthorizedError) as exc_info:
            await self.service.login(
                fake_db, LoginRequest(email="nobody@example.com", password="x")
            )
        assert exc_info.value.message == "Invalid email or password"

    @pytest.mark.asyncio
    async def test_login_store_failure(self, fake_db):
        fake_db["users"].find_one = AsyncMock(side_effect=PyMongoError("boom"))

        with pytest.raises(DatabaseError):
            await self.service.login(fake_db, LoginRequest(email=ADA.email, password="x"))

    @pytest.mark.asyncio
    async def test_login_with_password_over_72_bytes(self, fake_db):
        long_password = "p" * 80
        await self.service.register(
            fake_db, RegisterRequest(name="Ada", email=ADA.email, password=long_password)
        )

        result = await self.service.login(
            fake_db, LoginRequest(email=ADA.email, password=long_password)
        )

        assert result.success is True
