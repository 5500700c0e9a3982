"""
Portfolio Backend — Authentication Schemas
============================================

Register/login request bodies. Email is kept a plain string; the store
lookup is an exact match on whatever the client sends.
"""

from pydantic import BaseModel, Field


class RegisterRequest(BaseModel):
    name: str = Field(description="Display name")
    email: str = Field(description="Login key; must not already be registered")
    password: str = Field(description="Plain-text password, stored only as a bcrypt hash")


class LoginRequest(BaseModel):
    email: str
    password: str


class LoginResponse(BaseModel):
    """
    Successful login.

    `token` is an HS256 JWT whose only application claim is `email`.
    """
    success: bool = Field(default=True)
    message: str = Field(default="Login successful")
    token: str
