"""
Portfolio Backend — Registration and Login Routes
===================================================
"""

from fastapi import APIRouter, Depends, status
from pymongo.asynchronous.database import AsyncDatabase

from portfolio.database import get_database
from portfolio.routes import API_PREFIX
from portfolio.schemas.auth import LoginRequest, LoginResponse, RegisterRequest
from portfolio.schemas.common import ErrorResponse, MessageResponse
from portfolio.services.auth_service import auth_service

router = APIRouter(prefix=API_PREFIX, tags=["Auth"])


@router.post(
    "/register",
    status_code=status.HTTP_201_CREATED,
    response_model=MessageResponse,
    responses={
        400: {"description": "Email already registered", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Register a new user",
)
async def register(
    payload: RegisterRequest,
    db: AsyncDatabase = Depends(get_database),
) -> MessageResponse:
    """Registration does not log the user in; call /login afterwards."""
    return await auth_service.register(db, payload)


@router.post(
    "/login",
    response_model=LoginResponse,
    responses={
        401: {"description": "Invalid email or password", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Exchange credentials for a bearer token",
)
async def login(
    payload: LoginRequest,
    db: AsyncDatabase = Depends(get_database),
) -> LoginResponse:
    return await auth_service.login(db, payload)
