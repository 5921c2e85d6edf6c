"""Auth API router - registration and login endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from skillhub.database import get_db
from skillhub.dependencies import get_logger, get_password_hasher, get_token_service
from skillhub.errors import InternalError, ValidationError
from skillhub.schemas.auth import LoginRequest, LoginResponse, TokenClaims
from skillhub.schemas.user import RegisterRequest, RegisterResponse, UserPublic
from skillhub.services.password import PasswordHasher
from skillhub.services.token_service import TokenService
from skillhub.services.user_service import UserService

router = APIRouter(tags=["auth"])


@router.post("/register", response_model=RegisterResponse, status_code=201)
def register(
    request: RegisterRequest,
    db: Session = Depends(get_db),
    hasher: PasswordHasher = Depends(get_password_hasher),
    logger: logging.Logger = Depends(get_logger),
) -> RegisterResponse:
    """
    Register a new user.

    Returns:
        Confirmation message and the public view of the created user.

    Raises:
        ValidationError 400: If username, email or password is missing.
        Conflict 400: If the email or username is already taken.
        InternalError 500: If the database or the hasher fails.
    """
    if not request.is_complete():
        raise ValidationError(
            "Please provide all required fields (username, email, password)"
        )

    service = UserService(db, hasher, logger)
    try:
        user = service.register(request.username, request.email, request.password)
    except (SQLAlchemyError, ValueError) as exc:
        db.rollback()
        logger.error("Error registering user: %s", exc)
        raise InternalError("Error registering user", details=str(exc)) from exc

    return RegisterResponse(
        message="User registered successfully",
        user=UserPublic.model_validate(user),
    )


@router.post("/login", response_model=LoginResponse)
def login(
    request: LoginRequest,
    db: Session = Depends(get_db),
    hasher: PasswordHasher = Depends(get_password_hasher),
    token_service: TokenService = Depends(get_token_service),
    logger: logging.Logger = Depends(get_logger),
) -> LoginResponse:
    """
    Exchange an email/password pair for a bearer token.

    Raises:
        ValidationError 400: If email or password is missing.
        NotFound 404: If no user has this email.
        Unauthorized 401: If the password is wrong.
        InternalError 500: If the database fails.
    """
    if not request.is_complete():
        logger.error("Login attempt failed: Missing email or password")
        raise ValidationError("Please provide both email and password")

    service = UserService(db, hasher, logger)
    try:
        user = service.authenticate(request.email, request.password)
    except SQLAlchemyError as exc:
        logger.exception("Error logging in user")
        raise InternalError("Error logging in user") from exc

    token = token_service.issue(
        TokenClaims(user_id=user.id, username=user.username, email=user.email)
    )
    logger.info("Login successful for user %s", user.email)
    return LoginResponse(message="Login successful", token=token)
