"""Shared FastAPI dependencies: logger, services and the bearer-token gate."""

from __future__ import annotations

import logging
from functools import lru_cache

from fastapi import Depends, Header

from skillhub.config import settings
from skillhub.errors import InvalidToken, MissingToken
from skillhub.logging_config import LOGGER_NAME
from skillhub.schemas.auth import TokenClaims
from skillhub.services.password import PasswordHasher
from skillhub.services.token_service import TokenError, TokenService

BEARER_PREFIX = "bearer"


def get_logger() -> logging.Logger:
    """Logger handed to route handlers and services."""
    return logging.getLogger(f"{LOGGER_NAME}.api")


@lru_cache
def get_password_hasher() -> PasswordHasher:
    return PasswordHasher(rounds=settings.bcrypt_rounds)


@lru_cache
def get_token_service() -> TokenService:
    return TokenService.from_settings(settings)


def extract_bearer_token(authorization: str | None) -> str | None:
    """
    Pull the token out of an ``Authorization`` header value.

    Returns None when the header is absent, uses another scheme, or carries
    an empty token.
    """
    if not authorization:
        return None
    scheme, _, token = authorization.strip().partition(" ")
    if scheme.lower() != BEARER_PREFIX:
        return None
    return token.strip() or None


def get_current_user(
    authorization: str | None = Header(default=None),
    token_service: TokenService = Depends(get_token_service),
    logger: logging.Logger = Depends(get_logger),
) -> TokenClaims:
    """
    Gate for protected routes.

    Raises:
        MissingToken: If no bearer token was sent (401)
        InvalidToken: If the token fails verification (400)
    """
    token = extract_bearer_token(authorization)
    if token is None:
        raise MissingToken("Access denied, token missing")

    try:
        return token_service.verify(token)
    except TokenError as exc:
        logger.warning("Rejected bearer token: %s", exc)
        raise InvalidToken("Invalid token") from exc
