"""Users API router."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from skillhub.database import get_db
from skillhub.dependencies import get_current_user, get_logger, get_password_hasher
from skillhub.errors import InternalError
from skillhub.schemas.user import UserPublic
from skillhub.services.password import PasswordHasher
from skillhub.services.user_service import UserService

router = APIRouter(tags=["users"], dependencies=[Depends(get_current_user)])


@router.get("/users", response_model=list[UserPublic])
def list_users(
    db: Session = Depends(get_db),
    hasher: PasswordHasher = Depends(get_password_hasher),
    logger: logging.Logger = Depends(get_logger),
) -> list[UserPublic]:
    """List every registered user (public fields only)."""
    try:
        users = UserService(db, hasher, logger).list_users()
    except SQLAlchemyError as exc:
        logger.exception("Error fetching users")
        raise InternalError("Error fetching users") from exc
    return [UserPublic.model_validate(user) for user in users]
