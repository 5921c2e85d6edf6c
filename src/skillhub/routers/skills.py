"""Skills API router - list, add, update and delete the caller's skills."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from skillhub.database import get_db
from skillhub.dependencies import get_current_user, get_logger
from skillhub.errors import InternalError, ValidationError
from skillhub.schemas.auth import TokenClaims
from skillhub.schemas.skill import MessageResponse, Skill, SkillInput, SkillResponse
from skillhub.services.skill_service import SkillService

router = APIRouter(prefix="/skills", tags=["skills"])

MISSING_FIELDS = "Please provide both skill name and proficiency"


def _require_fields(request: SkillInput) -> None:
    if not request.is_complete():
        raise ValidationError(MISSING_FIELDS)


@router.get("", response_model=list[Skill])
def list_skills(
    current_user: TokenClaims = Depends(get_current_user),
    db: Session = Depends(get_db),
    logger: logging.Logger = Depends(get_logger),
) -> list[Skill]:
    """List the skills owned by the caller."""
    try:
        skills = SkillService(db, logger).list_for_user(current_user.user_id)
    except SQLAlchemyError as exc:
        logger.exception("Error fetching skills")
        raise InternalError("Error fetching skills") from exc
    return [Skill.model_validate(skill) for skill in skills]


@router.post("", response_model=SkillResponse, status_code=201)
def add_skill(
    request: SkillInput,
    current_user: TokenClaims = Depends(get_current_user),
    db: Session = Depends(get_db),
    logger: logging.Logger = Depends(get_logger),
) -> SkillResponse:
    """
    Add a skill for the caller.

    The owner always comes from the token, never from the request body.
    """
    _require_fields(request)
    try:
        skill = SkillService(db, logger).add(
            current_user.user_id, request.skill_name, request.proficiency
        )
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("Error adding skill")
        raise InternalError("Error adding skill") from exc
    return SkillResponse(message="Skill added successfully", skill=Skill.model_validate(skill))


@router.put("/{skill_id}", response_model=SkillResponse)
def update_skill(
    skill_id: int,
    request: SkillInput,
    current_user: TokenClaims = Depends(get_current_user),
    db: Session = Depends(get_db),
    logger: logging.Logger = Depends(get_logger),
) -> SkillResponse:
    """
    Update one of the caller's skills.

    Raises:
        ValidationError 400: If skill_name or proficiency is missing.
        Forbidden 403: If the skill belongs to another user.
        NotFound 404: If the skill does not exist.
    """
    _require_fields(request)
    try:
        skill = SkillService(db, logger).update(
            skill_id, current_user.user_id, request.skill_name, request.proficiency
        )
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("Error updating skill")
        raise InternalError("Error updating skill") from exc
    return SkillResponse(message="Skill updated successfully", skill=Skill.model_validate(skill))


@router.delete("/{skill_id}", response_model=MessageResponse)
def delete_skill(
    skill_id: int,
    current_user: TokenClaims = Depends(get_current_user),
    db: Session = Depends(get_db),
    logger: logging.Logger = Depends(get_logger),
) -> MessageResponse:
    """
    Delete one of the caller's skills.

    Raises:
        Forbidden 403: If the skill belongs to another user.
        NotFound 404: If the skill does not exist.
    """
    try:
        SkillService(db, logger).delete(skill_id, current_user.user_id)
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("Error deleting skill")
        raise InternalError("Error deleting skill") from exc
    return MessageResponse(message="Skill deleted successfully")
