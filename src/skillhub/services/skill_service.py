"""Skill CRUD scoped to the owning user."""

from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from skillhub.errors import Forbidden, NotFound
from skillhub.models.skill import Skill


class SkillService:
    """
    Service for a user's skills.

    Mutations load the target skill first and refuse to touch a skill owned
    by another user.
    """

    def __init__(self, db: Session, logger: logging.Logger) -> None:
        self.db = db
        self.logger = logger

    def list_for_user(self, user_id: int) -> list[Skill]:
        """Return the skills owned by ``user_id``."""
        return self.db.query(Skill).filter(Skill.user_id == user_id).order_by(Skill.id).all()

    def add(self, user_id: int, skill_name: str, proficiency: str) -> Skill:
        """Create a skill owned by ``user_id``."""
        skill = Skill(user_id=user_id, skill_name=skill_name, proficiency=proficiency)
        self.db.add(skill)
        self.db.commit()
        self.db.refresh(skill)
        self.logger.info("User %s added skill %s", user_id, skill.id)
        return skill

    def get_owned(self, skill_id: int, user_id: int) -> Skill:
        """
        Load a skill that ``user_id`` is allowed to modify.

        Raises:
            NotFound: If the skill does not exist
            Forbidden: If the skill belongs to another user
        """
        skill = self.db.query(Skill).filter(Skill.id == skill_id).first()
        if skill is None:
            raise NotFound("Skill not found")
        if skill.user_id != user_id:
            self.logger.warning(
                "User %s tried to modify skill %s owned by user %s",
                user_id,
                skill_id,
                skill.user_id,
            )
            raise Forbidden("You do not have permission to modify this skill")
        return skill

    def update(self, skill_id: int, user_id: int, skill_name: str, proficiency: str) -> Skill:
        """Replace the name and proficiency of an owned skill."""
        skill = self.get_owned(skill_id, user_id)
        skill.skill_name = skill_name
        skill.proficiency = proficiency
        self.db.commit()
        self.db.refresh(skill)
        return skill

    def delete(self, skill_id: int, user_id: int) -> None:
        """Remove an owned skill."""
        skill = self.get_owned(skill_id, user_id)
        self.db.delete(skill)
        self.db.commit()
        self.logger.info("User %s deleted skill %s", user_id, skill_id)
