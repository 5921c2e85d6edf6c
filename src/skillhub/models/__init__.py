"""Database models package."""

from skillhub.models.skill import Skill
from skillhub.models.user import User

__all__ = ["User", "Skill"]
