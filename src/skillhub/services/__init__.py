"""Services package."""

from skillhub.services.password import PasswordHasher
from skillhub.services.skill_service import SkillService
from skillhub.services.token_service import TokenService
from skillhub.services.user_service import UserService

__all__ = ["PasswordHasher", "SkillService", "TokenService", "UserService"]
