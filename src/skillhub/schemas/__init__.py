"""Pydantic schemas package."""

from skillhub.schemas.auth import LoginRequest, LoginResponse, TokenClaims
from skillhub.schemas.skill import MessageResponse, Skill, SkillInput, SkillResponse
from skillhub.schemas.user import RegisterRequest, RegisterResponse, UserPublic

__all__ = [
    "LoginRequest",
    "LoginResponse",
    "MessageResponse",
    "RegisterRequest",
    "RegisterResponse",
    "Skill",
    "SkillInput",
    "SkillResponse",
    "TokenClaims",
    "UserPublic",
]
