"""Skill Pydantic schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class SkillInput(BaseModel):
    """Schema for creating or updating a skill."""

    model_config = ConfigDict(str_strip_whitespace=True)

    skill_name: str | None = Field(default=None, max_length=100)
    proficiency: str | None = Field(default=None, max_length=50)

    def is_complete(self) -> bool:
        """Whether both fields carry a non-blank value."""
        return bool(self.skill_name and self.proficiency)


class Skill(BaseModel):
    """Complete skill schema with database fields."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    skill_name: str
    proficiency: str
    created_at: datetime | None = None


class SkillResponse(BaseModel):
    """Schema for a created or updated skill."""

    message: str
    skill: Skill


class MessageResponse(BaseModel):
    """Schema for responses that only carry a confirmation message."""

    message: str
