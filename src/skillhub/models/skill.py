"""Skill database model."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String
from sqlalchemy.sql import func

from skillhub.database import Base


class Skill(Base):
    """
    Skill model representing a proficiency claim owned by a user.

    Attributes:
        id: Primary key
        user_id: Foreign key to users table (the owner)
        skill_name: Skill name
        proficiency: Free-form proficiency level
        created_at: Timestamp when record was created
    """

    __tablename__ = "skills"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    skill_name = Column(String(100), nullable=False)
    proficiency = Column(String(50), nullable=False)
    created_at = Column(DateTime, server_default=func.now(), nullable=False)

    def __repr__(self) -> str:
        """String representation of Skill."""
        return (
            f"<Skill(id={self.id}, user_id={self.user_id}, "
            f"skill_name='{self.skill_name}', proficiency='{self.proficiency}')>"
        )
