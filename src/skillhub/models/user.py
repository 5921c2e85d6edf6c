"""User database model."""

from sqlalchemy import Column, DateTime, Integer, String
from sqlalchemy.sql import func

from skillhub.database import Base


class User(Base):
    """
    User model representing a registered account.

    Attributes:
        id: Primary key
        username: Login name (unique)
        email: Email address (unique)
        password: Salted bcrypt hash of the password, never the plaintext
        created_at: Timestamp when record was created
    """

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(100), nullable=False, unique=True, index=True)
    email = Column(String(255), nullable=False, unique=True, index=True)
    password = Column(String(255), nullable=False)
    created_at = Column(DateTime, server_default=func.now(), nullable=False)

    def __repr__(self) -> str:
        """String representation of User."""
        return f"<User(id={self.id}, username='{self.username}', email='{self.email}')>"
