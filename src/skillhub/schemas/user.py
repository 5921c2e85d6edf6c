"""User Pydantic schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, field_validator


class RegisterRequest(BaseModel):
    """
    Schema for a registration request.

    Fields are optional at the schema level so that the handler can report
    missing fields with its own message.
    """

    username: str | None = None
    email: str | None = None
    password: str | None = None

    @field_validator("username", "email")
    @classmethod
    def strip_identity(cls, value: str | None) -> str | None:
        return value.strip() if value is not None else None

    def is_complete(self) -> bool:
        """Whether every required field carries a non-blank value."""
        return bool(self.username and self.email and self.password and self.password.strip())


class UserPublic(BaseModel):
    """Public view of a user. The password hash is not part of it."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    email: str
    created_at: datetime | None = None


class RegisterResponse(BaseModel):
    """Schema for a successful registration."""

    message: str
    user: UserPublic
