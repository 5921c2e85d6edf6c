"""Authentication Pydantic schemas."""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class LoginRequest(BaseModel):
    """Schema for a login request."""

    email: str | None = None
    password: str | None = None

    @field_validator("email")
    @classmethod
    def strip_email(cls, value: str | None) -> str | None:
        return value.strip() if value is not None else None

    def is_complete(self) -> bool:
        """Whether both credentials carry a non-blank value."""
        return bool(self.email and self.password and self.password.strip())


class LoginResponse(BaseModel):
    """Schema for a successful login."""

    message: str
    token: str


class TokenClaims(BaseModel):
    """Identity claims carried by a bearer token."""

    model_config = ConfigDict(populate_by_name=True)

    user_id: int = Field(alias="userId")
    username: str
    email: str

    def to_payload(self) -> dict:
        """Serialize the claims using their wire names."""
        return self.model_dump(by_alias=True)
