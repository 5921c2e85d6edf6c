"""Signed, time-limited bearer tokens."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import ValidationError as PydanticValidationError

from skillhub.config import Settings
from skillhub.schemas.auth import TokenClaims


class TokenError(Exception):
    """Raised when a token cannot be verified."""


class TokenExpired(TokenError):
    """The token's expiry has passed."""


class InvalidSignature(TokenError):
    """The token was not signed with the expected key."""


class TokenService:
    """
    Issues and verifies HMAC-signed JWTs carrying user identity claims.

    Args:
        secret_key: Shared signing secret
        algorithm: JWT signing algorithm
        ttl: Default token lifetime
    """

    def __init__(
        self,
        secret_key: str,
        algorithm: str = "HS256",
        ttl: timedelta = timedelta(hours=1),
    ) -> None:
        self.secret_key = secret_key
        self.algorithm = algorithm
        self.ttl = ttl

    @classmethod
    def from_settings(cls, settings: Settings) -> "TokenService":
        """Build a token service from application settings."""
        return cls(
            secret_key=settings.jwt_secret_key,
            algorithm=settings.jwt_algorithm,
            ttl=timedelta(minutes=settings.access_token_expire_minutes),
        )

    def issue(
        self,
        claims: TokenClaims,
        ttl: timedelta | None = None,
        now: datetime | None = None,
    ) -> str:
        """
        Sign ``claims`` into a token.

        Args:
            claims: Identity claims to embed
            ttl: Lifetime override; defaults to the service TTL
            now: Issuance time; defaults to the current UTC time

        Returns:
            Encoded JWT string
        """
        issued_at = now or datetime.now(timezone.utc)
        payload = claims.to_payload()
        payload.update({"iat": issued_at, "exp": issued_at + (ttl or self.ttl)})
        return jwt.encode(payload, self.secret_key, algorithm=self.algorithm)

    def verify(self, token: str) -> TokenClaims:
        """
        Verify a token's signature and expiry and decode its claims.

        Raises:
            TokenExpired: If the expiry has passed
            InvalidSignature: If the signature does not match
            TokenError: For any other malformed token
        """
        try:
            payload = jwt.decode(
                token,
                self.secret_key,
                algorithms=[self.algorithm],
                options={"require": ["exp"]},
            )
        except jwt.ExpiredSignatureError as exc:
            raise TokenExpired("Token has expired") from exc
        except jwt.InvalidSignatureError as exc:
            raise InvalidSignature("Token signature is invalid") from exc
        except jwt.InvalidTokenError as exc:
            raise TokenError(f"Token is invalid: {exc}") from exc

        try:
            return TokenClaims.model_validate(payload)
        except PydanticValidationError as exc:
            raise TokenError("Token is missing identity claims") from exc
