"""User registration and credential checks."""

from __future__ import annotations

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from skillhub.errors import Conflict, NotFound, Unauthorized
from skillhub.models.user import User
from skillhub.services.password import PasswordHasher


class UserService:
    """
    Service for creating and authenticating users.

    Handles:
    - Registration with unique username and email
    - Password hashing, so only hashes reach the database
    - Credential verification for login
    """

    def __init__(self, db: Session, hasher: PasswordHasher, logger: logging.Logger) -> None:
        """
        Initialize the user service.

        Args:
            db: SQLAlchemy database session
            hasher: Password hasher used for storing and checking passwords
            logger: Logger for auth events
        """
        self.db = db
        self.hasher = hasher
        self.logger = logger

    def get_by_email(self, email: str) -> User | None:
        return self.db.query(User).filter(User.email == email).first()

    def get_by_username(self, username: str) -> User | None:
        return self.db.query(User).filter(User.username == username).first()

    def list_users(self) -> list[User]:
        """Return every user in storage order."""
        return self.db.query(User).order_by(User.id).all()

    def register(self, username: str, email: str, password: str) -> User:
        """
        Create a new user.

        The lookups give specific messages; the unique constraints on the
        table still reject a duplicate that slips in between lookup and insert.

        Raises:
            Conflict: If the email or username is already taken
        """
        if self.get_by_email(email):
            raise Conflict("Email already exists")
        if self.get_by_username(username):
            raise Conflict("Username already exists")

        user = User(username=username, email=email, password=self.hasher.hash(password))
        self.db.add(user)
        try:
            self.db.commit()
        except IntegrityError as exc:
            self.db.rollback()
            self.logger.warning("Duplicate registration rejected by storage for %s", email)
            raise Conflict("Username or email already exists") from exc
        self.db.refresh(user)

        self.logger.info("Registered user %s (id=%s)", user.username, user.id)
        return user

    def authenticate(self, email: str, password: str) -> User:
        """
        Check an email/password pair.

        Raises:
            NotFound: If no user has this email
            Unauthorized: If the password does not match
        """
        user = self.get_by_email(email)
        if user is None:
            self.logger.error("Login failed: User not found for email %s", email)
            raise NotFound("User not found")

        if not self.hasher.verify(password, user.password):
            self.logger.error("Login failed: Incorrect password for user %s", email)
            raise Unauthorized("Incorrect password")

        return user
