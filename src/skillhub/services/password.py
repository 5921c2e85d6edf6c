"""Password hashing with bcrypt."""

from passlib.context import CryptContext


class PasswordHasher:
    """
    One-way salted password hashing.

    Args:
        rounds: bcrypt cost factor
    """

    def __init__(self, rounds: int = 10) -> None:
        self.rounds = rounds
        self._context = CryptContext(
            schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=rounds
        )

    def hash(self, password: str) -> str:
        """Return the salted hash of ``password``."""
        return self._context.hash(password)

    def verify(self, password: str, hashed_password: str) -> bool:
        """
        Check ``password`` against a stored hash.

        Returns False instead of raising when the stored value is not a
        recognizable hash.
        """
        try:
            return self._context.verify(password, hashed_password)
        except ValueError:
            return False
