from typing import Protocol
from domain.model.user import User


class UserRepository(Protocol):
    """Protocol defining the interface for user data access.

    Implementations raise DataAccessError when the store fails.
    Not-found is reported as None, never as an error.
    """
    def find_all(self) -> list[User]:
        """Return every user in store order (possibly empty)."""
        ...

    def get_by_id(self, user_id: str) -> User | None:
        """Find a user by ID. Return User or None if not found."""
        ...

    def create(self, email: str, full_name: str | None = None) -> User:
        """Persist a new user and return it with its assigned ID."""
        ...

    def update(self, user_id: str, fields: dict) -> User | None:
        """Apply fields to a user. Return the updated User or None if not found."""
        ...

    def delete(self, user_id: str) -> User | None:
        """Remove a user. Return the removed User or None if not found."""
        ...
