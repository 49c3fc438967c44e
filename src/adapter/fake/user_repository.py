"""In-memory implementation of UserRepository for testing."""

from dataclasses import replace

from bson import ObjectId

from domain.model.errors import DataAccessError
from domain.model.user import User


class FakeUserRepository:
    def __init__(self):
        self.store: dict[str, User] = {}
        # Set to an exception to make every call fail like an unreachable store
        self.fail_with: Exception | None = None

    def _check(self):
        if self.fail_with is not None:
            raise DataAccessError(str(self.fail_with)) from self.fail_with

    # ── write operations ─────────────────────────────────────

    def create(self, email: str, full_name: str | None = None) -> User:
        self._check()
        user = User(id=str(ObjectId()), email=email, full_name=full_name)
        self.store[user.id] = user
        return replace(user)

    def update(self, user_id: str, fields: dict) -> User | None:
        self._check()
        user = self.store.get(user_id)
        if not user:
            return None

        updated = replace(user, **fields)
        self.store[user_id] = updated
        return replace(updated)

    def delete(self, user_id: str) -> User | None:
        self._check()
        return self.store.pop(user_id, None)

    # ── read operations ──────────────────────────────────────

    def find_all(self) -> list[User]:
        self._check()
        return [replace(u) for u in self.store.values()]

    def get_by_id(self, user_id: str) -> User | None:
        self._check()
        user = self.store.get(user_id)
        return replace(user) if user else None
