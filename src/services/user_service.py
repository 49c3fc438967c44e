"""User service — CRUD operations over the user repository.

Pure business logic with no HTTP dependencies.
Each operation runs one validation pass and then exactly one repository
call. Raises domain errors that route handlers map to HTTP status codes.
"""

from collections.abc import Callable
from logging import getLogger
from typing import Any, TypeVar

from domain.model.errors import DataAccessError, DomainError, ValidationError
from domain.model.user import User
from port.user_repository import UserRepository
from services import user_validation
from services.user_validation import ValidationResult

logger = getLogger(__name__)

T = TypeVar('T')


def _require_valid(result: ValidationResult) -> Any:
    if not result.ok:
        raise ValidationError(result.message, result.errors)
    return result.value


def _persist(call: Callable[[], T]) -> T:
    """Run one repository call, wrapping unexpected failures in DataAccessError."""
    try:
        return call()
    except DomainError:
        raise
    except Exception as e:
        logger.error("Unexpected repository failure", extra={"error": str(e)})
        raise DataAccessError(str(e)) from e


def _id_payload(user_id: Any) -> dict:
    return {} if user_id is None else {'id': user_id}


def find_all(repo: UserRepository) -> list[User]:
    """Return every user (possibly empty)."""
    return _persist(repo.find_all)


def find_by_id(repo: UserRepository, user_id: Any) -> User | None:
    """Return the user with this ID, or None if not found.

    Raises:
        ValidationError: user_id is not a valid identifier
        DataAccessError: the store failed
    """
    request = _require_valid(user_validation.find_by_id(_id_payload(user_id)))
    return _persist(lambda: repo.get_by_id(request.id))


def create(repo: UserRepository, payload: Any) -> User:
    """Create a user from a request payload.

    Returns the created User with its assigned ID.

    Raises:
        ValidationError: email missing or empty, wrong types, unknown fields
        DataAccessError: the store failed
    """
    request = _require_valid(user_validation.create(payload))
    user = _persist(lambda: repo.create(email=request.email, full_name=request.full_name))
    logger.info("User created", extra={"userId": user.id})
    return user


def update_by_id(repo: UserRepository, payload: Any) -> User | None:
    """Apply the supplied fields to the user identified by payload['id'].

    Returns the user as stored after the update, or None if not found.
    Fields absent from the payload are left untouched.
    """
    request = _require_valid(user_validation.update_by_id(payload))
    user = _persist(lambda: repo.update(request.id, request.changes()))
    if user:
        logger.info("User updated", extra={"userId": user.id})
    return user


def delete_by_id(repo: UserRepository, target: Any) -> User | None:
    """Delete a user. Returns the removed user, or None if not found.

    target is the user ID, or a request body {"id": ...}; a body is
    checked as a whole, so unknown keys are rejected.
    """
    payload = target if isinstance(target, dict) else _id_payload(target)
    request = _require_valid(user_validation.delete_by_id(payload))
    user = _persist(lambda: repo.delete(request.id))
    if user:
        logger.info("User deleted", extra={"userId": user.id})
    return user
