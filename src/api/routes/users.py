"""User API routes.

Endpoints:
- GET /v1/users: List all users
- GET /v1/users/{id}: Get one user
- POST /v1/users: Create a user
- PUT|PATCH /v1/users: Update the user named by body.id
- DELETE /v1/users: Delete the user named by body.id

Every success is wrapped as {"data": ...}; a missing record is
{"data": null}. Domain errors propagate to the handlers in api.errors.
"""

import asyncio
import logging

from fastapi import APIRouter, Body, Depends, status

from api.dependencies import get_user_repo
from api.models import envelope
from port.user_repository import UserRepository
from services import user_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/v1/users", tags=["users"])


@router.get("")
async def find_all(repo: UserRepository = Depends(get_user_repo)):
    """List every user."""
    users = await asyncio.to_thread(user_service.find_all, repo)
    return envelope(users)


@router.get("/{user_id}")
async def find_by_id(user_id: str, repo: UserRepository = Depends(get_user_repo)):
    """Get a user by ID."""
    user = await asyncio.to_thread(user_service.find_by_id, repo, user_id)
    return envelope(user)


@router.post("", status_code=status.HTTP_201_CREATED)
async def create(
    payload: dict = Body(...),
    repo: UserRepository = Depends(get_user_repo),
):
    """Create a user from {fullName?, email}."""
    user = await asyncio.to_thread(user_service.create, repo, payload)
    return envelope(user)


@router.put("")
@router.patch("")
async def update_by_id(
    payload: dict = Body(...),
    repo: UserRepository = Depends(get_user_repo),
):
    """Update the supplied fields of the user identified by payload.id."""
    user = await asyncio.to_thread(user_service.update_by_id, repo, payload)
    if user is None:
        logger.info("User not found for update", extra={"userId": payload.get('id')})
    return envelope(user)


@router.delete("")
async def delete_by_id(
    payload: dict = Body(...),
    repo: UserRepository = Depends(get_user_repo),
):
    """Delete the user identified by payload.id."""
    user = await asyncio.to_thread(user_service.delete_by_id, repo, payload)
    return envelope(user)
