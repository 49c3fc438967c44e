"""Pydantic models for API responses."""

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

from domain.model.user import User


class UserResponse(BaseModel):
    """Wire representation of a user."""
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., description="User ID")
    full_name: Optional[str] = Field(None, alias="fullName", description="Full name")
    email: str = Field(..., description="Email address")

    @classmethod
    def from_domain(cls, user: User) -> "UserResponse":
        return cls(id=user.id, full_name=user.full_name, email=user.email)

    def to_json(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)


class ErrorResponse(BaseModel):
    """Body of every error response."""
    error: str = Field(..., description="Error kind, e.g. ValidationError")
    details: Optional[str] = Field(None, description="Human-readable reason")


def envelope(result: User | list[User] | None) -> dict:
    """Wrap an operation result as {"data": ...}."""
    if result is None:
        return {"data": None}
    if isinstance(result, list):
        return {"data": [UserResponse.from_domain(u).to_json() for u in result]}
    return {"data": UserResponse.from_domain(result).to_json()}
