from dataclasses import dataclass


@dataclass
class User:
    """Domain model representing a user."""
    id: str
    email: str
    full_name: str | None = None
