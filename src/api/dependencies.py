from fastapi import Request

from adapter.mongodb.connection import get_database
from adapter.mongodb.user_repository import MongoUserRepository
from domain.model.errors import DataAccessError
from port.user_repository import UserRepository


def _get_db(request: Request):
    """Get the MongoDB database opened at startup.

    A missing connection is a data access failure (500), like any other
    store error.
    """
    client = getattr(request.app.state, 'mongo_client', None)
    if client is None:
        raise DataAccessError("Database unavailable")
    return get_database(client)


def get_user_repo(request: Request) -> UserRepository:
    return MongoUserRepository(_get_db(request))
