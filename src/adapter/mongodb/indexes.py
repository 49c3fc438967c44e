"""Index creation for the users collection.

An index whose name or key spec changed since the last deploy is dropped
and recreated instead of failing startup.
"""

from logging import getLogger

from pymongo.collection import Collection
from pymongo.database import Database
from pymongo.errors import PyMongoError

logger = getLogger(__name__)


def create_index_safe(collection: Collection, keys: list, name: str, **kwargs) -> bool:
    """Create an index, resolving a name or key-spec conflict by recreating it.

    Raises PyMongoError for failures other than a conflict.
    """
    try:
        collection.create_index(keys, name=name, **kwargs)
        return True
    except PyMongoError as e:
        if "already exists" not in str(e) and "Conflict" not in str(e):
            raise
        return _replace_conflicting(collection, keys, name, **kwargs)


def _replace_conflicting(collection: Collection, keys: list, name: str, **kwargs) -> bool:
    wanted = dict(keys)

    for existing_name, info in collection.index_information().items():
        if existing_name == '_id_':
            continue
        # same name with other keys, or same keys under another name
        if (existing_name == name) != (dict(info.get('key', [])) == wanted):
            logger.warning("Replacing conflicting index", extra={"index": existing_name, "wanted": name})
            collection.drop_index(existing_name)
            collection.create_index(keys, name=name, **kwargs)
            return True

    logger.error("Could not resolve index conflict", extra={"index": name})
    return False


def ensure_all_indexes(db: Database) -> bool:
    """Ensure indexes for every collection. Called at app startup."""
    from adapter.mongodb.user_repository import MongoUserRepository

    return MongoUserRepository(db).ensure_indexes()
