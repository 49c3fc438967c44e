"""MongoDB implementation of UserRepository."""

from logging import getLogger
from bson import ObjectId
from bson.errors import InvalidId
from pymongo import ReturnDocument
from pymongo.database import Database
from pymongo.errors import PyMongoError
from adapter.mongodb import USERS_COLLECTION_NAME
from domain.model.errors import DataAccessError
from domain.model.user import User

logger = getLogger(__name__)

# Domain attribute -> document key
_FIELD_MAP = {
    'email': 'email',
    'full_name': 'fullName',
}


class MongoUserRepository:
    def __init__(self, db: Database):
        self.collection = db[USERS_COLLECTION_NAME]

    def ensure_indexes(self) -> bool:
        """Create indexes for users collection."""
        from adapter.mongodb.indexes import create_index_safe

        try:
            create_index_safe(self.collection, [('email', 1)], 'idx_users_email')
            return True
        except PyMongoError as e:
            logger.error("Failed to create users indexes", extra={"error": str(e)})
            return False

    def _to_domain(self, doc: dict) -> User:
        """Convert MongoDB document to User domain model."""
        return User(
            id=str(doc['_id']),
            email=doc['email'],
            full_name=doc.get('fullName'),
        )

    def _to_document(self, fields: dict) -> dict:
        return {_FIELD_MAP[key]: value for key, value in fields.items()}

    def _fail(self, message: str, error: Exception, **context) -> DataAccessError:
        logger.error(message, extra={**context, "error": str(error)})
        return DataAccessError(str(error))

    def find_all(self) -> list[User]:
        """Return every user in natural order."""
        try:
            return [self._to_domain(doc) for doc in self.collection.find({})]
        except PyMongoError as e:
            raise self._fail("Failed to list users", e) from e

    def get_by_id(self, user_id: str) -> User | None:
        """Find a user by ID. Return User or None if not found."""
        try:
            doc = self.collection.find_one({'_id': ObjectId(user_id)})
        except (InvalidId, PyMongoError) as e:
            raise self._fail("Failed to get user by ID", e, userId=user_id) from e
        return self._to_domain(doc) if doc else None

    def create(self, email: str, full_name: str | None = None) -> User:
        """Insert a new user document and return the User object."""
        user_doc = {'email': email}
        if full_name is not None:
            user_doc['fullName'] = full_name
        try:
            result = self.collection.insert_one(user_doc)
        except PyMongoError as e:
            raise self._fail("Failed to create user", e) from e

        user_doc['_id'] = result.inserted_id
        return self._to_domain(user_doc)

    def update(self, user_id: str, fields: dict) -> User | None:
        """Apply fields and return the document as it is after the update."""
        try:
            if not fields:
                doc = self.collection.find_one({'_id': ObjectId(user_id)})
            else:
                doc = self.collection.find_one_and_update(
                    {'_id': ObjectId(user_id)},
                    {'$set': self._to_document(fields)},
                    return_document=ReturnDocument.AFTER,
                )
        except (InvalidId, PyMongoError) as e:
            raise self._fail("Failed to update user", e, userId=user_id) from e

        if not doc:
            logger.debug("User not found for update", extra={"userId": user_id})
            return None
        return self._to_domain(doc)

    def delete(self, user_id: str) -> User | None:
        """Remove a user document and return what was removed."""
        try:
            doc = self.collection.find_one_and_delete({'_id': ObjectId(user_id)})
        except (InvalidId, PyMongoError) as e:
            raise self._fail("Failed to delete user", e, userId=user_id) from e
        return self._to_domain(doc) if doc else None
