import os

USERS_COLLECTION_NAME = os.getenv('MONGODB_USERS_COLLECTION', 'users')
