import os
import logging
from pymongo import MongoClient
from pymongo.database import Database
from pymongo.errors import ConnectionFailure, PyMongoError

logger = logging.getLogger(__name__)

# MongoDB connection string from environment
MONGO_URL = os.getenv('MONGO_URL')
DATABASE_NAME = os.getenv('MONGODB_DATABASE', 'users_api')
TIMEOUT_MS = int(os.getenv('MONGODB_TIMEOUT_MS', '5000'))


def connect(url: str | None = MONGO_URL) -> MongoClient | None:
    """Open the process-wide MongoDB client.

    Called once at application startup. The client owns its own connection
    pool; callers keep the returned handle and pass it around explicitly.

    Returns:
        MongoDB client, or None if not configured or unreachable
    """
    if not url:
        logger.error("[MONGODB] MONGO_URL not configured.")
        return None

    try:
        client = MongoClient(
            url,
            serverSelectionTimeoutMS=TIMEOUT_MS,  # timeout for server selection
            connectTimeoutMS=TIMEOUT_MS,  # timeout for initial connection
            maxPoolSize=10,
            minPoolSize=0,   # Don't maintain idle connections
            # Failures surface to the caller immediately
            retryWrites=False,
            retryReads=False,
        )
        client.admin.command('ping')  # Verify connection works
        logger.info(f"[MONGODB] Connected successfully to {DATABASE_NAME}")
        return client
    except (ConnectionFailure, PyMongoError) as e:
        error_msg = str(e)[:200]
        logger.error(f"[MONGODB] Initial connection failed: {error_msg}")
        return None


def get_database(client: MongoClient) -> Database:
    return client[DATABASE_NAME]


def ping(client: MongoClient | None) -> bool:
    """Return True if the server answers a ping."""
    if client is None:
        return False
    try:
        client.admin.command('ping')
        return True
    except PyMongoError as e:
        logger.warning("[MONGODB] Ping failed", extra={"error": str(e)[:200]})
        return False


def close(client: MongoClient | None) -> None:
    """Release the client's pooled connections. Called at shutdown."""
    if client is None:
        return
    client.close()
    logger.info("[MONGODB] Connection closed")
