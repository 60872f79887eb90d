import logging

from pymongo import MongoClient

logger = logging.getLogger(__name__)

# Suppress verbose PyMongo logs
# Set pymongo logger to WARNING to reduce noise from driver-level logs
logging.getLogger('pymongo').setLevel(logging.WARNING)


def create_mongodb_client(uri: str) -> MongoClient:
    """Create a MongoDB client with pooled, time-bounded connections.

    The client connects lazily; the first operation (or ``ping``) opens
    the pool. Retries are left to the driver's retryable reads/writes.
    """
    client = MongoClient(
        uri,
        serverSelectionTimeoutMS=5000,  # 5s timeout for server selection
        connectTimeoutMS=5000,  # 5s timeout for initial connection
        socketTimeoutMS=30000,  # 30s timeout for operations
        maxPoolSize=10,
        minPoolSize=0,
        maxIdleTimeMS=30000,
        waitQueueTimeoutMS=10000,
        retryWrites=True,
        retryReads=True,
        tz_aware=True,  # return datetimes as UTC-aware like the other backends
    )
    logger.info("[MONGODB] Client created")
    return client
