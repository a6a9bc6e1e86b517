"""MongoDB adapter for the DormiDine ledger store.

The store owns the client lifecycle; the application's lifespan opens it on
startup and closes it on shutdown, and repositories receive collections from it.
"""

from typing import Optional
import logging

from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.database import Database
from pymongo.errors import PyMongoError

from app.exceptions import StorageError

logger = logging.getLogger("dormidine.mongo")

# Collection names
MEALS = "meals"
UPCOMING_MEALS = "upcoming-meals"
USERS = "users"
MEAL_REQUESTS = "requested-meals"
REVIEWS = "reviews"
PAYMENTS = "payments"


class MongoStore:
    """Connection holder for the ledger database."""

    def __init__(self, uri: str, db_name: str = "dormi-dine", timeout_ms: int = 5000):
        self.uri = uri
        self.db_name = db_name
        self.timeout_ms = timeout_ms
        self._client: Optional[MongoClient] = None
        self._db: Optional[Database] = None

    # ------------------ Connection ------------------
    def connect(self) -> "MongoStore":
        try:
            self._client = MongoClient(
                self.uri, serverSelectionTimeoutMS=self.timeout_ms
            )
            self._db = self._client[self.db_name]
            self._client.admin.command("ping")
            logger.info("Connected to MongoDB (database: %s)", self.db_name)
        except PyMongoError as exc:
            self.close()
            raise StorageError(f"Could not connect to MongoDB: {exc}", "connect") from exc
        return self

    def close(self) -> None:
        """Close MongoDB connection."""
        try:
            if self._client is not None:
                self._client.close()
                logger.info("MongoDB client closed")
        finally:
            self._client = None
            self._db = None

    @property
    def is_connected(self) -> bool:
        return self._db is not None

    def collection(self, name: str) -> Collection:
        if self._db is None:
            raise StorageError("MongoDB store is not connected", "collection")
        return self._db[name]

    def ping(self) -> bool:
        if self._client is None:
            return False
        try:
            self._client.admin.command("ping")
            return True
        except PyMongoError:
            logger.exception("MongoDB ping failed")
            return False

    def ensure_indexes(self) -> None:
        """Create the indexes the engagement and ledger queries rely on."""
        self.collection(USERS).create_index("email", unique=True)
        self.collection(PAYMENTS).create_index([("email", 1), ("packageName", 1), ("status", 1)])
        self.collection(REVIEWS).create_index([("mealId", 1), ("createdAt", -1)])
        self.collection(REVIEWS).create_index([("email", 1), ("createdAt", -1)])
        self.collection(MEAL_REQUESTS).create_index("email")
        logger.info("MongoDB indexes ensured")
