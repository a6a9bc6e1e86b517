"""
Base repository for Mongo-backed data access.
This follows the Repository pattern to separate business logic from data access.
"""

from functools import wraps
from typing import Any, Dict, Generic, List, Optional, Type, TypeVar
import logging

from bson import ObjectId
from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from app.exceptions import StorageError
from domain.models.base import DocumentModel

ModelType = TypeVar("ModelType", bound=DocumentModel)

logger = logging.getLogger("dormidine.repositories")


def id_filter(record_id: str) -> Dict[str, Any]:
    """Match an ObjectId when the id looks like one, else the raw string id."""
    if ObjectId.is_valid(record_id):
        return {"_id": ObjectId(record_id)}
    return {"_id": record_id}


def storage_operation(name: str):
    """Translate driver failures into StorageError, logging the traceback once."""

    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except PyMongoError as exc:
                logger.exception("Storage operation %s failed", name)
                raise StorageError("Storage operation failed", name) from exc

        return wrapper

    return decorator


class MongoRepository(Generic[ModelType]):
    """
    Base repository providing common document operations.
    All Mongo repositories should inherit from this class.
    """

    def __init__(self, collection: Collection, model: Type[ModelType]):
        self.collection = collection
        self.model = model

    def _to_model(self, doc: Optional[Dict[str, Any]]) -> Optional[ModelType]:
        return self.model.from_document(doc) if doc else None

    @storage_operation("get_by_id")
    def get_by_id(self, record_id: str) -> Optional[ModelType]:
        """Get record by id, or None if not found"""
        return self._to_model(self.collection.find_one(id_filter(record_id)))

    @storage_operation("insert")
    def insert(self, record: ModelType) -> str:
        """Append a new record and return its id"""
        result = self.collection.insert_one(record.to_document())
        return str(result.inserted_id)

    @storage_operation("find")
    def _find(self, query: Dict[str, Any], sort: Optional[List] = None) -> List[ModelType]:
        cursor = self.collection.find(query)
        if sort:
            cursor = cursor.sort(sort)
        return [self.model.from_document(doc) for doc in cursor]
