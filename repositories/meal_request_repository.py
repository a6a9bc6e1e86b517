"""
Meal Request Repository - Data access layer for meal requests
"""

from typing import List, Optional

from pymongo import ReturnDocument
from pymongo.collection import Collection

from domain.enums import RequestStatus
from domain.models import MealRequest
from repositories.base import MongoRepository, id_filter, storage_operation


class MealRequestRepository(MongoRepository[MealRequest]):
    """Repository for meal request records"""

    def __init__(self, collection: Collection):
        super().__init__(collection, MealRequest)

    @storage_operation("cancel")
    def cancel(self, request_id: str) -> Optional[MealRequest]:
        """Move a pending request to cancelled

        Args:
            request_id: Request id

        Returns:
            The cancelled request, or None when no pending request matched
            (unknown id or already cancelled)
        """
        query = id_filter(request_id)
        query["status"] = RequestStatus.PENDING.value
        doc = self.collection.find_one_and_update(
            query,
            {"$set": {"status": RequestStatus.CANCELLED.value}},
            return_document=ReturnDocument.AFTER,
        )
        return self._to_model(doc)

    def list_by_email(self, email: str) -> List[MealRequest]:
        """Get a requester's meal requests

        Args:
            email: Requester email

        Returns:
            Requests ordered newest first by requestedAt
        """
        return self._find({"email": email}, sort=[("requestedAt", -1), ("_id", -1)])
