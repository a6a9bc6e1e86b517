"""
Meal Repository - Data access layer for a meal pool (MongoDB integration)
"""

from typing import Dict, List, Optional

from pymongo import ReturnDocument
from pymongo.collection import Collection

from domain.models import Meal
from repositories.base import MongoRepository, id_filter, storage_operation


def _like_toggle_pipeline(email: str) -> List[Dict]:
    """
    Update pipeline flipping `email` in `likedBy` and recomputing `likes`.

    Membership is evaluated server-side inside a single document update, so
    concurrent toggles cannot lose each other's writes.
    """
    liked_by = {"$ifNull": ["$likedBy", []]}
    member = {"$literal": email}
    return [
        {
            "$set": {
                "likedBy": {
                    "$cond": [
                        {"$in": [member, liked_by]},
                        {"$filter": {
                            "input": liked_by,
                            "cond": {"$ne": ["$$this", member]},
                        }},
                        {"$concatArrays": [liked_by, [member]]},
                    ]
                }
            }
        },
        {"$set": {"likes": {"$size": "$likedBy"}}},
    ]


class MealRepository(MongoRepository[Meal]):
    """Repository for one meal collection (menu or upcoming)"""

    def __init__(self, collection: Collection):
        super().__init__(collection, Meal)

    def list_all(self) -> List[Meal]:
        """List every meal in the collection

        Returns:
            Meals ordered newest first by postTime
        """
        return self._find({}, sort=[("postTime", -1), ("_id", -1)])

    @storage_operation("toggle_like")
    def toggle_like(self, meal_id: str, email: str) -> Optional[Meal]:
        """Flip the user's like in a single document update

        Args:
            meal_id: Meal id (ObjectId string or legacy string id)
            email: Email of the user toggling the like

        Returns:
            Meal after the update, or None if no meal has this id
        """
        doc = self.collection.find_one_and_update(
            id_filter(meal_id),
            _like_toggle_pipeline(email),
            return_document=ReturnDocument.AFTER,
        )
        return self._to_model(doc)

    @storage_operation("add_requester_by_title")
    def add_requester_by_title(self, title: str, email: str) -> int:
        """Add email to the requester set of the meal with this title

        Args:
            title: Meal title the request was placed for
            email: Requester email

        Returns:
            Number of meals matched (0 when no meal has this title)
        """
        result = self.collection.update_one(
            {"title": title}, {"$addToSet": {"isRequestedBy": email}}
        )
        return result.matched_count

    @storage_operation("remove_requester")
    def remove_requester(self, meal_id: str, email: str) -> int:
        """Pull email from the meal's requester set

        Args:
            meal_id: Meal id stored on the request
            email: Requester email

        Returns:
            Number of meals matched (0 when the meal no longer exists)
        """
        result = self.collection.update_one(
            id_filter(meal_id), {"$pull": {"isRequestedBy": email}}
        )
        return result.matched_count

    @storage_operation("get_titles")
    def get_titles(self, meal_ids: List[str]) -> Dict[str, str]:
        """Look up titles for a batch of meals

        Args:
            meal_ids: Meal ids to resolve

        Returns:
            Mapping of meal id to title; ids of deleted meals are absent
        """
        ids = [id_filter(mid)["_id"] for mid in meal_ids]
        cursor = self.collection.find({"_id": {"$in": ids}}, {"title": 1})
        return {str(doc["_id"]): doc.get("title", "") for doc in cursor}
