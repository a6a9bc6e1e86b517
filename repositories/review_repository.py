"""
Review Repository - Data access layer for meal reviews
"""

from typing import List, Tuple

from pymongo.collection import Collection

from domain.models import Review
from repositories.base import MongoRepository, id_filter, storage_operation

NEWEST_FIRST = [("createdAt", -1), ("_id", -1)]


class ReviewRepository(MongoRepository[Review]):
    """Repository for review data access"""

    def __init__(self, collection: Collection):
        super().__init__(collection, Review)

    def list_by_meal(self, meal_id: str) -> List[Review]:
        """Get reviews of a meal, newest first

        Args:
            meal_id: Reviewed meal id

        Returns:
            List of reviews
        """
        return self._find({"mealId": meal_id}, sort=NEWEST_FIRST)

    def list_by_email(self, email: str) -> List[Review]:
        """Get reviews written by a user, newest first"""
        return self._find({"email": email}, sort=NEWEST_FIRST)

    @storage_operation("update_review")
    def update(self, review_id: str, comment: str, rating: float) -> Tuple[int, int]:
        """Overwrite comment and rating

        Args:
            review_id: Review id
            comment: New comment text
            rating: New numeric rating

        Returns:
            (matched, modified) counts; modified is 0 when nothing changed
        """
        result = self.collection.update_one(
            id_filter(review_id), {"$set": {"comment": comment, "rating": rating}}
        )
        return result.matched_count, result.modified_count

    @storage_operation("delete_review")
    def delete(self, review_id: str) -> bool:
        """Delete a review

        Returns:
            True if a review was deleted, False if none had this id
        """
        result = self.collection.delete_one(id_filter(review_id))
        return result.deleted_count > 0
