from typing import Any, Dict, List
import logging

from app.exceptions import NotFoundError
from domain.models import Review
from services.validation import parse_rating, require_fields

logger = logging.getLogger("dormidine.reviews")

MISSING_MEAL_TITLE = "N/A"


class ReviewService:
    """
    Review create/read/update/delete.

    Reviews are stored independently of the meal document: the meal's cached
    `rating` and `reviewsCount` are not recomputed here and may drift.
    """

    def __init__(self, review_repo, meal_repo) -> None:
        self.review_repo = review_repo
        self.meal_repo = meal_repo

    def add_review(self, meal_id: str, author: str, email: str, comment: str, rating: Any) -> str:
        require_fields(mealId=meal_id, email=email)
        review = Review(
            meal_id=meal_id,
            name=author,
            email=email,
            comment=comment or "",
            rating=parse_rating(rating),
        )
        review_id = self.review_repo.insert(review)
        logger.info("Review %s added to meal %s by %s", review_id, meal_id, email)
        return review_id

    def list_reviews_for_meal(self, meal_id: str) -> List[Review]:
        require_fields(mealId=meal_id)
        return self.review_repo.list_by_meal(meal_id)

    def list_reviews_for_user(self, email: str) -> List[Dict[str, Any]]:
        """A user's reviews, newest first, each with the title of its meal"""
        require_fields(email=email)
        reviews = self.review_repo.list_by_email(email)
        titles = self.meal_repo.get_titles(list({r.meal_id for r in reviews}))

        enriched = []
        for review in reviews:
            item = review.to_public()
            item["mealTitle"] = titles.get(review.meal_id, MISSING_MEAL_TITLE)
            enriched.append(item)
        return enriched

    def edit_review(self, review_id: str, comment: str, rating: Any) -> Dict:
        """
        Overwrite comment and rating.

        Raises:
            NotFoundError: If no review has this id
        """
        require_fields(reviewId=review_id)
        matched, modified = self.review_repo.update(
            review_id, comment or "", parse_rating(rating)
        )
        if not matched:
            raise NotFoundError(f"Review not found: {review_id}")
        return {"reviewId": review_id, "modified": bool(modified)}

    def delete_review(self, review_id: str) -> Dict:
        require_fields(reviewId=review_id)
        if not self.review_repo.delete(review_id):
            raise NotFoundError(f"Review not found: {review_id}")
        logger.info("Review %s deleted", review_id)
        return {"reviewId": review_id, "deleted": True}
