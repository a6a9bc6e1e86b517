from typing import Dict, List
import logging

from app.exceptions import NotFoundError, StorageError
from domain.enums import MealPool, RequestStatus
from domain.models import MealRequest
from services.validation import require_fields

logger = logging.getLogger("dormidine.engagement")


class EngagementService:
    """
    Likes and meal requests per (user, meal) pair.

    Like toggles are a single atomic conditional update in the meal pool's
    repository. Meal requests touch two documents without a transaction: the
    request record is the primary write, the meal's requester set is a
    best-effort secondary write whose failure is logged and tolerated.
    """

    def __init__(self, meal_repos: Dict[MealPool, object], request_repo) -> None:
        self.meal_repos = meal_repos
        self.request_repo = request_repo

    def _meals(self, pool: MealPool):
        return self.meal_repos[MealPool(pool)]

    def toggle_like(self, meal_id: str, user_email: str, pool: MealPool = MealPool.MEALS) -> Dict:
        """
        Like the meal if the user has not liked it yet, otherwise unlike it.

        Returns:
            {"liked": bool, "likes": int} describing the branch taken

        Raises:
            ServiceValidationError: If meal id or email is missing
            NotFoundError: If the meal does not exist in the pool
        """
        require_fields(mealId=meal_id, mealEmail=user_email)

        meal = self._meals(pool).toggle_like(meal_id, user_email)
        if meal is None:
            raise NotFoundError(f"Meal not found: {meal_id}")

        liked = user_email in meal.liked_by
        logger.info(
            "Meal %s %s by %s (pool=%s, likes=%d)",
            meal_id,
            "liked" if liked else "unliked",
            user_email,
            MealPool(pool).value,
            meal.likes,
        )
        return {"liked": liked, "likes": meal.likes}

    def submit_meal_request(
        self,
        meal_id: str,
        title: str,
        requester_email: str,
        requester_name: str,
        likes: int = 0,
        reviews: int = 0,
    ) -> str:
        """
        Record a pending request and add the requester to the meal's requester set.

        Calling twice creates two request records. The requester set is
        updated by meal title.

        Returns:
            Id of the new request
        """
        require_fields(title=title, email=requester_email, name=requester_name)

        request = MealRequest(
            meal_id=meal_id or "",
            title=title,
            email=requester_email,
            name=requester_name,
            likes=likes,
            reviews=reviews,
        )
        request_id = self.request_repo.insert(request)
        logger.info("Meal request %s created for %s by %s", request_id, title, requester_email)

        try:
            matched = self._meals(MealPool.MEALS).add_requester_by_title(title, requester_email)
            if not matched:
                logger.warning(
                    "Meal request %s: no meal titled %r to mark as requested", request_id, title
                )
        except StorageError:
            logger.warning(
                "Meal request %s stored but requester set update failed", request_id
            )
        return request_id

    def cancel_meal_request(self, request_id: str) -> Dict:
        """
        Cancel a pending request and drop the requester from the meal's set.

        Raises:
            ServiceValidationError: If request id is missing
            NotFoundError: If no pending request matches (unknown or already cancelled)
        """
        require_fields(requestId=request_id)

        request = self.request_repo.cancel(request_id)
        if request is None:
            raise NotFoundError(f"No pending meal request: {request_id}")

        meal_updated = False
        try:
            matched = self._meals(MealPool.MEALS).remove_requester(request.meal_id, request.email)
            meal_updated = matched > 0
            if not meal_updated:
                logger.warning(
                    "Request %s cancelled but meal %s was not found", request_id, request.meal_id
                )
        except StorageError:
            logger.warning(
                "Request %s cancelled but requester set update failed", request_id
            )

        logger.info("Meal request %s cancelled by %s", request_id, request.email)
        return {
            "requestId": request_id,
            "status": RequestStatus.CANCELLED.value,
            "mealUpdated": meal_updated,
        }

    def list_requests_for_user(self, email: str) -> List[MealRequest]:
        """All requests placed by a user, newest first"""
        require_fields(email=email)
        return self.request_repo.list_by_email(email)
