from datetime import datetime, timezone

from pydantic import Field

from domain.enums import RequestStatus
from domain.models.base import DocumentModel


class MealRequest(DocumentModel):
    """
    A user's request for a meal.

    `likes` and `reviews` are a snapshot taken when the request was placed
    and are not kept in sync with the meal afterwards.
    """

    meal_id: str
    title: str
    email: str
    name: str
    status: RequestStatus = RequestStatus.PENDING
    likes: int = 0
    reviews: int = 0
    requested_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
