from datetime import datetime
from typing import Any, Optional

from pydantic import Field

from domain.schemas.base import CamelModel, IdentifiedModel


class ReviewCreate(CamelModel):
    """Schema for a new review. `rating` is parsed leniently by the service."""

    meal_id: Optional[str] = None
    name: Optional[str] = None
    email: Optional[str] = None
    comment: str = ""
    rating: Optional[Any] = None


class ReviewUpdate(CamelModel):
    comment: str = ""
    rating: Optional[Any] = None


class ReviewResponse(IdentifiedModel):
    meal_id: str
    name: Optional[str] = None
    email: str
    comment: str
    rating: float
    created_at: datetime


class UserReviewResponse(ReviewResponse):
    """Review joined with the title of the meal it refers to"""

    meal_title: str = Field(..., description="'N/A' when the meal no longer exists")


class ReviewUpdateResponse(CamelModel):
    review_id: str
    modified: bool


class ReviewDeleteResponse(CamelModel):
    review_id: str
    deleted: bool
