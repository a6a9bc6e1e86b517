"""
Domain models package - Pydantic records stored as Mongo documents.
"""

from domain.models.base import DocumentModel, new_id
from domain.models.user import User
from domain.models.meal import Meal, normalize_ingredient
from domain.models.meal_request import MealRequest
from domain.models.review import Review
from domain.models.payment import Payment

__all__ = [
    "DocumentModel",
    "new_id",
    "User",
    "Meal",
    "normalize_ingredient",
    "MealRequest",
    "Review",
    "Payment",
]
