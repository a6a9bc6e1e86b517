"""
Repositories package - Data access layer.
"""

from repositories.base import MongoRepository, id_filter, storage_operation
from repositories.user_repository import UserRepository
from repositories.meal_repository import MealRepository
from repositories.meal_request_repository import MealRequestRepository
from repositories.review_repository import ReviewRepository
from repositories.payment_repository import PaymentRepository
from repositories.in_memory import (
    InMemoryUserRepository,
    InMemoryMealRepository,
    InMemoryMealRequestRepository,
    InMemoryReviewRepository,
    InMemoryPaymentRepository,
)
from repositories.factory import Repositories, create_repositories

__all__ = [
    "MongoRepository",
    "id_filter",
    "storage_operation",
    "UserRepository",
    "MealRepository",
    "MealRequestRepository",
    "ReviewRepository",
    "PaymentRepository",
    "InMemoryUserRepository",
    "InMemoryMealRepository",
    "InMemoryMealRequestRepository",
    "InMemoryReviewRepository",
    "InMemoryPaymentRepository",
    "Repositories",
    "create_repositories",
]
