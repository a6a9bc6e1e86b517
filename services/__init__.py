"""Services package - Business logic layer"""

from services.engagement_service import EngagementService
from services.subscription_service import SubscriptionService
from services.review_service import ReviewService
from services.user_service import UserService
from services.meal_service import MealService

__all__ = [
    "EngagementService",
    "SubscriptionService",
    "ReviewService",
    "UserService",
    "MealService",
]
