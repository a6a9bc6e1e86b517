"""
Domain schemas package - Pydantic models for request/response validation.
"""

from domain.schemas.base import CamelModel, InsertedResponse
from domain.schemas.engagement_schemas import (
    LikeToggleRequest,
    LikeToggleResponse,
    MealRequestCreate,
    MealRequestResponse,
    CancelRequestResponse,
)
from domain.schemas.subscription_schemas import (
    PaymentIntentRequest,
    PaymentIntentResponse,
    PaymentCreate,
    PaymentResponse,
    AlreadyPaidResponse,
    PackageUpgradeRequest,
    PackageUpgradeResponse,
    PurchaseResponse,
)
from domain.schemas.review_schemas import (
    ReviewCreate,
    ReviewUpdate,
    ReviewResponse,
    UserReviewResponse,
    ReviewUpdateResponse,
    ReviewDeleteResponse,
)
from domain.schemas.user_schemas import (
    SaveUserRequest,
    SaveUserResponse,
    UserResponse,
    RoleResponse,
    MakeAdminRequest,
    MakeAdminResponse,
)
from domain.schemas.meal_schemas import MealCreate, MealResponse

__all__ = [
    "CamelModel",
    "InsertedResponse",
    # Engagement schemas
    "LikeToggleRequest",
    "LikeToggleResponse",
    "MealRequestCreate",
    "MealRequestResponse",
    "CancelRequestResponse",
    # Subscription schemas
    "PaymentIntentRequest",
    "PaymentIntentResponse",
    "PaymentCreate",
    "PaymentResponse",
    "AlreadyPaidResponse",
    "PackageUpgradeRequest",
    "PackageUpgradeResponse",
    "PurchaseResponse",
    # Review schemas
    "ReviewCreate",
    "ReviewUpdate",
    "ReviewResponse",
    "UserReviewResponse",
    "ReviewUpdateResponse",
    "ReviewDeleteResponse",
    # User schemas
    "SaveUserRequest",
    "SaveUserResponse",
    "UserResponse",
    "RoleResponse",
    "MakeAdminRequest",
    "MakeAdminResponse",
    # Meal schemas
    "MealCreate",
    "MealResponse",
]
