"""
API dependencies for dependency injection.

Services are built once by the application lifespan and stored on
`app.state.services`; routes obtain them through the getters below, which
tests can replace with `app.dependency_overrides`.
"""

from dataclasses import dataclass

from fastapi import Request

from adapters.payment_gateway import PaymentGateway
from domain.enums import MealPool
from repositories.factory import Repositories
from services import (
    EngagementService,
    MealService,
    ReviewService,
    SubscriptionService,
    UserService,
)


@dataclass
class Services:
    engagement: EngagementService
    subscription: SubscriptionService
    reviews: ReviewService
    users: UserService
    meals: MealService


def build_services(repos: Repositories, gateway: PaymentGateway, currency: str = "usd") -> Services:
    """Wire every service with its repositories and the payment gateway"""
    return Services(
        engagement=EngagementService(repos.meals, repos.requests),
        subscription=SubscriptionService(repos.users, repos.payments, gateway, currency),
        reviews=ReviewService(repos.reviews, repos.meals[MealPool.MEALS]),
        users=UserService(repos.users),
        meals=MealService(repos.meals, repos.users),
    )


def get_services(request: Request) -> Services:
    return request.app.state.services


def get_engagement_service(request: Request) -> EngagementService:
    return get_services(request).engagement


def get_subscription_service(request: Request) -> SubscriptionService:
    return get_services(request).subscription


def get_review_service(request: Request) -> ReviewService:
    return get_services(request).reviews


def get_user_service(request: Request) -> UserService:
    return get_services(request).users


def get_meal_service(request: Request) -> MealService:
    return get_services(request).meals
