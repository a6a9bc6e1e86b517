"""Repository factory for the persistence layer.

Builds the full set of repositories for the configured backend:
- mongodb: collections from a connected MongoStore (production persistence)
- inmemory: dictionary-backed repositories (tests, local runs without MongoDB)

Usage:
    store = MongoStore(settings.mongo_uri, settings.mongo_db_name).connect()
    repos = create_repositories(RepositoryBackend.MONGODB, store)
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from adapters import mongo_adapter
from adapters.mongo_adapter import MongoStore
from app.config import RepositoryBackend
from domain.enums import MealPool
from repositories.in_memory import (
    InMemoryMealRepository,
    InMemoryMealRequestRepository,
    InMemoryPaymentRepository,
    InMemoryReviewRepository,
    InMemoryUserRepository,
)
from repositories.meal_repository import MealRepository
from repositories.meal_request_repository import MealRequestRepository
from repositories.payment_repository import PaymentRepository
from repositories.review_repository import ReviewRepository
from repositories.user_repository import UserRepository


@dataclass
class Repositories:
    """All repositories the services are wired with"""

    users: Any
    meals: Dict[MealPool, Any]
    requests: Any
    reviews: Any
    payments: Any


def create_repositories(
    backend: RepositoryBackend, store: Optional[MongoStore] = None
) -> Repositories:
    """Create repositories for the given backend.

    Raises:
        ValueError: If mongodb is selected without a store
    """
    if backend == RepositoryBackend.INMEMORY:
        return Repositories(
            users=InMemoryUserRepository(),
            meals={
                MealPool.MEALS: InMemoryMealRepository(),
                MealPool.UPCOMING: InMemoryMealRepository(),
            },
            requests=InMemoryMealRequestRepository(),
            reviews=InMemoryReviewRepository(),
            payments=InMemoryPaymentRepository(),
        )

    if store is None:
        raise ValueError("A MongoStore is required for the mongodb backend")

    return Repositories(
        users=UserRepository(store.collection(mongo_adapter.USERS)),
        meals={
            MealPool.MEALS: MealRepository(store.collection(mongo_adapter.MEALS)),
            MealPool.UPCOMING: MealRepository(
                store.collection(mongo_adapter.UPCOMING_MEALS)
            ),
        },
        requests=MealRequestRepository(store.collection(mongo_adapter.MEAL_REQUESTS)),
        reviews=ReviewRepository(store.collection(mongo_adapter.REVIEWS)),
        payments=PaymentRepository(store.collection(mongo_adapter.PAYMENTS)),
    )
