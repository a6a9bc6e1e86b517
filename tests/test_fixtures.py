"""
Shared test fixtures and utilities for DormiDine test suite.

This module contains fake collaborators, record factories, and test client
setup that are reused across multiple test files.
"""

import uuid
from typing import List, Optional, Tuple

import pytest
from fastapi.testclient import TestClient

from app.config import RepositoryBackend
from app.exceptions import GatewayError
from api.dependencies import Services, build_services
from domain.enums import MealPool, UserRole
from domain.models import Meal, User
from repositories.factory import Repositories, create_repositories


# Helper function to generate unique emails
def unique_email(prefix: str = "test") -> str:
    """Generate unique email address using UUID to avoid conflicts"""
    return f"{prefix}-{uuid.uuid4()}@example.com"


class FakeGateway:
    """
    Payment gateway double recording every intent it is asked to open.

    Set `fail=True` to make the next calls raise GatewayError.
    """

    def __init__(self, fail: bool = False):
        self.fail = fail
        self.calls: List[Tuple[int, str]] = []

    def create_payment_intent(self, amount: int, currency: str) -> str:
        self.calls.append((amount, currency))
        if self.fail:
            raise GatewayError("Payment intent failed", status_code=402)
        return f"pi_{len(self.calls)}_secret_{amount}"


def make_meal(
    title: str = "Chicken Biryani",
    category: str = "lunch",
    ingredients: Optional[List[str]] = None,
    price: float = 7.5,
    **overrides,
) -> Meal:
    """
    Create a realistic dormitory meal with empty engagement state.

    Example:
        >>> meal = make_meal(title="Beef Khichuri", ingredients=["rice", "BEEF"])
        >>> meal.ingredients
        ['Rice', 'Beef']
    """
    return Meal(
        title=title,
        category=category,
        ingredients=ingredients if ingredients is not None else ["basmati rice", "chicken"],
        description="Slow-cooked and served with raita",
        price=price,
        distributor_name="Hall Kitchen",
        distributor_email="kitchen@dorm.edu",
        **overrides,
    )


def make_user(email: Optional[str] = None, name: str = "Nusrat Jahan", role: UserRole = UserRole.USER) -> User:
    return User(email=email or unique_email("student"), name=name, role=role)


def seed_meal(repos: Repositories, pool: MealPool = MealPool.MEALS, **kwargs) -> str:
    """Insert a meal into the given pool and return its id"""
    return repos.meals[pool].insert(make_meal(**kwargs))


def seed_user(repos: Repositories, **kwargs) -> User:
    user = make_user(**kwargs)
    user.id = repos.users.create_user(user)
    return user


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def repos() -> Repositories:
    """Fresh in-memory repositories for each test"""
    return create_repositories(RepositoryBackend.INMEMORY)


@pytest.fixture
def gateway() -> FakeGateway:
    return FakeGateway()


@pytest.fixture
def services(repos: Repositories, gateway: FakeGateway) -> Services:
    return build_services(repos, gateway)


@pytest.fixture
def client(services: Services):
    """
    TestClient running the real application lifespan, with services swapped
    for ones wired to the per-test in-memory repositories and fake gateway.
    """
    from main import app

    with TestClient(app) as test_client:
        app.state.services = services
        yield test_client
