"""
Tests for UserService and MealService.

Covers:
- First-sign-in registration and duplicate handling
- Role lookup and one-way admin promotion
- Meal creation with ingredient normalization and admin attribution
- Catalog reads per meal pool
"""

from concurrent.futures import ThreadPoolExecutor
from unittest.mock import patch

import pytest

from test_fixtures import repos, gateway, services, seed_meal, seed_user, unique_email
from app.exceptions import ConflictError, NotFoundError, ServiceValidationError, StorageError
from domain.enums import MealPool, UserRole
from domain.schemas import MealCreate


# =============================================================================
# USER SERVICE TESTS
# =============================================================================


def test_save_user_creates_then_returns_existing(services):
    email = unique_email()

    user, created = services.users.save_user(email, "Anika")
    assert created is True
    assert user.id is not None
    assert user.role == UserRole.USER.value
    assert user.package == "free"

    again, created = services.users.save_user(email, "Someone Else")
    assert created is False
    assert again.id == user.id
    assert again.name == "Anika"


def test_save_user_lost_insert_race_returns_existing(repos, services):
    """
    Verifies:
    - A sign-in that misses the lookup but loses the insert to another
      sign-in gets the stored user back instead of a conflict
    """
    email = unique_email()
    winner = seed_user(repos, email=email, name="First Tab")
    lookups = iter([None, repos.users.get_by_email(email)])

    with patch.object(repos.users, "get_by_email", side_effect=lambda _: next(lookups)):
        user, created = services.users.save_user(email, "Second Tab")

    assert created is False
    assert user.id == winner.id
    assert user.name == "First Tab"


def test_concurrent_first_sign_ins_create_one_user(repos, services):
    email = unique_email()

    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(lambda _: services.users.save_user(email, "Anika"), range(16)))

    assert sum(created for _, created in results) == 1
    assert len({user.id for user, _ in results}) == 1


def test_save_user_requires_fields(services):
    with pytest.raises(ServiceValidationError):
        services.users.save_user("", "Anika")


def test_repository_rejects_duplicate_email(repos):
    user = seed_user(repos)
    with pytest.raises(ConflictError):
        seed_user(repos, email=user.email)


def test_get_user_and_role(repos, services):
    user = seed_user(repos)

    assert services.users.get_user(user.email).name == user.name
    assert services.users.get_role(user.email) == "user"

    with pytest.raises(NotFoundError):
        services.users.get_user(unique_email())


def test_promote_to_admin(repos, services):
    user = seed_user(repos)

    first = services.users.promote_to_admin(user.email)
    second = services.users.promote_to_admin(user.email)

    assert first == {"email": user.email, "role": "admin", "modified": True}
    assert second["modified"] is False
    assert services.users.get_role(user.email) == "admin"


def test_promote_unknown_user(services):
    with pytest.raises(NotFoundError):
        services.users.promote_to_admin(unique_email())


# =============================================================================
# MEAL SERVICE TESTS
# =============================================================================


def test_add_meal_normalizes_ingredients(repos, services):
    payload = MealCreate(
        title="Shorshe Ilish",
        category="dinner",
        ingredients=[" hilsa FISH", "mustard", "", "  "],
        price=12,
    )

    meal_id = services.meals.add_meal(payload)

    meal = repos.meals[MealPool.MEALS].get_by_id(meal_id)
    assert meal.ingredients == ["Hilsa fish", "Mustard"]
    assert meal.likes == 0
    assert meal.liked_by == []
    assert meal.is_requested_by == []
    assert meal.added_by is None


def test_add_meal_by_admin_bumps_counter(repos, services):
    admin = seed_user(repos, role=UserRole.ADMIN)
    payload = MealCreate(title="Beef Tehari", admin_email=admin.email)

    meal_id = services.meals.add_meal(payload, pool=MealPool.UPCOMING)

    meal = repos.meals[MealPool.UPCOMING].get_by_id(meal_id)
    assert meal.added_by == admin.email
    assert repos.meals[MealPool.MEALS].get_by_id(meal_id) is None
    assert repos.users.get_by_email(admin.email).meals_added == 1


def test_add_meal_rejects_non_admin(repos, services):
    student = seed_user(repos)
    with pytest.raises(ServiceValidationError):
        services.meals.add_meal(MealCreate(title="Pitha"), admin_email=student.email)


def test_add_meal_survives_counter_failure(repos, services):
    admin = seed_user(repos, role=UserRole.ADMIN)

    with patch.object(repos.users, "increment_meals_added", side_effect=StorageError()):
        meal_id = services.meals.add_meal(MealCreate(title="Pitha"), admin_email=admin.email)

    assert repos.meals[MealPool.MEALS].get_by_id(meal_id).title == "Pitha"


def test_list_and_get_meals(repos, services):
    first = seed_meal(repos, title="Paratha")
    second = seed_meal(repos, title="Nihari")
    seed_meal(repos, MealPool.UPCOMING, title="Kacchi")

    listed = services.meals.list_meals()

    assert [m.id for m in listed] == [second, first]
    assert services.meals.get_meal(first).title == "Paratha"
    assert len(services.meals.list_meals(MealPool.UPCOMING)) == 1

    with pytest.raises(NotFoundError):
        services.meals.get_meal("not-a-meal")
