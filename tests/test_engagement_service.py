"""
Tests for EngagementService: like toggles and meal requests.

Covers:
- Like/unlike branching and the likes == len(likedBy) invariant
- Independent meal pools (menu vs upcoming)
- Concurrent toggles from many sessions
- Meal request submission and the cancel-once lifecycle
- Best-effort secondary writes on the meal's requester set
"""

from concurrent.futures import ThreadPoolExecutor
from unittest.mock import patch

import pytest

from test_fixtures import repos, gateway, services, seed_meal, unique_email
from app.exceptions import NotFoundError, ServiceValidationError, StorageError
from domain.enums import MealPool, RequestStatus


# =============================================================================
# LIKE TOGGLE TESTS
# =============================================================================


def test_like_then_unlike_scenario(repos, services):
    """
    User a@x.com likes M1 (0 -> 1, {a@x.com}) then likes again (1 -> 0, {}).
    """
    meal_id = seed_meal(repos, title="M1")

    first = services.engagement.toggle_like(meal_id, "a@x.com")
    assert first == {"liked": True, "likes": 1}
    meal = repos.meals[MealPool.MEALS].get_by_id(meal_id)
    assert meal.liked_by == ["a@x.com"]

    second = services.engagement.toggle_like(meal_id, "a@x.com")
    assert second == {"liked": False, "likes": 0}
    meal = repos.meals[MealPool.MEALS].get_by_id(meal_id)
    assert meal.liked_by == []
    assert meal.likes == 0


def test_double_toggle_restores_original_state(repos, services):
    meal_id = seed_meal(repos)
    for email in ("x@dorm.edu", "y@dorm.edu"):
        services.engagement.toggle_like(meal_id, email)
    before = repos.meals[MealPool.MEALS].get_by_id(meal_id)

    services.engagement.toggle_like(meal_id, "z@dorm.edu")
    services.engagement.toggle_like(meal_id, "z@dorm.edu")

    after = repos.meals[MealPool.MEALS].get_by_id(meal_id)
    assert sorted(after.liked_by) == sorted(before.liked_by)
    assert after.likes == before.likes == 2


def test_like_count_matches_liker_set_after_every_toggle(repos, services):
    meal_id = seed_meal(repos)
    sequence = ["a@x.com", "b@x.com", "a@x.com", "c@x.com", "b@x.com", "a@x.com"]

    for email in sequence:
        services.engagement.toggle_like(meal_id, email)
        meal = repos.meals[MealPool.MEALS].get_by_id(meal_id)
        assert meal.likes == len(meal.liked_by)
        assert len(set(meal.liked_by)) == len(meal.liked_by)


def test_pools_are_independent(repos, services):
    menu_id = seed_meal(repos, MealPool.MEALS, title="Menu Pulao")
    upcoming_id = seed_meal(repos, MealPool.UPCOMING, title="Preview Pulao")

    services.engagement.toggle_like(upcoming_id, "a@x.com", MealPool.UPCOMING)

    assert repos.meals[MealPool.UPCOMING].get_by_id(upcoming_id).likes == 1
    assert repos.meals[MealPool.MEALS].get_by_id(menu_id).likes == 0

    # An upcoming meal id does not resolve in the menu pool
    with pytest.raises(NotFoundError):
        services.engagement.toggle_like(upcoming_id, "a@x.com", MealPool.MEALS)


def test_concurrent_toggles_keep_invariant(repos, services):
    """
    Many sessions toggle at once; each user toggles an odd number of times
    so every one of them must end up in the liker set.
    """
    meal_id = seed_meal(repos)
    emails = [unique_email("rush") for _ in range(20)]
    calls = [e for e in emails for _ in range(3)]

    with ThreadPoolExecutor(max_workers=8) as pool:
        list(pool.map(lambda e: services.engagement.toggle_like(meal_id, e), calls))

    meal = repos.meals[MealPool.MEALS].get_by_id(meal_id)
    assert sorted(meal.liked_by) == sorted(emails)
    assert meal.likes == 20


def test_reads_while_writing_from_other_threads(services):
    """
    Ledger and request listings run while other threads keep inserting;
    no reader may fail and every write must be visible at the end.
    """
    email = unique_email("ledger")
    rounds = 200

    def write(i):
        services.subscription.record_payment(email, 9.99, "card", "Failed", f"pi_{i}", "silver")
        services.engagement.submit_meal_request("m", "Missing Meal", email, "Writer")

    def read(_):
        services.subscription.has_paid_for(email, "silver")
        services.subscription.list_payments(email)
        services.engagement.list_requests_for_user(email)

    with ThreadPoolExecutor(max_workers=8) as pool:
        writes = [pool.submit(write, i) for i in range(rounds)]
        reads = [pool.submit(read, i) for i in range(rounds)]
        for future in writes + reads:
            future.result()

    assert len(services.subscription.list_payments(email)) == rounds
    assert len(services.engagement.list_requests_for_user(email)) == rounds


def test_toggle_like_unknown_meal(services):
    with pytest.raises(NotFoundError):
        services.engagement.toggle_like("665f1c2e9b1e8a3d4c5b6a7f", "a@x.com")


@pytest.mark.parametrize("meal_id,email", [("", "a@x.com"), ("abc", ""), (None, None)])
def test_toggle_like_missing_fields(services, meal_id, email):
    with pytest.raises(ServiceValidationError) as exc_info:
        services.engagement.toggle_like(meal_id, email)
    assert not isinstance(exc_info.value, NotFoundError)


# =============================================================================
# MEAL REQUEST TESTS
# =============================================================================


def test_request_then_cancel_scenario(repos, services):
    """
    b@y.com requests M2 then cancels: requester set no longer contains the
    email and the request is cancelled.
    """
    meal_id = seed_meal(repos, title="M2")

    request_id = services.engagement.submit_meal_request(meal_id, "M2", "b@y.com", "Bashir")
    meal = repos.meals[MealPool.MEALS].get_by_id(meal_id)
    assert meal.is_requested_by == ["b@y.com"]
    assert repos.requests.get_by_id(request_id).status == RequestStatus.PENDING.value

    result = services.engagement.cancel_meal_request(request_id)

    assert result == {"requestId": request_id, "status": "cancelled", "mealUpdated": True}
    meal = repos.meals[MealPool.MEALS].get_by_id(meal_id)
    assert "b@y.com" not in meal.is_requested_by
    assert repos.requests.get_by_id(request_id).status == RequestStatus.CANCELLED.value


def test_cancel_twice_reports_not_found(repos, services):
    meal_id = seed_meal(repos, title="Khichuri")
    request_id = services.engagement.submit_meal_request(meal_id, "Khichuri", "c@y.com", "Chaya")
    services.engagement.cancel_meal_request(request_id)

    with patch.object(
        repos.meals[MealPool.MEALS], "remove_requester", wraps=repos.meals[MealPool.MEALS].remove_requester
    ) as remove:
        with pytest.raises(NotFoundError):
            services.engagement.cancel_meal_request(request_id)
        remove.assert_not_called()


def test_cancel_unknown_request(services):
    with pytest.raises(NotFoundError):
        services.engagement.cancel_meal_request("no-such-request")


def test_submit_is_not_idempotent(repos, services):
    meal_id = seed_meal(repos, title="Fuchka")

    first = services.engagement.submit_meal_request(meal_id, "Fuchka", "d@y.com", "Dipu")
    second = services.engagement.submit_meal_request(meal_id, "Fuchka", "d@y.com", "Dipu")

    assert first != second
    assert len(services.engagement.list_requests_for_user("d@y.com")) == 2
    # the requester set is a set: one entry despite two requests
    assert repos.meals[MealPool.MEALS].get_by_id(meal_id).is_requested_by == ["d@y.com"]


def test_submit_snapshots_counts(repos, services):
    meal_id = seed_meal(repos, title="Halim")
    request_id = services.engagement.submit_meal_request(
        meal_id, "Halim", "e@y.com", "Emon", likes=12, reviews=4
    )

    services.engagement.toggle_like(meal_id, "someone@y.com")

    request = repos.requests.get_by_id(request_id)
    assert (request.likes, request.reviews) == (12, 4)


@pytest.mark.parametrize(
    "title,email,name",
    [("", "f@y.com", "Farhan"), ("Halim", "", "Farhan"), ("Halim", "f@y.com", None)],
)
def test_submit_missing_fields(services, title, email, name):
    with pytest.raises(ServiceValidationError):
        services.engagement.submit_meal_request("id", title, email, name)


def test_submit_survives_requester_set_failure(repos, services):
    meal_id = seed_meal(repos, title="Tehari")

    with patch.object(
        repos.meals[MealPool.MEALS], "add_requester_by_title", side_effect=StorageError()
    ):
        request_id = services.engagement.submit_meal_request(meal_id, "Tehari", "g@y.com", "Gazi")

    assert repos.requests.get_by_id(request_id).status == RequestStatus.PENDING.value


def test_submit_for_unknown_title_still_records_request(repos, services):
    request_id = services.engagement.submit_meal_request(
        "missing", "Nonexistent Dish", "h@y.com", "Hasan"
    )
    assert repos.requests.get_by_id(request_id) is not None


def test_cancel_when_meal_deleted_reports_meal_not_updated(repos, services):
    request_id = services.engagement.submit_meal_request(
        "gone-meal-id", "Ghost Curry", "i@y.com", "Ila"
    )

    result = services.engagement.cancel_meal_request(request_id)

    assert result["status"] == "cancelled"
    assert result["mealUpdated"] is False


def test_list_requests_newest_first(repos, services):
    meal_id = seed_meal(repos, title="Bhuna")
    ids = [
        services.engagement.submit_meal_request(meal_id, "Bhuna", "j@y.com", "Jui")
        for _ in range(3)
    ]

    listed = services.engagement.list_requests_for_user("j@y.com")

    assert [r.id for r in listed] == list(reversed(ids))
